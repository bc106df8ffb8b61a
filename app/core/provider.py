"""Configured client handle shared by resource handlers and data sources.

The host engine configures the provider once and hands the resulting
``ProviderData`` to every handler constructor; handlers never receive an
untyped object they would have to type-check.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from app.config.settings import DevOpsConfig, load_settings
from app.core.devops import (
    DevOpsClient,
    DeveloperService,
    DevOpsService,
    EngineerService,
    OperationsService,
)

PROVIDER_TYPE_NAME = "devops-bootcamp"


@dataclass(frozen=True)
class ProviderData:
    """Client plus one service per resource kind."""
    config: DevOpsConfig
    client: DevOpsClient
    engineers: EngineerService
    developers: DeveloperService
    operations: OperationsService
    devops: DevOpsService


def configure_provider(
    endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
    engineer_item_lookup: Optional[bool] = None,
) -> ProviderData:
    """Build the configured handle from explicit values or the environment.

    Raises:
        ConfigurationError: If the endpoint is missing or invalid
    """
    config = load_settings(endpoint=endpoint, timeout=timeout, engineer_item_lookup=engineer_item_lookup)
    return provider_from_config(config)


def provider_from_config(config: DevOpsConfig) -> ProviderData:
    client = DevOpsClient(config.endpoint, timeout=config.timeout)
    return ProviderData(
        config=config,
        client=client,
        engineers=EngineerService(client, item_lookup=config.engineer_item_lookup),
        developers=DeveloperService(client),
        operations=OperationsService(client),
        devops=DevOpsService(client),
    )
