"""Settings loader with explicit-value and environment variable resolution."""
from __future__ import annotations
import math
import os
import sys
from dataclasses import dataclass
from typing import Optional

from app.core.devops.client import ENDPOINT_ENV_VAR, REQUEST_TIMEOUT
from app.core.devops.exceptions import ConfigurationError

TIMEOUT_ENV_VAR = "DEVOPS_TIMEOUT"
ITEM_LOOKUP_ENV_VAR = "DEVOPS_ENGINEER_ITEM_LOOKUP"


@dataclass(frozen=True)
class DevOpsConfig:
    """Client configuration container. Read-only once loaded."""
    endpoint: str
    timeout: float = REQUEST_TIMEOUT
    # Whether the API serves GET /engineers/{id}; otherwise list + scan
    engineer_item_lookup: bool = True


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{TIMEOUT_ENV_VAR} must be a number of seconds, got '{raw}'") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV_VAR} must be a positive finite number, got '{raw}'")
    return timeout


def load_settings(
    endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
    engineer_item_lookup: Optional[bool] = None,
    verbose: bool = False,
) -> DevOpsConfig:
    """Load client settings.

    Priority for every value:
    1. Explicit argument (e.g. from the declarative configuration)
    2. Environment variable
    3. Built-in default (endpoint has none)

    Raises:
        ConfigurationError: If the endpoint is missing or a value is invalid
    """
    if endpoint is None:
        endpoint = os.environ.get(ENDPOINT_ENV_VAR, "")
    resolved_endpoint = endpoint.strip()
    if not resolved_endpoint:
        raise ConfigurationError(
            "Missing DevOps API endpoint. Set the endpoint value in the configuration "
            f"or use the {ENDPOINT_ENV_VAR} environment variable. "
            "If either is already set, ensure the value is not empty."
        )

    if timeout is None:
        raw_timeout = os.environ.get(TIMEOUT_ENV_VAR, "").strip()
        timeout = _parse_timeout(raw_timeout) if raw_timeout else REQUEST_TIMEOUT
    elif not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"Timeout must be a positive finite number, got {timeout!r}")

    if engineer_item_lookup is None:
        engineer_item_lookup = os.environ.get(ITEM_LOOKUP_ENV_VAR, "true").strip().lower() == "true"

    if verbose:
        lookup_label = "item" if engineer_item_lookup else "list-scan"
        print(
            f"[settings] endpoint={resolved_endpoint}; timeout={timeout}s; engineer_lookup={lookup_label}",
            file=sys.stderr,
        )

    return DevOpsConfig(
        endpoint=resolved_endpoint,
        timeout=timeout,
        engineer_item_lookup=engineer_item_lookup,
    )
