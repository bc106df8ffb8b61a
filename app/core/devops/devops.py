"""DevOps team management operations."""
from __future__ import annotations
from typing import List

from .base import ResourceService
from .client import DevOpsClient
from .models import DevOps


class DevOpsService(ResourceService[DevOps]):
    """Service for managing DevOps teams (one developer + one operations team)."""

    collection = "devops"
    shape = DevOps


def list_devops(client: DevOpsClient) -> List[DevOps]:
    """Retrieve all DevOps teams."""
    return DevOpsService(client).list()


def get_devops(client: DevOpsClient, devops_id: str) -> DevOps:
    """Retrieve a specific DevOps team by ID."""
    return DevOpsService(client).get(devops_id)


def create_devops(client: DevOpsClient, devops: DevOps) -> DevOps:
    """Create a new DevOps team."""
    return DevOpsService(client).create(devops)


def update_devops(client: DevOpsClient, devops_id: str, devops: DevOps) -> DevOps:
    """Replace an existing DevOps team."""
    return DevOpsService(client).update(devops_id, devops)


def delete_devops(client: DevOpsClient, devops_id: str) -> None:
    """Delete a DevOps team."""
    DevOpsService(client).delete(devops_id)
