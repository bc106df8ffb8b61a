"""Operations team management operations."""
from __future__ import annotations
from typing import List

from .base import ResourceService
from .client import DevOpsClient
from .models import Operations


class OperationsService(ResourceService[Operations]):
    """Service for managing operations teams."""

    collection = "operations"
    shape = Operations


def list_operations(client: DevOpsClient) -> List[Operations]:
    """Retrieve all operations teams."""
    return OperationsService(client).list()


def get_operation(client: DevOpsClient, operation_id: str) -> Operations:
    """Retrieve a specific operations team by ID."""
    return OperationsService(client).get(operation_id)


def create_operation(client: DevOpsClient, operation: Operations) -> Operations:
    """Create a new operations team."""
    return OperationsService(client).create(operation)


def update_operation(client: DevOpsClient, operation_id: str, operation: Operations) -> Operations:
    """Replace an existing operations team."""
    return OperationsService(client).update(operation_id, operation)


def delete_operation(client: DevOpsClient, operation_id: str) -> None:
    """Delete an operations team."""
    OperationsService(client).delete(operation_id)
