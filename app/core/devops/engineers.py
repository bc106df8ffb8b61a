"""Engineer management operations."""
from __future__ import annotations
import logging
from typing import List

from .base import ResourceService
from .client import DevOpsClient
from .exceptions import NotFoundError
from .models import Engineer

logger = logging.getLogger(__name__)


class EngineerService(ResourceService[Engineer]):
    """Service for managing engineers.

    Some deployments of the DevOps API do not expose ``GET /engineers/{id}``.
    With ``item_lookup=False`` the service reads the whole collection and scans
    it for the id instead. That lookup is O(n) in the collection size and is
    deliberately not backed by a cache.
    """

    collection = "engineers"
    shape = Engineer

    def __init__(self, client: DevOpsClient, item_lookup: bool = True):
        """Initialize engineer service.

        Args:
            client: Configured DevOps client
            item_lookup: Whether the API serves GET /engineers/{id}
        """
        super().__init__(client)
        self.item_lookup = item_lookup

    def get(self, entity_id: str) -> Engineer:
        """Return the engineer with the given id.

        Raises:
            NotFoundError: If no engineer has that id
        """
        if self.item_lookup:
            return super().get(entity_id)

        path = self.item_path(entity_id)
        for engineer in self.list():
            if engineer.id == entity_id:
                return engineer
        logger.debug("Engineer %s not found in collection scan", entity_id)
        raise NotFoundError(404, f"engineer with ID {entity_id} not found", self.client.url(path))


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# ─────────────────────────────────────────────────────────────────────────────
def list_engineers(client: DevOpsClient) -> List[Engineer]:
    """Retrieve all engineers."""
    return EngineerService(client).list()


def get_engineer(client: DevOpsClient, engineer_id: str, item_lookup: bool = True) -> Engineer:
    """Retrieve a specific engineer by ID."""
    return EngineerService(client, item_lookup=item_lookup).get(engineer_id)


def create_engineer(client: DevOpsClient, engineer: Engineer) -> Engineer:
    """Create a new engineer."""
    return EngineerService(client).create(engineer)


def update_engineer(client: DevOpsClient, engineer_id: str, engineer: Engineer) -> Engineer:
    """Replace an existing engineer."""
    return EngineerService(client).update(engineer_id, engineer)


def delete_engineer(client: DevOpsClient, engineer_id: str) -> None:
    """Delete an engineer."""
    EngineerService(client).delete(engineer_id)
