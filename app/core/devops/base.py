"""Shared CRUD surface for DevOps API collections."""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Generic, List, Type, TypeVar

from . import codec
from .client import DevOpsClient
from .exceptions import InvalidRequestError
from .models import DevOps, Developer, Engineer, Operations

logger = logging.getLogger(__name__)

E = TypeVar("E", Engineer, Developer, Operations, DevOps)


class ResourceService(Generic[E]):
    """CRUD operations for one collection of the DevOps API.

    Subclasses set ``collection`` (URL segment) and ``shape`` (entity class).
    Paths are always ``/{collection}`` or ``/{collection}/{id}``; ids are
    opaque and inserted verbatim.
    """

    collection: str = ""
    shape: Type[E]

    def __init__(self, client: DevOpsClient):
        """Initialize service.

        Args:
            client: Configured DevOps client
        """
        self.client = client

    @property
    def collection_path(self) -> str:
        return f"/{self.collection}"

    def item_path(self, entity_id: str) -> str:
        if not entity_id:
            raise InvalidRequestError(f"{self.shape.__name__} id is required")
        return f"/{self.collection}/{entity_id}"

    def list(self) -> List[E]:
        """Return every entity in the collection, in server order."""
        body = self.client.get(self.collection_path)
        return codec.decode_list(body, self.shape)

    def get(self, entity_id: str) -> E:
        """Return one entity by id.

        Raises:
            NotFoundError: If the id does not exist
        """
        body = self.client.get(self.item_path(entity_id))
        return codec.decode(body, self.shape)

    def create(self, entity: E) -> E:
        """Create an entity and return the server's representation.

        Any id on ``entity`` is ignored; the server assigns one.
        """
        payload = codec.encode(entity, include_id=False)
        body = self.client.post(self.collection_path, payload)
        created = codec.decode(body, self.shape)
        logger.info("Created %s id=%s", self.shape.__name__, created.id)
        return created

    def update(self, entity_id: str, entity: E) -> E:
        """Replace an entity with ``entity`` and return the new server state.

        This is a full replace, not a patch: every field of ``entity`` is
        sent, including nested engineer lists.
        """
        path = self.item_path(entity_id)
        payload = codec.encode(replace(entity, id=entity_id))
        body = self.client.put(path, payload)
        updated = codec.decode(body, self.shape)
        logger.info("Updated %s id=%s", self.shape.__name__, updated.id)
        return updated

    def delete(self, entity_id: str) -> None:
        """Delete an entity. Errors (including 404) propagate to the caller."""
        self.client.delete(self.item_path(entity_id))
        logger.info("Deleted %s id=%s", self.shape.__name__, entity_id)
