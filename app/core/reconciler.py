"""Resource handlers and data sources driven by a declarative engine.

A handler wraps one service and exposes the lifecycle the engine runs
(create, read, update, delete, import). The guarantees it gives callers:

- create -> read: reading the returned id yields the same entity, so a later
  read can be diffed against state (see ``drift``).
- update is a full replace: the complete desired entity is sent on every call,
  nested engineer lists included. Nothing is merged.
- import is a plain read of an existing id; there is no import call on the wire.
- delete -> read: ``read`` returns None once the resource is gone, and
  ``delete`` reports an already-missing resource as ``False`` instead of
  failing. Transport and malformed-response errors always propagate.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from app.core.devops import (
    DevOps,
    Developer,
    Engineer,
    InvalidRequestError,
    NotFoundError,
    Operations,
    ResourceService,
)
from app.core.provider import PROVIDER_TYPE_NAME, ProviderData

logger = logging.getLogger(__name__)

E = TypeVar("E", Engineer, Developer, Operations, DevOps)


class ResourceHandler(Generic[E]):
    """Lifecycle operations for one managed resource kind."""

    def __init__(self, type_suffix: str, service: ResourceService[E]):
        self.type_name = f"{PROVIDER_TYPE_NAME}_{type_suffix}"
        self.service = service

    def create(self, desired: E) -> E:
        """Create the resource; the returned entity becomes the new state."""
        created = self.service.create(desired)
        logger.debug("%s: created id=%s", self.type_name, created.id)
        return created

    def read(self, entity_id: str) -> Optional[E]:
        """Refresh state. Returns None when the remote resource no longer exists."""
        try:
            return self.service.get(entity_id)
        except NotFoundError:
            logger.info("%s: id=%s no longer exists remotely, dropping from state", self.type_name, entity_id)
            return None

    def update(self, prior: E, desired: E) -> E:
        """Replace the remote resource identified by ``prior`` with ``desired``.

        Raises:
            InvalidRequestError: If prior state has no id, or desired tries to change it
        """
        if not prior.id:
            raise InvalidRequestError(f"{self.type_name}: cannot update a resource that was never created")
        if desired.id and desired.id != prior.id:
            raise InvalidRequestError(f"{self.type_name}: id is immutable ({prior.id} -> {desired.id})")
        return self.service.update(prior.id, desired)

    def delete(self, entity_id: str) -> bool:
        """Delete the resource. Returns False if it was already gone."""
        try:
            self.service.delete(entity_id)
        except NotFoundError:
            logger.info("%s: id=%s already deleted", self.type_name, entity_id)
            return False
        return True

    def import_state(self, entity_id: str) -> E:
        """Adopt an existing remote id into state.

        Raises:
            NotFoundError: If the id does not exist
        """
        return self.service.get(entity_id)


class DataSource(Generic[E]):
    """Read-only listing of one collection, flattened to state dicts."""

    def __init__(self, type_suffix: str, key: str, service: ResourceService[E]):
        self.type_name = f"{PROVIDER_TYPE_NAME}_{type_suffix}"
        self.key = key
        self.service = service

    def read(self) -> Dict[str, List[Dict[str, Any]]]:
        return {self.key: [entity.to_dict() for entity in self.service.list()]}


def drift(state: E, remote: E) -> Dict[str, Tuple[Any, Any]]:
    """Return {field: (state value, remote value)} for fields that differ."""
    stored = state.to_dict()
    current = remote.to_dict()
    changes = {}
    for key in sorted(set(stored) | set(current)):
        if stored.get(key) != current.get(key):
            changes[key] = (stored.get(key), current.get(key))
    return changes


def resource_handlers(provider: ProviderData) -> Dict[str, ResourceHandler]:
    """Managed resources, keyed by type name."""
    handlers = [
        ResourceHandler("engineer", provider.engineers),
        ResourceHandler("dev", provider.developers),
        ResourceHandler("ops", provider.operations),
        ResourceHandler("devops", provider.devops),
    ]
    return {handler.type_name: handler for handler in handlers}


def data_sources(provider: ProviderData) -> Dict[str, DataSource]:
    """Read-only data sources, keyed by type name."""
    sources = [
        DataSource("engineers", "engineers", provider.engineers),
        DataSource("dev", "developers", provider.developers),
        DataSource("ops", "operations", provider.operations),
        DataSource("devops", "devops", provider.devops),
    ]
    return {source.type_name: source for source in sources}
