"""Typed entities exchanged with the DevOps API.

Entities are frozen dataclasses: every value returned by a service reflects
server-confirmed state, and a changed entity is derived with
``dataclasses.replace`` (or the ``with_*`` helpers) rather than mutated.

Wire shapes:
    Engineer    {"id", "name", "email"}
    Developer   {"id", "name", "engineers": [Engineer, ...]}
    Operations  {"id", "name", "engineers": [Engineer, ...]}
    DevOps      {"id", "dev": Developer, "ops": Operations}
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Tuple

from .exceptions import DecodeError


def _string(data: Dict[str, Any], key: str, shape: str, required: bool = False) -> str:
    """Read a string field, failing loudly on absent required or mistyped values.

    Required fields must also be non-empty.
    """
    value = data.get(key)
    if value is None:
        if required:
            raise DecodeError(f"{shape}: missing required field '{key}'")
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{shape}: field '{key}' must be a string, got {type(value).__name__}")
    if required and not value:
        raise DecodeError(f"{shape}: required field '{key}' is empty")
    return value


def _object(data: Any, shape: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"{shape}: expected a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Engineer:
    """An individual engineer."""

    id: str = ""
    name: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Engineer":
        """Create from API response dict."""
        data = _object(data, "Engineer")
        return cls(
            id=_string(data, "id", "Engineer", required=True),
            name=_string(data, "name", "Engineer"),
            email=_string(data, "email", "Engineer"),
        )

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """Convert to dict for API request."""
        payload: Dict[str, Any] = {}
        if include_id and self.id:
            payload["id"] = self.id
        payload["name"] = self.name
        payload["email"] = self.email
        return payload


def _engineers(data: Dict[str, Any], shape: str) -> Tuple[Engineer, ...]:
    # Absent and null both mean "no engineers"; order is kept as sent
    raw = data.get("engineers")
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise DecodeError(f"{shape}: field 'engineers' must be a list, got {type(raw).__name__}")
    return tuple(Engineer.from_dict(item) for item in raw)


@dataclass(frozen=True)
class _Team:
    id: str = ""
    name: str = ""
    engineers: Tuple[Engineer, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable from callers, store an immutable copy
        if not isinstance(self.engineers, tuple):
            object.__setattr__(self, "engineers", tuple(self.engineers))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create from API response dict."""
        shape = cls.__name__
        data = _object(data, shape)
        return cls(
            id=_string(data, "id", shape, required=True),
            name=_string(data, "name", shape, required=True),
            engineers=_engineers(data, shape),
        )

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """Convert to dict for API request.

        Nested engineers always carry their ids: they reference existing
        engineers rather than create new ones.
        """
        payload: Dict[str, Any] = {}
        if include_id and self.id:
            payload["id"] = self.id
        payload["name"] = self.name
        payload["engineers"] = [engineer.to_dict() for engineer in self.engineers]
        return payload

    def with_engineers(self, engineers: Iterable[Engineer]):
        """Return a copy carrying a recomputed engineers list."""
        return replace(self, engineers=tuple(engineers))

    def engineer_ids(self) -> Tuple[str, ...]:
        return tuple(engineer.id for engineer in self.engineers)


@dataclass(frozen=True)
class Developer(_Team):
    """A developer team."""


@dataclass(frozen=True)
class Operations(_Team):
    """An operations team."""


@dataclass(frozen=True)
class DevOps:
    """A DevOps team: exactly one developer team and one operations team."""

    id: str = ""
    dev: Developer = field(default_factory=Developer)
    ops: Operations = field(default_factory=Operations)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DevOps":
        """Create from API response dict."""
        data = _object(data, "DevOps")
        for key in ("dev", "ops"):
            if data.get(key) is None:
                raise DecodeError(f"DevOps: missing required field '{key}'")
        return cls(
            id=_string(data, "id", "DevOps", required=True),
            dev=Developer.from_dict(data["dev"]),
            ops=Operations.from_dict(data["ops"]),
        )

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        """Convert to dict for API request."""
        payload: Dict[str, Any] = {}
        if include_id and self.id:
            payload["id"] = self.id
        payload["dev"] = self.dev.to_dict()
        payload["ops"] = self.ops.to_dict()
        return payload
