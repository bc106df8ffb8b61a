"""JSON body <-> entity conversion.

Field-level mapping lives on the entity classes (``from_dict``/``to_dict``);
this module handles bytes, JSON parsing and error translation so that every
service decodes responses the same way.
"""
from __future__ import annotations
import json
from typing import Any, List, Type, TypeVar, Union

from .exceptions import DecodeError, EncodeError
from .models import DevOps, Developer, Engineer, Operations

Entity = Union[Engineer, Developer, Operations, DevOps]
E = TypeVar("E", Engineer, Developer, Operations, DevOps)


def _parse(body: bytes) -> Any:
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(f"Invalid JSON response: {exc}", body) from exc


def decode(body: bytes, shape: Type[E]) -> E:
    """Decode a single entity of the given shape.

    Raises:
        DecodeError: Malformed JSON or missing required fields
    """
    data = _parse(body)
    try:
        return shape.from_dict(data)
    except DecodeError as exc:
        raise DecodeError(exc.message, body) from exc


def decode_list(body: bytes, shape: Type[E]) -> List[E]:
    """Decode a JSON array of entities, preserving server order.

    An empty array yields an empty list, never None.
    """
    data = _parse(body)
    if not isinstance(data, list):
        raise DecodeError(f"{shape.__name__} list: expected a JSON array, got {type(data).__name__}", body)
    try:
        return [shape.from_dict(item) for item in data]
    except DecodeError as exc:
        raise DecodeError(exc.message, body) from exc


def encode(entity: Entity, include_id: bool = True) -> bytes:
    """Serialize an entity to a UTF-8 JSON body.

    Raises:
        EncodeError: Entity holds values JSON cannot represent
    """
    try:
        return json.dumps(entity.to_dict(include_id=include_id)).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as exc:
        raise EncodeError(f"Cannot encode {type(entity).__name__}: {exc}") from exc
