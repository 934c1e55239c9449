"""JSON helpers: serialize objects and rebuild typed instances from text."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import SerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances are written as a mapping of their fields, in field
    order::

        to_json([1, 2, 3])             -> '[1, 2, 3]'
        to_json(Rectangle(10, 20))     -> '{"width": 10, "height": 20}'
    """
    try:
        return json.dumps(obj, indent=indent, default=_default)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Cannot serialize {type(obj).__name__}: {exc}", cause=exc
        ) from exc


def from_json(proto: type[T] | T, text: str) -> T:
    """Build an instance of *proto*'s type from a flat JSON object.

    *proto* is either a class or an instance of it. The object's values are
    passed to the constructor positionally, in document order::

        from_json(Rectangle, '{"width": 10, "height": 20}')
    """
    cls: type = proto if isinstance(proto, type) else type(proto)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc.msg}", cause=exc) from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    logger.debug("Building %s from %d value(s)", cls.__name__, len(data))
    try:
        return cls(*data.values())
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {cls.__name__} from {list(data)}: {exc}", cause=exc
        ) from exc
