"""JSON helpers: serialize values and stamp parsed objects with a class."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from cssbuilder.config import BuilderConfig

T = TypeVar("T")

_COMPACT = (",", ":")


def _default(value: object) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, config: BuilderConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Output is compact (``[1,2,3]``) unless *config* sets ``json_indent``.
    Dataclass instances are written as their field mapping.
    """
    config = config or BuilderConfig()
    if config.json_indent is None:
        return json.dumps(value, separators=_COMPACT, default=_default)
    return json.dumps(value, indent=config.json_indent, default=_default)


def from_json(shape: type[T], text: str) -> T | Any:
    """Parse *text* and give the resulting object the type *shape*.

    A JSON object becomes an instance of *shape* whose attributes are the
    object's keys; ``shape.__init__`` is not called.  Attributes are set with
    ``object.__setattr__``, so ``__slots__`` classes and frozen dataclasses
    work.  Builtins that take no instance attributes (``dict``, ``int``)
    raise AttributeError, as does a key not listed in ``__slots__``.  Any
    other JSON value is returned as parsed.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        return data
    instance = shape.__new__(shape)
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
