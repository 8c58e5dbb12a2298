"""Conversion of domain records into JSON-compatible structures."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping


def to_jsonable(value: Any) -> Any:
    """Recursively convert dataclasses, enums, mappings and tuples into plain JSON types.

    Field names keep their Python spelling except for a trailing underscore
    used to dodge keywords (``from_`` → ``from``).
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name.rstrip("_"): to_jsonable(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
