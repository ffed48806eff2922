"""
Field path parsing and lookup.

Supports:
- Simple keys: "profile.address.city"
- List indices as segments: "contacts.0.email", or "contacts[0].email"

Lookups are lenient: a missing or wrongly shaped segment resolves to None.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

INDEX_PATTERN = re.compile(r"\[(\d+)\]")


class PathSegmentType(Enum):
    KEY = auto()
    INDEX = auto()


@dataclass
class PathSegment:
    """Represents a single segment in a field path."""

    type: PathSegmentType
    value: Union[str, int]

    @classmethod
    def key(cls, name: str) -> "PathSegment":
        return cls(PathSegmentType.KEY, name)

    @classmethod
    def index(cls, idx: int) -> "PathSegment":
        return cls(PathSegmentType.INDEX, idx)


@dataclass
class FieldPath:
    """Represents a parsed field path."""

    segments: list[PathSegment]


def parse_path(path_str: str) -> FieldPath:
    """
    Split a dotted path into segments. All-digit segments are list indices.

    Examples:
        parse_path("contacts.0.email")   # key, index 0, key
        parse_path("contacts[0].email")  # same
    """
    normalized = INDEX_PATTERN.sub(r".\1", path_str)
    segments = [
        PathSegment.index(int(part)) if part.isdigit() else PathSegment.key(part)
        for part in normalized.split(".")
    ]
    return FieldPath(segments)


def lookup(data: Any, path_str: str) -> Any:
    """
    Resolve a dotted path against nested dicts/lists.

    Returns None when any segment is missing or of the wrong shape.

    Examples:
        lookup({"a": {"b": 1}}, "a.b")        # 1
        lookup({"a": [{"b": 1}]}, "a.0.b")    # 1
        lookup({"a": 1}, "a.b")               # None
    """
    current = data
    for segment in parse_path(path_str).segments:
        if current is None:
            return None
        current = lookup_segment(current, segment)
    return current


def lookup_key(data: Any, key: str) -> Any:
    """
    Resolve a single key, without splitting it. Digit keys index into lists.

    Examples:
        lookup_key({"2fa code": 1}, "2fa code")  # 1
        lookup_key(["a", "b"], "1")              # 'b'
    """
    if key.isdigit():
        return lookup_segment(data, PathSegment.index(int(key)))
    return lookup_segment(data, PathSegment.key(key))


def lookup_segment(data: Any, segment: PathSegment) -> Any:
    if segment.type == PathSegmentType.KEY:
        return _lookup_key(data, segment.value)
    return _lookup_index(data, segment.value)


def _lookup_key(data: Any, key: Any) -> Any:
    if isinstance(data, dict):
        return data.get(key)
    return None


def _lookup_index(data: Any, idx: int) -> Any:
    if isinstance(data, dict):
        # Digit keys of a mapping stay strings
        return data.get(str(idx))
    if isinstance(data, (list, tuple)) and idx < len(data):
        return data[idx]
    return None
