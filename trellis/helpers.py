"""
Helpers shared by rules, predicates and conditional requirements.
"""

import re
from typing import Any

from .lib.path import lookup, lookup_key

TRUTHY_VALUES = ("1", 1, "on", "true", True)
FALSY_VALUES = ("0", 0, "off", "false", False)

WORD_SEPARATOR = re.compile(r"[_\-\s]+")


def exists(value: Any) -> bool:
    """Value is neither missing nor None."""
    return value is not None


def is_missing(value: Any) -> bool:
    return value is None


def is_true(value: Any) -> bool:
    """
    Check a checkbox-style truthy value.

    Examples:
        is_true("on")   # True
        is_true(1)      # True
        is_true("yes")  # False
    """
    return any(value == truthy and type(value) is type(truthy) for truthy in TRUTHY_VALUES)


def is_false(value: Any) -> bool:
    return any(value == falsy and type(value) is type(falsy) for falsy in FALSY_VALUES)


def get_nested_value(key: str, field: Any) -> Any:
    """
    Look up a sibling or nested field of the field under validation.

    Dotted paths ("profile.age") resolve against the root data, plain keys
    against the parent of the field. Lookups never raise, a miss is None.
    """
    if "." in key:
        return lookup(field.data, key)
    return lookup_key(field.parent, key)


def to_camel_case(name: str) -> str:
    """
    snake_case or kebab-case -> camelCase. Only the first letter of each
    segment after the first is upper-cased; the rest is left as written.

    Examples:
        to_camel_case("post_id")     # 'postId'
        to_camel_case("first-name")  # 'firstName'
        to_camel_case("sha256sum")   # 'sha256sum'
        to_camel_case("*")           # '*'
    """
    segments = [segment for segment in WORD_SEPARATOR.split(name) if segment]
    if not segments:
        return name
    head, *rest = segments
    return head + "".join(segment[0].upper() + segment[1:] for segment in rest)


def always(value: Any, field: Any) -> bool:
    """Predicate of else-branches."""
    return True
