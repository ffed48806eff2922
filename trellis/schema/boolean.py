"""
Boolean schema type.
"""

from __future__ import annotations

from typing import Any, Optional

from ..helpers import is_false, is_true
from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions


def as_boolean(value: Any) -> Optional[bool]:
    """
    Booleans pass through, checkbox-style values are converted, the rest is None.

    Examples:
        as_boolean("on")    # True
        as_boolean(0)       # False
        as_boolean("nope")  # None
    """
    if is_true(value):
        return True
    if is_false(value):
        return False
    return None


def _boolean(value: Any, options: Optional[dict], field: FieldContext) -> None:
    strict = bool(options and options.get("strict"))
    converted = value if isinstance(value, bool) else None if strict else as_boolean(value)
    if converted is None:
        field.report(messages["boolean"], "boolean", field)
        return
    field.mutate(converted, field)


boolean_rule = create_rule(_boolean)


class BooleanType(BaseLiteralType):
    subtype = "boolean"

    def __init__(
        self,
        options: Optional[dict] = None,
        field_options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self._rule_options = options
        super().__init__(field_options, validations or [boolean_rule(options)])

    def is_of_type(self, value: Any) -> bool:
        return as_boolean(value) is not None

    def clone(self) -> BooleanType:
        return BooleanType(
            self._rule_options, self.clone_options(), self.clone_validations()
        )
