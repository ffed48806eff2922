"""
Literal schema type: the value must equal one expected value.
"""

from __future__ import annotations

from typing import Any, Optional

from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions


def _equals(value: Any, options: dict, field: FieldContext) -> None:
    expected = options["expectedValue"]
    if value != expected or type(value) is not type(expected):
        field.report(messages["literal"], "literal", field, options)


equals_rule = create_rule(_equals)


class LiteralType(BaseLiteralType):
    subtype = "literal"

    def __init__(
        self,
        value: Any,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self._value = value
        super().__init__(options, validations or [equals_rule({"expectedValue": value})])

    def clone(self) -> LiteralType:
        return LiteralType(self._value, self.clone_options(), self.clone_validations())
