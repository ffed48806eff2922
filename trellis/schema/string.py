"""
String schema type and its rules.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions


def _string(value: Any, _: Any, field: FieldContext) -> None:
    if not isinstance(value, str):
        field.report(messages["string"], "string", field)


def _min_length(value: Any, options: dict, field: FieldContext) -> None:
    if not field.is_valid:
        return
    if len(value) < options["min"]:
        field.report(messages["minLength"], "minLength", field, options)


def _max_length(value: Any, options: dict, field: FieldContext) -> None:
    if not field.is_valid:
        return
    if len(value) > options["max"]:
        field.report(messages["maxLength"], "maxLength", field, options)


def _fixed_length(value: Any, options: dict, field: FieldContext) -> None:
    if not field.is_valid:
        return
    if len(value) != options["size"]:
        field.report(messages["fixedLength"], "fixedLength", field, options)


def _regex(value: Any, expression: re.Pattern, field: FieldContext) -> None:
    if not field.is_valid:
        return
    if not expression.search(value):
        field.report(messages["regex"], "regex", field)


string_rule = create_rule(_string)
min_length_rule = create_rule(_min_length)
max_length_rule = create_rule(_max_length)
fixed_length_rule = create_rule(_fixed_length)
regex_rule = create_rule(_regex)


class StringType(BaseLiteralType):
    """Schema for string values."""

    subtype = "string"

    def __init__(
        self,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        super().__init__(options, validations or [string_rule()])

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, str)

    def min_length(self, expected_length: int) -> StringType:
        return self.use(min_length_rule({"min": expected_length}))

    def max_length(self, expected_length: int) -> StringType:
        return self.use(max_length_rule({"max": expected_length}))

    def fixed_length(self, expected_length: int) -> StringType:
        return self.use(fixed_length_rule({"size": expected_length}))

    def regex(self, expression: str | re.Pattern) -> StringType:
        return self.use(regex_rule(re.compile(expression)))

    def clone(self) -> StringType:
        return StringType(self.clone_options(), self.clone_validations())
