"""
Number schema type and its rules.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions


def as_number(value: Any) -> Optional[int | float]:
    """Numbers pass through, numeric strings are converted, the rest is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) or math.isinf(value) else value
    if isinstance(value, str) and value.strip():
        try:
            return int(value)
        except ValueError:
            pass
        try:
            number = float(value)
        except ValueError:
            return None
        return None if math.isnan(number) or math.isinf(number) else number
    return None


def _number(value: Any, options: Optional[dict], field: FieldContext) -> None:
    strict = bool(options and options.get("strict"))
    number = as_number(value)
    if number is None or (strict and isinstance(value, str)):
        field.report(messages["number"], "number", field)
        return
    field.mutate(number, field)


def _min(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and value < options["min"]:
        field.report(messages["min"], "min", field, options)


def _max(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and value > options["max"]:
        field.report(messages["max"], "max", field, options)


def _range(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and not options["min"] <= value <= options["max"]:
        field.report(messages["range"], "range", field, options)


def _positive(value: Any, _: Any, field: FieldContext) -> None:
    if field.is_valid and value < 0:
        field.report(messages["positive"], "positive", field)


def _negative(value: Any, _: Any, field: FieldContext) -> None:
    if field.is_valid and value >= 0:
        field.report(messages["negative"], "negative", field)


def _without_decimals(value: Any, _: Any, field: FieldContext) -> None:
    if field.is_valid and not float(value).is_integer():
        field.report(messages["withoutDecimals"], "withoutDecimals", field)


number_rule = create_rule(_number)
min_rule = create_rule(_min)
max_rule = create_rule(_max)
range_rule = create_rule(_range)
positive_rule = create_rule(_positive)
negative_rule = create_rule(_negative)
without_decimals_rule = create_rule(_without_decimals)


class NumberType(BaseLiteralType):
    """
    Schema for numbers. Numeric strings are accepted and converted unless
    `strict` is set.
    """

    subtype = "number"

    def __init__(
        self,
        options: Optional[dict] = None,
        field_options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self._rule_options = options
        super().__init__(field_options, validations or [number_rule(options)])

    def is_of_type(self, value: Any) -> bool:
        return as_number(value) is not None

    def min(self, value: int | float) -> NumberType:
        return self.use(min_rule({"min": value}))

    def max(self, value: int | float) -> NumberType:
        return self.use(max_rule({"max": value}))

    def range(self, value: tuple[int | float, int | float]) -> NumberType:
        return self.use(range_rule({"min": value[0], "max": value[1]}))

    def positive(self) -> NumberType:
        return self.use(positive_rule())

    def negative(self) -> NumberType:
        return self.use(negative_rule())

    def without_decimals(self) -> NumberType:
        return self.use(without_decimals_rule())

    def clone(self) -> NumberType:
        return NumberType(
            self._rule_options, self.clone_options(), self.clone_validations()
        )
