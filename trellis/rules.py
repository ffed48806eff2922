"""
Rule construction.

A rule is a validator function plus metadata. `create_rule` wraps a
validator into a factory producing `Validation` entries that can be
attached to any schema with `.use()`.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from .messages import messages
from .types import FieldContext, NoMatchCallback, Validation, ValidationRule, Validator


def create_rule(
    validator: Validator,
    *,
    implicit: bool = False,
    is_async: bool | None = None,
) -> Callable[..., Validation]:
    """
    Turn a validator function into a rule factory.

    Args:
        validator: Called as validator(value, options, field) at validation time
        implicit: Run the rule even when the field value is missing
        is_async: Defaults to whether the validator is a coroutine function

    Usage:
        def is_even(value, options, field):
            if value % 2:
                field.report("The {{ field }} field must be even", "even", field)

        even = create_rule(is_even)
        Number().use(even())
    """
    rule = ValidationRule(
        validator=validator,
        is_async=inspect.iscoroutinefunction(validator) if is_async is None else is_async,
        implicit=implicit,
    )

    def factory(options: Any = None) -> Validation:
        return Validation(rule=rule, options=options)

    factory.rule = rule  # type: ignore[attr-defined]
    return factory


def _required_when(value: Any, checker: Callable[[FieldContext], bool], field: FieldContext) -> None:
    if not field.is_defined and checker(field):
        field.report(messages["required"], "required", field)


required_when_rule = create_rule(_required_when, implicit=True)


def no_match_callback(rule: str) -> NoMatchCallback:
    """Build a fresh callback reporting that no union member or group matched."""

    def otherwise(value: Any, field: FieldContext) -> None:
        field.report(messages[rule], rule, field)

    return otherwise
