"""
Enum schema type: the value must be one of a closed set of choices.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional, Sequence, Union

from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions

Choices = Union[Sequence[Any], type[enum.Enum], Callable[[FieldContext], Sequence[Any]]]


def _enum(value: Any, options: dict, field: FieldContext) -> None:
    choices = options["choices"]
    if callable(choices):
        choices = choices(field)
    if value not in choices:
        field.report(messages["enum"], "enum", field, {"choices": list(choices)})


enum_rule = create_rule(_enum)


def _normalize(choices: Choices) -> Union[list[Any], Callable[[FieldContext], Sequence[Any]]]:
    if isinstance(choices, type) and issubclass(choices, enum.Enum):
        return [member.value for member in choices]
    if callable(choices):
        return choices
    if isinstance(choices, (str, bytes)) or not isinstance(choices, Sequence):
        raise TypeError(
            f"Enum() expects a sequence, an Enum class or a callable, got {type(choices).__name__}"
        )
    return list(choices)


class EnumType(BaseLiteralType):
    """
    Usage:
        Enum(["guest", "admin"])
        Enum(Role)                                    # enum.Enum subclass
        Enum(lambda field: field.meta["roles"])       # resolved at validation time
    """

    subtype = "enum"

    def __init__(
        self,
        choices: Choices,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self.choices = _normalize(choices)
        super().__init__(options, validations or [enum_rule({"choices": self.choices})])

    def clone(self) -> EnumType:
        return EnumType(self.choices, self.clone_options(), self.clone_validations())
