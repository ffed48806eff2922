"""
Constructors for schema types.

Usage:
    from trellis import Object, String, Number, Array

    schema = Object({
        "username": String().min_length(3),
        "age": Number().positive().optional(),
        "tags": Array(String()),
    })
"""

from __future__ import annotations

from typing import Any as TypingAny
from typing import Mapping, Optional, Sequence

from .helpers import always
from .schema import (
    AnyType,
    ArrayType,
    BaseModifiersType,
    BooleanType,
    DateType,
    EnumType,
    GroupConditional,
    LiteralType,
    NumberType,
    ObjectGroup,
    ObjectType,
    RecordType,
    StringType,
    TupleType,
    UnionConditional,
    UnionOfTypesType,
    UnionType,
)
from .schema.enumeration import Choices
from .types import ConditionalFn


def String() -> StringType:
    return StringType()


def Number(*, strict: bool = False) -> NumberType:
    """Numeric strings are converted unless `strict` is set."""
    return NumberType({"strict": strict} if strict else None)


def Boolean(*, strict: bool = False) -> BooleanType:
    """Checkbox-style values ("on", "1", 0, ...) are converted unless `strict` is set."""
    return BooleanType({"strict": strict} if strict else None)


def Literal(value: TypingAny) -> LiteralType:
    return LiteralType(value)


def Enum(choices: Choices) -> EnumType:
    return EnumType(choices)


def Date(formats: Optional[list[str]] = None) -> DateType:
    """Accepts date/datetime values or strings in one of `formats` (strptime syntax)."""
    return DateType(formats)


def Any() -> AnyType:
    return AnyType()


def Object(properties: Mapping[str, BaseModifiersType]) -> ObjectType:
    return ObjectType(properties)


def Array(schema: BaseModifiersType) -> ArrayType:
    return ArrayType(schema)


def Tuple(schemas: Sequence[BaseModifiersType]) -> TupleType:
    return TupleType(schemas)


def Record(schema: BaseModifiersType) -> RecordType:
    return RecordType(schema)


def Union(conditionals: Sequence[UnionConditional]) -> UnionType:
    return UnionType(conditionals)


def UnionIf(conditional: ConditionalFn, schema: BaseModifiersType) -> UnionConditional:
    """Use `schema` when `conditional(value, field)` returns True."""
    return UnionConditional(conditional, schema)


def UnionElse(schema: BaseModifiersType) -> UnionConditional:
    """Final union branch, used when no earlier conditional matched."""
    return UnionConditional(always, schema)


def UnionOfTypes(schemas: Sequence[BaseModifiersType]) -> UnionOfTypesType:
    return UnionOfTypesType(schemas)


def Group(conditionals: Sequence[GroupConditional]) -> ObjectGroup:
    return ObjectGroup(conditionals)


def GroupIf(
    conditional: ConditionalFn, properties: Mapping[str, BaseModifiersType]
) -> GroupConditional:
    """Apply `properties` when `conditional(value, field)` returns True."""
    return GroupConditional(conditional, properties)


def GroupElse(properties: Mapping[str, BaseModifiersType]) -> GroupConditional:
    return GroupConditional(always, properties)
