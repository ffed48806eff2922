from .any import AnyType
from .array import ArrayType
from .base import (
    BaseLiteralType,
    BaseModifiersType,
    BaseType,
    FieldOptions,
    NullableModifier,
    OptionalModifier,
    TransformModifier,
)
from .boolean import BooleanType
from .date import DateType
from .enumeration import EnumType
from .group import GroupConditional, ObjectGroup
from .literal import LiteralType
from .number import NumberType
from .object import ObjectType
from .record import RecordType
from .string import StringType
from .tuple import TupleType
from .union import UnionConditional, UnionOfTypesType, UnionType

__all__ = [
    "BaseModifiersType",
    "BaseType",
    "BaseLiteralType",
    "FieldOptions",
    "NullableModifier",
    "OptionalModifier",
    "TransformModifier",
    "AnyType",
    "ArrayType",
    "BooleanType",
    "DateType",
    "EnumType",
    "GroupConditional",
    "ObjectGroup",
    "LiteralType",
    "NumberType",
    "ObjectType",
    "RecordType",
    "StringType",
    "TupleType",
    "UnionConditional",
    "UnionOfTypesType",
    "UnionType",
]
