"""
Union schema types.

A union picks one of several schemas at validation time. Each conditional
pairs a predicate with a schema; the first passing predicate wins, and the
`otherwise` callback runs when none does.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..context import CompilerOptions
from ..refs import RefsStore
from ..rules import no_match_callback
from ..types import ConditionalFn, FieldContext, NoMatchCallback, UnionConditionNode, UnionNode
from .base import BaseModifiersType, assert_schema, property_name


class UnionConditional:
    """A predicate and the schema used when it passes."""

    def __init__(self, conditional: ConditionalFn, schema: BaseModifiersType):
        assert_schema(schema, "UnionIf()")
        self._conditional = conditional
        self._schema = schema

    def clone(self) -> UnionConditional:
        return UnionConditional(self._conditional, self._schema.clone())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> UnionConditionNode:
        return {
            "conditionalFnRefId": refs.track_conditional(self._conditional),
            "schema": self._schema.compile(field_name, refs, options),
        }


class UnionType(BaseModifiersType):
    """
    Usage:
        Union([
            UnionIf(lambda value, field: value.get("type") == "stripe", stripe),
            UnionIf(lambda value, field: value.get("type") == "paypal", paypal),
            UnionElse(bank_transfer),
        ])

    The compiled node carries no allowNull/isOptional/bail of its own; each
    branch schema does.
    """

    def __init__(
        self,
        conditionals: Sequence[UnionConditional],
        otherwise: Optional[NoMatchCallback] = None,
    ):
        for conditional in conditionals:
            if not isinstance(conditional, UnionConditional):
                raise TypeError(
                    "Union() expects conditionals created with UnionIf/UnionElse, "
                    f"got {type(conditional).__name__}"
                )
        self._conditionals = list(conditionals)
        self._otherwise = otherwise or no_match_callback("union")

    def otherwise(self, callback: NoMatchCallback) -> UnionType:
        """Define the callback invoked when no conditional matches."""
        self._otherwise = callback
        return self

    def clone(self) -> UnionType:
        return UnionType(
            [conditional.clone() for conditional in self._conditionals],
            self._otherwise,
        )

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> UnionNode:
        return {
            "type": "union",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "elseConditionalFnRefId": refs.track_conditional(self._otherwise),
            "conditions": [
                conditional.compile(field_name, refs, options)
                for conditional in self._conditionals
            ],
        }


def _type_probe(schema: BaseModifiersType) -> ConditionalFn:
    def conditional(value: Any, field: FieldContext) -> bool:
        return schema.is_of_type(value)  # type: ignore[attr-defined]

    return conditional


class UnionOfTypesType(BaseModifiersType):
    """
    Union whose branches are chosen by the type of the value.

    Usage:
        UnionOfTypes([Number(), String(), Array(String())])
    """

    def __init__(
        self,
        schemas: Sequence[BaseModifiersType],
        otherwise: Optional[NoMatchCallback] = None,
    ):
        for schema in schemas:
            assert_schema(schema, "UnionOfTypes()")
            if not callable(getattr(schema, "is_of_type", None)):
                raise TypeError(
                    f"UnionOfTypes() cannot tell when to use {type(schema).__name__}, "
                    "it has no is_of_type() method"
                )
        self._schemas = list(schemas)
        self._otherwise = otherwise or no_match_callback("union")

    def otherwise(self, callback: NoMatchCallback) -> UnionOfTypesType:
        self._otherwise = callback
        return self

    def clone(self) -> UnionOfTypesType:
        return UnionOfTypesType([schema.clone() for schema in self._schemas], self._otherwise)

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> UnionNode:
        return {
            "type": "union",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "elseConditionalFnRefId": refs.track_conditional(self._otherwise),
            "conditions": [
                {
                    "conditionalFnRefId": refs.track_conditional(_type_probe(schema)),
                    "schema": schema.compile(field_name, refs, options),
                }
                for schema in self._schemas
            ],
        }
