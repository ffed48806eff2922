"""
Type definitions for trellis.

Provides the validation rule/entry pair, the rule-builder and field-context
protocols, and the shapes of compiled nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional, Protocol, TypedDict, Union, runtime_checkable


class FieldContext(Protocol):
    """
    Runtime context handed to validators, parsers and predicates by the
    interpreter. Only the attributes used by trellis' own rules are listed.
    """

    value: Any
    data: Any
    parent: Any
    name: Any
    is_defined: bool
    is_valid: bool

    def report(
        self, message: str, rule: str, field: Any, meta: Optional[dict] = None
    ) -> None: ...

    def mutate(self, new_value: Any, field: Any) -> None: ...


# Type aliases
Validator = Callable[[Any, Any, FieldContext], Any]
Parser = Callable[..., Any]
Transformer = Callable[[Any, FieldContext], Any]
ConditionalFn = Callable[[Any, FieldContext], bool]
NoMatchCallback = Callable[[Any, FieldContext], Any]

ComparisonOperator = Literal["=", "!=", "in", "notIn", ">", "<", ">=", "<="]


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """A validator function plus the metadata needed to compile it."""

    validator: Validator
    is_async: bool = False
    implicit: bool = False


@dataclass(frozen=True, slots=True)
class Validation:
    """A rule paired with the options passed to it at validation time."""

    rule: ValidationRule
    options: Any = None


@runtime_checkable
class RuleBuilder(Protocol):
    """Anything that knows how to produce a `Validation`."""

    def build_validation(self) -> Validation: ...


# Compiled node shapes


class CompiledValidation(TypedDict):
    ruleFnId: str
    implicit: bool
    isAsync: bool


class FieldNode(TypedDict, total=False):
    type: str
    fieldName: str
    propertyName: str
    bail: bool
    allowNull: bool
    isOptional: bool
    parseFnId: Optional[str]
    validations: list[CompiledValidation]


class LiteralNode(FieldNode, total=False):
    subtype: str
    transformFnId: str


class ObjectNode(FieldNode, total=False):
    allowUnknownProperties: bool
    properties: list[dict[str, Any]]
    groups: list[GroupNode]


class TupleNode(FieldNode, total=False):
    allowUnknownProperties: bool
    properties: list[dict[str, Any]]


class ArrayNode(FieldNode, total=False):
    each: dict[str, Any]


class RecordNode(FieldNode, total=False):
    each: dict[str, Any]


class SubObjectNode(TypedDict):
    type: str
    properties: list[dict[str, Any]]
    groups: list[GroupNode]


class GroupConditionNode(TypedDict):
    schema: SubObjectNode
    conditionalFnRefId: str


class GroupNode(TypedDict):
    type: str
    elseConditionalFnRefId: str
    conditions: list[GroupConditionNode]


class UnionConditionNode(TypedDict):
    conditionalFnRefId: str
    schema: dict[str, Any]


class UnionNode(TypedDict):
    type: str
    fieldName: str
    propertyName: str
    elseConditionalFnRefId: str
    conditions: list[UnionConditionNode]


# Any compiled node; modifiers update the node their wrapped schema returns
CompilerNode = Union[LiteralNode, ObjectNode, TupleNode, ArrayNode, RecordNode, UnionNode]
