"""
Base schema types and modifiers.

Every schema implements `compile(field_name, refs, options)`, returning a
plain-data compiler node, and `clone()`, returning an independent copy whose
mutable builder state (options, validation list, child schemas) is not
shared with the original.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, TypeVar

from ..context import CompilerOptions
from ..helpers import exists, get_nested_value, is_missing, to_camel_case
from ..refs import RefsStore
from ..rules import required_when_rule
from ..types import (
    CompiledValidation,
    CompilerNode,
    ComparisonOperator,
    FieldContext,
    LiteralNode,
    Parser,
    RuleBuilder,
    Transformer,
    Validation,
)

SchemaT = TypeVar("SchemaT", bound="BaseModifiersType")


@dataclass
class FieldOptions:
    """Per-field options owned by each schema."""

    bail: bool = True
    allow_null: bool = False
    is_optional: bool = False
    parse: Optional[Parser] = None


def property_name(field_name: str, options: CompilerOptions) -> str:
    return to_camel_case(field_name) if options.to_camel_case else field_name


def assert_schema(value: Any, context: str) -> None:
    """Fail fast when something other than a schema is used as one."""
    if not isinstance(value, BaseModifiersType):
        raise TypeError(
            f"{context} expects a schema type, got {type(value).__name__}"
        )


def to_validation(validation: Validation | RuleBuilder) -> Validation:
    """
    Accept a Validation as-is or build one from a rule builder.

    Raises:
        TypeError: The value is neither a Validation nor a rule builder
    """
    if isinstance(validation, Validation):
        return validation

    if isinstance(validation, RuleBuilder):
        built = validation.build_validation()
        if not isinstance(built, Validation):
            raise TypeError(
                f"{type(validation).__name__}.build_validation() must return a "
                f"Validation, got {type(built).__name__}"
            )
        return built

    raise TypeError(
        "use() expects a Validation or an object with a build_validation() method, "
        f"got {type(validation).__name__}"
    )


def compile_validations(
    validations: list[Validation], refs: RefsStore
) -> list[CompiledValidation]:
    return [
        {
            "ruleFnId": refs.track_validator(validation.rule.validator, validation.options),
            "implicit": validation.rule.implicit,
            "isAsync": validation.rule.is_async,
        }
        for validation in validations
    ]


class BaseModifiersType(ABC):
    """
    Base for every schema type, modifiers included.

    Only the modifiers applicable to all schema types live here.
    """

    @abstractmethod
    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> CompilerNode:
        """Compile to a compiler node, tracking functions into `refs`."""

    @abstractmethod
    def clone(self: SchemaT) -> SchemaT:
        """Return an independent copy of the schema."""

    def optional(self) -> OptionalModifier:
        """
        Mark the field as optional. An optional field accepts both a missing
        value and None.
        """
        return OptionalModifier(self)

    def nullable(self) -> NullableModifier:
        """
        Allow None as the field value. None is written to the output as well.
        """
        return NullableModifier(self)


class NullableModifier(BaseModifiersType):
    """Modifies the wrapped schema to allow None values."""

    def __init__(self, parent: BaseModifiersType):
        assert_schema(parent, "nullable()")
        self._parent = parent

    def clone(self) -> NullableModifier:
        return NullableModifier(self._parent.clone())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> CompilerNode:
        output = self._parent.compile(field_name, refs, options)
        # Union branches carry their own nullability
        if output["type"] != "union":
            output["allowNull"] = True
        return output


def _safe_compare(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def checker(value: Any, expected: Any) -> bool:
        try:
            return compare(value, expected)
        except TypeError:
            return False

    return checker


def strict_equals(value: Any, expected: Any) -> bool:
    """Equality that never matches a bool against a number (1 vs True)."""
    if isinstance(value, bool) != isinstance(expected, bool):
        return False
    return value == expected


def _contains(value: Any, expected: Any) -> bool:
    return any(strict_equals(value, item) for item in expected)


COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    "=": strict_equals,
    "!=": lambda value, expected: not strict_equals(value, expected),
    "in": _contains,
    "notIn": lambda value, expected: not _contains(value, expected),
    ">": _safe_compare(operator.gt),
    "<": _safe_compare(operator.lt),
    ">=": _safe_compare(operator.ge),
    "<=": _safe_compare(operator.le),
}


def _as_list(fields: str | list[str]) -> list[str]:
    return [fields] if isinstance(fields, str) else list(fields)


class OptionalModifier(BaseModifiersType):
    """
    Modifies the wrapped schema to allow missing values.

    Carries its own validation list for the conditional-requirement rules;
    those are appended after the wrapped node's own validations.
    """

    def __init__(
        self, parent: BaseModifiersType, validations: Optional[list[Validation]] = None
    ):
        assert_schema(parent, "optional()")
        self._parent = parent
        self.validations: list[Validation] = validations or []

    def clone_validations(self) -> list[Validation]:
        # Validation entries are frozen, sharing them is safe
        return list(self.validations)

    def use(self, validation: Validation | RuleBuilder) -> OptionalModifier:
        self.validations.append(to_validation(validation))
        return self

    def required_when(
        self,
        other_field: str | Callable[[FieldContext], bool],
        operator: Optional[ComparisonOperator] = None,
        expected_value: Any = None,
    ) -> OptionalModifier:
        """
        Require the field at runtime based on another field or a callback.

        Usage:
            String().optional().required_when("type", "=", "business")
            String().optional().required_when("age", ">=", 18)
            String().optional().required_when("role", "in", ["admin", "owner"])
            String().optional().required_when(lambda field: field.parent.get("vip"))

        Raises:
            ValueError: Unknown operator, or non-list value for in/notIn
        """
        if callable(other_field):
            return self.use(required_when_rule(other_field))

        if operator not in COMPARATORS:
            raise ValueError(
                f"Unknown operator {operator!r}, expected one of {', '.join(COMPARATORS)}"
            )
        if operator in ("in", "notIn") and not isinstance(
            expected_value, (list, tuple, set, frozenset)
        ):
            raise ValueError(f"Operator {operator!r} expects a list of values")

        compare = COMPARATORS[operator]
        path = other_field

        def checker(field: FieldContext) -> bool:
            return compare(get_nested_value(path, field), expected_value)

        return self.use(required_when_rule(checker))

    def required_if_exists(self, fields: str | list[str]) -> OptionalModifier:
        """Required when all the other fields exist with a non-None value."""
        paths = _as_list(fields)
        return self.use(
            required_when_rule(
                lambda field: all(exists(get_nested_value(p, field)) for p in paths)
            )
        )

    def required_if_any_exists(self, fields: str | list[str]) -> OptionalModifier:
        paths = _as_list(fields)
        return self.use(
            required_when_rule(
                lambda field: any(exists(get_nested_value(p, field)) for p in paths)
            )
        )

    def required_if_missing(self, fields: str | list[str]) -> OptionalModifier:
        """Required when all the other fields are missing or None."""
        paths = _as_list(fields)
        return self.use(
            required_when_rule(
                lambda field: all(is_missing(get_nested_value(p, field)) for p in paths)
            )
        )

    def required_if_any_missing(self, fields: str | list[str]) -> OptionalModifier:
        paths = _as_list(fields)
        return self.use(
            required_when_rule(
                lambda field: any(is_missing(get_nested_value(p, field)) for p in paths)
            )
        )

    def clone(self) -> OptionalModifier:
        return OptionalModifier(self._parent.clone(), self.clone_validations())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> CompilerNode:
        output = self._parent.compile(field_name, refs, options)
        # Union branches carry their own optionality
        if output["type"] != "union":
            output["isOptional"] = True
            output["validations"] = output["validations"] + compile_validations(
                self.validations, refs
            )
        return output


class TransformModifier(BaseModifiersType):
    """Registers a function that mutates the validated output value."""

    def __init__(self, transformer: Transformer, parent: BaseModifiersType):
        assert_schema(parent, "transform()")
        self._transformer = transformer
        self._parent = parent

    def clone(self) -> TransformModifier:
        return TransformModifier(self._transformer, self._parent.clone())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> CompilerNode:
        output = self._parent.compile(field_name, refs, options)
        output["transformFnId"] = refs.track_transformer(self._transformer)
        return output


class BaseType(BaseModifiersType):
    """
    Shared plumbing for concrete schema types: field options, the
    validation list, parse/use/bail.
    """

    def __init__(
        self,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self.options = options or FieldOptions()
        self.validations: list[Validation] = validations or []

    def clone_options(self) -> FieldOptions:
        return replace(self.options)

    def clone_validations(self) -> list[Validation]:
        # Validation entries are frozen, sharing them is safe
        return list(self.validations)

    def compile_validations(self, refs: RefsStore) -> list[CompiledValidation]:
        return compile_validations(self.validations, refs)

    def compile_parser(self, refs: RefsStore) -> Optional[str]:
        if self.options.parse is None:
            return None
        return refs.track_parser(self.options.parse)

    def parse(self: SchemaT, callback: Parser) -> SchemaT:
        """
        Define a function to parse the input value. It runs before any
        validation, so it must not assume the type of the value.
        """
        self.options.parse = callback  # type: ignore[attr-defined]
        return self

    def use(self: SchemaT, validation: Validation | RuleBuilder) -> SchemaT:
        """Push a validation to the validations chain."""
        self.validations.append(to_validation(validation))  # type: ignore[attr-defined]
        return self

    def bail(self: SchemaT, state: bool) -> SchemaT:
        """In bail mode, the field validations stop after the first error."""
        self.options.bail = state  # type: ignore[attr-defined]
        return self


class BaseLiteralType(BaseType):
    """Base for leaf types compiling to `literal` nodes."""

    subtype: str

    def transform(self, transformer: Transformer) -> TransformModifier:
        """Define a function to mutate the output value."""
        return TransformModifier(transformer, self)

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> LiteralNode:
        return {
            "type": "literal",
            "subtype": self.subtype,
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "bail": self.options.bail,
            "allowNull": self.options.allow_null,
            "isOptional": self.options.is_optional,
            "parseFnId": self.compile_parser(refs),
            "validations": self.compile_validations(refs),
        }
