"""
Array schema type: every element conforms to one schema.
"""

from __future__ import annotations

from typing import Any, Optional

from ..context import CompilerOptions
from ..messages import messages
from ..refs import RefsStore
from ..rules import create_rule
from ..types import ArrayNode, FieldContext, Validation
from .base import BaseModifiersType, BaseType, FieldOptions, assert_schema, property_name


def _min_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) < options["min"]:
        field.report(messages["array.minLength"], "array.minLength", field, options)


def _max_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) > options["max"]:
        field.report(messages["array.maxLength"], "array.maxLength", field, options)


def _fixed_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) != options["size"]:
        field.report(messages["array.fixedLength"], "array.fixedLength", field, options)


def _not_empty(value: Any, _: Any, field: FieldContext) -> None:
    if field.is_valid and len(value) == 0:
        field.report(messages["notEmpty"], "notEmpty", field)


def _distinct(value: Any, options: dict, field: FieldContext) -> None:
    if not field.is_valid:
        return

    fields = options.get("fields")
    if fields:
        keys = [tuple(item.get(key) for key in fields) for item in value]
    else:
        keys = list(value)

    seen: list[Any] = []
    for key in keys:
        if key in seen:
            field.report(messages["distinct"], "distinct", field, options)
            return
        seen.append(key)


min_length_rule = create_rule(_min_length)
max_length_rule = create_rule(_max_length)
fixed_length_rule = create_rule(_fixed_length)
not_empty_rule = create_rule(_not_empty)
distinct_rule = create_rule(_distinct)


class ArrayType(BaseType):
    """
    Usage:
        Array(String()).min_length(1)
        Array(Object({"id": Number()})).distinct("id")
    """

    def __init__(
        self,
        schema: BaseModifiersType,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        assert_schema(schema, "Array()")
        super().__init__(options, validations)
        self._schema = schema

    def min_length(self, expected_length: int) -> ArrayType:
        return self.use(min_length_rule({"min": expected_length}))

    def max_length(self, expected_length: int) -> ArrayType:
        return self.use(max_length_rule({"max": expected_length}))

    def fixed_length(self, expected_length: int) -> ArrayType:
        return self.use(fixed_length_rule({"size": expected_length}))

    def not_empty(self) -> ArrayType:
        return self.use(not_empty_rule())

    def distinct(self, fields: Optional[str | list[str]] = None) -> ArrayType:
        """Elements must be unique, optionally compared on the given keys."""
        if isinstance(fields, str):
            fields = [fields]
        return self.use(distinct_rule({"fields": fields}))

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, list)

    def clone(self) -> ArrayType:
        return ArrayType(self._schema.clone(), self.clone_options(), self.clone_validations())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> ArrayNode:
        return {
            "type": "array",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "bail": self.options.bail,
            "allowNull": self.options.allow_null,
            "isOptional": self.options.is_optional,
            "each": self._schema.compile("*", refs, options),
            "parseFnId": self.compile_parser(refs),
            "validations": self.compile_validations(refs),
        }
