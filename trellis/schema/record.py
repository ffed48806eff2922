"""
Record schema type: arbitrary string keys, every value conforms to one schema.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..context import CompilerOptions
from ..messages import messages
from ..refs import RefsStore
from ..rules import create_rule
from ..types import FieldContext, RecordNode, Validation
from .base import BaseModifiersType, BaseType, FieldOptions, assert_schema, property_name


def _min_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) < options["min"]:
        field.report(messages["record.minLength"], "record.minLength", field, options)


def _max_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) > options["max"]:
        field.report(messages["record.maxLength"], "record.maxLength", field, options)


def _fixed_length(value: Any, options: dict, field: FieldContext) -> None:
    if field.is_valid and len(value) != options["size"]:
        field.report(messages["record.fixedLength"], "record.fixedLength", field, options)


def _validate_keys(value: Any, callback: Callable[[list[str], FieldContext], Any], field: FieldContext) -> None:
    if field.is_valid:
        callback(list(value.keys()), field)


min_length_rule = create_rule(_min_length)
max_length_rule = create_rule(_max_length)
fixed_length_rule = create_rule(_fixed_length)
validate_keys_rule = create_rule(_validate_keys)


class RecordType(BaseType):
    """
    Usage:
        Record(Number()).min_length(1)
        Record(String()).validate_keys(check_keys)
    """

    def __init__(
        self,
        schema: BaseModifiersType,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        assert_schema(schema, "Record()")
        super().__init__(options, validations)
        self._schema = schema

    def min_length(self, expected_length: int) -> RecordType:
        """Minimum number of keys."""
        return self.use(min_length_rule({"min": expected_length}))

    def max_length(self, expected_length: int) -> RecordType:
        return self.use(max_length_rule({"max": expected_length}))

    def fixed_length(self, expected_length: int) -> RecordType:
        return self.use(fixed_length_rule({"size": expected_length}))

    def validate_keys(self, callback: Callable[[list[str], FieldContext], Any]) -> RecordType:
        """Run `callback(keys, field)` with the keys of the validated value."""
        return self.use(validate_keys_rule(callback))

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, dict)

    def clone(self) -> RecordType:
        return RecordType(self._schema.clone(), self.clone_options(), self.clone_validations())

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> RecordNode:
        return {
            "type": "record",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "bail": self.options.bail,
            "allowNull": self.options.allow_null,
            "isOptional": self.options.is_optional,
            "each": self._schema.compile("*", refs, options),
            "parseFnId": self.compile_parser(refs),
            "validations": self.compile_validations(refs),
        }
