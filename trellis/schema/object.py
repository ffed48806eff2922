"""
Object schema type.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..context import CompilerOptions
from ..refs import RefsStore
from ..types import ObjectNode, Validation
from .base import BaseModifiersType, BaseType, FieldOptions, assert_schema, property_name
from .group import ObjectGroup


class ObjectType(BaseType):
    """
    Schema for objects with a known set of properties.

    Property order is kept in the compiled output.
    """

    def __init__(
        self,
        properties: Mapping[str, BaseModifiersType],
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        for key, schema in properties.items():
            assert_schema(schema, f"Object property {key!r}")
        super().__init__(options, validations)
        self._properties = dict(properties)
        self._groups: list[ObjectGroup] = []
        self._allow_unknown_properties = False
        self._to_camel_case = False

    def get_properties(self) -> dict[str, BaseModifiersType]:
        """
        Copy of the properties, to build another object from them.

        Usage:
            Object({**user.get_properties(), "role": String()})
        """
        return {key: schema.clone() for key, schema in self._properties.items()}

    def allow_unknown_properties(self) -> ObjectType:
        """Keep properties not defined by the schema in the output."""
        self._allow_unknown_properties = True
        return self

    def merge(self, group: ObjectGroup) -> ObjectType:
        """Attach a conditional group. Groups compile in merge order."""
        if not isinstance(group, ObjectGroup):
            raise TypeError(f"merge() expects a Group, got {type(group).__name__}")
        self._groups.append(group)
        return self

    def to_camel_case(self) -> ObjectType:
        """
        Write camelCase property names for this object and everything nested
        in it, regardless of the options it is compiled with.
        """
        self._to_camel_case = True
        return self

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, dict)

    def clone(self) -> ObjectType:
        cloned = ObjectType(self.get_properties(), self.clone_options(), self.clone_validations())
        for group in self._groups:
            cloned.merge(group.clone())
        cloned._allow_unknown_properties = self._allow_unknown_properties
        cloned._to_camel_case = self._to_camel_case
        return cloned

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> ObjectNode:
        if self._to_camel_case:
            options = options.with_camel_case()

        return {
            "type": "object",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "bail": self.options.bail,
            "allowNull": self.options.allow_null,
            "isOptional": self.options.is_optional,
            "parseFnId": self.compile_parser(refs),
            "allowUnknownProperties": self._allow_unknown_properties,
            "validations": self.compile_validations(refs),
            "properties": [
                schema.compile(key, refs, options)
                for key, schema in self._properties.items()
            ],
            "groups": [group.compile(refs, options) for group in self._groups],
        }
