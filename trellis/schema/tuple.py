"""
Tuple schema type: fixed positions, each with its own schema.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..context import CompilerOptions
from ..refs import RefsStore
from ..types import TupleNode, Validation
from .base import BaseModifiersType, BaseType, FieldOptions, assert_schema, property_name


class TupleType(BaseType):
    """
    Positional children compile under `properties` with the field names
    "0", "1", ...
    """

    def __init__(
        self,
        schemas: Sequence[BaseModifiersType],
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        for index, schema in enumerate(schemas):
            assert_schema(schema, f"Tuple() position {index}")
        super().__init__(options, validations)
        self._schemas = list(schemas)
        self._allow_unknown_properties = False

    def allow_unknown_properties(self) -> TupleType:
        """Keep elements beyond the defined positions in the output."""
        self._allow_unknown_properties = True
        return self

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, list)

    def clone(self) -> TupleType:
        cloned = TupleType(
            [schema.clone() for schema in self._schemas],
            self.clone_options(),
            self.clone_validations(),
        )
        cloned._allow_unknown_properties = self._allow_unknown_properties
        return cloned

    def compile(
        self, field_name: str, refs: RefsStore, options: CompilerOptions
    ) -> TupleNode:
        return {
            "type": "tuple",
            "fieldName": field_name,
            "propertyName": property_name(field_name, options),
            "bail": self.options.bail,
            "allowNull": self.options.allow_null,
            "isOptional": self.options.is_optional,
            "allowUnknownProperties": self._allow_unknown_properties,
            "parseFnId": self.compile_parser(refs),
            "validations": self.compile_validations(refs),
            "properties": [
                schema.compile(str(index), refs, options)
                for index, schema in enumerate(self._schemas)
            ],
        }
