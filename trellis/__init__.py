"""
Trellis - schema builders compiled to plain-data validation nodes.

Usage:
    from trellis import Object, String, Record, compile_schema

    schema = Record(Object({"username": String(), "password": String()})).min_length(2)
    compiled = compile_schema(schema)

    compiled.schema   # {'type': 'record', 'each': {...}, 'validations': [...], ...}
    compiled.refs     # RefsStore mapping 'ref://<n>' ids to validators and callbacks
"""

from . import helpers
from .builder import (
    Any,
    Array,
    Boolean,
    Date,
    Enum,
    Group,
    GroupElse,
    GroupIf,
    Literal,
    Number,
    Object,
    Record,
    String,
    Tuple,
    Union,
    UnionElse,
    UnionIf,
    UnionOfTypes,
)
from .compiler import CompiledSchema, compile_schema
from .context import CompilerOptions, compiler_context
from .refs import RefsStore
from .rules import create_rule
from .types import RuleBuilder, Validation, ValidationRule

__all__ = [
    # Schema constructors
    "Any",
    "Array",
    "Boolean",
    "Date",
    "Enum",
    "Group",
    "GroupElse",
    "GroupIf",
    "Literal",
    "Number",
    "Object",
    "Record",
    "String",
    "Tuple",
    "Union",
    "UnionElse",
    "UnionIf",
    "UnionOfTypes",
    # Compilation
    "compile_schema",
    "CompiledSchema",
    "CompilerOptions",
    "compiler_context",
    "RefsStore",
    # Rules
    "create_rule",
    "Validation",
    "ValidationRule",
    "RuleBuilder",
    "helpers",
]
