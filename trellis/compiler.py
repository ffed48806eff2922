"""
Top-level compile entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .context import CompilerOptions, current_options
from .refs import RefsStore
from .schema import BaseModifiersType
from .schema.base import assert_schema
from .types import CompilerNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledSchema:
    """A compiled node tree and the store its ref ids point into."""

    schema: CompilerNode
    refs: RefsStore


def compile_schema(
    schema: BaseModifiersType,
    options: Optional[CompilerOptions] = None,
    *,
    field_name: str = "*",
    **overrides: bool,
) -> CompiledSchema:
    """
    Compile a schema tree against a fresh reference store.

    Args:
        schema: Root schema
        options: Compile options; defaults to the ones set by compiler_context()
        field_name: Field name of the root node
        **overrides: Option fields overriding `options` (e.g. to_camel_case=True)

    Returns:
        CompiledSchema(schema=<root node>, refs=<store starting at ref://1>)

    Usage:
        compiled = compile_schema(Object({"user_name": String()}), to_camel_case=True)
        compiled.schema["properties"][0]["propertyName"]  # 'userName'
        compiled.refs.to_json()                           # {'ref://1': {...}}
    """
    assert_schema(schema, "compile_schema()")

    resolved = options or current_options()
    if overrides:
        resolved = CompilerOptions.model_validate({**resolved.model_dump(), **overrides})

    refs = RefsStore()
    node = schema.compile(field_name, refs, resolved)
    logger.debug(
        "Compiled %s schema with %d refs (to_camel_case=%s)",
        node["type"],
        len(refs),
        resolved.to_camel_case,
    )
    return CompiledSchema(schema=node, refs=refs)
