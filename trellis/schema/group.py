"""
Conditional groups of object properties.

A group is an ordered list of conditionals, each pairing a predicate with a
set of properties. It is merged into an object schema and compiled as part
of that object; at validation time the first conditional whose predicate
passes contributes its properties, otherwise the group's `otherwise`
callback runs.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..context import CompilerOptions
from ..refs import RefsStore
from ..rules import no_match_callback
from ..types import ConditionalFn, GroupConditionNode, GroupNode, NoMatchCallback
from .base import BaseModifiersType, assert_schema


class GroupConditional:
    """A predicate and the properties applied when it passes."""

    def __init__(
        self, conditional: ConditionalFn, properties: Mapping[str, BaseModifiersType]
    ):
        for key, schema in properties.items():
            assert_schema(schema, f"Group property {key!r}")
        self._conditional = conditional
        self._properties = dict(properties)

    def clone(self) -> GroupConditional:
        return GroupConditional(
            self._conditional,
            {key: schema.clone() for key, schema in self._properties.items()},
        )

    def compile(self, refs: RefsStore, options: CompilerOptions) -> GroupConditionNode:
        return {
            "schema": {
                "type": "sub_object",
                "properties": [
                    schema.compile(key, refs, options)
                    for key, schema in self._properties.items()
                ],
                "groups": [],
            },
            "conditionalFnRefId": refs.track_conditional(self._conditional),
        }


class ObjectGroup:
    """
    Usage:
        hiring_guide = Group([
            GroupIf(lambda value, field: is_true(value.get("is_hiring_guide")), {
                "is_hiring_guide": Literal(True),
                "price": Number(),
            }),
            GroupElse({"is_hiring_guide": Literal(False)}),
        ])
        Object({"name": String()}).merge(hiring_guide)
    """

    def __init__(
        self,
        conditionals: Sequence[GroupConditional],
        otherwise: Optional[NoMatchCallback] = None,
    ):
        for conditional in conditionals:
            if not isinstance(conditional, GroupConditional):
                raise TypeError(
                    "Group() expects conditionals created with GroupIf/GroupElse, "
                    f"got {type(conditional).__name__}"
                )
        self._conditionals = list(conditionals)
        self._otherwise = otherwise or no_match_callback("unionGroup")

    def otherwise(self, callback: NoMatchCallback) -> ObjectGroup:
        """Define the callback invoked when no conditional matches."""
        self._otherwise = callback
        return self

    def clone(self) -> ObjectGroup:
        return ObjectGroup(
            [conditional.clone() for conditional in self._conditionals],
            self._otherwise,
        )

    def compile(self, refs: RefsStore, options: CompilerOptions) -> GroupNode:
        return {
            "type": "group",
            "elseConditionalFnRefId": refs.track_conditional(self._otherwise),
            "conditions": [
                conditional.compile(refs, options) for conditional in self._conditionals
            ],
        }
