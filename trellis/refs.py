"""
Reference store for values that cannot live inside compiled nodes.

Compiled nodes are plain data. Validators, parsers, transformers and
predicates are registered here and the node keeps only the returned id.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .types import ConditionalFn, Parser, Transformer, Validator

logger = logging.getLogger(__name__)

REF_PREFIX = "ref://"


class RefsStore:
    """
    Append-only registry handing out `ref://<n>` ids, starting at 1.

    Usage:
        refs = RefsStore()
        refs.track(print)      # 'ref://1'
        refs.to_json()         # {'ref://1': <built-in function print>}
    """

    def __init__(self) -> None:
        self._refs: dict[str, Any] = {}
        self._counter = 0

    def track(self, value: Any) -> str:
        """Register a value and return its id."""
        self._counter += 1
        ref_id = f"{REF_PREFIX}{self._counter}"
        self._refs[ref_id] = value
        logger.debug("Tracked %s -> %r", ref_id, value)
        return ref_id

    def track_validator(self, validator: Validator, options: Any = None) -> str:
        return self.track({"validator": validator, "options": options})

    def track_parser(self, parser: Parser) -> str:
        return self.track(parser)

    def track_transformer(self, transformer: Transformer) -> str:
        return self.track(transformer)

    def track_conditional(self, conditional: ConditionalFn) -> str:
        return self.track(conditional)

    def to_json(self) -> dict[str, Any]:
        """Snapshot of every tracked id and its payload."""
        return dict(self._refs)

    def __getitem__(self, ref_id: str) -> Any:
        return self._refs[ref_id]

    def __contains__(self, ref_id: object) -> bool:
        return ref_id in self._refs

    def __iter__(self) -> Iterator[str]:
        return iter(self._refs)

    def __len__(self) -> int:
        return len(self._refs)

    def __repr__(self) -> str:
        return f"RefsStore({len(self)} refs)"
