"""
Schema type accepting any value. Custom rules are attached with `.use()`.
"""

from __future__ import annotations

from typing import Any

from .base import BaseLiteralType


class AnyType(BaseLiteralType):
    subtype = "any"

    def is_of_type(self, value: Any) -> bool:
        return True

    def clone(self) -> AnyType:
        return AnyType(self.clone_options(), self.clone_validations())
