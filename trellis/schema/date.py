"""
Date schema type. Strings are parsed with the accepted formats and the
parsed datetime is written to the output.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..messages import messages
from ..rules import create_rule
from ..types import FieldContext, Validation
from .base import BaseLiteralType, FieldOptions

DEFAULT_FORMATS = ["%Y-%m-%d", "%Y-%m-%d %H:%M:%S"]


def parse_date(value: str, formats: list[str]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def _date(value: Any, options: dict, field: FieldContext) -> None:
    if isinstance(value, date):
        return
    if not isinstance(value, str):
        field.report(messages["date"], "date", field)
        return

    parsed = parse_date(value, options["formats"])
    if parsed is None:
        field.report(messages["date.format"], "date.format", field, options)
        return
    field.mutate(parsed, field)


date_rule = create_rule(_date)


class DateType(BaseLiteralType):
    subtype = "date"

    def __init__(
        self,
        formats: Optional[list[str]] = None,
        options: Optional[FieldOptions] = None,
        validations: Optional[list[Validation]] = None,
    ):
        self.formats = list(formats or DEFAULT_FORMATS)
        super().__init__(options, validations or [date_rule({"formats": self.formats})])

    def is_of_type(self, value: Any) -> bool:
        return isinstance(value, (date, str))

    def clone(self) -> DateType:
        return DateType(self.formats, self.clone_options(), self.clone_validations())
