"""Helpers shared across tests: a fake field context and node builders."""

from typing import Any, Optional

from trellis import Validation


class FakeField:
    """Minimal field context recording reported errors and mutations."""

    def __init__(
        self,
        value: Any = None,
        *,
        parent: Optional[dict] = None,
        data: Optional[dict] = None,
        name: str = "dummy",
        is_defined: bool = True,
    ):
        self.value = value
        self.parent = parent if parent is not None else {}
        self.data = data if data is not None else self.parent
        self.name = name
        self.is_defined = is_defined
        self.is_valid = True
        self.errors: list[dict[str, Any]] = []

    def report(self, message: str, rule: str, field: Any, meta: Optional[dict] = None) -> None:
        self.errors.append({"message": message, "rule": rule, "meta": meta})
        self.is_valid = False

    def mutate(self, new_value: Any, field: Any) -> None:
        self.value = new_value

    @property
    def rules(self) -> list[str]:
        return [error["rule"] for error in self.errors]


def run_validation(validation: Validation, value: Any, **field_kwargs: Any) -> FakeField:
    """Execute a single validation the way an interpreter would."""
    field = FakeField(value, **field_kwargs)
    validation.rule.validator(value, validation.options, field)
    return field


def validation_node(ref_id: str, implicit: bool = False, is_async: bool = False) -> dict:
    return {"ruleFnId": ref_id, "implicit": implicit, "isAsync": is_async}


def literal_node(
    subtype: str,
    field_name: str,
    *rule_ids: str,
    property_name: Optional[str] = None,
    bail: bool = True,
    allow_null: bool = False,
    is_optional: bool = False,
    parse_fn_id: Optional[str] = None,
) -> dict:
    return {
        "type": "literal",
        "subtype": subtype,
        "fieldName": field_name,
        "propertyName": property_name or field_name,
        "bail": bail,
        "allowNull": allow_null,
        "isOptional": is_optional,
        "parseFnId": parse_fn_id,
        "validations": [validation_node(ref_id) for ref_id in rule_ids],
    }


def object_node(field_name: str = "*", *properties: dict, **overrides: Any) -> dict:
    node = {
        "type": "object",
        "fieldName": field_name,
        "propertyName": field_name,
        "bail": True,
        "allowNull": False,
        "isOptional": False,
        "parseFnId": None,
        "allowUnknownProperties": False,
        "validations": [],
        "properties": list(properties),
        "groups": [],
    }
    node.update(overrides)
    return node
