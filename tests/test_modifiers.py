"""Tests for the optional/nullable modifiers and validation plumbing."""

import pytest

from trellis import Any, Number, Object, RefsStore, String, create_rule
from trellis.rules import required_when_rule
from trellis.schema.base import NullableModifier, OptionalModifier
from trellis.schema.string import min_length_rule

from tests.helpers import literal_node, run_validation, validation_node


class MinLength:
    """Rule builder producing a validation on demand."""

    def __init__(self, size):
        self.size = size

    def build_validation(self):
        return min_length_rule({"min": self.size})


def required_rules(schema, value=None, **field_kwargs):
    """Run every conditional-requirement validation of an optional schema."""
    field_kwargs.setdefault("is_defined", value is not None)
    rules = []
    for validation in schema.validations:
        rules.extend(run_validation(validation, value, **field_kwargs).rules)
    return rules


class TestUse:
    """Attaching validations to schemas."""

    def test_use_validation(self, refs, options):
        noop = create_rule(lambda value, options, field: None)
        validation = noop({"size": 1})
        node = String().use(validation).compile("*", refs, options)

        assert node["validations"] == [validation_node("ref://1"), validation_node("ref://2")]
        assert refs.to_json()["ref://2"] == {
            "validator": noop.rule.validator,
            "options": {"size": 1},
        }

    def test_use_rule_builder(self, refs, options):
        node = String().use(MinLength(4)).compile("*", refs, options)

        assert len(node["validations"]) == 2
        assert refs.to_json()["ref://2"]["options"] == {"min": 4}

    @pytest.mark.parametrize("value", [None, "min_length", lambda value: value, {"rule": 1}])
    def test_use_rejects_other_values(self, value):
        with pytest.raises(TypeError, match="use\\(\\)"):
            String().use(value)

    def test_rule_builder_must_return_validation(self):
        class Broken:
            def build_validation(self):
                return None

        with pytest.raises(TypeError, match="build_validation"):
            String().use(Broken())

    def test_implicit_and_async_flags(self, refs, options):
        async def exists_in_db(value, options, field):
            pass

        unique = create_rule(exists_in_db)
        filled = create_rule(lambda value, options, field: None, implicit=True)
        node = Any().use(unique()).use(filled()).compile("*", refs, options)

        assert node["validations"] == [
            validation_node("ref://1", is_async=True),
            validation_node("ref://2", implicit=True),
        ]

    def test_force_async_flag(self):
        rule = create_rule(lambda value, options, field: None, is_async=True)

        assert rule.rule.is_async is True
        assert rule().rule is rule.rule

    def test_validations_are_tracked_each_compile(self, options):
        schema = String()
        refs = RefsStore()
        schema.compile("a", refs, options)
        schema.compile("b", refs, options)

        assert list(refs) == ["ref://1", "ref://2"]


class TestNullableModifier:
    """nullable() sets allowNull on the wrapped node."""

    def test_nullable(self, refs, options):
        schema = String().nullable()

        assert isinstance(schema, NullableModifier)
        assert schema.compile("*", refs, options) == literal_node(
            "string", "*", "ref://1", allow_null=True
        )

    def test_nullable_then_optional(self, refs, options):
        node = String().nullable().optional().compile("*", refs, options)

        assert node["allowNull"] is True
        assert node["isOptional"] is True

    def test_clone_nullable(self, options):
        inner = String()
        schema = inner.nullable()
        schema1 = schema.clone()
        inner.min_length(1)

        assert len(schema.compile("*", RefsStore(), options)["validations"]) == 2
        assert len(schema1.compile("*", RefsStore(), options)["validations"]) == 1
        assert schema1.compile("*", RefsStore(), options)["allowNull"] is True

    def test_rejects_non_schema(self):
        with pytest.raises(TypeError):
            NullableModifier("string")


class TestOptionalModifier:
    """optional() sets isOptional and carries conditional requirements."""

    def test_optional(self, refs, options):
        schema = String().optional()

        assert isinstance(schema, OptionalModifier)
        assert schema.compile("*", refs, options) == literal_node(
            "string", "*", "ref://1", is_optional=True
        )

    def test_requirement_validations_follow_wrapped_ones(self, refs, options):
        schema = String().min_length(2).optional().required_if_exists("email")
        node = schema.compile("*", refs, options)

        assert node["validations"] == [
            validation_node("ref://1"),
            validation_node("ref://2"),
            validation_node("ref://3", implicit=True),
        ]
        assert refs.to_json()["ref://3"]["validator"] is required_when_rule.rule.validator

    def test_use_on_optional(self, refs, options):
        node = Number().optional().use(MinLength(1)).compile("*", refs, options)

        assert node["validations"] == [validation_node("ref://1"), validation_node("ref://2")]

    def test_clone_optional(self, options):
        schema = String().optional().required_if_exists("email")
        schema1 = schema.clone().required_if_missing("phone")

        assert len(schema.compile("*", RefsStore(), options)["validations"]) == 2
        assert len(schema1.compile("*", RefsStore(), options)["validations"]) == 3

    def test_optional_object_with_camelcase(self, refs, options):
        schema = Object({"user_name": String().optional()}).to_camel_case()
        node = schema.compile("*", refs, options)["properties"][0]

        assert node == literal_node(
            "string", "user_name", "ref://1", property_name="userName", is_optional=True
        )


class TestRequiredWhen:
    """Conditional requirements evaluated against sibling and root fields."""

    @pytest.mark.parametrize(
        "operator, expected_value, parent, required",
        [
            ("=", "business", {"type": "business"}, True),
            ("=", "business", {"type": "personal"}, False),
            ("!=", "business", {"type": "personal"}, True),
            ("!=", "business", {"type": "business"}, False),
            ("in", ["admin", "owner"], {"type": "owner"}, True),
            ("in", ["admin", "owner"], {"type": "guest"}, False),
            ("notIn", ["admin", "owner"], {"type": "guest"}, True),
            ("notIn", ["admin", "owner"], {"type": "admin"}, False),
            (">", 18, {"type": 19}, True),
            (">", 18, {"type": 18}, False),
            (">=", 18, {"type": 18}, True),
            ("<", 18, {"type": 17}, True),
            ("<", 18, {"type": 18}, False),
            ("<=", 18, {"type": 18}, True),
            (">", 18, {"type": None}, False),
            (">", 18, {"type": "nineteen"}, False),
            ("=", "business", {}, False),
            ("=", True, {"type": 1}, False),
            ("=", True, {"type": True}, True),
            ("=", 0, {"type": False}, False),
            ("=", 1, {"type": 1.0}, True),
            ("!=", True, {"type": 1}, True),
            ("!=", False, {"type": False}, False),
            ("in", [1, 2], {"type": True}, False),
            ("in", [True], {"type": 1}, False),
            ("in", [True], {"type": True}, True),
            ("notIn", [0], {"type": False}, True),
            ("notIn", [False], {"type": False}, False),
        ],
    )
    def test_operators(self, operator, expected_value, parent, required):
        schema = String().optional().required_when("type", operator, expected_value)

        assert required_rules(schema, parent=parent) == (["required"] if required else [])

    def test_defined_value_is_never_reported(self):
        schema = String().optional().required_when("type", "=", "business")

        assert required_rules(schema, "acme", parent={"type": "business"}) == []

    def test_callback(self):
        schema = String().optional().required_when(lambda field: field.parent.get("vip"))

        assert required_rules(schema, parent={"vip": True}) == ["required"]
        assert required_rules(schema, parent={"vip": False}) == []

    def test_nested_path_resolves_against_root(self):
        schema = String().optional().required_when("account.type", "=", "business")
        data = {"account": {"type": "business"}}

        assert required_rules(schema, parent={}, data=data) == ["required"]
        assert required_rules(schema, parent=data["account"], data={}) == []

    def test_path_through_list_index(self):
        schema = String().optional().required_when("contacts.0.email", "=", "a@b.c")

        assert required_rules(schema, data={"contacts": [{"email": "a@b.c"}]}) == ["required"]
        assert required_rules(schema, data={"contacts": []}) == []
        assert required_rules(schema, data={"contacts": "a@b.c"}) == []

    def test_plain_keys_are_not_parsed(self):
        schema = String().optional().required_when("2fa code", "!=", None)

        assert required_rules(schema, parent={"2fa code": "123456"}) == ["required"]
        assert required_rules(schema, parent={}) == []

    def test_tuple_sibling_by_position(self):
        schema = String().optional().required_when("0", "=", "business")

        assert required_rules(schema, parent=["business", None]) == ["required"]
        assert required_rules(schema, parent=["personal", None]) == []

    def test_unknown_operator(self):
        with pytest.raises(ValueError, match="Unknown operator"):
            String().optional().required_when("type", "==", "business")

    def test_in_requires_list(self):
        with pytest.raises(ValueError, match="list"):
            String().optional().required_when("type", "in", "admin")

    def test_requirements_are_implicit(self):
        schema = String().optional().required_when("type", "=", "a")

        assert schema.validations[0].rule.implicit is True


class TestRequiredIf:
    """The exists/missing family of conditional requirements."""

    def test_required_if_exists(self):
        schema = String().optional().required_if_exists(["email", "phone"])

        assert required_rules(schema, parent={"email": "a", "phone": "b"}) == ["required"]
        assert required_rules(schema, parent={"email": "a"}) == []
        assert required_rules(schema, parent={"email": "a", "phone": None}) == []

    def test_required_if_exists_single_field(self):
        schema = String().optional().required_if_exists("email")

        assert required_rules(schema, parent={"email": "a"}) == ["required"]
        assert required_rules(schema, parent={"e": "a", "m": "b"}) == []

    def test_required_if_exists_digit_leading_key(self):
        schema = String().optional().required_if_exists("2fa_code")

        assert required_rules(schema, parent={"2fa_code": "123456"}) == ["required"]
        assert required_rules(schema, parent={}) == []

    def test_required_if_any_missing_nested_paths(self):
        schema = String().optional().required_if_any_missing(["contacts.0.email", "contacts.0.phone"])
        data = {"contacts": [{"email": "a@b.c"}]}

        assert required_rules(schema, data=data) == ["required"]
        assert required_rules(schema, data={"contacts": [{"email": "a", "phone": "b"}]}) == []

    def test_required_if_any_exists(self):
        schema = String().optional().required_if_any_exists(["email", "phone"])

        assert required_rules(schema, parent={"phone": "b"}) == ["required"]
        assert required_rules(schema, parent={}) == []

    def test_required_if_missing(self):
        schema = String().optional().required_if_missing(["email", "phone"])

        assert required_rules(schema, parent={}) == ["required"]
        assert required_rules(schema, parent={"phone": "b"}) == []

    def test_required_if_any_missing(self):
        schema = String().optional().required_if_any_missing(["email", "phone"])

        assert required_rules(schema, parent={"email": "a"}) == ["required"]
        assert required_rules(schema, parent={"email": "a", "phone": "b"}) == []

    def test_falsy_values_exist(self):
        schema = String().optional().required_if_exists("count")

        assert required_rules(schema, parent={"count": 0}) == ["required"]
        assert required_rules(schema, parent={"count": ""}) == ["required"]

    def test_chained_requirements(self):
        schema = (
            String()
            .optional()
            .required_if_exists("email")
            .required_when("type", "=", "business")
        )

        assert required_rules(schema, parent={"email": "a", "type": "business"}) == [
            "required",
            "required",
        ]
        assert required_rules(schema, parent={"type": "business"}) == ["required"]
