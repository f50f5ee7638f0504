"""Tests for the member builders: fields, properties and constructors.

Covers:
- Argument validation on every setter
- Required settings checked at build time
- The ordered property accessor checks
- Constructor parameters and base calls
"""

from __future__ import annotations

import pytest

from sharpcode import code
from sharpcode.builders import ConstructorBuilder, FieldBuilder, PropertyBuilder
from sharpcode.errors import (
    InvalidArgumentError,
    InvalidSyntaxError,
    MissingBuilderSettingError,
)
from sharpcode.model import AccessModifier, AccessorKind, Parameter


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# FieldBuilder
# ---------------------------------------------------------------------------


class TestFieldBuilder:
    def test_build(self):
        field = (
            FieldBuilder()
            .with_access_modifier(AccessModifier.PROTECTED)
            .with_type("string")
            .with_name("_name")
            .make_readonly()
            .with_summary("The name.")
            .build()
        )
        assert field.access_modifier is AccessModifier.PROTECTED
        assert field.type == "string"
        assert field.name == "_name"
        assert field.is_readonly is True
        assert field.summary == "The name."

    def test_last_write_wins(self):
        field = code.create_field("int", "_a").with_name("_b").make_readonly().make_readonly(False)
        built = field.build()
        assert built.name == "_b"
        assert built.is_readonly is False

    @pytest.mark.parametrize("method", ["with_type", "with_name", "with_summary", "with_access_modifier"])
    def test_none_argument_rejected(self, method):
        with pytest.raises(InvalidArgumentError):
            getattr(FieldBuilder(), method)(None)

    def test_missing_type_reported_first(self):
        with pytest.raises(MissingBuilderSettingError) as exc_info:
            FieldBuilder().build()
        assert exc_info.value.setting == "type"
        assert exc_info.value.entity == "field"

    def test_blank_name_rejected(self):
        with pytest.raises(MissingBuilderSettingError) as exc_info:
            code.create_field("int", "   ").build()
        assert exc_info.value.setting == "name"

    def test_to_source_code(self):
        builder = code.create_field("int", "_id").make_readonly()
        assert builder.to_source_code() == "private readonly int _id;\n"
        assert builder.to_source_code(formatted=False) == "private readonly int _id;"
        assert str(builder) == builder.to_source_code()


# ---------------------------------------------------------------------------
# PropertyBuilder
# ---------------------------------------------------------------------------


class TestPropertyBuilder:
    def test_unconfigured_accessors_build(self):
        prop = code.create_property("int", "Id").build()
        assert prop.getter.kind is AccessorKind.UNCONFIGURED
        assert prop.setter.kind is AccessorKind.UNCONFIGURED

    def test_with_getter_without_expression_is_default(self):
        prop = code.create_property("int", "Id").with_getter().build()
        assert prop.getter.kind is AccessorKind.DEFAULT

    def test_with_getter_expression_is_custom(self):
        prop = code.create_property("int", "Id").with_getter("_id").build()
        assert prop.getter.kind is AccessorKind.CUSTOM
        assert prop.getter.expression == "_id"

    def test_without_setter(self):
        prop = code.create_property("int", "Id").without_setter().build()
        assert prop.setter.kind is AccessorKind.NONE

    def test_missing_name_reported_before_type(self):
        with pytest.raises(MissingBuilderSettingError) as exc_info:
            PropertyBuilder().build()
        assert exc_info.value.setting == "name"

    def test_missing_type(self):
        with pytest.raises(MissingBuilderSettingError) as exc_info:
            PropertyBuilder().with_name("Id").build()
        assert exc_info.value.setting == "type"

    def test_auto_setter_without_getter_rejected(self):
        builder = code.create_property("int", "Id").without_getter().with_setter()
        with pytest.raises(InvalidSyntaxError) as exc_info:
            builder.build()
        assert exc_info.value.diagnostic == "CS8051"

    def test_auto_setter_with_auto_getter_accepted(self):
        builder = code.create_property("int", "Id").without_getter().with_setter()
        prop = builder.with_getter().build()
        assert prop.getter.kind is AccessorKind.DEFAULT
        assert prop.setter.kind is AccessorKind.DEFAULT

    def test_auto_setter_with_custom_getter_rejected(self):
        builder = code.create_property("int", "Id").with_getter("_id").with_setter()
        with pytest.raises(InvalidSyntaxError, match="custom getters"):
            builder.build()

    def test_default_value_with_custom_getter_rejected(self):
        builder = code.create_property("int", "Id").with_getter("_id").with_default_value("5")
        with pytest.raises(InvalidSyntaxError) as exc_info:
            builder.build()
        assert exc_info.value.diagnostic == "CS8050"

    def test_default_value_with_custom_setter_rejected(self):
        builder = (
            code.create_property("int", "Id")
            .with_getter()
            .with_setter("_id = value")
            .with_default_value("5")
        )
        with pytest.raises(InvalidSyntaxError, match="Only auto implemented properties"):
            builder.build()

    def test_default_value_with_auto_accessors_accepted(self):
        prop = code.create_property("string", "Name").with_default_value('"n/a"').build()
        assert prop.default_value == '"n/a"'

    def test_custom_getter_and_setter_accepted(self):
        prop = code.create_property("int", "Id").with_getter("_id").with_setter("_id = value").build()
        assert prop.setter.expression == "_id = value"

    def test_make_static(self):
        assert code.create_property("int", "Count").make_static().build().is_static is True

    @pytest.mark.parametrize("method", ["with_type", "with_name", "with_default_value", "with_summary"])
    def test_none_argument_rejected(self, method):
        with pytest.raises(InvalidArgumentError):
            getattr(PropertyBuilder(), method)(None)


# ---------------------------------------------------------------------------
# ConstructorBuilder
# ---------------------------------------------------------------------------


class TestConstructorBuilder:
    def test_owner_name_required(self):
        with pytest.raises(MissingBuilderSettingError) as exc_info:
            code.create_constructor().build()
        assert exc_info.value.entity == "constructor"

    def test_parameters_keep_order(self):
        builder = (
            code.create_constructor()
            .with_parameter("int", "id", "_id")
            .with_parameters(("string", "name"), ("bool", "active", "_active"))
        )
        ctor = builder._bind_to_type("User", False).build()
        assert ctor.parameters == (
            Parameter(type="int", name="id", receiving_member="_id"),
            Parameter(type="string", name="name"),
            Parameter(type="bool", name="active", receiving_member="_active"),
        )

    def test_none_parameter_rejected(self):
        with pytest.raises(InvalidArgumentError):
            code.create_constructor().with_parameter(None, "id")
        with pytest.raises(InvalidArgumentError):
            code.create_constructor().with_parameters(("int", "id"), None)

    def test_base_call(self):
        ctor = (
            code.create_constructor()
            .with_parameter("string", "name")
            .with_base_call("name", "42")
            ._bind_to_type("User", False)
            .build()
        )
        assert ctor.base_call_arguments == ("name", "42")

    def test_empty_base_call_differs_from_none(self):
        builder = ConstructorBuilder()._bind_to_type("User", False)
        assert builder.build().base_call_arguments is None
        assert builder.with_base_call().build().base_call_arguments == ()

    def test_none_base_argument_rejected(self):
        with pytest.raises(InvalidArgumentError):
            code.create_constructor().with_base_call("a", None)
