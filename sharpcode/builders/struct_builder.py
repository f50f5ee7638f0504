"""Builder for struct declarations."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require, require_all
from sharpcode.builders.constructor_builder import ConstructorBuilder
from sharpcode.builders.field_builder import FieldBuilder
from sharpcode.builders.introspection import Comparison, HasMembers, contains_name, ignore_case
from sharpcode.builders.property_builder import PropertyBuilder
from sharpcode.errors import MissingBuilderSettingError
from sharpcode.model import AccessModifier, MemberType, Struct


class StructBuilder(SourceBuilder, HasMembers):
    """Provides functionality for building structs."""

    def __init__(self, struct: Struct | None = None) -> None:
        self.struct = struct or Struct()
        self.fields: list[FieldBuilder] = []
        self.properties: list[PropertyBuilder] = []
        self.constructors: list[ConstructorBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> StructBuilder:
        self.struct = self.struct.with_(access_modifier=require(access_modifier, "access_modifier"))
        return self

    def with_name(self, name: str) -> StructBuilder:
        self.struct = self.struct.with_(name=require(name, "name"))
        return self

    def with_implemented_interface(self, name: str) -> StructBuilder:
        require(name, "name")
        if name not in self.struct.implemented_interfaces:
            self.struct = self.struct.with_(
                implemented_interfaces=(*self.struct.implemented_interfaces, name)
            )
        return self

    def with_summary(self, summary: str) -> StructBuilder:
        self.struct = self.struct.with_(summary=require(summary, "summary"))
        return self

    def with_field(self, builder: FieldBuilder) -> StructBuilder:
        self.fields.append(require(builder, "builder"))
        return self

    def with_fields(self, *builders: FieldBuilder) -> StructBuilder:
        self.fields.extend(require_all(builders, "builders"))
        return self

    def with_property(self, builder: PropertyBuilder) -> StructBuilder:
        self.properties.append(require(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> StructBuilder:
        self.properties.extend(require_all(builders, "builders"))
        return self

    def with_constructor(self, builder: ConstructorBuilder) -> StructBuilder:
        self.constructors.append(require(builder, "builder"))
        return self

    def with_constructors(self, *builders: ConstructorBuilder) -> StructBuilder:
        self.constructors.extend(require_all(builders, "builders"))
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType = MemberType.ANY,
        comparison: Comparison = ignore_case,
    ) -> bool:
        names: list[str | None] = []
        if member_type in (MemberType.ANY, MemberType.FIELD):
            names.extend(builder.field.name for builder in self.fields)
        if member_type in (MemberType.ANY, MemberType.PROPERTY):
            names.extend(builder.property.name for builder in self.properties)
        return contains_name(names, name, comparison)

    def build(self) -> Struct:
        if is_blank(self.struct.name):
            raise MissingBuilderSettingError("struct", "name")

        return self.struct.with_(
            fields=tuple(builder.build() for builder in self.fields),
            properties=tuple(builder.build() for builder in self.properties),
            constructors=tuple(
                builder._bind_to_type(self.struct.name, False).build()
                for builder in self.constructors
            ),
        )
