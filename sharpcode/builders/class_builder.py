"""Builder for class declarations."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require, require_all
from sharpcode.builders.constructor_builder import ConstructorBuilder
from sharpcode.builders.field_builder import FieldBuilder
from sharpcode.builders.introspection import Comparison, HasMembers, contains_name, ignore_case
from sharpcode.builders.property_builder import PropertyBuilder
from sharpcode.errors import InvalidSyntaxError, MissingBuilderSettingError
from sharpcode.model import AccessModifier, Class, MemberType


class ClassBuilder(SourceBuilder, HasMembers):
    """Provides functionality for building classes.

    Fields, properties and constructors are held as builders until the class
    itself is built, so they can still be changed after being attached.
    """

    def __init__(self, cls: Class | None = None) -> None:
        self.cls = cls or Class()
        self.fields: list[FieldBuilder] = []
        self.properties: list[PropertyBuilder] = []
        self.constructors: list[ConstructorBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> ClassBuilder:
        """Set the access modifier of the class being built."""
        self.cls = self.cls.with_(access_modifier=require(access_modifier, "access_modifier"))
        return self

    def with_name(self, name: str) -> ClassBuilder:
        """Set the name of the class being built."""
        self.cls = self.cls.with_(name=require(name, "name"))
        return self

    def with_inherited_class(self, name: str) -> ClassBuilder:
        """Set the class that the class being built inherits from."""
        self.cls = self.cls.with_(inherited_class=require(name, "name"))
        return self

    def with_implemented_interface(self, name: str) -> ClassBuilder:
        """Add an interface that the class being built implements.

        Adding the same interface twice has no further effect.
        """
        require(name, "name")
        if name not in self.cls.implemented_interfaces:
            self.cls = self.cls.with_(
                implemented_interfaces=(*self.cls.implemented_interfaces, name)
            )
        return self

    def with_summary(self, summary: str) -> ClassBuilder:
        """Add summary documentation to the class."""
        self.cls = self.cls.with_(summary=require(summary, "summary"))
        return self

    # -- Members ------------------------------------------------------------

    def with_field(self, builder: FieldBuilder) -> ClassBuilder:
        self.fields.append(require(builder, "builder"))
        return self

    def with_fields(self, *builders: FieldBuilder) -> ClassBuilder:
        """Add several fields; accepts varargs or a single iterable."""
        self.fields.extend(require_all(builders, "builders"))
        return self

    def with_property(self, builder: PropertyBuilder) -> ClassBuilder:
        self.properties.append(require(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> ClassBuilder:
        """Add several properties; accepts varargs or a single iterable."""
        self.properties.extend(require_all(builders, "builders"))
        return self

    def with_constructor(self, builder: ConstructorBuilder) -> ClassBuilder:
        self.constructors.append(require(builder, "builder"))
        return self

    def with_constructors(self, *builders: ConstructorBuilder) -> ClassBuilder:
        """Add several constructors; accepts varargs or a single iterable."""
        self.constructors.extend(require_all(builders, "builders"))
        return self

    def make_static(self, make_static: bool = True) -> ClassBuilder:
        """Set whether the class being built is static."""
        self.cls = self.cls.with_(is_static=make_static)
        return self

    # -- Introspection ------------------------------------------------------

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

    # -- Build --------------------------------------------------------------

    def build(self) -> Class:
        if is_blank(self.cls.name):
            raise MissingBuilderSettingError("class", "name")
        if self.cls.is_static and len(self.constructors) > 1:
            raise InvalidSyntaxError("Static classes can have only 1 constructor.")

        return self.cls.with_(
            fields=tuple(builder.build() for builder in self.fields),
            properties=tuple(builder.build() for builder in self.properties),
            constructors=tuple(
                builder._bind_to_type(self.cls.name, self.cls.is_static).build()
                for builder in self.constructors
            ),
        )
