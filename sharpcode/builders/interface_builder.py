"""Builder for interface declarations."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require, require_all
from sharpcode.builders.property_builder import PropertyBuilder
from sharpcode.errors import MissingBuilderSettingError
from sharpcode.model import AccessModifier, Interface


class InterfaceBuilder(SourceBuilder):
    """Provides functionality for building interfaces.

    Interface properties are declared like class properties; an interface
    property usually keeps ``AccessModifier.NONE`` so no keyword is emitted.
    """

    def __init__(self, interface: Interface | None = None) -> None:
        self.interface = interface or Interface()
        self.properties: list[PropertyBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> InterfaceBuilder:
        self.interface = self.interface.with_(
            access_modifier=require(access_modifier, "access_modifier")
        )
        return self

    def with_name(self, name: str) -> InterfaceBuilder:
        self.interface = self.interface.with_(name=require(name, "name"))
        return self

    def with_implemented_interface(self, name: str) -> InterfaceBuilder:
        """Add an interface that the interface being built extends."""
        require(name, "name")
        if name not in self.interface.implemented_interfaces:
            self.interface = self.interface.with_(
                implemented_interfaces=(*self.interface.implemented_interfaces, name)
            )
        return self

    def with_summary(self, summary: str) -> InterfaceBuilder:
        self.interface = self.interface.with_(summary=require(summary, "summary"))
        return self

    def with_property(self, builder: PropertyBuilder) -> InterfaceBuilder:
        self.properties.append(require(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> InterfaceBuilder:
        self.properties.extend(require_all(builders, "builders"))
        return self

    def build(self) -> Interface:
        if is_blank(self.interface.name):
            raise MissingBuilderSettingError("interface", "name")
        return self.interface.with_(
            properties=tuple(builder.build() for builder in self.properties)
        )
