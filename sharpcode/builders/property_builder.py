"""Builder for property declarations.

Getter and setter each carry one of four states (see ``AccessorKind``):
never configured, explicitly removed, auto-implemented, or a custom
expression/block.  ``build()`` rejects the combinations C# does not allow.
"""

from __future__ import annotations

from typing import Optional

from sharpcode.builders.base import SourceBuilder, is_blank, require
from sharpcode.errors import InvalidSyntaxError, MissingBuilderSettingError
from sharpcode.model import AccessModifier, Accessor, AccessorKind, Property


class PropertyBuilder(SourceBuilder):
    """Provides functionality for building properties."""

    def __init__(self, property: Property | None = None) -> None:
        self.property = property or Property()

    def with_access_modifier(self, access_modifier: AccessModifier) -> PropertyBuilder:
        """Set the access modifier of the property being built."""
        self.property = self.property.with_(
            access_modifier=require(access_modifier, "access_modifier")
        )
        return self

    def with_type(self, type: str) -> PropertyBuilder:
        """Set the type of the property being built."""
        self.property = self.property.with_(type=require(type, "type"))
        return self

    def with_name(self, name: str) -> PropertyBuilder:
        """Set the name of the property being built."""
        self.property = self.property.with_(name=require(name, "name"))
        return self

    def with_getter(self, expression: Optional[str] = None) -> PropertyBuilder:
        """Set the getter logic of the property being built.

        Without an expression the auto-implemented ``get;`` is used.  An
        expression renders as ``get => expression;``; an expression starting
        with ``{`` is used as the block body, e.g. ``get { return _id; }``.
        """
        self.property = self.property.with_(getter=Accessor.custom(expression))
        return self

    def without_getter(self) -> PropertyBuilder:
        """Specify that the property being built has no getter."""
        self.property = self.property.with_(getter=Accessor.none())
        return self

    def with_setter(self, expression: Optional[str] = None) -> PropertyBuilder:
        """Set the setter logic of the property being built.

        Works like ``with_getter``; custom logic can use ``value``, e.g.
        ``with_setter("_id = value")``.
        """
        self.property = self.property.with_(setter=Accessor.custom(expression))
        return self

    def without_setter(self) -> PropertyBuilder:
        """Specify that the property being built has no setter."""
        self.property = self.property.with_(setter=Accessor.none())
        return self

    def with_default_value(self, default_value: str) -> PropertyBuilder:
        """Set the initializer of the property being built.

        The value is used as-is, so string values must carry their own quotes,
        e.g. ``with_default_value('"text"')``.
        """
        self.property = self.property.with_(
            default_value=require(default_value, "default_value")
        )
        return self

    def make_static(self, make_static: bool = True) -> PropertyBuilder:
        """Set whether the property being built is static."""
        self.property = self.property.with_(is_static=make_static)
        return self

    def with_summary(self, summary: str) -> PropertyBuilder:
        """Add summary documentation to the property."""
        self.property = self.property.with_(summary=require(summary, "summary"))
        return self

    def build(self) -> Property:
        prop = self.property
        if is_blank(prop.name):
            raise MissingBuilderSettingError("property", "name")
        if is_blank(prop.type):
            raise MissingBuilderSettingError("property", "type")

        getter, setter = prop.getter.kind, prop.setter.kind
        if setter is AccessorKind.DEFAULT and getter is AccessorKind.NONE:
            raise InvalidSyntaxError(
                "Properties with auto implemented setters must also have auto implemented getters.",
                diagnostic="CS8051",
            )
        if setter is AccessorKind.DEFAULT and getter is AccessorKind.CUSTOM:
            raise InvalidSyntaxError(
                "Properties with custom getters cannot have auto implemented setters."
            )
        if prop.default_value is not None and AccessorKind.CUSTOM in (getter, setter):
            raise InvalidSyntaxError(
                "Only auto implemented properties can have a default value.",
                diagnostic="CS8050",
            )
        return prop
