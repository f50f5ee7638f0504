"""Factory functions for creating builders.

Each ``create_*`` function returns a fresh builder with the given settings
already applied.  Arguments left as ``None`` are simply not configured, so
``create_class()`` and ``ClassBuilder()`` are equivalent.
"""

from __future__ import annotations

from typing import Optional

from sharpcode.builders import (
    ClassBuilder,
    ConstructorBuilder,
    EnumBuilder,
    EnumMemberBuilder,
    FieldBuilder,
    InterfaceBuilder,
    NamespaceBuilder,
    PropertyBuilder,
    StructBuilder,
)
from sharpcode.model import AccessModifier


def create_namespace(name: Optional[str] = None) -> NamespaceBuilder:
    builder = NamespaceBuilder()
    if name is not None:
        builder.with_name(name)
    return builder


def create_class(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> ClassBuilder:
    """Create a class builder, e.g. ``create_class("User")``."""
    builder = ClassBuilder().with_access_modifier(access_modifier)
    if name is not None:
        builder.with_name(name)
    return builder


def create_struct(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> StructBuilder:
    builder = StructBuilder().with_access_modifier(access_modifier)
    if name is not None:
        builder.with_name(name)
    return builder


def create_interface(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> InterfaceBuilder:
    builder = InterfaceBuilder().with_access_modifier(access_modifier)
    if name is not None:
        builder.with_name(name)
    return builder


def create_enum(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> EnumBuilder:
    builder = EnumBuilder().with_access_modifier(access_modifier)
    if name is not None:
        builder.with_name(name)
    return builder


def create_enum_member(name: Optional[str] = None, value: Optional[int] = None) -> EnumMemberBuilder:
    builder = EnumMemberBuilder()
    if name is not None:
        builder.with_name(name)
    if value is not None:
        builder.with_value(value)
    return builder


def create_field(
    type: Optional[str] = None,
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PRIVATE,
) -> FieldBuilder:
    """Create a field builder, e.g. ``create_field("int", "_id")``."""
    builder = FieldBuilder().with_access_modifier(access_modifier)
    if type is not None:
        builder.with_type(type)
    if name is not None:
        builder.with_name(name)
    return builder


def create_property(
    type: Optional[str] = None,
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> PropertyBuilder:
    """Create a property builder, e.g. ``create_property("string", "Name")``."""
    builder = PropertyBuilder().with_access_modifier(access_modifier)
    if type is not None:
        builder.with_type(type)
    if name is not None:
        builder.with_name(name)
    return builder


def create_constructor(
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> ConstructorBuilder:
    return ConstructorBuilder().with_access_modifier(access_modifier)
