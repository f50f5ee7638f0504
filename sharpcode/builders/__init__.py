"""Fluent builders producing the IR values in ``sharpcode.model``."""

from sharpcode.builders.base import SourceBuilder
from sharpcode.builders.class_builder import ClassBuilder
from sharpcode.builders.constructor_builder import ConstructorBuilder
from sharpcode.builders.enum_builder import EnumBuilder
from sharpcode.builders.enum_member_builder import EnumMemberBuilder
from sharpcode.builders.field_builder import FieldBuilder
from sharpcode.builders.interface_builder import InterfaceBuilder
from sharpcode.builders.introspection import Comparison, HasMembers, ignore_case, ordinal
from sharpcode.builders.namespace_builder import NamespaceBuilder
from sharpcode.builders.property_builder import PropertyBuilder
from sharpcode.builders.struct_builder import StructBuilder

__all__ = [
    "ClassBuilder",
    "Comparison",
    "ConstructorBuilder",
    "EnumBuilder",
    "EnumMemberBuilder",
    "FieldBuilder",
    "HasMembers",
    "InterfaceBuilder",
    "NamespaceBuilder",
    "PropertyBuilder",
    "SourceBuilder",
    "StructBuilder",
    "ignore_case",
    "ordinal",
]
