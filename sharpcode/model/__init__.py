"""Frozen IR values describing C# declarations."""

from sharpcode.model.structures import (
    AccessModifier,
    Accessor,
    AccessorKind,
    Class,
    Constructor,
    Enumeration,
    EnumerationMember,
    Field,
    Interface,
    MemberType,
    Namespace,
    Parameter,
    Property,
    Struct,
    Structure,
)

__all__ = [
    "AccessModifier",
    "Accessor",
    "AccessorKind",
    "Class",
    "Constructor",
    "Enumeration",
    "EnumerationMember",
    "Field",
    "Interface",
    "MemberType",
    "Namespace",
    "Parameter",
    "Property",
    "Struct",
    "Structure",
]
