"""Immutable intermediate representation of C# declarations.

Each model describes one syntactic construct.  Values are frozen: the only
way to "change" one is ``with_``, which returns a copy with selected fields
overridden.  Builders hold these values while they are being configured and
hand out finalised trees from ``build()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field as ModelField

from sharpcode.errors import InvalidArgumentError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AccessModifier(str, Enum):
    """Access level of a declaration."""
    NONE = "none"
    PRIVATE = "private"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PUBLIC = "public"
    PRIVATE_PROTECTED = "private protected"
    PROTECTED_INTERNAL = "protected internal"


class MemberType(str, Enum):
    """Kinds of members a container can be asked about."""
    ANY = "any"
    INTERFACE = "interface"
    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"
    ENUM_MEMBER = "enum_member"
    FIELD = "field"
    PROPERTY = "property"


class AccessorKind(str, Enum):
    """Configuration state of a property getter or setter."""
    UNCONFIGURED = "unconfigured"
    NONE = "none"
    DEFAULT = "default"
    CUSTOM = "custom"


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

_S = TypeVar("_S", bound="Structure")


class Structure(BaseModel):
    """Common behaviour of every IR value."""

    model_config = ConfigDict(frozen=True)

    def with_(self: _S, **changes: Any) -> _S:
        """Return a copy with the given fields replaced.

        Fields that are not named keep their current value.
        """
        unknown = sorted(set(changes) - set(type(self).model_fields))
        if unknown:
            raise InvalidArgumentError(
                unknown[0], f"'{type(self).__name__}' has no field named '{unknown[0]}'."
            )
        return self.model_copy(update=changes)


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

class Accessor(Structure):
    """A property getter or setter in one of its four states."""
    kind: AccessorKind = ModelField(default=AccessorKind.UNCONFIGURED)
    expression: Optional[str] = ModelField(
        default=None, description="Expression or block body of a custom accessor"
    )

    @classmethod
    def unconfigured(cls) -> "Accessor":
        return cls()

    @classmethod
    def none(cls) -> "Accessor":
        return cls(kind=AccessorKind.NONE)

    @classmethod
    def default(cls) -> "Accessor":
        return cls(kind=AccessorKind.DEFAULT)

    @classmethod
    def custom(cls, expression: Optional[str]) -> "Accessor":
        """A custom accessor; a blank expression collapses to the default one."""
        if expression is None or not expression.strip():
            return cls.default()
        return cls(kind=AccessorKind.CUSTOM, expression=expression)

    @property
    def is_present(self) -> bool:
        return self.kind is not AccessorKind.NONE


class Field(Structure):
    """A field declaration."""
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PRIVATE)
    is_readonly: bool = ModelField(default=False)
    type: Optional[str] = ModelField(default=None, description="Type name, e.g. 'int'")
    name: Optional[str] = ModelField(default=None, description="Field identifier")
    summary: Optional[str] = ModelField(default=None, description="Summary documentation")


class Property(Structure):
    """A property declaration.

    ``getter`` and ``setter`` hold the configured accessor states.  The
    ``effective_*`` properties resolve ``UNCONFIGURED`` into what is
    actually emitted.
    """
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    is_static: bool = ModelField(default=False)
    type: Optional[str] = ModelField(default=None)
    name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    default_value: Optional[str] = ModelField(
        default=None, description="Initializer expression, used as-is"
    )
    getter: Accessor = ModelField(default_factory=Accessor.unconfigured)
    setter: Accessor = ModelField(default_factory=Accessor.unconfigured)

    @property
    def effective_getter(self) -> Accessor:
        if self.getter.kind is not AccessorKind.UNCONFIGURED:
            return self.getter
        if self.setter.kind is AccessorKind.CUSTOM:
            return Accessor.none()
        return Accessor.default()

    @property
    def effective_setter(self) -> Accessor:
        if self.setter.kind is not AccessorKind.UNCONFIGURED:
            return self.setter
        # An auto setter is only legal next to an auto getter.
        if self.effective_getter.kind is AccessorKind.DEFAULT:
            return Accessor.default()
        return Accessor.none()

    @property
    def has_accessors(self) -> bool:
        return self.effective_getter.is_present or self.effective_setter.is_present


class Parameter(Structure):
    """A constructor parameter, optionally assigned into a member."""
    type: str = ModelField(..., description="Parameter type")
    name: str = ModelField(..., description="Parameter identifier")
    receiving_member: Optional[str] = ModelField(
        default=None, description="Member the constructor body assigns this parameter to"
    )


class Constructor(Structure):
    """A constructor declaration.

    ``class_name`` and ``is_static`` are owned by the enclosing type and are
    filled in when that type is built.
    """
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    is_static: bool = ModelField(default=False)
    class_name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    parameters: tuple[Parameter, ...] = ModelField(default=())
    base_call_arguments: Optional[tuple[str, ...]] = ModelField(
        default=None, description="Arguments of ': base(...)'; None means no base call"
    )


class EnumerationMember(Structure):
    """A single enumeration member."""
    name: Optional[str] = ModelField(default=None)
    value: Optional[int] = ModelField(default=None, description="Explicit integral value")
    summary: Optional[str] = ModelField(default=None)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

class Class(Structure):
    """A class declaration and its members."""
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    is_static: bool = ModelField(default=False)
    name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    inherited_class: Optional[str] = ModelField(default=None, description="Base class name")
    implemented_interfaces: tuple[str, ...] = ModelField(default=())
    fields: tuple[Field, ...] = ModelField(default=())
    properties: tuple[Property, ...] = ModelField(default=())
    constructors: tuple[Constructor, ...] = ModelField(default=())

    @property
    def inheritance(self) -> tuple[str, ...]:
        """Base class first, then the implemented interfaces."""
        if self.inherited_class:
            return (self.inherited_class, *self.implemented_interfaces)
        return self.implemented_interfaces


class Struct(Structure):
    """A struct declaration and its members."""
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    implemented_interfaces: tuple[str, ...] = ModelField(default=())
    fields: tuple[Field, ...] = ModelField(default=())
    properties: tuple[Property, ...] = ModelField(default=())
    constructors: tuple[Constructor, ...] = ModelField(default=())


class Interface(Structure):
    """An interface declaration and its properties."""
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    implemented_interfaces: tuple[str, ...] = ModelField(default=())
    properties: tuple[Property, ...] = ModelField(default=())


class Enumeration(Structure):
    """An enum declaration and its members."""
    access_modifier: AccessModifier = ModelField(default=AccessModifier.PUBLIC)
    name: Optional[str] = ModelField(default=None)
    summary: Optional[str] = ModelField(default=None)
    is_flags: bool = ModelField(default=False)
    members: tuple[EnumerationMember, ...] = ModelField(default=())


class Namespace(Structure):
    """A namespace with its using directives and nested declarations."""
    name: Optional[str] = ModelField(default=None)
    usings: tuple[str, ...] = ModelField(default=())
    classes: tuple[Class, ...] = ModelField(default=())
    structs: tuple[Struct, ...] = ModelField(default=())
    interfaces: tuple[Interface, ...] = ModelField(default=())
    enums: tuple[Enumeration, ...] = ModelField(default=())
