"""Builder for constructor declarations.

The owning type name and static flag are never set by callers; the class or
struct builder that owns the constructor assigns them when it is built.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from sharpcode.builders.base import SourceBuilder, is_blank, require
from sharpcode.errors import InvalidArgumentError, MissingBuilderSettingError
from sharpcode.model import AccessModifier, Constructor, Parameter


class ConstructorBuilder(SourceBuilder):
    """Provides functionality for building constructors."""

    def __init__(self, constructor: Constructor | None = None) -> None:
        self.constructor = constructor or Constructor()

    def with_access_modifier(self, access_modifier: AccessModifier) -> ConstructorBuilder:
        """Set the access modifier of the constructor being built."""
        self.constructor = self.constructor.with_(
            access_modifier=require(access_modifier, "access_modifier")
        )
        return self

    def with_summary(self, summary: str) -> ConstructorBuilder:
        """Add summary documentation to the constructor."""
        self.constructor = self.constructor.with_(summary=require(summary, "summary"))
        return self

    def with_parameter(
        self, type: str, name: str, receiving_member: Optional[str] = None
    ) -> ConstructorBuilder:
        """Append a parameter.

        Args:
            type: The parameter type.
            name: The parameter name.
            receiving_member: When given, the constructor body assigns the
                parameter to this member (``receiving_member = name;``).
        """
        parameter = Parameter(
            type=require(type, "type"),
            name=require(name, "name"),
            receiving_member=receiving_member,
        )
        self.constructor = self.constructor.with_(
            parameters=(*self.constructor.parameters, parameter)
        )
        return self

    def with_parameters(self, *parameters: Iterable[Optional[str]]) -> ConstructorBuilder:
        """Append several ``(type, name[, receiving_member])`` parameters."""
        for parameter in parameters:
            if parameter is None:
                raise InvalidArgumentError("parameters", "One of the parameters values is None.")
            self.with_parameter(*parameter)
        return self

    def with_base_call(self, *arguments: str) -> ConstructorBuilder:
        """Call the base constructor with the given argument expressions."""
        if any(argument is None for argument in arguments):
            raise InvalidArgumentError("arguments", "One of the arguments values is None.")
        self.constructor = self.constructor.with_(base_call_arguments=tuple(arguments))
        return self

    # -- Owner-assigned settings --------------------------------------------

    def _bind_to_type(self, class_name: str, is_static: bool) -> ConstructorBuilder:
        self.constructor = self.constructor.with_(class_name=class_name, is_static=is_static)
        return self

    def build(self) -> Constructor:
        if is_blank(self.constructor.class_name):
            raise MissingBuilderSettingError("constructor", "class name")
        for parameter in self.constructor.parameters:
            if is_blank(parameter.type):
                raise MissingBuilderSettingError("parameter", "type")
            if is_blank(parameter.name):
                raise MissingBuilderSettingError("parameter", "name")
        return self.constructor
