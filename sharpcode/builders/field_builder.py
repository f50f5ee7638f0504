"""Builder for field declarations."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require
from sharpcode.errors import MissingBuilderSettingError
from sharpcode.model import AccessModifier, Field


class FieldBuilder(SourceBuilder):
    """Provides functionality for building fields.

    A fresh builder holds a private field with nothing else configured.
    """

    def __init__(self, field: Field | None = None) -> None:
        self.field = field or Field()

    def with_access_modifier(self, access_modifier: AccessModifier) -> FieldBuilder:
        """Set the access modifier of the field being built."""
        self.field = self.field.with_(access_modifier=require(access_modifier, "access_modifier"))
        return self

    def with_type(self, type: str) -> FieldBuilder:
        """Set the type of the field being built."""
        self.field = self.field.with_(type=require(type, "type"))
        return self

    def with_name(self, name: str) -> FieldBuilder:
        """Set the name of the field being built."""
        self.field = self.field.with_(name=require(name, "name"))
        return self

    def make_readonly(self, make_readonly: bool = True) -> FieldBuilder:
        """Set whether the field being built is readonly."""
        self.field = self.field.with_(is_readonly=make_readonly)
        return self

    def with_summary(self, summary: str) -> FieldBuilder:
        """Add summary documentation to the field."""
        self.field = self.field.with_(summary=require(summary, "summary"))
        return self

    def build(self) -> Field:
        if is_blank(self.field.type):
            raise MissingBuilderSettingError("field", "type")
        if is_blank(self.field.name):
            raise MissingBuilderSettingError("field", "name")
        return self.field
