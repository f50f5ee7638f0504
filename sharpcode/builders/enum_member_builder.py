"""Builder for enumeration members."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require
from sharpcode.errors import InvalidArgumentError, MissingBuilderSettingError
from sharpcode.model import EnumerationMember


class EnumMemberBuilder(SourceBuilder):
    """Provides functionality for building enumeration members."""

    def __init__(self, member: EnumerationMember | None = None) -> None:
        self.member = member or EnumerationMember()

    def with_name(self, name: str) -> EnumMemberBuilder:
        self.member = self.member.with_(name=require(name, "name"))
        return self

    def with_value(self, value: int) -> EnumMemberBuilder:
        """Set the explicit integral value of the member."""
        if value is None or isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("value", "The argument 'value' must be an integer.")
        self.member = self.member.with_(value=value)
        return self

    def with_summary(self, summary: str) -> EnumMemberBuilder:
        self.member = self.member.with_(summary=require(summary, "summary"))
        return self

    def build(self) -> EnumerationMember:
        if is_blank(self.member.name):
            raise MissingBuilderSettingError("enum member", "name")
        return self.member
