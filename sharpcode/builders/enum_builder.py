"""Builder for enumerations.

Flags enumerations get bitmask values assigned automatically when none of
their members carries an explicit value: the first member becomes ``0`` and
each following member the next power of two (``1, 2, 4, 8, ...``).  A single
explicit value anywhere switches this off for the whole enumeration.
"""

from __future__ import annotations

from collections import Counter

from sharpcode.builders.base import SourceBuilder, is_blank, require, require_all
from sharpcode.builders.enum_member_builder import EnumMemberBuilder
from sharpcode.builders.introspection import Comparison, HasMembers, contains_name, ignore_case
from sharpcode.errors import InvalidSyntaxError, MissingBuilderSettingError
from sharpcode.model import AccessModifier, Enumeration, MemberType


class EnumBuilder(SourceBuilder, HasMembers):
    """Provides functionality for building enumerations."""

    def __init__(self, enum: Enumeration | None = None) -> None:
        self.enum = enum or Enumeration()
        self.members: list[EnumMemberBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> EnumBuilder:
        self.enum = self.enum.with_(access_modifier=require(access_modifier, "access_modifier"))
        return self

    def with_name(self, name: str) -> EnumBuilder:
        self.enum = self.enum.with_(name=require(name, "name"))
        return self

    def with_member(self, builder: EnumMemberBuilder) -> EnumBuilder:
        self.members.append(require(builder, "builder"))
        return self

    def with_members(self, *builders: EnumMemberBuilder) -> EnumBuilder:
        """Add several members; accepts varargs or a single iterable."""
        self.members.extend(require_all(builders, "builders"))
        return self

    def make_flags(self, make_flags: bool = True) -> EnumBuilder:
        """Set whether the enumeration is a flags enumeration.

        Flags enumerations render with the flags attribute and receive
        automatic bitmask values (see the module docstring).
        """
        self.enum = self.enum.with_(is_flags=make_flags)
        return self

    def with_summary(self, summary: str) -> EnumBuilder:
        self.enum = self.enum.with_(summary=require(summary, "summary"))
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType = MemberType.ANY,
        comparison: Comparison = ignore_case,
    ) -> bool:
        if member_type not in (MemberType.ANY, MemberType.ENUM_MEMBER):
            require(name, "name")
            return False
        return contains_name((builder.member.name for builder in self.members), name, comparison)

    def build(self) -> Enumeration:
        if is_blank(self.enum.name):
            raise MissingBuilderSettingError("enum", "name")

        members = [builder.build() for builder in self.members]
        if self.enum.is_flags and all(member.value is None for member in members):
            members = [
                member.with_(value=_flag_value(index)) for index, member in enumerate(members)
            ]

        duplicates = [name for name, count in Counter(m.name for m in members).items() if count > 1]
        if duplicates:
            raise InvalidSyntaxError(
                f"The enum '{self.enum.name}' already contains a definition for '{duplicates[0]}'."
            )
        return self.enum.with_(members=tuple(members))


def _flag_value(index: int) -> int:
    return 0 if index == 0 else 1 << (index - 1)
