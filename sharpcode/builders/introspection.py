"""Member introspection for container builders.

Container builders (classes, structs, enums) can answer whether a member
with a given name and kind has been attached so far.  The query looks at the
child builders as they are configured right now, not at a built value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Optional

from sharpcode.errors import InvalidArgumentError
from sharpcode.model import MemberType

Comparison = Callable[[str, str], bool]


def ignore_case(left: str, right: str) -> bool:
    """Case-insensitive, culture-invariant name comparison."""
    return left.casefold() == right.casefold()


def ordinal(left: str, right: str) -> bool:
    """Exact, case-sensitive name comparison."""
    return left == right


class HasMembers(ABC):
    """Exposes introspection data about the members of a builder."""

    @abstractmethod
    def has_member(
        self,
        name: str,
        member_type: MemberType = MemberType.ANY,
        comparison: Comparison = ignore_case,
    ) -> bool:
        """Check whether the described member exists.

        Args:
            name: The name of the member.
            member_type: The kind of member.  By default every member kind the
                builder knows about is taken into account.
            comparison: How the described name is compared against the names
                of the actual members.  By default casing is ignored.
        """


def contains_name(names: Iterable[Optional[str]], name: str, comparison: Comparison) -> bool:
    """Return True if any configured name matches *name*.

    Names that were never configured (``None``) never match.
    """
    if name is None:
        raise InvalidArgumentError("name")
    return any(candidate is not None and comparison(candidate, name) for candidate in names)
