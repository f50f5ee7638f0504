"""Shared plumbing for the fluent builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Optional, TypeVar

from sharpcode.errors import InvalidArgumentError
from sharpcode.model import Structure
from sharpcode.renderer import to_source_code

_T = TypeVar("_T")


class SourceBuilder(ABC):
    """A mutable builder that finalises into an IR value.

    Builders are **not** immutable and not safe for concurrent use: every
    setter replaces the held value and returns the same builder.
    """

    @abstractmethod
    def build(self) -> Structure:
        """Validate the configuration and return the finalised IR value."""

    def to_source_code(self, formatted: bool = True) -> str:
        """Return the source code of the built structure.

        Args:
            formatted: Whether to pass the output through the formatter.
        """
        return to_source_code(self.build(), formatted=formatted)

    def __str__(self) -> str:
        return self.to_source_code()


def require(value: _T, argument: str) -> _T:
    """Reject a missing argument at the call site."""
    if value is None:
        raise InvalidArgumentError(argument)
    return value


def require_all(items: tuple[Any, ...], argument: str) -> list[Any]:
    """Flatten varargs-or-iterable input and reject ``None`` elements.

    ``with_fields(a, b)`` and ``with_fields([a, b])`` are both accepted.
    """
    if len(items) == 1 and items[0] is not None and not isinstance(items[0], (str, SourceBuilder)):
        if isinstance(items[0], Iterable):
            items = tuple(items[0])
    if any(item is None for item in items):
        raise InvalidArgumentError(
            argument, f"One of the {argument} parameter values is None."
        )
    return list(items)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
