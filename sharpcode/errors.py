"""Exceptions raised while configuring, building and rendering structures.

Every failure is surfaced to the direct caller as the outcome of the call
that triggered it.  Nothing is retried and no partial result is returned.
"""

from __future__ import annotations

from typing import Optional


class SharpCodeError(Exception):
    """Base class for every error raised by SharpCode."""


class InvalidArgumentError(SharpCodeError, ValueError):
    """Raised when a configuration call receives a missing or invalid argument."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"The argument '{argument}' must be provided.")


class MissingBuilderSettingError(SharpCodeError):
    """Raised by ``build()`` when a required setting was never configured."""

    def __init__(self, entity: str, setting: str) -> None:
        self.entity = entity
        self.setting = setting
        super().__init__(
            f"Providing the {setting} of the {entity} is required when building a {entity}."
        )


class InvalidSyntaxError(SharpCodeError):
    """Raised by ``build()`` when the configuration would produce illegal C#."""

    def __init__(self, message: str, diagnostic: Optional[str] = None) -> None:
        self.diagnostic = diagnostic
        if diagnostic:
            message = f"{message} ({diagnostic})"
        super().__init__(message)
