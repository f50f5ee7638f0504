"""SharpCode configuration.

Typed configuration for rendering and formatting.  All settings use Pydantic
v2 models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


_NEWLINES = {"lf": "\n", "crlf": "\r\n"}


class FormatterConfig(BaseModel):
    """Layout knobs for the default source formatter."""

    indent_size: int = Field(default=4, ge=1, description="Spaces per indentation level")
    use_tabs: bool = Field(default=False, description="Indent with one tab per level")
    newline: Literal["\n", "\r\n"] = Field(default="\n", description="Line separator")

    @property
    def indent(self) -> str:
        """The text inserted once per indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size


class RenderConfig(BaseModel):
    """Settings for the template renderer."""

    flags_attribute: str = Field(
        default="System.Flags", description="Attribute placed on flags enumerations"
    )
    template_dir: Optional[Path] = Field(
        default=None, description="Directory overriding the bundled templates"
    )


class Config(BaseModel):
    """Global SharpCode configuration.

    Instances are usually created once (see ``from_env``) and handed to a
    ``TemplateRenderer``, which passes the relevant parts on to the
    formatter.
    """

    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SHARPCODE_INDENT_SIZE, SHARPCODE_USE_TABS, SHARPCODE_NEWLINE
            (``lf`` or ``crlf``), SHARPCODE_FLAGS_ATTRIBUTE,
            SHARPCODE_TEMPLATE_DIR.
        """
        formatter_kwargs: dict[str, Any] = {}
        if os.environ.get("SHARPCODE_INDENT_SIZE"):
            formatter_kwargs["indent_size"] = int(os.environ["SHARPCODE_INDENT_SIZE"])
        if os.environ.get("SHARPCODE_USE_TABS"):
            formatter_kwargs["use_tabs"] = os.environ["SHARPCODE_USE_TABS"].lower() in {
                "1",
                "true",
                "yes",
            }
        if os.environ.get("SHARPCODE_NEWLINE"):
            newline = os.environ["SHARPCODE_NEWLINE"].lower()
            formatter_kwargs["newline"] = _NEWLINES.get(newline, newline)

        render_kwargs: dict[str, Any] = {}
        if os.environ.get("SHARPCODE_FLAGS_ATTRIBUTE"):
            render_kwargs["flags_attribute"] = os.environ["SHARPCODE_FLAGS_ATTRIBUTE"]
        if os.environ.get("SHARPCODE_TEMPLATE_DIR"):
            render_kwargs["template_dir"] = Path(os.environ["SHARPCODE_TEMPLATE_DIR"])

        return cls(
            formatter=FormatterConfig(**formatter_kwargs),
            render=RenderConfig(**render_kwargs),
        )
