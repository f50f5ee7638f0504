"""Console helpers for looking at generated source code.

Provides Rich-based printing of rendered C# with syntax highlighting and
coloured status lines.  Nothing in the builders or the renderer prints; these
helpers are for scripts and interactive sessions.
"""

from __future__ import annotations

from typing import Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from sharpcode.builders.base import SourceBuilder
from sharpcode.errors import SharpCodeError
from sharpcode.model import Structure
from sharpcode.renderer import to_source_code

console = Console()

Source = Union[str, SourceBuilder, Structure]


# ---------------------------------------------------------------------------
# Source output
# ---------------------------------------------------------------------------


def render_source(source: Source) -> str:
    """Return formatted source text for a string, builder or IR value."""
    if isinstance(source, str):
        return source
    if isinstance(source, SourceBuilder):
        return source.to_source_code()
    return to_source_code(source)


def print_source(source: Source, title: Optional[str] = None) -> None:
    """Print C# source inside a panel with syntax highlighting.

    Args:
        source: Rendered text, a builder, or an IR value.  Builders and IR
            values are rendered formatted.
        title: Optional panel title.
    """
    syntax = Syntax(render_source(source).rstrip("\n"), "csharp", line_numbers=False)
    console.print(Panel(syntax, title=title, border_style="cyan", expand=False))


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------


def describe_error(error: SharpCodeError) -> str:
    """Format an error as ``[ErrorClass] message``."""
    return f"[{type(error).__name__}] {error}"


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: Union[str, SharpCodeError]) -> None:
    """Print a red error message; errors are passed through ``describe_error``."""
    if isinstance(message, SharpCodeError):
        message = describe_error(message)
    console.print(f"[bold red]{escape(message)}[/bold red]")
