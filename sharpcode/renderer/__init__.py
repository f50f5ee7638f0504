"""Rendering of IR values into C# source code."""

from sharpcode.renderer.formatter import Formatter, SourceFormatter
from sharpcode.renderer.templates import TemplateRenderer, get_default_renderer, to_source_code

__all__ = [
    "Formatter",
    "SourceFormatter",
    "TemplateRenderer",
    "get_default_renderer",
    "to_source_code",
]
