"""Whitespace normalisation for generated C# source.

The templates emit compact, loosely spaced text.  ``SourceFormatter`` turns
it into conventionally laid out code: braces on their own lines, one blank
line at most between declarations, and indentation by brace depth.  It is a
layout pass only and never inspects the meaning of the code.

Any ``Callable[[str], str]`` can stand in for it, see ``Formatter``.
"""

from __future__ import annotations

from typing import Optional, Protocol

from sharpcode.config import FormatterConfig

# Characters that keep a closing brace's trailing text on the same line,
# e.g. ``} = 5;`` for a property initializer.
_ATTACHED_AFTER_CLOSE = frozenset(";,=)")


class Formatter(Protocol):
    """Anything that maps raw source text to formatted source text."""

    def __call__(self, source: str) -> str: ...


# ---------------------------------------------------------------------------
# SourceFormatter
# ---------------------------------------------------------------------------


class SourceFormatter:
    """Default layout pass applied to rendered source code.

    Formatting already formatted text returns it unchanged.
    """

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self.config = config or FormatterConfig()

    def __call__(self, source: str) -> str:
        return self.format(source)

    def format(self, source: str) -> str:
        text = source.replace("\r\n", "\n").replace("\r", "\n")
        segments: list[str] = []
        for raw_line in text.split("\n"):
            segments.extend(_split_line(raw_line))

        lines = _tidy_blank_lines(segments)
        if not lines:
            return ""

        indent = self.config.indent
        depth = 0
        out: list[str] = []
        for line in lines:
            if line.startswith("}"):
                depth = max(depth - 1, 0)
            out.append(indent * depth + line if line else "")
            if line == "{":
                depth += 1

        newline = self.config.newline
        return newline.join(out) + newline


# ---------------------------------------------------------------------------
# Line scanning
# ---------------------------------------------------------------------------


def _split_line(raw: str) -> list[str]:
    """Break one physical line into layout segments.

    Braces outside literals and comments become segments of their own and
    whitespace runs collapse to a single space.  An empty line yields one
    empty segment so blank lines survive until they are tidied.
    """
    if not raw.strip():
        return [""]

    segments: list[str] = []
    current: list[str] = []
    pending_space = False
    quote: Optional[str] = None
    verbatim = False
    i = 0

    def flush() -> None:
        text = "".join(current).strip()
        if text:
            segments.append(text)
        current.clear()

    while i < len(raw):
        char = raw[i]

        if quote is not None:
            current.append(char)
            if verbatim:
                if char == '"':
                    if raw[i + 1:i + 2] == '"':
                        current.append('"')
                        i += 1
                    else:
                        quote = None
            elif char == "\\" and i + 1 < len(raw):
                current.append(raw[i + 1])
                i += 1
            elif char == quote:
                quote = None
            i += 1
            continue

        if char.isspace():
            pending_space = bool(current)
            i += 1
            continue

        if char == "{":
            flush()
            segments.append("{")
            pending_space = False
            i += 1
            continue

        if char == "}":
            flush()
            current.append("}")
            pending_space = False
            i += 1
            continue

        if current == ["}"] and char not in _ATTACHED_AFTER_CLOSE:
            flush()
            pending_space = False

        if pending_space:
            current.append(" ")
            pending_space = False

        if raw.startswith("//", i):
            current.append(raw[i:].rstrip())
            break

        if char in "\"'":
            quote = char
            verbatim = char == '"' and "".join(current).endswith(("@", "@$", "$@"))

        current.append(char)
        i += 1

    flush()
    return segments


def _tidy_blank_lines(segments: list[str]) -> list[str]:
    result: list[str] = []
    for line in segments:
        if not line:
            if not result or result[-1] == "" or result[-1] == "{" or result[-1].startswith("///"):
                continue
            result.append("")
            continue
        if line.startswith("}") and result and result[-1] == "":
            result.pop()
        result.append(line)
    while result and result[-1] == "":
        result.pop()
    return result
