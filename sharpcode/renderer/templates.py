"""Jinja2 rendering of IR values into C# source text.

Provides the TemplateRenderer class which loads one ``.cs.j2`` template per
declaration kind from the ``sharpcode/renderer/templates/`` directory.
Containers render their children first, without formatting, and splice the
fragments into their own template; the formatter only ever runs once, on the
outermost call.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sharpcode.config import Config
from sharpcode.errors import InvalidArgumentError, MissingBuilderSettingError
from sharpcode.model import (
    AccessModifier,
    Accessor,
    AccessorKind,
    Class,
    Constructor,
    Enumeration,
    EnumerationMember,
    Field,
    Interface,
    Namespace,
    Parameter,
    Property,
    Struct,
    Structure,
)
from sharpcode.renderer.formatter import Formatter, SourceFormatter


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders IR values to C# source code.

    Args:
        config: Rendering and formatting settings.  Defaults to ``Config()``.
        formatter: Replaces the bundled ``SourceFormatter``.  Any callable
            mapping source text to source text is accepted.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        formatter: Optional[Formatter] = None,
    ) -> None:
        self.config = config or Config()
        self.template_dir = Path(self.config.render.template_dir or _DEFAULT_TEMPLATE_DIR)
        self.formatter = formatter or SourceFormatter(self.config.formatter)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["access_keyword"] = _access_keyword_filter
        self.env.filters["doc_block"] = _doc_block_filter
        self.env.filters["default_value"] = _default_value_filter
        self.env.filters["accessor"] = _accessor_filter
        self.env.filters["parameter_list"] = _parameter_list_filter
        self.env.filters["words"] = _words_filter

        self._dispatch: dict[type, Callable[[Any], str]] = {
            Field: self.render_field,
            Property: self.render_property,
            Constructor: self.render_constructor,
            EnumerationMember: self.render_enum_member,
            Enumeration: self.render_enum,
            Class: self.render_class,
            Struct: self.render_struct,
            Interface: self.render_interface,
            Namespace: self.render_namespace,
        }

    # -- Entry points -------------------------------------------------------

    def render(self, node: Structure, formatted: bool = False) -> str:
        """Render any supported IR value.

        Args:
            node: The value to render.
            formatted: Whether to pass the result through the formatter.

        Raises:
            InvalidArgumentError: If *node* is not a renderable IR value.
        """
        handler = self._dispatch.get(type(node))
        if handler is None:
            raise InvalidArgumentError(
                "node", f"Cannot render a value of type '{type(node).__name__}'."
            )
        raw = handler(node)
        return self.format(raw) if formatted else raw

    def format(self, source: str) -> str:
        return self.formatter(source)

    # -- Members ------------------------------------------------------------

    def render_field(self, field: Field) -> str:
        _require_text(field.type, "field", "type")
        _require_text(field.name, "field", "name")
        return self._render("field.cs.j2", field=field)

    def render_property(self, prop: Property) -> str:
        _require_text(prop.type, "property", "type")
        _require_text(prop.name, "property", "name")
        return self._render("property.cs.j2", prop=prop)

    def render_constructor(self, ctor: Constructor) -> str:
        _require_text(ctor.class_name, "constructor", "class name")
        return self._render("constructor.cs.j2", ctor=ctor)

    def render_enum_member(self, member: EnumerationMember) -> str:
        _require_text(member.name, "enum member", "name")
        return self._render("enum_member.cs.j2", member=member)

    # -- Containers ---------------------------------------------------------

    def render_enum(self, enum: Enumeration) -> str:
        _require_text(enum.name, "enum", "name")
        return self._render(
            "enum.cs.j2",
            enum=enum,
            flags_attribute=self.config.render.flags_attribute,
            members=[self.render_enum_member(member) for member in enum.members],
        )

    def render_class(self, cls: Class) -> str:
        _require_text(cls.name, "class", "name")
        return self._render(
            "class.cs.j2",
            cls=cls,
            members=self._render_all(cls.fields, cls.constructors, cls.properties),
        )

    def render_struct(self, struct: Struct) -> str:
        _require_text(struct.name, "struct", "name")
        return self._render(
            "struct.cs.j2",
            struct=struct,
            members=self._render_all(struct.fields, struct.constructors, struct.properties),
        )

    def render_interface(self, interface: Interface) -> str:
        _require_text(interface.name, "interface", "name")
        return self._render(
            "interface.cs.j2",
            interface=interface,
            members=self._render_all(interface.properties),
        )

    def render_namespace(self, namespace: Namespace) -> str:
        _require_text(namespace.name, "namespace", "name")
        return self._render(
            "namespace.cs.j2",
            ns=namespace,
            members=self._render_all(
                namespace.enums, namespace.interfaces, namespace.classes, namespace.structs
            ),
        )

    # -- Internals ----------------------------------------------------------

    def _render_all(self, *groups: Iterable[Structure]) -> list[str]:
        return [self.render(node) for group in groups for node in group]

    def _render(self, template_name: str, **context: Any) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context).strip("\n")


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_default_renderer() -> TemplateRenderer:
    """Return the shared renderer configured from the environment."""
    return TemplateRenderer(Config.from_env())


def to_source_code(node: Structure, formatted: bool = True) -> str:
    """Render *node* with the default renderer."""
    return get_default_renderer().render(node, formatted=formatted)


def _require_text(value: Optional[str], entity: str, setting: str) -> None:
    if value is None or not value.strip():
        raise MissingBuilderSettingError(entity, setting)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

_ACCESS_KEYWORDS = {
    AccessModifier.NONE: "",
    AccessModifier.PRIVATE: "private",
    AccessModifier.INTERNAL: "internal",
    AccessModifier.PROTECTED: "protected",
    AccessModifier.PUBLIC: "public",
    AccessModifier.PRIVATE_PROTECTED: "private protected",
    AccessModifier.PROTECTED_INTERNAL: "protected internal",
}


def _access_keyword_filter(value: AccessModifier) -> str:
    """Map an access level to its keyword; unknown values fall back to private."""
    return _ACCESS_KEYWORDS.get(value, "private")


def _doc_block_filter(summary: Optional[str]) -> str:
    """Render a ``/// <summary>`` block followed by a newline.

    Blank or missing summaries produce nothing.
    """
    if summary is None or not summary.strip():
        return ""
    lines = summary.replace("\r\n", "\n").split("\n")
    body = "\n".join(f"/// {line}" for line in lines)
    return f"/// <summary>\n{body}\n/// </summary>\n"


def _default_value_filter(value: str) -> str:
    """Turn ``5`` into ``= 5;``; an existing ``=`` or ``;`` is not repeated."""
    prefix = "" if value.startswith("=") else "= "
    suffix = "" if value.endswith(";") else ";"
    return f"{prefix}{value}{suffix}"


def _accessor_filter(accessor: Accessor, keyword: str) -> str:
    """Render a resolved getter or setter; absent accessors render as ``""``."""
    if accessor.kind is AccessorKind.DEFAULT:
        return f"{keyword};"
    if accessor.kind is AccessorKind.CUSTOM:
        expression = accessor.expression or ""
        if expression.startswith("{"):
            return f"{keyword}{expression}"
        return f"{keyword} => {expression};"
    return ""


def _parameter_list_filter(parameters: Iterable[Parameter]) -> str:
    return ", ".join(f"{parameter.type} {parameter.name}" for parameter in parameters)


def _words_filter(words: Iterable[Any]) -> str:
    """Join the non-empty words with single spaces."""
    return " ".join(str(word) for word in words if word)
