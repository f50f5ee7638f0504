"""Shared pytest fixtures for the SharpCode test suite.

Provides reusable fixtures for:
- An isolated environment (no SHARPCODE_* variables, fresh default renderer)
- Renderers with default and custom configuration
- Pre-configured builders for a small ``User`` class and a flags enum
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sharpcode import code
from sharpcode.builders import ClassBuilder, EnumBuilder
from sharpcode.config import Config, FormatterConfig
from sharpcode.renderer import TemplateRenderer, get_default_renderer


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Strip SHARPCODE_* variables and reset the cached default renderer."""
    for key in list(os.environ):
        if key.startswith("SHARPCODE_"):
            monkeypatch.delenv(key, raising=False)
    get_default_renderer.cache_clear()
    yield
    get_default_renderer.cache_clear()


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer with the bundled templates and default layout."""
    return TemplateRenderer(Config())


@pytest.fixture
def tab_renderer() -> TemplateRenderer:
    """Renderer indenting with tabs and CRLF line endings."""
    return TemplateRenderer(
        Config(formatter=FormatterConfig(use_tabs=True, newline="\r\n"))
    )


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Empty directory for template override tests."""
    path = tmp_path / "templates"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

@pytest.fixture
def user_class() -> ClassBuilder:
    """A class with one field, a constructor assigning it and a getter."""
    return (
        code.create_class("User")
        .with_field(code.create_field("int", "_id"))
        .with_constructor(code.create_constructor().with_parameter("int", "id", "_id"))
        .with_property(code.create_property("int", "Id").with_getter("_id"))
    )


@pytest.fixture
def permissions_enum() -> EnumBuilder:
    """A flags enum with four members and no explicit values."""
    return (
        code.create_enum("Permissions")
        .make_flags()
        .with_members(
            code.create_enum_member("None"),
            code.create_enum_member("Read"),
            code.create_enum_member("Write"),
            code.create_enum_member("Execute"),
        )
    )


@pytest.fixture
def user_class_source() -> str:
    """Formatted source expected for ``user_class``."""
    return """\
public class User
{
    private int _id;

    public User(int id)
    {
        _id = id;
    }

    public int Id
    {
        get => _id;
    }
}
"""
