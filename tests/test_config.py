"""Unit tests for Config and related Pydantic models (sharpcode.config).

Tests cover:
- FormatterConfig defaults, indent unit, validation
- RenderConfig defaults
- Config save/load round trip
- Config.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sharpcode.config import Config, FormatterConfig, RenderConfig


# ---------------------------------------------------------------------------
# FormatterConfig
# ---------------------------------------------------------------------------


class TestFormatterConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = FormatterConfig()
        assert config.indent_size == 4
        assert config.use_tabs is False
        assert config.newline == "\n"

    @pytest.mark.unit
    def test_indent_spaces(self):
        assert FormatterConfig().indent == "    "
        assert FormatterConfig(indent_size=2).indent == "  "

    @pytest.mark.unit
    def test_indent_tabs_ignore_size(self):
        assert FormatterConfig(use_tabs=True, indent_size=8).indent == "\t"

    @pytest.mark.unit
    def test_zero_indent_rejected(self):
        with pytest.raises(ValidationError):
            FormatterConfig(indent_size=0)

    @pytest.mark.unit
    def test_unknown_newline_rejected(self):
        with pytest.raises(ValidationError):
            FormatterConfig(newline="\t")


# ---------------------------------------------------------------------------
# RenderConfig
# ---------------------------------------------------------------------------


class TestRenderConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = RenderConfig()
        assert config.flags_attribute == "System.Flags"
        assert config.template_dir is None


# ---------------------------------------------------------------------------
# Config save / load
# ---------------------------------------------------------------------------


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            formatter=FormatterConfig(indent_size=2, newline="\r\n"),
            render=RenderConfig(flags_attribute="Flags"),
        )
        path = config.save(tmp_path / "nested" / "sharpcode.json")
        assert path.exists()

        loaded = Config.load(path)
        assert loaded == config
        assert loaded.formatter.newline == "\r\n"

    @pytest.mark.unit
    def test_saved_file_is_json(self, tmp_path: Path):
        path = Config().save(tmp_path / "config.json")
        assert '"indent_size": 4' in path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_formatter_from_env(self):
        env = {
            "SHARPCODE_INDENT_SIZE": "2",
            "SHARPCODE_USE_TABS": "true",
            "SHARPCODE_NEWLINE": "crlf",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.formatter.indent_size == 2
        assert config.formatter.use_tabs is True
        assert config.formatter.newline == "\r\n"

    @pytest.mark.unit
    def test_use_tabs_false_values(self):
        with patch.dict(os.environ, {"SHARPCODE_USE_TABS": "no"}, clear=True):
            config = Config.from_env()
        assert config.formatter.use_tabs is False

    @pytest.mark.unit
    def test_render_from_env(self, tmp_path: Path):
        env = {
            "SHARPCODE_FLAGS_ATTRIBUTE": "Flags",
            "SHARPCODE_TEMPLATE_DIR": str(tmp_path),
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.render.flags_attribute == "Flags"
        assert config.render.template_dir == tmp_path

    @pytest.mark.unit
    def test_invalid_newline_from_env(self):
        with patch.dict(os.environ, {"SHARPCODE_NEWLINE": "cr"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
