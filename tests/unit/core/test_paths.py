"""Unit tests for XDG path management.

Tests for the paths module that locates named layouts.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from treeplate.core.paths import (
    APP_NAME,
    ensure_layouts_dir,
    get_config_dir,
    get_layouts_dir,
    resolve_layout_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_uses_default(self) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestLayoutsDir:
    """Tests for the layouts directory helpers."""

    def test_get_layouts_dir(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_layouts_dir()

        assert result == tmp_path / APP_NAME / "layouts"

    def test_ensure_layouts_dir_creates(self, tmp_path: Path) -> None:
        """ensure_layouts_dir creates the directory and its parents."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = ensure_layouts_dir()

        assert result.is_dir()
        assert result == tmp_path / APP_NAME / "layouts"

    def test_ensure_layouts_dir_is_idempotent(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            first = ensure_layouts_dir()
            second = ensure_layouts_dir()

        assert first == second

    def test_ensure_layouts_dir_blocked_by_file(self, tmp_path: Path) -> None:
        """A file in the way is reported as RuntimeError."""
        (tmp_path / APP_NAME).write_text("not a directory")
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            pytest.raises(RuntimeError, match="Cannot create layouts directory"),
        ):
            ensure_layouts_dir()


class TestResolveLayoutPath:
    """Tests for resolve_layout_path function."""

    def test_bare_name_resolves_to_layouts_dir(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = resolve_layout_path("python-lib")

        assert result == tmp_path / APP_NAME / "layouts" / "python-lib.toml"

    def test_toml_suffix_is_a_path(self) -> None:
        assert resolve_layout_path("custom.toml") == Path("custom.toml")

    def test_path_with_separator(self) -> None:
        assert resolve_layout_path("layouts/web") == Path("layouts/web")

    def test_existing_file_wins(self, in_tmp_path: Path) -> None:
        """An existing file named like a bare layout is used as-is."""
        (in_tmp_path / "web").write_text("")
        assert resolve_layout_path("web") == Path("web")
