"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from treeplate.tree.folder import Folder


@pytest.fixture
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the working directory set to a fresh temp dir."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_folder() -> Folder:
    """Small unlocked tree with a literal file, a nested file, and an empty folder."""
    folder = Folder()
    folder.add_file("README.md", "# sample\n")
    folder.add_file("src/app/__init__.py")
    folder.add_folder("docs")
    return folder


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    """Layout TOML file with folders, literal files, and a copied file."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "LICENSE").write_text("MIT License\n")

    path = tmp_path / "project.toml"
    path.write_text(
        'folders = ["src/app", "docs"]\n'
        "\n"
        "[settings]\n"
        'encoding = "utf-8"\n'
        "\n"
        "[files]\n"
        '"README.md" = "# Project\\n"\n'
        '"src/app/__init__.py" = ""\n'
        "\n"
        '[files."LICENSE"]\n'
        'copy_from = "templates/LICENSE"\n'
    )
    return path
