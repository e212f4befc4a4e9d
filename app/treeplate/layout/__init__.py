"""Layout files.

This module provides the TOML layout format describing a folder tree,
and TOML persistence for snapshots.
"""

from treeplate.layout.io import (
    CopiedFile,
    LayoutError,
    LayoutNotFoundError,
    LayoutParseError,
    LayoutValidationError,
    build_folder,
    load_folder,
    load_layout,
    load_snapshot,
    save_snapshot,
)
from treeplate.layout.models import FileEntry, Layout, LayoutSettings

__all__ = [
    "CopiedFile",
    "FileEntry",
    "Layout",
    "LayoutError",
    "LayoutNotFoundError",
    "LayoutParseError",
    "LayoutSettings",
    "LayoutValidationError",
    "build_folder",
    "load_folder",
    "load_layout",
    "load_snapshot",
    "save_snapshot",
]
