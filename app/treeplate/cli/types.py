"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from treeplate.core.paths import resolve_layout_path
from treeplate.layout.io import LayoutError, LayoutNotFoundError, load_folder
from treeplate.layout.models import Layout
from treeplate.tree.folder import Folder
from treeplate.utils.formatting import print_error, print_info


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def require_layout(name_or_path: str) -> tuple[Layout, Folder]:
    """Load a layout and build its folder, or exit with a helpful message.

    Args:
        name_or_path: Layout file path or bare layout name.

    Returns:
        The layout and the folder built from it.

    Raises:
        typer.Exit: If the layout cannot be loaded.
    """
    path = resolve_layout_path(name_or_path)
    try:
        return load_folder(path)
    except LayoutNotFoundError as e:
        print_error(f"Layout not found: {path}")
        print_info("Pass a path to a layout file, or a name from 'treeplate layouts'.")
        raise typer.Exit(code=1) from e
    except LayoutError as e:
        print_error(f"Failed to load layout: {e}")
        raise typer.Exit(code=1) from e
