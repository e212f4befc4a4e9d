"""Validate command implementation.

Checks that every folder and file of a layout exists in a directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeplate.cli.types import require_layout
from treeplate.engines.validator import find_missing
from treeplate.errors import TreeplateError
from treeplate.utils.formatting import console, create_tree_table, print_error, print_success


def validate_layout(
    layout: Annotated[str, typer.Argument(help="Layout file or named layout.")],
    target: Annotated[Path, typer.Argument(help="Directory to check.")],
) -> None:
    """Check that a directory contains the tree described by a layout.

    Only existence and kind (folder or file) are checked, not contents.
    Exits with code 1 if anything is missing.
    """
    _, folder = require_layout(layout)

    try:
        missing = find_missing(target, folder)
    except TreeplateError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not missing:
        print_success(f"{target} matches the layout.")
        return

    table = create_tree_table(f"Missing from {target}")
    for entry in missing:
        kind = "folder" if entry.is_folder else "file"
        table.add_row(f"[removed]{entry.path}[/removed]", kind, "not found")
    console.print(table)
    console.print(f"\n[muted]{len(missing)} missing entries[/muted]")
    raise typer.Exit(code=1)
