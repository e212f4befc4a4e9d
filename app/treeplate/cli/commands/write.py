"""Write command implementation.

Materializes the folder tree described by a layout into a directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeplate.cli.types import require_layout
from treeplate.engines.walker import walk
from treeplate.engines.writer import write_folder
from treeplate.errors import TreeplateError
from treeplate.tree.folder import Folder
from treeplate.utils.formatting import console, create_tree_table, print_error, print_success


def _print_plan(folder: Folder, target: Path) -> None:
    """Display what a write would do, without touching disk."""
    table = create_tree_table(f"Planned Write to {target} (Dry Run)")
    for entry in walk(folder):
        exists = (target / entry.path).exists()
        detail = "exists" if exists else "new"
        if isinstance(entry.node, Folder):
            table.add_row(f"[folder]{entry.path}/[/folder]", "folder", detail)
        else:
            table.add_row(entry.path, "file", f"{detail}, {entry.node.content_kind.value}")
    console.print(table)


def write_layout(
    layout: Annotated[str, typer.Argument(help="Layout file or named layout.")],
    target: Annotated[Path, typer.Argument(help="Directory to write the tree into.")],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be written."),
    ] = False,
) -> None:
    """Write the folder tree described by a layout.

    Existing folders are reused and existing files are overwritten.
    Nothing outside the layout is touched.

    Examples:
        treeplate write project.toml ./out
        treeplate write python-lib ./mylib --dry-run
    """
    loaded, folder = require_layout(layout)

    if dry_run:
        _print_plan(folder, target)
        return

    try:
        report = write_folder(target, folder, encoding=loaded.settings.encoding)
    except (TreeplateError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(
        f"Wrote {len(report.written_files)} files and "
        f"{len(report.created_folders)} new folders to {target}"
    )
