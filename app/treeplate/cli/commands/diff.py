"""Diff command implementation.

Compares a layout with a snapshot saved by 'treeplate snapshot --export'.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from treeplate.cli.types import require_layout
from treeplate.engines.diff import SnapshotDiff, diff_snapshots
from treeplate.engines.snapshot import take_snapshot
from treeplate.layout.io import LayoutError, load_snapshot
from treeplate.tree.content import ContentKind
from treeplate.utils.formatting import console, print_error, print_success, print_warning


def _create_diff_table(result: SnapshotDiff) -> Table:
    """Create a table listing every changed path.

    Args:
        result: The diff to display.

    Returns:
        Rich Table configured for diff display.
    """
    table = Table(
        title="Layout Differences",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Path", no_wrap=True)

    for path in result.added:
        table.add_row("[added][+][/added]", f"[added]{path}[/added]")
    for path in result.removed:
        table.add_row("[removed][-][/removed]", f"[removed]{path}[/removed]")
    for path in result.changed:
        table.add_row("[changed][~][/changed]", f"[changed]{path}[/changed]")
    return table


def diff_layout(
    layout: Annotated[str, typer.Argument(help="Layout file or named layout.")],
    snapshot_file: Annotated[Path, typer.Argument(help="Snapshot TOML file.")],
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for scripting."),
    ] = False,
) -> None:
    """Compare a layout with a saved snapshot.

    Difference types:
      [+] path exists in the layout but not in the snapshot
      [-] path exists in the snapshot but not in the layout
      [~] path changed kind or content

    Exits with code 1 if there are differences.
    """
    _, folder = require_layout(layout)
    try:
        old = load_snapshot(snapshot_file)
    except LayoutError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    new = take_snapshot(folder)
    result = diff_snapshots(old, new)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        raise typer.Exit(code=0 if result.is_identical else 1)

    generated = [
        path for path, entry in new.items() if entry.source not in (None, ContentKind.LITERAL)
    ]
    if generated:
        print_warning(f"{len(generated)} generated files are compared by producer kind only")

    if result.is_identical:
        print_success("Layout matches the snapshot.")
        return

    console.print(_create_diff_table(result))
    console.print(f"\n[muted]{result.total_changes} differences[/muted]")
    raise typer.Exit(code=1)
