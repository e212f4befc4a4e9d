"""Snapshot command implementation.

Prints or exports the structural snapshot of a layout.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeplate.cli.types import OutputFormat, require_layout
from treeplate.engines.snapshot import Snapshot, take_snapshot
from treeplate.layout.io import LayoutError, save_snapshot
from treeplate.tree.models import NodeKind
from treeplate.utils.formatting import (
    console,
    create_tree_table,
    print_error,
    print_info,
    print_success,
)


def _print_table(snapshot: Snapshot, title: str) -> None:
    """Display snapshot entries as a Rich table."""
    table = create_tree_table(title)
    for path, entry in snapshot.items():
        if entry.kind == NodeKind.FOLDER:
            table.add_row(f"[folder]{path}/[/folder]", "folder", "")
            continue
        detail = entry.source.value if entry.source else ""
        if entry.digest:
            detail = f"{detail} sha256:{entry.digest[:12]}"
        table.add_row(path, "file", detail)
    console.print(table)


def snapshot_layout(
    layout: Annotated[str, typer.Argument(help="Layout file or named layout.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Save the snapshot to a TOML file for 'treeplate diff'.",
        ),
    ] = None,
) -> None:
    """Show the structural snapshot of a layout.

    Every folder and file gets an entry keyed by its relative path.
    Literal file contents are fingerprinted with SHA-256.
    """
    _, folder = require_layout(layout)
    snapshot = take_snapshot(folder)

    if export_path is not None:
        try:
            save_snapshot(snapshot, export_path)
        except LayoutError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_success(f"Snapshot saved to {export_path}")

    if output_format == OutputFormat.JSON:
        typer.echo(snapshot.model_dump_json(indent=2))
        return

    if not snapshot:
        print_info("Layout is empty.")
        return
    _print_table(snapshot, f"Snapshot of {layout}")
    console.print(
        f"\n[muted]{len(snapshot.folders())} folders, {len(snapshot.files())} files[/muted]"
    )
