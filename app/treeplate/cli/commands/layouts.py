"""Layouts command implementation.

Lists the named layouts stored in the user's configuration directory.
"""

import typer

from treeplate.core.paths import LAYOUT_SUFFIX, ensure_layouts_dir
from treeplate.utils.formatting import console, print_error, print_info


def list_layouts() -> None:
    """List named layouts usable in place of a layout file path."""
    try:
        layouts_dir = ensure_layouts_dir()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    names = sorted(path.stem for path in layouts_dir.glob(f"*{LAYOUT_SUFFIX}"))
    if not names:
        print_info(f"No named layouts in {layouts_dir}")
        return

    for name in names:
        console.print(name)
