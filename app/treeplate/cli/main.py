"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from treeplate import __version__
from treeplate.cli.commands import diff, layouts, snapshot, validate, write
from treeplate.utils.formatting import set_quiet

# Create main Typer app
app = typer.Typer(
    name="treeplate",
    help="Describe a directory tree once, then write, validate, or snapshot it.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treeplate version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Set the root log level from the global flags."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info and success messages.",
        ),
    ] = False,
) -> None:
    """treeplate - scaffold directory trees from declarative layouts.

    A layout is a TOML file listing folders and files. It can be written
    to a directory, validated against one, or snapshotted for comparison.
    """
    configure_logging(verbose, quiet)
    set_quiet(quiet)


# Register commands
app.command(name="write")(write.write_layout)
app.command(name="validate")(validate.validate_layout)
app.command(name="snapshot")(snapshot.snapshot_layout)
app.command(name="diff")(diff.diff_layout)
app.command(name="layouts")(layouts.list_layouts)


if __name__ == "__main__":
    app()
