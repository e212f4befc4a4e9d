"""CLI package for treeplate.

This package contains the Typer application and all subcommands.
"""

from treeplate.cli.main import app

__all__ = ["app"]
