"""CLI commands for treeplate.

This package contains all subcommand implementations.
"""

from treeplate.cli.commands import diff, layouts, snapshot, validate, write

__all__ = ["diff", "layouts", "snapshot", "validate", "write"]
