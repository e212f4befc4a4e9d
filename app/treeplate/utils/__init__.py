"""Utility modules for treeplate.

This module exports commonly used console output helpers.
"""

from treeplate.utils.formatting import (
    console,
    create_tree_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    set_quiet,
)

__all__ = [
    "console",
    "create_tree_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "set_quiet",
]
