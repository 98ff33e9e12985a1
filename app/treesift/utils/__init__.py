"""Utility modules for treesift.

This module exports commonly used utility functions.
"""

from treesift.utils.formatting import (
    console,
    create_results_table,
    err_console,
    format_candidate_row,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_results_table",
    "err_console",
    "format_candidate_row",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
