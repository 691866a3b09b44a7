"""Utility modules for fsstat.

This module exports commonly used utility functions.
"""

from fsstat.utils.formatting import (
    console,
    create_stats_table,
    err_console,
    format_kind,
    format_mode,
    format_value,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_stats_table",
    "err_console",
    "format_kind",
    "format_mode",
    "format_value",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
