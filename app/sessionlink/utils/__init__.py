"""Utility modules for sessionlink.

This module exports commonly used utility functions.
"""

from sessionlink.utils.formatting import (
    console,
    err_console,
    format_age,
    format_datetime,
    format_session_option,
    normalize_snippet,
    print_error,
    print_info,
    print_success,
    print_warning,
    shorten_path,
    truncate,
)

__all__ = [
    "console",
    "err_console",
    "format_age",
    "format_datetime",
    "format_session_option",
    "normalize_snippet",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "shorten_path",
    "truncate",
]
