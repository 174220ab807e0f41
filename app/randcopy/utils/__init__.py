"""Utility modules for randcopy.

This module exports commonly used utility functions.
"""

from randcopy.utils.bytesize import byte_size_string, progress_size, summary_size
from randcopy.utils.cancel import CancellationToken, is_cancelled
from randcopy.utils.formatting import (
    console,
    err_console,
    print_error,
    print_line,
    print_warning,
)

__all__ = [
    "CancellationToken",
    "byte_size_string",
    "console",
    "err_console",
    "is_cancelled",
    "print_error",
    "print_line",
    "print_warning",
    "progress_size",
    "summary_size",
]
