"""Filesystem scanning, filtering and naming module.

This module provides candidate discovery for random copies: extension
filtering, recursive tree scanning, collision-safe destination names
and free space queries.
"""

from randcopy.filesystem.filter import ExtensionFilter
from randcopy.filesystem.models import FileEntry
from randcopy.filesystem.naming import ensure_unique_name
from randcopy.filesystem.scanner import TreeScanner, scan_tree
from randcopy.filesystem.space import available_bytes

__all__ = [
    "ExtensionFilter",
    "FileEntry",
    "TreeScanner",
    "available_bytes",
    "ensure_unique_name",
    "scan_tree",
]
