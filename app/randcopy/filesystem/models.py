"""Filesystem domain models for candidate discovery.

This module defines the immutable snapshot of a file captured while
scanning the source tree.
"""

from dataclasses import dataclass
from pathlib import Path

from randcopy.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A file discovered during scanning.

    The size is read once at scan time and never refreshed, so a file
    modified between scan and copy may copy more or fewer bytes than
    recorded here.

    Attributes:
        path: Path of the file inside the source tree.
        size_bytes: Size in bytes at scan time.
    """

    path: Path
    size_bytes: int

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if self.size_bytes < 0:
            msg = f"File size cannot be negative, got {self.size_bytes}"
            raise InvalidArgumentError(msg)

    @property
    def name(self) -> str:
        """Base name of the file."""
        return self.path.name

    @property
    def short_path(self) -> str:
        """Last three path segments joined with "/", used in progress lines."""
        return "/".join(self.path.parts[-3:]).lstrip("/")
