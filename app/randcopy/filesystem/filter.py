"""Extension based filtering of scanned entries.

A file is a candidate when it is a non-hidden regular entry whose name
carries an extension from the allow-set. An empty allow-set accepts any
extension, but a name without a dot is never accepted.
"""

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

from randcopy.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class ExtensionFilter:
    """Predicate over filesystem entries based on their extension.

    Matching is case-sensitive: ``a.TXT`` is rejected by an allow-set
    containing only ``txt``.

    Attributes:
        extensions: Allowed extensions without the leading dot, in the
            order they were given. Empty means every extension.
    """

    extensions: tuple[str, ...] = ()

    @classmethod
    def of(cls, *extensions: str) -> "ExtensionFilter":
        """Build a filter from user supplied extensions.

        One leading dot is stripped from each value and duplicates are
        dropped, keeping the first occurrence.

        Args:
            *extensions: Extensions such as ``"jpg"`` or ``".jpg"``.

        Returns:
            ExtensionFilter with the normalized allow-set.

        Raises:
            InvalidArgumentError: If an extension is empty.
        """
        normalized: list[str] = []
        for extension in extensions:
            value = extension[1:] if extension.startswith(".") else extension
            if not value:
                msg = f"Invalid empty extension: {extension!r}"
                raise InvalidArgumentError(msg)
            if value not in normalized:
                normalized.append(value)
        return cls(tuple(normalized))

    def accepts_extension(self, extension: str) -> bool:
        """Check an extension against the allow-set."""
        if not self.extensions:
            return True
        return extension in self.extensions

    def accept(self, path: Path) -> bool:
        """Check whether a path is a candidate file.

        Args:
            path: Path to test. Anything but a non-hidden regular file is
                rejected.

        Returns:
            True if the path passes the filter.
        """
        if not path.is_file():
            return False
        if _is_hidden(path.name, path.stat() if sys.platform == "win32" else None):
            return False
        return self._accept_name(path.name)

    def accept_entry(self, entry: os.DirEntry[str]) -> bool:
        """Check whether a directory entry is a candidate file.

        Same rules as :meth:`accept`, using the stat data cached by
        ``os.scandir`` where the platform provides it.
        """
        if not entry.is_file():
            return False
        if _is_hidden(entry.name, entry.stat() if sys.platform == "win32" else None):
            return False
        return self._accept_name(entry.name)

    def _accept_name(self, name: str) -> bool:
        pos = name.rfind(".")
        if pos == -1:
            return False
        return self.accepts_extension(name[pos + 1 :])


def _is_hidden(name: str, st: os.stat_result | None) -> bool:
    """Check the dot-prefix convention and, on Windows, the hidden attribute."""
    if name.startswith("."):
        return True
    attributes = getattr(st, "st_file_attributes", 0) if st is not None else 0
    return bool(attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))
