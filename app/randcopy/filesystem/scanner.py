"""Recursive scanner for candidate files.

Walks a source tree depth-first with an explicit stack, so arbitrarily
deep trees do not hit the interpreter recursion limit, and collects every
entry accepted by an ExtensionFilter together with its size.
"""

import logging
import os
from pathlib import Path

from randcopy.errors import FileTransferError, InvalidArgumentError, SourceNotDirectoryError
from randcopy.filesystem.filter import ExtensionFilter
from randcopy.filesystem.models import FileEntry
from randcopy.utils.cancel import CancellationToken, is_cancelled

logger = logging.getLogger(__name__)


class TreeScanner:
    """Scanner producing the flat candidate list of a directory tree.

    Directory symlinks are listed but not descended into. Traversal
    order is whatever ``os.scandir`` yields and carries no meaning.

    Attributes:
        _filter: Filter applied to every non-directory entry.
        _cancel_token: Optional token polled before each subdirectory.
    """

    def __init__(
        self,
        file_filter: ExtensionFilter | None,
        cancel_token: CancellationToken | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            file_filter: Filter deciding which files become candidates.
            cancel_token: Token that stops the scan early when set.

        Raises:
            InvalidArgumentError: If no filter is given.
        """
        if file_filter is None:
            msg = "A file filter is required"
            raise InvalidArgumentError(msg)
        self._filter = file_filter
        self._cancel_token = cancel_token

    def scan(self, root: Path) -> list[FileEntry]:
        """Collect every candidate under ``root``.

        If the cancellation token is set during the walk, the entries
        collected so far are returned.

        Args:
            root: Directory to scan.

        Returns:
            Candidate entries with their sizes at scan time.

        Raises:
            SourceNotDirectoryError: If ``root`` is missing or not a directory.
            FileTransferError: If a directory cannot be listed or a file
                cannot be stat-ed.
        """
        if not root.is_dir():
            msg = f"Source path is not an existing directory: {root}"
            raise SourceNotDirectoryError(msg)

        found: list[FileEntry] = []
        pending: list[Path] = [root]
        visited = 0

        while pending:
            directory = pending.pop()
            if directory != root and is_cancelled(self._cancel_token):
                logger.warning(
                    "Scan cancelled after %d directories, %d files collected",
                    visited,
                    len(found),
                )
                break
            subdirectories = self._scan_directory(directory, found)
            # Reversed so that the first listed subdirectory is visited first
            pending.extend(reversed(subdirectories))
            visited += 1

        logger.debug("Scanned %d directories under %s, %d candidates", visited, root, len(found))
        return found

    def _scan_directory(self, directory: Path, found: list[FileEntry]) -> list[Path]:
        """List one directory, appending candidates to ``found``.

        Args:
            directory: Directory to list.
            found: Accumulator for accepted entries.

        Returns:
            Subdirectories still to be visited.
        """
        subdirectories: list[Path] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        subdirectories.append(Path(entry.path))
                    elif self._filter.accept_entry(entry):
                        found.append(FileEntry(Path(entry.path), entry.stat().st_size))
        except OSError as e:
            msg = f"Failed to scan {directory}: {e}"
            raise FileTransferError(msg) from e
        return subdirectories


def scan_tree(
    root: Path,
    file_filter: ExtensionFilter | None,
    cancel_token: CancellationToken | None = None,
) -> list[FileEntry]:
    """Scan ``root`` with a one-off TreeScanner."""
    return TreeScanner(file_filter, cancel_token).scan(root)
