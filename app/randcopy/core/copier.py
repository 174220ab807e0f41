"""Random file copier.

Sequences a copy session: scan the source tree for candidates, draw a
random subset within the count and byte budget, and copy it to the
destination without overwriting existing files. Progress lines go to an
injected sink; diagnostics go to the module logger.
"""

import logging
import random
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from randcopy.core.budget import SelectionBudget
from randcopy.core.models import CopyOutcome, CopySession, CopyState, SelectionResult
from randcopy.core.selector import select_files
from randcopy.errors import FileTransferError
from randcopy.filesystem.filter import ExtensionFilter
from randcopy.filesystem.models import FileEntry
from randcopy.filesystem.naming import ensure_unique_name
from randcopy.filesystem.scanner import TreeScanner
from randcopy.filesystem.space import available_bytes
from randcopy.utils.bytesize import progress_size, summary_size
from randcopy.utils.cancel import CancellationToken, is_cancelled

logger = logging.getLogger(__name__)

# Progress line wording
MSG_SCANNING = "Scanning source directory..."
MSG_FILES_FOUND = "{count} files found"
MSG_NO_FILES = "No files found with the given constraints"
MSG_COPYING = "Copying files to the destination directory..."
MSG_COPIED = "Copied .../{path} [{size}]"
MSG_DONE = "Done. {count} files, {size} copied"

LineSink = Callable[[str], None]


def _discard(_line: str) -> None:
    """Sink that drops every line."""


class RandomFileCopier:
    """Copies a random subset of a directory tree to a destination.

    Each :meth:`run` creates a fresh :class:`CopySession`, so one copier
    can be run repeatedly against the same directories.

    Attributes:
        _source: Root of the tree to sample from.
        _destination: Directory receiving the copies.
        _filter: Extension filter applied while scanning.
        _max_files: Maximum number of files, 0 for no limit.
        _requested_bytes: Byte limit asked for, None for all free space.
        _verbose: Emit one line per copied file.
        _sink: Receiver of progress lines.
        _rng: Random generator used for selection.
        _cancel_token: Token polled between directories and between files.
        _free_space: Callable returning the destination free bytes.
    """

    def __init__(
        self,
        source: Path,
        destination: Path,
        max_files: int = 0,
        *,
        extensions: Sequence[str] = (),
        max_bytes: int | None = None,
        verbose: bool = False,
        sink: LineSink | None = None,
        rng: random.Random | None = None,
        cancel_token: CancellationToken | None = None,
        free_space: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the copier.

        Args:
            source: Root of the tree to sample from.
            destination: Existing directory receiving the copies.
            max_files: Maximum number of files to copy, 0 for no limit.
            extensions: Allowed extensions without the dot, empty for all.
            max_bytes: Byte limit, None or non-positive for the free space
                of the destination.
            verbose: Emit one line per copied file.
            sink: Receiver of progress lines, discarded if None.
            rng: Random generator, a fresh unseeded one if None.
            cancel_token: Token stopping the session early when set.
            free_space: Free space probe, defaults to the destination volume.

        Raises:
            InvalidArgumentError: If ``max_files`` is negative or an
                extension is empty.
        """
        self._source = source
        self._destination = destination
        self._filter = ExtensionFilter.of(*extensions)
        self._requested_bytes = max_bytes if max_bytes is not None and max_bytes > 0 else None
        self._verbose = verbose
        self._sink = sink or _discard
        self._rng = rng or random.Random()
        self._cancel_token = cancel_token
        self._free_space = free_space or (lambda: available_bytes(self._destination))
        # Validates max_files early
        self._max_files = self._new_budget(max_files).max_count

    @property
    def source(self) -> Path:
        """Root of the tree to sample from."""
        return self._source

    @property
    def destination(self) -> Path:
        """Directory receiving the copies."""
        return self._destination

    @property
    def max_files(self) -> int:
        """Maximum number of files to copy, 0 for no limit."""
        return self._max_files

    @property
    def max_bytes(self) -> int:
        """Effective byte limit, clamped to the current free space."""
        return self._new_budget(self._max_files).max_bytes

    @property
    def extensions(self) -> tuple[str, ...]:
        """Allowed extensions, empty when every extension is accepted."""
        return self._filter.extensions

    @property
    def verbose(self) -> bool:
        """Whether one line per copied file is emitted."""
        return self._verbose

    def run(self) -> CopyOutcome:
        """Scan, select and copy.

        Returns:
            CopyOutcome in state DONE, NO_FILES_FOUND or CANCELLED.

        Raises:
            SourceNotDirectoryError: If the source is not a directory.
            FileTransferError: If scanning or copying fails. Files copied
                before the failure stay in the destination.
        """
        session = CopySession(
            source=self._source,
            destination=self._destination,
            filter=self._filter,
            budget=self._new_budget(self._max_files),
            verbose=self._verbose,
        )
        try:
            return self._run_session(session)
        except Exception:
            session.state = CopyState.FAILED
            logger.debug(
                "Session failed after copying %d files (%d bytes)",
                len(session.copied),
                session.copied_bytes,
            )
            raise

    def _run_session(self, session: CopySession) -> CopyOutcome:
        session.state = CopyState.SCANNING
        self._sink(MSG_SCANNING)
        scanner = TreeScanner(session.filter, self._cancel_token)
        session.candidates = scanner.scan(session.source)

        if is_cancelled(self._cancel_token):
            session.state = CopyState.CANCELLED
            return self._outcome(session)

        if not session.candidates:
            session.state = CopyState.NO_FILES_FOUND
            self._sink(MSG_NO_FILES)
            return self._outcome(session)

        self._sink(MSG_FILES_FOUND.format(count=len(session.candidates)))

        session.state = CopyState.SELECTING
        session.selection = select_files(session.candidates, session.budget, self._rng)
        logger.debug(
            "Selected %d of %d files (%d bytes)",
            len(session.selection),
            len(session.candidates),
            session.selection.copied_bytes,
        )

        session.state = CopyState.COPYING
        self._sink(MSG_COPYING)
        self._copy_selection(session, session.selection)

        self._sink(
            MSG_DONE.format(count=len(session.copied), size=summary_size(session.copied_bytes))
        )
        if session.state != CopyState.CANCELLED:
            session.state = CopyState.DONE
        return self._outcome(session)

    def _copy_selection(self, session: CopySession, selection: SelectionResult) -> None:
        """Copy the selected files in order, stopping on cancellation."""
        for entry in selection.files:
            if is_cancelled(self._cancel_token):
                logger.warning(
                    "Copy cancelled, %d of %d files copied",
                    len(session.copied),
                    len(selection),
                )
                session.state = CopyState.CANCELLED
                return
            target = self._copy_file(entry, session.destination)
            session.copied.append(target)
            session.copied_bytes += entry.size_bytes
            if session.verbose:
                self._sink(
                    MSG_COPIED.format(path=entry.short_path, size=progress_size(entry.size_bytes))
                )

    def _copy_file(self, entry: FileEntry, destination: Path) -> Path:
        """Copy one file with its metadata under a collision-safe name.

        Args:
            entry: File to copy.
            destination: Destination directory.

        Returns:
            Path of the written copy.

        Raises:
            FileTransferError: If the copy fails.
        """
        try:
            target = destination / ensure_unique_name(destination, entry.name)
            shutil.copy2(entry.path, target)
        except OSError as e:
            msg = f"Failed to copy {entry.path}: {e}"
            raise FileTransferError(msg) from e
        logger.debug("Copied %s to %s", entry.path, target)
        return target

    def _new_budget(self, max_files: int) -> SelectionBudget:
        return SelectionBudget(self._free_space, max_files, self._requested_bytes)

    @staticmethod
    def _outcome(session: CopySession) -> CopyOutcome:
        return CopyOutcome(
            state=session.state,
            files_found=len(session.candidates),
            copied=tuple(session.copied),
            copied_bytes=session.copied_bytes,
        )
