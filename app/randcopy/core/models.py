"""Core domain models for selection and copy sessions.

This module defines the result of a random selection, the states a copy
session moves through, and the outcome handed back to callers.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from randcopy.core.budget import SelectionBudget
from randcopy.filesystem.filter import ExtensionFilter
from randcopy.filesystem.models import FileEntry


class CopyState(str, Enum):
    """State of a copy session.

    Attributes:
        IDLE: Session created, nothing done yet.
        SCANNING: Walking the source tree for candidates.
        NO_FILES_FOUND: Scan finished without candidates; nothing copied.
        SELECTING: Drawing the random subset.
        COPYING: Copying selected files to the destination.
        DONE: All selected files copied.
        CANCELLED: Stopped early by the cancellation token.
        FAILED: A filesystem error aborted the session.
    """

    IDLE = "idle"
    SCANNING = "scanning"
    NO_FILES_FOUND = "no_files_found"
    SELECTING = "selecting"
    COPYING = "copying"
    DONE = "done"
    CANCELLED = "cancelled"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition can happen."""
        return self in (
            CopyState.NO_FILES_FOUND,
            CopyState.DONE,
            CopyState.CANCELLED,
            CopyState.FAILED,
        )


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Files chosen by the selector.

    Attributes:
        files: Selected entries in selection order.
        copied_bytes: Sum of the sizes of ``files``.
    """

    files: tuple[FileEntry, ...] = ()
    copied_bytes: int = 0

    @classmethod
    def of(cls, files: Sequence[FileEntry]) -> "SelectionResult":
        """Build a result whose byte count is derived from the files."""
        return cls(files=tuple(files), copied_bytes=sum(f.size_bytes for f in files))

    def __len__(self) -> int:
        return len(self.files)


@dataclass(slots=True)
class CopySession:
    """Transient state of one ``RandomFileCopier.run()`` invocation.

    Attributes:
        source: Root of the tree to sample from.
        destination: Directory receiving the copies.
        filter: Extension filter applied while scanning.
        budget: Count and byte limits for the selection.
        verbose: Whether to emit one line per copied file.
        state: Current position in the session state machine.
        candidates: Entries found by the scanner.
        selection: Result of the random selection.
        copied: Destination paths written so far.
        copied_bytes: Bytes written so far.
    """

    source: Path
    destination: Path
    filter: ExtensionFilter
    budget: SelectionBudget
    verbose: bool = False
    state: CopyState = CopyState.IDLE
    candidates: list[FileEntry] = field(default_factory=list)
    selection: SelectionResult = field(default_factory=SelectionResult)
    copied: list[Path] = field(default_factory=list)
    copied_bytes: int = 0


@dataclass(frozen=True, slots=True)
class CopyOutcome:
    """Final report of a copy session.

    Attributes:
        state: Terminal state reached (DONE, NO_FILES_FOUND or CANCELLED).
        files_found: Number of candidates the scan produced.
        copied: Destination paths actually written, in copy order.
        copied_bytes: Total bytes of the copied files.
    """

    state: CopyState
    files_found: int = 0
    copied: tuple[Path, ...] = ()
    copied_bytes: int = 0

    @property
    def copied_count(self) -> int:
        """Number of files written to the destination."""
        return len(self.copied)

    @property
    def cancelled(self) -> bool:
        """Check if the session stopped on cancellation."""
        return self.state == CopyState.CANCELLED
