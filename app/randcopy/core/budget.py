"""Count and byte limits for a random selection."""

from collections.abc import Callable

from randcopy.errors import InvalidArgumentError


class SelectionBudget:
    """Limits a selection must respect.

    The byte limit is never a fixed number: every read of
    :attr:`max_bytes` queries the free space again and clamps the
    requested limit to it.

    Attributes:
        max_count: Maximum number of files, 0 for no limit.
        requested_bytes: Byte limit asked for, None for "all free space".
    """

    def __init__(
        self,
        free_space: Callable[[], int],
        max_count: int = 0,
        requested_bytes: int | None = None,
    ) -> None:
        """Initialize the budget.

        Args:
            free_space: Callable returning the current free bytes of the
                destination.
            max_count: Maximum number of files, 0 for no limit.
            requested_bytes: Optional byte limit below the free space.

        Raises:
            InvalidArgumentError: If a limit is negative.
        """
        if max_count < 0:
            msg = f"Maximum file count cannot be negative, got {max_count}"
            raise InvalidArgumentError(msg)
        if requested_bytes is not None and requested_bytes < 0:
            msg = f"Maximum bytes cannot be negative, got {requested_bytes}"
            raise InvalidArgumentError(msg)
        self._free_space = free_space
        self.max_count = max_count
        self.requested_bytes = requested_bytes

    @property
    def max_bytes(self) -> int:
        """Effective byte limit, clamped to the live free space."""
        free = max(self._free_space(), 0)
        if self.requested_bytes is None:
            return free
        return min(self.requested_bytes, free)

    @property
    def count_bounded(self) -> bool:
        """Check if a file count limit is set."""
        return self.max_count > 0

    def __repr__(self) -> str:
        return (
            f"SelectionBudget(max_count={self.max_count}, "
            f"requested_bytes={self.requested_bytes})"
        )
