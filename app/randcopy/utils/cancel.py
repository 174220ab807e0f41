"""Cooperative cancellation for long-running scans and copies."""

import threading


class CancellationToken:
    """Flag polled by the scanner and copier between units of work.

    Backed by a ``threading.Event`` so it can be set from a signal
    handler or another thread while the session runs.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Check if cancellation was requested."""
        return self._event.is_set()

    def reset(self) -> None:
        """Clear a previous cancellation request."""
        self._event.clear()


def is_cancelled(token: CancellationToken | None) -> bool:
    """Check an optional token."""
    return token is not None and token.cancelled
