"""Free space queries for the destination volume."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def available_bytes(path: Path) -> int:
    """Get the free bytes of the volume holding ``path``.

    Walks up to the nearest existing ancestor when ``path`` has not been
    created yet. The value is read fresh on every call; free space is
    shared with every other writer on the volume.

    Args:
        path: Destination directory (or a path beneath it).

    Returns:
        Free bytes available to the current user.
    """
    probe = path
    while not probe.exists() and probe.parent != probe:
        probe = probe.parent
    free = shutil.disk_usage(probe).free
    logger.debug("Free space at %s: %d bytes", probe, free)
    return free
