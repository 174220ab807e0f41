"""Collision-safe naming of copied files.

Copies never overwrite an existing entry: a colliding ``name.ext`` is
renamed to ``name(1).ext``, ``name(2).ext`` and so on.
"""

import logging
from pathlib import Path

from randcopy.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def ensure_unique_name(directory: Path, desired_name: str) -> str:
    """Get a file name that does not exist yet in ``directory``.

    The check is a plain existence test per candidate name; another
    writer creating the same name in between is not guarded against.

    Args:
        directory: Destination directory.
        desired_name: Name the file would have without a collision.

    Returns:
        ``desired_name`` if free, otherwise the first free
        ``stem(<n>).ext`` with n counting up from 1.

    Raises:
        InvalidArgumentError: If the name collides and has no dot to
            place the counter before.
    """
    if not (directory / desired_name).exists():
        return desired_name

    pos = desired_name.rfind(".")
    if pos == -1:
        msg = f"Cannot derive a unique name for {desired_name!r}: no extension separator"
        raise InvalidArgumentError(msg)

    stem, extension = desired_name[:pos], desired_name[pos:]
    counter = 1
    candidate = f"{stem}({counter}){extension}"
    while (directory / candidate).exists():
        counter += 1
        candidate = f"{stem}({counter}){extension}"

    logger.debug("Renamed %s to %s in %s", desired_name, candidate, directory)
    return candidate
