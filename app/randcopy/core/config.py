"""Configuration for random copy runs.

Two layers feed a run:

- ``CopyDefaults``: optional user defaults read from
  ~/.config/randcopy/config.toml (extensions, verbosity, byte limit).
- ``CopyConfig``: the validated configuration of one run, built from the
  command line arguments on top of the defaults by ``resolve_config``.

Example config.toml::

    extensions = ["jpg", "png"]
    verbose = true
    max_bytes = 1073741824
"""

import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from randcopy.core.paths import get_config_path
from randcopy.errors import ArgumentValidationError

logger = logging.getLogger(__name__)

MAX_FILES_LIMIT = 2**31 - 1


class CopyDefaults(BaseModel):
    """User defaults applied when the command line leaves a value unset.

    Attributes:
        extensions: Extensions copied when no ``--extension`` is given.
        verbose: Emit one line per copied file.
        max_bytes: Byte limit when no positive ``--space`` is given.
    """

    model_config = ConfigDict(extra="forbid")

    extensions: Annotated[
        list[str],
        Field(description="Default extensions, without the leading dot"),
    ] = []
    verbose: Annotated[
        bool,
        Field(description="Print every copied file"),
    ] = False
    max_bytes: Annotated[
        int | None,
        Field(ge=1, description="Default byte limit (None = destination free space)"),
    ] = None


class CopyConfig(BaseModel):
    """Resolved configuration of one copy run.

    Attributes:
        source: Existing source directory.
        destination: Existing destination directory, distinct from source.
        max_files: Maximum number of files, 0 for no limit.
        verbose: Emit one line per copied file.
        extensions: Allowed extensions, empty for all.
        max_bytes: Byte limit, None for the destination free space.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path
    max_files: Annotated[int, Field(ge=0, le=MAX_FILES_LIMIT)] = 0
    verbose: bool = False
    extensions: tuple[str, ...] = ()
    max_bytes: Annotated[int | None, Field(ge=1)] = None


class ConfigError(Exception):
    """Base exception for configuration file errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


def load_defaults(path: Path | None = None) -> CopyDefaults:
    """Load user defaults from a TOML file.

    A missing file is not an error: built-in defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CopyDefaults object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or its content doesn't
            match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CopyDefaults()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        defaults = CopyDefaults.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded defaults from %s", config_path)
    return defaults


def resolve_config(
    source: Path,
    destination: Path,
    max_files: int | str,
    *,
    extensions: Sequence[str] = (),
    verbose: bool = False,
    max_bytes: int | None = None,
    defaults: CopyDefaults | None = None,
) -> CopyConfig:
    """Validate command line arguments and merge them with the defaults.

    The destination is created (with parents) when it does not exist.
    Checks run in order and stop at the first failure: source, target,
    file count, then source/target identity.

    Args:
        source: Source directory argument.
        destination: Destination directory argument.
        max_files: Maximum number of files argument, as given on the
            command line or already converted. A non-numeric value counts
            as out of range.
        extensions: Extensions given on the command line; replace the
            default list when not empty.
        verbose: Verbose flag; ORed with the default.
        max_bytes: Byte limit; ignored when None or non-positive.
        defaults: User defaults, built-in defaults if None.

    Returns:
        Validated CopyConfig.

    Raises:
        ArgumentValidationError: If an argument is invalid. The message is
            the detail shown to the user.
    """
    defaults = defaults or CopyDefaults()

    if not source.exists():
        raise ArgumentValidationError("Source path doesn't exist")
    if not source.is_dir():
        raise ArgumentValidationError("Source path is not a directory")

    if not destination.exists():
        try:
            destination.mkdir(parents=True)
        except OSError as e:
            raise ArgumentValidationError(f"Cannot create target directory: {e}") from e
        logger.debug("Created destination %s", destination)
    if not destination.is_dir():
        raise ArgumentValidationError("Target path is not a directory")

    max_files = _parse_max_files(max_files)
    if not 0 <= max_files <= MAX_FILES_LIMIT:
        raise ArgumentValidationError(
            f"MaxFiles must be between 0 and {MAX_FILES_LIMIT} inclusively"
        )

    if source.resolve() == destination.resolve():
        raise ArgumentValidationError("Source and target directory are the same")

    effective_bytes = max_bytes if max_bytes is not None and max_bytes > 0 else defaults.max_bytes

    return CopyConfig(
        source=source,
        destination=destination,
        max_files=max_files,
        verbose=verbose or defaults.verbose,
        extensions=tuple(extensions) if extensions else tuple(defaults.extensions),
        max_bytes=effective_bytes,
    )


def _parse_max_files(value: int | str) -> int:
    """Convert a file count argument, mapping garbage to -1."""
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError:
        logger.debug("Non-numeric file count %r", value)
        return -1
