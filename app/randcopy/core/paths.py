"""XDG-compliant path management for randcopy.

XDG defaults:
- Config: ~/.config/randcopy/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "randcopy"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/randcopy/ (or XDG_CONFIG_HOME/randcopy/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/randcopy/config.toml.
    """
    return get_config_dir() / "config.toml"
