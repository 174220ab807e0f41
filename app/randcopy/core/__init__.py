"""Core selection and copy logic for randcopy.

This module provides the random file copier, its selection budget and
selector, the session models, and the run configuration.
"""

from randcopy.core.budget import SelectionBudget
from randcopy.core.config import CopyConfig, CopyDefaults, load_defaults, resolve_config
from randcopy.core.copier import RandomFileCopier
from randcopy.core.models import CopyOutcome, CopySession, CopyState, SelectionResult
from randcopy.core.selector import select_files

__all__ = [
    "CopyConfig",
    "CopyDefaults",
    "CopyOutcome",
    "CopySession",
    "CopyState",
    "RandomFileCopier",
    "SelectionBudget",
    "SelectionResult",
    "load_defaults",
    "resolve_config",
    "select_files",
]
