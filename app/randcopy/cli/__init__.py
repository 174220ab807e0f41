"""CLI package for randcopy.

This package contains the Typer application.
"""

from randcopy.cli.main import app

__all__ = ["app"]
