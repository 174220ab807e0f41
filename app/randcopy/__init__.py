"""randcopy - copy a random, size-bounded subset of a directory tree."""

__version__ = "0.3.0"
