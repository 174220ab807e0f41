"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import random
from pathlib import Path

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible selections."""
    return random.Random(1234)


@pytest.fixture
def ten_files(tmp_path: Path) -> Path:
    """Source directory with 10 text files of 100 bytes each (1000 bytes total)."""
    source = tmp_path / "source"
    source.mkdir()
    for i in range(10):
        (source / f"file{i}.txt").write_bytes(b"x" * 100)
    return source


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Source tree with files spread over nested and hidden directories.

    Layout::

        tree/
            a.jpg          (10 bytes)
            b.png          (20 bytes)
            README         (no extension)
            .hidden.jpg    (hidden file)
            sub/
                c.jpg      (30 bytes)
                deeper/
                    d.TXT  (40 bytes)
                    e.txt  (50 bytes)
            .cache/
                f.jpg      (60 bytes)
    """
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / ".cache").mkdir()
    (root / "a.jpg").write_bytes(b"a" * 10)
    (root / "b.png").write_bytes(b"b" * 20)
    (root / "README").write_text("readme")
    (root / ".hidden.jpg").write_bytes(b"h" * 5)
    (root / "sub" / "c.jpg").write_bytes(b"c" * 30)
    (root / "sub" / "deeper" / "d.TXT").write_bytes(b"d" * 40)
    (root / "sub" / "deeper" / "e.txt").write_bytes(b"e" * 50)
    (root / ".cache" / "f.jpg").write_bytes(b"f" * 60)
    return root
