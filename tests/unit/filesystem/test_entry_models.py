"""Unit tests for filesystem models."""

from pathlib import Path

import pytest
from randcopy.errors import InvalidArgumentError
from randcopy.filesystem.models import FileEntry


class TestFileEntry:
    """Tests for FileEntry."""

    def test_name(self) -> None:
        """name is the base name of the path."""
        entry = FileEntry(Path("/music/artist/album/track.mp3"), 100)

        assert entry.name == "track.mp3"

    def test_short_path_keeps_last_three_segments(self) -> None:
        """short_path keeps the last three path segments."""
        entry = FileEntry(Path("/music/artist/album/track.mp3"), 100)

        assert entry.short_path == "artist/album/track.mp3"

    def test_short_path_of_short_path(self) -> None:
        """Paths with fewer than three segments are kept whole."""
        entry = FileEntry(Path("album/track.mp3"), 100)

        assert entry.short_path == "album/track.mp3"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/track.mp3", "track.mp3"), ("/album/track.mp3", "album/track.mp3")],
    )
    def test_short_path_drops_root(self, path: str, expected: str) -> None:
        """Files near the filesystem root do not start with a separator."""
        assert FileEntry(Path(path), 1).short_path == expected

    def test_zero_size_allowed(self) -> None:
        """Empty files are valid entries."""
        assert FileEntry(Path("empty.txt"), 0).size_bytes == 0

    def test_negative_size_rejected(self) -> None:
        """Negative sizes raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            FileEntry(Path("bad.txt"), -1)

    def test_immutable(self) -> None:
        """FileEntry is frozen."""
        entry = FileEntry(Path("a.txt"), 1)

        with pytest.raises(AttributeError):
            entry.size_bytes = 2  # type: ignore[misc]
