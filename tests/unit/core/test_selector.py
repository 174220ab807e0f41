"""Unit tests for the random selector.

Covers both selection policies: eviction when the count does not bind,
greedy inclusion when it does.
"""

import random
from pathlib import Path

import pytest
from randcopy.core.budget import SelectionBudget
from randcopy.core.selector import select_files
from randcopy.filesystem.models import FileEntry


def _entries(*sizes: int) -> list[FileEntry]:
    """Create entries with the given sizes and distinct paths."""
    return [FileEntry(Path(f"/src/dir/file{i}.bin"), size) for i, size in enumerate(sizes)]


def _budget(max_bytes: int, max_count: int = 0) -> SelectionBudget:
    return SelectionBudget(lambda: max_bytes, max_count=max_count)


class TestSelectEdgeCases:
    """Tests for inputs shared by both policies."""

    def test_empty_candidates(self, rng: random.Random) -> None:
        """No candidates gives an empty result without error."""
        result = select_files([], _budget(1000, 5), rng)

        assert result.files == ()
        assert result.copied_bytes == 0

    @pytest.mark.parametrize("max_count", [0, 2])
    def test_zero_bytes_selects_nothing(self, rng: random.Random, max_count: int) -> None:
        """A zero byte limit empties the selection in both policies."""
        result = select_files(_entries(10, 20, 30), _budget(0, max_count), rng)

        assert result.files == ()
        assert result.copied_bytes == 0

    @pytest.mark.parametrize("max_count", [0, 2])
    def test_all_too_large(self, rng: random.Random, max_count: int) -> None:
        """Candidates each larger than the limit are never selected."""
        result = select_files(_entries(500, 600, 700), _budget(100, max_count), rng)

        assert result.files == ()

    def test_candidates_not_modified(self, rng: random.Random) -> None:
        """The caller's list is left untouched."""
        candidates = _entries(10, 20, 30, 40)
        snapshot = list(candidates)

        select_files(candidates, _budget(25), rng)
        select_files(candidates, _budget(1000, 2), rng)

        assert candidates == snapshot

    def test_default_rng(self) -> None:
        """Without an rng a fresh generator is used."""
        result = select_files(_entries(10, 20), _budget(1000))

        assert result.copied_bytes == 30


class TestEvictionPolicy:
    """Tests for selection when the count limit does not bind."""

    def test_everything_fits(self, rng: random.Random) -> None:
        """With enough bytes and no count limit every candidate is kept."""
        candidates = _entries(10, 20, 30)

        result = select_files(candidates, _budget(60), rng)

        assert set(result.files) == set(candidates)
        assert result.copied_bytes == 60

    def test_count_above_candidates_keeps_all(self, rng: random.Random) -> None:
        """A count larger than the candidate list behaves as no count limit."""
        candidates = _entries(*([100] * 10))

        result = select_files(candidates, _budget(10_000, 11), rng)

        assert len(result.files) == 10

    def test_count_equal_to_candidates_keeps_all(self, rng: random.Random) -> None:
        """A count equal to the candidate count also keeps everything."""
        candidates = _entries(1, 2, 3)

        result = select_files(candidates, _budget(10_000, 3), rng)

        assert len(result.files) == 3

    @pytest.mark.parametrize("seed", range(25))
    def test_over_budget_evicts_to_fit(self, seed: int) -> None:
        """Eviction leaves a subset whose total fits the limit."""
        candidates = _entries(*(random.Random(seed).randint(0, 300) for _ in range(20)))
        limit = sum(c.size_bytes for c in candidates) // 3

        result = select_files(candidates, _budget(limit), random.Random(seed))

        assert result.copied_bytes <= limit
        assert result.copied_bytes == sum(f.size_bytes for f in result.files)
        assert set(result.files) <= set(candidates)
        assert len(set(result.files)) == len(result.files)

    def test_stops_as_soon_as_within_budget(self) -> None:
        """Equal-sized files are evicted only until the total fits."""
        candidates = _entries(*([100] * 10))

        result = select_files(candidates, _budget(500), random.Random(7))

        assert len(result.files) == 5
        assert result.copied_bytes == 500

    def test_budget_shrinking_during_selection(self) -> None:
        """The byte limit is re-read on every eviction step."""
        readings = iter([300] + [100] * 10)
        budget = SelectionBudget(lambda: next(readings))

        result = select_files(_entries(*([100] * 4)), budget, random.Random(3))

        assert result.copied_bytes == 100
        assert len(result.files) == 1


class TestInclusionPolicy:
    """Tests for selection when fewer files than candidates are wanted."""

    @pytest.mark.parametrize("seed", range(25))
    def test_respects_count_and_bytes(self, seed: int) -> None:
        """The result never exceeds the count or the byte limit."""
        gen = random.Random(seed)
        candidates = _entries(*(gen.randint(1, 200) for _ in range(30)))
        max_count = gen.randint(1, 29)
        limit = gen.randint(0, 3000)

        result = select_files(candidates, _budget(limit, max_count), random.Random(seed))

        assert len(result.files) <= max_count
        assert result.copied_bytes <= limit
        assert result.copied_bytes == sum(f.size_bytes for f in result.files)
        assert set(result.files) <= set(candidates)
        assert len(set(result.files)) == len(result.files)

    def test_exact_count_when_bytes_allow(self, rng: random.Random) -> None:
        """With room to spare exactly max_count files are selected."""
        result = select_files(_entries(*([10] * 10)), _budget(10_000, 4), rng)

        assert len(result.files) == 4
        assert result.copied_bytes == 40

    def test_each_candidate_offered_once(self) -> None:
        """Every draw removes its candidate from the pool, accepted or not."""
        pool_sizes: list[int] = []

        class RecordingRandom(random.Random):
            def randrange(self, *args: int) -> int:  # type: ignore[override]
                pool_sizes.append(args[0])
                return super().randrange(*args)

        result = select_files(_entries(90, 10, 50, 70), _budget(60, 3), RecordingRandom(11))

        assert pool_sizes == list(range(4, 4 - len(pool_sizes), -1))
        assert result.copied_bytes <= 60
        assert all(f.size_bytes != 90 for f in result.files)

    def test_pool_exhausted_before_count(self) -> None:
        """Running out of candidates ends the selection below max_count."""
        candidates = _entries(50, 50, 500, 500)

        result = select_files(candidates, _budget(120, 3), random.Random(5))

        assert {f.size_bytes for f in result.files} == {50}
        assert len(result.files) == 2

    def test_reproducible_with_seed(self) -> None:
        """The same seed yields the same selection."""
        candidates = _entries(*range(1, 40))

        first = select_files(candidates, _budget(300, 6), random.Random(99))
        second = select_files(candidates, _budget(300, 6), random.Random(99))

        assert first == second
