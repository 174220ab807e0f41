"""Random selection of candidates under a count and byte budget.

Two policies, chosen by comparing the count limit with the number of
candidates:

- Eviction: when every candidate may be copied as far as the count is
  concerned, start from all of them and drop random ones until the total
  fits the byte limit.
- Greedy inclusion: when fewer files than candidates are wanted, offer
  random candidates one at a time and keep those that still fit. A
  candidate that does not fit is discarded for good, even if a later,
  smaller one would have left room for it.

Each draw is uniform over the candidates still in the pool.
"""

import logging
import random
from collections.abc import Sequence

from randcopy.core.budget import SelectionBudget
from randcopy.core.models import SelectionResult
from randcopy.filesystem.models import FileEntry

logger = logging.getLogger(__name__)


def select_files(
    candidates: Sequence[FileEntry],
    budget: SelectionBudget,
    rng: random.Random | None = None,
) -> SelectionResult:
    """Select a random subset of ``candidates`` within ``budget``.

    The byte limit is re-read on every step, so a destination filling up
    during selection tightens the limit for the remaining draws.

    Args:
        candidates: Files found by the scanner. Not modified.
        budget: Count and byte limits.
        rng: Random generator, a fresh unseeded one if None.

    Returns:
        SelectionResult whose byte count never exceeds the byte limit
        read at the last step.
    """
    rng = rng or random.Random()
    pool = list(candidates)

    if not pool:
        return SelectionResult()

    if not budget.count_bounded or budget.max_count >= len(pool):
        logger.debug("Selecting by eviction from %d candidates (%r)", len(pool), budget)
        return _evict_until_within_bytes(pool, budget, rng)

    logger.debug(
        "Selecting up to %d of %d candidates (%r)", budget.max_count, len(pool), budget
    )
    return _include_until_count(pool, budget, rng)


def _evict_until_within_bytes(
    pool: list[FileEntry],
    budget: SelectionBudget,
    rng: random.Random,
) -> SelectionResult:
    """Drop random entries from ``pool`` until its total fits the byte limit."""
    total = sum(entry.size_bytes for entry in pool)
    evicted = 0
    while total > budget.max_bytes:
        entry = _swap_remove(pool, rng.randrange(len(pool)))
        total -= entry.size_bytes
        evicted += 1

    if evicted:
        logger.debug("Evicted %d files, %d kept (%d bytes)", evicted, len(pool), total)
    return SelectionResult(files=tuple(pool), copied_bytes=total)


def _include_until_count(
    pool: list[FileEntry],
    budget: SelectionBudget,
    rng: random.Random,
) -> SelectionResult:
    """Draw random entries from ``pool``, keeping those that fit, up to the count."""
    selected: list[FileEntry] = []
    total = 0
    while len(selected) < budget.max_count and pool:
        entry = _swap_remove(pool, rng.randrange(len(pool)))
        if entry.size_bytes + total <= budget.max_bytes:
            selected.append(entry)
            total += entry.size_bytes

    logger.debug("Included %d files (%d bytes)", len(selected), total)
    return SelectionResult(files=tuple(selected), copied_bytes=total)


def _swap_remove(pool: list[FileEntry], index: int) -> FileEntry:
    """Remove ``pool[index]`` in O(1) by moving the last element into its slot."""
    pool[index], pool[-1] = pool[-1], pool[index]
    return pool.pop()
