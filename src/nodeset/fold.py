# -------------------------------------
# fold: integers -> Ranges
# -------------------------------------
"""
Fold a sorted, deduplicated run of integers back into Ranges.

The scan is greedy and left to right: a run starts at the first unused
value, takes its step from the next value, and grows while consecutive
differences keep that step.

    [1, 3, 5, 6, 7, 10]  ->  1-5/2, 6-7, 10
"""
from collections.abc import Iterable

import numpy as np

from .ranges import Range

__all__ = ["fold", "fold_runs", "sorted_union", "sorted_intersection"]


def _as_array(values: Iterable[int]) -> np.ndarray:
    if isinstance(values, np.ndarray):
        return values.astype(np.int64, copy=False)
    return np.asarray(list(values), dtype=np.int64)


def sorted_union(*arrays) -> np.ndarray:
    """Sorted, deduplicated union of any number of integer arrays."""
    if not arrays:
        return np.empty(0, dtype=np.int64)
    return np.unique(np.concatenate([_as_array(a) for a in arrays]))


def sorted_intersection(a, b) -> np.ndarray:
    """Sorted, deduplicated values present in both a and b."""
    return np.intersect1d(_as_array(a), _as_array(b))


def fold_runs(values) -> list[tuple[int, int, int]]:
    """(start, end, step) for every run of a strictly increasing array."""
    v = _as_array(values)
    n = v.size
    if n == 0:
        raise ValueError("cannot fold an empty sequence")

    diffs = np.diff(v)
    runs: list[tuple[int, int, int]] = []
    i = 0
    while i < n:
        if i + 1 == n:
            runs.append((int(v[i]), int(v[i]), 1))
            break
        step = diffs[i]
        j = i + 1
        while j + 1 < n and diffs[j] == step:
            j += 1
        runs.append((int(v[i]), int(v[j]), int(step)))
        i = j + 1
    return runs


def fold(values, pad: int = 0) -> list[Range]:
    """Fold a sorted, deduplicated, non-empty sequence into ascending Ranges sharing `pad`."""
    return [Range.from_values(s, e, st, pad) for s, e, st in fold_runs(values)]
