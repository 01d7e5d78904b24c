# -------------------------------------
# RangeSet: comma-separated Ranges
# -------------------------------------
"""
A RangeSet is the inside of one bracket group: "1,3-5,89" or "9-2,101,2-8/2".

Declared order is kept for display and iteration. Set algebra ignores
order and returns ascending, re-folded Ranges.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .fold import fold, sorted_intersection, sorted_union
from .ranges import Range

__all__ = ["RangeSet"]


@dataclass
class RangeSet:
    ranges: list[Range] = field(default_factory=list)
    index: int = field(default=0, compare=False, repr=False)

    @classmethod
    def parse(cls, text: str) -> "RangeSet":
        return cls([Range.parse(piece) for piece in text.split(",")])

    @classmethod
    def empty(cls) -> "RangeSet":
        return cls([])

    # ------------------------------------------------------------
    # properties
    # ------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.ranges

    def is_singleton(self) -> bool:
        """True for a lone value, which displays without brackets (node3, not node[3])."""
        return len(self.ranges) == 1 and self.ranges[0].is_single() and self.ranges[0].step == 1

    def count(self) -> int:
        return sum(r.count() for r in self.ranges)

    def pad(self) -> int:
        return max((r.pad for r in self.ranges), default=0)

    def values(self) -> np.ndarray:
        """Every value, in declared order (duplicates across Ranges are kept)."""
        if not self.ranges:
            return np.empty(0, dtype=np.int64)
        return np.concatenate([r.values() for r in self.ranges])

    def same_values(self, other: "RangeSet") -> bool:
        if self.ranges == other.ranges:
            return True
        return np.array_equal(np.unique(self.values()), np.unique(other.values()))

    # ------------------------------------------------------------
    # cursor iteration
    # ------------------------------------------------------------

    def reset(self) -> None:
        self.index = 0
        for r in self.ranges:
            r.reset()

    def next_value(self) -> tuple[int, int] | None:
        """Next (value, pad), walking the Ranges left to right."""
        while self.index < len(self.ranges):
            r = self.ranges[self.index]
            v = r.next_value()
            if v is not None:
                return v, r.pad
            self.index += 1
        return None

    def __iter__(self):
        self.reset()
        while True:
            nxt = self.next_value()
            if nxt is None:
                return
            v, pad = nxt
            yield str(v).zfill(pad)

    # ------------------------------------------------------------
    # set algebra
    # ------------------------------------------------------------

    def union(self, other: "RangeSet") -> "RangeSet":
        merged = sorted_union(self.values(), other.values())
        if merged.size == 0:
            return RangeSet.empty()
        return RangeSet(fold(merged, max(self.pad(), other.pad())))

    def intersection(self, other: "RangeSet") -> "RangeSet | None":
        # the empty set is the identity here, not the absorbing element
        if self.is_empty():
            return other.copy()
        if other.is_empty():
            return self.copy()
        common = sorted_intersection(self.values(), other.values())
        if common.size == 0:
            return None
        return RangeSet(fold(common, max(self.pad(), other.pad())))

    def copy(self) -> "RangeSet":
        return RangeSet([Range.from_values(r.start, r.end, r.step, r.pad) for r in self.ranges])

    def __str__(self) -> str:
        return ",".join(str(r) for r in self.ranges)
