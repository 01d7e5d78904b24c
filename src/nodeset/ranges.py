# -------------------------------------
# Range: one arithmetic progression
# -------------------------------------
"""
A Range is a single arithmetic progression written as

    A        one value
    A-B      every value from A to B (B may be smaller than A)
    A-B/S    every S-th value from A towards B

Padding is lexical: if the bound iteration starts from carries leading
zeros ("097-103"), every rendered value is zero-filled to that width.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

import numpy as np

from .errors import InvalidStepError, NotANumberError

__all__ = ["Range", "guess_padding"]


_UINT_RE = re.compile(r"[0-9]+")
UINT_MAX = 0xFFFFFFFF


def _parse_uint(s: str) -> int:
    if not _UINT_RE.fullmatch(s):
        raise NotANumberError(s)
    n = int(s)
    if n > UINT_MAX:
        raise NotANumberError(s)
    return n


def guess_padding(s: str) -> int:
    """
    Width to zero-fill to, or 0 for none.

    "007" -> 3, "7" -> 0, "0" -> 0, "100" -> 0
    """
    n = _parse_uint(s)
    return len(s) if len(s) > len(str(n)) else 0


@dataclass
class Range:
    start: int
    end: int
    step: int = 1
    pad: int = field(default=0, compare=False)
    cursor: int | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.step < 1:
            raise InvalidStepError(str(self.step))
        if self.cursor is None:
            self.cursor = self.start

    # ------------------------------------------------------------
    # construction
    # ------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Range":
        if "/" in text:
            base, step_s = text.split("/", 1)
            step = _parse_uint(step_s)
            if step == 0:
                raise InvalidStepError(step_s)
        else:
            base, step = text, 1

        if "-" in base:
            start_s, end_s = base.split("-", 1)
        else:
            start_s = end_s = base

        start = _parse_uint(start_s)
        end = _parse_uint(end_s)

        # padding follows the smaller bound: "100-080" pads from "080"
        pad = guess_padding(start_s) if start <= end else guess_padding(end_s)
        return cls(start, end, step, pad)

    @classmethod
    def from_values(cls, start: int, end: int, step: int = 1, pad: int = 0) -> "Range":
        return cls(int(start), int(end), int(step), int(pad))

    # ------------------------------------------------------------
    # properties
    # ------------------------------------------------------------

    def is_reverse(self) -> bool:
        return self.start > self.end

    def is_single(self) -> bool:
        return self.start == self.end

    def count(self) -> int:
        return 1 + abs(self.end - self.start) // self.step

    def reversed(self) -> "Range":
        return Range(self.end, self.start, self.step, self.pad)

    def values(self) -> np.ndarray:
        """All values of the progression, in iteration order."""
        if self.is_reverse():
            return np.arange(self.start, self.end - 1, -self.step, dtype=np.int64)
        return np.arange(self.start, self.end + 1, self.step, dtype=np.int64)

    # ------------------------------------------------------------
    # cursor iteration
    # ------------------------------------------------------------

    def reset(self) -> None:
        self.cursor = self.start

    def next_value(self) -> int | None:
        cur = self.cursor
        if self.is_reverse():
            if cur < self.end:
                return None
            self.cursor = cur - self.step
        else:
            if cur > self.end:
                return None
            self.cursor = cur + self.step
        return cur

    def render(self, value: int) -> str:
        return str(value).zfill(self.pad)

    def __iter__(self):
        self.reset()
        while True:
            v = self.next_value()
            if v is None:
                return
            yield self.render(v)

    # ------------------------------------------------------------
    # set algebra
    # ------------------------------------------------------------

    def union(self, other: "Range") -> list["Range"]:
        """Union of both progressions, folded back into ascending Ranges."""
        from .fold import fold, sorted_union

        return fold(sorted_union(self.values(), other.values()), max(self.pad, other.pad))

    def intersection(self, other: "Range") -> "Range | None":
        from .fold import sorted_intersection

        common = sorted_intersection(self.values(), other.values())
        if common.size == 0:
            return None
        # two progressions meet on a progression, so one step describes it
        step = int(common[1] - common[0]) if common.size > 1 else 1
        return Range.from_values(common[0], common[-1], step, max(self.pad, other.pad))

    # ------------------------------------------------------------
    # display
    # ------------------------------------------------------------

    def __str__(self) -> str:
        if self.start != self.end:
            out = f"{self.render(self.start)}-{self.render(self.end)}"
        else:
            out = self.render(self.start)
        if self.step != 1:
            out = f"{out}/{self.step}"
        return out
