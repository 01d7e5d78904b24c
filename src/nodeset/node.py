# -------------------------------------
# Node: a name template with range groups
# -------------------------------------
"""
A Node is one machine-name pattern such as "rack[1-4]node[01-10]-cpu2".

Scanner output (structure, no expansion):
  - Lit(text)           literal text between groups
  - Bracketed(raw)      "[...]" group, raw is the inner text
  - Bare(raw)           a bare run of digits, raw is the digits

Every Bracketed/Bare group becomes one RangeSet. The template is the list
of literals between them; "rack{}node{}-cpu{}" is its printable form.

Enumeration is a cartesian product in reading order: the rightmost group
varies fastest, like an odometer.

    r[1-2]esw[1-3] -> r1esw1 r1esw2 r1esw3 r2esw1 r2esw2 r2esw3
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .errors import GroupRangeSetError, MalformedNodeError, ParseError
from .rangeset import RangeSet

__all__ = [
    "Node",
    "Lit",
    "Bracketed",
    "Bare",
    "scan_segments",
    "group_spans",
]

# ============================================================
# Segments (scanner output)
# ============================================================

@dataclass(frozen=True)
class Lit:
    text: str

@dataclass(frozen=True)
class Bracketed:
    raw: str

@dataclass(frozen=True)
class Bare:
    raw: str

Segment = Union[Lit, Bracketed, Bare]

# ============================================================
# regexes
# ============================================================

_GROUP_RE = re.compile(r"\[([\d,\-/]+)\]|(\d+)")
_MALFORMED_CHARS = "[]/"


def group_spans(text: str) -> List[Tuple[int, int]]:
    """(start, end) offsets of every bracket group or bare number in text."""
    return [m.span() for m in _GROUP_RE.finditer(text)]


def scan_segments(raw: str) -> List[Segment]:
    segs: List[Segment] = []
    pos = 0
    for m in _GROUP_RE.finditer(raw):
        if m.start() > pos:
            segs.append(Lit(raw[pos:m.start()]))
        if m.group(1) is not None:
            segs.append(Bracketed(m.group(1)))
        else:
            segs.append(Bare(m.group(2)))
        pos = m.end()
    if pos < len(raw):
        segs.append(Lit(raw[pos:]))
    return segs

# ============================================================
# Node
# ============================================================

@dataclass
class Node:
    literals: Tuple[str, ...]
    groups: List[RangeSet] = field(default_factory=list)
    positions: List[Tuple[int, int]] = field(default_factory=list, compare=False, repr=False)
    started: bool = field(default=False, compare=False, repr=False)
    exhausted: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self):
        self.literals = tuple(self.literals)
        if len(self.literals) != len(self.groups) + 1:
            raise ValueError(
                f"{len(self.groups)} groups need {len(self.groups) + 1} literals, got {len(self.literals)}"
            )
        if len(self.positions) != len(self.groups):
            self.positions = [(0, 0)] * len(self.groups)

    @classmethod
    def parse(cls, raw: str) -> "Node":
        literals: List[str] = []
        groups: List[RangeSet] = []
        buf: List[str] = []

        for seg in scan_segments(raw):
            if isinstance(seg, Lit):
                buf.append(seg.text)
                continue
            literals.append("".join(buf))
            buf.clear()
            try:
                groups.append(RangeSet.parse(seg.raw))
            except ParseError as e:
                raise GroupRangeSetError(seg.raw, e) from e
        literals.append("".join(buf))

        template = "{}".join(literals)
        if any(ch in template for ch in _MALFORMED_CHARS):
            raise MalformedNodeError(template)
        return cls(tuple(literals), groups)

    @property
    def template(self) -> str:
        return "{}".join(self.literals)

    def copy(self) -> "Node":
        return Node(self.literals, [g.copy() for g in self.groups])

    def count(self) -> int:
        if self.groups:
            return math.prod(g.count() for g in self.groups)
        return 1 if self.template else 0

    def is_empty(self) -> bool:
        return self.count() == 0

    # ------------------------------------------------------------
    # rendering / enumeration
    # ------------------------------------------------------------

    def render_current(self) -> str:
        parts = [self.literals[0]]
        for (value, pad), lit in zip(self.positions, self.literals[1:]):
            parts.append(str(value).zfill(pad))
            parts.append(lit)
        return "".join(parts)

    def reset(self) -> None:
        self.started = False
        self.exhausted = False
        for g in self.groups:
            g.reset()

    def next_value(self) -> str | None:
        """Next rendered name, or None once every combination has been produced."""
        if self.exhausted:
            return None

        if not self.groups:
            if self.started or not self.template:
                self.exhausted = True
                return None
            self.started = True
            return self.template

        if not self.started:
            self.started = True
            for i, g in enumerate(self.groups):
                g.reset()
                nxt = g.next_value()
                if nxt is None:
                    self.exhausted = True
                    return None
                self.positions[i] = nxt
            return self.render_current()

        # carry from the rightmost group leftwards
        for i in reversed(range(len(self.groups))):
            g = self.groups[i]
            nxt = g.next_value()
            if nxt is not None:
                self.positions[i] = nxt
                return self.render_current()
            g.reset()
            self.positions[i] = g.next_value()

        self.exhausted = True
        return None

    def __iter__(self):
        self.reset()
        while True:
            name = self.next_value()
            if name is None:
                return
            yield name

    def expand(self, separator: str = " ") -> str:
        return separator.join(self)

    # ------------------------------------------------------------
    # set algebra
    # ------------------------------------------------------------

    def intersection(self, other: "Node") -> "Node | None":
        """Names denoted by both nodes, or None. Differing templates never intersect."""
        if self.literals != other.literals:
            return None
        if not self.groups:
            return self.copy() if self.template else None

        groups: List[RangeSet] = []
        for a, b in zip(self.groups, other.groups):
            common = a.intersection(b)
            if common is None:
                return None
            groups.append(common)
        return Node(self.literals, groups)

    def union(self, other: "Node") -> "Node | None":
        """
        Single Node denoting exactly the names of both, or None.

        Only possible when the templates match and the nodes differ in at
        most one position; otherwise the product would pick up names that
        neither node has.
        """
        if self.literals != other.literals:
            return None

        differing = [
            i for i, (a, b) in enumerate(zip(self.groups, other.groups))
            if not a.same_values(b)
        ]
        if len(differing) > 1:
            return None

        groups = [g.copy() for g in self.groups]
        for i in differing:
            groups[i] = self.groups[i].union(other.groups[i])
        return Node(self.literals, groups)

    # ------------------------------------------------------------
    # display
    # ------------------------------------------------------------

    def __str__(self) -> str:
        parts = [self.literals[0]]
        for g, lit in zip(self.groups, self.literals[1:]):
            parts.append(str(g) if g.is_singleton() else f"[{g}]")
            parts.append(lit)
        return "".join(parts)
