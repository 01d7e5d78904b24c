# -------------------------------------
# NodeSet: comma-separated Nodes
# -------------------------------------
"""
A NodeSet is the top-level notation: "node[1-10],gpu-node[1-20/2],apu-node4".

Top-level commas separate Nodes; commas inside a bracket group belong to
that group's RangeSet. Nodes sharing a template are merged at parse time
whenever a single Node can denote both.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import MergeConflictError
from .node import Node, group_spans

__all__ = ["NodeSet", "split_nodes", "optimize"]


def split_nodes(text: str) -> List[str]:
    """
    Split on commas that are not inside a bracket group.

    split_nodes("n[1,3],m2")  ->  ["n[1,3]", "m2"]
    """
    spans = group_spans(text)
    out: List[str] = []
    start = 0
    k = 0
    for i, ch in enumerate(text):
        while k < len(spans) and spans[k][1] <= i:
            k += 1
        if ch != ",":
            continue
        if k < len(spans) and spans[k][0] <= i:
            continue
        out.append(text[start:i])
        start = i + 1
    out.append(text[start:])
    return [s for s in out if s]


def optimize(nodes: List[Node]) -> List[Node]:
    """Merge every Node into the one existing entry it can union with, if any."""
    merged: List[Node] = []
    for node in nodes:
        matches = []
        for i, existing in enumerate(merged):
            u = existing.union(node)
            if u is not None:
                matches.append((i, u))

        if not matches:
            merged.append(node.copy())
        elif len(matches) == 1:
            i, u = matches[0]
            merged[i] = u
        else:
            targets = ", ".join(str(merged[i]) for i, _ in matches)
            raise MergeConflictError(f"{node} can merge with more than one node: {targets}")
    return merged


@dataclass
class NodeSet:
    nodes: List[Node] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "NodeSet":
        return cls(optimize([Node.parse(s) for s in split_nodes(text)]))

    def is_empty(self) -> bool:
        return not self.nodes

    def count(self) -> int:
        return sum(n.count() for n in self.nodes)

    def __iter__(self):
        for node in self.nodes:
            yield from node

    def expand(self, separator: str = " ") -> str:
        return separator.join(node.expand(separator) for node in self.nodes)

    def intersection(self, other: "NodeSet") -> "NodeSet":
        out: List[Node] = []
        for a in self.nodes:
            for b in other.nodes:
                common = a.intersection(b)
                if common is not None:
                    out.append(common)
        return NodeSet(out)

    def union(self, other: "NodeSet") -> "NodeSet":
        return NodeSet(optimize(self.nodes + other.nodes))

    def __str__(self) -> str:
        return ",".join(str(n) for n in self.nodes)
