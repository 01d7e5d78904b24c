# -------------------------------------
# nodeset
# -------------------------------------
"""
Parse, expand, fold and combine cluster node sets.

    >>> from nodeset import NodeSet
    >>> ns = NodeSet.parse("node[1-10],node[5-20]")
    >>> str(ns), ns.count()
    ('node[1-20]', 20)

Modules:
- ranges:   Range, one arithmetic progression ("1-25/2", "097-103")
- fold:     integers -> minimal ordered Ranges
- rangeset: RangeSet, comma-separated Ranges ("1,3-5,89")
- node:     Node, a name template with range groups ("rack[1-4]node[1-10]")
- nodeset:  NodeSet, comma-separated Nodes, merged at parse time
- config:   YAML defaults for the command line
"""
from .errors import (
    GroupRangeSetError,
    InvalidStepError,
    MalformedNodeError,
    MergeConflictError,
    NodeSetError,
    NotANumberError,
    ParseError,
)
from .fold import fold
from .node import Node
from .nodeset import NodeSet
from .ranges import Range
from .rangeset import RangeSet

__all__ = [
    "Range",
    "RangeSet",
    "Node",
    "NodeSet",
    "fold",
    "NodeSetError",
    "ParseError",
    "NotANumberError",
    "InvalidStepError",
    "GroupRangeSetError",
    "MalformedNodeError",
    "MergeConflictError",
]
