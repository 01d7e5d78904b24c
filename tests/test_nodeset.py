"""Tests for nodeset.nodeset module."""

import pytest

from nodeset.errors import GroupRangeSetError, MalformedNodeError, MergeConflictError
from nodeset.node import Node
from nodeset.nodeset import NodeSet, optimize, split_nodes


class TestSplitNodes:
    """Tests for split_nodes."""

    def test_commas_inside_brackets(self):
        assert split_nodes("node[1-10],gpu-node[1-20/2],apu-node[4]") == [
            "node[1-10]", "gpu-node[1-20/2]", "apu-node[4]",
        ]

    def test_range_list_kept(self):
        assert split_nodes("n[1,3-5],m[2,4]") == ["n[1,3-5]", "m[2,4]"]

    def test_empty_pieces_dropped(self):
        assert split_nodes("node1,,node2,") == ["node1", "node2"]

    def test_empty(self):
        assert split_nodes("") == []


class TestNodeSetParse:
    """Tests for NodeSet.parse."""

    def test_three_nodes(self):
        ns = NodeSet.parse("node[1-10],gpu-node[1-20/2],apu-node[4]")
        assert ns.nodes == [
            Node.parse("node[1-10]"),
            Node.parse("gpu-node[1-20/2]"),
            Node.parse("apu-node[4]"),
        ]

    def test_merge(self):
        ns = NodeSet.parse("node[1-10],node[5-20]")
        assert ns == NodeSet([Node.parse("node[1-20]")])
        assert str(ns) == "node[1-20]"

    def test_merge_keeps_position(self):
        ns = NodeSet.parse("node[1-10],gpu-node[1-20/2],node[5-20]")
        assert ns.nodes == [Node.parse("node[1-20]"), Node.parse("gpu-node[1-20/2]")]

    def test_merge_padded(self):
        assert str(NodeSet.parse("node[01-05],node[06-10]")) == "node[01-10]"

    def test_merge_bare_names(self):
        assert str(NodeSet.parse("node1,node2,node3")) == "node[1-3]"

    def test_duplicates(self):
        ns = NodeSet.parse("node1,node1")
        assert ns.count() == 1
        assert str(ns) == "node1"

    def test_unmergeable_kept_apart(self):
        ns = NodeSet.parse("a[1]b[1],a[2]b[2]")
        assert len(ns.nodes) == 2

    def test_merge_conflict(self):
        with pytest.raises(MergeConflictError):
            NodeSet.parse("a[1]b[1],a[2]b[2],a[1]b[2]")

    def test_parse_error_propagates(self):
        with pytest.raises(MalformedNodeError):
            NodeSet.parse("node[1-3],bad[")

    def test_bound_too_large(self):
        with pytest.raises(GroupRangeSetError):
            NodeSet.parse("n[99999999999999999999],n[1]")

    def test_merge_leaves_identical_positions_unexpanded(self):
        ns = NodeSet.parse("n[0-4000000000]a1,n[0-4000000000]a2")
        assert str(ns) == "n[0-4000000000]a[1-2]"
        assert ns.count() == 2 * 4000000001

    def test_empty(self):
        ns = NodeSet.parse("")
        assert ns.is_empty()
        assert ns.count() == 0
        assert ns.expand() == ""

    def test_optimize_direct(self):
        nodes = [Node.parse("n[1-3]"), Node.parse("m1"), Node.parse("n[4-6]")]
        assert [str(n) for n in optimize(nodes)] == ["n[1-6]", "m1"]


class TestNodeSetOperations:
    """Tests for count, expand, iteration and display."""

    def test_count(self):
        assert NodeSet.parse("node[1-2],gpu-node[1-4/2],apu-node[4]").count() == 5

    def test_count_literals(self):
        assert NodeSet.parse("login,compute[1-2]").count() == 3

    def test_expand(self):
        ns = NodeSet.parse("node[1-2],gpu-node[1-4/2],apu-node[4]")
        assert ns.expand(",") == "node1,node2,gpu-node1,gpu-node3,apu-node4"

    def test_expand_default_separator(self):
        assert NodeSet.parse("n[1-3]").expand() == "n1 n2 n3"

    def test_iteration(self):
        ns = NodeSet.parse("node[1-2],gpu-node[1-4/2],apu-node[4]")
        assert list(ns) == ["node1", "node2", "gpu-node1", "gpu-node3", "apu-node4"]

    def test_display(self):
        ns = NodeSet.parse("rack[1-2]node[01-03],login")
        assert str(ns) == "rack[1-2]node[01-03],login"

    def test_equality(self):
        a = NodeSet.parse("node[1-2],gpu-node[1-4/2],apu-node[4]")
        b = NodeSet.parse("node[1-2],gpu-node[1-4/2],apu-node[4]")
        assert a == b

    def test_large_count_without_expansion(self):
        ns = NodeSet.parse("r[1-100000]n[1-100000]c[1-1000]")
        assert ns.count() == 10**13


class TestNodeSetIntersection:
    """Tests for NodeSet.intersection and union."""

    def test_many_to_many(self):
        a = NodeSet.parse("node[1-50],gpu-node[1-20/5],apu-node[1-1000]")
        b = NodeSet.parse("node[50-100],gpu-node[1-20/10],apu-node[500]")
        assert a.intersection(b).expand(",") == "node50,gpu-node1,gpu-node11,apu-node500"

    def test_no_overlap(self):
        a = NodeSet.parse("node[1-10]")
        b = NodeSet.parse("gpu[1-10],node[20-30]")
        assert a.intersection(b).is_empty()

    def test_union(self):
        a = NodeSet.parse("n[1-3]")
        b = NodeSet.parse("n[4-6],m1")
        assert str(a.union(b)) == "n[1-6],m1"
