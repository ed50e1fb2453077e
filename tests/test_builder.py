"""
Tests for NTree insertion logic.

These tests verify that the builder correctly places items:
- Appending while a node has spare capacity
- Descending into the floor child once a node is full
- Rejecting duplicates anywhere in the subtree without mutation
- Keeping every node within the branching factor
"""

import numpy as np
import pytest
from ntree import NumericComparator, TreeValidator
from ntree.core.node import NTreeGraph
from ntree.core.builder import TreeBuilder


def build(keys, branching):
    """Root is keys[0]; the rest are inserted below it."""
    graph = NTreeGraph(NumericComparator(), branching=branching)
    builder = TreeBuilder(graph)
    root = graph.add_node(keys[0])
    ids = [builder.add_child(root, key) for key in keys[1:]]
    return graph, builder, root, ids


def key_of(graph, node_id):
    return graph.get_node(node_id).key


def test_append_while_capacity_left():
    """The first N items become direct children of the root"""
    graph, _, root, ids = build([10, 2, 5, 9, 6], branching=4)

    assert graph.get_node(root).children == ids
    assert [key_of(graph, i) for i in ids] == [2, 5, 9, 6]


def test_full_node_descends_into_floor_child():
    """12 and 15 go below 9, the greatest root child smaller than them"""
    graph, _, root, ids = build([10, 2, 5, 9, 6, 12, 15], branching=4)

    nine = ids[2]
    assert [key_of(graph, i) for i in graph.get_node(nine).children] == [12, 15]
    assert len(graph.get_node(root).children) == 4


def test_select_branch_floor_child():
    graph, builder, root, ids = build([10, 2, 5, 9, 6], branching=4)

    assert key_of(graph, builder.select_branch(root, 7)) == 6
    assert key_of(graph, builder.select_branch(root, 5.5)) == 5
    assert key_of(graph, builder.select_branch(root, 100)) == 9


def test_select_branch_falls_back_to_least_child():
    """Items below every child go to the smallest child"""
    graph, builder, root, _ = build([10, 2, 5, 9, 6], branching=4)

    assert key_of(graph, builder.select_branch(root, 1)) == 2
    assert key_of(graph, builder.select_branch(root, 2)) == 2


def test_select_branch_on_leaf():
    graph, builder, root, _ = build([10], branching=4)

    with pytest.raises(ValueError):
        builder.select_branch(root, 3)


def test_duplicate_of_root_rejected():
    graph, builder, root, _ = build([10, 2], branching=4)

    assert builder.add_child(root, 10) is None
    assert graph.size() == 2


def test_duplicate_deep_in_subtree_rejected():
    """A key stored two levels down is still found and rejected"""
    graph, builder, root, _ = build([10, 2, 5, 9, 6, 12, 15], branching=4)
    before = {i: list(node.children) for i, node in graph.nodes.items()}

    assert builder.add_child(root, 15) is None
    assert builder.add_child(root, 12) is None

    assert graph.size() == 7
    assert {i: list(node.children) for i, node in graph.nodes.items()} == before


def test_add_child_unknown_parent():
    graph, builder, _, _ = build([10], branching=4)

    with pytest.raises(ValueError):
        builder.add_child(42, 3)


def test_insert_into_subtree():
    """add_child works from any node, not just the root"""
    graph, builder, root, ids = build([10, 2], branching=4)
    two = ids[0]

    new_id = builder.add_child(two, 1)

    assert graph.get_node(two).children == [new_id]


def test_branching_one_builds_chain():
    """With N=1 every node has a single child"""
    graph, _, root, ids = build([5, 1, 2, 3, 4], branching=1)

    for node in graph.nodes.values():
        assert len(node.children) <= 1
    assert None not in ids
    assert sum(1 for _ in graph.iter_subtree(root)) == 5


def test_random_insertions_respect_branching():
    """Many insertions keep every node within bounds and siblings unique"""
    np.random.seed(7)
    keys = np.random.randint(0, 500, size=400).tolist()

    graph = NTreeGraph(NumericComparator(), branching=3)
    builder = TreeBuilder(graph)
    root = graph.add_node(250)
    inserted = {250}
    for key in keys:
        result = builder.add_child(root, key)
        assert (result is None) == (key in inserted)
        inserted.add(key)

    validator = TreeValidator(graph)
    assert validator.check_branching() == []
    assert validator.check_sibling_uniqueness() == []
    assert validator.count_reachable() == len(inserted)
