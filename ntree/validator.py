"""Structural checks for NTree graphs.

This module verifies that a graph still has the properties every tree
operation relies on: bounded fan-out, no sibling duplicates, and a proper
tree shape (each node reachable through exactly one parent).
"""

from typing import Any, Dict, List, Set, Tuple
from collections import deque

from ntree.core.node import NTreeGraph


class TreeValidator:
    """Validates the structure of an NTreeGraph.

    The validator only reads the graph; run it after building a tree (or
    after constructing one by hand) to detect broken invariants.
    """

    def __init__(self, graph: NTreeGraph) -> None:
        """Initialize the validator.

        Args:
            graph: Graph to inspect
        """
        self.graph = graph

    def check_branching(self) -> List[int]:
        """Find nodes holding more children than the branching factor.

        Returns:
            IDs of offending nodes (empty when the bound holds)
        """
        return [
            node_id
            for node_id, node in self.graph.nodes.items()
            if len(node.children) > self.graph.branching
        ]

    def check_sibling_uniqueness(self) -> List[Tuple[int, int]]:
        """Find pairs of siblings that compare equal.

        Returns:
            List of (child_id, child_id) pairs sharing a key
        """
        comparator = self.graph.comparator
        duplicates: List[Tuple[int, int]] = []

        for node in self.graph.nodes.values():
            children = node.children
            for i, first_id in enumerate(children):
                first_key = self.graph.nodes[first_id].key
                for second_id in children[i + 1:]:
                    if comparator.compare(first_key, self.graph.nodes[second_id].key) == 0:
                        duplicates.append((first_id, second_id))

        return duplicates

    def check_single_parent(self) -> List[int]:
        """Find nodes listed as a child more than once, or the root listed as a child.

        Returns:
            IDs of offending nodes
        """
        seen: Set[int] = set()
        offenders: List[int] = []

        for node in self.graph.nodes.values():
            for child_id in node.children:
                if child_id in seen or child_id == self.graph.root:
                    if child_id not in offenders:
                        offenders.append(child_id)
                seen.add(child_id)

        return offenders

    def count_reachable(self) -> int:
        """Count nodes reachable from the root using BFS.

        Safe on malformed graphs: each node is counted once even if cycles
        exist.

        Returns:
            Number of reachable nodes (0 for an empty graph)
        """
        if self.graph.root is None:
            return 0

        visited: Set[int] = {self.graph.root}
        queue: deque = deque([self.graph.root])

        while queue:
            current = queue.popleft()
            for child_id in self.graph.nodes[current].children:
                if child_id not in visited:
                    visited.add(child_id)
                    queue.append(child_id)

        return len(visited)

    def report(self) -> Dict[str, Any]:
        """Run every check.

        Returns:
            Dictionary with the findings of each check and an overall "valid" flag
        """
        over_capacity = self.check_branching()
        sibling_duplicates = self.check_sibling_uniqueness()
        multi_parent = self.check_single_parent()
        reachable = self.count_reachable()

        return {
            "valid": not (over_capacity or sibling_duplicates or multi_parent),
            "over_capacity": over_capacity,
            "sibling_duplicates": sibling_duplicates,
            "multi_parent": multi_parent,
            "reachable_nodes": reachable,
            "total_nodes": self.graph.size(),
        }

    def validate(self) -> bool:
        """Return True if the graph satisfies every structural invariant."""
        return self.report()["valid"]
