"""
NTree insertion logic.

Adding an item to a subtree works in two phases:
1. Duplicate check: if the item compares equal to any node already in the
   subtree the insertion is rejected and nothing changes
2. Descent: starting at the subtree root, the item is appended as a child of
   the first node on its path that still has spare capacity. Full nodes pass
   the item down to the child picked by select_branch()

The branch choice only uses the comparator's ordering, so the same item always
follows the same path while the nodes it passes through stay full.
"""

from typing import Generic, Optional, TypeVar

from ntree.core.node import NTreeGraph
from ntree.core.searcher import TreeSearcher
from ntree.logging import get_logger

T = TypeVar("T")

LOGGER = get_logger("core.builder")


class TreeBuilder(Generic[T]):
    """
    Handles insertion of items into an NTreeGraph.
    """

    def __init__(self, graph: NTreeGraph[T]) -> None:
        """
        Initialize builder with a graph to operate on.

        Args:
            graph: The NTreeGraph to insert nodes into
        """
        self.graph = graph
        self._searcher = TreeSearcher(graph)

    def add_child(self, parent_id: int, item: T) -> Optional[int]:
        """
        Insert an item somewhere below parent_id.

        Args:
            parent_id: Root of the subtree receiving the item
            item: Data item to insert

        Returns:
            ID of the new node, or None if an equal key already exists in the
            subtree (no mutation in that case)
        """
        if self.graph.get_node(parent_id) is None:
            raise ValueError(f"Node not found: {parent_id}")

        if self._searcher.has_child(parent_id, item):
            LOGGER.debug("Rejected duplicate key %r", item)
            return None

        current_id = parent_id
        while len(self.graph.nodes[current_id].children) >= self.graph.branching:
            current_id = self.select_branch(current_id, item)

        child_id = self.graph.add_node(item)
        self.graph.attach(current_id, child_id)

        LOGGER.debug("Inserted %r as node %d under node %d", item, child_id, current_id)
        return child_id

    def select_branch(self, node_id: int, item: T) -> int:
        """
        Pick the child of a full node that the item should descend into.

        Policy: the "floor" child, i.e. the greatest child that orders strictly
        before the item. If no child orders before it, the least child is used.
        Among children that compare equal to each other the earliest one in
        storage order wins.

        Args:
            node_id: A node whose child list is non-empty
            item: The item being inserted

        Returns:
            ID of the chosen child
        """
        comparator = self.graph.comparator
        children = self.graph.nodes[node_id].children
        if not children:
            raise ValueError(f"Node {node_id} has no children to descend into")

        floor_id: Optional[int] = None
        least_id = children[0]

        for child_id in children:
            child_key = self.graph.nodes[child_id].key

            if comparator.compare(child_key, self.graph.nodes[least_id].key) < 0:
                least_id = child_id

            if comparator.compare(child_key, item) < 0:
                if floor_id is None or comparator.compare(
                    child_key, self.graph.nodes[floor_id].key
                ) > 0:
                    floor_id = child_id

        return floor_id if floor_id is not None else least_id
