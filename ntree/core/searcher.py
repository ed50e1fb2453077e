"""
NTree query algorithms.

All queries walk a whole subtree in pre-order (see NTreeGraph.iter_subtree):
- has_child: equality search, stops at the first node comparing equal
- get_most_similar_child: exact nearest neighbour by full scan
- get_k_most_similar: the k closest nodes by full scan
- traverse: collect every stored key

The distance function carries no metric guarantee (no triangle inequality),
so nearest-neighbour queries cannot prune branches. Results are exact but the
cost is linear in the subtree size.
"""

import heapq
from typing import Generic, List, Tuple, TypeVar

from ntree.core.node import NTreeGraph

T = TypeVar("T")


class TreeSearcher(Generic[T]):
    """
    Handles read-only queries on an NTreeGraph.
    """

    def __init__(self, graph: NTreeGraph[T]) -> None:
        """
        Initialize searcher with a graph.

        Args:
            graph: The NTreeGraph to search in
        """
        self.graph = graph

    def has_child(self, node_id: int, item: T) -> bool:
        """
        Check whether the subtree rooted at node_id holds a key equal to item.

        Args:
            node_id: Root of the subtree to search (the node itself included)
            item: Item to look for

        Returns:
            True if some node compares equal (ordering result 0) to item
        """
        comparator = self.graph.comparator
        for current_id in self.graph.iter_subtree(node_id):
            if comparator.compare(self.graph.nodes[current_id].key, item) == 0:
                return True
        return False

    def get_most_similar_child(self, node_id: int, query: T) -> Tuple[int, float]:
        """
        Find the node of a subtree closest to the query.

        Ties go to the node visited first: the best candidate is only
        replaced on a strictly smaller distance.

        Args:
            node_id: Root of the subtree to scan (the node itself included)
            query: Query item

        Returns:
            (node_id, distance) of the closest node
        """
        comparator = self.graph.comparator
        best_id = None
        best_dist = 0.0

        for current_id in self.graph.iter_subtree(node_id):
            dist = comparator.get_distance(self.graph.nodes[current_id].key, query)
            if best_id is None or dist < best_dist:
                best_id, best_dist = current_id, dist

        return best_id, best_dist

    def get_k_most_similar(self, node_id: int, query: T, k: int) -> List[Tuple[int, float]]:
        """
        Find the k nodes of a subtree closest to the query.

        Args:
            node_id: Root of the subtree to scan
            query: Query item
            k: Number of nodes to return (at most the subtree size)

        Returns:
            List of (node_id, distance) tuples, closest first. Equal distances
            keep visitation order.
        """
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")

        comparator = self.graph.comparator

        # Max-heap of the k best via negated keys: (-distance, -order, node_id)
        best: List[Tuple[float, int, int]] = []
        for order, current_id in enumerate(self.graph.iter_subtree(node_id)):
            dist = comparator.get_distance(self.graph.nodes[current_id].key, query)
            entry = (-dist, -order, current_id)
            if len(best) < k:
                heapq.heappush(best, entry)
            elif entry > best[0]:
                heapq.heapreplace(best, entry)

        best.sort(key=lambda x: (-x[0], -x[1]))
        return [(current_id, -neg_dist) for neg_dist, _, current_id in best]

    def traverse(self, node_id: int, accumulator: List[T]) -> List[T]:
        """
        Append every key of the subtree to accumulator (pre-order).

        Args:
            node_id: Root of the subtree
            accumulator: List receiving the keys

        Returns:
            The same accumulator, for chaining
        """
        for current_id in self.graph.iter_subtree(node_id):
            accumulator.append(self.graph.nodes[current_id].key)
        return accumulator

    def get_depth(self, node_id: int) -> int:
        """
        Height of the subtree rooted at node_id (a lone node has depth 0).
        """
        max_depth = 0
        stack = [(node_id, 0)]
        while stack:
            current_id, depth = stack.pop()
            max_depth = max(max_depth, depth)
            for child_id in self.graph.nodes[current_id].children:
                stack.append((child_id, depth + 1))
        return max_depth
