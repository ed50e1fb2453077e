"""
Public tree handle for NTree.
"""

from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ntree.core.comparator import NodeComparator
from ntree.config import NTreeConfig, get_default_config
from ntree.core.builder import TreeBuilder
from ntree.core.node import NTreeGraph
from ntree.core.searcher import TreeSearcher
from ntree.logging import get_logger

T = TypeVar("T")

LOGGER = get_logger("tree")


class EmptyTreeError(LookupError):
    """Raised by strict containment queries against a tree with no root."""


class NTree(Generic[T]):
    """
    Bounded-branching similarity tree.

    Stores items of any type, rejects duplicate keys, answers containment by
    logical equality and returns the stored item closest to a query. Ordering,
    equality and distance all come from one comparator shared by every node.

    Example:
        >>> from ntree import NTree, NumericComparator
        >>> tree = NTree(NumericComparator(), 10, branching=4)
        >>> for key in [2, 5, 9, 6, 12, 15]:
        ...     _ = tree.add_data(key)
        >>> tree.contains_item(9)
        True
        >>> tree.get_nearest_neighbour(7)
        6

    Note:
        None is reserved for "no result" and cannot be stored. The tree is not
        thread-safe; serialize access externally if several threads share it.
    """

    def __init__(
        self,
        comparator: NodeComparator[T],
        root_item: Optional[T] = None,
        branching: Optional[int] = None,
        config: Optional[NTreeConfig] = None,
    ) -> None:
        """
        Initialize a tree, either empty or holding a root item.

        Args:
            comparator: Ordering/distance strategy shared by every node
            root_item: Optional first item; when given it becomes the root
            branching: Maximum children per node (default: config.default_branching)
            config: NTreeConfig for advanced options. Explicit arguments take
                    precedence over config values.
        """
        if config is None:
            config = get_default_config()
        self._config = config

        if branching is None:
            branching = self._config.default_branching

        self._attach_graph(NTreeGraph(comparator, branching))

        if root_item is not None:
            self._graph.add_node(root_item)
            self._size = 1

    @classmethod
    def from_graph(
        cls, graph: NTreeGraph[T], config: Optional[NTreeConfig] = None
    ) -> 'NTree[T]':
        """
        Build a tree around a pre-built graph.

        The comparator and branching factor are taken from the graph. The
        size is the number of nodes reachable from the graph's root.

        Args:
            graph: Graph whose root (and subtree) the new tree adopts
            config: Optional NTreeConfig

        Returns:
            A tree sharing (not copying) the graph
        """
        tree = cls.__new__(cls)
        tree._config = config if config is not None else get_default_config()
        tree._attach_graph(graph)
        if graph.root is not None:
            tree._size = sum(1 for _ in graph.iter_subtree(graph.root))
        return tree

    def _attach_graph(self, graph: NTreeGraph[T]) -> None:
        self._graph = graph
        self._builder = TreeBuilder(graph)
        self._searcher = TreeSearcher(graph)
        self._size = 0

    @property
    def comparator(self) -> NodeComparator[T]:
        return self._graph.comparator

    @property
    def branching(self) -> int:
        return self._graph.branching

    @property
    def config(self) -> NTreeConfig:
        return self._config

    @property
    def graph(self) -> NTreeGraph[T]:
        """Underlying node arena (read it, do not mutate it)."""
        return self._graph

    def is_empty(self) -> bool:
        """
        Check whether the tree has a root.
        """
        return self._graph.root is None

    def size(self) -> int:
        """
        Get the number of stored items (the root counts as one).
        """
        return self._size

    def contains_item(self, item: T) -> bool:
        """
        Check whether an item with an equal key is stored.

        Args:
            item: Item to look for

        Returns:
            True if some stored item compares equal to item. On an empty tree
            the answer is False unless config.strict_empty_queries is set.

        Raises:
            EmptyTreeError: If the tree is empty and strict_empty_queries is set
        """
        if self.is_empty():
            if self._config.strict_empty_queries:
                raise EmptyTreeError("Cannot query containment on an empty tree")
            LOGGER.debug("Containment query %r on an empty tree", item)
            return False

        return self._searcher.has_child(self._graph.root, item)

    def add_data(self, item: T) -> bool:
        """
        Insert an item.

        On an empty tree the item becomes the root. Otherwise it is placed
        below the root unless an equal key is already stored.

        Args:
            item: Item to insert (must not be None)

        Returns:
            True if the item was inserted, False if it was a duplicate

        Raises:
            ValueError: If item is None
        """
        if item is None:
            raise ValueError("None cannot be stored in an NTree")

        if self.is_empty():
            self._graph.add_node(item)
            self._size = 1
            LOGGER.debug("Promoted %r to root", item)
            return True

        node_id = self._builder.add_child(self._graph.root, item)
        if node_id is None:
            return False

        self._size += 1
        return True

    def get_nearest_neighbour(self, query: T) -> Optional[T]:
        """
        Return the stored item closest to the query.

        Args:
            query: Query item

        Returns:
            The closest stored item (first found on ties), or None if the tree
            is empty
        """
        if self.is_empty():
            return None

        node_id, _ = self._searcher.get_most_similar_child(self._graph.root, query)
        return self._graph.nodes[node_id].get_key()

    def get_k_nearest_neighbours(self, query: T, k: int) -> List[Tuple[T, float]]:
        """
        Return the k stored items closest to the query.

        Args:
            query: Query item
            k: Number of neighbours to return

        Returns:
            List of (item, distance) tuples, closest first. Fewer than k
            entries when the tree holds fewer items; empty for an empty tree.

        Raises:
            ValueError: If k < 1
        """
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")

        if self.is_empty():
            return []

        results = self._searcher.get_k_most_similar(self._graph.root, query, k)
        return [(self._graph.nodes[node_id].get_key(), dist) for node_id, dist in results]

    def traverse(self) -> List[T]:
        """
        Return every stored item once, in pre-order.
        """
        if self.is_empty():
            return []
        return self._searcher.traverse(self._graph.root, [])

    def depth(self) -> int:
        """
        Height of the tree: 0 for a lone root, -1 for an empty tree.
        """
        if self.is_empty():
            return -1
        return self._searcher.get_depth(self._graph.root)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get structural statistics about the tree.

        Returns:
            Dictionary with size, branching, depth, leaf/internal node counts
            and fan-out of internal nodes
        """
        stats: Dict[str, Any] = {
            "size": self.size(),
            "branching": self.branching,
            "depth": self.depth(),
            "leaf_nodes": 0,
            "internal_nodes": 0,
            "avg_fanout": 0.0,
            "max_fanout": 0,
        }

        if self.is_empty():
            return stats

        fanouts = []
        for node_id in self._graph.iter_subtree(self._graph.root):
            node = self._graph.nodes[node_id]
            if node.is_leaf():
                stats["leaf_nodes"] += 1
            else:
                fanouts.append(len(node.children))

        stats["internal_nodes"] = len(fanouts)
        if fanouts:
            stats["avg_fanout"] = sum(fanouts) / len(fanouts)
            stats["max_fanout"] = max(fanouts)

        return stats

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: T) -> bool:
        return self.contains_item(item)

    def __iter__(self) -> Iterator[T]:
        return iter(self.traverse())

    def __repr__(self) -> str:
        return (
            f"NTree(size={self.size()}, branching={self.branching}, "
            f"comparator={self.comparator!r})"
        )
