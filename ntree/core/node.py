"""
NTree node storage.

This module defines the structures that hold the tree:
- TreeNode: one stored item plus the ids of its children
- NTreeGraph: arena that owns every node, the root id, the branching factor
  and the comparator shared by all nodes

Nodes are addressed by integer id and hold child ids rather than child
objects. The graph also records each attached node's parent so that attach
can refuse a second parent or a cycle. Walking the tree is a plain stack
loop and never recurses.
"""

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from ntree.core.comparator import NodeComparator

T = TypeVar("T")


class TreeNode(Generic[T]):
    """
    A single node of the tree.

    Holds one data item (the key) and the ids of its direct children in
    insertion order. A node without children is a leaf.
    """

    def __init__(self, node_id: int, key: T) -> None:
        """
        Create a new detached node.

        Args:
            node_id: Unique identifier of the node inside its graph
            key: The stored data item
        """
        self.id = node_id
        self.key = key
        self.children: List[int] = []

    def get_key(self) -> T:
        """Return the stored item."""
        return self.key

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def add_child_id(self, child_id: int) -> None:
        """
        Record a child id (no capacity check, see NTreeGraph.attach).

        Args:
            child_id: ID of the child node
        """
        if child_id not in self.children:
            self.children.append(child_id)

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, key={self.key!r}, children={len(self.children)})"


class NTreeGraph(Generic[T]):
    """
    Arena holding every node of one tree.

    The comparator and branching factor are fixed at construction and shared
    by every node allocated here.
    """

    def __init__(self, comparator: NodeComparator[T], branching: int) -> None:
        """
        Initialize an empty arena.

        Args:
            comparator: Ordering/distance strategy shared by all nodes
            branching: Maximum number of direct children per node (N >= 1)
        """
        if not isinstance(branching, int) or isinstance(branching, bool) or branching < 1:
            raise ValueError(f"Branching factor must be a positive integer, got {branching!r}")

        self.comparator = comparator
        self.branching = branching

        self.nodes: Dict[int, TreeNode[T]] = {}

        # None when the arena is empty
        self.root: Optional[int] = None

        # child id -> parent id, for every attached node
        self._parent: Dict[int, int] = {}

        self._next_id = 0

    def add_node(self, key: T) -> int:
        """
        Allocate a new, unattached node.

        The first node allocated in an empty arena becomes the root.

        Args:
            key: Item to store

        Returns:
            The ID assigned to the new node
        """
        node_id = self._next_id
        self._next_id += 1

        self.nodes[node_id] = TreeNode(node_id, key)

        if self.root is None:
            self.root = node_id

        return node_id

    def get_node(self, node_id: int) -> Optional[TreeNode[T]]:
        """
        Retrieve a node by its ID.

        Returns:
            The TreeNode, or None if not found
        """
        return self.nodes.get(node_id)

    def get_parent(self, node_id: int) -> Optional[int]:
        """Return the parent id of a node, or None for the root and detached nodes."""
        return self._parent.get(node_id)

    def attach(self, parent_id: int, child_id: int) -> None:
        """
        Make child_id a direct child of parent_id.

        Every node keeps a single parent and the links never form a cycle,
        so any subtree walk terminates and visits each node once.

        Args:
            parent_id: Node receiving the child
            child_id: Node being attached

        Raises:
            ValueError: If either node is unknown, the child is the root or
                already has a parent, the child is the parent itself or one of
                its ancestors, or the parent is already at the branching limit
        """
        parent = self.nodes.get(parent_id)
        child = self.nodes.get(child_id)

        if parent is None or child is None:
            raise ValueError(f"Node not found: {parent_id} or {child_id}")

        if child_id == self.root:
            raise ValueError(f"Cannot attach the root node {child_id} as a child")

        if child_id in self._parent:
            raise ValueError(
                f"Node {child_id} already has parent {self._parent[child_id]}"
            )

        ancestor_id: Optional[int] = parent_id
        while ancestor_id is not None:
            if ancestor_id == child_id:
                raise ValueError(
                    f"Cannot attach node {child_id} under itself or its descendant {parent_id}"
                )
            ancestor_id = self._parent.get(ancestor_id)

        if len(parent.children) >= self.branching:
            raise ValueError(
                f"Node {parent_id} already has {len(parent.children)} children "
                f"(branching factor is {self.branching})"
            )

        parent.add_child_id(child_id)
        self._parent[child_id] = parent_id

    def iter_subtree(self, node_id: int) -> Iterator[int]:
        """
        Yield the ids of a subtree in pre-order.

        Children are visited in storage order. Uses an explicit stack so deep,
        unbalanced trees do not hit the recursion limit.

        Args:
            node_id: Root of the subtree to walk
        """
        stack = [node_id]
        while stack:
            current_id = stack.pop()
            yield current_id
            # Reversed so the first child is popped first
            stack.extend(reversed(self.nodes[current_id].children))

    def size(self) -> int:
        """
        Get the number of nodes in the arena.
        """
        return len(self.nodes)

    def is_empty(self) -> bool:
        return self.root is None

    def __repr__(self) -> str:
        return (
            f"NTreeGraph(nodes={self.size()}, root={self.root}, "
            f"branching={self.branching}, comparator={self.comparator!r})"
        )
