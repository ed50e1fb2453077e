"""
NTree core module.

This module contains the node storage and the algorithms that operate on it.

Components:
- distance: Distance helpers (absolute, Euclidean, cosine)
- comparator: Ordering/distance strategies shared by all nodes
- node: Node arena (TreeNode, NTreeGraph)
- builder: Insertion with duplicate rejection and bounded fan-out
- searcher: Containment, nearest-neighbour queries and traversal
"""

from ntree.core.distance import cosine_distance, cosine_similarity, euclidean_distance
from ntree.core.comparator import NodeComparator, NumericComparator, VectorComparator, KeyComparator
from ntree.core.node import TreeNode, NTreeGraph
from ntree.core.builder import TreeBuilder
from ntree.core.searcher import TreeSearcher

__all__ = [
    "cosine_similarity",
    "cosine_distance",
    "euclidean_distance",
    "NodeComparator",
    "NumericComparator",
    "VectorComparator",
    "KeyComparator",
    "TreeNode",
    "NTreeGraph",
    "TreeBuilder",
    "TreeSearcher",
]
