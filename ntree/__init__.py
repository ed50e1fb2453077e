"""
NTree - Bounded-Branching Similarity Tree

An in-memory tree that stores items of any type, rejects duplicate keys,
answers membership by logical equality and finds the stored item most similar
to a query under a caller-supplied comparator/distance strategy.
"""

__version__ = "0.1.0"

from ntree.core.comparator import (
    NodeComparator,
    NumericComparator,
    VectorComparator,
    KeyComparator,
)
from ntree.core.node import TreeNode, NTreeGraph
from ntree.config import (
    DEFAULT_BRANCHING,
    NTreeConfig,
    get_default_config,
    get_strict_config,
)
from ntree.tree import NTree, EmptyTreeError
from ntree.validator import TreeValidator

__all__ = [
    "NTree",
    "EmptyTreeError",
    "NodeComparator",
    "NumericComparator",
    "VectorComparator",
    "KeyComparator",
    "TreeNode",
    "NTreeGraph",
    "TreeValidator",
    "DEFAULT_BRANCHING",
    "NTreeConfig",
    "get_default_config",
    "get_strict_config",
]
