"""
Comparator/distance strategies shared by a tree and all of its nodes.

A strategy answers two questions about a pair of raw items:
- compare(a, b): ordering, where 0 means "same key". Equal keys are never
  stored twice and satisfy containment queries.
- get_distance(a, b): non-negative distance used to rank nearest neighbours.

The tree never validates a strategy. An inconsistent ordering or a negative
distance leads to unspecified (but non-crashing) results.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

import numpy as np
import numpy.typing as npt

from ntree.core.distance import absolute_distance, cosine_distance, euclidean_distance

T = TypeVar("T")
Vector = npt.NDArray[np.float32]


def _sign(a: Any, b: Any) -> int:
    return int(a > b) - int(a < b)


class NodeComparator(ABC, Generic[T]):
    """
    Ordering plus distance over items of type T.

    Subclasses must keep distance(x, x) == 0 and make compare() return 0
    exactly when two items are the same key for the application.
    """

    @abstractmethod
    def compare(self, a: T, b: T) -> int:
        """
        Order two items.

        Returns:
            Negative if a sorts before b, zero if they are the same key,
            positive otherwise
        """

    @abstractmethod
    def get_distance(self, a: T, b: T) -> float:
        """
        Distance between two items (lower means more similar).
        """

    def is_equal(self, a: T, b: T) -> bool:
        return self.compare(a, b) == 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NumericComparator(NodeComparator[float]):
    """Natural ordering of numbers with absolute-difference distance."""

    def compare(self, a: float, b: float) -> int:
        return _sign(a, b)

    def get_distance(self, a: float, b: float) -> float:
        return absolute_distance(a, b)


class VectorComparator(NodeComparator[Vector]):
    """
    Strategy for 1D numpy vectors.

    Vectors are ordered lexicographically, so two vectors are the same key
    only when they are element-wise equal (NaN matching NaN). NaN sorts after
    any number. Distance is Euclidean or cosine.
    """

    METRICS = {
        "euclidean": euclidean_distance,
        "cosine": cosine_distance,
    }

    def __init__(self, metric: str = "euclidean") -> None:
        """
        Args:
            metric: "euclidean" or "cosine"
        """
        if metric not in self.METRICS:
            raise ValueError(
                f"Unknown metric '{metric}' (expected one of {sorted(self.METRICS)})"
            )
        self.metric = metric
        self._distance_fn = self.METRICS[metric]

    def compare(self, a: Vector, b: Vector) -> int:
        a = np.asarray(a)
        b = np.asarray(b)
        shared = min(len(a), len(b))
        head_a, head_b = a[:shared], b[:shared]

        # NaN is the only value unequal to itself. It sorts after every
        # number, as in np.sort, and two NaNs at one position are equal.
        nan_a = head_a != head_a
        nan_b = head_b != head_b

        # First position where the vectors differ decides the order
        differing = np.nonzero((head_a != head_b) & ~(nan_a & nan_b))[0]
        if len(differing) > 0:
            i = differing[0]
            if nan_a[i]:
                return 1
            if nan_b[i]:
                return -1
            return _sign(a[i].item(), b[i].item())

        # Common prefix is equal: the shorter vector sorts first
        return _sign(len(a), len(b))

    def get_distance(self, a: Vector, b: Vector) -> float:
        # Identical vectors must be at distance exactly 0 even for cosine
        if self.compare(a, b) == 0:
            return 0.0
        return self._distance_fn(a, b)

    def __repr__(self) -> str:
        return f"VectorComparator(metric={self.metric!r})"


class KeyComparator(NodeComparator[T]):
    """
    Strategy assembled from two callables.

    Items are ordered by key(item); the distance is delegated to a caller
    function taking the two raw items.

    Example:
        >>> words = KeyComparator(key=str.lower, distance=lambda a, b: abs(len(a) - len(b)))
        >>> words.is_equal("Tree", "tree")
        True
    """

    def __init__(
        self,
        key: Callable[[T], Any],
        distance: Callable[[T, T], float],
    ) -> None:
        self.key = key
        self.distance = distance

    def compare(self, a: T, b: T) -> int:
        return _sign(self.key(a), self.key(b))

    def get_distance(self, a: T, b: T) -> float:
        return float(self.distance(a, b))
