"""
Distance and similarity metrics used by the built-in comparators.

The tree itself never assumes a particular metric: every distance is obtained
through the comparator supplied by the caller. The helpers in this module back
the ready-made comparators for plain numbers and numpy vectors.
"""

import numpy as np
import numpy.typing as npt

Vector = npt.NDArray[np.float32]


def absolute_distance(a: float, b: float) -> float:
    """
    Distance between two scalars.

    Example:
        >>> absolute_distance(7, 10)
        3.0
    """
    return float(abs(a - b))


def euclidean_distance(v1: Vector, v2: Vector) -> float:
    """
    Compute the Euclidean (L2) distance between two vectors.

    Args:
        v1: First vector (1D numpy array)
        v2: Second vector (1D numpy array)

    Returns:
        Non-negative distance (0.0 means identical vectors)

    Example:
        >>> euclidean_distance(np.array([0.0, 0.0]), np.array([3.0, 4.0]))
        5.0
    """
    return float(np.linalg.norm(np.asarray(v1) - np.asarray(v2)))


def cosine_similarity(v1: Vector, v2: Vector) -> float:
    """
    Cosine of the angle between two vectors, in [-1, 1].

    A zero vector has no direction, so its similarity to anything is 0.0.
    """
    dot_product = np.dot(v1, v2)

    norm_v1 = np.linalg.norm(v1)
    norm_v2 = np.linalg.norm(v2)

    if norm_v1 == 0.0 or norm_v2 == 0.0:
        return 0.0

    # Rounding can push the ratio slightly outside [-1, 1]
    return float(np.clip(dot_product / (norm_v1 * norm_v2), -1.0, 1.0))


def cosine_distance(v1: Vector, v2: Vector) -> float:
    """1 - cosine_similarity: 0 for the same direction, 2 for opposite ones."""
    return 1.0 - cosine_similarity(v1, v2)


def normalize_vector(v: Vector) -> Vector:
    """
    Scale v to unit Euclidean length.

    Handy before inserting into a cosine tree. A zero vector is returned
    as is.

    Example:
        >>> normalize_vector(np.array([3.0, 4.0]))
        array([0.6, 0.8])
    """
    norm = np.linalg.norm(v)

    if norm == 0.0:
        return v

    return v / norm
