"""
Tests for distance and similarity metrics.

These tests verify that the distance helpers backing the built-in comparators
measure similarity correctly on known inputs.
"""

import numpy as np
import pytest
from ntree.core.distance import (
    absolute_distance,
    euclidean_distance,
    cosine_similarity,
    cosine_distance,
    normalize_vector,
)


def test_absolute_distance():
    """Absolute distance is symmetric and non-negative"""
    assert absolute_distance(7, 10) == 3.0
    assert absolute_distance(10, 7) == 3.0
    assert absolute_distance(-2, -2) == 0.0


def test_euclidean_distance_known_pair():
    """3-4-5 triangle"""
    v1 = np.array([0.0, 0.0], dtype=np.float32)
    v2 = np.array([3.0, 4.0], dtype=np.float32)

    assert np.isclose(euclidean_distance(v1, v2), 5.0)


def test_euclidean_distance_identical_vectors():
    """Identical vectors are at distance 0"""
    v = np.array([1.5, -2.0, 3.0], dtype=np.float32)

    assert euclidean_distance(v, v) == 0.0


def test_cosine_similarity_identical_vectors():
    """Identical vectors should have similarity of 1.0"""
    v1 = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    v2 = np.array([1.0, 2.0, 3.0], dtype=np.float32)

    similarity = cosine_similarity(v1, v2)
    assert np.isclose(similarity, 1.0), "Identical vectors should have similarity 1.0"


def test_cosine_similarity_orthogonal_vectors():
    """Orthogonal (perpendicular) vectors should have similarity of 0.0"""
    v1 = np.array([1.0, 0.0, 0.0], dtype=np.float32)
    v2 = np.array([0.0, 1.0, 0.0], dtype=np.float32)

    similarity = cosine_similarity(v1, v2)
    assert np.isclose(similarity, 0.0), "Orthogonal vectors should have similarity 0.0"


def test_cosine_similarity_opposite_vectors():
    """Opposite direction vectors should have similarity of -1.0"""
    v1 = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    v2 = np.array([-1.0, -2.0, -3.0], dtype=np.float32)

    similarity = cosine_similarity(v1, v2)
    assert np.isclose(similarity, -1.0), "Opposite vectors should have similarity -1.0"


def test_cosine_similarity_zero_vector():
    """Zero vectors should return 0.0 (edge case handling)"""
    v1 = np.array([1.0, 2.0, 3.0], dtype=np.float32)
    v2 = np.array([0.0, 0.0, 0.0], dtype=np.float32)

    assert cosine_similarity(v1, v2) == 0.0


def test_cosine_distance_range():
    """Cosine distance spans [0, 2]"""
    v1 = np.array([1.0, 0.0], dtype=np.float32)
    v2 = np.array([-1.0, 0.0], dtype=np.float32)

    assert np.isclose(cosine_distance(v1, v1), 0.0)
    assert np.isclose(cosine_distance(v1, v2), 2.0)


def test_normalize_vector():
    """Normalized vector should have L2 norm of 1.0"""
    v = np.array([3.0, 4.0], dtype=np.float32)
    normalized = normalize_vector(v)

    assert np.isclose(np.linalg.norm(normalized), 1.0)
    assert np.allclose(normalized, np.array([0.6, 0.8], dtype=np.float32))


def test_normalize_zero_vector():
    """Normalizing zero vector should return zero vector (edge case)"""
    v = np.array([0.0, 0.0, 0.0], dtype=np.float32)

    assert np.allclose(normalize_vector(v), v)


def test_normalize_vector_keeps_direction():
    """Scaled copies normalize to the same unit vector"""
    v = np.array([1.0, -2.0, 2.0], dtype=np.float32)

    assert np.allclose(normalize_vector(v), normalize_vector(5.0 * v))
    assert np.isclose(cosine_distance(v, normalize_vector(v)), 0.0, atol=1e-6)
