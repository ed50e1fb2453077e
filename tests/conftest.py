"""
Pytest configuration and shared fixtures for NTree tests
"""

import pytest
import numpy as np
from typing import List

from ntree import NTree, NumericComparator, VectorComparator


@pytest.fixture
def int_comparator() -> NumericComparator:
    """Comparator over integers: natural order, absolute difference."""
    return NumericComparator()


@pytest.fixture
def scenario_keys() -> List[int]:
    """Keys inserted after the root 10 in the reference scenario."""
    return [2, 5, 9, 6, 12, 15]


@pytest.fixture
def scenario_tree(int_comparator, scenario_keys) -> NTree:
    """Tree with root 10, branching factor 4 and the scenario keys."""
    tree = NTree(int_comparator, 10, branching=4)
    for key in scenario_keys:
        tree.add_data(key)
    return tree


@pytest.fixture
def sample_vectors() -> np.ndarray:
    """Generate sample vectors for testing."""
    np.random.seed(42)
    return np.random.rand(20, 8).astype(np.float32)


@pytest.fixture
def vector_comparator() -> VectorComparator:
    return VectorComparator(metric="euclidean")
