"""Quick start guide for NTree - Bounded-Branching Similarity Tree.

This example shows the minimal code needed to:
1. Build a tree of integers with a small branching factor
2. Check containment and reject duplicates
3. Find nearest neighbours
4. Do the same with numpy vectors
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from ntree import NTree, NumericComparator, VectorComparator, TreeValidator
from ntree.core.distance import normalize_vector
from ntree.logging import configure_logging


def integer_demo():
    print("\n1. Integer tree (branching factor 4)...")

    tree = NTree(NumericComparator(), 10, branching=4)
    for key in [2, 5, 9, 6, 15, 12]:
        tree.add_data(key)

    print(f"   Stored {tree.size()} items: {tree.traverse()}")
    print(f"   Depth: {tree.depth()}")

    print("\n2. Containment and duplicates...")
    for key in [5, 12, 6, 11]:
        print(f"   contains({key}) = {tree.contains_item(key)}")
    print(f"   add_data(10) again = {tree.add_data(10)} (size stays {tree.size()})")

    print("\n3. Nearest neighbours...")
    for query in [7, 16, 0]:
        print(f"   nearest({query}) = {tree.get_nearest_neighbour(query)}")
    print(f"   3 nearest to 13: {tree.get_k_nearest_neighbours(13, k=3)}")

    return tree


def vector_demo():
    print("\n4. Vector tree (cosine distance)...")
    np.random.seed(42)

    vectors = [normalize_vector(v) for v in np.random.randn(200, 32).astype(np.float32)]

    tree = NTree(VectorComparator(metric="cosine"), branching=8)
    for vec in vectors:
        tree.add_data(vec)

    stats = tree.get_statistics()
    print(f"   Indexed {stats['size']} vectors, depth {stats['depth']}, "
          f"avg fan-out {stats['avg_fanout']:.2f}")

    query = normalize_vector(vectors[17] + 0.05 * np.random.randn(32).astype(np.float32))
    for item, dist in tree.get_k_nearest_neighbours(query, k=3):
        index = next(i for i, v in enumerate(vectors) if np.array_equal(v, item))
        print(f"   vector #{index}: cosine distance {dist:.4f}")

    print(f"   Structure valid: {TreeValidator(tree.graph).validate()}")


def main():
    print("=" * 60)
    print("NTree Quick Start")
    print("=" * 60)

    if "--debug" in sys.argv:
        configure_logging("DEBUG")

    integer_demo()
    vector_demo()


if __name__ == "__main__":
    main()
