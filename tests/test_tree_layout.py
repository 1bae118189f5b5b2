import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import tree_algorithms
from binary_search_tree import BinarySearchTree
from tree_layout import layout


def snapshot_of(*values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(value)
    return bst.snapshot()


class TestTreeLayout(unittest.TestCase):

    def test_empty_tree(self):
        result = layout(None)
        self.assertEqual(len(result), 0)
        self.assertEqual(result.xs.shape, (0,))
        self.assertEqual(result.edges, [])
        self.assertEqual(result.depth(), -1)

    def test_three_node_tree(self):
        result = layout(snapshot_of(5, 3, 8))
        self.assertEqual(result.labels, [3, 5, 8])
        np.testing.assert_array_equal(result.xs, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(result.ys, [-1.0, 0.0, -1.0])
        self.assertEqual(sorted(result.edges), [(1, 0), (1, 2)])
        self.assertEqual(result.depth(), 1)

    def test_one_edge_per_non_root_node(self):
        root = snapshot_of(50, 30, 70, 20, 40, 60, 80, 10, 35)
        result = layout(root)
        self.assertEqual(len(result.edges), len(result) - 1)
        children = sorted(child for _, child in result.edges)
        self.assertEqual(len(set(children)), len(children))
        for parent, child in result.edges:
            self.assertEqual(result.ys[child], result.ys[parent] - 1)

    def test_depth_matches_height(self):
        root = snapshot_of(4, 2, 6, 1, 3, 5, 7, 8, 9)
        self.assertEqual(layout(root).depth(), tree_algorithms.height(root))

    def test_layout_of_mirror_reverses_labels(self):
        root = snapshot_of(50, 30, 70, 20)
        result = layout(tree_algorithms.mirror(root))
        self.assertEqual(result.labels, [70, 50, 30, 20])

    def test_deep_chain_does_not_recurse(self):
        # deeper than the recursion limit, so built by hand
        head = BinarySearchTree.Node(0)
        node = head
        for i in range(1, 3000):
            node.right = BinarySearchTree.Node(i)
            node = node.right
        result = layout(head)
        self.assertEqual(len(result), 3000)
        self.assertEqual(result.depth(), 2999)


if __name__ == "__main__":
    unittest.main()
