import sys
import os
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import tree_algorithms
from binary_search_tree import BinarySearchTree

values = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)
operations = st.lists(st.tuples(st.booleans(), st.integers(min_value=0, max_value=40)), max_size=80)


def build(items):
    bst = BinarySearchTree()
    for item in items:
        bst.insert(item)
    return bst


def all_nodes(root):
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)


class TestOrderProperties(unittest.TestCase):

    @given(operations)
    def test_in_order_strictly_increasing(self, ops):
        bst = BinarySearchTree()
        reference = set()
        for is_insert, value in ops:
            if is_insert:
                bst.insert(value)
                reference.add(value)
            else:
                bst.remove(value)
                reference.discard(value)
        result = bst.in_order()
        self.assertEqual(result, sorted(reference))
        self.assertTrue(all(a < b for a, b in zip(result, result[1:])))
        self.assertEqual(bst.node_count(), len(reference))
        self.assertEqual(bst.size(), len(reference))

    @given(values, st.integers(min_value=-1000, max_value=1000))
    def test_duplicate_insert_changes_nothing(self, items, extra):
        bst = build(items + [extra])
        count = bst.node_count()
        before = bst.in_order()
        bst.insert(extra)
        self.assertEqual(bst.node_count(), count)
        self.assertEqual(bst.in_order(), before)

    @given(values, st.data())
    def test_remove_correctness(self, items, data):
        target = data.draw(st.sampled_from(items) if items else st.integers())
        bst = build(items)
        bst.remove(target)
        self.assertFalse(bst.contains(target))
        for item in set(items) - {target}:
            self.assertTrue(bst.contains(item))


class TestStructuralProperties(unittest.TestCase):

    @given(values)
    def test_copy_equals_original_and_is_independent(self, items):
        bst = build(items)
        root = bst.snapshot()
        clone = tree_algorithms.copy(root)
        self.assertTrue(tree_algorithms.equals(root, clone))
        original_order = tree_algorithms.in_order(root)
        for node in all_nodes(clone):
            node.value = None
            node.left = None
        self.assertEqual(tree_algorithms.in_order(root), original_order)

    @given(values)
    def test_tree_copy_is_independent(self, items):
        bst = build(items)
        clone = bst.copy()
        self.assertTrue(bst.equals(clone))
        for item in items:
            clone.remove(item)
        self.assertEqual(bst.in_order(), sorted(set(items)))

    @given(values)
    def test_mirror_involution(self, items):
        root = build(items).snapshot()
        reflected = tree_algorithms.mirror(root)
        self.assertTrue(tree_algorithms.is_mirror(root, reflected))
        self.assertTrue(tree_algorithms.compare_structure(tree_algorithms.mirror(reflected), root))
        self.assertEqual(tree_algorithms.in_order(reflected), list(reversed(tree_algorithms.in_order(root))))

    @given(values)
    def test_is_full_matches_direct_traversal(self, items):
        root = build(items).snapshot()
        expected = all((node.left is None) == (node.right is None) for node in all_nodes(root))
        self.assertEqual(tree_algorithms.is_full(root), expected)

    @given(values)
    def test_rotations_keep_spine_nodes(self, items):
        root = build(items).snapshot()
        if tree_algorithms.node_count(root) < 2:
            return
        spine = []
        node = root
        while node is not None:
            spine.append(node)
            node = node.left
        new_root = tree_algorithms.rotate_right(root)
        self.assertIs(new_root, spine[-1])
        chain = []
        node = new_root
        while node is not None:
            chain.append(node)
            node = node.right
        self.assertEqual(chain, list(reversed(spine)))


if __name__ == "__main__":
    unittest.main()
