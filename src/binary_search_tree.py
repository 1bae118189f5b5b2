import logging
from typing import TypeVar, Generic, List, Iterator, Optional, TextIO

import tree_algorithms

T = TypeVar('T')

logger = logging.getLogger(__name__)


class UnderflowError(ValueError):
    pass


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def remove(self, value: T) -> None:
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right

        if node is None:
            logger.debug("remove: %r not present", value)
            return

        if node.left is not None and node.right is not None:
            # The node keeps its identity and takes over its successor's value;
            # the successor has no left child, so it is spliced out instead.
            parent = node
            successor = node.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.value = successor.value
            node = successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def find_min(self) -> T:
        if self._root is None:
            raise UnderflowError("min from empty tree")
        return self._find_min(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise UnderflowError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        logger.debug("make_empty: releasing %d nodes", self._size)
        self._root = None
        self._size = 0

    def height(self) -> int:
        return tree_algorithms.height(self._root)

    def in_order(self) -> List[T]:
        return tree_algorithms.in_order(self._root)

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        if self._root is None:
            print("Empty tree", file=file)
        else:
            tree_algorithms.print_subtree(self._root, file=file)

    def print_levels(self, file: Optional[TextIO] = None) -> None:
        tree_algorithms.print_levels(self._root, file=file)

    def node_count(self) -> int:
        return tree_algorithms.node_count(self._root)

    def is_full(self) -> bool:
        return tree_algorithms.is_full(self._root)

    def same_structure(self, other: 'BinarySearchTree[T]') -> bool:
        return tree_algorithms.compare_structure(self._root, other._root)

    def equals(self, other: 'BinarySearchTree[T]') -> bool:
        return tree_algorithms.equals(self._root, other._root)

    def is_mirror(self, other: 'BinarySearchTree[T]') -> bool:
        return tree_algorithms.is_mirror(self._root, other._root)

    def snapshot(self) -> Optional[Node]:
        """Detached deep copy of the root; rewiring it never touches this tree."""
        return tree_algorithms.copy(self._root)

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        clone._root = tree_algorithms.copy(self._root)
        clone._size = self._size
        return clone

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"
