import logging
from typing import TYPE_CHECKING, Any, List, Optional, TextIO

if TYPE_CHECKING:
    from binary_search_tree import BinarySearchTree

    Node = BinarySearchTree.Node
else:
    Node = Any

logger = logging.getLogger(__name__)


class RotationError(ValueError):
    pass


def node_count(root: Optional[Node]) -> int:
    if root is None:
        return 0
    return 1 + node_count(root.left) + node_count(root.right)


def height(root: Optional[Node]) -> int:
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def is_full(root: Optional[Node]) -> bool:
    if root is None:
        return True
    if root.left is None and root.right is None:
        return True
    if root.left is None or root.right is None:
        return False
    return is_full(root.left) and is_full(root.right)


def compare_structure(r1: Optional[Node], r2: Optional[Node]) -> bool:
    if r1 is None and r2 is None:
        return True
    if r1 is None or r2 is None:
        return False
    return compare_structure(r1.left, r2.left) and compare_structure(r1.right, r2.right)


def equals(r1: Optional[Node], r2: Optional[Node]) -> bool:
    if r1 is None and r2 is None:
        return True
    if r1 is None or r2 is None:
        return False
    return r1.value == r2.value and equals(r1.left, r2.left) and equals(r1.right, r2.right)


def is_mirror(r1: Optional[Node], r2: Optional[Node]) -> bool:
    if r1 is None and r2 is None:
        return True
    if r1 is None or r2 is None:
        return False
    return r1.value == r2.value and is_mirror(r1.right, r2.left) and is_mirror(r1.left, r2.right)


def copy(root: Optional[Node]) -> Optional[Node]:
    if root is None:
        return None
    clone = type(root)(root.value)
    clone.left = copy(root.left)
    clone.right = copy(root.right)
    return clone


def mirror(root: Optional[Node]) -> Optional[Node]:
    if root is None:
        return None
    reflected = type(root)(root.value)
    reflected.right = mirror(root.left)
    reflected.left = mirror(root.right)
    return reflected


def rotate_right(root: Optional[Node]) -> Node:
    """Rewire the left spine of root into a chain of right links.

    Walking down the left spine, each node gets the previously visited node
    as its right child and the previously visited node's old right subtree
    as its left child. The deepest node of the spine is returned as the new
    root; the right subtree it carried before the pass is released. The
    old root reference is stale afterwards.

    Raises RotationError if root is None or a leaf.
    """
    if root is None or (root.left is None and root.right is None):
        raise RotationError("no rotation possible: fewer than two nodes")

    current: Optional[Node] = root
    carried: Optional[Node] = None
    previous: Optional[Node] = None
    while current is not None:
        next_node = current.left
        current.left = carried
        carried = current.right
        current.right = previous
        previous = current
        current = next_node

    logger.debug("rotate_right: new root %r", previous.value)
    return previous


def rotate_left(root: Optional[Node]) -> Optional[Node]:
    """Rewire the right spine of root into a chain of left links.

    Mirror image of rotate_right, except that None or a leaf is returned
    unchanged instead of raising.
    """
    if root is None or (root.left is None and root.right is None):
        return root

    current: Optional[Node] = root
    carried: Optional[Node] = None
    previous: Optional[Node] = None
    while current is not None:
        next_node = current.right
        current.right = carried
        carried = current.left
        current.left = previous
        previous = current
        current = next_node

    logger.debug("rotate_left: new root %r", previous.value)
    return previous


def in_order(root: Optional[Node]) -> List[Any]:
    result: List[Any] = []
    stack: List[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def print_subtree(root: Optional[Node], file: Optional[TextIO] = None) -> None:
    for value in in_order(root):
        print(value, file=file)


def _collect_level(root: Optional[Node], level: int, out: List[Any]) -> None:
    if root is None:
        return
    if level == 1:
        out.append(root.value)
    elif level > 1:
        _collect_level(root.left, level - 1, out)
        _collect_level(root.right, level - 1, out)


def levels(root: Optional[Node]) -> List[List[Any]]:
    """Values grouped by depth, each level found by its own walk from root.

    Level l holds the nodes l - 1 steps below root. Only levels 1 through
    height(root) - 1 are produced, so nodes deeper than height(root) - 2
    never appear.
    """
    result: List[List[Any]] = []
    for level in range(1, height(root)):
        row: List[Any] = []
        _collect_level(root, level, row)
        result.append(row)
    return result


def print_levels(root: Optional[Node], file: Optional[TextIO] = None) -> None:
    for row in levels(root):
        print(" ".join(str(value) for value in row), file=file)
