from typing import Any, List, Optional, Tuple

import numpy as np


class TreeLayout:
    """Plot coordinates for the nodes of a binary tree.

    Node i sits at (xs[i], ys[i]): x is its in-order rank and y is minus its
    depth, so the root is on top and no two nodes overlap horizontally.
    """

    def __init__(self, xs: np.ndarray, ys: np.ndarray, labels: List[Any],
                 edges: List[Tuple[int, int]]) -> None:
        self.xs = xs
        self.ys = ys
        self.labels = labels
        self.edges = edges

    def __len__(self) -> int:
        return len(self.labels)

    def depth(self) -> int:
        if len(self.labels) == 0:
            return -1
        return int(-self.ys.min())


def layout(root: Optional[Any]) -> TreeLayout:
    xs: List[int] = []
    ys: List[int] = []
    labels: List[Any] = []
    links: List[Tuple[int, int]] = []
    index_of = {}

    # in-order walk; a parent is numbered after its left subtree, so links
    # are recorded by id() and resolved to indices at the end
    stack: List[Tuple[Any, int, Optional[int]]] = []
    node, depth, parent_id = root, 0, None
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth, parent_id))
            node, depth, parent_id = node.left, depth + 1, id(node)
        node, depth, parent_id = stack.pop()
        index_of[id(node)] = len(labels)
        xs.append(len(labels))
        ys.append(-depth)
        labels.append(node.value)
        if parent_id is not None:
            links.append((parent_id, id(node)))
        node, depth, parent_id = node.right, depth + 1, id(node)

    edges = [(index_of[parent], index_of[child]) for parent, child in links]
    return TreeLayout(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float), labels, edges)
