"""Binary trees: a level-order filled tree and plain binary-search insertion."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """A tree node holding an integer and links to two children."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _level_order(root: Node | None) -> Iterator[Node]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def _levels(root: Node | None) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _inorder_nodes(root: Node | None) -> list[Node]:
    nodes: list[Node] = []
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        nodes.append(current)
        current = current.right
    return nodes


class BinaryTree:
    """A binary tree that fills each level from left to right as values arrive."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> Node:
        """Put data in the first free child slot found in level order."""
        node = Node(data)
        if self.root is None:
            self.root = node
            return node
        for parent in _level_order(self.root):
            if parent.left is None:
                parent.left = node
                return node
            if parent.right is None:
                parent.right = node
                return node
        raise AssertionError("a finite tree always has a free slot")

    def delete(self, key: int) -> bool:
        """Remove key, filling its place with the deepest, rightmost value.

        When key occurs more than once, the last occurrence in level order
        is the one removed. Returns whether key was found.
        """
        root = self.root
        if root is None:
            return False
        if root.left is None and root.right is None:
            if root.data == key:
                self.root = None
                return True
            return False

        key_node: Node | None = None
        deepest, deepest_parent = root, None
        queue: deque[tuple[Node, Node | None]] = deque([(root, None)])
        while queue:
            node, parent = queue.popleft()
            if node.data == key:
                key_node = node
            deepest, deepest_parent = node, parent
            for child in (node.left, node.right):
                if child is not None:
                    queue.append((child, node))

        if key_node is None:
            return False
        assert deepest_parent is not None
        if deepest_parent.right is deepest:
            deepest_parent.right = None
        else:
            deepest_parent.left = None
        key_node.data = deepest.data
        return True

    def __len__(self) -> int:
        return sum(1 for _ in _level_order(self.root))

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path."""
        return max(sum(1 for _ in _levels(self.root)) - 1, 0)

    def maximum(self) -> int:
        """Return the largest value; raises ValueError for an empty tree."""
        values = [node.data for node in _level_order(self.root)]
        if not values:
            raise ValueError("tree is empty")
        return max(values)

    def minimum(self) -> int:
        """Return the smallest value; raises ValueError for an empty tree."""
        values = [node.data for node in _level_order(self.root)]
        if not values:
            raise ValueError("tree is empty")
        return min(values)

    def left_view(self) -> list[int]:
        """Return the first value of every level, top to bottom."""
        return [level[0].data for level in _levels(self.root)]

    def right_view(self) -> list[int]:
        """Return the last value of every level, top to bottom."""
        return [level[-1].data for level in _levels(self.root)]

    def mirror(self) -> BinaryTree:
        """Swap the children of every node in place and return the tree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(c for c in (node.left, node.right) if c is not None)
        return self

    def lowest_common_ancestor(self, n1: int, n2: int) -> Node | None:
        """Return the lowest node above both values.

        If only one value is present its node is returned; if neither is,
        None.
        """

        def search(node: Node | None) -> Node | None:
            if node is None:
                return None
            if node.data in (n1, n2):
                return node
            left = search(node.left)
            right = search(node.right)
            if left is not None and right is not None:
                return node
            return left if left is not None else right

        return search(self.root)

    def convert_to_sum_tree(self) -> int:
        """Replace each value with the sum of the values below it.

        Returns the sum of all the original values.
        """
        totals: dict[int, int] = {}
        order = list(_level_order(self.root))
        for node in reversed(order):
            below = sum(
                totals[id(child)]
                for child in (node.left, node.right)
                if child is not None
            )
            totals[id(node)] = below + node.data
            node.data = below
        return totals[id(self.root)] if self.root is not None else 0

    def to_doubly_linked_list(self) -> Node | None:
        """Thread the nodes in in-order into a doubly linked list.

        The left link points to the previous node and the right link to the
        next. Returns the head; the tree itself is left empty.
        """
        nodes = _inorder_nodes(self.root)
        previous: Node | None = None
        for node in nodes:
            node.left = previous
            if previous is not None:
                previous.right = node
            previous = node
        if previous is not None:
            previous.right = None
        self.root = None
        return nodes[0] if nodes else None

    def preorder(self) -> list[int]:
        """Return the values in pre-order: node, left subtree, right subtree."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[int]:
        """Return the values in in-order: left subtree, node, right subtree."""
        return [node.data for node in _inorder_nodes(self.root)]


def bst_insert(root: Node | None, key: int) -> Node:
    """Insert key into a binary search tree and return its root.

    Keys not greater than a node's value go to its left.
    """
    new = Node(key)
    if root is None:
        return new
    node = root
    while True:
        if key <= node.data:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right