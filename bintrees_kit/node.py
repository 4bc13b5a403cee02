"""Binary tree nodes that know their parent, with the usual measurements."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer and links to parent and children."""

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any old left child moves below it, on its left."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any old right child moves below it, on its right."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            if self.parent.right is self:
                self.parent.right = None
        for node in list(self._nodes()):
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield the values node, left, right."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield the values left, node, right."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.value
                continue
            if node.right is not None:
                stack.append((node.right, False))
            stack.append((node, True))
            if node.left is not None:
                stack.append((node.left, False))

    def postorder(self) -> Iterator[int]:
        """Yield the values left, right, node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def _with_depths(self) -> Iterator[tuple[Node, int]]:
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            yield node, level
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, level + 1))

    @staticmethod
    def _levels(tree: Optional[Node]) -> int:
        if tree is None:
            return 0
        return 1 + max(level for _, level in tree._with_depths())

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return self._levels(self) - 1

    def depth(self) -> int:
        """Number of edges up to the root."""
        count = 0
        node = self
        while node.parent is not None:
            node = node.parent
            count += 1
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Number of nodes without children."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right, counted in levels."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """True when every node has either no child or two children."""
        return all((node.left is None) == (node.right is None) for node in self._nodes())

    def is_perfect(self) -> bool:
        """True when the tree is full and all leaves lie at the same depth."""
        if not self.is_full():
            return False
        leaf_depths = {level for node, level in self._with_depths() if node.is_leaf()}
        return len(leaf_depths) == 1

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()