"""Binary search tree with traversals, counts and comparison-counting search."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, NamedTuple


class TreeSearch(NamedTuple):
    """Whether an item was found and how many comparisons the search made."""

    found: bool
    comparisons: int


class _Node:
    __slots__ = ("info", "left", "right")

    def __init__(self, info: Any) -> None:
        self.info = info
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Binary search tree holding distinct, mutually comparable items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._count = 0
        for item in items:
            self.insert(item)

    def is_empty(self) -> bool:
        """Return True when the tree holds no items."""
        return self._root is None

    def insert(self, item: Any) -> bool:
        """Insert item; return False, leaving the tree unchanged, if it is already there."""
        node = _Node(item)
        if self._root is None:
            self._root = node
            self._count += 1
            return True
        current = self._root
        while True:
            if current.info == item:
                return False
            if current.info > item:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        self._count += 1
        return True

    def search(self, item: Any) -> bool:
        """Return True when item is in the tree."""
        return self.search_with_count(item).found

    def search_with_count(self, item: Any) -> TreeSearch:
        """Search for item, counting every equality and ordering comparison."""
        comparisons = 0
        current = self._root
        while current is not None:
            comparisons += 1
            if current.info == item:
                return TreeSearch(True, comparisons)
            comparisons += 1
            current = current.left if current.info > item else current.right
        return TreeSearch(False, comparisons)

    def delete(self, item: Any) -> None:
        """Remove item from the tree.

        Raises ValueError if the tree is empty or the item is absent.
        """
        if self._root is None:
            raise ValueError("Cannot delete from an empty tree.")
        parent: _Node | None = None
        current: _Node | None = self._root
        while current is not None and current.info != item:
            parent = current
            current = current.left if current.info > item else current.right
        if current is None:
            raise ValueError("The item to be deleted is not in the tree.")
        replacement = self._detach(current)
        if parent is None:
            self._root = replacement
        elif parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1

    @staticmethod
    def _detach(node: _Node) -> _Node | None:
        """Return the subtree that takes node's place once node is removed."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        # Two children: take over the largest item of the left subtree.
        trail: _Node | None = None
        current = node.left
        while current.right is not None:
            trail = current
            current = current.right
        node.info = current.info
        if trail is None:
            node.left = current.left
        else:
            trail.right = current.left
        return node

    def _inorder_nodes(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right

    def inorder(self) -> list[Any]:
        """Return the items in ascending order."""
        return [node.info for node in self._inorder_nodes()]

    def preorder(self) -> list[Any]:
        """Return the items with each node before its subtrees."""
        order: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.info)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return order

    def postorder(self) -> list[Any]:
        """Return the items with each node after its subtrees."""
        order: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.info)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        order.reverse()
        return order

    def visit_inorder(self, visit: Callable[[Any], Any]) -> None:
        """Call visit on every item in ascending order."""
        for node in self._inorder_nodes():
            visit(node.info)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        best = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def node_count(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self._inorder_nodes())

    def leaves_count(self) -> int:
        """Return the number of nodes without children."""
        return sum(
            1
            for node in self._inorder_nodes()
            if node.left is None and node.right is None
        )

    def copy(self) -> BinarySearchTree:
        """Return an independent tree with the same shape and items."""
        return BinarySearchTree(self.preorder())

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (node.info for node in self._inorder_nodes())

    def __contains__(self, item: object) -> bool:
        return self.search(item)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"