"""An unbalanced binary search tree with in-order iteration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class TreeNode(Generic[T]):
    """One node of a BinaryTree: an element and its two subtrees."""

    element: T
    left: "BinaryTree[T]" = field(default_factory=lambda: BinaryTree())
    right: "BinaryTree[T]" = field(default_factory=lambda: BinaryTree())


class BinaryTree(Generic[T]):
    """An ordered collection; an empty tree has no root node."""

    __slots__ = ("node",)

    def __init__(self, node: Optional[TreeNode[T]] = None) -> None:
        self.node = node

    def __bool__(self) -> bool:
        """Return True if the tree holds at least one element."""
        return self.node is not None

    def add(self, value: T) -> None:
        """Insert ``value``; equal values go to the left of existing ones."""
        tree: BinaryTree[T] = self
        while tree.node is not None:
            tree = tree.node.left if value <= tree.node.element else tree.node.right
        tree.node = TreeNode(value)

    def walk(self) -> List[T]:
        """Return the elements in order as a list."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        """Yield the elements in order, left subtree first."""
        unvisited: List[TreeNode[T]] = []
        self._push_left_edge(unvisited, self)
        while unvisited:
            node = unvisited.pop()
            self._push_left_edge(unvisited, node.right)
            yield node.element

    @staticmethod
    def _push_left_edge(stack: List[TreeNode[T]], tree: "BinaryTree[T]") -> None:
        while tree.node is not None:
            stack.append(tree.node)
            tree = tree.node.left

    def __repr__(self) -> str:
        return f"BinaryTree({self.walk()!r})"


def make_node(left: BinaryTree[T], element: T, right: BinaryTree[T]) -> BinaryTree[T]:
    """Build a non-empty tree from an element and two subtrees."""
    return BinaryTree(TreeNode(element, left, right))