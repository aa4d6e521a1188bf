"""A self-balancing binary search tree that records each node's balance factor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class AVLNode(Generic[T]):
    """A tree node; ``balance`` is left height minus right height."""

    value: T
    balance: int = 0
    left: Optional["AVLNode[T]"] = None
    right: Optional["AVLNode[T]"] = None


def _height(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balance_of(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_left(k1: AVLNode) -> AVLNode:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    return k2


def _rotate_right(k1: AVLNode) -> AVLNode:
    k2 = k1.left
    k1.left = k2.right
    k2.right = k1
    return k2


def _refresh_balances(node: Optional[AVLNode]) -> None:
    if node is not None:
        node.balance = _balance_of(node)
        _refresh_balances(node.left)
        _refresh_balances(node.right)


class AVLTree(Generic[T]):
    """AVL tree; equal items are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode[T]] = None

    def insert(self, item: T) -> None:
        self.root = self._insert(self.root, item)

    def _insert(self, node: Optional[AVLNode[T]], item: T) -> AVLNode[T]:
        if node is None:
            node = AVLNode(item)
        elif item < node.value:
            node.left = self._insert(node.left, item)
        else:
            node.right = self._insert(node.right, item)

        node.balance = _balance_of(node)

        if node.balance > 1:
            if node.left.balance > 0:
                node = _rotate_right(node)
            else:
                node.left = _rotate_left(node.left)
                node = _rotate_right(node)
            _refresh_balances(node)
        elif node.balance < -1:
            if node.right.balance < 0:
                node = _rotate_left(node)
            else:
                node.right = _rotate_right(node.right)
                node = _rotate_left(node)
            _refresh_balances(node)
        return node

    def clear(self) -> None:
        self.root = None

    def inorder(self) -> Iterator[tuple[T, int]]:
        """Yield (value, balance) pairs in sorted order."""

        def walk(node: Optional[AVLNode[T]]) -> Iterator[tuple[T, int]]:
            if node is not None:
                yield from walk(node.left)
                yield node.value, node.balance
                yield from walk(node.right)

        return walk(self.root)

    def preorder(self) -> Iterator[tuple[T, int]]:
        """Yield (value, balance) pairs, each node before its subtrees."""

        def walk(node: Optional[AVLNode[T]]) -> Iterator[tuple[T, int]]:
            if node is not None:
                yield node.value, node.balance
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self.root)

    def postorder(self) -> Iterator[tuple[T, int]]:
        """Yield (value, balance) pairs, each node after its subtrees."""

        def walk(node: Optional[AVLNode[T]]) -> Iterator[tuple[T, int]]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.value, node.balance

        return walk(self.root)

    def search(self, item: T) -> Optional[T]:
        """Return the stored value equal to ``item``, or None."""
        node = self.root
        while node is not None:
            if item > node.value:
                node = node.right
            elif item < node.value:
                node = node.left
            else:
                return node.value
        return None

    def height(self) -> int:
        return _height(self.root)


def format_traversal(entries: Iterable[tuple[Any, int]]) -> str:
    """Render traversal entries one per line with their balance factors."""
    return "".join(f"{value}\t\t(BF: {balance})\n" for value, balance in entries)