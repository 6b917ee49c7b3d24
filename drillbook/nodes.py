"""Linked-list and binary-tree node types with builders and traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    val: int
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class _Branching(Protocol):
    left: Optional["_Branching"]
    right: Optional["_Branching"]


_T = TypeVar("_T", bound=_Branching)


def _from_level_order(
    values: Sequence[Optional[int]], factory: Callable[[int], _T]
) -> Optional[_T]:
    """Build a tree where the children of slot i live at slots 2i+1 and 2i+2.

    A ``None`` slot has no node, and the slots below it are never read.
    """
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root slot of a level-order list must hold a value")

    root = factory(values[0])
    pending: list[tuple[_T, int]] = [(root, 0)]
    while pending:
        node, index = pending.pop()
        left_index = index * 2 + 1
        right_index = left_index + 1
        if left_index < len(values) and values[left_index] is not None:
            node.left = factory(values[left_index])
            pending.append((node.left, left_index))
        if right_index < len(values) and values[right_index] is not None:
            node.right = factory(values[right_index])
            pending.append((node.right, right_index))
    return root


@dataclass(eq=False)
class Node:
    """A general node with tree children and ``next``/``random`` links."""

    val: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    next: Optional["Node"] = None
    random: Optional["Node"] = None

    @classmethod
    def from_level_order(cls, values: Sequence[Optional[int]]) -> Optional["Node"]:
        """Build a tree of nodes from a heap-indexed level-order list."""
        return _from_level_order(values, cls)


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link the given values into a list and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def build_tree(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from a heap-indexed level-order list."""
    return _from_level_order(values, TreeNode)


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.val
    yield from inorder(root.right)


def preorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.val
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.val


def is_mirror(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    """Return True if ``right`` is the mirror image of ``left``."""
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and is_mirror(left.left, right.right)
        and is_mirror(left.right, right.left)
    )