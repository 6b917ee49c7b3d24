"""Exercises on binary trees and linked lists."""

from __future__ import annotations

from itertools import pairwise
from typing import Optional

from drillbook.nodes import ListNode, TreeNode, inorder


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a binary tree in in-order sequence."""
    return list(inorder(root))


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if the in-order values are strictly increasing."""
    return all(a < b for a, b in pairwise(inorder(root)))


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink a list so nodes at odd positions come before those at even ones.

    Positions count from one. The nodes are relinked in place and the head
    of the reordered list is returned.
    """
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head