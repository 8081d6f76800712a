"""Algorithms on singly linked lists: arithmetic, copying, merging and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any

from dsakit.singly import Node, from_values, iter_nodes, to_values


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with an extra link to any node of the same list."""

    data: Any
    next: RandomNode | None = None
    random: RandomNode | None = None

    def __repr__(self) -> str:
        return f"RandomNode({self.data!r})"


def _chain(head: RandomNode | None) -> Iterator[RandomNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def add_numbers(num1: Node | None, num2: Node | None) -> Node | None:
    """Add two numbers stored most significant digit first.

    The inputs are left untouched; the sum comes back as a new list.
    """
    digits = []
    carry = 0
    for a, b in zip_longest(
        reversed(to_values(num1)), reversed(to_values(num2)), fillvalue=0
    ):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return from_values(reversed(digits))


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list with random links using a node-to-copy map."""
    if head is None:
        return None
    copies = {node: RandomNode(node.data) for node in _chain(head)}
    for node, copy in copies.items():
        copy.next = copies.get(node.next) if node.next is not None else None
        copy.random = copies.get(node.random) if node.random is not None else None
    return copies[head]


def copy_random_list_interleaved(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list with random links without extra lookup space.

    Each copy is threaded in right after its original, random links are set
    through that layout, and the two lists are then pulled apart again.
    """
    if head is None:
        return None
    for node in list(_chain(head)):
        node.next = RandomNode(node.data, node.next)

    node: RandomNode | None = head
    while node is not None:
        copy = node.next
        assert copy is not None
        copy.random = node.random.next if node.random is not None else None
        node = copy.next

    copy_head = head.next
    node = head
    while node is not None:
        copy = node.next
        assert copy is not None
        node.next = copy.next
        copy.next = copy.next.next if copy.next is not None else None
        node = node.next
    return copy_head


def intersection_point(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the first node shared by two lists, or ``None``."""
    len1 = sum(1 for _ in iter_nodes(head1))
    len2 = sum(1 for _ in iter_nodes(head2))
    a, b = head1, head2
    for _ in range(len1 - len2):
        assert a is not None
        a = a.next
    for _ in range(len2 - len1):
        assert b is not None
        b = b.next
    while a is not b:
        assert a is not None and b is not None
        a, b = a.next, b.next
    return a


def merge_sorted(head1: Node | None, head2: Node | None) -> Node | None:
    """Merge two sorted lists by relinking their nodes; ties take ``head1`` first."""
    dummy = Node(None)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.data <= head2.data:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
        tail.next = None
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def reverse_in_groups(head: Node | None, k: int) -> Node | None:
    """Reverse each run of ``k`` nodes, the last shorter run included."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    dummy = Node(None, head)
    group_prev = dummy
    while group_prev.next is not None:
        group_first = group_prev.next
        prev: Node | None = None
        node: Node | None = group_first
        for _ in range(k):
            if node is None:
                break
            following = node.next
            node.next = prev
            prev = node
            node = following
        group_prev.next = prev
        group_first.next = node
        group_prev = group_first
    return dummy.next


def segregate_012(head: Node | None) -> Node | None:
    """Rewrite the data so all 0s come first, then 1s, then 2s.

    Any value other than 0 or 1 is counted as a 2.
    """
    counts = Counter(
        node.data if node.data in (0, 1) else 2 for node in iter_nodes(head)
    )
    values = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]
    for node, value in zip(iter_nodes(head), values):
        node.data = value
    return head