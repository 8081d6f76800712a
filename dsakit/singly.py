"""Singly linked list nodes and the classic operations on them.

Every operation takes the head node (or ``None`` for an empty list) and,
where the shape of the list may change, returns the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield the nodes of the list from ``head`` onwards."""
    node = head
    while node is not None:
        yield node
        node = node.next


def to_values(head: Node | None) -> list[Any]:
    """Return the data of every node, in order."""
    return [node.data for node in iter_nodes(head)]


def format_list(head: Node | None) -> str:
    """Render the list as ``->a->b->c``; an empty list renders as ``""``."""
    return "".join(f"->{node.data}" for node in iter_nodes(head))


def _length(head: Node | None) -> int:
    return sum(1 for _ in iter_nodes(head))


def _node_at(head: Node | None, position: int) -> Node:
    """Return the node at a 1-based position."""
    if position >= 1:
        for index, node in enumerate(iter_nodes(head), start=1):
            if index == position:
                return node
    raise IndexError(f"no node at position {position}")


def push_front(head: Node | None, data: Any) -> Node:
    """Insert ``data`` before ``head`` and return the new head."""
    return Node(data, head)


def append(head: Node | None, data: Any) -> Node:
    """Add ``data`` at the end of the list and return the head."""
    node = Node(data)
    if head is None:
        return node
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def insert_after(head: Node | None, position: int, data: Any) -> Node:
    """Insert ``data`` after the node at the 1-based ``position``."""
    anchor = _node_at(head, position)
    anchor.next = Node(data, anchor.next)
    assert head is not None
    return head


def delete_first(head: Node | None) -> Node | None:
    """Remove the first node and return the new head."""
    if head is None:
        raise IndexError("delete from an empty list")
    return head.next


def delete_last(head: Node | None) -> Node | None:
    """Remove the last node and return the head."""
    if head is None:
        raise IndexError("delete from an empty list")
    if head.next is None:
        return None
    prev = head
    while prev.next is not None and prev.next.next is not None:
        prev = prev.next
    prev.next = None
    return head


def delete_at(head: Node | None, position: int) -> Node | None:
    """Remove the node at the 1-based ``position`` and return the head."""
    if position == 1:
        return delete_first(head)
    prev = _node_at(head, position - 1)
    if prev.next is None:
        raise IndexError(f"no node at position {position}")
    prev.next = prev.next.next
    return head


def delete_every_kth(head: Node | None, k: int) -> Node | None:
    """Remove the k-th, 2k-th, ... nodes; ``k == 1`` empties the list.

    A ``k`` below one matches no node and leaves the list as it is.
    """
    if k == 1:
        return None
    prev: Node | None = None
    node = head
    count = 1
    while node is not None:
        if count == k:
            assert prev is not None
            prev.next = node.next
            node = prev.next
            count = 1
        else:
            count += 1
            prev = node
            node = node.next
    return head


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Remove the n-th node counted from the end (1 is the last node)."""
    length = _length(head)
    if not 1 <= n <= length:
        raise IndexError(f"no node {n} from the end in a list of {length}")
    return delete_at(head, length - n + 1)


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    prev: Node | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev


def middle(head: Node | None) -> Node | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    return slow


def has_loop(head: Node | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever cycles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
        if fast is slow:
            return True
    return False


def loop_length(head: Node | None) -> int:
    """Return the number of nodes in the cycle, or 0 if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
        if fast is slow:
            break
    else:
        return 0
    assert fast is not None
    count = 1
    node = fast.next
    while node is not fast:
        count += 1
        assert node is not None
        node = node.next
    return count


def is_palindrome(head: Node | None) -> bool:
    """Tell whether the data reads the same both ways.

    The second half is reversed for the comparison and restored afterwards,
    so the list is left as it was.
    """
    if head is None or head.next is None:
        return True
    half = _length(head) // 2
    before = _node_at(head, half)
    second = reverse(before.next)
    try:
        return all(
            left.data == right.data
            for left, right in zip(islice(iter_nodes(head), half), iter_nodes(second))
        )
    finally:
        before.next = reverse(second)


def rotate_right(head: Node | None, k: int) -> Node | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None or head.next is None:
        return head
    count = _length(head)
    k %= count
    if k == 0:
        return head
    new_tail = _node_at(head, count - k)
    new_head = new_tail.next
    assert new_head is not None
    new_tail.next = None
    tail = new_head
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return new_head