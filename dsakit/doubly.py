"""Doubly linked list nodes and the classic operations on them.

Every operation takes the head node (or ``None`` for an empty list) and,
where the shape of the list may change, returns the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any
    next: DNode | None = None
    prev: DNode | None = None

    def __repr__(self) -> str:
        return f"DNode({self.data!r})"


def _iter_nodes(head: DNode | None) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: DNode | None, position: int) -> DNode:
    """Return the node at a 1-based position."""
    if position >= 1:
        for index, node in enumerate(_iter_nodes(head), start=1):
            if index == position:
                return node
    raise IndexError(f"no node at position {position}")


def from_values(values: Iterable[Any]) -> DNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: DNode | None = None
    tail: DNode | None = None
    for value in values:
        node = DNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: DNode | None) -> list[Any]:
    """Return the data of every node, following ``next`` links."""
    return [node.data for node in _iter_nodes(head)]


def to_values_backward(head: DNode | None) -> list[Any]:
    """Return the data from the tail back to the head, following ``prev``."""
    tail: DNode | None = None
    for tail in _iter_nodes(head):
        pass
    values = []
    node = tail
    while node is not None:
        values.append(node.data)
        node = node.prev
    return values


def format_list(head: DNode | None) -> str:
    """Render the list as ``<=>a<=>b<=>c``; an empty list renders as ``""``."""
    return "".join(f"<=>{node.data}" for node in _iter_nodes(head))


def push_front(head: DNode | None, data: Any) -> DNode:
    """Insert ``data`` before ``head`` and return the new head."""
    node = DNode(data, head)
    if head is not None:
        head.prev = node
    return node


def append(head: DNode | None, data: Any) -> DNode:
    """Add ``data`` at the end of the list and return the head."""
    if head is None:
        return DNode(data)
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = DNode(data, prev=tail)
    return head


def insert_at(head: DNode | None, position: int, data: Any) -> DNode:
    """Insert ``data`` after the node at the 1-based ``position``.

    Position 0 inserts before the head.
    """
    if position == 0:
        return push_front(head, data)
    anchor = _node_at(head, position)
    node = DNode(data, anchor.next, anchor)
    if anchor.next is not None:
        anchor.next.prev = node
    anchor.next = node
    assert head is not None
    return head


def delete_first(head: DNode | None) -> DNode | None:
    """Remove the first node and return the new head."""
    if head is None:
        raise IndexError("delete from an empty list")
    new_head = head.next
    if new_head is not None:
        new_head.prev = None
    head.next = None
    return new_head


def delete_last(head: DNode | None) -> DNode | None:
    """Remove the last node and return the head; an empty list stays empty."""
    if head is None or head.next is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    assert tail.prev is not None
    tail.prev.next = None
    tail.prev = None
    return head


def delete_at(head: DNode | None, position: int) -> DNode | None:
    """Remove the node at the 1-based ``position`` and return the head."""
    if position < 1:
        raise IndexError(f"invalid position {position}")
    if position == 1:
        return delete_first(head)
    node = _node_at(head, position)
    assert node.prev is not None
    node.prev.next = node.next
    if node.next is not None:
        node.next.prev = node.prev
    node.next = node.prev = None
    return head