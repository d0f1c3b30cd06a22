"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        """Yield this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def lstnew(content: Any) -> Node:
    """A new single-node list holding ``content``."""
    return Node(content)


def lstadd_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` in front of ``head`` and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstlast(head: Optional[Node]) -> Optional[Node]:
    """The last node of the list, or None for an empty list."""
    last = None
    if head is not None:
        for last in head:
            pass
    return last


def lstadd_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append ``node`` at the end of the list and return the head."""
    if head is None:
        return node
    last = lstlast(head)
    last.next = node
    return head


def lstsize(head: Optional[Node]) -> int:
    """Number of nodes in the list."""
    return 0 if head is None else sum(1 for _ in head)


def lstdelone(node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release the content of one node with ``delete``; the rest is left alone."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lstclear(head: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release every content of the list with ``delete`` and unlink the nodes."""
    if delete is None:
        return
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node = following


def lstiter(head: Optional[Node], func: Optional[Callable[[Any], Any]]) -> None:
    """Call ``func`` on the content of every node."""
    if head is None or func is None:
        return
    for node in head:
        func(node.content)


def lstmap(
    head: Optional[Node],
    func: Optional[Callable[[Any], Any]],
    delete: Optional[Callable[[Any], Any]],
) -> Optional[Node]:
    """A new list of ``func(content)`` for each node.

    If ``func`` gives None for any content, everything built so far is
    released with ``delete`` and None is returned.
    """
    if head is None or func is None or delete is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    for node in head:
        content = func(node.content)
        if content is None:
            lstclear(new_head, delete)
            return None
        created = Node(content)
        if tail is None:
            new_head = created
        else:
            tail.next = created
        tail = created
    return new_head