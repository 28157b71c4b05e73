"""A thread-safe doubly linked list keyed by unique identifiers."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

__all__ = ["LinkedList", "LinkedListError", "Node"]


class LinkedListError(Exception):
    """Raised when a node is missing or the list cannot yield a node."""


@dataclass
class Node:
    """A list entry: a unique ``uuid`` and the ``value`` it holds."""

    uuid: str
    value: Any = None
    _prev: Node | None = field(default=None, repr=False, compare=False)
    _next: Node | None = field(default=None, repr=False, compare=False)


class LinkedList:
    """Doubly linked list with lookup by uuid and a movable cursor."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._current: Node | None = None
        self._nodes: dict[str, Node] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        with self._lock:
            node = self._head
        while node is not None:
            yield node
            with self._lock:
                node = node._next

    def _update_existing(self, item: Node) -> Node | None:
        node = self._nodes.get(item.uuid)
        if node is not None:
            node.value = item.value
        return node

    def _reset_cursor(self) -> None:
        if self._current is None:
            self._current = self._head

    def _push_front(self, items: tuple[Node, ...]) -> None:
        for item in items:
            if self._update_existing(item) is not None:
                continue
            node = Node(item.uuid, item.value)
            if self._head is None:
                self._head = self._tail = node
            else:
                node._next = self._head
                self._head._prev = node
                self._head = node
            self._nodes[item.uuid] = node
        self._reset_cursor()

    def _push_back(self, items: tuple[Node, ...]) -> None:
        for item in items:
            if self._update_existing(item) is not None:
                continue
            node = Node(item.uuid, item.value)
            if self._tail is None:
                self._head = self._tail = node
            else:
                self._tail._next = node
                node._prev = self._tail
                self._tail = node
            self._nodes[item.uuid] = node
        self._reset_cursor()

    def _target(self, target_uuid: str) -> Node:
        try:
            return self._nodes[target_uuid]
        except KeyError:
            raise LinkedListError(f"target node [{target_uuid}] not found") from None

    def push_front(self, *items: Node) -> None:
        """Insert nodes at the head in turn; a known uuid only has its value updated."""
        if items:
            with self._lock:
                self._push_front(items)

    def push_back(self, *items: Node) -> None:
        """Insert nodes at the tail in turn; a known uuid only has its value updated."""
        if items:
            with self._lock:
                self._push_back(items)

    def insert_before(self, target_uuid: str, *items: Node) -> None:
        """Insert nodes before the target, each before the one placed last.

        An empty list takes the nodes at its head. A missing target raises
        :class:`LinkedListError`.
        """
        if not items:
            return
        with self._lock:
            if not self._nodes:
                self._push_front(items)
                return
            anchor = self._target(target_uuid)
            for item in items:
                existing = self._update_existing(item)
                if existing is not None:
                    anchor = existing
                    continue
                node = Node(item.uuid, item.value, _prev=anchor._prev, _next=anchor)
                if anchor._prev is None:
                    self._head = node
                else:
                    anchor._prev._next = node
                anchor._prev = node
                anchor = node
                self._nodes[item.uuid] = node
            self._reset_cursor()

    def insert_after(self, target_uuid: str, *items: Node) -> None:
        """Insert nodes after the target, each after the one placed last.

        An empty list takes the nodes at its tail. A missing target raises
        :class:`LinkedListError`.
        """
        if not items:
            return
        with self._lock:
            if not self._nodes:
                self._push_back(items)
                return
            anchor = self._target(target_uuid)
            for item in items:
                existing = self._update_existing(item)
                if existing is not None:
                    anchor = existing
                    continue
                node = Node(item.uuid, item.value, _prev=anchor, _next=anchor._next)
                if anchor._next is None:
                    self._tail = node
                else:
                    anchor._next._prev = node
                anchor._next = node
                anchor = node
                self._nodes[item.uuid] = node
            self._reset_cursor()

    def remove(self, *uuids: str) -> None:
        """Remove the nodes with the given uuids; unknown ones are ignored."""
        with self._lock:
            for uuid in uuids:
                node = self._nodes.pop(uuid, None)
                if node is None:
                    continue
                if not self._nodes:
                    self._head = self._tail = self._current = None
                    continue
                if node is self._head:
                    self._head = node._next
                    self._head._prev = None
                elif node is self._tail:
                    self._tail = node._prev
                    self._tail._next = None
                else:
                    node._prev._next = node._next
                    node._next._prev = node._prev
                if node is self._current:
                    self._current = node._next
                node._prev = node._next = None

    def set_current(self, uuid: str) -> None:
        """Move the cursor to the node with ``uuid``."""
        with self._lock:
            node = self._nodes.get(uuid)
            if node is None:
                raise LinkedListError(f"node [{uuid}] not found")
            self._current = node

    def get_node_value(self, uuid: str) -> Any:
        """Return the value of the node with ``uuid``."""
        with self._lock:
            node = self._nodes.get(uuid)
            if node is None:
                raise LinkedListError(f"node [{uuid}] not found")
            return node.value

    def update_node_value(self, uuid: str, value: Any) -> None:
        """Replace the value of the node with ``uuid``."""
        with self._lock:
            node = self._nodes.get(uuid)
            if node is None:
                raise LinkedListError(f"node [{uuid}] not found")
            node.value = value

    def _take_current(self) -> tuple[Node, Node]:
        if not self._nodes:
            raise LinkedListError("empty linked list")
        if self._current is None:
            raise LinkedListError("current node is nil")
        live = self._current
        return live, replace(live, _prev=None, _next=None)

    def poll(self) -> Node:
        """Return a copy of the cursor node and advance, wrapping to the head."""
        with self._lock:
            live, copy = self._take_current()
            self._current = live._next if live._next is not None else self._head
            return copy

    def get_current_and_move_to_next(self) -> Node:
        """Return a copy of the cursor node and advance; the cursor stops past the tail."""
        with self._lock:
            live, copy = self._take_current()
            self._current = live._next
            return copy