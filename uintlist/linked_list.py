"""A singly linked list of unsigned 32-bit integers, with a simple cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

UINT_MAX = 0xFFFFFFFF

__all__ = ["LinkedList", "Cursor", "UINT_MAX"]


@dataclass(slots=True)
class _Node:
    data: int
    next: _Node | None = None


def _check_data(data: int) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"data must be an int, not {type(data).__name__}")
    if not 0 <= data <= UINT_MAX:
        raise ValueError(f"data {data} is outside the unsigned 32-bit range")
    return data


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"index must be an int, not {type(index).__name__}")
    if index < 0:
        raise IndexError(f"index {index} is negative")
    return index


class LinkedList:
    """Singly linked list holding unsigned 32-bit integers."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node | None:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, data: int) -> None:
        """Add data at the end of the list."""
        new_node = _Node(_check_data(data))
        if self._head is None:
            self._head = new_node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = new_node

    def prepend(self, data: int) -> None:
        """Add data at the front of the list."""
        self._head = _Node(_check_data(data), self._head)

    def insert(self, index: int, data: int) -> None:
        """Insert data so that it ends up at ``index``.

        Index 0 always works; otherwise the index may be at most the length.
        """
        data = _check_data(data)
        index = _check_index(index)
        if index == 0:
            self._head = _Node(data, self._head)
            return
        previous = self._node_at(index - 1)
        if previous is None:
            raise IndexError(f"insert index {index} is out of range")
        previous.next = _Node(data, previous.next)

    def find(self, data: int) -> int:
        """Return the index of the first occurrence of data, or len(self) if absent."""
        position = 0
        for position, value in enumerate(self):
            if value == data:
                return position
        return position + 1 if self._head is not None else 0

    def remove(self, index: int) -> int:
        """Remove the element at ``index`` and return its data."""
        index = _check_index(index)
        if self._head is None:
            raise IndexError("remove from an empty list")
        if index == 0:
            removed = self._head
            self._head = removed.next
            return removed.data
        previous = self._node_at(index - 1)
        if previous is None or previous.next is None:
            raise IndexError(f"remove index {index} is out of range")
        removed = previous.next
        previous.next = removed.next
        return removed.data

    def clear(self) -> None:
        """Remove every element."""
        self._head = None

    def cursor(self, index: int = 0) -> Cursor:
        """Return a cursor positioned at ``index``."""
        index = _check_index(index)
        node = self._node_at(index)
        if node is None:
            raise IndexError(f"cursor index {index} is out of range")
        return Cursor(self, node, index)


class Cursor:
    """A forward-moving position in a LinkedList; not safe against concurrent edits."""

    __slots__ = ("linked_list", "_node", "index", "data")

    def __init__(self, linked_list: LinkedList, node: _Node, index: int) -> None:
        self.linked_list = linked_list
        self._node = node
        self.index = index
        self.data = node.data

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, data={self.data})"

    def advance(self) -> bool:
        """Move to the next element; return False, without moving, at the end."""
        following = self._node.next
        if following is None:
            return False
        self._node = following
        self.index += 1
        self.data = following.data
        return True

    def __iter__(self) -> Iterator[int]:
        """Yield the current data and then each following element, moving the cursor."""
        yield self.data
        while self.advance():
            yield self.data