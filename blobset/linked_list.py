"""Singly linked list of byte-string elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from blobset.container import AbstractList, ContainerError, ContainerIterator
from blobset.memory import MemoryManager


@dataclass(eq=False)
class _Node:
    data: bytearray
    next: _Node | None = None


class ListIterator(ContainerIterator):
    """Cursor over a :class:`LinkedList`."""

    def __init__(self, node: _Node | None) -> None:
        self._node = node

    def get_element(self) -> bytes | None:
        return None if self._node is None else bytes(self._node.data)

    def has_next(self) -> bool:
        return self._node is not None and self._node.next is not None

    def go_to_next(self) -> None:
        if self._node is not None:
            self._node = self._node.next

    def equals(self, other: ContainerIterator) -> bool:
        return isinstance(other, ListIterator) and other._node is self._node


class LinkedList(AbstractList):
    """Singly linked list whose element storage comes from a memory manager."""

    def __init__(self, memory: MemoryManager) -> None:
        super().__init__(memory)
        self._head: _Node | None = None
        self._count = 0

    @staticmethod
    def _checked(elem: bytes) -> bytes:
        data = bytes(elem)
        if not data:
            raise ValueError("element must not be empty")
        return data

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _locate(self, target: _Node) -> tuple[bool, _Node | None]:
        """Return whether ``target`` is in the list and its predecessor (None at the head)."""
        prev = None
        for node in self._nodes():
            if node is target:
                return True, prev
            prev = node
        return False, None

    def _link_after(self, prev: _Node | None, elem: bytes) -> None:
        data = self._checked(elem)
        block = self._memory.alloc(len(data))
        block[:] = data
        node = _Node(block)
        if prev is None:
            node.next, self._head = self._head, node
        else:
            node.next, prev.next = prev.next, node
        self._count += 1

    def _unlink(self, prev: _Node | None, target: _Node) -> _Node | None:
        if prev is None:
            self._head = target.next
        else:
            prev.next = target.next
        self._memory.free(target.data)
        self._count -= 1
        return target.next

    def __iter__(self) -> Iterator[bytes]:
        return (bytes(node.data) for node in self._nodes())

    def push_front(self, elem: bytes) -> None:
        self._link_after(None, elem)

    def pop_front(self) -> None:
        if self._head is not None:
            self._unlink(None, self._head)

    def front(self) -> bytes | None:
        return None if self._head is None else bytes(self._head.data)

    def insert(self, iterator: ContainerIterator, elem: bytes) -> None:
        self._checked(elem)
        if not isinstance(iterator, ListIterator) or iterator._node is None:
            raise ContainerError("invalid iterator for insert")
        found, prev = self._locate(iterator._node)
        if not found:
            raise ContainerError("iterator does not belong to this list")
        self._link_after(prev, elem)

    def size(self) -> int:
        return self._count

    def max_bytes(self) -> int:
        """Return the capacity of the list in bytes."""
        return self._memory.size()

    def find(self, elem: bytes) -> ListIterator | None:
        data = bytes(elem)
        return next((ListIterator(n) for n in self._nodes() if n.data == data), None)

    def new_iterator(self) -> ListIterator | None:
        return None if self._head is None else ListIterator(self._head)

    def remove(self, iterator: ContainerIterator | None) -> None:
        if iterator is None:
            return
        if not isinstance(iterator, ListIterator):
            raise ContainerError("iterator does not belong to a list")
        target = iterator._node
        if target is None:
            return
        found, prev = self._locate(target)
        if found:
            iterator._node = self._unlink(prev, target)

    def clear(self) -> None:
        while self._head is not None:
            self._unlink(None, self._head)
        self._count = 0

    def empty(self) -> bool:
        return self._count == 0 and self._head is None