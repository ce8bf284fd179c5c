"""Abstract containers of byte-string elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from blobset.memory import MemoryManager

if TYPE_CHECKING:
    from blobset.linked_list import LinkedList

DEFAULT_BUCKETS = 1_000_000
_HASH_MASK = (1 << 64) - 1


class ContainerError(Exception):
    """Raised when a container cannot carry out an operation."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class ContainerIterator(ABC):
    """Cursor over the elements of a container."""

    @abstractmethod
    def get_element(self) -> bytes | None:
        """Return the current element, or None past the end."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if a following element exists."""

    @abstractmethod
    def go_to_next(self) -> None:
        """Move to the following element."""

    @abstractmethod
    def equals(self, other: ContainerIterator) -> bool:
        """Return True if both iterators point at the same position."""


class Container(ABC):
    """Base class of every container; elements are byte strings."""

    def __init__(self, memory: MemoryManager) -> None:
        self._memory = memory

    def max_bytes(self) -> int:
        """Return the capacity of the container in bytes."""
        return self._memory.size()

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def find(self, elem: bytes) -> ContainerIterator | None:
        """Return an iterator at the first equal element, or None."""

    @abstractmethod
    def new_iterator(self) -> ContainerIterator | None:
        """Return an iterator at the first element, or None if empty."""

    @abstractmethod
    def remove(self, iterator: ContainerIterator | None) -> None:
        """Remove the element under the iterator and advance it."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def empty(self) -> bool:
        """Return True if there are no elements."""


def djb2_hash(key: bytes) -> int:
    """Return the 64-bit djb2 hash of ``key``."""
    value = 5381
    for byte in bytes(key):
        value = ((value << 5) + value + byte) & _HASH_MASK
    return value


class GroupContainer(Container):
    """Base of hashed containers: a fixed table of list buckets."""

    def __init__(self, memory: MemoryManager, buckets: int = DEFAULT_BUCKETS) -> None:
        super().__init__(memory)
        if buckets <= 0:
            raise ValueError("bucket count must be positive")
        self._set_size = buckets
        self._lists: list[LinkedList | None] = [None] * buckets
        self._count = 0

    def hash_func(self, key: bytes) -> int:
        """Hash an element for bucket placement."""
        return djb2_hash(key)

    def size(self) -> int:
        return self._count

    def max_bytes(self) -> int:
        """Return the capacity of the container in bytes."""
        return self._memory.size()

    def clear(self) -> None:
        for bucket in filter(None, self._lists):
            bucket.clear()
        self._count = 0

    def empty(self) -> bool:
        return self._count == 0


class GroupList(Container):
    """Base of list containers."""


class AbstractList(GroupList):
    """Singly linked list interface."""

    @abstractmethod
    def push_front(self, elem: bytes) -> None:
        """Add an element at the front."""

    @abstractmethod
    def pop_front(self) -> None:
        """Drop the front element, if any."""

    @abstractmethod
    def front(self) -> bytes | None:
        """Return the front element, or None if empty."""

    @abstractmethod
    def insert(self, iterator: ContainerIterator, elem: bytes) -> None:
        """Insert an element at the iterator's position."""


class AbstractSet(GroupContainer):
    """Set interface."""

    @abstractmethod
    def insert(self, elem: bytes) -> int:
        """Add an element: 0 if added, 1 if already present, 2 otherwise."""