"""Hash set of byte-string elements built on linked-list buckets."""

from __future__ import annotations

from typing import Iterator

from blobset.container import (
    DEFAULT_BUCKETS,
    AbstractSet,
    ContainerError,
    ContainerIterator,
)
from blobset.linked_list import LinkedList, ListIterator
from blobset.memory import MemoryManager

BUCKET_LIMIT = 50

INSERTED = 0
DUPLICATE = 1
REJECTED = 2


class SetIterator(ContainerIterator):
    """Cursor over a :class:`HashSet`, walking bucket by bucket."""

    def __init__(
        self, owner: HashSet, index: int, list_iter: ListIterator | None = None
    ) -> None:
        self._set = owner
        self._index = index
        if list_iter is None:
            bucket = owner._lists[index]
            list_iter = bucket.new_iterator() if bucket is not None else None
            if list_iter is None:
                raise ContainerError("bucket has no elements to iterate")
        self._list_iter: ListIterator | None = list_iter

    def get_index(self) -> int:
        """Return the bucket that the current element hashes to."""
        elem = self._list_iter.get_element() if self._list_iter else None
        if elem is None:
            raise ContainerError("iterator does not point at an element")
        return self._set.hash_func(elem) % self._set._set_size

    def get_element(self) -> bytes | None:
        if self._set.empty() or self._list_iter is None:
            return None
        return self._list_iter.get_element()

    def has_next(self) -> bool:
        if self._set.empty() or self._list_iter is None:
            return False
        if self._list_iter.has_next():
            return True
        return self._set._next_bucket(self._index + 1) is not None

    def go_to_next(self) -> None:
        if self._list_iter is None:
            return
        if self._list_iter.has_next():
            self._list_iter.go_to_next()
            return
        index = self._set._next_bucket(self._index + 1)
        if index is None:
            self._list_iter = None
            return
        self._index = index
        self._list_iter = self._set._lists[index].new_iterator()

    def equals(self, other: ContainerIterator) -> bool:
        if self._list_iter is None:
            return isinstance(other, SetIterator) and other._list_iter is None
        if isinstance(other, SetIterator):
            return other._list_iter is not None and self._list_iter.equals(
                other._list_iter
            )
        return self._list_iter.equals(other)


class HashSet(AbstractSet):
    """Set of byte strings with separate chaining and doubling rehash."""

    def __init__(self, memory: MemoryManager, buckets: int = DEFAULT_BUCKETS) -> None:
        super().__init__(memory, buckets)

    @property
    def bucket_count(self) -> int:
        """Number of buckets in the table."""
        return self._set_size

    def _next_bucket(self, start: int) -> int | None:
        for index in range(start, self._set_size):
            bucket = self._lists[index]
            if bucket is not None and not bucket.empty():
                return index
        return None

    def _bucket_for(self, elem: bytes) -> int:
        return self.hash_func(elem) % self._set_size

    def rehash(self) -> None:
        """Double the table and move every element to its new bucket."""
        new_size = self._set_size * 2
        new_lists: list[LinkedList | None] = [None] * new_size
        for bucket in self._lists:
            if bucket is None or bucket.empty():
                continue
            for elem in bucket:
                index = self.hash_func(elem) % new_size
                target = new_lists[index]
                if target is None:
                    target = new_lists[index] = LinkedList(self._memory)
                target.push_front(elem)
            bucket.clear()
        self._set_size = new_size
        self._lists = new_lists

    def insert(self, elem: bytes) -> int:
        """Add ``elem``: 0 if added, 1 if already present, 2 if rejected."""
        if elem is None:
            return REJECTED
        data = bytes(elem)
        if not data:
            return REJECTED
        index = self._bucket_for(data)
        if self._lists[index] is None:
            self._lists[index] = LinkedList(self._memory)
        if self._lists[index].size() >= BUCKET_LIMIT:
            self.rehash()
            index = self._bucket_for(data)
            if self._lists[index] is None:
                self._lists[index] = LinkedList(self._memory)
        bucket = self._lists[index]
        if bucket.find(data) is not None:
            return DUPLICATE
        bucket.push_front(data)
        self._count += 1
        return INSERTED

    def find(self, elem: bytes) -> SetIterator | None:
        if self.empty() or elem is None:
            return None
        data = bytes(elem)
        if not data:
            return None
        index = self._bucket_for(data)
        bucket = self._lists[index]
        if bucket is None or bucket.empty():
            return None
        found = bucket.find(data)
        if found is None:
            return None
        return SetIterator(self, index, found)

    def new_iterator(self) -> SetIterator | None:
        if self.empty():
            return None
        index = self._next_bucket(0)
        if index is None:
            return None
        return SetIterator(self, index)

    def remove(self, iterator: ContainerIterator | None) -> None:
        if self.empty() or iterator is None:
            return
        if not isinstance(iterator, SetIterator):
            raise ContainerError("iterator does not belong to a set")
        if iterator._set is not self:
            raise ContainerError("iterator belongs to another set")
        current = iterator._list_iter
        elem = iterator.get_element()
        if current is None or elem is None:
            return
        index = self._bucket_for(elem)
        at_bucket_end = not current.has_next()
        if at_bucket_end:
            iterator.go_to_next()
        self._lists[index].remove(current)
        self._count -= 1

    def __len__(self) -> int:
        return self._count

    def __contains__(self, elem: object) -> bool:
        if not isinstance(elem, (bytes, bytearray, memoryview)):
            return False
        return self.find(bytes(elem)) is not None

    def __iter__(self) -> Iterator[bytes]:
        for bucket in self._lists:
            if bucket is not None:
                yield from bucket