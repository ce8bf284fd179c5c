"""Memory managers that hand out raw byte blocks to containers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MemoryManager(ABC):
    """Base memory manager with a nominal capacity in bytes."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("memory size must not be negative")
        self._size = size

    def size(self) -> int:
        """Return the nominal capacity given at construction."""
        return self._size

    def max_bytes(self) -> int:
        """Return the largest block size; -1 means no limit is reported."""
        return -1

    @abstractmethod
    def alloc(self, size: int) -> bytearray:
        """Return a fresh writable block of ``size`` bytes."""

    @abstractmethod
    def free(self, block: bytearray) -> None:
        """Give a block obtained from :meth:`alloc` back to the manager."""


class Mem(MemoryManager):
    """Heap-backed manager that keeps track of the blocks it handed out."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._live: dict[int, bytearray] = {}

    def alloc(self, size: int) -> bytearray:
        if size < 0:
            raise ValueError("block size must not be negative")
        block = bytearray(size)
        self._live[id(block)] = block
        return block

    def free(self, block: bytearray) -> None:
        if self._live.get(id(block)) is not block:
            raise ValueError("block was not allocated by this manager")
        del self._live[id(block)]