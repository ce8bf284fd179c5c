"""Self-checking exercise runs over :class:`HashSet`, plus a command entry point."""

from __future__ import annotations

import argparse
import struct
import sys
import time
from contextlib import contextmanager
from typing import Iterator, TextIO

from blobset.container import DEFAULT_BUCKETS, ContainerError, ContainerIterator
from blobset.hash_set import INSERTED, HashSet
from blobset.memory import Mem

_INT = struct.Struct("<i")


class SetTester:
    """Drives a :class:`HashSet` of 4-byte integers through checked scenarios."""

    def __init__(
        self,
        memory_size: int,
        buckets: int = DEFAULT_BUCKETS,
        out: TextIO | None = None,
    ) -> None:
        self.memory = Mem(memory_size)
        self.set = HashSet(self.memory, buckets)
        self._out = out

    def _say(self, *parts: object, end: str = "\n") -> None:
        print(*parts, end=end, file=self._out if self._out is not None else sys.stdout)

    @contextmanager
    def _scenario(self, title: str) -> Iterator[None]:
        """Announce and time a scenario, clearing the set once it succeeds."""
        self._say(title)
        start = time.perf_counter()
        yield
        self._say(f"Elapsed: {(time.perf_counter() - start) * 1000.0:.3f} ms.")
        self.set.clear()

    def _fill_and_iterate(self, count: int, size_msg: str, iter_msg: str) -> ContainerIterator:
        self.fill_array(count)
        if self.set.size() != count:
            raise ContainerError(size_msg)
        it = self.set.new_iterator()
        if it is None:
            raise ContainerError(iter_msg)
        return it

    @staticmethod
    def _current(it: ContainerIterator) -> tuple[bytes, int]:
        elem = it.get_element()
        if elem is None:
            raise ContainerError("Iterator ran past the end of the Container")
        return elem, _INT.unpack(elem)[0]

    def _remove_checked(self, it: ContainerIterator, elem: bytes, msg: str) -> None:
        self.set.remove(it)
        if self.set.find(elem) is not None:
            raise ContainerError(msg)

    def fill_array(self, count: int) -> None:
        """Insert the integers 1..count, checking each one can be found."""
        try:
            self._say(f"Filling the set with {count} elements.")
            for value in range(1, count + 1):
                if self.set.insert(_INT.pack(value)) != INSERTED:
                    raise ContainerError("Error with insert")
                if self.check_insert(value) == 1:
                    raise ContainerError("Element not found in Container")
        except ContainerError as err:
            self._say(err.msg)

    def check_insert(self, value: int) -> int:
        """Return 0 if ``value`` is stored intact, 1 if it reads back wrong."""
        found = self.set.find(_INT.pack(value))
        if found is None:
            raise ContainerError("Error with insert")
        elem = found.get_element()
        return 0 if elem is not None and _INT.unpack(elem)[0] == value else 1

    def print_elements(self) -> None:
        """Print every element in iteration order."""
        self._say("Print all elements: ", end="")
        it = self.set.new_iterator()
        if it is None:
            return
        for _ in range(self.set.size()):
            elem = it.get_element()
            if elem is None:
                break
            self._say(_INT.unpack(elem)[0], end=" ")
            it.go_to_next()
        self._say()

    def test_remove_find(self, count: int) -> None:
        """Remove even elements while walking, checking find along the way."""
        with self._scenario("Testing remove."):
            it = self._fill_and_iterate(
                count,
                "Error: size of elements != count_elem in Testing remove",
                "Error with function of newIterator in testing of remove_and_find",
            )
            for _ in range(count):
                elem, value = self._current(it)
                if value % 2 == 0:
                    self._remove_checked(it, elem, "Odd element is not deleted in Container")
                elif self.set.find(elem) is None:
                    raise ContainerError("There is not even element in Container")
                else:
                    it.go_to_next()
            if self.set.size() != count // 2:
                raise ContainerError("Error with odd element in testing of remove_and_find")

    def test_removing_all_elem(self, count: int) -> None:
        """Remove every element through one iterator and check the set empties."""
        with self._scenario("Testing removing all elements."):
            it = self._fill_and_iterate(
                count,
                "Error: size of elements != count_elem in Testing removing all elements",
                "Error with function of newIterator in removing all elem",
            )
            for _ in range(count):
                elem, _value = self._current(it)
                self._remove_checked(it, elem, "Element is not deleted in Container")
            if self.set.size() != 0:
                raise ContainerError("Error with removing: size != 0")
            if self.set.empty():
                self._say("The set is empty after removing all elements")

    def _insert_find_remove(self, data: bytes, label: str) -> None:
        if self.set.insert(data) != INSERTED:
            raise ContainerError(f"Error with insert {label}")
        it = self.set.find(data)
        if it is None:
            raise ContainerError(f"{label} was not added")
        self._say(("Matches" if it.get_element() == data else "Does not match") + f" {label}")
        if label == "string" and self.set.insert(data) != INSERTED:
            self._say("Error with repeat insert str")
        self.set.remove(it)
        if self.set.new_iterator() is not None:
            raise ContainerError(f"{label} was not deleted")

    def test_void_insert(self) -> None:
        """Store a point, a pair of doubles and a string as raw bytes."""
        self._say("Testing void insert")
        samples = [
            (struct.pack("<dd", 10.5, 12.8), "point"),
            (struct.pack("<2d", 2.0, 3.0), "double array"),
            ("Hello".encode(), "string"),
        ]
        try:
            for data, label in samples:
                self._insert_find_remove(data, label)
        except ContainerError as err:
            self._say(err.msg)
        if self.set.size() != 0:
            raise ContainerError("Container is not empty")
        self.set.clear()

    def test_rehash_function(self, count: int) -> None:
        """Fill enough to force rehashing, then remove one and clear."""
        with self._scenario("Testing rehash function."):
            it = self._fill_and_iterate(
                count,
                "Element count does not match count_elem",
                "Error with function of newIterator in rehash",
            )
            self._say(f"Number of elements: {self.set.size()}")
            self._say(f"Current bucket count: {self.set.bucket_count}")
            elem, _value = self._current(it)
            self._remove_checked(it, elem, "Element is not deleted in Container")
            self._say("All good" if self.set.size() == count - 1 else "Bad")
        succeeded = self.set.empty() and self.set.new_iterator() is None
        self._say("Success" if succeeded else "Unsuccess")


def main(argv: list[str] | None = None) -> int:
    """Run the remove-and-find scenario on a fresh set."""
    parser = argparse.ArgumentParser(description="Exercise the byte-string hash set.")
    parser.parse_args(argv)
    tester = SetTester(100)
    try:
        tester.test_remove_find(100)
        print()
    except ContainerError as err:
        print(err.msg)
    return 0