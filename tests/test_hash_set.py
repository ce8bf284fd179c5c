import struct

import pytest

from blobset.container import ContainerError, djb2_hash
from blobset.hash_set import HashSet, SetIterator
from blobset.linked_list import LinkedList
from blobset.memory import Mem


def enc(value):
    return struct.pack("<i", value)


def encoded(values):
    return sorted(enc(v) for v in values)


def filled(count, buckets=101):
    hs = HashSet(Mem(100), buckets)
    assert all(hs.insert(enc(i)) == 0 for i in range(1, count + 1))
    return hs


def test_insert_returns_codes():
    hs = filled(0)
    assert [hs.insert(x) for x in (b"Hello", b"Hello", b"", None)] == [0, 1, 2, 2]
    assert hs.size() == 1


def test_find_returns_element():
    hs = filled(20)
    assert [hs.find(enc(i)).get_element() for i in range(1, 21)] == [enc(i) for i in range(1, 21)]
    assert hs.find(enc(999)) is None
    assert hs.find(b"") is None


def test_empty_set():
    hs = filled(0)
    assert hs.find(enc(1)) is None
    assert hs.new_iterator() is None
    assert hs.empty()


def test_iterator_visits_every_element_once_then_ends():
    hs = filled(100)
    it = hs.new_iterator()
    seen = [it.get_element()]
    while it.has_next():
        it.go_to_next()
        seen.append(it.get_element())
    assert sorted(seen) == encoded(range(1, 101))
    it.go_to_next()
    assert it.get_element() is None


@pytest.mark.parametrize("count,buckets,drop", [
    (100, 101, lambda v: v % 2 == 0),
    (200, 13, lambda v: True),
], ids=["even", "all"])
def test_remove_while_walking(count, buckets, drop):
    hs = filled(count, buckets)
    it = hs.new_iterator()
    for _ in range(count):
        elem = it.get_element()
        if drop(struct.unpack("<i", elem)[0]):
            hs.remove(it)
            assert hs.find(elem) is None
        else:
            assert hs.find(elem) is not None
            it.go_to_next()
    kept = [i for i in range(1, count + 1) if not drop(i)]
    assert hs.size() == len(kept)
    assert sorted(hs) == encoded(kept)
    assert hs.empty() == (not kept)


def test_remove_via_find_then_reinsert():
    hs = filled(0)
    point = struct.pack("<dd", 10.5, 12.8)
    assert hs.insert(point) == 0
    it = hs.find(point)
    assert it.get_element() == point
    hs.remove(it)
    assert hs.new_iterator() is None
    assert hs.insert(point) == 0
    assert hs.size() == 1


def test_remove_foreign_iterator_raises():
    hs = filled(3)
    lst = LinkedList(Mem(10))
    lst.push_front(b"x")
    for foreign in (lst.new_iterator(), filled(3).new_iterator()):
        with pytest.raises(ContainerError):
            hs.remove(foreign)
    assert hs.size() == 3


def test_rehash_grows_table_and_keeps_elements():
    count = 1000
    hs = filled(count, buckets=1)
    assert hs.bucket_count > 1
    assert sorted(hs) == encoded(range(1, count + 1))
    first = hs.new_iterator()
    elem = first.get_element()
    hs.remove(first)
    assert hs.find(elem) is None
    assert hs.size() == count - 1


@pytest.mark.parametrize("rehash,buckets", [(False, 7), (True, 8)])
def test_get_index_matches_hash(rehash, buckets):
    hs = filled(30, buckets=4 if rehash else buckets)
    if rehash:
        hs.rehash()
    assert hs.bucket_count == buckets
    assert sorted(hs) == encoded(range(1, 31))
    it = hs.new_iterator()
    assert it.get_index() == djb2_hash(it.get_element()) % buckets


def test_clear_empties_set():
    hs = filled(50)
    hs.clear()
    assert (hs.empty(), hs.size()) == (True, 0)
    assert hs.new_iterator() is None
    assert hs.find(enc(1)) is None
    assert hs.insert(enc(1)) == 0


def test_equals():
    hs = filled(10)
    a = hs.find(enc(3))
    assert a.equals(hs.find(enc(3)))
    assert not a.equals(hs.find(enc(4)))


def test_container_protocol_and_capacity():
    hs = filled(5)
    assert len(hs) == 5
    assert enc(2) in hs
    assert enc(9) not in hs
    assert "text" not in hs
    assert hs.max_bytes() == 100


def test_iterator_on_empty_bucket_raises():
    with pytest.raises(ContainerError):
        SetIterator(filled(0, buckets=5), 0)