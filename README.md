# blobset

`blobset` provides containers whose elements are raw byte strings.

- `blobset.linked_list.LinkedList` is a singly linked list. It has
  `push_front`, `pop_front`, `front`, `insert`, `find`, `remove`, `clear`,
  `size` and `empty`. It works with an explicit `ListIterator`, and you can
  also iterate over it directly.
- `blobset.hash_set.HashSet` is a set of byte strings. It chains entries
  into `LinkedList` buckets and places them with the 64-bit djb2 hash
  (`blobset.container.djb2_hash`). An insert into a bucket that already
  holds 50 entries first doubles the table and rehashes every element.
  The table starts with 1,000,000 buckets. To choose another count, pass
  `buckets=` to the constructor. `bucket_count` reports the current size
  of the table. The set also supports `len()`, `in` and iteration.

Both containers take a memory manager from `blobset.memory`. `Mem` hands
out zeroed `bytearray` blocks for element storage and keeps track of them.
Freeing a block it did not hand out raises `ValueError`. The capacity
given to the manager is nominal. A container's `max_bytes()` returns it,
but nothing enforces it.

## Installation

```
pip install .
```

## Usage

```python
from blobset.memory import Mem
from blobset.hash_set import HashSet, INSERTED, DUPLICATE

s = HashSet(Mem(100), buckets=1024)
assert s.insert(b"hello") == INSERTED    # 0
assert s.insert(b"hello") == DUPLICATE   # 1
assert s.insert(b"") == 2                # REJECTED: empty elements are refused

it = s.find(b"hello")
print(it.get_element())     # b'hello'
s.remove(it)                # the iterator moves on to the next element
print(s.size(), s.empty())  # 0 True
```

To walk every element by hand, start from `new_iterator()`, which returns
`None` when the container is empty. Then call `get_element()`,
`has_next()` and `go_to_next()`. Removing through a `SetIterator` leaves
it on the element that follows the removed one, or past the end. Past the
end, `get_element()` returns `None`.

`LinkedList.insert(iterator, elem)` puts `elem` in front of the iterator's
element. It raises `blobset.container.ContainerError` if the iterator is
invalid or belongs to another list. It raises `ValueError` if `elem` is
empty.

## Self-test

`blobset.harness.SetTester` runs checked scenarios on a `HashSet` of
4-byte integers. The scenarios are `test_remove_find`,
`test_removing_all_elem`, `test_void_insert` and `test_rehash_function`.
Each one prints its progress and timing. A failed check raises
`ContainerError`. The command below runs the remove-and-find scenario
with 100 elements:

```
blobset-selftest
```

## Limitations

- Elements are byte strings only. Other objects must be encoded first.
- The containers keep everything in memory. They offer no persistence
  and no thread safety.

## Running the tests

```
pip install .[test]
pytest
```