"""Hash set and singly linked list of byte strings, with memory managers and a self-test harness."""

__version__ = "0.1.0"
__all__ = ["memory", "container", "linked_list", "hash_set", "harness"]