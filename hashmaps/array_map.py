import logging

from typing import Iterator, List, Optional

from hashmaps.base import IterableMap
from hashmaps.configuration import ArrayMapConfiguration, DEFAULT_INITIAL_CAPACITY
from hashmaps.entry import ABSENT, Entry, K, V


class ArrayMap(IterableMap[K, V]):
    """
    Defines a map over a small, linearly scanned list of entries. No hashing is involved, keys are found by equality.

    Occupied slots always sit in [0, size); removal moves the last entry into the vacated slot, so removal does not
    preserve insertion order. The backing list doubles when full and never shrinks.

    Not safe for concurrent mutation. Mutating the map while iterating it gives unspecified results.
    """

    def __init__(self, initial_capacity: int=DEFAULT_INITIAL_CAPACITY, logger=None):
        """
        @param initial_capacity: The initial length of the backing list. Must be > 0
        """
        if initial_capacity <= 0:
            raise ValueError("argument 'initial_capacity' must be greater than zero")
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._entries = [None] * initial_capacity  # type: List[Optional[Entry[K, V]]]
        self._size = 0

    @classmethod
    def from_configuration(cls, configuration: ArrayMapConfiguration, logger=None) -> 'ArrayMap':
        """Construct an empty map from a validated configuration object"""
        return cls(configuration.initial_capacity, logger=logger)

    @property
    def configuration(self) -> ArrayMapConfiguration:
        """The configuration reproducing this map's current backing capacity"""
        return ArrayMapConfiguration(initial_capacity=len(self._entries))

    @property
    def capacity(self) -> int:
        """The length of the backing list"""
        return len(self._entries)

    def _index_of(self, key: K) -> int:
        for index in range(self._size):
            if self._entries[index].key == key:
                return index
        return -1

    def get(self, key: K):
        index = self._index_of(key)
        if index == -1:
            return ABSENT
        return self._entries[index].value

    def put(self, key: K, value: V):
        index = self._index_of(key)
        if index != -1:
            entry = self._entries[index]
            previous, entry.value = entry.value, value
            return previous

        if self._size == len(self._entries):  # full, double the backing list
            self._entries.extend([None] * len(self._entries))
            self._logger.debug(f"grew backing list to {len(self._entries)} slots")

        self._entries[self._size] = Entry(key, value)
        self._size += 1
        return ABSENT

    def remove(self, key: K):
        index = self._index_of(key)
        if index == -1:
            return ABSENT
        removed = self._entries[index].value
        last = self._size - 1
        self._entries[index] = self._entries[last]
        self._entries[last] = None
        self._size -= 1
        return removed

    def clear(self):
        for index in range(self._size):
            self._entries[index] = None
        self._size = 0

    def contains_key(self, key: K) -> bool:
        return self._index_of(key) != -1

    def size(self) -> int:
        return self._size

    def __iter__(self) -> 'ArrayMapIterator[K, V]':
        return ArrayMapIterator(self._entries)


class ArrayMapIterator(Iterator[Entry[K, V]]):
    """Single pass cursor over the occupied slots of an ArrayMap's backing list, in slot order"""

    def __init__(self, entries: List[Optional[Entry[K, V]]]):
        self._entries = entries
        self._index = 0

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        """Skip empty slots and report whether an entry remains"""
        while self._index < len(self._entries) and self._entries[self._index] is None:
            self._index += 1
        return self._index < len(self._entries)

    def __next__(self) -> Entry[K, V]:
        if not self.has_next():
            raise StopIteration
        entry = self._entries[self._index]
        self._index += 1
        return entry
