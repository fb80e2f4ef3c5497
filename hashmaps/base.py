from typing import Generic, Iterator, List, Tuple

from hashmaps.entry import ABSENT, Entry, K, V


class IterableMap(Generic[K, V]):
    """
    Defines the generic contract shared by every map in this package. Subclasses provide the storage operations,
    everything else (the python mapping protocol, bulk helpers) is composed here from those operations alone.

    Missing keys are reported with the ABSENT marker rather than an exception, so None is a legitimate value.
    """

    def get(self, key: K):
        """Return the value mapped to key, or ABSENT"""
        raise NotImplementedError

    def put(self, key: K, value: V):
        """Map key to value, returning the previous value or ABSENT"""
        raise NotImplementedError

    def remove(self, key: K):
        """Remove the mapping for key, returning its value or ABSENT"""
        raise NotImplementedError

    def clear(self):
        """Remove every mapping"""
        raise NotImplementedError

    def contains_key(self, key: K) -> bool:
        """Is there a mapping for key?"""
        raise NotImplementedError

    def size(self) -> int:
        """The number of stored mappings"""
        raise NotImplementedError

    def __iter__(self) -> Iterator[Entry[K, V]]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    def put_all(self, other):
        """
        Put every pair of another map into this one.

        @param other: An IterableMap, anything with an items() method, or an iterable of (key, value) pairs
        """
        if isinstance(other, IterableMap):
            pairs = list(other)
        elif hasattr(other, 'items'):
            pairs = list(other.items())
        else:
            pairs = other
        for key, value in pairs:
            self.put(key, value)

    def keys(self) -> List[K]:
        return [entry.key for entry in self]

    def values(self) -> List[V]:
        return [entry.value for entry in self]

    def items(self) -> List[Tuple[K, V]]:
        return [(entry.key, entry.value) for entry in self]

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        value = self.get(key)
        if value is ABSENT:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V):
        self.put(key, value)

    def __delitem__(self, key: K):
        if self.remove(key) is ABSENT:
            raise KeyError(key)

    def __eq__(self, other):
        if isinstance(other, IterableMap):
            other_items = other.items()
        elif isinstance(other, dict):
            other_items = list(other.items())
        else:
            return NotImplemented
        if len(other_items) != self.size():
            return False
        for key, value in other_items:
            if not self.contains_key(key) or self.get(key) != value:
                return False
        return True

    __hash__ = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {{{', '.join(f'{k!r}: {v!r}' for k, v in self.items())}}}>"
