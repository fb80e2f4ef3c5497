from typing import Any, Generic, Hashable, Iterator, TypeVar


K = TypeVar('K')
V = TypeVar('V')


class _Absent:
    """Marker for a missing mapping. Never equal to a stored value, including None"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"

    def __reduce__(self):
        return _Absent, ()


ABSENT = _Absent()


def key_hash(key: Hashable) -> int:
    """Hash code used for slot selection, a None key always hashes to 0"""
    return 0 if key is None else hash(key)


class Entry(Generic[K, V]):
    """Defines a stored key/value pair. The key is fixed once the entry exists, only the value may change"""
    __slots__ = ('_key', 'value')

    def __init__(self, key: K, value: V):
        self._key = key
        self.value = value

    @property
    def key(self) -> K:
        """The key of this entry"""
        return self._key

    def __iter__(self) -> Iterator[Any]:
        yield self._key
        yield self.value

    def __eq__(self, other):
        if isinstance(other, Entry):
            return self._key == other.key and self.value == other.value
        if isinstance(other, tuple) and len(other) == 2:
            return self._key == other[0] and self.value == other[1]
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._key!r}: {self.value!r}>"
