import logging

from typing import Iterator, List, Optional, Type

from hashmaps.array_map import ArrayMap, ArrayMapIterator
from hashmaps.base import IterableMap
from hashmaps.configuration import ChainedHashMapConfiguration, DEFAULT_LOAD_FACTOR_THRESHOLD, \
    DEFAULT_INITIAL_CHAIN_COUNT, DEFAULT_CHAIN_INITIAL_CAPACITY
from hashmaps.entry import ABSENT, Entry, K, V, key_hash
from hashmaps.primes import next_prime


class ChainedHashMap(IterableMap[K, V]):
    """
    Defines a hash table over a list of chains, where each chain is a small map holding every entry whose key hashes
    to that slot. Chains are created on first insert into their slot.

    Before every insert the table checks the load factor it would have with one more key; if that exceeds the
    threshold, the chain list is rebuilt with a prime length of at least twice the current one and every entry is
    rehashed. The load factor therefore never exceeds the threshold once a put returns.

    Not safe for concurrent use: size, the chain list swap during a resize and in-place value updates all race.
    Mutating the table while iterating it gives unspecified results.
    """
    _CHAIN_TYPE = ArrayMap  # type: Type[ArrayMap]

    def __init__(
            self,
            load_factor_threshold: float=DEFAULT_LOAD_FACTOR_THRESHOLD,
            initial_chain_count: int=DEFAULT_INITIAL_CHAIN_COUNT,
            chain_initial_capacity: int=DEFAULT_CHAIN_INITIAL_CAPACITY,
            logger=None
            ):
        """
        @param load_factor_threshold: The size to chain count ratio above which the table resizes. Must be > 0
        @param initial_chain_count: The initial length of the chain list. Must be > 0
        @param chain_initial_capacity: The initial capacity of each chain created by this table. Must be > 0
        """
        if load_factor_threshold <= 0:
            raise ValueError("argument 'load_factor_threshold' must be greater than zero")
        if initial_chain_count <= 0:
            raise ValueError("argument 'initial_chain_count' must be greater than zero")
        if chain_initial_capacity <= 0:
            raise ValueError("argument 'chain_initial_capacity' must be greater than zero")

        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._load_factor_threshold = load_factor_threshold
        self._chain_initial_capacity = chain_initial_capacity
        self._chains = [None] * initial_chain_count  # type: List[Optional[ArrayMap[K, V]]]
        self._size = 0
        self._resize_count = 0
        self._logger.debug(f"created with {initial_chain_count} chains, threshold {load_factor_threshold}")

    @classmethod
    def from_configuration(cls, configuration: ChainedHashMapConfiguration, logger=None) -> 'ChainedHashMap':
        """Construct an empty table from a validated configuration object"""
        return cls(
            configuration.load_factor_threshold,
            configuration.initial_chain_count,
            configuration.chain_initial_capacity,
            logger=logger
        )

    @property
    def configuration(self) -> ChainedHashMapConfiguration:
        """The configuration reproducing this table's current chain count and policy"""
        return ChainedHashMapConfiguration(
            load_factor_threshold=self._load_factor_threshold,
            initial_chain_count=len(self._chains),
            chain_initial_capacity=self._chain_initial_capacity
        )

    @property
    def load_factor_threshold(self) -> float:
        return self._load_factor_threshold

    @property
    def chain_initial_capacity(self) -> int:
        return self._chain_initial_capacity

    @property
    def chain_count(self) -> int:
        """The current length of the chain list"""
        return len(self._chains)

    @property
    def load_factor(self) -> float:
        """The current ratio of stored mappings to chains"""
        return self._size / len(self._chains)

    @property
    def resize_count(self) -> int:
        """How many times this table has rebuilt its chain list"""
        return self._resize_count

    def _create_chain(self, initial_capacity: int) -> ArrayMap:
        """Create an empty chain, override to change the chain type"""
        return self._CHAIN_TYPE(initial_capacity)

    @staticmethod
    def _slot(key: K, chain_count: int) -> int:
        # python's % already floors, negative hashes land in [0, chain_count)
        return key_hash(key) % chain_count

    def _chain_for(self, key: K) -> Optional[ArrayMap]:
        return self._chains[self._slot(key, len(self._chains))]

    def get(self, key: K):
        chain = self._chain_for(key)
        if chain is None:
            return ABSENT
        return chain.get(key)

    def put(self, key: K, value: V):
        # a threshold far below 1 / chain_count may need more than one doubling
        while (self._size + 1) / len(self._chains) > self._load_factor_threshold:
            self._resize()

        slot = self._slot(key, len(self._chains))
        chain = self._chains[slot]
        if chain is None:
            chain = self._chains[slot] = self._create_chain(self._chain_initial_capacity)

        previous = chain.put(key, value)
        if previous is ABSENT:
            self._size += 1
        return previous

    def remove(self, key: K):
        chain = self._chain_for(key)
        if chain is None:
            return ABSENT
        removed = chain.remove(key)
        if removed is not ABSENT:
            self._size -= 1
        return removed

    def clear(self):
        self._chains = [None] * len(self._chains)
        self._size = 0

    def contains_key(self, key: K) -> bool:
        chain = self._chain_for(key)
        if chain is None:
            return False
        return chain.contains_key(key)

    def size(self) -> int:
        return self._size

    def _resize(self):
        """Rebuild the chain list at the next prime of at least double the length and rehash every entry"""
        new_chain_count = next_prime(len(self._chains) * 2)
        new_chains = [None] * new_chain_count  # type: List[Optional[ArrayMap[K, V]]]

        for chain in self._chains:
            if chain is None:
                continue
            for entry in chain:
                slot = self._slot(entry.key, new_chain_count)
                if new_chains[slot] is None:
                    new_chains[slot] = self._create_chain(self._chain_initial_capacity)
                new_chains[slot].put(entry.key, entry.value)

        self._logger.debug(f"resized from {len(self._chains)} to {new_chain_count} chains at size {self._size}")
        self._chains = new_chains
        self._resize_count += 1

    def __iter__(self) -> 'ChainedHashMapIterator[K, V]':
        return ChainedHashMapIterator(self._chains)


class ChainedHashMapIterator(Iterator[Entry[K, V]]):
    """
    Single pass cursor over every entry of a ChainedHashMap. Chains are visited in list order and each chain in its
    own iteration order; missing and empty chains are skipped.
    """

    def __init__(self, chains: List[Optional[ArrayMap[K, V]]]):
        self._chains = chains
        self._chain_index = 0
        self._inner = self._next_chain_iterator()  # type: Optional[ArrayMapIterator[K, V]]

    def _next_chain_iterator(self) -> Optional[ArrayMapIterator]:
        """Advance to the next non-empty chain at or after the current index"""
        while self._chain_index < len(self._chains):
            chain = self._chains[self._chain_index]
            if chain is not None and not chain.is_empty():
                return iter(chain)
            self._chain_index += 1
        return None

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        while self._inner is not None:
            if self._inner.has_next():
                return True
            self._chain_index += 1
            self._inner = self._next_chain_iterator()
        return False

    def __next__(self) -> Entry[K, V]:
        if not self.has_next():
            raise StopIteration
        return next(self._inner)
