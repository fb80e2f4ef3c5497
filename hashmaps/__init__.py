from .entry import ABSENT, Entry, key_hash
from .base import IterableMap
from .array_map import ArrayMap, ArrayMapIterator
from .chained import ChainedHashMap, ChainedHashMapIterator
from .configuration import ArrayMapConfiguration, ChainedHashMapConfiguration
from .primes import is_prime, next_prime
