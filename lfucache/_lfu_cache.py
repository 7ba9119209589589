from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, TypeVar

from typing_extensions import Self

from lfucache._arena import KeyList, NodeArena
from lfucache._exceptions import InvalidCapacity, LFUCacheError
from lfucache._options import CacheOptions
from lfucache._stats import CacheStats

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["LFUCache"]

logger = logging.getLogger("lfucache")


@dataclass
class _Entry(Generic[V]):
    value: V
    freq: int
    handle: int  # node of the key inside the bucket for `freq`


class LFUCache(Generic[K, V]):
    """
    Fixed-capacity cache evicting the least frequently used entry.

    Entries are grouped into frequency buckets, each one a recency-ordered
    list of keys. When the cache is full, the least recently used key of the
    lowest-frequency bucket is evicted.

    `get` never fails: a missing key is inserted with a value produced by
    `default_factory`, which may itself evict an entry. Use `peek` for a
    lookup that leaves the cache untouched.

    Example:
        ```
        cache: LFUCache[str, int] = LFUCache(2, default_factory=int)
        cache.put("a", 1)
        cache.get("a")  # 1
        cache.get("b")  # 0, and "b" is now cached
        ```
    """

    def __init__(self, capacity: int, default_factory: Callable[[], V]) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"Capacity must be an integer, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacity()
        if not callable(default_factory):
            raise TypeError("default_factory must be callable")

        self._capacity = capacity
        self.default_factory = default_factory
        self.min_freq = 0  # smallest frequency with a non-empty bucket
        self.stats = CacheStats()

        self._arena: NodeArena[K] = NodeArena()
        self._entries: Dict[K, _Entry[V]] = {}
        self._buckets: Dict[int, KeyList[K]] = {}

    @classmethod
    def from_options(cls, options: CacheOptions) -> Self:
        return cls(options.capacity, options.default_factory)

    @property
    def capacity(self) -> int:
        return self._capacity

    def contains(self, key: K) -> bool:
        return key in self._entries

    def size(self) -> int:
        return len(self._entries)

    def empty(self) -> bool:
        return not self._entries

    def get(self, key: K) -> V:
        entry = self._entries.get(key)
        if entry is not None:
            self.stats.hits += 1
            self._touch(key)
            return entry.value

        self.stats.misses += 1
        value = self.default_factory()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Cache miss for key {key!r}, storing default value {value!r}")
        self.put(key, value)
        return value

    def put(self, key: K, value: V) -> None:
        entry = self._entries.get(key)
        if entry is not None:
            self._touch(key)
            entry.value = value
            return

        if len(self._entries) >= self._capacity:
            self._evict()

        # A fresh key always has the lowest possible frequency
        self.min_freq = 1
        handle = self._bucket(1).push_front(key)
        self._entries[key] = _Entry(value=value, freq=1, handle=handle)

    def peek(self, key: K) -> V:
        """
        Return the value cached for `key` without counting it as a use.

        Raises:
            KeyError: If `key` is not cached.
        """
        if key not in self._entries:
            raise KeyError(f"Key {key!r} not found")
        return self._entries[key].value

    def frequency(self, key: K) -> int:
        if key not in self._entries:
            raise KeyError(f"Key {key!r} not found")
        return self._entries[key].freq

    def _bucket(self, freq: int) -> KeyList[K]:
        bucket = self._buckets.get(freq)
        if bucket is None:
            bucket = self._buckets[freq] = KeyList(self._arena)
        return bucket

    def _touch(self, key: K) -> None:
        """
        Bump the frequency of a cached key by one and make it the most
        recently used key of its new bucket.
        """
        entry = self._entries[key]
        freq = entry.freq

        bucket = self._buckets[freq]
        bucket.remove(entry.handle)
        if not bucket:
            del self._buckets[freq]
            if freq == self.min_freq:
                self.min_freq += 1

        entry.freq = freq + 1
        entry.handle = self._bucket(entry.freq).push_front(key)

    def _evict(self) -> None:
        # `min_freq` is left as is, the insertion that follows resets it
        bucket = self._buckets.get(self.min_freq)
        if not bucket:
            raise LFUCacheError(f"No entry to evict at frequency {self.min_freq}")

        key = bucket.pop_back()
        if not bucket:
            del self._buckets[self.min_freq]
        entry = self._entries.pop(key)
        self.stats.evictions += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evicted key {key!r} with frequency {entry.freq}")

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._entries)})"
