from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CacheStats"]


@dataclass
class CacheStats:
    """
    Counters collected by an `LFUCache`.

    Only `get` counts as a lookup: a hit when the key was present, a miss
    when a default value had to be materialized. Updating a key with `put`
    is not counted.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        if not self.lookups:
            return 0.0
        return self.hits / self.lookups

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.evictions = 0
