import random
from typing import Dict

import pytest

from lfucache import LFUCache


class ReferenceLFU:
    """Linear-time LFU used as an oracle for the real cache."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.values: Dict[int, int] = {}
        self.freqs: Dict[int, int] = {}
        self.last_used: Dict[int, int] = {}
        self.clock = 0

    def _use(self, key: int) -> None:
        self.clock += 1
        self.freqs[key] = self.freqs.get(key, 0) + 1
        self.last_used[key] = self.clock

    def put(self, key: int, value: int) -> None:
        if key not in self.values and len(self.values) == self.capacity:
            victim = min(self.values, key=lambda k: (self.freqs[k], self.last_used[k]))
            for mapping in (self.values, self.freqs, self.last_used):
                del mapping[victim]
        self.values[key] = value
        self._use(key)

    def get(self, key: int) -> int:
        if key not in self.values:
            self.put(key, 0)
            return 0
        self._use(key)
        return self.values[key]


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("capacity", [1, 2, 5, 16])
def test_lfu_cache_matches_reference(seed: int, capacity: int, check_invariants):
    rng = random.Random(seed)
    cache: LFUCache[int, int] = LFUCache(capacity, int)
    reference = ReferenceLFU(capacity)
    inserted = set()

    for _ in range(300):
        key = rng.randrange(capacity * 3)
        if rng.random() < 0.5:
            value = rng.randrange(1000)
            cache.put(key, value)
            reference.put(key, value)
        else:
            assert cache.get(key) == reference.get(key)
        inserted.add(key)

        assert len(cache) <= capacity
        assert len(cache) <= len(inserted)
        assert set(k for k in range(capacity * 3) if k in cache) == set(reference.values)
        for cached_key, freq in reference.freqs.items():
            assert cache.frequency(cached_key) == freq
        check_invariants(cache)
