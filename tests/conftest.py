from typing import Any, Callable

import pytest

from lfucache import LFUCache


def _check_invariants(cache: LFUCache[Any, Any]) -> None:
    """Assert that the key index and the frequency buckets agree with each other."""

    assert len(cache) <= cache.capacity

    seen = set()
    for freq, bucket in cache._buckets.items():
        assert bucket, f"empty bucket {freq} kept in the frequency index"
        keys = list(bucket)
        assert len(keys) == len(bucket)
        for key in keys:
            assert key not in seen, f"key {key!r} found in more than one bucket"
            seen.add(key)
            assert cache._entries[key].freq == freq

    assert seen == set(cache._entries)

    for key, entry in cache._entries.items():
        assert cache._arena.key(entry.handle) == key

    assert len(cache._arena) == len(cache)

    if cache._entries:
        assert cache.min_freq == min(cache._buckets)


@pytest.fixture()
def check_invariants() -> Callable[[LFUCache[Any, Any]], None]:
    return _check_invariants
