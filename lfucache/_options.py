from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

__all__ = ["CacheOptions"]


def _no_default() -> None:
    return None


@dataclass(frozen=True)
class CacheOptions:
    """
    Configuration options for an `LFUCache`.

    Attributes:
    ----------
    capacity : int
        Maximum number of entries the cache holds. Once reached, inserting a
        new key evicts the least frequently used entry, and among equally
        frequent entries the least recently used one.

        Must be a positive integer. Capacity is fixed for the lifetime of
        the cache.

        Default: 128

        Examples:
        --------
        >>> options = CacheOptions(capacity=1024)

    default_factory : Callable[[], Any]
        Zero-argument callable producing the value stored when `get` is
        called with a key that is not cached, like the factory of
        `collections.defaultdict`.

        Default: a factory returning None

        Examples:
        --------
        >>> # Missing keys materialize as 0
        >>> options = CacheOptions(capacity=3, default_factory=int)

        >>> # Missing keys materialize as fresh lists
        >>> options = CacheOptions(default_factory=list)
    """

    capacity: int = 128
    """Maximum number of cached entries."""

    default_factory: Callable[[], Any] = _no_default
    """Factory for values of keys missing on `get`."""
