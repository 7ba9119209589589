from lfucache._exceptions import InvalidCapacity as InvalidCapacity, LFUCacheError as LFUCacheError
from lfucache._lfu_cache import LFUCache as LFUCache
from lfucache._options import CacheOptions as CacheOptions
from lfucache._stats import CacheStats as CacheStats

__all__ = (
    # Cache
    "LFUCache",
    # Configuration
    "CacheOptions",
    "CacheStats",
    # Exceptions
    "LFUCacheError",
    "InvalidCapacity",
)

__version__ = "0.1.0"
