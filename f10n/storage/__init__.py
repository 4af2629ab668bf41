"""
Storage backends for the translation cache.
"""

from f10n.storage.base import CacheStorage
from f10n.storage.local import (
    InMemoryCacheStorage,
    JsonFileCacheStorage,
    create_cache_storage,
)

__all__ = [
    "CacheStorage",
    "InMemoryCacheStorage",
    "JsonFileCacheStorage",
    "create_cache_storage",
]
