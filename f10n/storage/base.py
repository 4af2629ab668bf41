"""
Storage abstraction for the translation cache.

The cache only needs a flat key-value store with string keys and string
values. Backends are swappable (JSON file, in-memory) without changing
the cache or the orchestrator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CacheStorage(ABC):
    """
    Durable key-value store.

    Opened once per run and closed at the end of it. Implementations must
    keep `set_if_absent` atomic with respect to concurrent callers on the
    same event loop.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get a value, or None if the key is absent."""
        pass

    @abstractmethod
    async def set_if_absent(self, key: str, value: str) -> bool:
        """Set a value unless the key holds a non-empty value. Returns True if written."""
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Persist pending writes."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Flush and release the store."""
        pass

    async def __aenter__(self) -> CacheStorage:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
