"""
Local storage implementations.

JsonFileCacheStorage keeps the whole cache in memory and writes it back
to a single JSON document on flush. InMemoryCacheStorage is for tests and
dry runs.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from f10n.core.errors import StorageError
from f10n.storage.base import CacheStorage

logger = logging.getLogger(__name__)


# =============================================================================
# In-Memory Cache Storage
# =============================================================================


class InMemoryCacheStorage(CacheStorage):
    """In-memory store. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set_if_absent(self, key: str, value: str) -> bool:
        async with self._lock:
            if self._data.get(key):
                return False
            self._data[key] = value
            return True

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def flush(self) -> None:
        pass

    async def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._data)


# =============================================================================
# JSON File Cache Storage
# =============================================================================


class JsonFileCacheStorage(CacheStorage):
    """
    Cache persisted as one JSON object on disk.

    The file is read once when the store is opened. Writes go to memory and
    are written back atomically (temp file + rename) on flush and close.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._data: dict[str, str] = self._load()
        self._dirty = False
        self._lock = asyncio.Lock()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            logger.info(f"Creating new translation cache at {self.path}")
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read cache {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Cache {self.path} is not a JSON object")

        entries = {k: v for k, v in data.items() if isinstance(v, str)}
        if len(entries) != len(data):
            logger.warning(
                f"Ignoring {len(data) - len(entries)} non-string entries in {self.path}"
            )
        logger.debug(f"Loaded {len(entries)} cached translations from {self.path}")
        return entries

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set_if_absent(self, key: str, value: str) -> bool:
        async with self._lock:
            if self._data.get(key):
                return False
            self._data[key] = value
            self._dirty = True
            return True

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def flush(self) -> None:
        async with self._lock:
            if not self._dirty:
                return
            self._write()
            self._dirty = False

    def _write(self) -> None:
        content = json.dumps(self._data, indent=2, ensure_ascii=False)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                    f.write("\n")
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write cache {self.path}: {e}") from e

        logger.debug(f"Wrote {len(self._data)} cached translations to {self.path}")

    async def close(self) -> None:
        await self.flush()

    def __len__(self) -> int:
        return len(self._data)


# =============================================================================
# Factory
# =============================================================================


def create_cache_storage(backend: str = "file", path: str | Path = "translations_cache.json") -> CacheStorage:
    """Open a cache store for the configured backend."""
    if backend == "file":
        return JsonFileCacheStorage(path)
    elif backend == "memory":
        return InMemoryCacheStorage()
    else:
        raise ValueError(f"Unknown cache backend: {backend}")
