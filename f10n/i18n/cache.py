"""
Translation cache.

Memoizes (language, source text) -> translated text on top of a
CacheStorage. One physical store serves every language because the
language is part of the key.
"""

from __future__ import annotations

import logging
from typing import Iterable

from f10n.storage.base import CacheStorage

logger = logging.getLogger(__name__)


class TranslationCache:
    """
    Write-once translation memo.

    An entry is never overwritten: storing a key that already exists is a
    silent no-op. An empty cached value reads as absent.
    """

    def __init__(self, storage: CacheStorage):
        self.storage = storage

    @staticmethod
    def make_key(language: str, source_text: str) -> str:
        return f"{language}_{source_text}"

    async def lookup(self, language: str, source_text: str) -> str | None:
        """Get the cached translation, or None."""
        cached = await self.storage.get(self.make_key(language, source_text))
        return cached or None

    async def store(self, language: str, source_text: str, translated_text: str) -> None:
        """Cache a translation unless one is already there."""
        if not translated_text:
            logger.warning(
                f"Not caching empty '{language}' translation for {source_text!r}"
            )
            return

        written = await self.storage.set_if_absent(
            self.make_key(language, source_text), translated_text
        )
        if not written:
            logger.debug(f"Already cached ({language}): {source_text!r}")

    async def partition(
        self,
        language: str,
        source_texts: Iterable[str],
    ) -> tuple[list[str], dict[str, str]]:
        """
        Split source texts into those still needing translation and those
        resolved from cache.

        Returns:
            (still_needed, resolved). still_needed is deduplicated and keeps
            first-appearance order; resolved maps source -> translation.
        """
        still_needed: list[str] = []
        resolved: dict[str, str] = {}
        seen: set[str] = set()

        for text in source_texts:
            if text in seen:
                continue
            seen.add(text)

            cached = await self.lookup(language, text)
            if cached is None:
                still_needed.append(text)
            else:
                resolved[text] = cached

        return still_needed, resolved

    async def flush(self) -> None:
        await self.storage.flush()

    async def close(self) -> None:
        await self.storage.close()
