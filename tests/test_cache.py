"""
Tests for the translation cache and its storage backends.

The cache is write-once, keyed by language and source text, and treats
empty values as missing.
"""

import json

import pytest

from f10n.core.errors import StorageError
from f10n.i18n.cache import TranslationCache
from f10n.storage.local import (
    InMemoryCacheStorage,
    JsonFileCacheStorage,
    create_cache_storage,
)


# =============================================================================
# Lookup / Store
# =============================================================================


class TestLookupStore:
    @pytest.mark.asyncio
    async def test_store_then_lookup(self, cache):
        await cache.store("es", "hello", "hola")
        
        assert await cache.lookup("es", "hello") == "hola"
        assert await cache.lookup("fr", "hello") is None

    @pytest.mark.asyncio
    async def test_languages_share_one_store(self, cache, storage):
        await cache.store("en", "hello", "hello")
        await cache.store("es", "hello", "hola")
        
        assert await storage.get("en_hello") == "hello"
        assert await storage.get("es_hello") == "hola"
        assert len(storage) == 2

    @pytest.mark.asyncio
    async def test_first_write_wins(self, cache):
        await cache.store("de", "Search", "Suche")
        await cache.store("de", "Search", "Suchen")  # Silently ignored
        
        assert await cache.lookup("de", "Search") == "Suche"

    @pytest.mark.asyncio
    async def test_empty_value_reads_as_absent(self):
        cache = TranslationCache(InMemoryCacheStorage({"es_hello": ""}))
        
        assert await cache.lookup("es", "hello") is None

    @pytest.mark.asyncio
    async def test_empty_value_can_be_overwritten(self):
        storage = InMemoryCacheStorage({"es_hello": ""})
        cache = TranslationCache(storage)
        
        await cache.store("es", "hello", "hola")
        
        assert await cache.lookup("es", "hello") == "hola"

    @pytest.mark.asyncio
    async def test_empty_translation_not_stored(self, cache, storage):
        await cache.store("es", "hello", "")
        
        assert not await storage.exists("es_hello")


# =============================================================================
# Partition
# =============================================================================


class TestPartition:
    @pytest.mark.asyncio
    async def test_empty_cache_needs_everything(self, cache):
        still_needed, resolved = await cache.partition("fr", ["hello"])
        
        assert still_needed == ["hello"]
        assert resolved == {}

    @pytest.mark.asyncio
    async def test_split_is_complete_and_disjoint(self, cache):
        await cache.store("es", "Hello", "Hola")
        await cache.store("es", "Save", "Guardar")
        texts = ["Hello", "Cancel", "Save", "Delete"]
        
        still_needed, resolved = await cache.partition("es", texts)
        
        assert set(still_needed) | set(resolved) == set(texts)
        assert not set(still_needed) & set(resolved)
        assert resolved == {"Hello": "Hola", "Save": "Guardar"}

    @pytest.mark.asyncio
    async def test_keeps_first_appearance_order_without_duplicates(self, cache):
        await cache.store("es", "b", "B")
        
        still_needed, resolved = await cache.partition("es", ["c", "a", "b", "c", "a", "b"])
        
        assert still_needed == ["c", "a"]
        assert list(resolved) == ["b"]

    @pytest.mark.asyncio
    async def test_other_language_entries_do_not_resolve(self, cache):
        await cache.store("es", "Hello", "Hola")
        
        still_needed, _ = await cache.partition("it", ["Hello"])
        
        assert still_needed == ["Hello"]


# =============================================================================
# JSON File Storage
# =============================================================================


class TestJsonFileStorage:
    @pytest.mark.asyncio
    async def test_survives_reopen(self, tmp_path):
        path = tmp_path / "cache.json"
        
        first = TranslationCache(JsonFileCacheStorage(path))
        await first.store("es", "Hello", "Hola")
        await first.close()
        
        second = TranslationCache(JsonFileCacheStorage(path))
        assert await second.lookup("es", "Hello") == "Hola"

    @pytest.mark.asyncio
    async def test_flush_writes_json_object(self, tmp_path):
        path = tmp_path / "nested" / "cache.json"
        storage = JsonFileCacheStorage(path)
        
        await storage.set_if_absent("es_Goodbye", "Adiós")
        await storage.flush()
        
        assert json.loads(path.read_text(encoding="utf-8")) == {"es_Goodbye": "Adiós"}

    @pytest.mark.asyncio
    async def test_nothing_written_without_changes(self, tmp_path):
        path = tmp_path / "cache.json"
        storage = JsonFileCacheStorage(path)
        
        await storage.close()
        
        assert not path.exists()

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("{not json", encoding="utf-8")
        
        with pytest.raises(StorageError):
            JsonFileCacheStorage(path)

    def test_non_object_raises_storage_error(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("[1, 2]", encoding="utf-8")
        
        with pytest.raises(StorageError):
            JsonFileCacheStorage(path)

    @pytest.mark.asyncio
    async def test_non_string_values_read_as_absent(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text('{"es_Hello": null, "es_Count": 5, "es_Save": "Guardar"}', encoding="utf-8")
        
        cache = TranslationCache(JsonFileCacheStorage(path))
        
        assert await cache.lookup("es", "Hello") is None
        assert await cache.lookup("es", "Count") is None
        assert await cache.lookup("es", "Save") == "Guardar"

    @pytest.mark.asyncio
    async def test_empty_value_replaced_on_disk(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text('{"es_Hello": ""}', encoding="utf-8")
        
        storage = JsonFileCacheStorage(path)
        assert await storage.set_if_absent("es_Hello", "Hola")
        await storage.close()
        
        assert json.loads(path.read_text(encoding="utf-8")) == {"es_Hello": "Hola"}

    def test_factory(self, tmp_path):
        assert isinstance(create_cache_storage("memory"), InMemoryCacheStorage)
        assert isinstance(create_cache_storage("file", tmp_path / "c.json"), JsonFileCacheStorage)
        with pytest.raises(ValueError):
            create_cache_storage("redis")
