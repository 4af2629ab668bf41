"""
Shared fixtures: an in-memory cache and a recording fake provider.
"""

from __future__ import annotations

import pytest

from f10n.core.errors import ProviderError
from f10n.i18n.cache import TranslationCache
from f10n.i18n.template import Template
from f10n.providers.base import TranslationProvider
from f10n.storage.local import InMemoryCacheStorage


class FakeProvider(TranslationProvider):
    """
    Translates from a fixed table and records every call.

    Unknown strings come back as "<lang>:<text>".
    """

    name = "fake"

    def __init__(
        self,
        table: dict[str, dict[str, str]] | None = None,
        detected: str = "en",
        fail_for: set[str] | None = None,
        failures_before_success: int = 0,
    ):
        super().__init__(timeout=5.0)
        self.table = table or {}
        self.detected = detected
        self.fail_for = fail_for or set()
        self.failures_before_success = failures_before_success
        self.detect_calls: list[str] = []
        self.translate_calls: list[tuple[list[str], str, str]] = []

    async def _detect(self, sample: str) -> str:
        self.detect_calls.append(sample)
        return self.detected

    async def _translate(self, texts: list[str], source: str, target: str) -> list[str]:
        self.translate_calls.append((list(texts), source, target))
        if target in self.fail_for:
            raise ProviderError(f"quota exceeded for {target}", language=target)
        if self.failures_before_success > 0:
            self.failures_before_success -= 1
            raise ConnectionError("connection reset")
        per_language = self.table.get(target, {})
        return [per_language.get(t, f"{target}:{t}") for t in texts]


@pytest.fixture
def storage():
    """Fresh in-memory store."""
    return InMemoryCacheStorage()


@pytest.fixture
def cache(storage):
    """Translation cache over the in-memory store."""
    return TranslationCache(storage)


@pytest.fixture
def provider():
    """Fake provider with Spanish translations for the greeting template."""
    return FakeProvider(table={"es": {"Hello": "Hola", "Goodbye": "Adiós"}})


@pytest.fixture
def greeting_data():
    """ARB-style template with one metadata entry."""
    return {
        "greeting": "Hello",
        "@greeting": {"description": "Shown on the home screen"},
        "farewell": "Goodbye",
    }


@pytest.fixture
def greeting_template(greeting_data):
    return Template.from_mapping(greeting_data)
