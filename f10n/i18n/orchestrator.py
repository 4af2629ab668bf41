"""
Translation orchestration.

For every target language: partition the template strings against the
cache, translate the remainder in one provider batch, merge, and write the
new entries back to the cache.

Usage:
    orchestrator = TranslationOrchestrator(cache, provider)
    run = await orchestrator.translate_all(["es", "fr"], template.source_strings())
    run.translations["es"]["Hello"]  # -> "Hola"
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Sequence

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from f10n.core.errors import ProviderError
from f10n.i18n.cache import TranslationCache
from f10n.core.languages import normalize_language_code, same_language
from f10n.providers.base import TranslationProvider

logger = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================


@dataclass
class LanguageResult:
    """Outcome for one target language."""

    language: str
    translations: dict[str, str] = field(default_factory=dict)
    cached: int = 0
    translated: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class TranslationRun:
    """Outcome of a whole run, keyed by language in request order."""

    source_language: str | None = None
    results: dict[str, LanguageResult] = field(default_factory=dict)

    @property
    def translations(self) -> dict[str, dict[str, str]]:
        """Per-language translations for languages that succeeded."""
        return {
            lang: result.translations
            for lang, result in self.results.items()
            if result.ok
        }

    @property
    def failed(self) -> dict[str, str]:
        return {
            lang: result.error
            for lang, result in self.results.items()
            if not result.ok
        }

    @property
    def stats(self) -> dict[str, Any]:
        return {
            "languages": len(self.results),
            "cached": sum(r.cached for r in self.results.values()),
            "translated": sum(r.translated for r in self.results.values()),
            "errors": len(self.failed),
        }


@dataclass
class LanguagePlan:
    """What a run would do for one language."""

    language: str
    cached: int
    needed: list[str]


# =============================================================================
# Orchestrator
# =============================================================================


class TranslationOrchestrator:
    """
    Drives cache lookups and provider calls for a set of languages.

    Args:
        cache: Translation cache (opened by the caller)
        provider: Translation provider
        source_language: Source language; detected from the first string when None
        max_concurrency: Languages processed at once (1 = one after another)
        fail_fast: Abort the run on the first provider failure
        retries: Total attempts per provider call
        retry_wait: tenacity wait strategy between attempts
    """

    def __init__(
        self,
        cache: TranslationCache,
        provider: TranslationProvider,
        source_language: str | None = None,
        max_concurrency: int = 1,
        fail_fast: bool = True,
        retries: int = 1,
        retry_wait: Any = None,
    ):
        self.cache = cache
        self.provider = provider
        self.source_language = normalize_language_code(source_language) if source_language else None
        self.max_concurrency = max(1, max_concurrency)
        self.fail_fast = fail_fast
        self.retries = max(1, retries)
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=10)

        self._detect_lock = asyncio.Lock()

    # -------------------------------------------------------------------------
    # Provider calls
    # -------------------------------------------------------------------------

    async def _call_provider(self, call: Callable[[], Awaitable[Any]]) -> Any:
        """Run a provider call under the retry policy."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(ProviderError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                result = await call()
        return result

    async def resolve_source_language(self, sample: str) -> str:
        """
        The run's source language.

        Detected once per run from the sample unless configured.
        """
        async with self._detect_lock:
            if self.source_language is None:
                self.source_language = await self._call_provider(
                    lambda: self.provider.detect_language(sample)
                )
                logger.info(f"Detected source language: {self.source_language}")
        return self.source_language

    # -------------------------------------------------------------------------
    # Per-language work
    # -------------------------------------------------------------------------

    async def translate_language(
        self,
        language: str,
        source_strings: Sequence[str],
    ) -> LanguageResult:
        """
        Resolve every source string for one language.

        Raises:
            ProviderError: detection or translation failed
        """
        still_needed, resolved = await self.cache.partition(language, source_strings)
        result = LanguageResult(language=language, cached=len(resolved))

        if not still_needed:
            logger.info(f"{language}: all {len(resolved)} strings cached")
            result.translations = resolved
            return result

        source = await self.resolve_source_language(source_strings[0])

        if same_language(source, language):
            logger.info(f"{language}: same as source language, copying {len(still_needed)} strings")
            fresh = list(still_needed)
        else:
            logger.info(
                f"{language}: {len(resolved)} cached, translating {len(still_needed)} from {source}"
            )
            fresh = await self._call_provider(
                lambda: self.provider.translate_batch(still_needed, source, language)
            )

        translations = dict(resolved)
        for text, translated in zip(still_needed, fresh):
            translations[text] = translated
            await self.cache.store(language, text, translated)
        await self.cache.flush()

        result.translations = translations
        result.translated = len(still_needed)
        return result

    async def translate_all(
        self,
        languages: Sequence[str],
        source_strings: Sequence[str],
    ) -> TranslationRun:
        """
        Translate source strings into every language.

        Raises:
            ProviderError: a language failed and fail_fast is set
        """
        languages = list(dict.fromkeys(normalize_language_code(lang) for lang in languages))
        run = TranslationRun(source_language=self.source_language)

        if not source_strings:
            for lang in languages:
                run.results[lang] = LanguageResult(language=lang)
            return run

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def process(lang: str) -> LanguageResult:
            async with semaphore:
                return await self.translate_language(lang, source_strings)

        if self.max_concurrency == 1:
            outcomes: list[LanguageResult | BaseException] = []
            for lang in languages:
                try:
                    outcomes.append(await process(lang))
                except ProviderError as e:
                    if self.fail_fast:
                        raise
                    outcomes.append(e)
        else:
            outcomes = await asyncio.gather(
                *(process(lang) for lang in languages),
                return_exceptions=True,
            )

        for lang, outcome in zip(languages, outcomes):
            if isinstance(outcome, ProviderError):
                if self.fail_fast:
                    raise outcome
                logger.error(f"{lang}: {outcome}")
                run.results[lang] = LanguageResult(language=lang, error=str(outcome))
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                run.results[lang] = outcome

        run.source_language = self.source_language
        return run

    async def plan(
        self,
        languages: Sequence[str],
        source_strings: Sequence[str],
    ) -> list[LanguagePlan]:
        """Report what translate_all would send to the provider, without calling it."""
        plans: list[LanguagePlan] = []
        for lang in languages:
            lang = normalize_language_code(lang)
            still_needed, resolved = await self.cache.partition(lang, source_strings)
            plans.append(LanguagePlan(language=lang, cached=len(resolved), needed=still_needed))
        return plans
