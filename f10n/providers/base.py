"""
Translation provider contract.

Providers detect the language of a sample and translate ordered batches.
The public methods enforce the contract (timeouts, identity on matching
languages, position alignment, error wrapping); subclasses only implement
the raw calls.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Sequence

from f10n.core.errors import ProviderError
from f10n.core.languages import normalize_language_code, same_language

logger = logging.getLogger(__name__)


class TranslationProvider(ABC):
    """
    Base class for translation providers.
    
    Usage:
        provider = GoogleTranslationProvider(api_key="...")
        source = await provider.detect_language("Search")        # -> "en"
        texts = await provider.translate_batch(["Search"], source, "de")
    """
    
    name: str = "base"
    
    def __init__(self, timeout: float | None = 30.0):
        self.timeout = timeout
    
    @abstractmethod
    async def _detect(self, sample: str) -> str:
        """Return the language code of the sample."""
        pass
    
    @abstractmethod
    async def _translate(self, texts: list[str], source: str, target: str) -> list[str]:
        """Translate texts, returning results in input order."""
        pass
    
    async def detect_language(self, sample: str) -> str:
        """
        Detect the language of a sample string.
        
        Raises:
            ProviderError: the call failed or returned no language
        """
        try:
            code = await asyncio.wait_for(self._detect(sample), timeout=self.timeout)
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(f"{self.name}: language detection timed out") from e
        except Exception as e:
            raise ProviderError(f"{self.name}: language detection failed: {e}") from e
        
        if not code:
            raise ProviderError(f"{self.name}: could not detect language of {sample!r}")
        return normalize_language_code(code)
    
    async def translate_batch(
        self,
        texts: Sequence[str],
        source_language: str,
        target_language: str,
    ) -> list[str]:
        """
        Translate a batch, position-aligned with the input.
        
        Returns the input unchanged when source and target match.
        
        Raises:
            ProviderError: the call failed or the result length is wrong
        """
        texts = list(texts)
        if not texts:
            return []
        
        if same_language(source_language, target_language):
            return texts
        
        try:
            translated = await asyncio.wait_for(
                self._translate(texts, source_language, target_language),
                timeout=self.timeout,
            )
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"{self.name}: translation to {target_language} timed out",
                language=target_language,
            ) from e
        except Exception as e:
            raise ProviderError(
                f"{self.name}: translation to {target_language} failed: {e}",
                language=target_language,
            ) from e
        
        if len(translated) != len(texts):
            raise ProviderError(
                f"{self.name}: expected {len(texts)} translations, got {len(translated)}",
                language=target_language,
            )
        return translated
    
    async def aclose(self) -> None:
        """Release any client resources."""
        pass
