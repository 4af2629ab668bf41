"""
LLM-powered translation provider using DSPy.

Supports Gemini (primary), OpenAI, and Anthropic through litellm model
prefixes.
"""

from __future__ import annotations

import asyncio
import logging

import dspy

from f10n.config import Settings, get_settings
from f10n.core.languages import get_language_name
from f10n.providers.base import TranslationProvider

logger = logging.getLogger(__name__)


DEFAULT_CONTEXT = (
    "user interface strings from a mobile app localization file; "
    "keep placeholders such as {name} and ICU plural syntax unchanged"
)


# =============================================================================
# LM Client
# =============================================================================


def get_lm(settings: Settings | None = None) -> dspy.LM:
    """
    Get configured language model.
    
    Args:
        settings: Provider and model selection. Defaults to get_settings().
    
    Returns:
        Configured DSPy LM instance.
    """
    settings = settings or get_settings()
    provider = settings.llm_provider
    
    if provider == "gemini":
        api_key = settings.google_api_key or settings.gemini_api_key
        if not api_key:
            raise ValueError("F10N_GOOGLE_API_KEY or F10N_GEMINI_API_KEY not set")
        return dspy.LM(model=f"gemini/{settings.gemini_model}", api_key=api_key)
    
    elif provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("F10N_OPENAI_API_KEY not set")
        return dspy.LM(model=f"openai/{settings.openai_model}", api_key=settings.openai_api_key)
    
    elif provider == "anthropic":
        if not settings.anthropic_api_key:
            raise ValueError("F10N_ANTHROPIC_API_KEY not set")
        return dspy.LM(model=f"anthropic/{settings.anthropic_model}", api_key=settings.anthropic_api_key)
    
    else:
        raise ValueError(f"Unknown LLM provider: {provider}")


# =============================================================================
# DSPy Signatures
# =============================================================================


class TranslateStrings(dspy.Signature):
    """Translate a list of UI strings, returning one translation per input in the same order."""
    
    texts: list[str] = dspy.InputField(desc="Strings to translate")
    source_language: str = dspy.InputField(desc="Source language name")
    target_language: str = dspy.InputField(desc="Target language name")
    context: str = dspy.InputField(desc="Shared context for all strings")
    
    translated_texts: list[str] = dspy.OutputField(desc="Translated strings in the same order")


class TranslateString(dspy.Signature):
    """Translate one UI string while preserving meaning, tone, and placeholders."""
    
    text: str = dspy.InputField(desc="String to translate")
    source_language: str = dspy.InputField(desc="Source language name")
    target_language: str = dspy.InputField(desc="Target language name")
    context: str = dspy.InputField(desc="Context about the string")
    
    translated_text: str = dspy.OutputField(desc="Translated string")


class DetectLanguage(dspy.Signature):
    """Detect the language of text."""
    
    text: str = dspy.InputField(desc="Text to analyze")
    
    language_code: str = dspy.OutputField(desc="ISO 639-1 language code (e.g., 'en', 'es', 'fr')")


# =============================================================================
# Provider
# =============================================================================


class LLMTranslationProvider(TranslationProvider):
    """
    Translates through an LLM.
    
    DSPy calls are synchronous, so they run in the default executor.
    """
    
    name = "llm"
    
    def __init__(
        self,
        lm: dspy.LM | None = None,
        settings: Settings | None = None,
        context: str = DEFAULT_CONTEXT,
        timeout: float | None = 30.0,
    ):
        super().__init__(timeout=timeout)
        self._lm = lm
        self._settings = settings
        self.context = context
        
        # DSPy modules (lazy initialized)
        self._batch_module: dspy.Predict | None = None
        self._single_module: dspy.Predict | None = None
        self._detect_module: dspy.Predict | None = None
    
    @property
    def lm(self) -> dspy.LM:
        if self._lm is None:
            self._lm = get_lm(self._settings)
        return self._lm
    
    @property
    def batch_module(self) -> dspy.Predict:
        if self._batch_module is None:
            self._batch_module = dspy.Predict(TranslateStrings)
        return self._batch_module
    
    @property
    def single_module(self) -> dspy.Predict:
        if self._single_module is None:
            self._single_module = dspy.Predict(TranslateString)
        return self._single_module
    
    @property
    def detect_module(self) -> dspy.Predict:
        if self._detect_module is None:
            self._detect_module = dspy.Predict(DetectLanguage)
        return self._detect_module
    
    async def _run(self, module: dspy.Predict, **kwargs):
        """Run a DSPy module off the event loop with this provider's LM."""
        def call():
            with dspy.context(lm=self.lm):
                return module(**kwargs)
        
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, call)
    
    async def _detect(self, sample: str) -> str:
        result = await self._run(self.detect_module, text=sample[:500])  # Limit text length
        return result.language_code.strip()
    
    async def _translate(self, texts: list[str], source: str, target: str) -> list[str]:
        source_name = get_language_name(source)
        target_name = get_language_name(target)
        
        result = await self._run(
            self.batch_module,
            texts=texts,
            source_language=source_name,
            target_language=target_name,
            context=self.context,
        )
        translations = [t.strip() for t in result.translated_texts]
        
        # Misaligned batch, fall back to one call per string
        if len(translations) != len(texts):
            logger.warning(
                f"LLM returned {len(translations)} translations for {len(texts)} strings; "
                f"translating individually"
            )
            translations = []
            for text in texts:
                single = await self._run(
                    self.single_module,
                    text=text,
                    source_language=source_name,
                    target_language=target_name,
                    context=self.context,
                )
                translations.append(single.translated_text.strip())
        
        return translations
