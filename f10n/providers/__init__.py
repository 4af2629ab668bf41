"""
Translation providers.

    provider = create_provider(get_settings())
    source = await provider.detect_language("Search")
    texts = await provider.translate_batch(["Search"], source, "de")
"""

from __future__ import annotations

from f10n.config import Settings
from f10n.core.errors import ConfigError
from f10n.providers.base import TranslationProvider


def create_provider(settings: Settings) -> TranslationProvider:
    """
    Create the provider selected by settings.provider.
    
    Raises:
        ConfigError: unknown provider or missing credentials
    """
    try:
        return _create_provider(settings)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _create_provider(settings: Settings) -> TranslationProvider:
    if settings.provider == "google":
        from f10n.providers.google import GoogleTranslationProvider
        return GoogleTranslationProvider(
            api_key=settings.google_translate_api_key,
            base_url=settings.google_translate_url,
            timeout=settings.provider_timeout,
        )
    
    elif settings.provider == "llm":
        from f10n.providers.llm import LLMTranslationProvider
        return LLMTranslationProvider(settings=settings, timeout=settings.provider_timeout)
    
    else:
        raise ValueError(f"Unknown translation provider: {settings.provider}")


__all__ = [
    "TranslationProvider",
    "create_provider",
]
