"""
Application configuration.

Loads settings from environment variables (prefix F10N_) and an optional
.env file, with defaults matching the command-line tool.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from f10n.core.languages import DEFAULT_TARGET_LANGUAGES, parse_language_list


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    # ==========================================================================
    # Files
    # ==========================================================================
    
    template_path: str = "app_en.arb"
    output_dir: str = "./l10n"
    file_pattern: str = "app_{lang}.arb"
    metadata_prefix: str = "@"
    
    # ==========================================================================
    # Translation cache
    # ==========================================================================
    
    cache_backend: str = "file"  # file | memory
    cache_path: str = "translations_cache.json"
    
    # ==========================================================================
    # Languages
    # ==========================================================================
    
    languages: str = " ".join(DEFAULT_TARGET_LANGUAGES)
    source_language: str = ""  # Empty = detect from the first template string
    
    # ==========================================================================
    # Translation provider
    # ==========================================================================
    
    provider: str = "llm"  # llm | google
    provider_timeout: float = 30.0
    provider_retries: int = 1  # Total attempts per provider call
    
    # LLM provider (accepts either GOOGLE_API_KEY or GEMINI_API_KEY)
    llm_provider: str = "gemini"
    google_api_key: str = ""
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    openai_api_key: str = ""
    openai_model: str = "gpt-4-turbo"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-opus-20240229"
    
    # Google Cloud Translation (v2 REST)
    google_translate_api_key: str = ""
    google_translate_url: str = "https://translation.googleapis.com/language/translate/v2"
    
    # ==========================================================================
    # Run behavior
    # ==========================================================================
    
    max_concurrency: int = 1
    fail_fast: bool = True
    log_level: str = "INFO"
    
    # ==========================================================================
    # Helpers
    # ==========================================================================
    
    @property
    def languages_list(self) -> list[str]:
        return parse_language_list(self.languages)
    
    class Config:
        env_prefix = "F10N_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
