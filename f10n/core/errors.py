"""
Error types.

Every failure f10n raises on purpose derives from F10nError, so the CLI
can report it and exit non-zero without a traceback.
"""

from __future__ import annotations


class F10nError(Exception):
    """Base error for f10n."""


class StorageError(F10nError):
    """The translation cache store could not be read or written."""


class ProviderError(F10nError):
    """Language detection or batch translation failed."""

    def __init__(self, message: str, language: str | None = None):
        super().__init__(message)
        self.language = language


class ConsistencyError(F10nError):
    """A translatable string has no translation at reconstruction time."""

    def __init__(self, language: str, key: str, text: str):
        super().__init__(
            f"No '{language}' translation for key '{key}' ({text!r})"
        )
        self.language = language
        self.key = key
        self.text = text


class TemplateError(F10nError):
    """The template file is missing or malformed."""


class ConfigError(F10nError):
    """The project configuration file is invalid."""
