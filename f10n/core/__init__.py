"""
Core primitives shared across f10n.
"""

from f10n.core.errors import (
    F10nError,
    StorageError,
    ProviderError,
    ConsistencyError,
    TemplateError,
    ConfigError,
)

__all__ = [
    "F10nError",
    "StorageError",
    "ProviderError",
    "ConsistencyError",
    "TemplateError",
    "ConfigError",
]
