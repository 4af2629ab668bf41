"""
f10n - translate a Flutter ARB template into any number of languages.

Translations are memoized in a durable cache, so each (language, string)
pair is sent to the translation provider only once.
"""

__version__ = "0.2.0"
