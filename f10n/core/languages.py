"""
Language codes and names.

ARB files name locales with an underscore (`app_pt_BR.arb`); translation
APIs expect BCP-47 tags (`pt-BR`). Codes are kept in ARB form internally
and converted at the provider boundary.
"""

from __future__ import annotations


# Targets used when none are configured
DEFAULT_TARGET_LANGUAGES: list[str] = ["fr", "de", "es", "it", "tr"]


# Human-readable names, used to prompt LLM providers
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "pt_BR": "Brazilian Portuguese",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
    "ru": "Russian",
    "uk": "Ukrainian",
    "cs": "Czech",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "el": "Greek",
    "hu": "Hungarian",
    "ro": "Romanian",
    "zh": "Chinese (Simplified)",
    "zh_TW": "Chinese (Traditional)",
    "ja": "Japanese",
    "ko": "Korean",
    "vi": "Vietnamese",
    "th": "Thai",
    "id": "Indonesian",
    "ms": "Malay",
    "hi": "Hindi",
    "bn": "Bengali",
    "ar": "Arabic",
    "he": "Hebrew",
    "fa": "Persian",
    "sw": "Swahili",
}


_NAME_TO_CODE: dict[str, str] = {
    name.lower(): code for code, name in LANGUAGE_NAMES.items()
}
_NAME_TO_CODE.update({
    "chinese": "zh",
    "farsi": "fa",
    "brazilian": "pt_BR",
})


def normalize_language_code(code: str) -> str:
    """
    Normalize a language code to ARB form.

    "ES" -> "es", "pt-br" -> "pt_BR", "German" -> "de".
    """
    code = code.strip()
    if code.lower() in _NAME_TO_CODE:
        return _NAME_TO_CODE[code.lower()]

    parts = code.replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) == 1:
        return language

    # Scripts (Hant) are title case, regions (BR) upper case
    subtags = [p.title() if len(p) == 4 else p.upper() for p in parts[1:]]
    return "_".join([language, *subtags])


def to_bcp47(code: str) -> str:
    """Convert an ARB locale code to a BCP-47 tag."""
    return normalize_language_code(code).replace("_", "-")


def same_language(a: str, b: str) -> bool:
    """Whether two codes name the same locale."""
    return normalize_language_code(a) == normalize_language_code(b)


def get_language_name(code: str) -> str:
    """Get human-readable language name."""
    code = normalize_language_code(code)
    if code in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[code]
    return LANGUAGE_NAMES.get(code.split("_")[0], code)


def parse_language_list(value: str | list[str]) -> list[str]:
    """Parse "fr de,es" or a list into normalized, deduplicated codes."""
    if isinstance(value, str):
        value = value.replace(",", " ").split()

    languages: list[str] = []
    for item in value:
        for part in str(item).replace(",", " ").split():
            code = normalize_language_code(part)
            if code not in languages:
                languages.append(code)
    return languages
