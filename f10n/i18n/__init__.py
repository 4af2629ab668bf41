"""
Translation cache, orchestration and ARB templates.

Design:
1. Cache translations by (language, source string), write-once
2. Diff each language's strings against the cache
3. Batch translate only what is missing
4. Rebuild the template per language, keeping key order and metadata

Usage:
    from f10n.i18n import TranslationCache, TranslationOrchestrator, load_template

    template = load_template("app_en.arb")
    orchestrator = TranslationOrchestrator(cache, provider)
    run = await orchestrator.translate_all(["es"], template.source_strings())
    outputs = reconstruct(template, run.translations)
"""

from f10n.i18n.cache import TranslationCache
from f10n.i18n.orchestrator import (
    TranslationOrchestrator,
    TranslationRun,
    LanguageResult,
    LanguagePlan,
)
from f10n.i18n.template import (
    Template,
    Translatable,
    Opaque,
    reconstruct,
    reconstruct_language,
)
from f10n.i18n.arb import (
    load_template,
    render_arb,
    write_localization_files,
)
from f10n.core.languages import (
    DEFAULT_TARGET_LANGUAGES,
    get_language_name,
    normalize_language_code,
    parse_language_list,
)

__all__ = [
    # Cache + orchestration
    "TranslationCache",
    "TranslationOrchestrator",
    "TranslationRun",
    "LanguageResult",
    "LanguagePlan",
    # Templates
    "Template",
    "Translatable",
    "Opaque",
    "reconstruct",
    "reconstruct_language",
    "load_template",
    "render_arb",
    "write_localization_files",
    # Language utilities
    "DEFAULT_TARGET_LANGUAGES",
    "get_language_name",
    "normalize_language_code",
    "parse_language_list",
]
