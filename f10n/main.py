"""
f10n command line.

Translates an ARB template into every target language and writes one
ARB file per language:

    f10n -t lib/l10n/app_en.arb -o lib/l10n -l fr de es
    python -m f10n.main --config f10n.yaml --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from f10n.config import Settings
from f10n.config_loader import ConfigLoader
from f10n.core.errors import ConfigError, F10nError
from f10n.i18n.arb import load_template, write_localization_files
from f10n.i18n.cache import TranslationCache
from f10n.i18n.orchestrator import TranslationOrchestrator, TranslationRun
from f10n.i18n.template import reconstruct
from f10n.providers import TranslationProvider, create_provider
from f10n.storage.local import create_cache_storage

logger = logging.getLogger("f10n")


# =============================================================================
# Arguments
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f10n",
        description="Translate a template ARB file to any language for Flutter",
    )
    parser.add_argument(
        "--lang", "-l",
        nargs="+",
        dest="languages",
        help="Target languages separated by space, i.e. fr de es",
    )
    parser.add_argument(
        "--cache", "-c",
        dest="cache_path",
        help="Path to the translation cache file",
    )
    parser.add_argument(
        "--arb-template", "-t",
        dest="template_path",
        help="Path to the ARB template",
    )
    parser.add_argument(
        "--output", "-o",
        dest="output_dir",
        help="Output directory for translated ARB files",
    )
    parser.add_argument(
        "--config",
        help="YAML project file (default: f10n.yaml if present)",
    )
    parser.add_argument(
        "--source-language", "-s",
        dest="source_language",
        help="Template language (default: detect from the first string)",
    )
    parser.add_argument(
        "--provider",
        choices=["llm", "google"],
        help="Translation provider",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        dest="max_concurrency",
        help="Languages to translate at once",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with other languages when one fails",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be translated without calling the provider",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Minimal output",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment, then project file, then command-line flags."""
    try:
        env_settings = Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid environment configuration: {e}") from e
    loader = ConfigLoader(env_settings)
    settings = loader.load(args.config)

    overrides = {
        key: getattr(args, key)
        for key in (
            "cache_path",
            "template_path",
            "output_dir",
            "source_language",
            "provider",
            "max_concurrency",
        )
        if getattr(args, key) is not None
    }
    if args.languages:
        overrides["languages"] = " ".join(args.languages)
    if args.keep_going:
        overrides["fail_fast"] = False
    return ConfigLoader(settings).apply(overrides)


# =============================================================================
# Run
# =============================================================================


async def run(
    settings: Settings,
    provider: TranslationProvider | None = None,
    dry_run: bool = False,
    verbose: bool = True,
) -> TranslationRun | None:
    """
    Translate the configured template and write the localization files.

    Returns:
        The run result, or None for a dry run
    """
    template = load_template(settings.template_path, metadata_prefix=settings.metadata_prefix)
    source_strings = template.source_strings()
    languages = settings.languages_list

    if provider is None and not dry_run:
        provider = create_provider(settings)
    cache = TranslationCache(create_cache_storage(settings.cache_backend, settings.cache_path))

    try:
        orchestrator = TranslationOrchestrator(
            cache,
            provider,
            source_language=settings.source_language or template.locale,
            max_concurrency=settings.max_concurrency,
            fail_fast=settings.fail_fast,
            retries=settings.provider_retries,
        )

        if dry_run:
            plans = await orchestrator.plan(languages, source_strings)
            if verbose:
                print(f"\n{len(source_strings)} translatable strings")
                for plan in plans:
                    print(f"  {plan.language}: {plan.cached} cached, {len(plan.needed)} to translate")
            return None

        result = await orchestrator.translate_all(languages, source_strings)
    finally:
        await cache.close()
        if provider is not None:
            await provider.aclose()

    outputs = reconstruct(template, result.translations)
    written = write_localization_files(outputs, settings.output_dir, settings.file_pattern)

    if verbose:
        stats = result.stats
        print(f"\nSource language: {result.source_language or 'n/a'}")
        print(f"Languages: {stats['languages']}")
        print(f"Already cached: {stats['cached']}")
        print(f"New translations: {stats['translated']}")
        for path in written:
            print(f"  ✓ {path}")
        for lang, error in result.failed.items():
            print(f"  ✗ {lang}: {error}")

    return result


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except F10nError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.WARNING if args.quiet else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = asyncio.run(run(settings, dry_run=args.dry_run, verbose=not args.quiet))
    except F10nError as e:
        logger.error(str(e))
        return 1

    if result is not None and result.failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
