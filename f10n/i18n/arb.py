"""
ARB file reading and writing.

ARB is JSON with a flat top-level object. Output is pretty-printed with a
stable layout so regenerated files diff cleanly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from f10n.core.errors import TemplateError
from f10n.i18n.template import DEFAULT_METADATA_PREFIX, Template

logger = logging.getLogger(__name__)


DEFAULT_FILE_PATTERN = "app_{lang}.arb"


def load_template(
    path: str | Path,
    metadata_prefix: str = DEFAULT_METADATA_PREFIX,
) -> Template:
    """Load an ARB template from disk."""
    path = Path(path)
    if not path.exists():
        raise TemplateError(f"Template not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TemplateError(f"Cannot read template {path}: {e}") from e

    if not isinstance(data, dict):
        raise TemplateError(f"Template {path} must be a JSON object")

    template = Template.from_mapping(data, metadata_prefix=metadata_prefix)
    logger.info(
        f"Loaded {path.name}: {len(template)} entries, "
        f"{len(template.source_strings())} translatable strings"
    )
    return template


def render_arb(content: Mapping[str, Any]) -> str:
    """Serialize one output structure."""
    return json.dumps(content, indent=2, ensure_ascii=False) + "\n"


def output_path(output_dir: str | Path, language: str, file_pattern: str = DEFAULT_FILE_PATTERN) -> Path:
    """Path of the file for one language."""
    return Path(output_dir) / file_pattern.format(lang=language)


def write_localization_files(
    outputs: Mapping[str, Mapping[str, Any]],
    output_dir: str | Path,
    file_pattern: str = DEFAULT_FILE_PATTERN,
) -> list[Path]:
    """
    Write one ARB file per language.

    Returns:
        Written paths, in language order
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for language, content in outputs.items():
        path = output_path(output_dir, language, file_pattern)
        path.write_text(render_arb(content), encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written
