"""
Template model and reconstruction.

A template is the source-language ARB document: an ordered mapping whose
entries are either translatable strings or opaque values (metadata keys
such as "@greeting", and any non-string value). The entry kind is decided
once when the template is built.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Union

from f10n.core.errors import ConsistencyError

logger = logging.getLogger(__name__)


DEFAULT_METADATA_PREFIX = "@"


# =============================================================================
# Entries
# =============================================================================


@dataclass(frozen=True)
class Translatable:
    """A string value to translate."""

    text: str


@dataclass(frozen=True)
class Opaque:
    """A value copied verbatim into every output."""

    value: Any


TemplateEntry = Union[Translatable, Opaque]


# =============================================================================
# Template
# =============================================================================


@dataclass
class Template:
    """
    Ordered source-language template.

    Usage:
        template = Template.from_mapping({"title": "Hello", "@title": {...}})
        template.source_strings()   # ["Hello"]
    """

    entries: list[tuple[str, TemplateEntry]] = field(default_factory=list)
    metadata_prefix: str = DEFAULT_METADATA_PREFIX

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        metadata_prefix: str = DEFAULT_METADATA_PREFIX,
    ) -> Template:
        """Build a template, tagging each entry by key and value type."""
        entries: list[tuple[str, TemplateEntry]] = []
        for key, value in data.items():
            if key.startswith(metadata_prefix) or not isinstance(value, str):
                entries.append((key, Opaque(value)))
            else:
                entries.append((key, Translatable(value)))
        return cls(entries=entries, metadata_prefix=metadata_prefix)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def translatable(self) -> Iterator[tuple[str, str]]:
        """Iterate (key, text) for translatable entries, in order."""
        for key, entry in self.entries:
            if isinstance(entry, Translatable):
                yield key, entry.text

    def source_strings(self) -> list[str]:
        """Distinct translatable strings in first-appearance order."""
        strings: list[str] = []
        seen: set[str] = set()
        for _, text in self.translatable():
            if text not in seen:
                seen.add(text)
                strings.append(text)
        return strings

    @property
    def locale(self) -> str | None:
        """The template's declared locale (ARB "@@locale"), if any."""
        for key, entry in self.entries:
            if key == "@@locale" and isinstance(entry, Opaque) and isinstance(entry.value, str):
                return entry.value
        return None

    def __len__(self) -> int:
        return len(self.entries)


# =============================================================================
# Reconstruction
# =============================================================================


def reconstruct_language(
    template: Template,
    language: str,
    translations: Mapping[str, str],
) -> dict[str, Any]:
    """
    Rebuild the template for one language.

    Raises:
        ConsistencyError: a translatable string has no translation
    """
    output: dict[str, Any] = {}
    for key, entry in template.entries:
        if isinstance(entry, Opaque):
            output[key] = copy.deepcopy(entry.value)
            continue

        if entry.text not in translations:
            raise ConsistencyError(language, key, entry.text)
        output[key] = translations[entry.text]

    return output


def reconstruct(
    template: Template,
    translations: Mapping[str, Mapping[str, str]],
) -> dict[str, dict[str, Any]]:
    """Rebuild the template for every language, keeping language order."""
    outputs: dict[str, dict[str, Any]] = {}
    for language, per_language in translations.items():
        outputs[language] = reconstruct_language(template, language, per_language)
        logger.debug(f"Reconstructed {len(outputs[language])} entries for {language}")
    return outputs
