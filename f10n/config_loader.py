"""
Project configuration loader.

Reads an optional YAML project file (f10n.yaml) and applies it on top of
the environment settings:

    template: lib/l10n/app_en.arb
    output-dir: lib/l10n
    languages: [fr, de, es]
    source-language: en
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from f10n.config import Settings, get_settings
from f10n.core.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_PROJECT_FILE = "f10n.yaml"

# Short names accepted in project files
ALIASES = {
    "template": "template_path",
    "arb_template": "template_path",
    "output": "output_dir",
    "cache": "cache_path",
    "lang": "languages",
    "concurrency": "max_concurrency",
}


class ConfigLoader:
    """
    Loads a project file and merges it into Settings.
    """
    
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
    
    def read(self, path: Path | str) -> dict[str, Any]:
        """Read a project file into Settings field overrides."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read project file {path}: {e}") from e
        
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Project file {path} must be a mapping")
        
        return self.normalize(data, source=str(path))
    
    def normalize(self, data: dict[str, Any], source: str = "project file") -> dict[str, Any]:
        """Map project keys onto Settings field names."""
        fields = set(Settings.model_fields)
        overrides: dict[str, Any] = {}
        
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_").lower()
            key = ALIASES.get(key, key)
            if key not in fields:
                raise ConfigError(f"Unknown setting '{raw_key}' in {source}")
            
            # Languages may be given as a YAML list
            if key == "languages" and isinstance(value, list):
                value = " ".join(str(v) for v in value)
            overrides[key] = value
        
        return overrides
    
    def apply(self, overrides: dict[str, Any]) -> Settings:
        """Return new Settings with overrides validated and applied."""
        if not overrides:
            return self.settings
        
        merged = {**self.settings.model_dump(), **overrides}
        try:
            return Settings.model_validate(merged)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
    
    def load(self, path: Path | str | None = None) -> Settings:
        """
        Load a project file if present.
        
        With no path, f10n.yaml in the working directory is used when it
        exists; otherwise the environment settings are returned unchanged.
        """
        if path is None:
            path = Path(DEFAULT_PROJECT_FILE)
            if not path.exists():
                return self.settings
        
        overrides = self.read(path)
        logger.info(f"Loaded project config {path} ({len(overrides)} settings)")
        return self.apply(overrides)


def load_project_config(
    path: Path | str | None = None,
    settings: Settings | None = None,
) -> Settings:
    """
    Convenience function to load settings with a project file applied.
    """
    return ConfigLoader(settings).load(path)
