"""Configuration loading for cemgen (.cemgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .options import ConfigError, Options, resolve_options

CONFIG_FILE_NAME = ".cemgen.yml"
DEFAULT_MANIFEST = "custom-elements.json"


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .cemgen.yml."""

    root: Path
    manifest: Path
    options: Dict[str, Any] = field(default_factory=dict)

    def resolved_options(self, overrides: Optional[Dict[str, Any]] = None) -> Options:
        """Return options from the file with ``overrides`` applied on top."""
        merged = dict(self.options)
        merged.update(overrides or {})
        return resolve_options(merged)


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig(root=root, manifest=root / DEFAULT_MANIFEST)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    manifest_str = _as_str(data.get("manifest")) or DEFAULT_MANIFEST
    options = data.get("options")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise ConfigError("'options' in .cemgen.yml must be a mapping")

    # Validate option values eagerly.
    resolve_options(options)

    return GeneratorConfig(root=root, manifest=root / manifest_str, options=dict(options))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


__all__ = ["CONFIG_FILE_NAME", "ConfigError", "GeneratorConfig", "load_config"]
