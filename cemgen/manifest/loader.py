"""Reads Custom Elements Manifest files from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


class ManifestError(RuntimeError):
    """Raised when a manifest file cannot be read or parsed."""


def load_manifest(path: Path) -> Dict[str, Any]:
    """Return the deserialized manifest stored at ``path``."""
    manifest_path = Path(path).expanduser()
    if not manifest_path.is_file():
        raise ManifestError(f"Manifest not found: {manifest_path}")
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {manifest_path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path.name} must contain a JSON object at the root")
    return data


__all__ = ["ManifestError", "load_manifest"]
