from __future__ import annotations

from typing import Any, Dict

import pytest

from tests._fixtures.manifest_builder import ManifestBuilder


@pytest.fixture
def manifest_builder() -> ManifestBuilder:
    """Provide an empty manifest builder."""
    return ManifestBuilder()


@pytest.fixture
def button_manifest(manifest_builder: ManifestBuilder) -> Dict[str, Any]:
    """Manifest with a single button exposing one boolean attribute."""
    return manifest_builder.element(
        "Button",
        "my-button",
        attributes=[{"name": "disabled", "type": {"text": "boolean"}}],
    ).build()
