"""Manifest reading, normalization and member lookups."""

from .accessors import (
    DescriptionSource,
    TypeSource,
    get_component_description,
    get_component_properties,
    get_custom_event_types,
    get_member_description,
    get_member_type,
    get_methods,
)
from .extractor import build_component, get_components
from .loader import ManifestError, load_manifest

__all__ = [
    "DescriptionSource",
    "ManifestError",
    "TypeSource",
    "build_component",
    "get_component_description",
    "get_component_properties",
    "get_components",
    "get_custom_event_types",
    "get_member_description",
    "get_member_type",
    "get_methods",
    "load_manifest",
]
