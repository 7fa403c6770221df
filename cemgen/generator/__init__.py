"""Type declaration generators."""

from .solid import (
    ComponentType,
    ElementEntry,
    SolidTypeGenerator,
    TypeMember,
    format_doc_comment,
    generate_solid_js_types,
)

__all__ = [
    "ComponentType",
    "ElementEntry",
    "SolidTypeGenerator",
    "TypeMember",
    "format_doc_comment",
    "generate_solid_js_types",
]
