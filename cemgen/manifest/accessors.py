"""Lookups over normalized components and their members."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..models import Attribute, Component, Deprecation, Method, Property, TypeRef

DEFAULT_TYPE_TEXT = "string"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")
_EVENT_WRAPPER = re.compile(r"^CustomEvent<(.*)>$", re.DOTALL)

# Types that never need an import next to the component class.
_BUILTIN_TYPES = frozenset(
    {
        "any",
        "bigint",
        "boolean",
        "never",
        "null",
        "number",
        "object",
        "string",
        "symbol",
        "undefined",
        "unknown",
        "void",
        "Array",
        "Date",
        "Error",
        "File",
        "FileList",
        "FormData",
        "Function",
        "Map",
        "Node",
        "Object",
        "Promise",
        "Record",
        "Set",
    }
)


class TypeSource(str, Enum):
    """Manifest fields a member's type text can be read from."""

    TYPE = "type"
    PARSED_TYPE = "parsedType"
    EXPANDED_TYPE = "expandedType"


class DescriptionSource(str, Enum):
    """Component fields usable as the documentation description."""

    DESCRIPTION = "description"
    SUMMARY = "summary"


TypedMember = Union[Attribute, Property]

_TYPE_ACCESSORS: Dict[TypeSource, Callable[[TypedMember], Optional[TypeRef]]] = {
    TypeSource.TYPE: lambda member: member.type,
    TypeSource.PARSED_TYPE: lambda member: member.parsed_type,
    TypeSource.EXPANDED_TYPE: lambda member: member.expanded_type,
}

_DESCRIPTION_ACCESSORS: Dict[DescriptionSource, Callable[[Component], Optional[str]]] = {
    DescriptionSource.DESCRIPTION: lambda component: component.description,
    DescriptionSource.SUMMARY: lambda component: component.summary,
}


def get_component_properties(component: Component) -> Optional[Tuple[Property, ...]]:
    """Return the public fields of a component, or None when the manifest lists no members."""
    return component.properties


def get_methods(component: Component) -> Optional[Tuple[Method, ...]]:
    return component.methods


def get_member_type(member: TypedMember, types_src: TypeSource | None = None) -> str:
    """Return the member's type text from the selected source, defaulting to ``string``."""
    type_ref = _TYPE_ACCESSORS[types_src or TypeSource.TYPE](member)
    if type_ref is None or not type_ref.text:
        return DEFAULT_TYPE_TEXT
    return type_ref.text


def get_member_description(description: str | None, deprecated: Deprecation | None = None) -> str:
    """Return a member description with a visible deprecation marker when flagged."""
    if not deprecated:
        return description or ""
    marker = f"@deprecated {deprecated}" if isinstance(deprecated, str) else "@deprecated"
    return f"{marker} - {description}" if description else marker


def get_component_description(
    component: Component,
    description_src: DescriptionSource | None = None,
) -> str:
    """Return the component description, honoring an explicit source field."""
    if description_src is not None:
        text = _DESCRIPTION_ACCESSORS[description_src](component)
    else:
        text = component.description or component.summary
    return (text or "").replace("\\n", "\n")


def get_custom_event_types(
    component: Component,
    known_component_names: Iterable[str] = (),
) -> Optional[str]:
    """Return comma-joined payload type names that must be imported with the component.

    Built-in and DOM types, inline object types and names listed in
    ``known_component_names`` (imported on their own) are skipped.
    """
    if not component.events:
        return None
    known = set(known_component_names)
    found: List[str] = []
    for event in component.events:
        if event.type is None or not event.type.text:
            continue
        for name in _payload_type_names(event.type.text):
            if name in known or name in found:
                continue
            found.append(name)
    return ", ".join(found) if found else None


def _payload_type_names(type_text: str) -> List[str]:
    text = type_text.strip()
    wrapped = _EVENT_WRAPPER.match(text)
    if wrapped:
        text = wrapped.group(1)
    if "{" in text:
        return []
    names: List[str] = []
    for part in re.split(r"[|&]", text):
        candidate = part.strip()
        while candidate.endswith("[]"):
            candidate = candidate[:-2].strip()
        if not _IDENTIFIER.match(candidate):
            continue
        if candidate in _BUILTIN_TYPES or candidate.startswith("HTML") or candidate.endswith("Event"):
            continue
        names.append(candidate)
    return names


__all__ = [
    "DEFAULT_TYPE_TEXT",
    "DescriptionSource",
    "TypeSource",
    "get_component_description",
    "get_component_properties",
    "get_custom_event_types",
    "get_member_description",
    "get_member_type",
    "get_methods",
]
