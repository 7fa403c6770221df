"""Normalizes raw Custom Elements Manifest declarations into components."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

from ..models import (
    Attribute,
    Component,
    CssPart,
    CssProperty,
    Deprecation,
    Event,
    Method,
    Parameter,
    Property,
    Slot,
    TypeRef,
)

T = TypeVar("T")

_HIDDEN_PRIVACY = {"private", "protected"}


def get_components(manifest: Any, exclude: Iterable[str] | None = None) -> List[Component]:
    """Return one component per custom element declaration, in manifest order."""
    excluded = set(exclude or ())
    components: List[Component] = []
    for declaration in _iter_declarations(manifest):
        if not (declaration.get("customElement") or declaration.get("tagName")):
            continue
        if _as_str(declaration.get("name")) in excluded:
            continue
        components.append(build_component(declaration))
    return components


def build_component(declaration: Mapping[str, Any]) -> Component:
    """Build a component from a single class declaration."""
    members = declaration.get("members")
    return Component(
        name=_as_str(declaration.get("name")) or "",
        tag_name=_as_str(declaration.get("tagName")),
        custom_element=bool(declaration.get("customElement")),
        description=_as_str(declaration.get("description")),
        summary=_as_str(declaration.get("summary")),
        deprecated=_as_deprecation(declaration.get("deprecated")),
        attributes=_as_tuple(declaration.get("attributes"), _build_attribute),
        properties=_select_members(members, "field", _build_property),
        events=_as_tuple(declaration.get("events"), _build_event),
        methods=_select_members(members, "method", _build_method),
        slots=_as_tuple(declaration.get("slots"), _build_slot),
        css_properties=_as_tuple(declaration.get("cssProperties"), _build_css_property),
        css_parts=_as_tuple(declaration.get("cssParts"), _build_css_part),
    )


def _iter_declarations(manifest: Any) -> Iterator[Dict[str, Any]]:
    if not isinstance(manifest, Mapping):
        return
    modules = manifest.get("modules")
    if not isinstance(modules, list):
        return
    for module in modules:
        if not isinstance(module, Mapping):
            continue
        declarations = module.get("declarations")
        if not isinstance(declarations, list):
            continue
        for declaration in declarations:
            if isinstance(declaration, Mapping):
                yield dict(declaration)


def _select_members(
    members: Any,
    kind: str,
    factory: Callable[[Mapping[str, Any]], T],
) -> Optional[Tuple[T, ...]]:
    if not isinstance(members, list):
        return None
    return tuple(
        factory(member)
        for member in members
        if isinstance(member, Mapping) and member.get("kind") == kind and _is_public(member)
    )


def _is_public(member: Mapping[str, Any]) -> bool:
    name = _as_str(member.get("name")) or ""
    if name.startswith("#"):
        return False
    if member.get("static"):
        return False
    return member.get("privacy") not in _HIDDEN_PRIVACY


def _build_attribute(raw: Mapping[str, Any]) -> Attribute:
    return Attribute(
        name=_as_str(raw.get("name")) or "",
        field_name=_as_str(raw.get("fieldName")),
        type=_as_type(raw.get("type")),
        parsed_type=_as_type(raw.get("parsedType")),
        expanded_type=_as_type(raw.get("expandedType")),
        description=_as_str(raw.get("description")),
        deprecated=_as_deprecation(raw.get("deprecated")),
    )


def _build_property(raw: Mapping[str, Any]) -> Property:
    return Property(
        name=_as_str(raw.get("name")) or "",
        type=_as_type(raw.get("type")),
        parsed_type=_as_type(raw.get("parsedType")),
        expanded_type=_as_type(raw.get("expandedType")),
        description=_as_str(raw.get("description")),
        deprecated=_as_deprecation(raw.get("deprecated")),
    )


def _build_event(raw: Mapping[str, Any]) -> Event:
    return Event(
        name=_as_str(raw.get("name")) or "",
        type=_as_type(raw.get("type")),
        description=_as_str(raw.get("description")),
        deprecated=_as_deprecation(raw.get("deprecated")),
    )


def _build_method(raw: Mapping[str, Any]) -> Method:
    returns = raw.get("return")
    return Method(
        name=_as_str(raw.get("name")) or "",
        parameters=_as_tuple(raw.get("parameters"), _build_parameter),
        return_type=_as_type(returns.get("type")) if isinstance(returns, Mapping) else None,
        description=_as_str(raw.get("description")),
        deprecated=_as_deprecation(raw.get("deprecated")),
    )


def _build_parameter(raw: Mapping[str, Any]) -> Parameter:
    return Parameter(name=_as_str(raw.get("name")) or "", type=_as_type(raw.get("type")))


def _build_slot(raw: Mapping[str, Any]) -> Slot:
    # An empty slot name is the default slot, same as a missing one.
    return Slot(name=_as_str(raw.get("name")) or None, description=_as_str(raw.get("description")))


def _build_css_property(raw: Mapping[str, Any]) -> CssProperty:
    return CssProperty(
        name=_as_str(raw.get("name")) or "",
        description=_as_str(raw.get("description")),
        default=_as_str(raw.get("default")),
    )


def _build_css_part(raw: Mapping[str, Any]) -> CssPart:
    return CssPart(name=_as_str(raw.get("name")) or "", description=_as_str(raw.get("description")))


def _as_tuple(value: Any, factory: Callable[[Mapping[str, Any]], T]) -> Optional[Tuple[T, ...]]:
    if not isinstance(value, list):
        return None
    return tuple(factory(item) for item in value if isinstance(item, Mapping))


def _as_type(value: Any) -> Optional[TypeRef]:
    if not isinstance(value, Mapping):
        return None
    return TypeRef(text=_as_str(value.get("text")))


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_deprecation(value: Any) -> Deprecation:
    if isinstance(value, (bool, str)):
        return value
    return False


__all__ = ["build_component", "get_components"]
