"""Core data models shared across cemgen components."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

Deprecation = Union[bool, str]


@dataclass(frozen=True)
class TypeRef:
    """Type text attached to a manifest member."""

    text: Optional[str] = None


@dataclass(frozen=True)
class Attribute:
    """HTML attribute exposed by a custom element."""

    name: str
    field_name: Optional[str] = None
    type: Optional[TypeRef] = None
    parsed_type: Optional[TypeRef] = None
    expanded_type: Optional[TypeRef] = None
    description: Optional[str] = None
    deprecated: Deprecation = False


@dataclass(frozen=True)
class Property:
    """Public class field exposed to JavaScript callers."""

    name: str
    type: Optional[TypeRef] = None
    parsed_type: Optional[TypeRef] = None
    expanded_type: Optional[TypeRef] = None
    description: Optional[str] = None
    deprecated: Deprecation = False


@dataclass(frozen=True)
class Event:
    """Event dispatched by a custom element."""

    name: str
    type: Optional[TypeRef] = None
    description: Optional[str] = None
    deprecated: Deprecation = False


@dataclass(frozen=True)
class Parameter:
    """Single method parameter."""

    name: str
    type: Optional[TypeRef] = None


@dataclass(frozen=True)
class Method:
    """Public method on a custom element class."""

    name: str
    parameters: Optional[Tuple[Parameter, ...]] = None
    return_type: Optional[TypeRef] = None
    description: Optional[str] = None
    deprecated: Deprecation = False


@dataclass(frozen=True)
class Slot:
    """Slot; a missing name marks the default slot."""

    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CssProperty:
    """CSS custom property consumed by the component."""

    name: str
    description: Optional[str] = None
    default: Optional[str] = None


@dataclass(frozen=True)
class CssPart:
    """Shadow part exposed for ::part styling."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Component:
    """Normalized custom element declaration.

    Collections are ``None`` when the manifest omits them and an empty tuple
    when the manifest lists none.
    """

    name: str
    tag_name: Optional[str] = None
    custom_element: bool = False
    description: Optional[str] = None
    summary: Optional[str] = None
    deprecated: Deprecation = False
    attributes: Optional[Tuple[Attribute, ...]] = None
    properties: Optional[Tuple[Property, ...]] = None
    events: Optional[Tuple[Event, ...]] = None
    methods: Optional[Tuple[Method, ...]] = None
    slots: Optional[Tuple[Slot, ...]] = None
    css_properties: Optional[Tuple[CssProperty, ...]] = None
    css_parts: Optional[Tuple[CssPart, ...]] = None
