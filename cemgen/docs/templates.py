"""Markdown documentation blocks for components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..manifest.accessors import get_component_description, get_member_description, get_methods
from ..models import Component, CssPart, CssProperty, Event, Method, Parameter, Slot
from ..options import DocLabels, Options

SEPARATOR = "---"


@dataclass
class DocSection:
    """Rendered documentation fragment; an empty one contributes nothing."""

    heading: Optional[str] = None
    lines: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.heading and not self.lines

    def render(self) -> str:
        parts = [f"### **{self.heading}:**"] if self.heading else []
        parts.extend(self.lines)
        return "\n".join(parts)


def get_component_details_template(component: Component, options: Options | None = None) -> str:
    """Return the markdown documentation block for ``component``."""
    options = options or Options()
    labels = options.labels or DocLabels()
    sections = [
        get_events_template(component.events, options.hide_event_docs, labels.events or "Events"),
        get_methods_template(get_methods(component), options.hide_method_docs, labels.methods or "Methods"),
        get_slots_template(component.slots, options.hide_slot_docs, labels.slots or "Slots"),
        get_css_props_template(
            component.css_properties,
            options.hide_css_properties_docs,
            labels.css_properties or "CSS Properties",
        ),
        get_parts_template(component.css_parts, options.hide_css_parts_docs, labels.css_parts or "CSS Parts"),
    ]
    return assemble_details(get_component_description(component, options.description_src), sections)


def assemble_details(description: str, sections: Sequence[DocSection]) -> str:
    """Join the description and non-empty sections with fixed separators."""
    blocks = [description.strip(), SEPARATOR]
    blocks.extend(section.render() for section in sections if not section.is_empty())
    return "\n\n".join(blocks).strip()


def get_events_template(
    events: Optional[Sequence[Event]],
    hide: bool = False,
    label: str = "Events",
) -> DocSection:
    if not events or hide:
        return DocSection()
    return DocSection(
        heading=label,
        lines=[_bullet(f"**{event.name}**", get_member_description(event.description, event.deprecated)) for event in events],
    )


def get_methods_template(
    methods: Optional[Sequence[Method]],
    hide: bool = False,
    label: str = "Methods",
) -> DocSection:
    if not methods or hide:
        return DocSection()
    return DocSection(heading=label, lines=[_method_line(method) for method in methods])


def get_slots_template(
    slots: Optional[Sequence[Slot]],
    hide: bool = False,
    label: str = "Slots",
) -> DocSection:
    if not slots or hide:
        return DocSection()
    return DocSection(
        heading=label,
        lines=[_bullet(f"**{slot.name}**" if slot.name else "_default_", slot.description or "") for slot in slots],
    )


def get_css_props_template(
    css_properties: Optional[Sequence[CssProperty]],
    hide: bool = False,
    label: str = "CSS Properties",
) -> DocSection:
    if not css_properties or hide:
        return DocSection()
    lines = []
    for prop in css_properties:
        text = prop.description or ""
        if prop.default is not None:
            text = f"{text} _(default: {prop.default})_".strip()
        lines.append(_bullet(f"**{prop.name}**", text))
    return DocSection(heading=label, lines=lines)


def get_parts_template(
    css_parts: Optional[Sequence[CssPart]],
    hide: bool = False,
    label: str = "CSS Parts",
) -> DocSection:
    if not css_parts or hide:
        return DocSection()
    return DocSection(
        heading=label,
        lines=[_bullet(f"**{part.name}**", part.description or "") for part in css_parts],
    )


def _method_line(method: Method) -> str:
    signature = f"{method.name}{_parameters(method.parameters)}"
    if method.return_type is not None and method.return_type.text:
        signature += f": _{method.return_type.text}_"
    return _bullet(f"**{signature}**", get_member_description(method.description, method.deprecated))


def _parameters(parameters: Optional[Sequence[Parameter]]) -> str:
    if not parameters:
        return "()"
    rendered = []
    for parameter in parameters:
        if parameter.type is not None and parameter.type.text:
            rendered.append(f"{parameter.name}: _{parameter.type.text}_")
        else:
            rendered.append(parameter.name)
    return "(" + ", ".join(rendered) + ")"


def _bullet(name: str, description: str) -> str:
    return f"- {name} - {description}" if description else f"- {name}"


__all__ = [
    "DocSection",
    "assemble_details",
    "get_component_details_template",
    "get_css_props_template",
    "get_events_template",
    "get_methods_template",
    "get_parts_template",
    "get_slots_template",
]
