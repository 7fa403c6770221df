"""Markdown documentation rendering for components."""

from .templates import (
    DocSection,
    assemble_details,
    get_component_details_template,
    get_css_props_template,
    get_events_template,
    get_methods_template,
    get_parts_template,
    get_slots_template,
)

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
