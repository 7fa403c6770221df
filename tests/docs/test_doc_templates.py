"""Tests for cemgen.docs.templates."""

from __future__ import annotations

from cemgen.docs.templates import (
    DocSection,
    assemble_details,
    get_component_details_template,
    get_css_props_template,
    get_methods_template,
    get_slots_template,
)
from cemgen.models import Component, CssPart, CssProperty, Event, Method, Parameter, Slot, TypeRef
from cemgen.options import resolve_options


def _dialog() -> Component:
    return Component(
        name="Dialog",
        tag_name="x-dialog",
        description="A modal dialog.",
        events=(Event(name="close", description="Fired when closed"),),
        methods=(
            Method(
                name="show",
                parameters=(Parameter(name="modal", type=TypeRef(text="boolean")), Parameter(name="reason")),
                return_type=TypeRef(text="Promise<void>"),
                description="Opens the dialog",
            ),
        ),
        slots=(Slot(description="Body content"), Slot(name="footer", description="Actions")),
        css_properties=(CssProperty(name="--dialog-width", description="Panel width", default="32rem"),),
        css_parts=(CssPart(name="panel", description="The dialog panel"),),
    )


def test_details_render_sections_in_fixed_order() -> None:
    details = get_component_details_template(_dialog(), resolve_options())

    positions = [
        details.index(heading)
        for heading in (
            "### **Events:**",
            "### **Methods:**",
            "### **Slots:**",
            "### **CSS Properties:**",
            "### **CSS Parts:**",
        )
    ]
    assert details.startswith("A modal dialog.\n\n---")
    assert positions == sorted(positions)


def test_details_bullets() -> None:
    details = get_component_details_template(_dialog(), resolve_options())

    assert "- **close** - Fired when closed" in details
    assert "- **show(modal: _boolean_, reason): _Promise<void>_** - Opens the dialog" in details
    assert "- _default_ - Body content" in details
    assert "- **footer** - Actions" in details
    assert "- **--dialog-width** - Panel width _(default: 32rem)_" in details
    assert "- **panel** - The dialog panel" in details


def test_hidden_sections_are_removed_entirely() -> None:
    options = resolve_options({"hideSlotDocs": True, "hideMethodDocs": True})

    details = get_component_details_template(_dialog(), options)

    assert "Slots" not in details
    assert "footer" not in details
    assert "Methods" not in details
    assert "### **Events:**" in details


def test_labels_override_headings() -> None:
    options = resolve_options({"labels": {"events": "Événements", "cssParts": "Parts"}})

    details = get_component_details_template(_dialog(), options)

    assert "### **Événements:**" in details
    assert "### **Parts:**" in details
    assert "### **Slots:**" in details


def test_empty_and_absent_sections_emit_nothing() -> None:
    component = Component(name="Plain", tag_name="x-plain", description="Plain.", events=(), slots=None)

    details = get_component_details_template(component, resolve_options())

    assert details == "Plain.\n\n---"


def test_method_without_parameters_renders_empty_parens() -> None:
    section = get_methods_template((Method(name="reset"),))

    assert section.render() == "### **Methods:**\n- **reset()**"


def test_deprecated_members_are_marked() -> None:
    component = Component(
        name="Old",
        events=(Event(name="legacy", description="Old event", deprecated=True),),
        methods=(Method(name="refresh", deprecated="Use update()"),),
    )

    details = get_component_details_template(component)

    assert "- **legacy** - @deprecated - Old event" in details
    assert "- **refresh()** - @deprecated Use update()" in details


def test_css_property_without_default() -> None:
    section = get_css_props_template((CssProperty(name="--gap", description="Spacing"),))

    assert section.lines == ["- **--gap** - Spacing"]


def test_hide_flag_wins_over_data() -> None:
    section = get_slots_template((Slot(name="icon"),), hide=True)

    assert section.is_empty()
    assert section.render() == ""


def test_assemble_details_skips_empty_fragments() -> None:
    text = assemble_details(
        "Intro",
        [DocSection(), DocSection(heading="Events", lines=["- **a**"]), DocSection()],
    )

    assert text == "Intro\n\n---\n\n### **Events:**\n- **a**"


def test_description_source_selects_summary() -> None:
    component = Component(name="A", description="Long", summary="Short")

    details = get_component_details_template(component, resolve_options({"descriptionSrc": "summary"}))

    assert details.startswith("Short\n\n---")
