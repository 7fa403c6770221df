"""Tests for cemgen.manifest.extractor."""

from __future__ import annotations

from cemgen.manifest.extractor import get_components
from cemgen.models import TypeRef
from tests._fixtures.manifest_builder import ManifestBuilder


def test_get_components_preserves_manifest_order(manifest_builder: ManifestBuilder) -> None:
    manifest = (
        manifest_builder.element("Alpha", "x-alpha")
        .element("Beta", "x-beta")
        .element("Gamma", "x-gamma")
        .build()
    )

    names = [component.name for component in get_components(manifest)]

    assert names == ["Alpha", "Beta", "Gamma"]


def test_get_components_drops_excluded_names(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.element("Alpha", "x-alpha").element("Beta", "x-beta").build()

    components = get_components(manifest, ["Alpha"])

    assert [component.name for component in components] == ["Beta"]


def test_get_components_keeps_declarations_without_tag(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.element("BaseElement").element("Button", "my-button").build()

    components = get_components(manifest)

    assert [component.name for component in components] == ["BaseElement", "Button"]
    assert components[0].tag_name is None
    assert components[0].custom_element is True


def test_get_components_skips_plain_classes_and_functions(manifest_builder: ManifestBuilder) -> None:
    manifest = (
        manifest_builder.declaration({"kind": "class", "name": "Helper"})
        .declaration({"kind": "function", "name": "register"})
        .declaration({"kind": "class", "name": "Tagged", "tagName": "x-tagged"})
        .build()
    )

    components = get_components(manifest)

    assert [component.name for component in components] == ["Tagged"]
    assert components[0].custom_element is False


def test_missing_collections_stay_absent(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.element("Button", "my-button", slots=[], events=[]).build()

    component = get_components(manifest)[0]

    assert component.attributes is None
    assert component.properties is None
    assert component.methods is None
    assert component.css_properties is None
    assert component.css_parts is None
    assert component.slots == ()
    assert component.events == ()


def test_members_split_into_public_properties_and_methods(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.element(
        "Input",
        "x-input",
        members=[
            {"kind": "field", "name": "value", "type": {"text": "string"}, "description": "Current value"},
            {"kind": "field", "name": "_internal", "privacy": "private"},
            {"kind": "field", "name": "shadowRootOptions", "static": True},
            {"kind": "field", "name": "#secret"},
            {
                "kind": "method",
                "name": "focus",
                "parameters": [{"name": "options", "type": {"text": "FocusOptions"}}],
                "return": {"type": {"text": "void"}},
            },
            {"kind": "method", "name": "handleInput", "privacy": "protected"},
        ],
    ).build()

    component = get_components(manifest)[0]

    assert [prop.name for prop in component.properties] == ["value"]
    assert component.properties[0].type == TypeRef(text="string")
    assert [method.name for method in component.methods] == ["focus"]
    focus = component.methods[0]
    assert focus.parameters[0].name == "options"
    assert focus.parameters[0].type == TypeRef(text="FocusOptions")
    assert focus.return_type == TypeRef(text="void")


def test_attribute_fields_are_normalised(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.element(
        "Button",
        "my-button",
        attributes=[
            {
                "name": "size",
                "fieldName": "size",
                "type": {"text": "string"},
                "parsedType": {"text": "'small' | 'large'"},
                "description": "Button size",
                "deprecated": "Use scale instead",
            }
        ],
        slots=[{"name": "", "description": "Label"}, {"name": "icon"}],
        cssProperties=[{"name": "--button-color", "default": "red"}],
    ).build()

    component = get_components(manifest)[0]
    attr = component.attributes[0]

    assert attr.field_name == "size"
    assert attr.parsed_type == TypeRef(text="'small' | 'large'")
    assert attr.expanded_type is None
    assert attr.deprecated == "Use scale instead"
    assert component.slots[0].name is None
    assert component.slots[1].name == "icon"
    assert component.css_properties[0].default == "red"


def test_malformed_manifest_yields_no_components() -> None:
    assert get_components(None) == []
    assert get_components({"modules": "nope"}) == []
    assert get_components({"modules": [None, {"declarations": None}, {"declarations": [42]}]}) == []


def test_declaration_without_name_does_not_raise(manifest_builder: ManifestBuilder) -> None:
    manifest = manifest_builder.declaration({"kind": "class", "customElement": True, "tagName": "x-anon"}).build()

    component = get_components(manifest)[0]

    assert component.name == ""
    assert component.tag_name == "x-anon"
