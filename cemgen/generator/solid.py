"""Solid-JS type declarations for custom elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Set, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..docs.templates import get_component_details_template
from ..logging import get_logger
from ..manifest.accessors import (
    get_component_properties,
    get_custom_event_types,
    get_member_description,
    get_member_type,
)
from ..manifest.extractor import get_components
from ..models import Component
from ..options import DEFAULT_FILE_NAME, DEFAULT_OUTDIR, Options, resolve_options
from ..output import OutputWriter, Writer

TEMPLATE_NAME = "solid-js.d.ts.j2"

OptionsInput = Union[Options, Mapping[str, Any], None]


@dataclass
class TypeMember:
    """One optional entry of a component's props type."""

    key: str
    type: str
    description: str


@dataclass
class ComponentType:
    """Props type rendered for a single component."""

    name: str
    members: List[TypeMember] = field(default_factory=list)


@dataclass
class ElementEntry:
    """Entry of the tag-name to props mapping."""

    key: str
    name: str
    details: str


class SolidTypeGenerator:
    """Renders and writes the Solid-JS declaration file for a manifest."""

    def __init__(self, writer: Writer | None = None, templates_dir: Path | None = None) -> None:
        self.writer = writer or OutputWriter()
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = self._create_env(self.templates_dir)
        self.logger = get_logger("generator.solid")

    def generate(self, manifest: Any, options: OptionsInput = None) -> Optional[Path]:
        """Render the declaration file and hand it to the writer."""
        resolved = resolve_options(options)
        if resolved.skip:
            self.logger.info("Skipping Solid-JS type generation")
            return None
        content = self.render(manifest, resolved)
        output_path = self.writer.save(
            resolved.outdir or DEFAULT_OUTDIR,
            resolved.file_name or DEFAULT_FILE_NAME,
            content,
        )
        if not resolved.hide_logs:
            self.logger.info('Generated "%s".', output_path)
        return output_path

    def render(self, manifest: Any, options: OptionsInput = None) -> str:
        """Return the declaration file text; performs no I/O."""
        resolved = resolve_options(options)
        components = get_components(manifest, resolved.exclude)
        tagged = [component for component in components if component.tag_name]
        component_names = [component.name for component in components if component.custom_element]
        self.logger.debug(
            "Rendering %d tagged components out of %d declarations", len(tagged), len(components)
        )

        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            global_import=self._global_import(components, component_names, resolved),
            component_imports=self._component_imports(components, component_names, resolved),
            global_events=resolved.global_events or "",
            components=[self._component_type(component, resolved) for component in tagged],
            elements=[self._element_entry(component, resolved) for component in tagged],
        )

    @staticmethod
    def _global_import(
        components: Sequence[Component],
        component_names: Sequence[str],
        options: Options,
    ) -> Optional[str]:
        if options.component_type_path is not None or not options.global_type_path:
            return None
        # Component classes are imported anyway; never repeat them as payload types.
        seen: Set[str] = {component.name for component in components}
        specifiers: List[str] = []
        for component in components:
            specifiers.append(_import_specifier(component.name, options.default_export))
            specifiers.extend(_payload_types(component, component_names, seen))
        return f'import type {{ {", ".join(specifiers)} }} from "{options.global_type_path}";'

    @staticmethod
    def _component_imports(
        components: Sequence[Component],
        component_names: Sequence[str],
        options: Options,
    ) -> List[str]:
        if options.component_type_path is None:
            return []
        seen: Set[str] = {component.name for component in components}
        statements: List[str] = []
        for component in components:
            specifiers = [_import_specifier(component.name, options.default_export)]
            specifiers.extend(_payload_types(component, component_names, seen))
            path = options.component_type_path(component.name, component.tag_name)
            statements.append(f'import type {{ {", ".join(specifiers)} }} from "{path}";')
        return statements

    @staticmethod
    def _component_type(component: Component, options: Options) -> ComponentType:
        imported = options.component_type_path is not None or bool(options.global_type_path)
        members: List[TypeMember] = []
        for attr in component.attributes or ():
            members.append(
                TypeMember(
                    key=attr.name,
                    type=f"{component.name}['{attr.field_name or attr.name}']"
                    if imported
                    else get_member_type(attr, options.types_src),
                    description=get_member_description(attr.description, attr.deprecated),
                )
            )
        for prop in get_component_properties(component) or ():
            members.append(
                TypeMember(
                    key=f"prop:{prop.name}",
                    type=f"{component.name}['{prop.name}']" if imported else get_member_type(prop, options.types_src),
                    description=get_member_description(prop.description, prop.deprecated),
                )
            )
        for event in component.events or ():
            payload = event.type.text if event.type is not None and event.type.text else "never"
            members.append(
                TypeMember(
                    key=f"on:{event.name}",
                    type=f"(e: CustomEvent<{payload}>) => void",
                    description=get_member_description(event.description, event.deprecated),
                )
            )
        return ComponentType(name=component.name, members=members)

    @staticmethod
    def _element_entry(component: Component, options: Options) -> ElementEntry:
        return ElementEntry(
            key=f"{options.prefix or ''}{component.tag_name}{options.suffix or ''}",
            name=component.name,
            details=get_component_details_template(component, options),
        )

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["doc_comment"] = format_doc_comment
        return env


def generate_solid_js_types(
    manifest: Any,
    options: OptionsInput = None,
    *,
    writer: Writer | None = None,
) -> Optional[Path]:
    """Write Solid-JS declarations for ``manifest``; returns the written path."""
    return SolidTypeGenerator(writer=writer).generate(manifest, options)


def format_doc_comment(text: str, indent: str = "") -> str:
    """Wrap ``text`` in a JSDoc comment, escaping comment terminators."""
    lines = (text or "").replace("*/", "*\\/").strip().splitlines()
    if not lines:
        return f"{indent}/** */"
    if len(lines) == 1:
        return f"{indent}/** {lines[0]} */"
    body = [f"{indent} * {line}".rstrip() for line in lines]
    return "\n".join([f"{indent}/**", *body, f"{indent} */"])


def _import_specifier(name: str, default_export: bool) -> str:
    return f"default as {name}" if default_export else name


def _payload_types(component: Component, component_names: Sequence[str], seen: Set[str]) -> List[str]:
    types = get_custom_event_types(component, component_names)
    if not types:
        return []
    fresh = [name for name in types.split(", ") if name not in seen]
    seen.update(fresh)
    return fresh


__all__ = [
    "ComponentType",
    "ElementEntry",
    "SolidTypeGenerator",
    "TypeMember",
    "format_doc_comment",
    "generate_solid_js_types",
]
