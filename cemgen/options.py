"""Generator options and the default-merge policy."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

from .manifest.accessors import DescriptionSource, TypeSource

DEFAULT_FILE_NAME = "solid-js.d.ts"
DEFAULT_OUTDIR = "./"

TypePathFn = Callable[[str, Optional[str]], str]
E = TypeVar("E", TypeSource, DescriptionSource)


class ConfigError(RuntimeError):
    """Raised when configuration values cannot be understood."""


@dataclass(frozen=True)
class DocLabels:
    """Heading overrides for documentation sections."""

    slots: Optional[str] = None
    events: Optional[str] = None
    css_properties: Optional[str] = None
    css_parts: Optional[str] = None
    methods: Optional[str] = None


@dataclass(frozen=True)
class Options:
    """Fully resolved settings for a single generator run."""

    file_name: str = DEFAULT_FILE_NAME
    outdir: str = DEFAULT_OUTDIR
    exclude: Tuple[str, ...] = ()
    prefix: str = ""
    suffix: str = ""
    component_type_path: Optional[TypePathFn] = None
    global_type_path: Optional[str] = None
    types_src: Optional[TypeSource] = None
    default_export: bool = False
    global_events: str = ""
    description_src: Optional[DescriptionSource] = None
    hide_slot_docs: bool = False
    hide_event_docs: bool = False
    hide_css_properties_docs: bool = False
    hide_css_parts_docs: bool = False
    hide_method_docs: bool = False
    labels: DocLabels = field(default_factory=DocLabels)
    skip: bool = False
    hide_logs: bool = False


# camelCase spellings used by manifest tooling configs.
_ALIASES: Dict[str, str] = {
    "fileName": "file_name",
    "componentTypePath": "component_type_path",
    "globalTypePath": "global_type_path",
    "typesSrc": "types_src",
    "defaultExport": "default_export",
    "globalEvents": "global_events",
    "descriptionSrc": "description_src",
    "hideSlotDocs": "hide_slot_docs",
    "hideEventDocs": "hide_event_docs",
    "hideCssPropertiesDocs": "hide_css_properties_docs",
    "hideCssPartsDocs": "hide_css_parts_docs",
    "hideMethodDocs": "hide_method_docs",
    "hideLogs": "hide_logs",
    "cssProperties": "css_properties",
    "cssParts": "css_parts",
}

_OPTION_FIELDS = frozenset(item.name for item in fields(Options))
_LABEL_FIELDS = frozenset(item.name for item in fields(DocLabels))


def resolve_options(partial: Union[Options, Mapping[str, Any], None] = None) -> Options:
    """Return fully populated options for ``partial``.

    Missing keys take their defaults; keys that are present keep their value,
    even when it is ``None`` or otherwise falsy. ``partial`` is not modified.
    """
    if isinstance(partial, Options):
        return replace(
            partial,
            types_src=_as_enum(TypeSource, partial.types_src, "types_src"),
            description_src=_as_enum(DescriptionSource, partial.description_src, "description_src"),
        )
    values: Dict[str, Any] = {}
    for key, value in (partial or {}).items():
        name = _ALIASES.get(key, key)
        if name in _OPTION_FIELDS:
            values[name] = value

    if "exclude" in values and values["exclude"] is not None:
        values["exclude"] = _as_names(values["exclude"])
    if "types_src" in values:
        values["types_src"] = _as_enum(TypeSource, values["types_src"], "types_src")
    if "description_src" in values:
        values["description_src"] = _as_enum(DescriptionSource, values["description_src"], "description_src")
    if "labels" in values:
        values["labels"] = _as_labels(values["labels"])
    if isinstance(values.get("component_type_path"), str):
        values["component_type_path"] = type_path_template(values["component_type_path"])
    return Options(**values)


def type_path_template(template: str) -> TypePathFn:
    """Turn a ``{name}``/``{tag_name}`` format string into an import path function."""

    def _resolve(name: str, tag_name: Optional[str]) -> str:
        return template.format(name=name, tag_name=tag_name or "")

    return _resolve


def _as_names(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    raise ConfigError("exclude must be a list of component names")


def _as_enum(enum_type: Type[E], value: Any, key: str) -> Optional[E]:
    if value is None or value == "":
        return None
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_type)
        raise ConfigError(f"Unsupported {key} '{value}' (expected one of: {allowed})") from exc


def _as_labels(value: Any) -> DocLabels:
    if value is None:
        return DocLabels()
    if isinstance(value, DocLabels):
        return value
    if not isinstance(value, Mapping):
        raise ConfigError("labels must be a mapping of section names to headings")
    labels: Dict[str, Optional[str]] = {}
    for key, label in value.items():
        name = _ALIASES.get(key, key)
        if name in _LABEL_FIELDS:
            labels[name] = None if label is None else str(label)
    return DocLabels(**labels)


__all__ = [
    "ConfigError",
    "DEFAULT_FILE_NAME",
    "DEFAULT_OUTDIR",
    "DocLabels",
    "Options",
    "TypePathFn",
    "resolve_options",
    "type_path_template",
]
