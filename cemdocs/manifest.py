"""Reads a custom elements manifest into the in-memory data model.

Parsing is permissive: absent or mistyped fields fall back to empty values
so that a partially filled manifest still renders, with degraded output,
instead of aborting the run. Only an unreadable file or a root that is not
a JSON object is treated as fatal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .logging import get_logger
from .models import (
    CssPart,
    CssProperty,
    Declaration,
    Event,
    Member,
    Module,
    PackageManifest,
    Parameter,
    Slot,
)

_LOGGER = get_logger("manifest")


class ManifestError(RuntimeError):
    """Raised when a JSON input resource cannot be read or decoded."""


def read_json(path: Path) -> Dict[str, Any]:
    """Read a JSON object from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to read {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path.name} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} must contain a JSON object at the root")
    return data


def load_manifest(path: Path) -> PackageManifest:
    """Load and parse the manifest stored at ``path``."""
    manifest = parse_manifest(read_json(path))
    _LOGGER.debug("Loaded %d modules from %s", len(manifest.modules), path)
    return manifest


def parse_manifest(data: Mapping[str, Any]) -> PackageManifest:
    return PackageManifest(
        modules=[_module_from_dict(item) for item in _as_list(data.get("modules"))]
    )


def _module_from_dict(payload: Any) -> Module:
    data = _as_dict(payload)
    return Module(
        path=_as_str(data.get("path")),
        declarations=[_declaration_from_dict(item) for item in _as_list(data.get("declarations"))],
    )


def _declaration_from_dict(payload: Any) -> Declaration:
    data = _as_dict(payload)
    superclass = _as_dict(data.get("superclass"))
    return Declaration(
        kind=_as_str(data.get("kind")),
        name=_as_str(data.get("name")),
        tag_name=_as_str(data.get("tagName")),
        custom_element=bool(data.get("customElement")),
        description=_as_str(data.get("description")),
        superclass=_as_optional_str(superclass.get("name")),
        members=[_member_from_dict(item) for item in _as_list(data.get("members"))],
        slots=[_slot_from_dict(item) for item in _as_list(data.get("slots"))],
        events=[_event_from_dict(item) for item in _as_list(data.get("events"))],
        css_properties=[_css_property_from_dict(item) for item in _as_list(data.get("cssProperties"))],
        css_parts=[_css_part_from_dict(item) for item in _as_list(data.get("cssParts"))],
    )


def _member_from_dict(payload: Any) -> Member:
    data = _as_dict(payload)
    return_type: Optional[str] = None
    if "return" in data:
        return_type = _type_text(_as_dict(data.get("return")))
    return Member(
        kind=_as_str(data.get("kind")),
        name=_as_str(data.get("name")),
        description=_as_str(data.get("description")),
        privacy=_as_optional_str(data.get("privacy")),
        type_text=_type_text(data),
        default=_as_str(data.get("default")),
        attribute=_as_str(data.get("attribute")),
        reflects=bool(data.get("reflects")),
        static=bool(data.get("static")),
        parameters=[_parameter_from_dict(item) for item in _as_list(data.get("parameters"))],
        return_type=return_type,
    )


def _parameter_from_dict(payload: Any) -> Parameter:
    data = _as_dict(payload)
    return Parameter(
        name=_as_str(data.get("name")),
        type_text=_type_text(data),
        description=_as_str(data.get("description")),
        optional=bool(data.get("optional")),
    )


def _event_from_dict(payload: Any) -> Event:
    data = _as_dict(payload)
    return Event(
        name=_as_str(data.get("name")),
        type_text=_type_text(data),
        description=_as_str(data.get("description")),
    )


def _slot_from_dict(payload: Any) -> Slot:
    data = _as_dict(payload)
    return Slot(
        name=_as_str(data.get("name")),
        summary=_as_str(data.get("summary")),
        description=_as_str(data.get("description")),
    )


def _css_property_from_dict(payload: Any) -> CssProperty:
    data = _as_dict(payload)
    return CssProperty(
        name=_as_str(data.get("name")),
        summary=_as_str(data.get("summary")),
        description=_as_str(data.get("description")),
        default=_as_str(data.get("default")),
    )


def _css_part_from_dict(payload: Any) -> CssPart:
    data = _as_dict(payload)
    return CssPart(
        name=_as_str(data.get("name")),
        description=_as_str(data.get("description")),
    )


def _type_text(data: Mapping[str, Any]) -> str:
    return _as_str(_as_dict(data.get("type")).get("text"))


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = ["ManifestError", "load_manifest", "parse_manifest", "read_json"]
