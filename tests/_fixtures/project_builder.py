"""Helper utilities for constructing temporary component projects in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Dict, Mapping

from cemdocs.config import CemDocsConfig, load_config


def field(name: str, **extra: Any) -> Dict[str, Any]:
    return {"kind": "field", "name": name, **extra}


def method(name: str, **extra: Any) -> Dict[str, Any]:
    return {"kind": "method", "name": name, **extra}


def element(name: str, tag_name: str, description: str = "", **extra: Any) -> Dict[str, Any]:
    """Return a documentable custom element declaration payload."""
    return {
        "kind": "class",
        "customElement": True,
        "name": name,
        "tagName": tag_name,
        "description": description,
        **extra,
    }


class ProjectBuilder:
    """Writes manifest, package metadata and side-files into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_manifest(self, modules: list[Dict[str, Any]]) -> Path:
        path = self.root / "custom-elements.json"
        path.write_text(json.dumps({"schemaVersion": "1.0.0", "modules": modules}), encoding="utf-8")
        return path

    def write_package(self, name: str = "@googlemaps/extended-component-library", exports: Mapping[str, Any] | None = None) -> Path:
        path = self.root / "package.json"
        path.write_text(json.dumps({"name": name, "exports": dict(exports or {})}), encoding="utf-8")
        return path

    def config(self) -> CemDocsConfig:
        return load_config(self.root)

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")


__all__ = ["ProjectBuilder", "element", "field", "method"]
