"""Assigns modules to output documents and routes inventory rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Dict, List

from .models import Declaration, Module, PackageManifest

README_NAME = "README.md"


class InventoryGroup(str, Enum):
    """Inventory table that a documented component is listed in."""

    ROOT = "root"
    PROVIDER = "provider"
    CONSUMER = "consumer"


@dataclass(frozen=True)
class InventoryRoute:
    group: InventoryGroup
    target: str


def readme_for_module(module_path: str, readme_name: str = README_NAME) -> str:
    """Return the document path for a module: its directory plus ``readme_name``.

    >>> readme_for_module("a/b/c.ts")
    'a/b/README.md'
    """
    parent = PurePosixPath(module_path).parent
    return str(parent / readme_name) if str(parent) != "." else readme_name


def group_modules(
    manifest: PackageManifest, readme_name: str = README_NAME
) -> Dict[str, List[Module]]:
    """Group modules by destination document, keeping manifest order."""
    grouped: Dict[str, List[Module]] = {}
    for module in manifest.modules:
        grouped.setdefault(readme_for_module(module.path, readme_name), []).append(module)
    return grouped


def is_under(document: str, directory: str) -> bool:
    """Return True when ``document`` lives inside ``directory``."""
    doc_parts = PurePosixPath(document).parts
    dir_parts = PurePosixPath(directory).parts
    return bool(dir_parts) and doc_parts[: len(dir_parts)] == dir_parts and len(doc_parts) > len(dir_parts)


def route_inventory(
    document: str,
    declaration: Declaration,
    *,
    building_blocks_dir: str,
    provider_class: str,
) -> InventoryRoute:
    """Pick the inventory table and link target for a documented declaration.

    Building-block documents link relative to the building-blocks directory;
    everything else links relative to the project root.
    """
    if is_under(document, building_blocks_dir):
        target = str(PurePosixPath(document).relative_to(building_blocks_dir))
        if declaration.name == provider_class:
            return InventoryRoute(InventoryGroup.PROVIDER, target)
        return InventoryRoute(InventoryGroup.CONSUMER, target)
    return InventoryRoute(InventoryGroup.ROOT, document)


__all__ = [
    "InventoryGroup",
    "InventoryRoute",
    "README_NAME",
    "group_modules",
    "is_under",
    "readme_for_module",
    "route_inventory",
]
