"""Configuration loading for cemdocs (.cemdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".cemdocs.yml"

_DEFAULT_BUILDING_BLOCKS_DESCRIPTION = (
    "The place data provider component, along with individual place details components, "
    "lets you choose how to display Google Maps place information like opening hours, "
    "star reviews, and photos in a new, custom view. "
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class BuildingBlocksConfig:
    """The component subtree documented with provider/consumer inventories."""

    dir: str = "src/place_building_blocks"
    title: str = "Place building blocks"
    description: str = _DEFAULT_BUILDING_BLOCKS_DESCRIPTION
    provider_class: str = "PlaceDataProvider"
    consumer_superclass: str = "PlaceDataConsumer"


@dataclass
class CemDocsConfig:
    """Represents the settings defined in .cemdocs.yml."""

    root: Path
    manifest: str = "custom-elements.json"
    package: str = "package.json"
    library_title: str = "Extended Component Library"
    readme_name: str = "README.md"
    source_dir: str = "src"
    source_suffix: str = "ts"
    library_dir: str = "lib"
    library_suffix: str = "js"
    static_dir: str = "doc_src"
    internal_suffix: str = "-internal"
    templates_dir: Optional[Path] = None
    building_blocks: BuildingBlocksConfig = field(default_factory=BuildingBlocksConfig)

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest

    @property
    def package_path(self) -> Path:
        return self.root / self.package


_STRING_KEYS = (
    "manifest",
    "package",
    "library_title",
    "readme_name",
    "source_dir",
    "source_suffix",
    "library_dir",
    "library_suffix",
    "static_dir",
    "internal_suffix",
)

_BUILDING_BLOCK_KEYS = ("dir", "title", "description", "provider_class", "consumer_superclass")


def load_config(config_path: Path) -> CemDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CemDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = CemDocsConfig(root=root)
    for key in _STRING_KEYS:
        value = _as_str(data.get(key))
        if value:
            setattr(config, key, value)

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    blocks_data = _as_dict(data.get("building_blocks"))
    for key in _BUILDING_BLOCK_KEYS:
        value = _as_str(blocks_data.get(key))
        if value:
            setattr(config.building_blocks, key, value)
    config.building_blocks.dir = config.building_blocks.dir.strip("/")

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["BuildingBlocksConfig", "CemDocsConfig", "ConfigError", "load_config"]
