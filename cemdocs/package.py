"""Package metadata used to build import snippets."""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .logging import get_logger
from .manifest import read_json

_LOGGER = get_logger("package")


class PackageInfo:
    """Lazily loads package metadata and the export-alias lookup.

    Both values are read on first use and reused for the rest of the run.
    Pass ``data`` to skip the file read entirely.
    """

    def __init__(self, path: Path | None = None, *, data: Mapping[str, Any] | None = None) -> None:
        self._path = path
        self._data = dict(data) if data is not None else None

    @cached_property
    def data(self) -> Dict[str, Any]:
        if self._data is not None:
            return self._data
        if self._path is None or not self._path.exists():
            _LOGGER.warning("Package metadata not found at %s; import sections are skipped", self._path)
            return {}
        return read_json(self._path)

    @property
    def name(self) -> str:
        value = self.data.get("name")
        return value if isinstance(value, str) else ""

    @cached_property
    def exports_lookup(self) -> Dict[str, str]:
        """Map an exported file path to its export alias."""
        exports = self.data.get("exports")
        lookup: Dict[str, str] = {}
        if not isinstance(exports, dict):
            return lookup
        for alias, export_path in exports.items():
            # Conditional exports map to objects; only plain paths are importable aliases.
            if isinstance(export_path, str):
                lookup[export_path] = alias
        return lookup

    def export_alias(self, export_path: str) -> Optional[str]:
        """Return the alias for ``export_path`` without its leading ``./``."""
        alias = self.exports_lookup.get(export_path)
        if alias is None:
            return None
        return alias[2:] if alias.startswith("./") else alias


__all__ = ["PackageInfo"]
