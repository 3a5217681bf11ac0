"""Optional hand-written Markdown side-files (``doc_src/README.<section>.md``)."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger

_LOGGER = get_logger("static")

HEADER = "header"
FOOTER = "footer"
EXAMPLES = "examples"
APIS = "apis"


class StaticContent:
    """Reads side-files for a document directory; missing files read as empty."""

    def __init__(self, static_dir: str = "doc_src") -> None:
        self.static_dir = static_dir

    def path_for(self, base_path: Path, section: str) -> Path:
        return base_path / self.static_dir / f"README.{section}.md"

    def read(self, base_path: Path, section: str) -> str:
        """Return the stripped side-file text, or an empty string when absent."""
        path = self.path_for(base_path, section)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except OSError as exc:
            _LOGGER.debug("Ignoring unreadable side-file %s: %s", path, exc)
            return ""
        return text.strip()


__all__ = ["APIS", "EXAMPLES", "FOOTER", "HEADER", "StaticContent"]
