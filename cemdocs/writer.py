"""Assembles and persists generated Markdown documents."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import List

from .config import CemDocsConfig
from .logging import get_logger
from .markdown import new_paragraph, title_case
from .static import FOOTER, HEADER, StaticContent


class WriteError(RuntimeError):
    """Raised when an output document cannot be written."""


def generate_breadcrumbs(
    relative_dir: str,
    *,
    library_title: str,
    readme_name: str = "README.md",
    source_dir: str = "src",
) -> str:
    """Return the breadcrumb paragraph for a document in ``relative_dir``.

    The first crumb links to the root document; each ancestor directory
    (except the source marker and the document's own directory) links to
    its own document with the matching number of ``../`` hops.
    """
    segments = [part for part in PurePosixPath(relative_dir).parts if part not in ("", ".")]
    if not segments:
        return ""

    def relative_url(to_level: int) -> str:
        return "../" * (len(segments) - to_level) + readme_name

    crumbs: List[str] = [f"[{library_title}]({relative_url(0)})"]
    for index, segment in enumerate(segments[:-1]):
        if segment == source_dir:
            continue
        crumbs.append(f"[{title_case(segment)}]({relative_url(index + 1)})")
    return new_paragraph(" » ".join(crumbs))


class DocumentWriter:
    """Writes documents under the project root as whole-file overwrites."""

    def __init__(
        self,
        config: CemDocsConfig,
        static: StaticContent | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        self.config = config
        self.root = config.root
        self.static = static or StaticContent(config.static_dir)
        self.dry_run = dry_run
        self.logger = get_logger("writer")

    def compose(self, document: str, body: str) -> str:
        """Return breadcrumbs, static header, ``body`` and static footer."""
        relative_dir = str(PurePosixPath(document).parent)
        base_path = self.root / relative_dir
        md = generate_breadcrumbs(
            relative_dir,
            library_title=self.config.library_title,
            readme_name=self.config.readme_name,
            source_dir=self.config.source_dir,
        )
        static_header = self.static.read(base_path, HEADER)
        if static_header:
            md += new_paragraph(static_header)
        md += new_paragraph(body.strip())
        static_footer = self.static.read(base_path, FOOTER)
        if static_footer:
            md += new_paragraph(static_footer)
        return md.rstrip() + "\n"

    def write(self, document: str, body: str) -> Path:
        """Compose and write ``document`` (a root-relative posix path)."""
        path = self.root / document
        content = self.compose(document, body)
        if self.dry_run:
            self.logger.info("Would write %s (dry-run)", document)
            return path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Failed to write {path}: {exc}") from exc
        self.logger.info("Wrote %s", document)
        return path


__all__ = ["DocumentWriter", "WriteError", "generate_breadcrumbs"]
