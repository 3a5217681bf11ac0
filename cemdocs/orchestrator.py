"""Pipeline orchestration for a documentation generation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional

from .config import CemDocsConfig, load_config
from .filters import should_document
from .grouping import InventoryGroup, group_modules, route_inventory
from .inventory import InventoryTable
from .logging import get_logger
from .manifest import load_manifest
from .markdown import as_code, header, new_paragraph
from .models import Module, PackageManifest
from .package import PackageInfo
from .renderer import DeclarationRenderer
from .static import HEADER, StaticContent
from .writer import DocumentWriter


@dataclass
class GenerationResult:
    """Documents produced by a generation pass."""

    documents: List[Path] = field(default_factory=list)
    dry_run: bool = False


@dataclass
class Inventories:
    root: InventoryTable = field(default_factory=InventoryTable)
    provider: InventoryTable = field(default_factory=InventoryTable)
    consumer: InventoryTable = field(default_factory=InventoryTable)

    def table(self, group: InventoryGroup) -> InventoryTable:
        return {
            InventoryGroup.ROOT: self.root,
            InventoryGroup.PROVIDER: self.provider,
            InventoryGroup.CONSUMER: self.consumer,
        }[group]


class Orchestrator:
    """Runs Reader, Filter, Grouping, Renderer, Inventory and Writer in order."""

    def __init__(
        self,
        config: CemDocsConfig,
        *,
        package: PackageInfo | None = None,
        static: StaticContent | None = None,
        renderer: DeclarationRenderer | None = None,
        writer: DocumentWriter | None = None,
        dry_run: bool = False,
    ) -> None:
        self.config = config
        self.static = static or StaticContent(config.static_dir)
        self.package = package or PackageInfo(config.package_path)
        self.renderer = renderer or DeclarationRenderer(config, self.package, self.static)
        self.writer = writer or DocumentWriter(config, self.static, dry_run=dry_run)
        self.logger = get_logger("orchestrator")

    @classmethod
    def from_path(
        cls, path: str | Path, *, manifest: Optional[str] = None, dry_run: bool = False
    ) -> "Orchestrator":
        """Build an orchestrator for the project rooted at ``path``."""
        root = Path(path).expanduser().resolve()
        config = load_config(root)
        if manifest:
            config.manifest = manifest
        return cls(config, dry_run=dry_run)

    def run(self, manifest: PackageManifest | None = None) -> GenerationResult:
        """Generate every document; loads the configured manifest when none is given."""
        self.logger.info("Generating docs for %s", self.config.root)
        if manifest is None:
            manifest = load_manifest(self.config.manifest_path)
        self.logger.debug("Manifest lists %d modules", len(manifest.modules))

        result = GenerationResult(dry_run=self.writer.dry_run)
        inventories = Inventories()

        for document, modules in group_modules(manifest, self.config.readme_name).items():
            body = self.render_document(document, modules, inventories)
            if not body and not self._has_static_header(document):
                self.logger.debug("Skipping %s: no documentable declarations", document)
                continue
            result.documents.append(self.writer.write(document, body))

        result.documents.append(
            self.writer.write(self._building_blocks_document(), self.building_blocks_body(inventories))
        )
        result.documents.append(self.writer.write(self.config.readme_name, self.root_body(inventories)))
        return result

    def render_document(
        self, document: str, modules: List[Module], inventories: Inventories
    ) -> str:
        """Render every documentable declaration of ``modules`` into one body."""
        base_path = self.config.root / PurePosixPath(document).parent
        # A hand-written header is assumed to carry the document title.
        header_level = 2 if self._has_static_header(document) else 1
        blocks = self.config.building_blocks

        md = ""
        for module in modules:
            for declaration in module.declarations:
                if not should_document(
                    declaration, module, internal_suffix=self.config.internal_suffix
                ):
                    continue
                md += new_paragraph(self.renderer.render(declaration, module, header_level))

                route = route_inventory(
                    document,
                    declaration,
                    building_blocks_dir=blocks.dir,
                    provider_class=blocks.provider_class,
                )
                inventories.table(route.group).add_row(
                    as_code(f"<{declaration.tag_name}>"), route.target, declaration.description
                )

                md += self.renderer.render_examples_section(base_path, header_level + 1)
                md += self.renderer.render_apis_section(base_path, header_level + 1)
        return md

    @staticmethod
    def building_blocks_body(inventories: Inventories) -> str:
        return (
            new_paragraph(header(2, "Data provider"))
            + new_paragraph(inventories.provider.render())
            + new_paragraph(header(2, "Details components"))
            + new_paragraph(inventories.consumer.render())
        )

    def root_body(self, inventories: Inventories) -> str:
        blocks = self.config.building_blocks
        synthetic_row = [
            f"[{blocks.title}]({self._building_blocks_document()})",
            blocks.description,
        ]
        return inventories.root.render(extra_rows=[synthetic_row])

    def _has_static_header(self, document: str) -> bool:
        base_path = self.config.root / PurePosixPath(document).parent
        return bool(self.static.read(base_path, HEADER))

    def _building_blocks_document(self) -> str:
        return str(PurePosixPath(self.config.building_blocks.dir) / self.config.readme_name)


__all__ = ["GenerationResult", "Inventories", "Orchestrator"]
