"""Renders one manifest declaration as a Markdown reference section."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Optional

from jinja2 import Environment, FileSystemLoader

from .config import CemDocsConfig
from .constants import (
    COMPONENTS_STYLED_AS_TEXT,
    CSS_CUSTOM_PROPERTY_DEFAULTS,
    DEFAULT_SLOT_LABEL,
    FRIENDLY_NAMES,
    GLOBAL_STYLE_TOKENS,
    GLOBAL_TOKEN_MARKER,
    NOT_REFLECTS_GLYPH,
    REFLECTS_GLYPH,
)
from .filters import public_members
from .markdown import as_code, header, markdown_table, new_paragraph, sanitize_for_table
from .models import Declaration, Member, Module
from .package import PackageInfo
from .static import APIS, EXAMPLES, StaticContent

_DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class DeclarationRenderer:
    """Converts declarations into Markdown fragments.

    Rendering reads only the manifest data, package metadata and optional
    side-files, so rendering the same declaration twice yields identical text.
    """

    def __init__(
        self,
        config: CemDocsConfig,
        package: PackageInfo,
        static: StaticContent | None = None,
    ) -> None:
        self.config = config
        self.package = package
        self.static = static or StaticContent(config.static_dir)
        self._env = self._create_env(config.templates_dir)

    def render(self, declaration: Declaration, module: Module, header_level: int) -> str:
        """Return the Markdown for ``declaration`` with its title at ``header_level``."""
        md = new_paragraph(header(header_level, self._title(declaration)))
        md += new_paragraph(declaration.description)

        if declaration.superclass == self.config.building_blocks.consumer_superclass:
            md += new_paragraph(self._template("data_consumer.md.j2"))

        md += self.render_import_section(
            header_level + 1, module.path, declaration.name, declaration.tag_name
        )
        md += self._fields_section(declaration, header_level + 1)
        md += self._slots_section(declaration, header_level + 1)
        md += self._methods_section(declaration, header_level + 1)
        md += self._events_section(declaration, header_level + 1)
        md += self._styling_section(declaration, header_level + 1)
        return md

    def library_path(self, module_path: str) -> str:
        """Map a source module path to its path inside the published package."""
        source = re.escape(self.config.source_dir)
        suffix = re.escape(self.config.source_suffix)
        path = re.sub(f"^{source}", self.config.library_dir, module_path, count=1)
        path = re.sub(f"{suffix}$", self.config.library_suffix, path, count=1)
        return "./" + path

    def render_import_section(
        self, header_level: int, module_path: str, class_name: str, tag_name: str
    ) -> str:
        """Return import instructions, or "" when the module is not exported."""
        alias = self.package.export_alias(self.library_path(module_path))
        if alias is None:
            return ""
        md = new_paragraph(header(header_level, "Importing"))
        md += new_paragraph(
            self._template(
                "importing.md.j2",
                tag_name=tag_name,
                class_name=class_name,
                package_name=self.package.name,
                alias=alias,
            )
        )
        return md

    def render_examples_section(self, base_path: Path, header_level: int) -> str:
        content = self.static.read(base_path, EXAMPLES)
        if not content:
            return ""
        return new_paragraph(header(header_level, "Examples")) + new_paragraph(content)

    def render_apis_section(self, base_path: Path, header_level: int) -> str:
        content = self.static.read(base_path, APIS)
        if not content:
            return ""
        md = new_paragraph(header(header_level, "APIs and Pricing"))
        return md + new_paragraph(self._template("apis.md.j2", content=content))

    @staticmethod
    def _title(declaration: Declaration) -> str:
        title = f"{as_code(f'<{declaration.tag_name}>')} (as class {as_code(declaration.name)})"
        friendly = FRIENDLY_NAMES.get(declaration.name)
        if friendly:
            title = f"{friendly}: {title}"
        return title

    def _fields_section(self, declaration: Declaration, level: int) -> str:
        fields = public_members(declaration, "field")
        if not fields:
            return ""
        rows: List[List[str]] = [
            ["Attribute", "Property", "Property type", "Description", "Default", "Reflects?"]
        ]
        for field in fields:
            rows.append(
                [
                    _code_cell(field.attribute),
                    _code_cell(field.name),
                    _code_cell(field.type_text),
                    sanitize_for_table(field.description),
                    _code_cell(field.default),
                    REFLECTS_GLYPH if field.reflects else NOT_REFLECTS_GLYPH,
                ]
            )
        md = new_paragraph(header(level, "Attributes and properties"))
        return md + new_paragraph(markdown_table(rows))

    def _slots_section(self, declaration: Declaration, level: int) -> str:
        if not declaration.slots:
            return ""
        md = new_paragraph(header(level, "Slots"))
        if any(slot.name for slot in declaration.slots):
            md += new_paragraph(self._template("slots.md.j2", tag_name=declaration.tag_name))
        rows: List[List[str]] = [["Slot name", "Description"]]
        for slot in declaration.slots:
            rows.append(
                [
                    sanitize_for_table(slot.name) or DEFAULT_SLOT_LABEL,
                    sanitize_for_table(slot.summary + slot.description),
                ]
            )
        return md + new_paragraph(markdown_table(rows))

    def _methods_section(self, declaration: Declaration, level: int) -> str:
        methods = public_members(declaration, "method")
        if not methods:
            return ""
        md = new_paragraph(header(level, "Methods"))
        for method in methods:
            md += self._method(declaration, method, level + 1)
        return md

    @staticmethod
    def _method(declaration: Declaration, method: Member, level: int) -> str:
        args = ", ".join(param.name for param in method.parameters)
        call = f"{method.name}({args})"
        static_comment = ""
        if method.static:
            call = f"{declaration.name}.{call}"
            static_comment = " (static method)"
        md = new_paragraph(header(level, as_code(call) + static_comment))
        md += new_paragraph(method.description)
        if method.return_type:
            md += new_paragraph(f"**Returns:** {as_code(method.return_type)}")
        if method.parameters:
            md += new_paragraph("**Parameters:**")
            rows: List[List[str]] = [["Name", "Optional?", "Type", "Description"]]
            for param in method.parameters:
                rows.append(
                    [
                        _code_cell(param.name),
                        "optional" if param.optional else "",
                        _code_cell(param.type_text),
                        sanitize_for_table(param.description),
                    ]
                )
            md += new_paragraph(markdown_table(rows))
        return md

    @staticmethod
    def _events_section(declaration: Declaration, level: int) -> str:
        if not declaration.events:
            return ""
        rows: List[List[str]] = [["Name", "Type", "Description"]]
        for event in declaration.events:
            rows.append(
                [
                    _code_cell(event.name),
                    _code_cell(event.type_text),
                    sanitize_for_table(event.description),
                ]
            )
        return new_paragraph(header(level, "Events")) + new_paragraph(markdown_table(rows))

    def _styling_section(self, declaration: Declaration, level: int) -> str:
        has_custom_styling = bool(declaration.css_properties or declaration.css_parts)
        has_simple_styling = declaration.name in COMPONENTS_STYLED_AS_TEXT
        if not (has_custom_styling or has_simple_styling):
            return ""

        md = new_paragraph(header(level, "Styling"))
        if has_simple_styling:
            return md + new_paragraph(
                self._template("styling_text.md.j2", tag_name=declaration.tag_name)
            )

        md += new_paragraph(self._template("styling.md.j2"))
        if declaration.css_properties:
            md += new_paragraph(header(level + 1, "CSS Custom Properties"))
            rows: List[List[str]] = [["Name", "Default", "Description"]]
            uses_global_tokens = False
            for prop in declaration.css_properties:
                description = prop.summary + prop.description
                default = prop.default or CSS_CUSTOM_PROPERTY_DEFAULTS.get(prop.name, "")
                if prop.name in GLOBAL_STYLE_TOKENS:
                    description += f" {GLOBAL_TOKEN_MARKER}"
                    uses_global_tokens = True
                rows.append(
                    [_code_cell(prop.name), _code_cell(default), sanitize_for_table(description)]
                )
            md += new_paragraph(markdown_table(rows))
            if uses_global_tokens:
                md += new_paragraph(self._template("global_tokens.md.j2", marker=GLOBAL_TOKEN_MARKER))
        if declaration.css_parts:
            md += new_paragraph(header(level + 1, "CSS Parts"))
            rows = [["Name", "Description"]]
            for part in declaration.css_parts:
                rows.append([_code_cell(part.name), sanitize_for_table(part.description)])
            md += new_paragraph(markdown_table(rows))
        return md

    def _template(self, name: str, **context: Any) -> str:
        return self._env.get_template(name).render(**context).strip()

    @staticmethod
    def _create_env(templates_dir: Optional[Path]) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _code_cell(text: str) -> str:
    return as_code(sanitize_for_table(text)) if text else ""


__all__ = ["DeclarationRenderer"]
