"""Tests for cemdocs.orchestrator."""

from __future__ import annotations

from cemdocs.manifest import parse_manifest
from cemdocs.orchestrator import Orchestrator
from tests._fixtures.project_builder import ProjectBuilder, element, field

_BLOCKS = "src/place_building_blocks"


def _table_lines(markdown: str) -> list[str]:
    return [line for line in markdown.splitlines() if line.startswith("|")]


def test_single_declaration_with_two_fields(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [
            {
                "path": "src/fancy/fancy.ts",
                "declarations": [
                    element(
                        "FancyThing",
                        "x-fancy",
                        "Fancy element.",
                        members=[field("color", reflects=True), field("size")],
                    )
                ],
            }
        ]
    )
    project_builder.write_package()

    result = Orchestrator(project_builder.config()).run()

    document = project_builder.read("src/fancy/README.md")
    rows = _table_lines(document)
    assert document.count("Attributes and properties") == 1
    assert len(rows) == 4
    assert rows[2].rstrip(" |").endswith("✅")
    assert rows[3].rstrip(" |").endswith("❌")
    assert document.splitlines()[2] == "# `<x-fancy>` (as class `FancyThing`)"
    assert project_builder.root / "src" / "fancy" / "README.md" in result.documents


def test_empty_manifest_writes_root_with_synthetic_row_only(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest([])

    result = Orchestrator(project_builder.config()).run()

    root = project_builder.read("README.md")
    rows = _table_lines(root)
    assert len(rows) == 3
    assert rows[0].startswith("| Component")
    assert rows[2].startswith(f"| [Place building blocks]({_BLOCKS}/README.md)")
    assert len(result.documents) == 2
    blocks = project_builder.read(f"{_BLOCKS}/README.md")
    assert "## Data provider" in blocks
    assert "## Details components" in blocks


def test_inventories_are_routed_and_sorted(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [
            {"path": "src/split_layout/split_layout.ts", "declarations": [element("SplitLayout", "gmpx-split-layout", "Split.\n\nMore.")]},
            {"path": "src/api_loader/api_loader.ts", "declarations": [element("APILoader", "gmpx-api-loader", "Loads.")]},
            {"path": f"{_BLOCKS}/place_rating/place_rating.ts", "declarations": [element("PlaceRating", "gmpx-place-rating", "Stars.")]},
            {"path": f"{_BLOCKS}/place_data_provider/place_data_provider.ts", "declarations": [element("PlaceDataProvider", "gmpx-place-data-provider", "Provides.")]},
            {"path": f"{_BLOCKS}/place_field_text/place_field_text.ts", "declarations": [element("PlaceFieldText", "gmpx-place-field-text", "Text.")]},
        ]
    )
    project_builder.write_package()

    Orchestrator(project_builder.config()).run()

    root_rows = _table_lines(project_builder.read("README.md"))[2:]
    assert len(root_rows) == 3
    assert "gmpx-api-loader" in root_rows[0] and "(src/api_loader/README.md)" in root_rows[0]
    assert "gmpx-split-layout" in root_rows[1] and "More." not in root_rows[1]
    assert "Place building blocks" in root_rows[2]

    blocks = project_builder.read(f"{_BLOCKS}/README.md")
    provider_part, consumer_part = blocks.split("## Details components")
    assert "(place_data_provider/README.md)" in provider_part
    assert "gmpx-place-rating" not in provider_part
    consumer_rows = _table_lines(consumer_part)[2:]
    assert "gmpx-place-field-text" in consumer_rows[0]
    assert "gmpx-place-rating" in consumer_rows[1]
    assert blocks.startswith("[Extended Component Library](../../README.md)\n\n")

    rating = project_builder.read(f"{_BLOCKS}/place_rating/README.md")
    assert rating.startswith(
        "[Extended Component Library](../../../README.md) » [Place Building Blocks](../README.md)\n\n"
    )


def test_static_header_lowers_declaration_heading_level(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [{"path": "src/fancy/fancy.ts", "declarations": [element("FancyThing", "x-fancy", "Fancy.")]}]
    )
    project_builder.write(
        {
            "src/fancy/doc_src/README.header.md": "# Fancy components\n",
            "src/fancy/doc_src/README.examples.md": "Use it.\n",
        }
    )

    Orchestrator(project_builder.config()).run()

    document = project_builder.read("src/fancy/README.md")
    assert document.count("# Fancy components") == 1
    assert "\n## `<x-fancy>` (as class `FancyThing`)\n" in document
    assert "\n### Examples\n\nUse it.\n" in document
    assert document.index("# Fancy components") < document.index("## `<x-fancy>`")


def test_modules_without_documentable_declarations_are_skipped(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [
            {
                "path": "src/internal/helper.ts",
                "declarations": [
                    element("Helper", "gmpx-helper-internal"),
                    {"kind": "function", "name": "util"},
                ],
            }
        ]
    )

    result = Orchestrator(project_builder.config()).run()

    assert not (project_builder.root / "src" / "internal" / "README.md").exists()
    assert len(result.documents) == 2
    assert len(_table_lines(project_builder.read("README.md"))) == 3


def test_modules_sharing_a_directory_share_one_document(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [
            {"path": "src/layouts/split.ts", "declarations": [element("SplitLayout", "gmpx-split-layout")]},
            {"path": "src/layouts/overlay.ts", "declarations": [element("OverlayLayout", "gmpx-overlay-layout")]},
        ]
    )

    Orchestrator(project_builder.config()).run()

    document = project_builder.read("src/layouts/README.md")
    assert document.index("gmpx-split-layout") < document.index("gmpx-overlay-layout")


def test_run_accepts_preparsed_manifest_and_dry_run(project_builder: ProjectBuilder) -> None:
    manifest = parse_manifest(
        {"modules": [{"path": "src/fancy/fancy.ts", "declarations": [element("FancyThing", "x-fancy")]}]}
    )

    result = Orchestrator(project_builder.config(), dry_run=True).run(manifest)

    assert result.dry_run is True
    assert len(result.documents) == 3
    assert not any(path.exists() for path in result.documents)


def test_from_path_applies_manifest_override(project_builder: ProjectBuilder) -> None:
    project_builder.write({"build/cem.json": '{"modules": []}'})

    orchestrator = Orchestrator.from_path(project_builder.root, manifest="build/cem.json")

    assert orchestrator.config.manifest_path == project_builder.root.resolve() / "build" / "cem.json"
    assert orchestrator.run().documents


def test_static_header_alone_still_publishes_document(project_builder: ProjectBuilder) -> None:
    project_builder.write_manifest(
        [{"path": "src/guide/guide.ts", "declarations": [{"kind": "function", "name": "helper"}]}]
    )
    project_builder.write({"src/guide/doc_src/README.header.md": "# Guide\n\nRead me first.\n"})

    result = Orchestrator(project_builder.config()).run()

    document = project_builder.read("src/guide/README.md")
    assert document == "[Extended Component Library](../../README.md)\n\n# Guide\n\nRead me first.\n"
    assert project_builder.root / "src" / "guide" / "README.md" in result.documents
    assert len(_table_lines(project_builder.read("README.md"))) == 3
