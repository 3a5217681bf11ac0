"""Tests for package metadata lookups."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cemdocs.manifest import ManifestError
from cemdocs.package import PackageInfo


def test_exports_lookup_inverts_alias_map() -> None:
    package = PackageInfo(
        data={
            "name": "@acme/widgets",
            "exports": {
                ".": "./lib/index.js",
                "./icon_button.js": "./lib/icon_button/icon_button.js",
                "./conditional": {"import": "./lib/x.js"},
            },
        }
    )

    assert package.name == "@acme/widgets"
    assert package.exports_lookup == {
        "./lib/index.js": ".",
        "./lib/icon_button/icon_button.js": "./icon_button.js",
    }
    assert package.export_alias("./lib/icon_button/icon_button.js") == "icon_button.js"
    assert package.export_alias("./lib/missing.js") is None


def test_package_file_is_read_once(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "first", "exports": {}}), encoding="utf-8")
    package = PackageInfo(path)

    assert package.name == "first"
    path.write_text(json.dumps({"name": "second"}), encoding="utf-8")
    assert package.name == "first"


def test_missing_package_file_yields_no_exports(tmp_path: Path) -> None:
    package = PackageInfo(tmp_path / "package.json")

    assert package.name == ""
    assert package.exports_lookup == {}


def test_invalid_package_file_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ManifestError):
        PackageInfo(path).exports_lookup
