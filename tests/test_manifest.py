"""Tests for readmegen.manifest."""

from __future__ import annotations

from pathlib import Path

from readmegen.manifest import PackageManifest, load_manifest, normalize_manifest


def test_missing_manifest_yields_defaults(tmp_path: Path) -> None:
    project = tmp_path / "widget"
    project.mkdir()

    manifest = load_manifest(project)

    assert manifest == PackageManifest(name="widget")
    assert manifest.version == "0.0.0"
    assert manifest.license == "MIT"
    assert manifest.entry_point == "index.js"
    assert manifest.dependencies == []
    assert manifest.bin == {}


def test_malformed_manifest_is_treated_as_empty(tmp_path: Path) -> None:
    project = tmp_path / "broken"
    project.mkdir()
    (project / "package.json").write_text("{ not json", encoding="utf-8")

    manifest = load_manifest(project)

    assert manifest.name == "broken"
    assert manifest.license == "MIT"


def test_non_object_manifest_is_treated_as_empty(tmp_path: Path) -> None:
    project = tmp_path / "listy"
    project.mkdir()
    (project / "package.json").write_text("[1, 2, 3]", encoding="utf-8")

    assert load_manifest(project).name == "listy"


def test_normalize_keeps_declaration_order_and_fields() -> None:
    manifest = normalize_manifest(
        {
            "name": "demo",
            "version": "2.1.0",
            "description": "A demo",
            "license": "Apache-2.0",
            "author": {"name": "Ada", "email": "ada@example.com"},
            "homepage": "https://demo.dev",
            "repository": {"type": "git", "url": "git+https://github.com/acme/demo.git"},
            "scripts": {"test": "vitest", "build": "tsc", "bogus": 3},
            "dependencies": {"zod": "^3", "express": "^4", "axios": "^1"},
            "devDependencies": {"vitest": "^1"},
            "main": "dist/index.js",
            "engines": {"node": ">=18"},
            "keywords": ["cli", 7, "docs"],
        },
        fallback_name="ignored",
    )

    assert manifest.name == "demo"
    assert manifest.author == "Ada"
    assert manifest.repository == "https://github.com/acme/demo"
    assert manifest.dependencies == ["zod", "express", "axios"]
    assert manifest.dev_dependencies == ["vitest"]
    assert manifest.scripts == {"test": "vitest", "build": "tsc"}
    assert list(manifest.scripts) == ["test", "build"]
    assert manifest.entry_point == "dist/index.js"
    assert manifest.engines == {"node": ">=18"}
    assert manifest.keywords == ["cli", "docs"]


def test_string_bin_uses_package_name_or_cli() -> None:
    named = normalize_manifest({"name": "tool", "bin": "./cli.js"}, fallback_name="dir")
    unnamed = normalize_manifest({"bin": "./cli.js"}, fallback_name="dir")

    assert named.bin == {"tool": "./cli.js"}
    assert unnamed.bin == {"cli": "./cli.js"}
    assert unnamed.name == "dir"


def test_string_repository_and_author_are_kept() -> None:
    manifest = normalize_manifest(
        {"repository": "https://github.com/acme/demo", "author": "Grace <g@example.com>"},
        fallback_name="demo",
    )

    assert manifest.repository == "https://github.com/acme/demo"
    assert manifest.author == "Grace <g@example.com>"


def test_wrongly_typed_fields_fall_back_to_defaults() -> None:
    manifest = normalize_manifest(
        {
            "name": 42,
            "license": ["MIT"],
            "dependencies": ["react"],
            "scripts": "npm test",
            "bin": 5,
            "keywords": "cli",
        },
        fallback_name="fallback",
    )

    assert manifest.name == "fallback"
    assert manifest.license == "MIT"
    assert manifest.dependencies == []
    assert manifest.scripts == {}
    assert manifest.bin == {}
    assert manifest.keywords == []
