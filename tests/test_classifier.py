"""Tests for readmegen.classifier."""

from __future__ import annotations

from readmegen.classifier import FRAMEWORKS, classify, detect_frameworks, detect_languages


def test_frameworks_follow_table_order_not_input_order() -> None:
    frameworks = detect_frameworks(["vite", "express"], ["react", "jest"])

    assert frameworks == ["React", "Express", "Jest", "Vite"]


def test_frameworks_need_exact_package_names() -> None:
    assert detect_frameworks(["react-dom", "next-auth"], []) == []
    assert detect_frameworks(["@angular/core"], []) == ["Angular"]


def test_frameworks_use_dependency_union() -> None:
    assert detect_frameworks(["react"], ["react", "vitest"]) == ["React", "Vitest"]


def test_framework_table_has_unique_packages() -> None:
    packages = [package for package, _ in FRAMEWORKS]
    assert len(packages) == len(set(packages))


def test_languages_are_unique_in_first_seen_order() -> None:
    languages = detect_languages([".py", ".ts", ".tsx", ".md", ".py", ".scss"])

    assert languages == ["Python", "TypeScript", "SCSS"]


def test_language_lookup_is_case_sensitive() -> None:
    assert detect_languages([".TS", ".Py", ".JS"]) == []
    assert detect_languages([".TS", ".ts"]) == ["TypeScript"]


def test_classify_combines_both_detections() -> None:
    result = classify(["express"], [], iter([".js", ".jsx", ".html"]))

    assert result.frameworks == ("Express",)
    assert set(result.languages) == {"JavaScript", "HTML"}


def test_classify_with_nothing_detected() -> None:
    result = classify([], [], [])

    assert result.frameworks == ()
    assert result.languages == ()
