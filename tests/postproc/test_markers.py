"""Tests for custom-section extraction and injection."""

from __future__ import annotations

import logging

import pytest

from readmegen.models import CustomSection, ProjectMetadata
from readmegen.postproc.markers import (
    CustomSectionManager,
    MarkdownDocument,
    extract_sections,
    inject_sections,
)
from readmegen.rendering import render

SAMPLE = "# Title\n\n## Usage\n\nrun it\n\n## License\n\nMIT\n"


def test_extract_inline_region() -> None:
    document = "intro\n<!-- custom: notes -->Keep this<!-- /custom -->\n## License\n"

    assert extract_sections(document) == {"notes": "Keep this"}


def test_extract_trims_name_and_drops_newline_after_opening_marker() -> None:
    document = "<!-- custom:   setup   -->\nStep one\nStep two\n<!-- /custom -->"

    assert extract_sections(document) == {"setup": "Step one\nStep two\n"}


def test_extract_multiple_regions_in_document_order() -> None:
    document = (
        "<!-- custom: a -->A<!-- /custom -->\n"
        "text\n"
        "<!-- custom: b -->\nB\n<!-- /custom -->\n"
    )

    sections = extract_sections(document)

    assert list(sections) == ["a", "b"]
    assert sections == {"a": "A", "b": "B\n"}


def test_extract_stops_at_unclosed_region(caplog: pytest.LogCaptureFixture) -> None:
    document = (
        "<!-- custom: kept -->ok<!-- /custom -->\n"
        "<!-- custom: open -->never closed\n"
        "<!-- custom: later -->x"
    )

    with caplog.at_level(logging.WARNING, logger="readmegen"):
        sections = extract_sections(document)

    assert sections == {"kept": "ok"}
    assert "no closing marker" in caplog.text


def test_extract_stops_when_opening_marker_is_not_terminated_on_its_line(
    caplog: pytest.LogCaptureFixture,
) -> None:
    document = (
        "<!-- custom: first -->1<!-- /custom -->\n"
        "<!-- custom: broken\n-->2<!-- /custom -->\n"
        "<!-- custom: third -->3<!-- /custom -->\n"
    )

    with caplog.at_level(logging.WARNING, logger="readmegen"):
        sections = extract_sections(document)

    assert sections == {"first": "1"}
    assert "Unterminated custom marker" in caplog.text


def test_extract_without_markers_is_empty() -> None:
    assert extract_sections(SAMPLE) == {}
    assert extract_sections("") == {}


def test_extract_repeated_name_keeps_later_body(caplog: pytest.LogCaptureFixture) -> None:
    document = (
        "<!-- custom: notes -->first<!-- /custom -->\n"
        "<!-- custom: other -->o<!-- /custom -->\n"
        "<!-- custom: notes -->second<!-- /custom -->\n"
    )

    with caplog.at_level(logging.WARNING, logger="readmegen"):
        sections = extract_sections(document)

    assert sections == {"notes": "second", "other": "o"}
    assert list(sections) == ["notes", "other"]
    assert "appears more than once" in caplog.text


def test_extract_does_not_nest_regions() -> None:
    document = "<!-- custom: outer -->a<!-- custom: inner -->b<!-- /custom -->c<!-- /custom -->"

    assert extract_sections(document) == {"outer": "a<!-- custom: inner -->b"}


def test_inject_places_sections_before_license_in_order() -> None:
    result = inject_sections(SAMPLE, {"a": "A\n", "b": "B"})

    assert result == (
        "# Title\n\n## Usage\n\nrun it\n\n"
        "<!-- custom: a -->\nA\n<!-- /custom -->\n\n"
        "<!-- custom: b -->\nB<!-- /custom -->\n\n"
        "## License\n\nMIT\n"
    )


def test_inject_appends_when_no_license_heading() -> None:
    result = inject_sections("# Title\n", {"a": "A"})

    assert result == "# Title\n\n<!-- custom: a -->\nA<!-- /custom -->\n"


def test_inject_appends_each_section_without_license_heading() -> None:
    result = inject_sections("# Title\n", {"a": "A", "b": "B"})

    assert result == (
        "# Title\n\n<!-- custom: a -->\nA<!-- /custom -->\n"
        "\n<!-- custom: b -->\nB<!-- /custom -->\n"
    )


def test_inject_ignores_deeper_license_headings() -> None:
    document = "# Title\n\n### License terms\n\nSee below.\n"

    result = inject_sections(document, {"a": "A"})

    assert result.endswith("See below.\n\n<!-- custom: a -->\nA<!-- /custom -->\n")


def test_inject_with_no_sections_returns_document_unchanged() -> None:
    assert inject_sections(SAMPLE, {}) == SAMPLE


def test_round_trip_preserves_regions_before_license_in_both_styles() -> None:
    metadata = ProjectMetadata(name="demo", description="Demo", dependencies=("react",))
    prior = (
        "# demo\n\nold content\n\n"
        "<!-- custom: notes -->Keep this<!-- /custom -->\n\n"
        "<!-- custom: faq -->\n**Q:** Why?\n**A:** Because.\n<!-- /custom -->\n\n"
        "## License\n\nMIT\n"
    )
    sections = extract_sections(prior)

    for style in ("minimal", "detailed"):
        merged = inject_sections(render(metadata, style), sections)

        assert extract_sections(merged) == sections
        before_license = merged.split("\n## License\n", 1)[0]
        assert before_license.endswith(
            "<!-- custom: notes -->\nKeep this<!-- /custom -->\n\n"
            "<!-- custom: faq -->\n**Q:** Why?\n**A:** Because.\n<!-- /custom -->\n"
        )


def test_repeated_merge_is_idempotent() -> None:
    metadata = ProjectMetadata(name="demo")
    fresh = render(metadata, "detailed")
    first = inject_sections(fresh, {"notes": "Keep this", "setup": "\nindented\n"})

    second = inject_sections(fresh, extract_sections(first))
    third = inject_sections(fresh, extract_sections(second))

    assert second == first
    assert third == first


def test_wrap_formats_marker_block() -> None:
    block = CustomSectionManager().wrap(CustomSection(name="notes", body="Hi\n"))

    assert block == "<!-- custom: notes -->\nHi\n<!-- /custom -->"


def test_manager_accepts_custom_anchor() -> None:
    manager = CustomSectionManager(anchor_heading="## Usage")

    result = manager.inject(SAMPLE, {"a": "A"})

    assert result.index("<!-- custom: a -->") < result.index("## Usage")


def test_markdown_document_round_trips_text() -> None:
    text = "line one\n\nline three\n"
    document = MarkdownDocument(text)

    assert document.render() == text
    assert document.find_heading("line three") == 2
    assert document.find_heading("missing") is None


def test_markdown_document_insert_requires_trailing_newline() -> None:
    document = MarkdownDocument("a\nb\n")

    with pytest.raises(ValueError):
        document.insert_text(1, "no newline")

    next_index = document.insert_text(1, "x\ny\n")
    assert next_index == 3
    assert document.render() == "a\nx\ny\nb\n"
