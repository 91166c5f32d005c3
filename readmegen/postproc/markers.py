"""Custom region markers preserved across README regenerations."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..logging import get_logger
from ..models import CustomSection
from ..rendering.constants import LICENSE_HEADING


class MarkdownDocument:
    """A README held as an ordered list of lines.

    Splitting on ``\\n`` keeps the text recoverable byte for byte: ``render()``
    joins the lines back with the same separator.
    """

    def __init__(self, text: str) -> None:
        self.lines: List[str] = text.split("\n")

    def render(self) -> str:
        return "\n".join(self.lines)

    def find_heading(self, heading: str) -> Optional[int]:
        """Return the index of the first line starting with ``heading``."""
        for index, line in enumerate(self.lines):
            if line.startswith(heading):
                return index
        return None

    def insert_text(self, index: int, text: str) -> int:
        """Insert newline-terminated ``text`` before line ``index``.

        Returns the index of the line that followed the insertion point, so
        repeated calls keep stacking blocks in order.
        """
        if not text.endswith("\n"):
            raise ValueError("inserted text must end with a newline")
        new_lines = text.split("\n")[:-1]
        self.lines[index:index] = new_lines
        return index + len(new_lines)

    def append_text(self, text: str) -> None:
        new_lines = text.split("\n")
        self.lines[-1] += new_lines[0]
        self.lines.extend(new_lines[1:])


class CustomSectionManager:
    """Extracts and re-injects ``<!-- custom: NAME -->`` regions."""

    OPEN_PREFIX = "<!-- custom:"
    OPEN_FMT = "<!-- custom: {name} -->"
    COMMENT_END = "-->"
    CLOSE_MARKER = "<!-- /custom -->"

    def __init__(self, anchor_heading: str = LICENSE_HEADING) -> None:
        self.anchor_heading = anchor_heading
        self.logger = get_logger("markers")

    def wrap(self, section: CustomSection) -> str:
        """Return the marker block for ``section``, ending with the closing marker."""
        opening = self.OPEN_FMT.format(name=section.name)
        return f"{opening}\n{section.body}{self.CLOSE_MARKER}"

    def extract(self, markdown: str) -> Dict[str, str]:
        """Return a mapping of region name to body, in document order.

        Scanning stops at the first opening marker that has no terminator on
        its line or no closing marker after it; regions found before it are
        kept. A repeated name keeps the later body.
        """
        sections: Dict[str, str] = {}
        position = 0
        while True:
            start_index = markdown.find(self.OPEN_PREFIX, position)
            if start_index == -1:
                break
            name_start = start_index + len(self.OPEN_PREFIX)
            name_end = markdown.find(self.COMMENT_END, name_start)
            line_end = markdown.find("\n", name_start)
            if name_end == -1 or (line_end != -1 and line_end < name_end):
                self.logger.warning(
                    "Unterminated custom marker at offset %d; ignoring the rest of the document",
                    start_index,
                )
                break
            name = markdown[name_start:name_end].strip()
            body_start = name_end + len(self.COMMENT_END)
            end_index = markdown.find(self.CLOSE_MARKER, body_start)
            if end_index == -1:
                self.logger.warning(
                    "Custom section '%s' has no closing marker; ignoring the rest of the document",
                    name,
                )
                break
            # the newline written after the opening marker belongs to the marker
            if markdown.startswith("\n", body_start):
                body_start += 1
            if name in sections:
                self.logger.warning("Custom section '%s' appears more than once; keeping the last", name)
            sections[name] = markdown[body_start:end_index]
            position = end_index + len(self.CLOSE_MARKER)
        return sections

    def inject(self, markdown: str, sections: Mapping[str, str]) -> str:
        """Place each region before the anchor heading, or at the end without one."""
        if not sections:
            return markdown
        document = MarkdownDocument(markdown)
        anchor = document.find_heading(self.anchor_heading)
        for name, body in sections.items():
            block = self.wrap(CustomSection(name=name, body=body))
            if anchor is not None:
                anchor = document.insert_text(anchor, f"{block}\n\n")
            else:
                document.append_text(f"\n{block}\n")
        return document.render()


def extract_sections(markdown: str) -> Dict[str, str]:
    return CustomSectionManager().extract(markdown)


def inject_sections(markdown: str, sections: Mapping[str, str]) -> str:
    return CustomSectionManager().inject(markdown, sections)


__all__ = [
    "CustomSectionManager",
    "MarkdownDocument",
    "extract_sections",
    "inject_sections",
]
