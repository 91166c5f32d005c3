"""Post-processing of generated README documents."""

from .markers import CustomSectionManager, MarkdownDocument, extract_sections, inject_sections

__all__ = ["CustomSectionManager", "MarkdownDocument", "extract_sections", "inject_sections"]
