"""README rendering: badges, section builders and the page template."""

from .badges import build_badges, render_badges
from .builder import ReadmeBuilder, Section, render
from .constants import DEFAULT_STYLE, LICENSE_HEADING, STYLES, normalize_style

__all__ = [
    "DEFAULT_STYLE",
    "LICENSE_HEADING",
    "ReadmeBuilder",
    "STYLES",
    "Section",
    "build_badges",
    "normalize_style",
    "render",
    "render_badges",
]
