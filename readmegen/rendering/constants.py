"""Shared constants for README rendering."""

from __future__ import annotations

STYLE_MINIMAL = "minimal"
STYLE_DETAILED = "detailed"
STYLES: tuple[str, ...] = (STYLE_MINIMAL, STYLE_DETAILED)
DEFAULT_STYLE = STYLE_DETAILED

SECTION_ORDER: dict[str, tuple[str, ...]] = {
    STYLE_MINIMAL: (
        "description",
        "installation",
        "usage",
        "license",
        "author",
    ),
    STYLE_DETAILED: (
        "description",
        "tech_stack",
        "features",
        "installation",
        "usage",
        "structure",
        "api",
        "dependencies",
        "scripts",
        "contributing",
        "license",
        "author",
    ),
}

SECTION_TITLES: dict[str, str] = {
    "tech_stack": "Tech Stack",
    "features": "Features",
    "installation": "Installation",
    "usage": "Usage",
    "structure": "Project Structure",
    "api": "API",
    "dependencies": "Dependencies",
    "scripts": "Scripts",
    "contributing": "Contributing",
    "license": "License",
}

LICENSE_HEADING = f"## {SECTION_TITLES['license']}"

MAX_STRUCTURE_ENTRIES = 20

DEVELOPMENT_SCRIPTS: tuple[tuple[str, str], ...] = (
    ("dev", "npm run dev"),
    ("build", "npm run build"),
    ("start", "npm start"),
    ("test", "npm test"),
)

MINIMAL_USAGE_SCRIPTS: tuple[tuple[str, str], ...] = (
    ("dev", "npm run dev"),
    ("start", "npm start"),
)

CONTRIBUTING_STEPS: tuple[str, ...] = (
    "Fork the repository",
    "Create your feature branch (`git checkout -b feature/amazing-feature`)",
    "Commit your changes (`git commit -m 'feat: add amazing feature'`)",
    "Push to the branch (`git push origin feature/amazing-feature`)",
    "Open a Pull Request",
)


def normalize_style(style: str | None, default: str = DEFAULT_STYLE) -> str:
    """Return ``style`` when it names a known style, otherwise ``default``."""
    if style is not None and style.strip().lower() in STYLES:
        return style.strip().lower()
    return default


__all__ = [
    "CONTRIBUTING_STEPS",
    "DEFAULT_STYLE",
    "DEVELOPMENT_SCRIPTS",
    "LICENSE_HEADING",
    "MAX_STRUCTURE_ENTRIES",
    "MINIMAL_USAGE_SCRIPTS",
    "SECTION_ORDER",
    "SECTION_TITLES",
    "STYLES",
    "STYLE_DETAILED",
    "STYLE_MINIMAL",
    "normalize_style",
]
