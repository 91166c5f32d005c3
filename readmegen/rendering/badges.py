"""Badge line generation for the README header."""

from __future__ import annotations

from typing import List
from urllib.parse import quote

from ..models import ProjectMetadata

GITHUB_PREFIX = "https://github.com/"
SCOPE_MARKER = "@"
NODE_ENGINE = "node"

# Characters encodeURIComponent leaves alone, beyond alphanumerics and "_.-~".
_URI_COMPONENT_SAFE = "!'()*"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def repository_slug(repository: str) -> str:
    """Return ``owner/name`` for GitHub URLs, or the URL unchanged otherwise."""
    return repository.replace(GITHUB_PREFIX, "")


def build_badges(metadata: ProjectMetadata) -> List[str]:
    """Return badge markdown lines in their fixed order."""
    badges: List[str] = []
    name = metadata.name

    if name.startswith(SCOPE_MARKER):
        badges.append(
            f"[![npm version](https://img.shields.io/npm/v/{name})](https://www.npmjs.com/package/{name})"
        )
        badges.append(
            f"[![npm downloads](https://img.shields.io/npm/dm/{name})](https://www.npmjs.com/package/{name})"
        )

    badges.append(
        f"[![License: {metadata.license}](https://img.shields.io/badge/License-{metadata.license}-yellow.svg)](LICENSE)"
    )

    slug = repository_slug(metadata.repository)
    if slug:
        badges.append(
            f"[![GitHub stars](https://img.shields.io/github/stars/{slug})](https://github.com/{slug})"
        )

    if metadata.has_type_system_config:
        badges.append(
            "[![TypeScript](https://img.shields.io/badge/TypeScript-5.0-blue.svg)](https://www.typescriptlang.org/)"
        )

    node_range = metadata.engines.get(NODE_ENGINE)
    if node_range:
        badges.append(
            f"[![Node.js](https://img.shields.io/badge/Node.js-{encode_uri_component(node_range)}-green.svg)](https://nodejs.org/)"
        )

    return badges


def render_badges(metadata: ProjectMetadata) -> str:
    return "\n".join(build_badges(metadata))


__all__ = ["build_badges", "encode_uri_component", "render_badges", "repository_slug"]
