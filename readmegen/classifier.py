"""Maps dependency names and file extensions to framework and language labels."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

# Ordered: detected frameworks are reported in this order.
FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("react", "React"),
    ("next", "Next.js"),
    ("vue", "Vue.js"),
    ("nuxt", "Nuxt"),
    ("svelte", "Svelte"),
    ("@angular/core", "Angular"),
    ("express", "Express"),
    ("fastify", "Fastify"),
    ("koa", "Koa"),
    ("hono", "Hono"),
    ("electron", "Electron"),
    ("tailwindcss", "Tailwind CSS"),
    ("prisma", "Prisma"),
    ("drizzle-orm", "Drizzle"),
    ("jest", "Jest"),
    ("vitest", "Vitest"),
    ("mocha", "Mocha"),
    ("webpack", "Webpack"),
    ("vite", "Vite"),
    ("esbuild", "esbuild"),
    ("rollup", "Rollup"),
)

LANGUAGE_BY_EXTENSION: Mapping[str, str] = MappingProxyType(
    {
        ".ts": "TypeScript",
        ".tsx": "TypeScript",
        ".js": "JavaScript",
        ".jsx": "JavaScript",
        ".py": "Python",
        ".rs": "Rust",
        ".go": "Go",
        ".rb": "Ruby",
        ".java": "Java",
        ".css": "CSS",
        ".scss": "SCSS",
        ".html": "HTML",
    }
)


@dataclass(frozen=True)
class Classification:
    """Framework and language labels detected for a project."""

    frameworks: Tuple[str, ...]
    languages: Tuple[str, ...]


def detect_frameworks(dependencies: Iterable[str], dev_dependencies: Iterable[str]) -> List[str]:
    installed = set(dependencies)
    installed.update(dev_dependencies)
    return [label for package, label in FRAMEWORKS if package in installed]


def detect_languages(extensions: Iterable[str]) -> List[str]:
    languages: List[str] = []
    for extension in extensions:
        language = LANGUAGE_BY_EXTENSION.get(extension)
        if language is not None and language not in languages:
            languages.append(language)
    return languages


def classify(
    dependencies: Iterable[str],
    dev_dependencies: Iterable[str],
    extensions: Iterable[str],
) -> Classification:
    """Return frameworks in table order and languages in first-seen order."""
    return Classification(
        frameworks=tuple(detect_frameworks(dependencies, dev_dependencies)),
        languages=tuple(detect_languages(extensions)),
    )


__all__ = [
    "Classification",
    "FRAMEWORKS",
    "LANGUAGE_BY_EXTENSION",
    "classify",
    "detect_frameworks",
    "detect_languages",
]
