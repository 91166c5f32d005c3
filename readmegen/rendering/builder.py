"""Builds README markdown from project metadata."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ProjectMetadata
from .badges import render_badges
from .constants import (
    CONTRIBUTING_STEPS,
    DEVELOPMENT_SCRIPTS,
    MAX_STRUCTURE_ENTRIES,
    MINIMAL_USAGE_SCRIPTS,
    SECTION_ORDER,
    SECTION_TITLES,
    STYLE_DETAILED,
    STYLE_MINIMAL,
    normalize_style,
)

_DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


@dataclass
class Section:
    """Rendered README section; sections without a title are emitted as bare paragraphs."""

    name: str
    title: Optional[str]
    body: str


class ReadmeBuilder:
    """Renders one of the two README styles from a ProjectMetadata record.

    Section bodies are assembled here; ``readme.j2`` only lays out the title,
    badge block and the ordered sections. Output depends on nothing but the
    metadata and the style.
    """

    def __init__(self, style: str | None = None, *, templates_dir: Path | None = None) -> None:
        self.style = normalize_style(style)
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self._builders: Dict[str, Callable[[ProjectMetadata], Optional[Section]]] = {
            "description": self._build_description,
            "tech_stack": self._build_tech_stack,
            "features": self._build_features,
            "installation": self._build_installation,
            "usage": self._build_usage,
            "structure": self._build_structure,
            "api": self._build_api,
            "dependencies": self._build_dependencies,
            "scripts": self._build_scripts,
            "contributing": self._build_contributing,
            "license": self._build_license,
            "author": self._build_author,
        }

    def build(self, metadata: ProjectMetadata) -> str:
        """Return the README markdown for ``metadata``."""
        return self._render_readme(metadata, self.build_sections(metadata))

    def build_sections(self, metadata: ProjectMetadata) -> List[Section]:
        sections: List[Section] = []
        for name in SECTION_ORDER[self.style]:
            section = self._builders[name](metadata)
            if section is not None:
                sections.append(section)
        return sections

    def _render_readme(self, metadata: ProjectMetadata, sections: Sequence[Section]) -> str:
        template = self._env.get_template("readme.j2")
        return (
            template.render(
                project_name=metadata.name,
                badges=render_badges(metadata),
                sections=sections,
            ).strip()
            + "\n"
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)

    @staticmethod
    def _section(name: str, lines: Sequence[str]) -> Section:
        return Section(name=name, title=SECTION_TITLES.get(name), body="\n".join(lines).strip())

    @staticmethod
    def _code_block(lines: Sequence[str], language: str = "bash") -> List[str]:
        return [f"```{language}", *lines, "```"]

    def _build_description(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.description:
            return None
        if self.style == STYLE_MINIMAL:
            body = metadata.description
        else:
            body = f"> {metadata.description}"
        return Section(name="description", title=None, body=body)

    def _build_tech_stack(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.frameworks and not metadata.languages:
            return None
        lines: List[str] = []
        if metadata.frameworks:
            lines.extend([f"**Frameworks:** {', '.join(metadata.frameworks)}", ""])
        if metadata.languages:
            lines.append(f"**Languages:** {', '.join(metadata.languages)}")
        return self._section("tech_stack", lines)

    def _build_features(self, metadata: ProjectMetadata) -> Section:
        bullets: List[str] = []

        def add(condition: bool, text: str) -> None:
            if condition:
                bullets.append(f"- {text}")

        add(bool(metadata.bin), "CLI tool with npx support")
        add(metadata.has_type_system_config, "Written in TypeScript with full type safety")
        add(bool(metadata.frameworks), f"Built with {', '.join(metadata.frameworks)}")
        add(not metadata.dependencies, "Zero external dependencies")
        return self._section("features", bullets)

    def _build_installation(self, metadata: ProjectMetadata) -> Section:
        name = metadata.name
        lines: List[str] = []
        if metadata.bin:
            if self.style == STYLE_DETAILED:
                lines.extend(["Run directly with npx:", ""])
            lines.extend(self._code_block([f"npx {name}"]))
            lines.extend(["", "Or install globally:", ""])
            lines.extend(self._code_block([f"npm install -g {name}"]))
        else:
            lines.extend(self._code_block([f"npm install {name}"]))
        return self._section("installation", lines)

    def _build_usage(self, metadata: ProjectMetadata) -> Optional[Section]:
        lines: List[str] = []
        if metadata.bin:
            command = next(iter(metadata.bin))
            lines.extend(self._code_block([f"{command} --help"]))
            lines.append("")

        if self.style == STYLE_MINIMAL:
            commands = [command for key, command in MINIMAL_USAGE_SCRIPTS if metadata.scripts.get(key)]
            if commands:
                lines.extend(self._code_block(commands))
            if not lines:
                return None
            return self._section("usage", lines)

        development = [
            f"{command:<16}# {metadata.scripts[key]}"
            for key, command in DEVELOPMENT_SCRIPTS
            if metadata.scripts.get(key)
        ]
        if development:
            lines.extend(["### Development", ""])
            lines.extend(self._code_block(development))
        return self._section("usage", lines)

    def _build_structure(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.src_files:
            return None
        lines: List[str] = ["src/"]
        for path in metadata.src_files[:MAX_STRUCTURE_ENTRIES]:
            parts = path.split("/")
            indent = "  " * (len(parts) - 1)
            lines.append(f"{indent}├── {parts[-1]}")
        remaining = len(metadata.src_files) - MAX_STRUCTURE_ENTRIES
        if remaining > 0:
            lines.append(f"  +{remaining} more files")
        return self._section("structure", self._code_block(lines, language=""))

    def _build_api(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.entry_point or metadata.bin:
            return None
        return self._section(
            "api", self._code_block([f'import pkg from "{metadata.name}";'], language="typescript")
        )

    def _build_dependencies(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.dependencies:
            return None
        lines = ["| Package | Purpose |", "|---------|---------|"]
        lines.extend(f"| `{dependency}` | |" for dependency in metadata.dependencies)
        return self._section("dependencies", lines)

    def _build_scripts(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.scripts:
            return None
        lines = ["| Script | Command |", "|--------|---------|"]
        lines.extend(
            f"| `npm run {name}` | `{command}` |" for name, command in metadata.scripts.items()
        )
        return self._section("scripts", lines)

    def _build_contributing(self, metadata: ProjectMetadata) -> Section:
        lines = ["Contributions are welcome! Here's how to get started:", ""]
        lines.extend(f"{index}. {step}" for index, step in enumerate(CONTRIBUTING_STEPS, start=1))
        return self._section("contributing", lines)

    def _build_license(self, metadata: ProjectMetadata) -> Section:
        if self.style == STYLE_MINIMAL:
            return self._section("license", [metadata.license])
        return self._section(
            "license",
            [
                f"This project is licensed under the {metadata.license} License. "
                "See the [LICENSE](LICENSE) file for details."
            ],
        )

    def _build_author(self, metadata: ProjectMetadata) -> Optional[Section]:
        if not metadata.author:
            return None
        return Section(name="author", title=None, body=f"---\n\nBuilt by **{metadata.author}**")


def render(
    metadata: ProjectMetadata,
    style: str | None = None,
    *,
    templates_dir: Path | None = None,
) -> str:
    """Render ``metadata`` as README markdown in the given style."""
    return ReadmeBuilder(style, templates_dir=templates_dir).build(metadata)


__all__ = ["ReadmeBuilder", "Section", "render"]
