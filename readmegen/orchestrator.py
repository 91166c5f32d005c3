"""Pipeline orchestration for markdown and JSON generation."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .analyzer import analyze_project
from .config import ConfigError, ReadmeGenConfig, load_config
from .logging import get_logger
from .models import GenerationOutcome, ProjectMetadata
from .postproc.markers import CustomSectionManager
from .rendering import DEFAULT_STYLE, ReadmeBuilder, normalize_style

DEFAULT_OUTPUT = "README.md"
FORMAT_MARKDOWN = "markdown"
FORMAT_JSON = "json"


@dataclass
class GenerationOptions:
    """Per-run settings; ``None`` means "use the config file or the default"."""

    directory: str = "."
    style: Optional[str] = None
    output: Optional[str] = None
    update: bool = False
    json: bool = False
    dry_run: bool = False


def json_output_name(output: str) -> str:
    """Swap a trailing ``.md`` for ``.json``; other names are kept as given."""
    return re.sub(r"\.md$", ".json", output)


class Orchestrator:
    """Coordinates analysis, rendering, custom-section merging and output."""

    def __init__(self, marker_manager: CustomSectionManager | None = None) -> None:
        self.marker_manager = marker_manager or CustomSectionManager()
        self.logger = get_logger("orchestrator")

    def run(self, options: GenerationOptions) -> GenerationOutcome:
        """Generate the README (or JSON analysis) for ``options.directory``."""
        target_dir = Path(options.directory).expanduser().resolve()
        if not target_dir.exists():
            raise FileNotFoundError(f"Directory not found: {target_dir}")
        if not target_dir.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {target_dir}")

        self.logger.info("Analyzing %s", target_dir)
        config = self._load_config(target_dir)
        metadata = analyze_project(target_dir, config=config)
        output = options.output or config.output or DEFAULT_OUTPUT

        if options.json:
            return self._emit_json(target_dir, output, metadata, dry_run=options.dry_run)

        style = normalize_style(options.style, default=normalize_style(config.style, DEFAULT_STYLE))
        builder = ReadmeBuilder(style, templates_dir=config.templates_dir)
        readme = builder.build(metadata)

        out_path = target_dir / output
        preserved = 0
        if options.update and out_path.is_file():
            readme, preserved = self._merge_custom_sections(out_path, readme)

        if not options.dry_run:
            self._write(out_path, readme)
            self.logger.info("README written to %s", out_path)

        return GenerationOutcome(
            path=out_path,
            content=readme,
            format=FORMAT_MARKDOWN,
            dry_run=options.dry_run,
            metadata=metadata,
            custom_sections=preserved,
            style=style,
        )

    def render_preview(
        self, directory: str, *, style: Optional[str] = None, update: bool = False
    ) -> GenerationOutcome:
        """Return generated content without touching the filesystem."""
        return self.run(GenerationOptions(directory=directory, style=style, update=update, dry_run=True))

    def _merge_custom_sections(self, out_path: Path, readme: str) -> tuple[str, int]:
        self.logger.info("Update mode: preserving custom sections from %s", out_path)
        # invalid UTF-8 decodes to U+FFFD instead of raising
        existing = out_path.read_text(encoding="utf-8", errors="replace")
        custom = self.marker_manager.extract(existing)
        if not custom:
            self.logger.debug("No custom sections found in %s", out_path)
            return readme, 0
        self.logger.info("Found %d custom section(s)", len(custom))
        return self.marker_manager.inject(readme, custom), len(custom)

    def _emit_json(
        self,
        target_dir: Path,
        output: str,
        metadata: ProjectMetadata,
        *,
        dry_run: bool,
    ) -> GenerationOutcome:
        payload = json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False)
        out_path = target_dir / json_output_name(output)
        if not dry_run:
            self._write(out_path, payload)
            self.logger.info("JSON written to %s", out_path)
        return GenerationOutcome(
            path=out_path,
            content=payload,
            format=FORMAT_JSON,
            dry_run=dry_run,
            metadata=metadata,
        )

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _load_config(self, target_dir: Path) -> ReadmeGenConfig:
        try:
            return load_config(target_dir)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return ReadmeGenConfig(root=target_dir)


__all__ = [
    "DEFAULT_OUTPUT",
    "FORMAT_JSON",
    "FORMAT_MARKDOWN",
    "GenerationOptions",
    "Orchestrator",
    "json_output_name",
]
