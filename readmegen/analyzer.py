"""Builds ProjectMetadata for a project directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .classifier import classify
from .config import ReadmeGenConfig
from .logging import get_logger
from .manifest import load_manifest
from .models import ProjectMetadata
from .scanner import DEFAULT_MAX_DEPTH, SOURCE_DIR, iter_extensions, list_source_files

TYPE_SYSTEM_CONFIG = "tsconfig.json"

_logger = get_logger("analyzer")


def analyze_project(root: Path | str, *, config: Optional[ReadmeGenConfig] = None) -> ProjectMetadata:
    """Scan ``root`` and return the metadata used for rendering.

    Only a missing or non-directory ``root`` raises; every other gap in the
    project (no manifest, unreadable folders) falls back to defaults.
    """
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root_path}")

    max_depth = DEFAULT_MAX_DEPTH
    exclude_dirs: list[str] = []
    if config is not None:
        if config.scan.max_depth is not None:
            max_depth = config.scan.max_depth
        exclude_dirs = list(config.scan.exclude_dirs)

    manifest = load_manifest(root_path)
    extensions = iter_extensions(root_path, max_depth=max_depth, exclude_dirs=exclude_dirs)
    classification = classify(manifest.dependencies, manifest.dev_dependencies, extensions)
    src_files = list_source_files(root_path)
    _logger.debug(
        "Analyzed %s: %d dependencies, %d source files",
        root_path,
        len(manifest.dependencies),
        len(src_files),
    )

    return ProjectMetadata(
        name=manifest.name,
        version=manifest.version,
        description=manifest.description,
        license=manifest.license,
        author=manifest.author,
        homepage=manifest.homepage,
        repository=manifest.repository,
        scripts=manifest.scripts,
        dependencies=tuple(manifest.dependencies),
        dev_dependencies=tuple(manifest.dev_dependencies),
        frameworks=classification.frameworks,
        languages=classification.languages,
        has_type_system_config=(root_path / TYPE_SYSTEM_CONFIG).exists(),
        has_source_tree=(root_path / SOURCE_DIR).exists(),
        src_files=tuple(src_files),
        entry_point=manifest.entry_point,
        bin=manifest.bin,
        engines=manifest.engines,
        keywords=tuple(manifest.keywords),
    )


__all__ = ["analyze_project"]
