"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ProjectMetadata:
    """Everything the renderer knows about a project, built once per run."""

    name: str
    version: str = "0.0.0"
    description: str = ""
    license: str = "MIT"
    author: str = ""
    homepage: str = ""
    repository: str = ""
    scripts: Mapping[str, str] = field(default_factory=dict)
    dependencies: Tuple[str, ...] = ()
    dev_dependencies: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    has_type_system_config: bool = False
    has_source_tree: bool = False
    src_files: Tuple[str, ...] = ()
    entry_point: str = "index.js"
    bin: Mapping[str, str] = field(default_factory=dict)
    engines: Mapping[str, str] = field(default_factory=dict)
    keywords: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("scripts", "bin", "engines"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        for name in (
            "dependencies",
            "dev_dependencies",
            "frameworks",
            "languages",
            "src_files",
            "keywords",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable view using the manifest's camelCase keys."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "license": self.license,
            "author": self.author,
            "homepage": self.homepage,
            "repository": self.repository,
            "scripts": dict(self.scripts),
            "dependencies": list(self.dependencies),
            "devDependencies": list(self.dev_dependencies),
            "frameworks": list(self.frameworks),
            "languages": list(self.languages),
            "hasTypeSystemConfig": self.has_type_system_config,
            "hasSourceTree": self.has_source_tree,
            "srcFiles": list(self.src_files),
            "entryPoint": self.entry_point,
            "bin": dict(self.bin),
            "engines": dict(self.engines),
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class CustomSection:
    """User-authored region preserved across regenerations."""

    name: str
    body: str


@dataclass
class GenerationOutcome:
    """Result of a single readmegen run."""

    path: Path
    content: str
    format: str
    dry_run: bool
    metadata: ProjectMetadata
    custom_sections: int = 0
    style: Optional[str] = None
