"""Reads package.json into a normalized manifest record."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .logging import get_logger

MANIFEST_FILENAME = "package.json"

DEFAULT_VERSION = "0.0.0"
DEFAULT_LICENSE = "MIT"
DEFAULT_ENTRY_POINT = "index.js"
DEFAULT_BIN_NAME = "cli"

_logger = get_logger("manifest")


@dataclass
class PackageManifest:
    """Manifest fields with every value defaulted."""

    name: str
    version: str = DEFAULT_VERSION
    description: str = ""
    license: str = DEFAULT_LICENSE
    author: str = ""
    homepage: str = ""
    repository: str = ""
    scripts: Dict[str, str] = field(default_factory=dict)
    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    entry_point: str = DEFAULT_ENTRY_POINT
    bin: Dict[str, str] = field(default_factory=dict)
    engines: Dict[str, str] = field(default_factory=dict)
    keywords: List[str] = field(default_factory=list)


def load_package_json(root: Path) -> Dict[str, Any]:
    """Return the parsed package.json contents or an empty dict."""
    package_json = root / MANIFEST_FILENAME
    if not package_json.is_file():
        return {}
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _logger.debug("Ignoring unreadable %s: %s", package_json, exc)
        return {}
    if isinstance(data, dict):
        return data
    _logger.debug("Ignoring %s: expected an object at the root", package_json)
    return {}


def load_manifest(root: Path) -> PackageManifest:
    """Read and normalize the manifest under ``root``; never raises on bad input."""
    return normalize_manifest(load_package_json(root), fallback_name=root.name)


def normalize_manifest(data: Dict[str, Any], *, fallback_name: str) -> PackageManifest:
    name = _as_str(data.get("name")) or fallback_name
    return PackageManifest(
        name=name,
        version=_as_str(data.get("version")) or DEFAULT_VERSION,
        description=_as_str(data.get("description")),
        license=_as_str(data.get("license")) or DEFAULT_LICENSE,
        author=_person_name(data.get("author")),
        homepage=_as_str(data.get("homepage")),
        repository=_repository_url(data.get("repository")),
        scripts=_as_str_map(data.get("scripts")),
        dependencies=_dependency_names(data.get("dependencies")),
        dev_dependencies=_dependency_names(data.get("devDependencies")),
        entry_point=_as_str(data.get("main")) or DEFAULT_ENTRY_POINT,
        bin=_bin_map(data.get("bin"), data.get("name")),
        engines=_as_str_map(data.get("engines")),
        keywords=[item for item in _as_list(data.get("keywords")) if isinstance(item, str)],
    )


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): item for key, item in value.items() if isinstance(item, str)}


def _dependency_names(value: Any) -> List[str]:
    # dict key order is the declaration order in the manifest
    if not isinstance(value, dict):
        return []
    return [str(key) for key in value]


def _person_name(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return _as_str(value.get("name"))
    return ""


def _repository_url(value: Any) -> str:
    if isinstance(value, str):
        url = value
    elif isinstance(value, dict):
        url = _as_str(value.get("url"))
    else:
        url = ""
    url = re.sub(r"^git\+", "", url)
    return re.sub(r"\.git$", "", url)


def _bin_map(value: Any, package_name: Any) -> Dict[str, str]:
    if isinstance(value, str):
        return {_as_str(package_name) or DEFAULT_BIN_NAME: value}
    return _as_str_map(value)


__all__ = ["PackageManifest", "load_manifest", "load_package_json", "normalize_manifest"]
