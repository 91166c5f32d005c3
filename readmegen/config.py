"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".readmegen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanConfig:
    """Directory walk settings."""

    max_depth: Optional[int] = None
    exclude_dirs: List[str] = field(default_factory=list)


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    style: Optional[str] = None
    output: Optional[str] = None
    templates_dir: Optional[Path] = None
    scan: ScanConfig = field(default_factory=ScanConfig)


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    readme_data = _as_dict(data.get("readme"))
    templates_dir_str = _as_str(readme_data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    scan_data = _as_dict(data.get("scan"))
    scan = ScanConfig(
        max_depth=_as_int(scan_data.get("max_depth")),
        exclude_dirs=_as_str_list(scan_data.get("exclude_dirs")),
    )
    if scan.max_depth is not None and scan.max_depth < 0:
        raise ConfigError("scan.max_depth must not be negative")

    return ReadmeGenConfig(
        root=root,
        style=_as_str(readme_data.get("style")),
        output=_as_str(readme_data.get("output")),
        templates_dir=templates_dir,
        scan=scan,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
