"""Directory walking for extension detection and source listings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .logging import get_logger

DEFAULT_MAX_DEPTH = 3
SOURCE_DIR = "src"

_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        "bower_components",
        "__pycache__",
        "dist",
        "build",
    }
)

_logger = get_logger("scanner")


def _log_walk_error(error: OSError) -> None:
    _logger.debug("Skipping unreadable path %s: %s", error.filename, error.strerror)


def _is_skipped(name: str, excluded: Iterable[str]) -> bool:
    return name.startswith(".") or name in excluded


def iter_extensions(
    root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    exclude_dirs: Sequence[str] = (),
) -> Iterator[str]:
    """Yield file suffixes found under ``root`` in walk order, case preserved.

    Directories deeper than ``max_depth`` below the root are not entered,
    hidden entries and build/dependency/VCS directories are skipped, and
    unreadable directories contribute nothing.
    """
    excluded = _EXCLUDED_DIRS.union(exclude_dirs)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current_dir = Path(dirpath)
        depth = len(current_dir.relative_to(root).parts)

        if depth >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = sorted(name for name in dirnames if not _is_skipped(name, excluded))

        for filename in sorted(filenames):
            if _is_skipped(filename, excluded):
                continue
            suffix = Path(filename).suffix
            if suffix:
                yield suffix


def list_source_files(root: Path, source_dir: str = SOURCE_DIR) -> List[str]:
    """Return every file under ``root/source_dir`` as a ``/``-joined relative path.

    Entries are listed depth-first, sorted by name within each directory.
    """
    base = root / source_dir
    if not base.is_dir():
        return []
    files: List[str] = []
    _collect(base, "", files)
    return files


def _collect(directory: Path, prefix: str, files: List[str]) -> None:
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as exc:
        _logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return
    for entry in entries:
        rel_path = f"{prefix}/{entry.name}" if prefix else entry.name
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        if is_dir:
            _collect(Path(entry.path), rel_path, files)
        else:
            files.append(rel_path)


__all__ = ["DEFAULT_MAX_DEPTH", "SOURCE_DIR", "iter_extensions", "list_source_files"]
