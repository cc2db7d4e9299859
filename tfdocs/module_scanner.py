"""Module directory discovery and configuration file loading."""

from __future__ import annotations

import os
from collections import deque
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Deque, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_EXTENSIONS
from .errors import ModuleIOError
from .logging import get_logger
from .models import SourceFile

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".terraform",
    ".terragrunt-cache",
    ".venv",
    "node_modules",
    "__pycache__",
}

logger = get_logger("module_scanner")


def _has_extension(name: str, extensions: Sequence[str]) -> bool:
    return any(name.endswith(extension) for extension in extensions)


def _list_entries(directory: Path) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise ModuleIOError(f"cannot read directory {directory}: {exc.strerror or exc}") from exc


def _is_config_file(entry: os.DirEntry, extensions: Sequence[str]) -> bool:
    try:
        return entry.is_file() and _has_extension(entry.name, extensions)
    except OSError as exc:
        raise ModuleIOError(f"cannot stat {entry.path}: {exc.strerror or exc}") from exc


def _is_walkable_dir(entry: os.DirEntry) -> bool:
    """Real directories only; symlinked directories are not followed, like os.walk."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise ModuleIOError(f"cannot stat {entry.path}: {exc.strerror or exc}") from exc


def _is_excluded(rel_path: str, patterns: Sequence[str]) -> bool:
    for raw in patterns:
        pattern = raw.strip().rstrip("/").lstrip("/")
        if not pattern:
            continue
        if "/" in pattern:
            if fnmatchcase(rel_path, pattern) or rel_path.startswith(f"{pattern}/"):
                return True
        elif any(fnmatchcase(part, pattern) for part in rel_path.split("/")):
            return True
    return False


def list_module_files(
    directory: str | Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> List[str]:
    """Return sorted names of the configuration files directly inside `directory`."""
    return [
        entry.name
        for entry in _list_entries(Path(directory))
        if _is_config_file(entry, extensions)
    ]


def locate_module_dirs(
    root: str | Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    exclude_paths: Iterable[str] = (),
    max_depth: Optional[int] = None,
) -> List[Path]:
    """Return every directory under `root` that directly holds a configuration file.

    Directories are visited in sorted pre-order, so a module is listed before
    the modules nested inside it.
    """
    root_path = Path(root)
    patterns = list(exclude_paths)
    found: List[Path] = []
    pending: Deque[Tuple[Path, int]] = deque([(root_path, 0)])

    while pending:
        directory, depth = pending.popleft()
        entries = _list_entries(directory)
        if any(_is_config_file(entry, extensions) for entry in entries):
            found.append(directory)

        if max_depth is not None and depth >= max_depth:
            continue
        children = []
        for entry in entries:
            if not _is_walkable_dir(entry) or entry.name in _EXCLUDED_DIRS or entry.name.startswith("."):
                continue
            child = directory / entry.name
            rel_path = child.relative_to(root_path).as_posix()
            if _is_excluded(rel_path, patterns):
                logger.debug("Excluding %s", rel_path)
                continue
            children.append((child, depth + 1))
        pending.extendleft(reversed(children))

    return found


def read_module_files(directory: str | Path, names: Sequence[str]) -> List[SourceFile]:
    """Read the named files of a module as UTF-8 text, preserving order."""
    base = Path(directory)
    sources: List[SourceFile] = []
    for name in names:
        path = base / name
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ModuleIOError(f"cannot read {path}: {exc}", filename=name) from exc
        sources.append(SourceFile(name=name, text=text))
    return sources


__all__ = ["list_module_files", "locate_module_dirs", "read_module_files"]
