"""Dotenv file discovery."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_MARKER = ".env"


def is_dotenv_name(name: str) -> bool:
    """Return True for names like ``.env``, ``.env.local`` or ``prod.env``."""
    return name.startswith(ENV_MARKER) or name.endswith(ENV_MARKER)


def collect_files(
    paths: Iterable[Path],
    *,
    exclude: Iterable[str] = (),
    recursive: bool = False,
) -> list[Path]:
    """Resolve input paths to the dotenv files that should be checked.

    Explicit file arguments are always kept unless excluded. Directories
    contribute their dotenv files, and with ``recursive`` those of every
    subdirectory as well.
    """
    patterns = list(exclude)
    collected: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        if not path.exists():
            raise ValueError(f"Path does not exist: {path}")

        candidates = [path] if path.is_file() else _iter_directory(path, recursive=recursive)
        for candidate in candidates:
            if _is_excluded(candidate, patterns):
                logger.debug("Excluding %s", candidate)
                continue
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            collected.append(candidate)

    logger.info("Discovered %d file(s) to check", len(collected))
    return collected


def _iter_directory(directory: Path, *, recursive: bool) -> Iterator[Path]:
    entries = sorted(directory.iterdir(), key=lambda item: item.name)
    for entry in entries:
        if entry.is_file() and is_dotenv_name(entry.name):
            yield entry
    if not recursive:
        return
    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            yield from _iter_directory(entry, recursive=True)


def _is_excluded(path: Path, patterns: list[str]) -> bool:
    as_posix = path.as_posix()
    return any(
        fnmatch.fnmatch(as_posix, pattern) or fnmatch.fnmatch(path.name, pattern)
        for pattern in patterns
    )
