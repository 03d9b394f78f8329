"""Markup file discovery."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

MARKUP_EXTENSIONS: frozenset[str] = frozenset({".html", ".htm", ".aspx", ".master", ".ascx"})


def is_excluded(file_path: Path, exclude_patterns: Iterable[str]) -> bool:
    """True if the file *name* contains any pattern, ignoring case."""
    name = file_path.name.lower()
    return any(pattern.lower() in name for pattern in exclude_patterns)


def discover_markup_files(
    root: str | Path,
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Recursively collect markup files under *root*.

    Each file is returned once, in sorted order.
    """
    patterns = tuple(exclude_patterns)
    files: list[Path] = []
    for hit in sorted(Path(root).rglob("*")):
        if hit.suffix.lower() not in MARKUP_EXTENSIONS or not hit.is_file():
            continue
        if is_excluded(hit, patterns):
            continue
        files.append(hit)
    return files
