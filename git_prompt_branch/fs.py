"""Filesystem helpers for locating the enclosing repository."""

from __future__ import annotations

from pathlib import Path


def inside_metadata_dir(path: Path, marker: str = ".git") -> bool:
    """Return True when one of the path's components is the marker itself."""

    return marker in Path(path).parts


def find_repo_root(path: Path, marker: str = ".git") -> Path | None:
    """Walk from ``path`` up to the filesystem root looking for ``marker``.

    The starting directory is checked first. Returns the directory that holds
    the marker, or None when no ancestor has one.
    """

    start = Path(path)
    for candidate in (start, *start.parents):
        try:
            found = (candidate / marker).exists()
        except OSError:  # unreadable ancestor, keep climbing
            continue
        if found:
            return candidate
    return None
