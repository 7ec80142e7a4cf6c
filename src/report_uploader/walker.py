"""Recursive directory listing for report uploads."""

import os
from collections.abc import Iterator
from pathlib import Path

from report_uploader.errors import NotFoundError


def iter_files(root: str | Path) -> Iterator[str]:
    """
    Yield the absolute path of every regular file under ``root``.

    Entries are visited in sorted name order within each directory so the
    traversal order is stable. Symlinked directories are not followed and
    entries that are neither files nor directories are skipped.

    Args:
        root: Directory to walk

    Raises:
        NotFoundError: If ``root`` does not exist or is not a directory.
        OSError: If a directory cannot be listed. Files from earlier
            directories have already been yielded at that point.
    """
    root_path = os.path.abspath(os.fspath(root))
    if not os.path.isdir(root_path):
        raise NotFoundError(f"Directory not found: {root}")

    yield from _walk(root_path)


def _walk(dir_path: str) -> Iterator[str]:
    with os.scandir(dir_path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)
        elif entry.is_file():
            yield os.path.normpath(entry.path)


def list_files(root: str | Path) -> list[str]:
    """Return every regular file under ``root`` as a list."""
    return list(iter_files(root))
