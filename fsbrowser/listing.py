"""Directory enumeration."""

import logging
import os
from datetime import datetime
from pathlib import Path

from .models import DirEntry, EntryType

logger = logging.getLogger(__name__)


class DirectoryListError(Exception):
    """Raised when a directory cannot be read."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


def count_children(path: str | Path) -> int:
    """Return the number of entries in a directory, or 0 if unreadable."""
    try:
        with os.scandir(path) as it:
            return sum(1 for _ in it)
    except OSError as e:
        logger.debug("Cannot count children of %s: %s", path, e)
        return 0


def sort_entries(entries: list[DirEntry]) -> list[DirEntry]:
    """Sort entries: directories first, then by case-insensitive name.

    The sort is stable, so entries with equal keys keep enumeration order.
    """
    return sorted(entries, key=lambda e: (not e.is_directory, e.name.lower()))


def list_directory(path: str | Path) -> list[DirEntry]:
    """List contents of a directory, directories first."""
    path = Path(path)
    try:
        with os.scandir(path) as it:
            raw = list(it)
    except OSError as e:
        reason = e.strerror or str(e)
        raise DirectoryListError(path, f"Cannot read {path}: {reason}") from e

    return sort_entries([_make_entry(item) for item in raw])


def _make_entry(item: os.DirEntry) -> DirEntry:
    """Build a DirEntry from a scandir result."""
    try:
        is_dir = item.is_dir()
    except OSError:
        is_dir = False

    try:
        st = item.stat()
    except OSError as e:
        # Broken symlinks and entries removed mid-listing
        logger.debug("No metadata for %s: %s", item.path, e)
        st = None

    if is_dir:
        size = count_children(item.path)
    else:
        size = st.st_size if st is not None else 0

    modified = datetime.fromtimestamp(st.st_mtime) if st is not None else None

    return DirEntry(
        entry_type=EntryType.DIRECTORY if is_dir else EntryType.FILE,
        size=size,
        modified=modified,
        path=Path(item.path),
        name=item.name,
    )
