"""Data models for the file browser."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class EntryType(Enum):
    """Type of directory entry."""

    FILE = "f"
    DIRECTORY = "d"


@dataclass
class DirEntry:
    """Represents a file or directory in the current listing."""

    entry_type: EntryType
    size: int  # Bytes for files, child count for directories
    modified: datetime | None  # None when the metadata could not be read
    path: Path
    name: str

    @property
    def is_directory(self) -> bool:
        """Check if this entry is a directory."""
        return self.entry_type == EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        """Check if this entry is a file."""
        return self.entry_type == EntryType.FILE
