"""Browser state: current directory, listing and navigation."""

import logging
from pathlib import Path

from .listing import DirectoryListError, list_directory
from .models import DirEntry

logger = logging.getLogger(__name__)


def resolve_start_dir(start: str | Path | None) -> Path:
    """Resolve the directory to open at launch."""
    cwd = Path.cwd()
    if start is None:
        return cwd
    path = Path(start).expanduser()
    if not path.is_dir():
        logger.warning("Not a directory: %s, using %s", path, cwd)
        return cwd
    return path.resolve()


class BrowserState:
    """Current directory and its freshly read listing.

    Every navigation re-reads the directory and replaces ``entries``
    wholesale.
    """

    def __init__(self, start: str | Path):
        self.current_dir = Path(start).resolve()
        self.entries: list[DirEntry] = []
        self.error: str | None = None

    def refresh(self):
        """Re-read the current directory."""
        try:
            self.entries = list_directory(self.current_dir)
            self.error = None
        except DirectoryListError as e:
            logger.error("%s", e)
            self.entries = []
            self.error = str(e)

    def navigate_to(self, path: str | Path):
        """Navigate to a specific path."""
        self.current_dir = Path(path).resolve()
        self.refresh()

    def can_navigate_up(self) -> bool:
        return self.current_dir.parent != self.current_dir

    def navigate_up(self) -> bool:
        """Navigate to parent directory. Returns False at the root."""
        if not self.can_navigate_up():
            return False
        self.navigate_to(self.current_dir.parent)
        return True

    def enter(self, entry: DirEntry) -> bool:
        """Navigate into a listed directory. Files are ignored."""
        if not entry.is_directory:
            return False
        self.navigate_to(self.current_dir / entry.name)
        return True

    def breadcrumbs(self) -> list[tuple[str, Path]]:
        """Return (label, path) for each component of the current path."""
        crumbs = []
        path_so_far = Path()
        for part in self.current_dir.parts:
            path_so_far = path_so_far / part
            crumbs.append((part, path_so_far))
        return crumbs
