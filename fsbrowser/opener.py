"""Open files with the platform's default handler."""

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class OpenFileError(Exception):
    """Raised when the open command cannot be started."""

    pass


def open_command(path: str | Path, platform: str | None = None) -> list[str]:
    """Build the command line that opens ``path`` on ``platform``."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return ["notepad", str(path)]
    if platform == "darwin":
        return ["open", "-t", str(path)]
    return ["xdg-open", str(path)]


def open_file(path: str | Path) -> None:
    """Spawn the default handler for a file without waiting for it."""
    cmd = open_command(path)
    logger.info("Opening file: %s", path)
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise OpenFileError(f"Failed to run {cmd[0]}: {e}") from e
