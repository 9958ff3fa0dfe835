"""Human-readable formatting for sizes and timestamps."""

from datetime import datetime, timedelta

from .models import DirEntry

KIB = 1024
MIB = KIB * 1024
GIB = MIB * 1024
TIB = GIB * 1024

_UNITS = [(TIB, "TiB"), (GIB, "GiB"), (MIB, "MiB"), (KIB, "KiB")]


def format_file_size(size: int) -> str:
    """Format a byte count using binary units."""
    for factor, suffix in _UNITS:
        if size >= factor:
            return f"{size / factor:.2f} {suffix}"
    return f"{size} bytes"


def format_item_count(count: int) -> str:
    return f"{count} items"


def format_entry_size(entry: DirEntry) -> str:
    """Size column text: item count for directories, bytes for files."""
    if entry.is_directory:
        return format_item_count(entry.size)
    return format_file_size(entry.size)


def format_modified(moment: datetime | None, now: datetime | None = None) -> str:
    """Format a modification time relative to today.

    Returns "Today at HH:MM", "Yesterday at HH:MM" or "DD/MM/YYYY at HH:MM",
    and "Unknown" when no timestamp is available.
    """
    if moment is None:
        return "Unknown"
    if now is None:
        now = datetime.now()

    today = now.date()
    day = moment.date()
    if day == today:
        return f"Today at {moment:%H:%M}"
    if day == today - timedelta(days=1):
        return f"Yesterday at {moment:%H:%M}"
    return moment.strftime("%d/%m/%Y at %H:%M")
