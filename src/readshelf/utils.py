# ABOUTME: Display helpers shared by the command-line views.
# ABOUTME: Human-readable byte sizes and ingestion dates.

from datetime import datetime


def format_size(size: int) -> str:
    """Format a byte count with a binary unit, e.g. ``1.5 MB``."""
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KB", "MB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def format_date(timestamp: str) -> str:
    """Render an ISO 8601 timestamp as a date, or return it unchanged if unparsable."""
    try:
        return datetime.fromisoformat(timestamp).strftime("%Y-%m-%d")
    except ValueError:
        return timestamp
