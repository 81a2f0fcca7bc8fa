"""Daily note path templating."""

from datetime import date
from pathlib import Path


def expand_home(path: str) -> Path:
    """Expand a leading '~/' to the home directory. Other paths are kept as is."""
    if path.startswith("~/"):
        return Path.home() / path[2:]
    return Path(path)


def format_filename(template: str, day: date) -> str:
    """Substitute YYYY, MM and DD in that order."""
    return (
        template.replace("YYYY", f"{day.year:04d}")
        .replace("MM", f"{day.month:02d}")
        .replace("DD", f"{day.day:02d}")
    )
