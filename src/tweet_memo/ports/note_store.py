"""Note storage interface."""

from pathlib import Path
from typing import Protocol


class NoteStore(Protocol):
    """Interface for reading and overwriting daily note files."""

    def exists(self, path: Path) -> bool:
        """Check if a note file exists."""
        ...

    def read(self, path: Path) -> str:
        """Read the full note content."""
        ...

    def write(self, path: Path, content: str) -> None:
        """Overwrite the note with content."""
        ...
