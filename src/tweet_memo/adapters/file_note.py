"""File-based note storage adapter."""

import logging
from pathlib import Path

from ..errors import ReadError, WriteError

logger = logging.getLogger(__name__)


class FileNoteStore:
    """
    File-based note storage.

    Implements NoteStore protocol. Notes are UTF-8 Markdown files; writes
    replace the whole file in place (no temp file, no rename).
    """

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read(self, path: Path) -> str:
        """Read note content. Raises ReadError on I/O or decoding failure."""
        try:
            with path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            raise ReadError(path, str(e)) from e

    def write(self, path: Path, content: str) -> None:
        """Overwrite note content. Raises WriteError on I/O failure."""
        try:
            path.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            logger.warning(f"Could not write {path}: {e}")
            raise WriteError(path, str(e)) from e
