"""Section writer - records a tweet into today's note.

Resolves the daily file from the config, reads it, inserts the formatted
entry at the end of the target section and writes the result back.
"""

import logging
from datetime import datetime
from pathlib import Path

from .adapters.file_note import FileNoteStore
from .config import Config
from .core.formatting import format_entry
from .core.markdown import insert_entry
from .core.paths import expand_home, format_filename
from .errors import DirectoryNotFoundError, TargetFileNotFoundError
from .ports.note_store import NoteStore

logger = logging.getLogger(__name__)


class TweetWriter:
    """Writes tweets into the configured section of the daily note."""

    def __init__(self, config: Config, store: NoteStore | None = None):
        self.config = config
        self.store = store or FileNoteStore()

    def target_path(self, now: datetime | None = None) -> Path:
        """Path of the note for now's date. The directory must already exist."""
        now = now or datetime.now()
        if not self.config.target_directory.strip():
            raise DirectoryNotFoundError(Path(self.config.target_directory))
        directory = expand_home(self.config.target_directory)
        if not directory.is_dir():
            raise DirectoryNotFoundError(directory)
        return directory / format_filename(self.config.filename_format, now.date())

    def write_tweet(self, text: str, now: datetime | None = None) -> Path:
        """Insert text as a new entry and return the path written to."""
        now = now or datetime.now()
        path = self.target_path(now)
        logger.debug(f"Target file: {path}")

        if not self.store.exists(path):
            raise TargetFileNotFoundError(path)

        content = self.store.read(path)
        entry = format_entry(self.config.entry_format, text, now)
        new_content = insert_entry(content, self.config.target_section, entry)

        self.store.write(path, new_content)
        logger.debug(f"Wrote entry to {path}: {entry}")
        return path
