"""Error types raised by tweet-memo."""

from pathlib import Path


class TweetMemoError(Exception):
    """Base class for all tweet-memo failures."""

    pass


class ConfigIOError(TweetMemoError):
    """Raised when the config file cannot be read, parsed or written."""

    pass


class DirectoryNotFoundError(TweetMemoError):
    """Raised when the target directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Target directory does not exist: {path}")


class TargetFileNotFoundError(TweetMemoError):
    """Raised when today's note file has not been created yet."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Target file does not exist: {path}")


class ReadError(TweetMemoError):
    """Raised when a note file cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to read file: {path} ({reason})")


class SectionNotFoundError(TweetMemoError):
    """Raised when no line matches the configured target section."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Target section '{section}' not found")


class WriteError(TweetMemoError):
    """Raised when a note file cannot be overwritten."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write file: {path} ({reason})")


class InputError(TweetMemoError):
    """Raised when a line cannot be read from the terminal."""

    pass
