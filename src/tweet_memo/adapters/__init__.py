"""Adapters - I/O implementations of ports."""

from .file_note import FileNoteStore

__all__ = [
    "FileNoteStore",
]
