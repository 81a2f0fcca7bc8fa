"""Functional core - pure note logic with no I/O."""

from .markdown import (
    heading_level,
    split_lines,
    join_lines,
    find_section,
    find_section_end,
    insert_line,
    insert_entry,
)
from .formatting import format_entry
from .paths import expand_home, format_filename

__all__ = [
    # Markdown
    "heading_level",
    "split_lines",
    "join_lines",
    "find_section",
    "find_section_end",
    "insert_line",
    "insert_entry",
    # Formatting
    "format_entry",
    # Paths
    "expand_home",
    "format_filename",
]
