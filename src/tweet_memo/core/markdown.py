"""Pure Markdown section logic - no I/O dependencies.

Documents are handled as tuples of lines. Only heading levels are
understood; everything else is opaque text.
"""

from ..errors import SectionNotFoundError


def heading_level(line: str) -> int:
    """Count the leading '#' characters of a trimmed line. 0 if not a heading."""
    stripped = line.strip()
    return len(stripped) - len(stripped.lstrip("#"))


def split_lines(text: str) -> tuple[list[str], bool]:
    """
    Split text into lines on line feeds.

    Returns the lines and whether the text ended with a newline. A trailing
    carriage return is dropped from each line, so CRLF files come back as LF.
    """
    if not text:
        return [], False

    trailing_newline = text.endswith("\n")
    if trailing_newline:
        text = text[:-1]

    return [line.removesuffix("\r") for line in text.split("\n")], trailing_newline


def join_lines(lines: list[str] | tuple[str, ...], trailing_newline: bool = False) -> str:
    """Join lines with line feeds, optionally terminating with one."""
    text = "\n".join(lines)
    if trailing_newline:
        text += "\n"
    return text


def find_section(lines: list[str] | tuple[str, ...], section: str) -> int | None:
    """Index of the first line equal to section after trimming both sides."""
    target = section.strip()
    for i, line in enumerate(lines):
        if line.strip() == target:
            return i
    return None


def find_section_end(
    lines: list[str] | tuple[str, ...],
    section_start: int,
    section_level: int | None = None,
) -> int:
    """
    Find the index where the section starting at section_start ends.

    The section ends at the first later heading whose level is less than or
    equal to section_level (a sibling or an ancestor). Deeper headings belong
    to the section. Returns len(lines) if the section runs to the end.
    """
    if section_level is None:
        section_level = heading_level(lines[section_start])

    for i in range(section_start + 1, len(lines)):
        line = lines[i].strip()
        if line.startswith("#") and heading_level(line) <= section_level:
            return i

    return len(lines)


def insert_line(lines: list[str] | tuple[str, ...], index: int, line: str) -> tuple[str, ...]:
    """Return a new sequence with line inserted before index."""
    return (*lines[:index], line, *lines[index:])


def insert_entry(content: str, section: str, entry: str) -> str:
    """
    Insert an entry line at the end of a section.

    Only the first line matching section is considered. Raises
    SectionNotFoundError if none matches. The result ends with a newline
    exactly when content did.
    """
    lines, trailing_newline = split_lines(content)

    start = find_section(lines, section)
    if start is None:
        raise SectionNotFoundError(section)

    end = find_section_end(lines, start, heading_level(section))
    return join_lines(insert_line(lines, end, entry), trailing_newline)
