"""Tests for entry formatting and path templating."""

import re
from datetime import date, datetime
from pathlib import Path

from tweet_memo.core.formatting import format_entry
from tweet_memo.core.paths import expand_home, format_filename


class TestFormatEntry:
    def test_default_template(self):
        """Current time is rendered as zero-padded HH:MM:SS."""
        entry = format_entry("[HH:mm:ss] {text}", "Test tweet")
        assert re.fullmatch(r"- \[\d{2}:\d{2}:\d{2}\] Test tweet", entry)

    def test_fixed_time(self):
        now = datetime(2024, 3, 7, 9, 5, 3)
        assert format_entry("[HH:mm:ss] {text}", "hi", now) == "- [09:05:03] hi"

    def test_24_hour_clock(self):
        now = datetime(2024, 3, 7, 21, 45, 0)
        assert format_entry("HH:mm:ss {text}", "late", now) == "- 21:45:00 late"

    def test_text_is_not_escaped(self):
        now = datetime(2024, 3, 7, 12, 0, 0)
        entry = format_entry("{text}", "**bold** #tag [link](x)", now)
        assert entry == "- **bold** #tag [link](x)"

    def test_time_token_in_text_is_kept(self):
        now = datetime(2024, 3, 7, 12, 0, 0)
        assert format_entry("HH:mm:ss {text}", "HH:mm:ss", now) == "- 12:00:00 HH:mm:ss"

    def test_template_without_tokens(self):
        assert format_entry("static", "ignored") == "- static"


class TestFormatFilename:
    def test_iso_style(self):
        assert format_filename("YYYY-MM-DD.md", date(2024, 3, 7)) == "2024-03-07.md"

    def test_custom_layout(self):
        assert format_filename("notes/DD.MM.YYYY.md", date(2025, 12, 31)) == "notes/31.12.2025.md"

    def test_no_tokens(self):
        assert format_filename("daily.md", date(2024, 3, 7)) == "daily.md"


class TestExpandHome:
    def test_tilde_prefix(self):
        assert expand_home("~/notes/daily") == Path.home() / "notes" / "daily"

    def test_absolute_path_unchanged(self):
        assert expand_home("/absolute/path") == Path("/absolute/path")

    def test_bare_tilde_unchanged(self):
        assert expand_home("~user/notes") == Path("~user/notes")
