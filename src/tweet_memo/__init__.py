"""tweet-memo - record short timestamped notes into a daily Markdown file."""

__version__ = "0.1.0"
