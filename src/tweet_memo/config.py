"""Configuration management for tweet-memo."""

import logging
import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import click
import tomli_w

from .errors import ConfigIOError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("TWEET_MEMO_CONFIG_DIR", Path.home() / ".config" / "tweet-memo"))
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_FILENAME_FORMAT = "YYYY-MM-DD.md"
DEFAULT_ENTRY_FORMAT = "[HH:mm:ss] {text}"
DEFAULT_TARGET_SECTION = "### Tweets"


def _current_dir() -> str:
    return str(Path.cwd())


@dataclass(frozen=True)
class Config:
    """tweet-memo configuration."""

    target_directory: str = field(default_factory=_current_dir)
    filename_format: str = DEFAULT_FILENAME_FORMAT
    entry_format: str = DEFAULT_ENTRY_FORMAT
    target_section: str = DEFAULT_TARGET_SECTION


def load_config(path: Path = CONFIG_FILE) -> Config:
    """Load configuration from a TOML file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"Failed to read config file: {path} ({e})") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigIOError(f"Failed to parse config file: {path} ({e})") from e

    values = {}
    for f in fields(Config):
        value = data.get(f.name)
        if not isinstance(value, str):
            raise ConfigIOError(f"Failed to parse config file: {path} ('{f.name}' must be a string)")
        values[f.name] = value

    logger.debug(f"Loaded config from {path}")
    return Config(**values)


def save_config(config: Config, path: Path = CONFIG_FILE) -> None:
    """Save configuration, creating the config directory if needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(f"Failed to create config directory: {path.parent} ({e})") from e

    try:
        path.write_text(tomli_w.dumps(asdict(config)), encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(f"Failed to write config file: {path} ({e})") from e

    logger.debug(f"Saved config to {path}")


def _ask(text: str, default: str) -> str:
    """Prompt for a value. Blank or whitespace-only answers keep the default."""
    return click.prompt(text, default=default).strip() or default


def run_setup_wizard() -> Config:
    """Interactively build a Config. Empty answers keep the shown default."""
    defaults = Config()

    click.echo("Welcome to tweet-memo! Let's set up your configuration.")
    click.echo()

    target_directory = _ask("Target directory for Markdown files", defaults.target_directory)
    filename_format = _ask(
        "Filename format (use YYYY, MM, DD for date placeholders)", defaults.filename_format
    )
    entry_format = _ask(
        "Entry format (use HH:mm:ss for time, {text} for your input)", defaults.entry_format
    )
    target_section = _ask("Target section in Markdown files", defaults.target_section)

    click.echo()
    click.echo("Configuration completed!")

    return Config(
        target_directory=target_directory,
        filename_format=filename_format,
        entry_format=entry_format,
        target_section=target_section,
    )


def load_or_create_config(path: Path = CONFIG_FILE) -> Config:
    """Load the config file, running the setup wizard on first use."""
    if path.exists():
        return load_config(path)

    config = run_setup_wizard()
    save_config(config, path)
    click.echo(f"Configuration file created: {path}")
    return config
