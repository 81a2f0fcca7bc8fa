"""tweet-memo CLI - record tweets into today's Markdown note."""

import logging
import sys
from pathlib import Path

import click

from .config import CONFIG_FILE, load_or_create_config, run_setup_wizard, save_config
from .errors import InputError, TweetMemoError
from .writer import TweetWriter

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}


def _error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def _record(writer: TweetWriter, text: str) -> None:
    writer.write_tweet(text)
    click.secho(f"Tweet recorded: {text}", fg="green")


def _read_line() -> str | None:
    """Read one line from the prompt. Returns None on end of input."""
    try:
        return click.prompt(">", default="", show_default=False, prompt_suffix=" ")
    except click.Abort:
        return None
    except OSError as e:
        raise InputError(f"Failed to read input: {e}") from e


def _interactive(writer: TweetWriter) -> None:
    """Read tweets until quit/exit or end of input."""
    click.echo("Enter your tweets ('quit' or 'exit' to stop).")
    while True:
        line = _read_line()
        if line is None:
            click.echo()
            break

        text = line.strip()
        if not text:
            continue
        if text in QUIT_COMMANDS:
            break

        try:
            _record(writer, text)
        except TweetMemoError as e:
            logger.warning(f"Entry not recorded: {e}")
            _error(str(e))


@click.command()
@click.argument("text", required=False)
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE, show_default=True, help="Config file to use",
)
@click.option("--setup", is_flag=True, help="Re-run the configuration wizard")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="tweet-memo")
def main(text: str | None, config_path: Path, setup: bool, debug: bool):
    """Record TEXT under today's tweet section. Without TEXT, read tweets interactively."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        if setup:
            config = run_setup_wizard()
            save_config(config, config_path)
            click.echo(f"Configuration saved: {config_path}")
            if text is None:
                return
        else:
            config = load_or_create_config(config_path)
    except TweetMemoError as e:
        _error(str(e))
        sys.exit(1)

    writer = TweetWriter(config)

    if text is None:
        try:
            _interactive(writer)
        except InputError as e:
            _error(str(e))
            sys.exit(1)
        return

    if not text.strip():
        click.echo("No text entered.")
        return

    try:
        _record(writer, text)
    except TweetMemoError as e:
        _error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
