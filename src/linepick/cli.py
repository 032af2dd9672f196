"""CLI entry point for linepick. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from linepick.app import PickerAborted, pick
from linepick.config import DEFAULT_VISIBLE_CHOICES, PickerConfig
from linepick.terminal import DEFAULT_TTY_PATH, TerminalConfigError

logger = logging.getLogger(__name__)


def read_candidates(stream) -> list[str]:
    """Read newline-delimited candidates, stripping line endings."""
    return [line.rstrip("\r\n") for line in stream]


def _configure_logging(log_file: str | None, log_level: str) -> None:
    if not log_file:
        # The picker owns the terminal; keep log records off stderr.
        logging.getLogger("linepick").addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    package_logger = logging.getLogger("linepick")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper()))


@click.command()
@click.option(
    "-n",
    "--visible-choices",
    type=click.IntRange(min=1),
    default=DEFAULT_VISIBLE_CHOICES,
    show_default=True,
    envvar="LINEPICK_VISIBLE_CHOICES",
    help="Number of matches shown in the picker window",
)
@click.option("-s", "--search", default="", help="Initial query")
@click.option(
    "--tty",
    "tty_path",
    default=DEFAULT_TTY_PATH,
    show_default=True,
    envvar="LINEPICK_TTY",
    help="Terminal device to draw on and read keys from",
)
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Write debug logs here")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="info",
    show_default=True,
)
def main(visible_choices, search, tty_path, log_file, log_level):
    """Pick one line from standard input and print it to standard output."""
    _configure_logging(log_file, log_level)

    try:
        config = PickerConfig(visible_choices=visible_choices, search=search, tty_path=tty_path)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    # Undecodable bytes (e.g. Latin-1 file names) become U+FFFD instead of failing.
    with click.open_file("-", errors="replace") as stream:
        candidates = read_candidates(stream)
    logger.info("Read %d candidates", len(candidates))
    if not candidates:
        click.echo("linepick: no candidates on standard input", err=True)
        sys.exit(1)

    try:
        choice = pick(candidates, config)
    except PickerAborted as e:
        logger.info("Session aborted: %s", e)
        sys.exit(1)
    except TerminalConfigError as e:
        logger.exception("Terminal configuration failed")
        click.echo(f"linepick: {e}", err=True)
        sys.exit(1)

    click.echo(choice)


if __name__ == "__main__":
    main()
