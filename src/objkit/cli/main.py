"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="OBJKIT_LOG_LEVEL",
    help="Logging level (env: OBJKIT_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """objkit - rectangles, JSON records and CSS selector building."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from objkit.cli.shape import area  # noqa: E402
from objkit.cli.codec import decode, encode  # noqa: E402
from objkit.cli.selector import build, selector  # noqa: E402

cli.add_command(area)
cli.add_command(encode)
cli.add_command(decode)
cli.add_command(selector)
cli.add_command(build)
