"""SDKUTILS CLI entry point.

Defines the top-level ``sdkutils`` command (via Click-Extra), sets up
logging, and registers the helper commands.

Currently available commands
- ``sdkutils encode-params``: build a percent-encoded query string.
- ``sdkutils encode-uri``: fill placeholders in a path template.
- ``sdkutils compare``: deep-compare two JSON documents.
- ``sdkutils check-keys``: validate the keys of a JSON object.

Examples
    $ sdkutils --version
    $ sdkutils encode-params foo=bar baz=beer@
    $ sdkutils -v compare left.json right.json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from sdkutils import __version__
from sdkutils.config import LOG_PATH_ENVVAR, default_log_path
from sdkutils.logging import configure_logging

from .commands import COMMANDS
from .helpers import hyperlink, parse_log_level

logger = logging.getLogger(__name__)


HELP = """SDKUTILS command-line interface.

    Shell access to the SDKUTILS helpers: encode query strings and path
    templates the way the client library does, deep-compare JSON documents,
    and validate option files against required and allowed keys.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  URI encoding: "
        + hyperlink("https://datatracker.ietf.org/doc/html/rfc3986#section-2.1"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Lower the console threshold by one level per repetition (-vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Raise the console threshold by one level per repetition.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=default_log_path,
    envvar=LOG_PATH_ENVVAR,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent DEBUG records in memory, whatever the console level, "
        "and dump them to --log-path as soon as a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Dump the flight recorder on exit even if nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SDKUTILS_LOGGER_LEVEL",
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. -L sdkutils=INFO). "
        "Repeatable; the environment variable takes a comma or space list."
    ),
)
@clickx.pass_context
def sdkutils(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SDKUTILS command-line interface."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    configure_logging(
        level=max(logging.DEBUG, min(logging.CRITICAL, level)),
        debug_mode=debug,
        color=ctx.color is not False,  # None means "let Rich decide"
        log_path=log_path if flight_recorder else None,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    logger.debug("sdkutils %s, subcommand %s", __version__, ctx.invoked_subcommand)
    ctx.call_on_close(logging.shutdown)


for command in COMMANDS:
    sdkutils.add_command(command)
