"""humanize-url CLI entry point.

Defines the top-level ``humanize-url`` command (via Click-Extra), turns its
logging options into a `LoggingSettings` value, and registers the URL
subcommands.

Currently available commands
- ``humanize-url show``: print URLs in their short, display-only form.
- ``humanize-url rewrite``: edit URL components without validation.

Notes
- The CLI version is sourced from `humanize_url.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Log output goes to stderr; stdout only carries rendered URLs.

Examples
    $ humanize-url show https://example.com/docs/
    $ humanize-url rewrite https://example.com --scheme jojo
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from humanize_url import __version__, config
from humanize_url.logging import LoggingSettings, configure_logging, console_level

from .helpers.log_level_parser import parse_log_level
from .urls import rewrite, show

HELP = """Render URLs for humans and rewrite them without restrictions.

    `show` strips schemes, credentials, default ports, queries and fragments so
    a URL fits on a terminal line. `rewrite` copies a URL's components into an
    editable form and prints them back verbatim, even when the edit would be
    rejected by a standards-conformant parser.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Log one level more than WARNING per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition (-q ERROR).",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything, with timestamps and source locations.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight-recorder file (default: latest.log in the user log directory).",
    envvar=config.LOG_PATH_ENVVAR,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENVVAR,
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=False,
    show_default=True,
    help=(
        "Buffer DEBUG records of the URLs being processed and write them to "
        "--log-path as soon as a warning or parse error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar=config.FORCE_FLUSH_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Minimum level for one logger, as NAME=LEVEL "
        "(e.g. -L yarl=DEBUG -L humanize_url.parsing=INFO). Repeatable; the "
        "environment variable takes a comma or space separated list."
    ),
    default=("yarl=WARNING",),
    envvar=config.LOGGER_LEVELS_ENVVAR,
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def humanize_url(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """humanize-url command-line interface."""
    if flight_recorder and log_path is None:
        log_path = config.default_log_path()

    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        flight_recorder_path=log_path if flight_recorder else None,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(settings, command=ctx.invoked_subcommand)
    ctx.call_on_close(logging.shutdown)


humanize_url.add_command(show)
humanize_url.add_command(rewrite)
