"""URL commands for the humanize-url CLI.

Behavior
- Rendered URLs go to **stdout**, one per line, so output can be piped.
- Invalid input is reported on **stderr** and turns the exit code non-zero,
  but never stops the remaining URLs from being processed.

Failure modes
- A URL that fails strict parsing: error line on stderr, exit code 1.
- ``rewrite`` never fails on the edits themselves; if the result would not
  survive strict parsing, a warning is printed alongside it.
"""

from __future__ import annotations

import logging

import click

from humanize_url import config
from humanize_url.errors import ParseError
from humanize_url.humanize import humanize
from humanize_url.parsing import parse
from humanize_url.unrestricted import UnrestrictedUrl

from .helpers import error, hyperlink, warn

logger = logging.getLogger(__name__)

DROPPABLE = ("scheme", "username", "password", "port", "query", "fragment")


@click.command()
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--strip-trailing-slash",
    is_flag=True,
    help="Also drop a trailing '/' from non-root paths.",
)
@click.option(
    "--link/--no-link",
    default=True,
    envvar=config.LINKS_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Make each line an OSC-8 hyperlink to the full URL when the terminal supports it.",
)
@click.pass_context
def show(
    ctx: click.Context, urls: tuple[str, ...], strip_trailing_slash: bool, link: bool
) -> None:
    """Print each URL in its short, human-readable form."""
    failed = 0
    for url in urls:
        try:
            text = humanize(url, strip_trailing_slash=strip_trailing_slash)
        except ParseError as e:
            logger.debug("Cannot humanize %r", url, exc_info=True)
            error(str(e))
            failed += 1
            continue
        click.echo(hyperlink(url, text) if link else text)

    if failed:
        logger.info("%d of %d URLs could not be parsed", failed, len(urls))
        ctx.exit(1)


@click.command()
@click.argument("url")
@click.option("--scheme", help="Replace the scheme (any text is accepted).")
@click.option("--username", help="Replace the username.")
@click.option("--password", help="Replace the password.")
@click.option("--host", help="Replace the host.")
@click.option("--port", help="Replace the port (not checked to be numeric).")
@click.option("--path", help="Replace the path.")
@click.option("--query", help="Replace the query, without the leading '?'.")
@click.option("--fragment", help="Replace the fragment, without the leading '#'.")
@click.option(
    "--drop",
    "dropped",
    multiple=True,
    type=click.Choice(DROPPABLE, case_sensitive=False),
    help="Remove an optional component. Applied after replacements. Repeatable.",
)
def rewrite(url: str, dropped: tuple[str, ...], **replacements: str | None) -> None:
    """Copy URL into an editable form, apply the edits and print the result.

    No edit is validated: ``--scheme jojo`` on an ``https`` URL yields
    ``jojo://...`` even though a standards-conformant parser forbids it.
    """
    try:
        parsed = UnrestrictedUrl.parse(url)
    except ParseError as e:
        raise click.ClickException(str(e)) from e

    for name, value in replacements.items():
        if value is not None:
            setattr(parsed, name, value)
    for name in dropped:
        setattr(parsed, name.lower(), None)

    result = str(parsed)
    logger.debug("Rewrote %r as %r", url, result)
    click.echo(result)

    try:
        parse(result)
    except ParseError as e:
        warn(f"Result is not a valid URL: {e.reason}")
