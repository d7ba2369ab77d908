"""Strict URL parsing.

Thin layer over `yarl.URL` that turns a string into an immutable, validated
URL value or raises `ParseError`. yarl accepts relative references and
silently percent-encodes junk (``"not a url"`` parses as a path), so this
module additionally requires a scheme, and a host for the hierarchical
schemes that cannot work without one.

Examples:
    ```py
    >>> parse("https://example.com:8443/a").explicit_port
    8443
    >>> parse("not a url")
    Traceback (most recent call last):
    ...
    humanize_url.errors.ParseError: Invalid URL 'not a url': relative URL without a scheme
    ```
"""

import logging

from yarl import URL

from .errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
SCHEMES_REQUIRING_HOST = frozenset(DEFAULT_PORTS)

# C0 controls and space, trimmed from both ends before parsing
C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))


def _build(text: str, original: object) -> URL:
    try:
        return URL(text)
    except (TypeError, ValueError) as e:
        logger.debug("yarl rejected %r: %s", original, e)
        raise ParseError(original, str(e)) from e


def parse(text: str) -> URL:
    """Parse `text` into an absolute `yarl.URL`.

    Leading and trailing spaces and C0 control characters are ignored. A
    host-requiring scheme written without ``//`` (``http:example.com``,
    ``https:/example.com``) is read as if the slashes were there.

    Args:
        text: The URL string to parse.

    Returns:
        URL: The parsed URL. It is immutable; edits yield new values.

    Raises:
        ParseError: If yarl rejects the input, the URL has no scheme, or a
            scheme that requires a host is given without one.
    """
    trimmed = text.strip(C0_CONTROL_OR_SPACE) if isinstance(text, str) else text
    url = _build(trimmed, text)

    if not url.scheme:
        logger.debug("Rejected %r: no scheme", text)
        raise ParseError(text, "relative URL without a scheme")
    if url.scheme in SCHEMES_REQUIRING_HOST and not url.raw_host:
        if rest := trimmed.partition(":")[2].lstrip("/\\"):
            url = _build(f"{url.scheme}://{rest}", text)
        if not url.raw_host:
            logger.debug("Rejected %r: empty host for %s", text, url.scheme)
            raise ParseError(text, "empty host")
    return url


def default_port(scheme: str) -> int | None:
    """Return the registered default port for `scheme`, or None if it has none."""
    return DEFAULT_PORTS.get(scheme)


def explicit_non_default_port(url: URL) -> int | None:
    """Return the port written in `url` unless it is the scheme's default.

    Args:
        url: A parsed URL.

    Returns:
        int | None: The explicit port, or None when it is absent or redundant.
    """
    port = url.explicit_port
    if port is None or port == default_port(url.scheme):
        return None
    return port
