"""Error definitions for humanize-url."""


class ParseError(ValueError):
    """Raised when a string cannot be parsed as an absolute URL."""

    def __init__(self, url: object, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason
