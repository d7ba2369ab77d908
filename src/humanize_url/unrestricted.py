"""A permissive, freely mutable URL model.

`yarl.URL` values are immutable and validated: there is no way to, say, give an
``https`` URL an unregistered scheme in place. `UnrestrictedUrl` copies the
components of a parsed URL into plain attributes that can be reassigned to
anything, and serializes them by concatenation. Nothing is re-validated on the
way out, so the caller owns the sanity of the result.

Examples:
    ```py
    >>> url = UnrestrictedUrl.parse("https://example.com")
    >>> url.scheme = "jojo"
    >>> str(url)
    'jojo://example.com/'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field

from yarl import URL

from .parsing import explicit_non_default_port, parse


@dataclass
class UnrestrictedUrl:  # pylint: disable=too-many-instance-attributes
    """Editable copy of a URL's components.

    All text is kept in its encoded form, exactly as the parser produced it.
    Optional components use ``None`` for "absent"; `host` and `path` are
    always strings.
    """

    scheme: str | None = None
    username: str | None = None
    password: str | None = None
    host: str = ""
    port: str | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None
    has_authority: bool = field(default=False, repr=False)

    @classmethod
    def from_url(cls, url: URL) -> UnrestrictedUrl:
        """Copy every component of `url` into a new, independent instance."""
        port = explicit_non_default_port(url)
        return cls(
            scheme=url.scheme or None,
            username=url.raw_user or None,
            password=url.raw_password,
            host=url.host_subcomponent or "",
            port=None if port is None else str(port),
            path=url.raw_path,
            query=url.raw_query_string or None,
            fragment=url.raw_fragment or None,
            has_authority=str(url).startswith(f"{url.scheme}://"),
        )

    @classmethod
    def parse(cls, text: str) -> UnrestrictedUrl:
        """Strictly parse `text`, then copy it.

        Raises:
            ParseError: If `text` is not a valid absolute URL.
        """
        return cls.from_url(parse(text))

    def path_segments(self) -> list[str] | None:
        """Return the ``/``-separated segments of an absolute path, else None."""
        if not self.path.startswith("/"):
            return None
        return self.path[1:].split("/")

    def to_string(self) -> str:
        """Serialize the components without any validation."""
        parts: list[str] = []
        if self.scheme is not None:
            parts.append(f"{self.scheme}:")

        # Userinfo or a port without a host still opens an authority.
        userinfo = self.username is not None or self.password is not None
        if self.host or self.has_authority or userinfo or self.port is not None:
            if self.scheme is not None:
                parts.append("//")
            if userinfo:
                parts.append(self.username or "")
                if self.password:
                    parts.append(f":{self.password}")
                parts.append("@")
            parts.append(self.host)
            if self.port is not None:
                parts.append(f":{self.port}")

        parts.append(self.path)
        if self.query is not None:
            parts.append(f"?{self.query}")
        if self.fragment is not None:
            parts.append(f"#{self.fragment}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()
