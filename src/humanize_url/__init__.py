"""humanize-url

Display-oriented URL rendering and a permissive, freely mutable URL model.

`humanize` shortens a URL for terminals and other narrow surfaces, while
`UnrestrictedUrl` holds an editable copy of a parsed URL's components that is
serialized back to text without re-validating it.
"""

from .errors import ParseError
from .humanize import humanize
from .parsing import parse
from .unrestricted import UnrestrictedUrl

__all__ = ["__version__", "ParseError", "UnrestrictedUrl", "humanize", "parse"]
__version__ = "0.1.0"
