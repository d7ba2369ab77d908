"""Hypothesis property tests for `UnrestrictedUrl`.

- **Round-trip**: copying a parsed URL and serializing it without edits yields
  text that parses back to the same components.
- **Free scheme**: any scheme-like string can replace the scheme and appears
  verbatim at the start of the serialized text.
- **Independence**: edits to a copy never leak into the parsed source.
"""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from humanize_url import UnrestrictedUrl, humanize
from humanize_url.parsing import parse

pytestmark = [pytest.mark.property]

# ============================================================================
#                               Strategies
# ============================================================================

SAFE = string.ascii_letters + string.digits + "-_~"

labels = st.text(
    alphabet=string.ascii_lowercase + string.digits, min_size=1, max_size=10
)
hosts = st.builds(
    lambda parts, tld: ".".join([*parts, tld]),
    st.lists(labels, min_size=1, max_size=3),
    st.sampled_from(["com", "org", "net", "io"]),
)
schemes = st.sampled_from(["http", "https", "ws", "wss", "ftp"])
ports = st.none() | st.integers(min_value=1024, max_value=65535)
segments = st.lists(st.text(alphabet=SAFE, min_size=1, max_size=8), max_size=4)
userinfo = st.none() | st.tuples(
    st.text(alphabet=SAFE, min_size=1, max_size=8),
    st.none() | st.text(alphabet=SAFE, min_size=1, max_size=8),
)
queries = st.none() | st.text(
    alphabet=string.ascii_letters + string.digits + "=&", min_size=1, max_size=12
)
fragments = st.none() | st.text(alphabet=SAFE, min_size=1, max_size=8)
any_schemes = st.text(alphabet=string.ascii_lowercase + "+.-", min_size=1, max_size=10)


@st.composite
def urls(draw) -> str:
    """Draw a well-formed absolute URL string."""
    scheme = draw(schemes)
    text = f"{scheme}://"
    if (info := draw(userinfo)) is not None:
        user, password = info
        text += user + (f":{password}" if password else "") + "@"
    text += draw(hosts)
    if (port := draw(ports)) is not None:
        text += f":{port}"
    text += "/" + "/".join(draw(segments))
    if (query := draw(queries)) is not None:
        text += f"?{query}"
    if (fragment := draw(fragments)) is not None:
        text += f"#{fragment}"
    return text


# ============================================================================
#                               Properties
# ============================================================================


@given(urls())
def test_round_trip_preserves_components(text: str) -> None:
    """Serializing an unedited copy parses back to the same components."""
    original = parse(text)
    again = parse(str(UnrestrictedUrl.from_url(original)))
    assert again.scheme == original.scheme
    assert again.raw_user == original.raw_user
    assert again.raw_password == original.raw_password
    assert again.raw_host == original.raw_host
    assert again.explicit_port == original.explicit_port
    assert again.raw_path == original.raw_path
    assert again.raw_query_string == original.raw_query_string
    assert again.raw_fragment == original.raw_fragment


@given(urls(), any_schemes)
def test_any_scheme_is_emitted_verbatim(text: str, scheme: str) -> None:
    """Replacing the scheme never fails and the new scheme leads the output."""
    url = UnrestrictedUrl.parse(text)
    url.scheme = scheme
    assert str(url).startswith(f"{scheme}://")


@given(urls())
def test_edits_do_not_touch_the_source(text: str) -> None:
    """The copy owns its values; the parsed URL is unaffected by edits."""
    original = parse(text)
    url = UnrestrictedUrl.from_url(original)
    url.scheme = "jojo"
    url.host = "elsewhere.invalid"
    url.path = "/changed"
    assert str(parse(text)) == str(original)
    assert original.scheme != "jojo"


@given(urls())
def test_humanize_never_leaks_scheme_credentials_query_or_fragment(text: str) -> None:
    """The humanized form is host, optional port and path only."""
    parsed = parse(text)
    rendered = humanize(text)
    assert not rendered.startswith(f"{parsed.scheme}:")
    assert "@" not in rendered
    assert "?" not in rendered
    assert "#" not in rendered
    assert rendered.startswith(parsed.raw_host)
