"""URL helpers for values returned by Notion.

Notion sometimes returns relative links (``/22961d0ee2924074a22ce37f405b941a``)
in ``href`` fields. They are resolved against the notion.so origin.

``httpx.URL`` accepts more than a browser would, so absolute URLs are also
checked for a usable host, and web URLs get the ``/`` path a browser adds
(``https://example.com`` becomes ``https://example.com/``).
"""

import httpx

from typed_notion.errors import MalformedUrl

NOTION_ORIGIN = httpx.URL("https://notion.so")

# Schemes that cannot go without a host.
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

# httpx percent-encodes spaces, <, >, ^ and the like in hosts and leaves | and \ as-is.
_FORBIDDEN_HOST_CHARS = frozenset("%|\\")


def _checked(url: httpx.URL) -> httpx.URL | None:
    if url.scheme not in _HOST_SCHEMES:
        return url
    if not url.host or any(char in _FORBIDDEN_HOST_CHARS for char in url.host):
        return None
    # raw_path is "/" for an empty path
    return url.copy_with(raw_path=url.raw_path)


def parse_absolute_url(raw: str) -> httpx.URL | None:
    """Parse ``raw`` as an absolute URL, returning None when it is not one."""
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL:
        return None
    if not url.scheme:
        return None
    return _checked(url)


def resolve_url(raw: str, base: httpx.URL = NOTION_ORIGIN) -> httpx.URL:
    """Read ``raw`` as an absolute URL, falling back to ``base``-relative.

    Raises:
        MalformedUrl: if neither reading works.
    """
    try:
        url = httpx.URL(raw)
        if not url.scheme:
            url = base.join(raw)
    except httpx.InvalidURL as e:
        raise MalformedUrl(raw) from e
    checked = _checked(url)
    if checked is None:
        raise MalformedUrl(raw)
    return checked
