"""Link extraction: turns a fetched document into a stream of :class:`Link`."""

from __future__ import annotations

import re
from typing import Iterator, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from linkwatch.scraper.models import Link

_SCHEMES = ("http://", "https://")

# ASCII control characters are never valid anywhere in a URL.
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")
# A "%" must introduce exactly two hex digits.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# ASCII characters accepted in a hostname; non-ASCII (IDN) hosts pass through.
_HOST_ASCII = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    "-._~!$&'()*+,;=:[]<>\"%"
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _valid_hostname(hostname: str) -> bool:
    return all(ch in _HOST_ASCII for ch in hostname if ch.isascii())


def _qualifying_href(href: Optional[str]) -> bool:
    """Return ``True`` if *href* is an absolute http(s) URL with a hostname.

    Hrefs that do not parse cleanly are non-qualifying: control characters
    anywhere, illegal hostname characters, or a malformed ``%`` escape in the
    authority, path or fragment (the query is left as written).
    """
    if not href or not href.startswith(_SCHEMES) or _CONTROL.search(href):
        return False
    try:
        parts = urlsplit(href)
        hostname = parts.hostname
    except ValueError:
        return False
    if not hostname or not _valid_hostname(hostname):
        return False
    return not any(
        _BAD_ESCAPE.search(piece) for piece in (parts.netloc, parts.path, parts.fragment)
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML body into a queryable document."""
    return BeautifulSoup(html, "html.parser")


def extract_links(document: BeautifulSoup) -> Iterator[Link]:
    """Yield a :class:`Link` for every qualifying anchor in *document*.

    Anchors are produced lazily, in document order.  Repeated URLs are *not*
    collapsed here; that is the diff engine's job.
    """
    for anchor in document.find_all("a"):
        href = anchor.get("href")
        if not _qualifying_href(href):
            continue
        text = anchor.get_text().strip()
        yield Link(url=href, text=text or href)
