"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single source fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Link:
    """An outbound hyperlink found on a source page.

    ``text`` is the anchor's trimmed visible text, or the URL itself when the
    anchor has no visible text.
    """

    url: str
    text: str
