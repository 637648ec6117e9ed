"""HTTP fetcher for source pages."""

from __future__ import annotations

import httpx

from linkwatch.config import settings
from linkwatch.scraper.models import RawPage


class FetchError(Exception):
    """Raised when a source responds with anything other than ``200 OK``."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Failed to get document: {url} (HTTP {status_code})")
        self.url = url
        self.status_code = status_code


def fetch_document(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed; only a final ``200`` counts as success.

    Raises:
        httpx.HTTPError: On transport failures (DNS, connection, timeout).
        FetchError: If the final response status is not ``200``.
    """
    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        if response.status_code != 200:
            raise FetchError(url, response.status_code)
        html = response.text

    return RawPage(url=url, html=html, status_code=response.status_code)
