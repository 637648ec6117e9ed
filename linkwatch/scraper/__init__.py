"""Scraper package: source fetch & link extraction."""

from linkwatch.scraper.extractor import extract_links, parse_document
from linkwatch.scraper.fetcher import FetchError, fetch_document
from linkwatch.scraper.models import Link, RawPage

__all__ = [
    "fetch_document",
    "parse_document",
    "extract_links",
    "FetchError",
    "Link",
    "RawPage",
]
