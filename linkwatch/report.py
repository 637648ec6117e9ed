"""Render monitor results as an HTML page or plain text.

Both renderers are generators so a caller can stream each source's section
as soon as that source has been processed.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Iterator

from linkwatch.pipeline.models import RunResult

NO_NEW_LINKS = "No new links found"


def render_html(results: Iterable[RunResult]) -> Iterator[str]:
    """Yield an HTML page with one section per result, in order."""
    yield "<html><head><title>linkwatch</title></head><body>\n"
    for result in results:
        yield f"<h3>{escape(result.source)}</h3>\n"
        if not result.new_links:
            yield f"<p>{NO_NEW_LINKS}</p>\n"
            continue
        for link in result.new_links:
            yield f'<p><a href="{escape(link.url)}">{escape(link.text)}</a></p>\n'
    yield "</body></html>\n"


def render_text(results: Iterable[RunResult]) -> Iterator[str]:
    """Yield a plain-text report, one block per result."""
    for result in results:
        yield f"{result.source}\n"
        if not result.new_links:
            yield f"  {NO_NEW_LINKS}\n"
            continue
        for link in result.new_links:
            if link.text == link.url:
                yield f"  {link.url}\n"
            else:
                yield f"  {link.text}  <{link.url}>\n"
