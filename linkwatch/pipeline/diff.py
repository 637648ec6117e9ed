"""Classify a source's links against its previously persisted state."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from linkwatch.scraper.models import Link

logger = logging.getLogger(__name__)


def reconcile(
    source: str,
    prior_state: Mapping[str, int],
    links: Iterable[Link],
) -> tuple[list[Link], dict[str, int]]:
    """Split *links* into new ones and build the state to persist next.

    Links are processed in the order they arrive:

    - a URL known from *prior_state* is not new; its next count is its prior
      count plus one (repeat occurrences do not accumulate further);
    - a URL already seen earlier in this pass is not reported again;
    - anything else is new and starts at a count of one.

    The returned state is a complete snapshot of this pass.  URLs that were
    in *prior_state* but not in *links* are dropped.

    Returns:
        ``(new_links, next_state)`` where ``new_links`` is in first-occurrence
        order.
    """
    new_links: list[Link] = []
    next_state: dict[str, int] = {}

    for link in links:
        url = link.url
        if url in prior_state:
            next_state[url] = prior_state[url] + 1
        elif url not in next_state:
            next_state[url] = 1
            new_links.append(link)

    logger.info(
        "%s: %d new, %d known, %d distinct link(s)",
        source,
        len(new_links),
        len(next_state) - len(new_links),
        len(next_state),
    )
    return new_links, next_state
