"""Per-request driver: load state, fetch concurrently, diff, persist.

A pass runs in two phases:

1. :meth:`Monitor.check` loads every source's prior state up front.  A state
   record that exists but cannot be read aborts the pass here, before any
   fetch is launched.
2. The returned iterator starts one fetch per source and then yields a
   :class:`RunResult` per source in declaration order, saving each source's
   new state as soon as its stream is drained.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional, Sequence

from linkwatch.pipeline.diff import reconcile
from linkwatch.pipeline.models import RunResult
from linkwatch.pipeline.orchestrator import FetchOrchestrator
from linkwatch.scraper import fetch_document
from linkwatch.scraper.models import RawPage
from linkwatch.state import StateStore, StateStoreError

logger = logging.getLogger(__name__)


class Monitor:
    """Track new outbound links for a fixed, ordered list of sources."""

    def __init__(
        self,
        sources: Sequence[str],
        store: Optional[StateStore] = None,
        fetch: Callable[[str], RawPage] = fetch_document,
    ) -> None:
        self.sources = list(sources)
        self.store = store or StateStore()
        self._fetch = fetch

    def check(self) -> Iterator[RunResult]:
        """Run one pass over all sources.

        Raises:
            StateStoreError: If any source's prior state cannot be loaded.
        """
        prior = {source: self.store.load(source) for source in self.sources}
        return self._run(prior)

    def _run(self, prior: dict[str, dict[str, int]]) -> Iterator[RunResult]:
        with FetchOrchestrator(fetch=self._fetch) as orchestrator:
            streams = orchestrator.run(self.sources)
            for source, stream in zip(self.sources, streams):
                new_links, next_state = reconcile(source, prior[source], stream)
                if stream.failed:
                    # Links forwarded before a mid-page failure are not reported.
                    new_links = []
                result = RunResult(
                    source=source,
                    new_links=new_links,
                    state=next_state,
                    error=stream.error,
                )
                self._persist(result)
                yield result

    def _persist(self, result: RunResult) -> None:
        # A failed fetch keeps the previous record.
        if result.failed:
            logger.info("Keeping previous state for %s", result.source)
            return
        try:
            self.store.save(result.source, result.state)
        except StateStoreError as exc:
            logger.error("%s", exc)
