"""Concurrent fan-out of source fetches.

Every source gets its own worker task and its own :class:`LinkStream`.  The
worker fetches the page, extracts links and pushes them into the stream; the
consumer reads streams one after another in source-declaration order while
all workers keep running in the background.

Usage::

    with FetchOrchestrator() as orchestrator:
        for source, stream in zip(sources, orchestrator.run(sources)):
            for link in stream:
                ...
"""

from __future__ import annotations

import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, Optional, Sequence

from linkwatch.config import settings
from linkwatch.scraper import extract_links, fetch_document, parse_document
from linkwatch.scraper.models import Link, RawPage

logger = logging.getLogger(__name__)

# End-of-stream marker placed on the queue by ``LinkStream.close``.
_CLOSED = object()


class LinkStream:
    """A closable FIFO of :class:`Link` owned by a single producer.

    ``put`` blocks while the buffer is full; iteration blocks until the next
    link arrives and ends once the producer has called ``close``.  A stream
    can be iterated only once.
    """

    def __init__(self, source: str, maxsize: int = 0) -> None:
        self.source = source
        self.error: Optional[str] = None
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=maxsize)
        self._exhausted = False

    def put(self, link: Link) -> None:
        self._queue.put(link)

    def close(self, error: Optional[str] = None) -> None:
        """Mark the stream finished, optionally recording why it failed."""
        self.error = error
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[Link]:
        while not self._exhausted:
            item = self._queue.get()
            if item is _CLOSED:
                self._exhausted = True
                return
            yield item  # type: ignore[misc]

    def drain(self) -> None:
        """Discard everything left in the stream, up to and including close."""
        for _ in self:
            pass

    @property
    def failed(self) -> bool:
        return self.error is not None


class FetchOrchestrator:
    """Run one fetch+extract task per source on a dedicated thread pool."""

    def __init__(
        self,
        fetch: Callable[[str], RawPage] = fetch_document,
        buffer_size: Optional[int] = None,
    ) -> None:
        self._fetch = fetch
        self._buffer_size = (
            settings.stream_buffer_size if buffer_size is None else buffer_size
        )
        self._executor: Optional[ThreadPoolExecutor] = None
        self._streams: list[LinkStream] = []

    # ------------------------------------------------------------------
    # Context management
    # ------------------------------------------------------------------
    def __enter__(self) -> "FetchOrchestrator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        # Unblock any producer still waiting on a full buffer before joining.
        for stream in self._streams:
            stream.drain()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(self, sources: Sequence[str]) -> list[LinkStream]:
        """Launch a task per source and return their streams, index-aligned."""
        streams = [LinkStream(source, maxsize=self._buffer_size) for source in sources]
        self._streams.extend(streams)
        if not streams:
            return streams

        self._executor = ThreadPoolExecutor(
            max_workers=len(streams), thread_name_prefix="fetch"
        )
        for stream in streams:
            self._executor.submit(self._produce, stream)
        return streams

    # ------------------------------------------------------------------
    # Worker
    # ------------------------------------------------------------------
    def _produce(self, stream: LinkStream) -> None:
        """Fetch ``stream.source`` and forward its links; always closes."""
        error: Optional[str] = None
        try:
            raw = self._fetch(stream.source)
            document = parse_document(raw.html)
            for link in extract_links(document):
                stream.put(link)
        except Exception as exc:
            error = str(exc) or exc.__class__.__name__
            logger.warning("Skipping %s: %s", stream.source, error)
        finally:
            stream.close(error)
