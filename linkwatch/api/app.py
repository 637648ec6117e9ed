"""FastAPI application factory.

Lifespan
--------
On startup the app makes sure a :class:`~linkwatch.pipeline.Monitor` is
attached to ``app.state.monitor``.  When the factory was not handed one, the
source list is read from ``settings.sources_file``.  Prior link state is
*not* cached here; every request loads and saves it through the store.

Routers
-------
    /    GET the new-links report (HTML, streamed per source)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from linkwatch import __version__
from linkwatch.config import settings
from linkwatch.pipeline import Monitor
from linkwatch.sources import load_sources

from linkwatch.api.routers import report as report_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the monitor from configuration if none was injected."""
    if getattr(app.state, "monitor", None) is None:
        if settings.sources_file is None:
            raise RuntimeError(
                "No sources configured: set LINKWATCH_SOURCES_FILE or pass a Monitor."
            )
        app.state.monitor = Monitor(load_sources(settings.sources_file))
    yield


def create_app(monitor: Optional[Monitor] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="linkwatch",
        description="Reports outbound links that appeared since the last request.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.monitor = monitor

    app.include_router(report_router.router, tags=["report"])

    return app


# Module-level instance used by uvicorn (requires LINKWATCH_SOURCES_FILE):
#   uvicorn linkwatch.api.app:app
app = create_app()
