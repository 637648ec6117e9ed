"""Report endpoint.

Routes
------
GET /    Re-fetch every configured source and stream the HTML report.

Prior state for all sources is loaded before the response starts; if any
record is unreadable the request fails with ``500`` and nothing is fetched.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse

from linkwatch.report import render_html
from linkwatch.state import StateStoreError

router = APIRouter()


@router.get("/")
def report(request: Request) -> StreamingResponse:
    """Return one section per source listing links that are new since last time."""
    monitor = request.app.state.monitor
    try:
        results = monitor.check()
    except StateStoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return StreamingResponse(
        render_html(results),
        media_type="text/html",
        headers={"Cache-Control": "no-cache"},
    )
