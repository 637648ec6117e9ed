"""Fetch-extract-diff-persist pipeline.

Public re-exports so callers can write::

    from linkwatch.pipeline import Monitor, RunResult
"""

from linkwatch.pipeline.diff import reconcile
from linkwatch.pipeline.models import RunResult
from linkwatch.pipeline.monitor import Monitor
from linkwatch.pipeline.orchestrator import FetchOrchestrator, LinkStream

__all__ = ["Monitor", "RunResult", "FetchOrchestrator", "LinkStream", "reconcile"]
