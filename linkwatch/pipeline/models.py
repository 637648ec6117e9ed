"""Per-run results produced by the monitor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from linkwatch.scraper.models import Link


@dataclass
class RunResult:
    """Outcome of one pass over a single source."""

    source: str
    new_links: list[Link] = field(default_factory=list)
    state: dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """``True`` when the source could not be fetched or parsed."""
        return self.error is not None
