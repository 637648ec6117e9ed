"""Centralised settings for linkwatch.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Sources / state storage
    # ------------------------------------------------------------------
    sources_file: Optional[Path] = field(
        default_factory=lambda: _optional_path("LINKWATCH_SOURCES_FILE")
    )
    state_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("LINKWATCH_STATE_DIR", Path.home() / ".linkwatch")
        )
    )

    # ------------------------------------------------------------------
    # HTTP service
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("LINKWATCH_HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("LINKWATCH_PORT", "8080"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKWATCH_USER_AGENT",
            "Mozilla/5.0 (compatible; linkwatch/0.1)",
        )
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    stream_buffer_size: int = field(
        default_factory=lambda: int(os.environ.get("STREAM_BUFFER_SIZE", "64"))
    )


# Module-level singleton, import this everywhere:
#   from linkwatch.config import settings
settings = Settings()
