"""File-backed per-source link state.

Each source gets one flat file named after the MD5 hex digest of the source
URL.  The file holds one ``"<url> <count>"`` line per known link::

    https://example.com/a 3
    https://example.com/b 1

Digest collisions are not handled; two sources hashing to the same key would
share a record.
"""

from __future__ import annotations

import hashlib
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from linkwatch.config import settings

logger = logging.getLogger(__name__)

_COUNT = re.compile(r"[+-]?[0-9]+")


class StateStoreError(Exception):
    """Raised when a state record cannot be read or written."""


def _parse_line(line: str) -> Optional[tuple[str, int]]:
    """Return ``(url, count)`` for a well-formed record line, else ``None``."""
    # URLs may contain spaces; the count never does.
    parts = line.rsplit(" ", 1)
    if len(parts) != 2 or not _COUNT.fullmatch(parts[1]):
        return None
    return parts[0], int(parts[1])


def _split_records(text: str) -> list[str]:
    """Split *text* on line feeds only, dropping a trailing carriage return per line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class StateStore:
    """Load and save ``url -> count`` mappings keyed by source URL."""

    def __init__(self, directory: Optional[Path] = None) -> None:
        self.directory = Path(directory or settings.state_dir)

    @staticmethod
    def key_for(source: str) -> str:
        """Return the storage key (MD5 hex digest) for *source*."""
        return hashlib.md5(source.encode("utf-8")).hexdigest()

    def path_for(self, source: str) -> Path:
        return self.directory / self.key_for(source)

    def load(self, source: str) -> dict[str, int]:
        """Return the persisted mapping for *source*.

        A missing record yields an empty mapping.  Malformed lines and
        non-positive counts are skipped.

        Raises:
            StateStoreError: If the record exists but cannot be read.
        """
        path = self.path_for(source)
        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                lines = _split_records(fh.read())
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StateStoreError(f"Cannot load state for {source!r} from {path}: {exc}") from exc

        state: dict[str, int] = {}
        for line in lines:
            parsed = _parse_line(line)
            if parsed is None:
                logger.debug("Skipping malformed state line in %s: %r", path, line)
                continue
            url, count = parsed
            if count > 0:
                state[url] = count
        return state

    def save(self, source: str, state: Mapping[str, int]) -> None:
        """Replace the record for *source* with *state*.

        Entries with a count <= 0 are not written.  The record is written to
        a temporary file and moved into place, so readers see either the old
        record or the new one.

        Raises:
            StateStoreError: If the record cannot be written.
        """
        path = self.path_for(source)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                    for url, count in state.items():
                        if count > 0:
                            fh.write(f"{url} {count}\n")
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StateStoreError(f"Cannot save state for {source!r} to {path}: {exc}") from exc
