"""Load the ordered list of sources to monitor."""

from __future__ import annotations

from pathlib import Path


class SourceListError(Exception):
    """Raised when the source list file cannot be read."""


def load_sources(path: Path | str) -> list[str]:
    """Return one source per line of *path*, in file order.

    Lines are split on line feeds only, with a trailing carriage return
    removed; there is no comment or blank-line handling.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as fh:
            text = fh.read()
    except OSError as exc:
        raise SourceListError(f"Cannot read source list {path}: {exc}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
