"""Read a log from a plain text file."""

from __future__ import annotations

from pathlib import Path


def read_file(path: str) -> str:
    """Return the UTF-8 contents of the file at *path*.

    Undecodable bytes are dropped rather than failing the whole read.

    Raises:
        RuntimeError: If *path* does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"File not found: {p}")
    return p.read_text(encoding="utf-8", errors="ignore")
