"""Input dispatcher: routes CLI args to a reader and bounds the submission."""

from __future__ import annotations

from typing import Tuple

from .file import read_file
from .stdin import read_stdin


def read_text(args) -> Tuple[str, str]:
    """Read the raw log selected by the parsed CLI arguments.

    Returns:
        A tuple of ``(text, source_description)`` where the description is
        ``"file:<path>"`` or ``"stdin"``.
    """
    if args.file and args.file != "-":
        return read_file(args.file), f"file:{args.file}"
    return read_stdin(), "stdin"


def validate_submission(text: str, max_chars: int) -> None:
    """Reject empty or oversized submissions before any processing.

    Raises:
        ValueError: If *text* is blank or longer than *max_chars*.
    """
    if not text.strip():
        raise ValueError("Log content is required")
    if max_chars > 0 and len(text) > max_chars:
        raise ValueError(f"Log is too large: {len(text)} characters (limit {max_chars})")
