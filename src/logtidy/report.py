"""Report data structures and output formatters (text and JSON)."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, asdict
from typing import List, Optional

from .core import CleanResult
from .diff import format_diff, removed_text
from .normalize import pattern_hash


@dataclass
class BlockItem:
    """One unique block in the deduplicated log.

    Attributes:
        count: How many input blocks shared this fingerprint.
        hash: SHA-1 of the fingerprint, a short stable identifier.
        fingerprint: Normalized text with placeholders.
        sample: First line of the representative block.
    """
    count: int
    hash: str
    fingerprint: str
    sample: str


@dataclass
class Report:
    """Top-level report container with metadata, texts, and block items."""
    source: str
    generated_at: int
    input_blocks: int
    unique_blocks: int
    record_id: Optional[int]
    deduplicated: str
    cleaned: str
    removed: str
    items: List[BlockItem]


def build_report(result: CleanResult, source: str) -> Report:
    """Flatten a :class:`CleanResult` into a serializable report."""
    items = [
        BlockItem(
            count=e.count,
            hash=pattern_hash(e.fingerprint),
            fingerprint=e.fingerprint,
            sample=e.representative.split("\n", 1)[0],
        )
        for e in result.summary.entries
    ]
    return Report(
        source=source,
        generated_at=int(time.time()),
        input_blocks=result.summary.input_blocks,
        unique_blocks=len(items),
        record_id=result.record_id,
        deduplicated=result.deduplicated,
        cleaned=result.cleaned,
        removed=removed_text(result.diff),
        items=items,
    )


def print_text_report(report: Report, show_diff: bool, result: Optional[CleanResult] = None) -> None:
    """Print a human-readable report to stdout.

    The diff section needs the original *result*, since the report only
    keeps the removed text.
    """
    print("\n=== Log Tidy Report ===")
    print(f"Source: {report.source} | blocks={report.input_blocks} | unique={report.unique_blocks}")
    if report.record_id is not None:
        print(f"Record: #{report.record_id}")
    print()

    if not report.items:
        print("No log blocks found.")
        return

    repeated = [it for it in report.items if it.count > 1]
    if repeated:
        print("Repeated blocks:")
        for it in repeated:
            print(f"  x{it.count:<5} {it.hash[:10]}  {it.sample}")
        print()

    if show_diff and result is not None:
        print("--- Diff (deduplicated -> cleaned) ---")
        print(format_diff(result.diff))
        print()

    print("--- Cleaned log ---")
    print(report.cleaned)


def report_to_json(report: Report) -> str:
    """Serialize the full report to a pretty-printed JSON string."""
    return json.dumps(asdict(report), indent=2)
