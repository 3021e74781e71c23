"""Core pipeline: segment, fingerprint, deduplicate, clean, and diff.

``deduplicate`` is a pure function over a string: it splits the log into
blank-line separated blocks, fingerprints each block, counts duplicates,
and rebuilds the log with one representative per fingerprint in
first-seen order. ``clean_log`` wraps it with the external cleanup call,
the line diff, and the optional record store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .cleanup import Cleaner
from .diff import DiffPart, diff_lines
from .normalize import DEFAULT_RULES, NormalizationRule, fingerprint
from .store import MemStorage

log = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


@dataclass
class LogBlock:
    """Consecutive non-blank lines forming one logical log entry."""
    lines: List[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass
class OccurrenceEntry:
    """Aggregated data for one fingerprint.

    Attributes:
        fingerprint: Normalized block text used as the dedup key.
        representative: Verbatim text of the first block with this fingerprint.
        count: Number of input blocks sharing the fingerprint.
    """
    fingerprint: str
    representative: str
    count: int = 1


@dataclass
class DedupSummary:
    """Result of one deduplication pass with its statistics."""
    input_blocks: int
    entries: List[OccurrenceEntry]
    text: str


@dataclass
class CleanResult:
    """Everything produced by one ``clean_log`` run."""
    original: str
    deduplicated: str
    cleaned: str
    summary: DedupSummary
    diff: List[DiffPart] = field(default_factory=list)
    record_id: Optional[int] = None


def segment_blocks(raw_text: str) -> List[LogBlock]:
    """Split *raw_text* into blocks separated by blank lines.

    Blank (whitespace-only) lines end the current block and are never part
    of one. A trailing block without a closing blank line is kept.
    """
    blocks: List[LogBlock] = []
    current: List[str] = []
    for line in raw_text.splitlines():
        if line.strip():
            current.append(line)
            continue
        if current:
            blocks.append(LogBlock(current))
            current = []
    if current:
        blocks.append(LogBlock(current))
    return blocks


def count_occurrences(
    blocks: Iterable[LogBlock],
    rules: Sequence[NormalizationRule] = DEFAULT_RULES,
) -> Dict[str, OccurrenceEntry]:
    """Group *blocks* by fingerprint, keyed in first-seen order."""
    entries: Dict[str, OccurrenceEntry] = {}
    for block in blocks:
        text = block.text
        fp = fingerprint(text, rules)
        entry = entries.get(fp)
        if entry is None:
            entries[fp] = OccurrenceEntry(fingerprint=fp, representative=text)
        else:
            entry.count += 1
    return entries


def format_entry(entry: OccurrenceEntry) -> str:
    """Return the representative text, annotating its last line with ``[xN]``."""
    if entry.count > 1:
        return f"{entry.representative} [x{entry.count}]"
    return entry.representative


def summarize(raw_text: str, rules: Sequence[NormalizationRule] = DEFAULT_RULES) -> DedupSummary:
    """Deduplicate *raw_text* and keep the per-fingerprint statistics."""
    blocks = segment_blocks(raw_text)
    entries = list(count_occurrences(blocks, rules).values())
    text = BLOCK_SEPARATOR.join(format_entry(e) for e in entries)
    return DedupSummary(input_blocks=len(blocks), entries=entries, text=text)


def deduplicate(raw_text: str, rules: Sequence[NormalizationRule] = DEFAULT_RULES) -> str:
    """Collapse duplicate log blocks in *raw_text*.

    Accepts any string, including ``""``; never raises for input content.
    """
    return summarize(raw_text, rules).text


def clean_log(
    raw_text: str,
    cleaner: Cleaner,
    store: Optional[MemStorage] = None,
    rules: Sequence[NormalizationRule] = DEFAULT_RULES,
) -> CleanResult:
    """Deduplicate *raw_text*, send it through *cleaner*, and diff the result.

    When *store* is given, the original/cleaned pair is recorded and its id
    is returned on the result. ``ServiceError`` from the cleaner propagates.
    """
    summary = summarize(raw_text, rules)
    log.info(
        "deduplicated %d blocks into %d unique",
        summary.input_blocks,
        len(summary.entries),
    )

    cleaned = cleaner.cleanup(summary.text)
    parts = diff_lines(summary.text, cleaned)

    record_id = None
    if store is not None:
        record_id = store.create_log(original_content=raw_text, cleaned_content=cleaned).id
        log.debug("stored record %d", record_id)

    return CleanResult(
        original=raw_text,
        deduplicated=summary.text,
        cleaned=cleaned,
        summary=summary,
        diff=parts,
        record_id=record_id,
    )
