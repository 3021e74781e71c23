"""Line-level diff between the deduplicated and the cleaned log."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import List


@dataclass
class DiffPart:
    """A run of consecutive lines that is common, removed, or added.

    Each line in ``value`` keeps its line ending, so concatenating the
    common and removed parts reproduces the old text and concatenating the
    common and added parts reproduces the new text.
    """
    value: str
    added: bool = False
    removed: bool = False


def diff_lines(old: str, new: str) -> List[DiffPart]:
    """Diff *old* against *new* line by line.

    A ``replace`` region is emitted as its removed part followed by its
    added part.
    """
    a = old.splitlines(keepends=True)
    b = new.splitlines(keepends=True)
    matcher = difflib.SequenceMatcher(None, a, b, autojunk=False)

    parts: List[DiffPart] = []
    for op, i1, i2, j1, j2 in matcher.get_opcodes():
        if op == "equal":
            parts.append(DiffPart("".join(a[i1:i2])))
            continue
        if op in ("delete", "replace"):
            parts.append(DiffPart("".join(a[i1:i2]), removed=True))
        if op in ("insert", "replace"):
            parts.append(DiffPart("".join(b[j1:j2]), added=True))
    return parts


def removed_text(parts: List[DiffPart]) -> str:
    """Return the concatenated text of every removed part."""
    return "".join(p.value for p in parts if p.removed)


def format_diff(parts: List[DiffPart]) -> str:
    """Render *parts* with ``-``/``+`` markers, one line per output line."""
    out: List[str] = []
    for p in parts:
        marker = "- " if p.removed else "+ " if p.added else "  "
        for line in p.value.splitlines():
            out.append(marker + line)
    return "\n".join(out)
