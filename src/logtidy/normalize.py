"""Block normalizer that replaces volatile data with stable placeholders.

A fingerprint is produced by running an ordered sequence of
:class:`NormalizationRule` values over a block's text, each rule rewriting
the output of the previous one. Structurally identical log entries that
differ only in timestamps, addresses, bracketed tags or long numbers
collapse into the same fingerprint.

Rule order matters: timestamps and hex addresses are replaced before the
generic digit-run rule so their digits never surface as ``<NUM>``.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

TIME = "<TIME>"
ADDR = "<ADDR>"
ID = "<ID>"
NUM = "<NUM>"

# Digit runs shorter than this are treated as meaningful (HTTP status codes,
# small line numbers) and left untouched.
MIN_VOLATILE_DIGITS = 4

_ISO_TIME_RE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[ T]\d{2}:\d{2}:\d{2}(?:[.,]\d+)?)?")
_SYSLOG_TIME_RE = re.compile(r"\[[A-Z][a-z]{2} +\d{1,2} \d{2}:\d{2}:\d{2}\]")
_HEX_ADDR_RE = re.compile(r"0x[0-9a-fA-F]+")
_BRACKET_TAG_RE = re.compile(r"\[[\w\s]+\]")


@dataclass(frozen=True)
class NormalizationRule:
    """One ``pattern -> placeholder`` substitution in the fingerprint fold."""
    name: str
    pattern: re.Pattern[str]
    placeholder: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.placeholder, text)


def build_rules(min_digits: int = MIN_VOLATILE_DIGITS) -> Tuple[NormalizationRule, ...]:
    """Return the default rule sequence with a configurable digit threshold.

    Raises:
        ValueError: If *min_digits* is less than 1.
    """
    if min_digits < 1:
        raise ValueError(f"min_digits must be >= 1, got {min_digits}")
    return (
        NormalizationRule("iso_time", _ISO_TIME_RE, TIME),
        NormalizationRule("syslog_time", _SYSLOG_TIME_RE, TIME),
        NormalizationRule("hex_addr", _HEX_ADDR_RE, ADDR),
        NormalizationRule("bracket_tag", _BRACKET_TAG_RE, ID),
        NormalizationRule("digits", re.compile(r"\d{%d,}" % min_digits), NUM),
    )


DEFAULT_RULES = build_rules()


def fingerprint(text: str, rules: Iterable[NormalizationRule] = DEFAULT_RULES) -> str:
    """Apply *rules* in order to *text* and return the stripped result.

    Matching is case-sensitive: two entries that differ only in letter case
    are distinct errors.
    """
    for rule in rules:
        text = rule.apply(text)
    return text.strip()


def pattern_hash(pattern: str) -> str:
    """Return a stable SHA-1 hex digest for a fingerprint string."""
    return hashlib.sha1(pattern.encode("utf-8")).hexdigest()
