"""Shared pytest fixtures for the Log Tidy test suite.

Provides sample logs, argument factories, and a fake cleanup backend so
individual test modules stay focused on assertions rather than setup.
"""

from __future__ import annotations

import argparse

import pytest


@pytest.fixture
def sample_log() -> str:
    """Provide a realistic multi-block error log with repeated entries.

    The log mixes ISO and syslog timestamps, a hex address, a bracketed
    request tag, and long numeric ids so that several blocks collapse to
    the same fingerprint while distinct errors stay separate.
    """
    return "\n".join(
        [
            "2024-01-15 10:30:45 ERROR Connection to db failed",
            "  retrying in 5s",
            "",
            "2024-01-15 10:31:02 ERROR Connection to db failed",
            "  retrying in 5s",
            "",
            "[Jan 15 10:32:00] worker crashed at 0x7ffde4a2",
            "",
            "[Jan 15 10:35:11] worker crashed at 0x00ab13f0",
            "",
            "GET /api/items [req 8812] returned 404",
            "",
            "2024-01-15T10:40:00.123 ERROR Connection to db failed",
            "  retrying in 5s",
        ]
    )


@pytest.fixture
def make_args():
    """Factory fixture that builds ``argparse.Namespace`` objects with sensible defaults.

    Mirrors every attribute ``cli.parse_args`` sets, so callers only pass
    the fields they care about::

        args = make_args(file="/tmp/app.log")
    """

    def _make(**overrides) -> argparse.Namespace:
        defaults = dict(
            file="",
            no_cleanup=False,
            json=False,
            show_diff=False,
            output="",
            min_digits=4,
            max_chars=200_000,
            verbose=False,
            api_key="",
            api_base="https://api.openai.com/v1",
            model="gpt-4o-mini",
            timeout=60.0,
        )
        defaults.update(overrides)
        return argparse.Namespace(**defaults)

    return _make


class FakeCleaner:
    """Cleanup backend that drops lines containing a marker and records calls."""

    def __init__(self, drop: str = "retrying") -> None:
        self.drop = drop
        self.calls: list[str] = []

    def cleanup(self, text: str) -> str:
        self.calls.append(text)
        return "\n".join(line for line in text.splitlines() if self.drop not in line)


@pytest.fixture
def fake_cleaner() -> FakeCleaner:
    return FakeCleaner()
