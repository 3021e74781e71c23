"""Cleanup capability shared by every text-cleanup backend."""

from __future__ import annotations

from typing import Protocol


class ServiceError(Exception):
    """The cleanup service could not be reached or returned an unusable reply."""


class Cleaner(Protocol):
    def cleanup(self, text: str) -> str:
        ...


class PassthroughCleaner:
    """Return the text unchanged; used for deduplicate-only runs."""

    def cleanup(self, text: str) -> str:
        return text
