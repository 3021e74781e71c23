"""Text-cleanup backends invoked after deduplication."""

from __future__ import annotations

from .base import Cleaner, PassthroughCleaner, ServiceError
from .openai_chat import OpenAICleaner

__all__ = ["Cleaner", "OpenAICleaner", "PassthroughCleaner", "ServiceError"]
