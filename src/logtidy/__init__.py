"""Deduplicate error logs before LLM cleanup."""

from __future__ import annotations

from .core import deduplicate

__all__ = ["deduplicate"]
__version__ = "0.1.0"
