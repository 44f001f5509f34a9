"""Helpers for presenting scene names."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def sort_and_dedup_scenes(scenes: Iterable[str]) -> list[str]:
    """Sort case-insensitively (stable) and drop adjacent exact duplicates."""
    ordered = sorted(scenes, key=_ascii_lower)
    return [name for name, _ in groupby(ordered)]