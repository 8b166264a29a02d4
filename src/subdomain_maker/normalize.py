"""Wordlist line normalization."""

from __future__ import annotations

from collections.abc import Iterable

COMMENT_PREFIX = "#"


def normalize_line(raw: str) -> str | None:
    """Return the canonical prefix for a raw wordlist line, or None to skip it."""
    line = raw[:-1] if raw.endswith("\r") else raw
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None
    return line.lower()


def normalize_lines(lines: Iterable[str]) -> list[str]:
    """Normalize lines in order, dropping skipped ones and keeping duplicates."""
    prefixes: list[str] = []
    for raw in lines:
        prefix = normalize_line(raw)
        if prefix is not None:
            prefixes.append(prefix)
    return prefixes
