"""Merge candidate streams into a unique, sorted result set."""

from __future__ import annotations

import itertools
from collections.abc import Iterable


def deduplicate(streams: Iterable[Iterable[str]]) -> list[str]:
    """Return the sorted union of all candidate streams."""
    return sorted(set(itertools.chain.from_iterable(streams)))
