"""Candidate generation at depth 1, depth 2, or both."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from tqdm import tqdm

_DOT_RUN_RE = re.compile(r"\.{2,}")


def collapse_dots(candidate: str) -> str:
    """Collapse every run of consecutive dots into a single dot."""
    return _DOT_RUN_RE.sub(".", candidate)


def generate_depth1(prefixes: Iterable[str], domain: str) -> Iterator[str]:
    """Yield ``prefix.domain`` for every prefix, in order."""
    for prefix in prefixes:
        yield collapse_dots(f"{prefix}.{domain}")


def generate_depth2(
    prefixes1: Sequence[str],
    prefixes2: Sequence[str],
    domain: str,
    *,
    show_progress: bool = False,
) -> Iterator[str]:
    """Yield ``p1.p2.domain`` over the full cross product.

    The first wordlist is the outer loop. Output size is
    ``len(prefixes1) * len(prefixes2)`` before deduplication.
    """
    outer: Iterable[str] = prefixes1
    if show_progress and prefixes2:
        outer = tqdm(prefixes1, total=len(prefixes1), desc="depth 2", unit="prefix")
    for first in outer:
        for second in prefixes2:
            yield collapse_dots(f"{first}.{second}.{domain}")


def estimate_candidate_count(depth: str, count1: int, count2: int) -> int:
    """Return the number of candidates generated before deduplication."""
    if depth == "1":
        return count1
    if depth == "2":
        return count1 * count2
    if depth == "both":
        return count1 + count1 * count2
    raise ValueError(f"Unsupported depth: {depth!r}")


def generate_candidates(
    depth: str,
    prefixes1: Sequence[str],
    prefixes2: Sequence[str],
    domain: str,
    *,
    show_progress: bool = False,
) -> list[Iterator[str]]:
    """Return one candidate stream per requested depth pass."""
    streams: list[Iterator[str]] = []
    if depth in {"1", "both"}:
        streams.append(generate_depth1(prefixes1, domain))
    if depth in {"2", "both"}:
        streams.append(
            generate_depth2(prefixes1, prefixes2, domain, show_progress=show_progress)
        )
    if not streams:
        raise ValueError(f"Unsupported depth: {depth!r}")
    return streams
