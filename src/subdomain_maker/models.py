"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class CandidateSink(Protocol):
    """Contract for output destinations."""

    def write(self, candidates: Sequence[str]) -> int:
        """Write candidates, one per line, and return the number written."""


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation run."""

    count: int
    destination: str | None
    estimated: int
