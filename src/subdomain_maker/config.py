"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import validate_runtime_constraints

VERSION = "3.0.0"
DEFAULT_OUTPUT = "subdomains.txt"
DEFAULT_DEPTH = "1"
DEPTH_CHOICES = ("1", "2", "both")
LARGE_OUTPUT_THRESHOLD = 5_000_000


@dataclass(frozen=True)
class GeneratorConfig:
    """Validated configuration used by the generation pipeline."""

    wordlist: str
    domain: str
    wordlist2: str | None = None
    depth: str = DEFAULT_DEPTH
    output: str = DEFAULT_OUTPUT
    stdout: bool = False
    output_explicit: bool = False
    strict_labels: bool = False
    max_candidates: int = 0
    show_progress: bool = True

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            wordlist=self.wordlist,
            domain=self.domain,
            depth=self.depth,
            depth_choices=DEPTH_CHOICES,
            output=self.output,
            default_output=DEFAULT_OUTPUT,
            stdout=self.stdout,
            output_explicit=self.output_explicit,
            max_candidates=self.max_candidates,
        )

    @property
    def second_wordlist(self) -> str:
        """Source of the second wordlist, falling back to the first."""
        if self.wordlist2 is None or not self.wordlist2.strip():
            return self.wordlist
        return self.wordlist2

    @property
    def aliases_wordlist(self) -> bool:
        """True when both wordlists come from the same source."""
        return self.second_wordlist == self.wordlist
