"""Validation, wordlist loading, and runtime guardrails."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import dns.exception
import dns.name

from .errors import ConfigError, WordlistError

STDIN_SOURCE = "-"
_LABEL_RE = re.compile(r"[a-z0-9_-]+", re.IGNORECASE)


def _read_raw_lines(handle: TextIO) -> list[str]:
    return [line[:-1] if line.endswith("\n") else line for line in handle]


def load_wordlist(source: str, *, stdin: TextIO | None = None) -> list[str]:
    """Read every raw line of a wordlist once, without line terminators.

    ``source`` is a filesystem path (``/dev/fd/N`` included) or ``-`` for
    standard input. Carriage returns are left in place for the normalizer.
    """
    if source == STDIN_SOURCE:
        return _read_raw_lines(stdin if stdin is not None else sys.stdin)
    path = Path(source)
    if path.is_dir():
        raise WordlistError(f"cannot read wordlist at '{source}': is a directory")
    try:
        with path.open("r", encoding="utf-8", errors="ignore", newline="\n") as file_obj:
            return _read_raw_lines(file_obj)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise WordlistError(f"cannot read wordlist at '{source}': {reason}") from exc


def validate_runtime_constraints(
    *,
    wordlist: str,
    domain: str,
    depth: str,
    depth_choices: Sequence[str],
    output: str,
    default_output: str,
    stdout: bool,
    output_explicit: bool,
    max_candidates: int,
) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if not wordlist.strip():
        raise ConfigError("--wordlist is required.")
    if not domain.strip():
        raise ConfigError("--domain is required.")
    if depth not in depth_choices:
        raise ConfigError(f"--depth must be one of: {', '.join(depth_choices)}")
    if stdout and output_explicit and Path(output) != Path(default_output):
        raise ConfigError("--stdout cannot be combined with --out.")
    if not stdout and not output.strip():
        raise ConfigError("--out cannot be empty.")
    if max_candidates < 0:
        raise ConfigError("--max-candidates must be >= 0.")


def is_valid_hostname(candidate: str) -> bool:
    """Return True when ``candidate`` is a syntactically valid DNS name.

    Label and name lengths are checked by dnspython; each label must also be
    made of ASCII letters, digits, hyphens, or underscores. Non-ASCII names are
    rejected as written, not in their IDNA form.
    """
    if not candidate.isascii():
        return False
    try:
        name = dns.name.from_text(candidate, origin=None)
    except dns.exception.DNSException:
        return False
    labels = name.labels[:-1] if name.is_absolute() else name.labels
    if not labels:
        return False
    return all(_LABEL_RE.fullmatch(label.decode("ascii", errors="replace")) for label in labels)
