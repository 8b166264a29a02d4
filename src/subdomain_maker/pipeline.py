"""Core orchestration pipeline."""

from __future__ import annotations

import logging
from typing import TextIO

from .config import LARGE_OUTPUT_THRESHOLD, GeneratorConfig
from .dedupe import deduplicate
from .errors import ResourceLimitError
from .generation import estimate_candidate_count, generate_candidates
from .io_text import FileSink, StreamSink
from .models import CandidateSink, GenerationResult
from .normalize import normalize_lines
from .validation import is_valid_hostname, load_wordlist


def load_prefixes(
    config: GeneratorConfig,
    *,
    logger: logging.Logger,
    stdin: TextIO | None = None,
) -> tuple[list[str], list[str]]:
    """Read and normalize both wordlists; the second aliases the first when shared."""
    prefixes1 = normalize_lines(load_wordlist(config.wordlist, stdin=stdin))
    if config.aliases_wordlist:
        prefixes2 = prefixes1
    else:
        prefixes2 = normalize_lines(load_wordlist(config.second_wordlist, stdin=stdin))
    logger.debug(
        "Loaded %d prefixes from %s and %d from %s",
        len(prefixes1),
        config.wordlist,
        len(prefixes2),
        config.second_wordlist,
    )
    return prefixes1, prefixes2


def check_estimate(
    config: GeneratorConfig,
    prefixes1: list[str],
    prefixes2: list[str],
    *,
    logger: logging.Logger,
) -> int:
    """Return the pre-dedup candidate count, enforcing the configured cap."""
    estimated = estimate_candidate_count(config.depth, len(prefixes1), len(prefixes2))
    logger.debug("Estimated candidates before dedup (depth %s): %d", config.depth, estimated)
    if config.max_candidates and estimated > config.max_candidates:
        raise ResourceLimitError(
            f"depth {config.depth} would generate {estimated} candidates, "
            f"above --max-candidates {config.max_candidates}"
        )
    if estimated > LARGE_OUTPUT_THRESHOLD:
        logger.warning(
            "Depth %s will generate %d candidates (%d x %d prefixes); output may be very large.",
            config.depth,
            estimated,
            len(prefixes1),
            len(prefixes2),
        )
    return estimated


def filter_valid_hostnames(candidates: list[str], *, logger: logging.Logger) -> list[str]:
    """Drop candidates that are not syntactically valid DNS names."""
    valid = [candidate for candidate in candidates if is_valid_hostname(candidate)]
    dropped = len(candidates) - len(valid)
    if dropped:
        logger.warning("Dropped %d candidates that are not valid DNS names.", dropped)
    return valid


def build_candidates(
    config: GeneratorConfig,
    prefixes1: list[str],
    prefixes2: list[str],
    *,
    logger: logging.Logger,
) -> list[str]:
    """Generate every requested depth and return the sorted unique result set."""
    streams = generate_candidates(
        config.depth,
        prefixes1,
        prefixes2,
        config.domain,
        show_progress=config.show_progress,
    )
    try:
        candidates = deduplicate(streams)
    except MemoryError as exc:
        raise ResourceLimitError(
            f"not enough memory to deduplicate depth {config.depth} candidates; "
            "use smaller wordlists or --max-candidates"
        ) from exc
    logger.debug("Unique candidates: %d", len(candidates))
    if config.strict_labels:
        candidates = filter_valid_hostnames(candidates, logger=logger)
    return candidates


def make_sink(
    config: GeneratorConfig,
    *,
    logger: logging.Logger,
    stream: TextIO | None = None,
) -> CandidateSink:
    """Build the sink selected by configuration, preparing file destinations."""
    if config.stdout:
        return StreamSink(stream, logger=logger)
    sink = FileSink(config.output)
    sink.prepare()
    return sink


def run_pipeline(
    config: GeneratorConfig,
    *,
    logger: logging.Logger,
    stream: TextIO | None = None,
    stdin: TextIO | None = None,
) -> GenerationResult:
    """Read wordlists, generate, deduplicate, and write the result set.

    Wordlists are read and the size estimate is checked before the output
    destination is touched, so input failures never leave an output file.
    """
    prefixes1, prefixes2 = load_prefixes(config, logger=logger, stdin=stdin)
    estimated = check_estimate(config, prefixes1, prefixes2, logger=logger)
    sink = make_sink(config, logger=logger, stream=stream)
    candidates = build_candidates(config, prefixes1, prefixes2, logger=logger)
    count = sink.write(candidates)
    return GenerationResult(
        count=count,
        destination=None if config.stdout else config.output,
        estimated=estimated,
    )
