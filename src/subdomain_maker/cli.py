"""CLI entrypoint for subdomain-maker."""

from __future__ import annotations

import argparse
import signal
import sys
from collections.abc import Sequence
from pathlib import Path
from types import FrameType

from .config import DEFAULT_DEPTH, DEFAULT_OUTPUT, DEPTH_CHOICES, VERSION, GeneratorConfig
from .errors import ConfigError, SubdomainMakerError
from .logging_utils import configure_logging, get_logger
from .pipeline import run_pipeline

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="subdomain-maker",
        description="Generate subdomain candidates from wordlists at depth 1, 2, or both.",
        epilog=(
            "Skips blank lines and lines starting with '#'; lowercases prefixes, "
            "trims whitespace and strips CRLFs. Depth 2 produces "
            "len(wordlist) x len(wordlist2) candidates."
        ),
    )
    parser.add_argument(
        "-w", "--wordlist", required=True, help="First wordlist (prefix1), or '-' for stdin."
    )
    parser.add_argument("-d", "--domain", required=True, help="Base domain, e.g. example.com.")
    parser.add_argument(
        "-W", "--wordlist2", help="Second wordlist (prefix2). Defaults to --wordlist."
    )
    parser.add_argument(
        "--depth",
        choices=DEPTH_CHOICES,
        default=DEFAULT_DEPTH,
        help="Generation depth (default: %(default)s).",
    )
    parser.add_argument(
        "-o", "--out", default=None, help=f"Output file (default: ./{DEFAULT_OUTPUT})."
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write candidates to standard output instead of a file.",
    )
    parser.add_argument(
        "--strict-labels",
        action="store_true",
        help="Drop candidates that are not syntactically valid DNS names.",
    )
    parser.add_argument(
        "--max-candidates",
        type=int,
        default=0,
        help="Abort when more candidates would be generated (0 disables the cap).",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Disable the depth 2 progress bar."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s v{VERSION}"
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and pre-validate CLI input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.stdout and args.out is not None and Path(args.out) != Path(DEFAULT_OUTPUT):
        parser.error("--stdout cannot be combined with --out.")
    return args


def namespace_to_config(args: argparse.Namespace) -> GeneratorConfig:
    """Convert CLI args to validated GeneratorConfig."""
    return GeneratorConfig(
        wordlist=args.wordlist,
        domain=args.domain,
        wordlist2=args.wordlist2,
        depth=args.depth,
        output=args.out if args.out is not None else DEFAULT_OUTPUT,
        stdout=args.stdout,
        output_explicit=args.out is not None,
        strict_labels=args.strict_labels,
        max_candidates=args.max_candidates,
        show_progress=not args.no_progress,
    )


def _raise_on_sigterm(signum: int, _frame: FrameType | None) -> None:
    raise SystemExit(128 + signum)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        build_parser().print_usage(sys.stderr)
        return exc.exit_code

    previous_handler = signal.signal(signal.SIGTERM, _raise_on_sigterm)
    try:
        result = run_pipeline(config, logger=logger)
    except SubdomainMakerError as exc:
        logger.error("%s", exc)
        return exc.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted.")
        return EXIT_INTERRUPTED
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGTERM, previous_handler)

    if result.destination is not None:
        logger.info("Wrote %d subdomains to %s", result.count, result.destination)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
