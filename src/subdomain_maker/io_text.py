"""Output sinks: plain stream and atomically replaced file."""

from __future__ import annotations

import errno
import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .errors import OutputError, ResourceLimitError, SubdomainMakerError
from .logging_utils import get_logger

RESOURCE_LIMIT_ERRNOS = frozenset(
    code
    for code in (errno.EFBIG, errno.ENOSPC, getattr(errno, "EDQUOT", None))
    if code is not None
)
DEFAULT_FILE_MODE = 0o644


def wrap_os_error(exc: OSError, message: str) -> SubdomainMakerError:
    """Map an OSError to a resource-limit or generic output error."""
    reason = exc.strerror or str(exc)
    if exc.errno in RESOURCE_LIMIT_ERRNOS:
        return ResourceLimitError(f"{message}: {reason}")
    return OutputError(f"{message}: {reason}")


def _silence_stdout() -> None:
    # Python flushes stdout again at exit; point it at devnull so that flush
    # does not raise a second BrokenPipeError.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


class StreamSink:
    """Write candidates to a text stream with nothing else around them."""

    def __init__(self, stream: TextIO | None = None, *, logger: logging.Logger | None = None):
        self._stream = stream
        self._logger = logger or get_logger()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, candidates: Sequence[str]) -> int:
        stream = self.stream
        count = 0
        try:
            for candidate in candidates:
                stream.write(f"{candidate}\n")
                count += 1
            stream.flush()
        except BrokenPipeError:
            self._logger.debug("Output stream closed by reader after %d lines.", count)
            if stream is sys.stdout:
                _silence_stdout()
        except OSError as exc:
            raise wrap_os_error(exc, "cannot write to output stream") from exc
        return count


class FileSink:
    """Write candidates to a file through a staging file in the same directory."""

    def __init__(self, path: str) -> None:
        self.path = path

    @property
    def target(self) -> Path:
        """Destination with symlinks resolved, so links are written through."""
        try:
            return Path(self.path).resolve()
        except (OSError, RuntimeError) as exc:
            raise OutputError(f"cannot resolve output path '{self.path}': {exc}") from exc

    def prepare(self) -> None:
        """Create the destination directory and check that it can be written."""
        output_path = self.target
        parent = output_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise wrap_os_error(exc, f"cannot create output directory '{parent}'") from exc
        if not parent.is_dir():
            raise OutputError(f"cannot create output directory '{parent}': not a directory")
        if output_path.is_dir():
            raise OutputError(f"cannot write to '{self.path}': is a directory")
        if output_path.exists() and not output_path.is_file():
            raise OutputError(f"cannot write to '{self.path}': not a regular file")
        if output_path.exists() and not os.access(output_path, os.W_OK):
            raise OutputError(f"cannot write to '{self.path}': permission denied")
        if not os.access(parent, os.W_OK | os.X_OK):
            raise OutputError(f"cannot write to '{self.path}': directory is not writable")

    def write(self, candidates: Sequence[str]) -> int:
        """Stage all candidates, then move the complete file into place."""
        output_path = self.target
        try:
            staging = tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="\n",
                dir=output_path.parent,
                prefix=f".{output_path.name}.",
                suffix=".tmp",
                delete=False,
            )
        except OSError as exc:
            raise wrap_os_error(exc, f"cannot write to '{self.path}'") from exc

        staged_path = Path(staging.name)
        finalized = False
        count = 0
        try:
            with staging as file_obj:
                for candidate in candidates:
                    file_obj.write(f"{candidate}\n")
                    count += 1
                file_obj.flush()
                os.fsync(file_obj.fileno())
            if output_path.exists():
                shutil.copymode(output_path, staged_path)
            else:
                os.chmod(staged_path, DEFAULT_FILE_MODE)
            os.replace(staged_path, output_path)
            finalized = True
        except OSError as exc:
            raise wrap_os_error(exc, f"cannot write to '{self.path}'") from exc
        finally:
            if not finalized:
                staged_path.unlink(missing_ok=True)
        return count
