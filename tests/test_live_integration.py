import os
import subprocess
import sys
from pathlib import Path

import pytest

requires_live = pytest.mark.skipif(
    os.getenv("RUN_LIVE_INTEGRATION") != "1",
    reason="Set RUN_LIVE_INTEGRATION=1 to execute live integration tests.",
)

SRC = str(Path(__file__).resolve().parents[1] / "src")


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ, PYTHONPATH=SRC)
    return subprocess.run(
        [sys.executable, "-m", "subdomain_maker.cli", *args],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )


@requires_live
def test_live_help_command_smoke() -> None:
    result = _run("--help")
    assert result.returncode == 0
    assert "--wordlist" in result.stdout


@requires_live
def test_live_stdout_pipe(tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    words.write_text("www\nAPI\n", encoding="utf-8")
    result = _run("-w", str(words), "-d", "example.com", "--stdout")
    assert result.returncode == 0
    assert result.stdout == "api.example.com\nwww.example.com\n"


@requires_live
def test_live_missing_wordlist_exit_code(tmp_path: Path) -> None:
    result = _run("-w", str(tmp_path / "missing.txt"), "-d", "example.com")
    assert result.returncode == 1
    assert "cannot read wordlist" in result.stderr
