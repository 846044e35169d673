"""Tests for the REPL.

The REPL involves I/O, so we test the pieces it is built from: the
banner, the prompting helpers (with a scripted reader), and a whole
session driven through patched ``input``.
"""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from paging_sim.memory.manager import MemoryManager
from paging_sim.repl import configure, format_banner, prompt_positive_int, run

PHYS = 64
PAGE = 16
MAX = 32
VALID = 7


def _reader(*answers: str) -> Callable[[str], str]:
    """Return an ``input`` replacement that replays answers in order."""
    it: Iterator[str] = iter(answers)
    return lambda _prompt: next(it)


class TestBanner:
    """Verify the start-up banner."""

    def test_banner_describes_memory(self) -> None:
        """The banner shows the memory geometry."""
        banner = format_banner(MemoryManager(PHYS, PAGE, MAX))
        assert "64 bytes (4 frames of 16 bytes)" in banner
        assert "Max process size: 32 bytes" in banner


class TestPrompting:
    """Verify the prompting helpers."""

    def test_retries_until_positive(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Invalid answers are rejected until a positive integer arrives."""
        value = prompt_positive_int("n: ", read=_reader("abc", "-1", "0", "7"))
        assert value == VALID
        assert capsys.readouterr().out.count("positive integer") == 3  # noqa: PLR2004

    def test_configure_retries_invalid_geometry(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A bad combination of sizes restarts the whole configuration."""
        mm = configure(read=_reader("48", "16", "32", "64", "16", "32"))
        assert mm.physical_memory.total_size == PHYS
        assert "Invalid configuration" in capsys.readouterr().out


class TestRun:
    """Verify a whole session."""

    def test_interactive_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Configure, create a process, inspect it, and exit."""
        answers = ["64", "16", "32", "create 1 30", "table 1", "exit"]
        with patch("builtins.input", side_effect=answers):
            run([])
        out = capsys.readouterr().out
        assert "Process 1 created with 2 pages." in out
        assert "Page 1 -> Frame 1" in out
        assert "Simulator stopped." in out

    def test_eof_ends_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+D at the prompt exits cleanly."""
        with patch("builtins.input", side_effect=["64", "16", "32", EOFError]):
            run([])
        assert "Simulator stopped." in capsys.readouterr().out

    def test_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A JSON file on the command line replaces the prompts."""
        path = tmp_path / "sim.json"
        config = {"physical_memory_size": PHYS, "page_size": PAGE, "max_process_size": MAX}
        path.write_text(json.dumps(config))
        with patch("builtins.input", side_effect=["mem", "exit"]):
            run([str(path)])
        out = capsys.readouterr().out
        assert "Free memory: 100.00%" in out

    def test_bad_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An unreadable config file is reported and the REPL does not start."""
        run([str(tmp_path / "missing.json")])
        out = capsys.readouterr().out
        assert out.startswith("Error: Cannot load configuration")
        assert "Simulator stopped." not in out
