"""Tab completer for the simulator shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)``, which completes command
names for the first word and existing PIDs after ``table`` and ``log``.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paging_sim.memory.manager import MemoryManager
    from paging_sim.shell import Shell

# Commands whose single argument is the PID of an existing process.
_PID_COMMANDS: frozenset[str] = frozenset(["table", "log"])

# Keywords a command accepts in place of a PID.
_KEYWORDS: dict[str, list[str]] = {"log": ["all", "clear"]}


class Completer:
    """Tab completer for the simulator shell."""

    def __init__(self, shell: Shell, manager: MemoryManager) -> None:
        """Create a completer for a shell and the manager it drives."""
        self._shell = shell
        self._manager = manager

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*."""
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return sorted completion candidates for the word under the cursor.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return [name for name in self._shell.command_names if name.startswith(text)]

        if words[0] in _PID_COMMANDS:
            keywords = _KEYWORDS.get(words[0], [])
            pids = [str(p.pid) for p in self._manager.list_processes()]
            return sorted(c for c in [*keywords, *pids] if c.startswith(text))
        return []
