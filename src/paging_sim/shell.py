"""The shell — command interpreter for the paging simulator.

The shell reads a command string, splits it into a command name and
arguments, dispatches to a handler, and returns the handler's output.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable; the REPL decides how to display output.
    - **Command dispatch via a dict.**  Adding a command means writing
      one method and adding one entry.
    - **Errors become messages.**  Every ``PagingError`` the manager
      raises is turned into an ``Error: ...`` line; the user simply
      tries again.
"""

from collections.abc import Callable
from typing import TypeAlias

from paging_sim.errors import InsufficientMemoryError, PagingError
from paging_sim.logging import LogLevel
from paging_sim.memory.manager import FREE, MemoryManager

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]


def parse_positive_int(text: str) -> int | None:
    """Return text as a positive integer, or None if it is not one."""
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value > 0 else None


def format_frame(data: bytes) -> str:
    """Format frame bytes as ``[0A FF 00 ...]``."""
    return "[" + " ".join(f"{byte:02X}" for byte in data) + "]"


class Shell:
    """Command interpreter that operates on a memory manager."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, manager: MemoryManager) -> None:
        """Create a shell attached to a memory manager."""
        self._manager = manager
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "mem": self._cmd_mem,
            "create": self._cmd_create,
            "table": self._cmd_table,
            "ps": self._cmd_ps,
            "log": self._cmd_log,
            "exit": self._cmd_exit,
        }

    @property
    def command_names(self) -> list[str]:
        """Return the sorted list of available commands."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute a single command.

        Args:
            command: The raw command string (e.g. "create 1 300").

        Returns:
            The command output, or an error message.

        """
        parts = command.split()
        if not parts:
            return ""
        name, args = parts[0], parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"
        return handler(args)

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_mem(self, _args: list[str]) -> str:
        """Show free memory and the owner and contents of every frame."""
        physical = self._manager.physical_memory
        lines = [f"Free memory: {self._manager.free_memory_percentage:.2f}%"]
        for frame in range(physical.number_of_frames):
            owner = self._manager.get_frame_owner(frame)
            label = "free" if owner is FREE else f"PID {owner}"
            lines.append(f"Frame {frame} [{label}]: {format_frame(physical.read_frame(frame))}")
        return "\n".join(lines)

    def _cmd_create(self, args: list[str]) -> str:
        """Create a process: ``create <pid> <size>``."""
        if len(args) != 2:  # noqa: PLR2004
            return "Usage: create <pid> <size>"
        pid = parse_positive_int(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        size = parse_positive_int(args[1])
        if size is None:
            return f"Error: invalid size '{args[1]}'"

        try:
            process = self._manager.create_process(pid, size)
        except InsufficientMemoryError:
            return "Error: not enough memory to allocate the process"
        except PagingError as e:
            return f"Error: {e}"
        return f"Process {pid} created with {process.page_count} pages."

    def _cmd_table(self, args: list[str]) -> str:
        """Show a process's page table: ``table <pid>``."""
        if len(args) != 1:
            return "Usage: table <pid>"
        pid = parse_positive_int(args[0])
        if pid is None:
            return f"Error: invalid PID '{args[0]}'"
        process = self._manager.find_process(pid)
        if process is None:
            return "Process not found."

        lines = [
            f"Process {process.pid} - size: {process.size_in_bytes} bytes "
            f"({process.page_count} pages)"
        ]
        table = process.page_table
        lines.extend(
            f"Page {page} -> Frame {table.get_page_frame(page)}" for page in range(len(table))
        )
        return "\n".join(lines)

    def _cmd_ps(self, _args: list[str]) -> str:
        """List every process."""
        processes = self._manager.list_processes()
        if not processes:
            return "No processes."
        lines = ["PID    SIZE     PAGES"]
        lines.extend(f"{p.pid:<6} {p.size_in_bytes:<8} {p.page_count}" for p in processes)
        return "\n".join(lines)

    def _cmd_log(self, args: list[str]) -> str:
        """Show the allocation log: ``log [all | clear | <pid>]``.

        Without arguments only INFO and above are shown; ``all`` adds the
        per-page placements and ``<pid>`` shows every event for one process.
        """
        logger = self._manager.logger
        if len(args) > 1:
            return "Usage: log [all | clear | <pid>]"
        if not args:
            entries = logger.filter(min_level=LogLevel.INFO)
        elif args[0] == "all":
            entries = logger.entries
        elif args[0] == "clear":
            return f"Cleared {logger.clear()} log entries."
        else:
            pid = parse_positive_int(args[0])
            if pid is None:
                return f"Error: invalid PID '{args[0]}'"
            entries = logger.filter(pid=pid)
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
