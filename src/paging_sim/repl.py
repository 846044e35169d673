"""Interactive REPL (Read-Eval-Print Loop) for the paging simulator.

The REPL first settles the memory geometry — either from a JSON file
given on the command line or by prompting for the three sizes — and
then enters the classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

The shell is fully testable (returns strings, no I/O); this module is
the thin I/O wrapper that connects it to ``stdin``/``stdout``.
"""

import readline
import sys
from collections.abc import Callable
from pathlib import Path

from paging_sim.completer import Completer
from paging_sim.config import SimulatorConfig, load_config
from paging_sim.errors import ConfigError, InvalidConfigurationError
from paging_sim.logging import Logger
from paging_sim.memory.manager import MemoryManager
from paging_sim.shell import Shell, parse_positive_int

PROMPT = "paging $ "

_BANNER_WIDTH = 38


def format_banner(manager: MemoryManager) -> str:
    """Describe the configured memory for the start-up banner."""
    border = "=" * _BANNER_WIDTH
    physical = manager.physical_memory
    return (
        f"\n  {border}\n       Paging simulator\n  {border}\n\n"
        f"  Physical memory: {physical.total_size} bytes "
        f"({physical.number_of_frames} frames of {physical.frame_size} bytes)\n"
        f"  Max process size: {manager.max_process_size} bytes\n"
        "\nType 'help' for commands, 'exit' to quit.\n"
    )


def prompt_positive_int(prompt: str, *, read: Callable[[str], str] | None = None) -> int:
    """Ask for a positive integer until one is given.

    Args:
        prompt: Text shown before each attempt.
        read: Line reader (``input`` by default).

    """
    reader = read if read is not None else input
    while True:
        value = parse_positive_int(reader(prompt))
        if value is not None:
            return value
        print("The value must be a positive integer.")  # noqa: T201


def configure(
    *,
    read: Callable[[str], str] | None = None,
    logger: Logger | None = None,
) -> MemoryManager:
    """Prompt for memory sizes until they form a valid configuration."""
    while True:
        config = SimulatorConfig(
            physical_memory_size=prompt_positive_int("Physical memory size (bytes): ", read=read),
            page_size=prompt_positive_int("Page/frame size (bytes): ", read=read),
            max_process_size=prompt_positive_int("Maximum process size (bytes): ", read=read),
        )
        try:
            return config.build_manager(logger=logger)
        except InvalidConfigurationError as e:
            print(f"Invalid configuration: {e}\nTry again.\n")  # noqa: T201


def run(argv: list[str] | None = None) -> None:
    """Configure the simulator and run the interactive REPL.

    Args:
        argv: Command-line arguments; an optional path to a JSON
            configuration file (``sys.argv[1:]`` by default).

    """
    args = sys.argv[1:] if argv is None else argv
    logger = Logger()
    try:
        if args:
            manager = load_config(Path(args[0])).build_manager(logger=logger)
        else:
            manager = configure(logger=logger)
    except (ConfigError, InvalidConfigurationError) as e:
        print(f"Error: {e}")  # noqa: T201
        return
    except (EOFError, KeyboardInterrupt):
        print()  # noqa: T201
        return

    shell = Shell(manager=manager)

    # Wire up tab completion via readline.
    completer = Completer(shell, manager)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner(manager))  # noqa: T201

    try:
        while True:
            try:
                command = input(PROMPT)
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C — graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        print("Simulator stopped.")  # noqa: T201
