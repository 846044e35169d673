"""Memory manager — frame allocation for a paged physical memory.

Physical memory is divided into fixed-size **frames**, the physical
counterpart of logical pages.  The manager owns three pieces of state:

- **frame owners** — one slot per frame holding the owning PID, or
  ``FREE``.
- **free pool** — the unowned frames, kept as a FIFO queue seeded in
  ascending order, so the lowest free frame is handed out first and
  released frames go to the back.
- **process registry** — PID → ``Process``, in creation order.

Creating a process is all-or-nothing.  The capacity check runs before
any frame is touched; if something still fails mid-allocation, every
frame claimed so far is released (owner reset, bytes cleared, frame
returned to the pool) and the original error propagates.

Why pages instead of variable-size blocks?
    Fixed-size allocation eliminates **external fragmentation** — any
    free frame can hold any page, so a request fails only when there
    are genuinely too few free frames.

Why a deque instead of a set?
    The order in which frames are handed out is part of the contract:
    a given sequence of requests always lands in the same frames.
"""

import random
from collections import deque
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from paging_sim.errors import (
    DuplicatePidError,
    InsufficientMemoryError,
    InvalidConfigurationError,
    InvalidFrameError,
    InvalidPidError,
    InvalidSizeError,
)
from paging_sim.logging import Logger, LogLevel
from paging_sim.memory.logical import LogicalMemory
from paging_sim.memory.page_table import PageTable
from paging_sim.memory.physical import PhysicalMemory
from paging_sim.process import Process

FREE = None
"""Frame-owner sentinel for an unallocated frame."""


def is_power_of_two(value: int) -> bool:
    """Return True if value is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


class MemoryManager:
    """Allocate physical frames to processes and track who owns what."""

    def __init__(
        self,
        physical_memory_size: int,
        page_size: int,
        max_process_size: int,
        *,
        logger: Logger | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Create a manager with all frames free.

        Args:
            physical_memory_size: Physical memory size in bytes (power of two).
            page_size: Page and frame size in bytes (power of two).
            max_process_size: Largest process the manager will accept.
            logger: Where to record allocation events (a private one if omitted).
            rng: Random source for process images (unseeded if omitted).

        Raises:
            InvalidConfigurationError: If the sizes are inconsistent.

        """
        if not is_power_of_two(physical_memory_size) or not is_power_of_two(page_size):
            msg = (
                "Memory size and page size must be powers of two "
                f"(got {physical_memory_size} and {page_size})"
            )
            raise InvalidConfigurationError(msg)
        if max_process_size <= 0:
            msg = f"Maximum process size must be positive (got {max_process_size})"
            raise InvalidConfigurationError(msg)
        if max_process_size > physical_memory_size:
            msg = (
                f"Maximum process size {max_process_size} exceeds "
                f"physical memory size {physical_memory_size}"
            )
            raise InvalidConfigurationError(msg)

        self._physical = PhysicalMemory(physical_memory_size, page_size)
        self._page_size = page_size
        self._max_process_size = max_process_size
        self._logger = logger if logger is not None else Logger()
        self._rng = rng
        frames = self._physical.number_of_frames
        self._frame_owners: list[int | None] = [FREE] * frames
        self._free_frames: deque[int] = deque(range(frames))
        self._processes: dict[int, Process] = {}
        self._logger.log(
            LogLevel.INFO,
            f"Physical memory ready: {frames} frames of {page_size} bytes",
        )

    @property
    def physical_memory(self) -> PhysicalMemory:
        """Return the physical memory this manager allocates from."""
        return self._physical

    @property
    def page_size(self) -> int:
        """Return the page (and frame) size in bytes."""
        return self._page_size

    @property
    def max_process_size(self) -> int:
        """Return the largest process size accepted, in bytes."""
        return self._max_process_size

    @property
    def logger(self) -> Logger:
        """Return the event log."""
        return self._logger

    @property
    def free_frame_count(self) -> int:
        """Return the number of unowned frames."""
        return len(self._free_frames)

    @property
    def free_memory_percentage(self) -> float:
        """Return the share of physical memory not owned by any process."""
        total = self._physical.total_size
        if total == 0:
            return 0.0
        return len(self._free_frames) * self._page_size * 100.0 / total

    def create_process(self, pid: int, process_size: int) -> Process:
        """Create a process and back every one of its pages with a frame.

        Args:
            pid: Identifier for the new process (must be unused).
            process_size: Process size in bytes.

        Returns:
            The registered process.

        Raises:
            InvalidPidError: If the PID is not an integer.
            DuplicatePidError: If the PID is already registered.
            InvalidSizeError: If the size is not in ``(0, max_process_size]``.
            InsufficientMemoryError: If there are too few free frames.

        """
        # bool is an int subclass; None would collide with FREE
        if not isinstance(pid, int) or isinstance(pid, bool):
            msg = f"PID must be an integer, not {pid!r}"
            self._logger.log(LogLevel.WARNING, msg)
            raise InvalidPidError(msg)
        if pid in self._processes:
            self._reject(f"Process with PID {pid} already exists", pid=pid, error=DuplicatePidError)
        if process_size <= 0:
            self._reject(
                f"Process size must be positive (got {process_size})",
                pid=pid,
                error=InvalidSizeError,
            )
        if process_size > self._max_process_size:
            self._reject(
                f"Process size {process_size} exceeds maximum of {self._max_process_size} bytes",
                pid=pid,
                error=InvalidSizeError,
            )

        logical = LogicalMemory(process_size, self._page_size, rng=self._rng)
        pages_needed = logical.number_of_pages
        if len(self._free_frames) < pages_needed:
            self._reject(
                f"Cannot allocate {pages_needed} frames for PID {pid}: "
                f"only {len(self._free_frames)} free",
                pid=pid,
                error=InsufficientMemoryError,
            )

        table = PageTable(pages_needed)
        with self._claiming_frames(pid) as claimed:
            for page in range(pages_needed):
                frame = self._free_frames.popleft()
                claimed.append(frame)
                self._frame_owners[frame] = pid
                self._physical.write_frame(frame, logical.read_page(page))
                table.map_page_to_frame(page, frame)
                self._logger.log(LogLevel.DEBUG, f"Page {page} -> frame {frame}", pid=pid)

        process = Process(pid=pid, logical_memory=logical, page_table=table)
        self._processes[pid] = process
        self._logger.log(
            LogLevel.INFO,
            f"Created process {pid}: {process_size} bytes in {pages_needed} frames",
            pid=pid,
        )
        return process

    @contextmanager
    def _claiming_frames(self, pid: int) -> Generator[list[int]]:
        """Yield a list of claimed frames; release them all if the block fails."""
        claimed: list[int] = []
        try:
            yield claimed
        except BaseException:
            for frame in claimed:
                self._release_frame(frame)
            self._logger.log(
                LogLevel.ERROR,
                f"Allocation for PID {pid} failed; released {len(claimed)} frames",
                pid=pid,
            )
            raise

    def _release_frame(self, frame: int) -> None:
        self._frame_owners[frame] = FREE
        self._physical.clear_frame(frame)
        self._free_frames.append(frame)

    def _reject(self, message: str, *, pid: int, error: type[Exception]) -> NoReturn:
        self._logger.log(LogLevel.WARNING, message, pid=pid)
        raise error(message)

    def find_process(self, pid: int) -> Process | None:
        """Return the process with this PID, or None if there is none."""
        return self._processes.get(pid)

    def list_processes(self) -> tuple[Process, ...]:
        """Return every registered process in creation order."""
        return tuple(self._processes.values())

    def get_frame_owner(self, frame_number: int) -> int | None:
        """Return the PID owning a frame, or ``FREE``.

        Raises:
            InvalidFrameError: If the frame number is out of range.

        """
        if not 0 <= frame_number < len(self._frame_owners):
            msg = f"Invalid frame number: {frame_number}"
            raise InvalidFrameError(msg)
        return self._frame_owners[frame_number]
