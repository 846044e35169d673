"""Process descriptor — a PID bound to its memory image and page table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paging_sim.memory.logical import LogicalMemory
    from paging_sim.memory.page_table import PageTable


@dataclass(frozen=True)
class Process:
    """A process created by the memory manager.

    Attributes:
        pid: The process identifier.
        logical_memory: The process image.
        page_table: Where each page of the image lives in physical memory.

    """

    pid: int
    logical_memory: LogicalMemory
    page_table: PageTable

    @property
    def size_in_bytes(self) -> int:
        """Return the process size in bytes."""
        return self.logical_memory.size

    @property
    def page_count(self) -> int:
        """Return how many pages (and frames) the process occupies."""
        return self.logical_memory.number_of_pages
