"""Memory subsystem — physical frames, process images, and page tables.

Re-exports public symbols so callers can write::

    from paging_sim.memory import MemoryManager, PhysicalMemory
"""

from paging_sim.memory.logical import LogicalMemory
from paging_sim.memory.manager import FREE, MemoryManager, is_power_of_two
from paging_sim.memory.page_table import PageTable
from paging_sim.memory.physical import PhysicalMemory

__all__ = [
    "FREE",
    "LogicalMemory",
    "MemoryManager",
    "PageTable",
    "PhysicalMemory",
    "is_power_of_two",
]
