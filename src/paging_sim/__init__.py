"""paging_sim — a fixed-size paging simulator.

Physical memory is a pool of equal-size frames; each process is a run
of pages, and the memory manager backs every page with a frame when
the process is created.
"""

from paging_sim.config import SimulatorConfig, load_config
from paging_sim.errors import (
    ConfigError,
    DataTooLargeError,
    DuplicatePidError,
    InsufficientMemoryError,
    InvalidConfigurationError,
    InvalidFrameError,
    InvalidPageError,
    InvalidPidError,
    InvalidSizeError,
    PagingError,
    UnmappedPageError,
)
from paging_sim.logging import LogEntry, Logger, LogLevel
from paging_sim.memory import FREE, LogicalMemory, MemoryManager, PageTable, PhysicalMemory
from paging_sim.process import Process

__all__ = [
    "FREE",
    "ConfigError",
    "DataTooLargeError",
    "DuplicatePidError",
    "InsufficientMemoryError",
    "InvalidConfigurationError",
    "InvalidFrameError",
    "InvalidPageError",
    "InvalidPidError",
    "InvalidSizeError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LogicalMemory",
    "MemoryManager",
    "PageTable",
    "PagingError",
    "PhysicalMemory",
    "Process",
    "SimulatorConfig",
    "UnmappedPageError",
    "load_config",
]
