"""Exception hierarchy for the paging simulator.

Every failure the simulator can report derives from ``PagingError`` so
callers (the shell, mostly) can catch one type and print the message.
Each subclass also inherits the closest built-in exception, which keeps
``except ValueError`` / ``except IndexError`` code working as expected.
"""


class PagingError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidConfigurationError(PagingError, ValueError):
    """Raise when construction parameters are inconsistent."""


class InvalidSizeError(PagingError, ValueError):
    """Raise when a process size or page count is out of range."""


class InvalidPageError(PagingError, IndexError):
    """Raise when a page number falls outside the address space."""


class InvalidFrameError(PagingError, IndexError):
    """Raise when a frame number falls outside physical memory."""


class UnmappedPageError(PagingError, LookupError):
    """Raise when a page table slot has never been populated."""


class InvalidPidError(PagingError, ValueError):
    """Raise when a PID is not an integer."""


class DuplicatePidError(PagingError, ValueError):
    """Raise when a PID is already registered with the manager."""


class InsufficientMemoryError(PagingError):
    """Raise when there are not enough free frames for an allocation."""


class DataTooLargeError(PagingError, ValueError):
    """Raise when a write does not fit in a single frame."""


class ConfigError(PagingError):
    """Raise when a simulator configuration file cannot be loaded."""
