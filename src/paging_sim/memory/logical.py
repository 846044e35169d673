"""Logical memory — the bytes a process believes it owns.

A process image is a contiguous run of bytes split into pages of the
same size as physical frames.  The last page is usually short; the
manager pads it with zeros when it lands in a frame.

The content is random: we only care that whatever the process holds
arrives intact in physical memory.  Pass a seeded ``random.Random`` to
make the bytes reproducible.
"""

import math
import random

from paging_sim.errors import InvalidConfigurationError, InvalidPageError, InvalidSizeError


class LogicalMemory:
    """Read-only, page-addressable process image."""

    def __init__(
        self,
        process_length: int,
        page_size: int,
        *,
        rng: random.Random | None = None,
    ) -> None:
        """Create a process image filled with random bytes.

        Args:
            process_length: Size of the process in bytes.
            page_size: Page size in bytes (same as the frame size).
            rng: Random source for the content (unseeded if omitted).

        Raises:
            InvalidSizeError: If ``process_length`` is not positive.
            InvalidConfigurationError: If ``page_size`` is not positive.

        """
        if process_length <= 0:
            msg = f"Process length must be positive (got {process_length})"
            raise InvalidSizeError(msg)
        if page_size <= 0:
            msg = f"Page size must be positive (got {page_size})"
            raise InvalidConfigurationError(msg)
        source = rng if rng is not None else random.Random()  # noqa: S311
        self._content = source.randbytes(process_length)
        self._page_size = page_size

    @property
    def size(self) -> int:
        """Return the process size in bytes."""
        return len(self._content)

    @property
    def page_size(self) -> int:
        """Return the page size in bytes."""
        return self._page_size

    @property
    def number_of_pages(self) -> int:
        """Return how many pages the process spans."""
        return math.ceil(len(self._content) / self._page_size)

    def read_page(self, page_number: int) -> bytes:
        """Return the bytes of one page (the last page may be short).

        Raises:
            InvalidPageError: If the page number is out of range.

        """
        if not 0 <= page_number < self.number_of_pages:
            msg = f"Invalid logical page: {page_number}"
            raise InvalidPageError(msg)
        start = page_number * self._page_size
        return self._content[start : start + self._page_size]
