"""Page table — where each page of a process lives in physical memory.

The table has a fixed number of slots, one per logical page.  Slots
start empty and are filled by the manager while it allocates frames.
Frames need not be contiguous or ordered; that is the whole point of
paging.
"""

from paging_sim.errors import InvalidPageError, InvalidSizeError, UnmappedPageError


class PageTable:
    """Map logical page numbers to physical frame numbers."""

    def __init__(self, page_count: int) -> None:
        """Create a page table with ``page_count`` empty slots.

        Raises:
            InvalidSizeError: If ``page_count`` is not positive.

        """
        if page_count <= 0:
            msg = f"Page count must be positive (got {page_count})"
            raise InvalidSizeError(msg)
        self._page_count = page_count
        self._entries: dict[int, int] = {}

    def _check_page(self, page_number: int) -> None:
        if not 0 <= page_number < self._page_count:
            msg = f"Invalid page number: {page_number}"
            raise InvalidPageError(msg)

    def map_page_to_frame(self, page_number: int, frame_number: int) -> None:
        """Record that a page lives in a frame, replacing any earlier mapping."""
        self._check_page(page_number)
        self._entries[page_number] = frame_number

    def get_page_frame(self, page_number: int) -> int:
        """Return the frame a page is mapped to.

        Raises:
            InvalidPageError: If the page number is out of range.
            UnmappedPageError: If the page has not been mapped yet.

        """
        self._check_page(page_number)
        frame = self._entries.get(page_number)
        if frame is None:
            msg = f"Page {page_number} is not mapped to any frame"
            raise UnmappedPageError(msg)
        return frame

    def mappings(self) -> dict[int, int]:
        """Return the populated page→frame pairs in page order."""
        return dict(sorted(self._entries.items()))

    @property
    def size(self) -> int:
        """Return the number of slots (mapped or not)."""
        return self._page_count

    def __len__(self) -> int:
        """Return the number of slots (mapped or not)."""
        return self._page_count
