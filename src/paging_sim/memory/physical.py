"""Physical memory — a flat byte buffer carved into equal-size frames.

The whole of RAM is one ``bytearray``.  A **frame** is just a window
into it: frame ``n`` covers bytes ``[n * frame_size, (n + 1) * frame_size)``.
The memory itself knows nothing about owners or processes; it only
reads, writes and clears frames by index.

Design choices:
    - **One bytearray, not a list of frames.**  Frame start addresses
      are then real offsets, which is what the display layer shows.
    - **Reads return ``bytes``.**  Callers get an independent copy and
      can never mutate RAM behind the manager's back.
    - **Short writes zero the tail.**  Stale bytes from a previous owner
      are never observable past the written length.
"""

from paging_sim.errors import DataTooLargeError, InvalidConfigurationError, InvalidFrameError


class PhysicalMemory:
    """Fixed-size physical memory addressed by frame number."""

    def __init__(self, size: int, frame_size: int) -> None:
        """Create zeroed physical memory.

        Args:
            size: Total memory size in bytes.
            frame_size: Size of each frame in bytes (must divide ``size``).

        Raises:
            InvalidConfigurationError: If either size is non-positive or
                ``size`` is not a multiple of ``frame_size``.

        """
        if size <= 0 or frame_size <= 0:
            msg = f"Memory size and frame size must be positive (got {size} and {frame_size})"
            raise InvalidConfigurationError(msg)
        if size % frame_size != 0:
            msg = f"Physical memory size {size} is not a multiple of frame size {frame_size}"
            raise InvalidConfigurationError(msg)
        self._memory = bytearray(size)
        self._frame_size = frame_size

    @property
    def total_size(self) -> int:
        """Return the total memory size in bytes."""
        return len(self._memory)

    @property
    def frame_size(self) -> int:
        """Return the size of a single frame in bytes."""
        return self._frame_size

    @property
    def number_of_frames(self) -> int:
        """Return how many frames physical memory holds."""
        return len(self._memory) // self._frame_size

    def frame_start_address(self, frame_number: int) -> int:
        """Return the byte offset where a frame begins.

        Raises:
            InvalidFrameError: If the frame number is out of range.

        """
        if not 0 <= frame_number < self.number_of_frames:
            msg = f"Invalid frame number: {frame_number}"
            raise InvalidFrameError(msg)
        return frame_number * self._frame_size

    def read_frame(self, frame_number: int) -> bytes:
        """Return a copy of the bytes stored in a frame."""
        start = self.frame_start_address(frame_number)
        return bytes(self._memory[start : start + self._frame_size])

    def write_frame(self, frame_number: int, data: bytes) -> None:
        """Copy data into a frame, zero-filling whatever it does not cover.

        Args:
            frame_number: The target frame.
            data: At most ``frame_size`` bytes.

        Raises:
            InvalidFrameError: If the frame number is out of range.
            DataTooLargeError: If ``data`` is longer than a frame.

        """
        if len(data) > self._frame_size:
            msg = f"Frame data of {len(data)} bytes exceeds frame size {self._frame_size}"
            raise DataTooLargeError(msg)
        start = self.frame_start_address(frame_number)
        padding = bytes(self._frame_size - len(data))
        self._memory[start : start + self._frame_size] = bytes(data) + padding

    def clear_frame(self, frame_number: int) -> None:
        """Zero every byte of a frame."""
        start = self.frame_start_address(frame_number)
        self._memory[start : start + self._frame_size] = bytes(self._frame_size)
