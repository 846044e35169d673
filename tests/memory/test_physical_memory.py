"""Tests for physical memory.

Physical memory is one flat byte buffer divided into equal-size
frames.  Frames are read, written and cleared by index; writes shorter
than a frame leave zeros behind them, never stale data.
"""

import pytest

from paging_sim.errors import DataTooLargeError, InvalidConfigurationError, InvalidFrameError
from paging_sim.memory.physical import PhysicalMemory

TOTAL_SIZE = 64
FRAME_SIZE = 16
NUM_FRAMES = TOTAL_SIZE // FRAME_SIZE
LAST_FRAME = NUM_FRAMES - 1
SHORT_DATA = b"\x01\x02\x03"


class TestPhysicalMemoryCreation:
    """Verify geometry and validation."""

    def test_geometry(self) -> None:
        """Total size, frame size and frame count should be exposed."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        assert pm.total_size == TOTAL_SIZE
        assert pm.frame_size == FRAME_SIZE
        assert pm.number_of_frames == NUM_FRAMES

    def test_starts_zeroed(self) -> None:
        """Every frame should read as zeros initially."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        for frame in range(NUM_FRAMES):
            assert pm.read_frame(frame) == bytes(FRAME_SIZE)

    @pytest.mark.parametrize(("size", "frame_size"), [(0, 16), (64, 0), (-64, 16), (64, -16)])
    def test_non_positive_sizes_rejected(self, size: int, frame_size: int) -> None:
        """Zero or negative sizes are not a valid configuration."""
        with pytest.raises(InvalidConfigurationError, match="positive"):
            PhysicalMemory(size, frame_size)

    def test_size_must_be_multiple_of_frame_size(self) -> None:
        """A partial trailing frame is not allowed."""
        with pytest.raises(InvalidConfigurationError, match="multiple"):
            PhysicalMemory(TOTAL_SIZE + 1, FRAME_SIZE)


class TestFrameAddressing:
    """Verify frame start addresses and index validation."""

    def test_frame_start_address(self) -> None:
        """Frame n should start at n * frame_size."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        assert pm.frame_start_address(0) == 0
        assert pm.frame_start_address(LAST_FRAME) == LAST_FRAME * FRAME_SIZE

    @pytest.mark.parametrize("frame", [-1, NUM_FRAMES])
    def test_out_of_range_frame(self, frame: int) -> None:
        """Every frame operation should reject an out-of-range index."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        with pytest.raises(InvalidFrameError, match="Invalid frame"):
            pm.frame_start_address(frame)
        with pytest.raises(InvalidFrameError):
            pm.read_frame(frame)
        with pytest.raises(InvalidFrameError):
            pm.write_frame(frame, SHORT_DATA)
        with pytest.raises(InvalidFrameError):
            pm.clear_frame(frame)

    def test_invalid_frame_is_an_index_error(self) -> None:
        """Callers can catch out-of-range frames as IndexError."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        with pytest.raises(IndexError):
            pm.read_frame(NUM_FRAMES)


class TestFrameReadWrite:
    """Verify writing, reading and clearing frames."""

    def test_full_write_reads_back(self) -> None:
        """A full-frame write should read back unchanged."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        data = bytes(range(FRAME_SIZE))
        pm.write_frame(1, data)
        assert pm.read_frame(1) == data

    def test_short_write_zero_fills_tail(self) -> None:
        """Bytes past a short write should be zero, even if the frame was dirty."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        pm.write_frame(2, b"\xff" * FRAME_SIZE)
        pm.write_frame(2, SHORT_DATA)
        frame = pm.read_frame(2)
        assert frame[: len(SHORT_DATA)] == SHORT_DATA
        assert frame[len(SHORT_DATA) :] == bytes(FRAME_SIZE - len(SHORT_DATA))

    def test_write_only_touches_target_frame(self) -> None:
        """Neighbouring frames should be left alone."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        pm.write_frame(1, b"\xaa" * FRAME_SIZE)
        assert pm.read_frame(0) == bytes(FRAME_SIZE)
        assert pm.read_frame(2) == bytes(FRAME_SIZE)

    def test_oversized_write_rejected(self) -> None:
        """Data larger than a frame should raise DataTooLargeError."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        with pytest.raises(DataTooLargeError, match="exceeds frame size"):
            pm.write_frame(0, bytes(FRAME_SIZE + 1))
        assert pm.read_frame(0) == bytes(FRAME_SIZE)

    def test_read_returns_independent_copy(self) -> None:
        """Mutating a read result must not change memory."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        pm.write_frame(0, SHORT_DATA)
        copy = bytearray(pm.read_frame(0))
        copy[0] = 0xEE
        assert pm.read_frame(0)[: len(SHORT_DATA)] == SHORT_DATA

    def test_clear_frame(self) -> None:
        """Clearing a frame should zero all of its bytes."""
        pm = PhysicalMemory(TOTAL_SIZE, FRAME_SIZE)
        pm.write_frame(LAST_FRAME, b"\x07" * FRAME_SIZE)
        pm.clear_frame(LAST_FRAME)
        assert pm.read_frame(LAST_FRAME) == bytes(FRAME_SIZE)
