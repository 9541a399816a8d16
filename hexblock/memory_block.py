"""A resizable block of raw bytes with optional padding and alignment."""

from __future__ import annotations

from typing import Optional

MAX_BLOCK_SIZE = 0xFFFFFFFF
"""Largest block size a memory block can hold (4 GB - 1)."""


def _check_size(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative")
    if value > MAX_BLOCK_SIZE:
        raise ValueError(f"{what} exceeds the 4 GB block limit")
    return value


class MemoryBlock:
    """An owned byte buffer of a given size, with optional padding bytes.

    The padding follows the block's data in the buffer but is not counted
    in ``size()``. An empty block holds no buffer at all.
    """

    def __init__(
        self,
        size: int = 0,
        source: Optional[bytes] = None,
        pad_bytes: int = 0,
    ) -> None:
        self._buffer: Optional[bytearray] = None
        self._size = 0
        self.create(size, source, pad_bytes)

    def create(
        self,
        size: int,
        source: Optional[bytes] = None,
        pad_bytes: int = 0,
    ) -> None:
        """Replace the block with a new one of ``size`` bytes.

        The first ``size`` bytes of ``source`` are copied in when given;
        otherwise the block is zero-filled. Padding bytes are always zero.
        """
        _check_size(size, "size")
        _check_size(pad_bytes, "pad_bytes")
        self.delete()
        if not size:
            return
        if source is not None:
            source = bytes(source)
            if len(source) < size:
                raise ValueError("source is shorter than the requested size")
            buffer = bytearray(source[:size])
            buffer.extend(bytes(pad_bytes))
        else:
            buffer = bytearray(size + pad_bytes)
        self._buffer = buffer
        self._size = size

    def create_aligned(
        self,
        unaligned_size: int,
        alignment: int,
        source: Optional[bytes] = None,
        pad_bytes: int = 0,
    ) -> None:
        """Create a block whose size is rounded up to a multiple of ``alignment``."""
        if alignment <= 0:
            raise ValueError("alignment must be positive")
        _check_size(unaligned_size, "size")
        rest = unaligned_size % alignment
        size = unaligned_size - rest + alignment if rest else unaligned_size
        self.create(size, source, pad_bytes)

    def delete(self) -> None:
        """Release the buffer; the block becomes empty."""
        self._buffer = None
        self._size = 0

    def copy(self) -> "MemoryBlock":
        """An independent block holding the same data, without padding."""
        duplicate = MemoryBlock()
        if self._size and self._buffer is not None:
            duplicate._buffer = bytearray(self._buffer[:self._size])
            duplicate._size = self._size
        return duplicate

    def __copy__(self) -> "MemoryBlock":
        return self.copy()

    def size(self) -> int:
        """Number of data bytes in the block, padding excluded."""
        return self._size

    def data(self) -> Optional[bytearray]:
        """The writable buffer, padding included, or None for an empty block."""
        return self._buffer

    def __repr__(self) -> str:
        return f"MemoryBlock(size={self._size})"