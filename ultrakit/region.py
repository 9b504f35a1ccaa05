"""Fixed-size buffer pools carved out of one block of memory."""

from __future__ import annotations

_DEFAULT_ALIGN = 8
_MAX_BUFFERS = 0x8000


def _align(value: int, alignment: int) -> int:
    return (value + alignment - 1) & ~(alignment - 1)


class Region:
    """A block of memory split into equal, aligned buffers.

    Buffers are identified by their byte offset into ``memory``; they are
    handed out last-freed first, starting from offset 0.
    """

    def __init__(
        self,
        length: int,
        buffer_size: int,
        align_size: int = 0,
        max_buffers: int = _MAX_BUFFERS,
    ) -> None:
        if align_size == 0:
            align_size = _DEFAULT_ALIGN
        if align_size < 0 or align_size & (align_size - 1):
            raise ValueError("align_size must be a power of two")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if length < 0:
            raise ValueError("length must not be negative")
        self.align_size = align_size
        self.buffer_size = _align(buffer_size, align_size)
        self.buffer_count = min(length // self.buffer_size, max_buffers)
        if self.buffer_count < 1:
            raise ValueError("region is too small to hold one buffer")
        self.memory = bytearray(length)
        self._free = list(range(self.buffer_count - 1, -1, -1))

    @property
    def available(self) -> int:
        """Number of buffers not currently allocated."""
        return len(self._free)

    def malloc(self) -> int:
        """Allocate a buffer and return its offset; raises MemoryError when none is free."""
        if not self._free:
            raise MemoryError("region has no free buffers")
        return self._free.pop() * self.buffer_size

    def free(self, offset: int) -> None:
        """Return the buffer containing offset to the region."""
        if not 0 <= offset < self.buffer_count * self.buffer_size:
            raise ValueError("offset is outside the region's buffers")
        self._free.append(offset // self.buffer_size)