"""Bounded look-ahead buffer for candidate escape sequences."""

from untty.core.constants import BUFFER_CAPACITY


class SequenceBuffer:
    """
    Fixed-capacity byte buffer holding an in-progress candidate sequence.

    Storage is allocated once with room for a trailing NUL terminator and
    never grows. Overflow is the caller's responsibility: check ``is_full``
    before calling ``append``.
    """

    def __init__(self, capacity: int = BUFFER_CAPACITY):
        self.capacity = capacity
        self._data = bytearray(capacity + 1)
        self.pos = 0

    def __len__(self) -> int:
        return self.pos

    def __bool__(self) -> bool:
        return self.pos > 0

    def __repr__(self) -> str:
        return f"SequenceBuffer({self.contents()!r}, capacity={self.capacity})"

    @property
    def is_full(self) -> bool:
        """True when no further byte can be appended."""
        return self.pos >= self.capacity

    @property
    def lead(self) -> int | None:
        """First buffered byte, or None when empty."""
        return self._data[0] if self.pos else None

    def append(self, byte: int) -> None:
        """Append a single byte value."""
        if self.is_full:
            raise BufferError(f"sequence buffer full ({self.capacity} bytes)")
        self._data[self.pos] = byte
        self.pos += 1
        self._data[self.pos] = 0

    def reset(self) -> None:
        """Clear all buffered bytes."""
        self._data[:self.pos + 1] = bytes(self.pos + 1)
        self.pos = 0

    def shift_left(self, n: int) -> None:
        """
        Drop the first ``n`` bytes, compacting the remainder to index 0.

        Bytes past the new length are zeroed so the terminator invariant
        holds.
        """
        if n <= 0:
            return
        n = min(n, self.pos)
        remaining = self.pos - n
        self._data[:remaining] = self._data[n:self.pos]
        self._data[remaining:self.pos + 1] = bytes(self.pos + 1 - remaining)
        self.pos = remaining

    def as_span(self) -> bytes:
        """Contents after the leading trigger byte, as handed to the matcher."""
        return bytes(self._data[1:self.pos])

    def contents(self) -> bytes:
        """All buffered bytes."""
        return bytes(self._data[:self.pos])
