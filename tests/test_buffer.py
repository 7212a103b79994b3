"""Tests for the bounded sequence buffer."""

import pytest

from untty.core.buffer import SequenceBuffer


class TestSequenceBuffer:
    """Tests for SequenceBuffer."""

    def test_starts_empty(self) -> None:
        buf = SequenceBuffer()
        assert len(buf) == 0
        assert not buf
        assert buf.lead is None
        assert buf.capacity == 80

    def test_append(self) -> None:
        buf = SequenceBuffer()
        for byte in b"\x1b[1":
            buf.append(byte)
        assert len(buf) == 3
        assert buf.contents() == b"\x1b[1"
        assert buf.lead == 0x1B

    def test_keeps_trailing_terminator(self) -> None:
        buf = SequenceBuffer(capacity=4)
        buf.append(ord("a"))
        buf.append(ord("b"))
        assert buf._data[buf.pos] == 0
        assert len(buf._data) == 5

    def test_as_span_skips_trigger(self) -> None:
        buf = SequenceBuffer()
        for byte in b"\x1b[31m":
            buf.append(byte)
        assert buf.as_span() == b"[31m"

    def test_reset(self) -> None:
        buf = SequenceBuffer()
        for byte in b"abc":
            buf.append(byte)
        buf.reset()
        assert len(buf) == 0
        assert buf.contents() == b""
        assert bytes(buf._data[:4]) == bytes(4)

    def test_shift_left(self) -> None:
        buf = SequenceBuffer()
        for byte in b"\x1b[1m\x1bx":
            buf.append(byte)
        buf.shift_left(4)
        assert buf.contents() == b"\x1bx"
        assert buf.lead == 0x1B
        # bytes past the new length are cleared
        assert bytes(buf._data[2:7]) == bytes(5)

    def test_shift_left_everything(self) -> None:
        buf = SequenceBuffer()
        for byte in b"abc":
            buf.append(byte)
        buf.shift_left(3)
        assert not buf
        buf.shift_left(1)
        assert len(buf) == 0

    def test_full(self) -> None:
        buf = SequenceBuffer(capacity=2)
        buf.append(1)
        assert not buf.is_full
        buf.append(2)
        assert buf.is_full
        with pytest.raises(BufferError):
            buf.append(3)
        assert buf.contents() == b"\x01\x02"
