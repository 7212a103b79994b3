"""Byte-level input and output for the filter."""

from untty.io.reader import ByteSource
from untty.io.writer import ByteSink

__all__ = ["ByteSource", "ByteSink"]
