"""Core types for the escape-sequence filter."""

from untty.core.buffer import SequenceBuffer
from untty.core.state import State

__all__ = ["SequenceBuffer", "State"]
