"""Escape-sequence filter engine."""

from untty.engine.filter import FilterEngine, FilterResult, Transition, strip_bytes, strip_file

__all__ = ["FilterEngine", "FilterResult", "Transition", "strip_bytes", "strip_file"]
