"""Rendering of unmatched bytes for output and tracing."""

from untty.render.literal import render_literal, render_trace

__all__ = ["render_literal", "render_trace"]
