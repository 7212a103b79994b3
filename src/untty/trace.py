"""Debug tracing for the filter engine."""

import logging

from untty.core.state import State
from untty.render.literal import render_trace

log = logging.getLogger(__name__)


class Tracer:
    """
    Explicit tracing context handed to the engine.

    Tracing is decided once, at construction. When disabled every method
    returns immediately, so buffers are never rendered for nothing.
    """

    def __init__(self, enabled: bool = False, logger: logging.Logger | None = None):
        self.enabled = enabled
        self.log = logger or log

    def read(self, state: State, byte: int | None) -> None:
        if not self.enabled:
            return
        if byte is None:
            self.log.debug("%s->DONE: end of input", state.name)
        else:
            self.log.debug("%s read '%s'", state.name, render_trace(bytes((byte,))))

    def transition(self, old: State, new: State, reason: str) -> None:
        if self.enabled:
            self.log.debug("%s->%s: %s", old.name, new.name, reason)

    def buffer(self, contents: bytes) -> None:
        if self.enabled:
            self.log.debug('new buffer:"%s" pos:%d', render_trace(contents), len(contents))

    def attempt(self, haystack: bytes, count: int) -> None:
        if self.enabled:
            self.log.debug('matching %d exprs against "%s" (%d)', count,
                           render_trace(haystack), len(haystack))

    def matched(self, index: int, source: str, consumed: int) -> None:
        if self.enabled:
            self.log.debug("using match of %d chars from expr[%d]: %s",
                           consumed, index, render_trace(source.encode("latin-1")))

    def flush(self, span: bytes) -> None:
        if self.enabled:
            self.log.debug('print_buf:"%s"', render_trace(span))
