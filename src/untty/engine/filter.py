"""
Escape-sequence filter engine.

A byte-at-a-time state machine that holds a bounded candidate sequence,
matches it against a PatternSet, and decides what to emit:

- NEED_ESCAPE: plain text passes through until a trigger byte or CR.
- NEED_ESCAPE_HAVE_CR: a CR was seen; emit one newline, swallowing a
  following CR or LF.
- NEED_MATCH: bytes accumulate behind the trigger until a pattern matches
  (the sequence is dropped) or the candidate is abandoned and flushed
  literally.
- DONE: end of input; whatever is still buffered is flushed.
"""

import io
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Union

from untty.core.buffer import SequenceBuffer
from untty.core.constants import BUFFER_CAPACITY, CR, ESC, NL, OVERFLOW_THRESHOLD
from untty.core.state import State
from untty.io.reader import ByteSource
from untty.io.writer import ByteSink
from untty.patterns.loader import load_default_patterns
from untty.patterns.pattern import MatchPolicy, PatternSet
from untty.render.literal import render_literal
from untty.repair.garbage import drop_console_garbage
from untty.trace import Tracer

log = logging.getLogger(__name__)


@dataclass
class Transition:
    """Outcome of feeding one byte (or end of input) to the state machine."""
    state: State
    buffer: SequenceBuffer
    output: bytes = b""
    removed: int = 0
    flushes: int = 0
    unmatched: int = 0


@dataclass
class FilterResult:
    """Running totals for a filter pass."""
    bytes_read: int = 0
    bytes_written: int = 0
    sequences_removed: int = 0
    literal_flushes: int = 0
    unmatched_trailing: bool = False

    @property
    def was_modified(self) -> bool:
        """True if any sequence was removed or flushed with escaping."""
        return self.sequences_removed > 0 or self.literal_flushes > 0


class FilterEngine:
    """
    Streaming escape-sequence filter.

    ``transition`` is the pure state function; ``step`` applies it to the
    engine's own state; ``run`` drives it from a ByteSource into a ByteSink.
    """

    def __init__(
        self,
        patterns: PatternSet,
        trigger: int = ESC,
        policy: MatchPolicy | None = None,
        tracer: Tracer | None = None,
        overflow_threshold: int = OVERFLOW_THRESHOLD,
        capacity: int = BUFFER_CAPACITY,
    ):
        if not 1 < overflow_threshold <= capacity:
            raise ValueError(
                f"overflow threshold must be in 2..{capacity}, got {overflow_threshold}"
            )
        self.patterns = patterns
        self.trigger = trigger
        self.policy = policy or MatchPolicy()
        self.tracer = tracer or Tracer()
        self.overflow_threshold = overflow_threshold
        self.state = State.NEED_ESCAPE
        self.buffer = SequenceBuffer(capacity)
        self.result = FilterResult()

    def reset(self) -> None:
        """Return to the initial state so the engine can filter another stream."""
        self.state = State.NEED_ESCAPE
        self.buffer.reset()
        self.result = FilterResult()

    # -- driving --------------------------------------------------------

    def step(self, byte: int | None) -> bytes:
        """Feed one byte (None for end of input) and return the bytes to emit."""
        if self.state.is_terminal:
            raise ValueError("filter engine already reached end of input")

        self.tracer.read(self.state, byte)
        t = self.transition(self.state, self.buffer, byte)
        self.state = t.state
        self.buffer = t.buffer

        if byte is not None:
            self.result.bytes_read += 1
        self.result.bytes_written += len(t.output)
        self.result.sequences_removed += t.removed
        self.result.literal_flushes += t.flushes
        if t.unmatched:
            self.result.unmatched_trailing = True
            log.warning("Unmatched escape at end of input (%d bytes)", t.unmatched)
        return t.output

    def feed(self, data: bytes) -> bytes:
        """Feed a chunk of bytes, returning everything emitted for it."""
        return b"".join(self.step(byte) for byte in data)

    def finish(self) -> bytes:
        """Signal end of input and return any final output."""
        return self.step(None)

    def run(self, source: ByteSource, sink: ByteSink) -> FilterResult:
        """
        Pull bytes from ``source`` until end of stream, writing to ``sink``.

        Output for each byte is written and flushed before the next read.
        """
        while not self.state.is_terminal:
            sink.write(self.step(source.read_byte()))
        return self.result

    # -- transitions ----------------------------------------------------

    def transition(self, state: State, buffer: SequenceBuffer, byte: int | None) -> Transition:
        """
        Compute the next state for ``byte`` without touching any I/O.

        ``buffer`` is updated in place and returned in the Transition.
        """
        if byte is None:
            return self._end_of_input(state, buffer)

        if state is State.NEED_ESCAPE_HAVE_CR:
            self.tracer.transition(state, State.NEED_ESCAPE, "found CR/NL.")
            if byte in (CR, NL):
                return Transition(State.NEED_ESCAPE, buffer, b"\n")
            t = self._need_escape(buffer, byte)
            return replace(t, output=b"\n" + t.output)

        if state is State.NEED_ESCAPE:
            return self._need_escape(buffer, byte)

        if state is State.NEED_MATCH:
            return self._need_match(buffer, byte)

        raise ValueError(f"no transition out of {state.name}")

    def _need_escape(self, buffer: SequenceBuffer, byte: int) -> Transition:
        if byte == self.trigger:
            buffer.append(byte)
            self.tracer.transition(State.NEED_ESCAPE, State.NEED_MATCH,
                                   f"got escape (\\x{byte:02x})")
            return Transition(State.NEED_MATCH, buffer)
        if byte == CR:
            return Transition(State.NEED_ESCAPE_HAVE_CR, buffer)
        return Transition(State.NEED_ESCAPE, buffer, bytes((byte,)))

    def _need_match(self, buffer: SequenceBuffer, byte: int) -> Transition:
        if buffer.is_full:
            self.tracer.transition(State.NEED_MATCH, State.NEED_ESCAPE,
                                   f"buffer full at {len(buffer)} characters")
            span = drop_console_garbage(buffer.contents(), self.trigger)
            buffer.reset()
            t = self._need_escape(buffer, byte)
            return replace(t, output=self._flush(span) + t.output, flushes=t.flushes + 1)

        buffer.append(byte)
        self.tracer.buffer(buffer.contents())

        if byte in (CR, NL):
            self.tracer.transition(State.NEED_MATCH, State.NEED_ESCAPE,
                                   "found return." if byte == CR else "found newline.")
            span = buffer.contents()
            buffer.reset()
            return Transition(State.NEED_ESCAPE, buffer, self._flush(span), flushes=1)

        if len(buffer) <= 1:
            return Transition(State.NEED_MATCH, buffer)

        haystack = buffer.as_span()
        self.tracer.attempt(haystack, len(self.patterns))
        match = self.patterns.match(haystack, self.policy)

        if match is not None:
            # the trigger byte plus everything up to the end of the match
            consumed = match.end + 1
            self.tracer.matched(match.index, match.pattern.source, consumed)
            buffer.shift_left(consumed)
            if not buffer:
                self.tracer.transition(State.NEED_MATCH, State.NEED_ESCAPE,
                                       f"matched {consumed} characters")
                return Transition(State.NEED_ESCAPE, buffer, removed=1)
            if buffer.lead == self.trigger:
                self.tracer.transition(State.NEED_MATCH, State.NEED_MATCH,
                                       f"matched {consumed} characters")
                return Transition(State.NEED_MATCH, buffer, removed=1)
            span = buffer.contents()
            buffer.reset()
            return Transition(State.NEED_ESCAPE, buffer, self._flush(span),
                              removed=1, flushes=1)

        if byte == self.trigger:
            self.tracer.transition(State.NEED_MATCH, State.NEED_MATCH, "found escape")
            span = buffer.contents()[:-1]
            buffer.reset()
            buffer.append(byte)
            return Transition(State.NEED_MATCH, buffer, self._flush(span), flushes=1)

        if len(buffer) >= self.overflow_threshold:
            self.tracer.transition(State.NEED_MATCH, State.NEED_ESCAPE,
                                   f"escape unmatched at {len(buffer)} characters")
            span = drop_console_garbage(buffer.contents(), self.trigger)
            buffer.reset()
            return Transition(State.NEED_ESCAPE, buffer, self._flush(span), flushes=1)

        return Transition(State.NEED_MATCH, buffer)

    def _end_of_input(self, state: State, buffer: SequenceBuffer) -> Transition:
        output = b"\n" if state is State.NEED_ESCAPE_HAVE_CR else b""
        if not buffer:
            return Transition(State.DONE, buffer, output)

        span = buffer.contents()
        buffer.reset()
        unmatched = len(span) if self.trigger == ESC and span[0] == ESC else 0
        return Transition(State.DONE, buffer, output + self._flush(span),
                          flushes=1, unmatched=unmatched)

    def _flush(self, span: bytes) -> bytes:
        self.tracer.flush(span)
        return render_literal(span)


def _engine(
    patterns: PatternSet | None,
    trigger: int,
    policy: MatchPolicy | None,
    tracer: Tracer | None,
) -> FilterEngine:
    if patterns is None:
        patterns = load_default_patterns()
    return FilterEngine(patterns, trigger=trigger, policy=policy, tracer=tracer)


def strip_bytes(
    data: bytes,
    patterns: PatternSet | None = None,
    trigger: int = ESC,
    policy: MatchPolicy | None = None,
    tracer: Tracer | None = None,
) -> tuple[bytes, FilterResult]:
    """
    Filter escape sequences out of an in-memory byte string.

    Uses the built-in pattern set unless ``patterns`` is given.

    Returns:
        Tuple of (filtered_bytes, FilterResult)
    """
    engine = _engine(patterns, trigger, policy, tracer)
    out = io.BytesIO()
    result = engine.run(ByteSource(io.BytesIO(data)), ByteSink(out))
    return out.getvalue(), result


def strip_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    patterns: PatternSet | None = None,
    trigger: int = ESC,
    policy: MatchPolicy | None = None,
) -> tuple[Path, FilterResult]:
    """
    Filter a single file.

    Args:
        input_path: Path to input file
        output_path: Path to output file (default: input_clean.<ext>)

    Returns:
        Tuple of (output_path, FilterResult)
    """
    input_path = Path(input_path)

    if output_path is None:
        output_path = input_path.with_stem(input_path.stem + "_clean")
    else:
        output_path = Path(output_path)

    engine = _engine(patterns, trigger, policy, None)
    with open(input_path, "rb") as src, open(output_path, "wb") as dst:
        result = engine.run(ByteSource(src), ByteSink(dst))

    return output_path, result
