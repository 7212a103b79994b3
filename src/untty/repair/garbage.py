r"""
Drop the stray ``ESC [`` left behind by some console loggers.

Linux boot output logged through screen(1) sometimes ends up as::

    \x1b[[    5.953653] ...

The leading ``ESC [`` is garbage. When such a candidate overflows without
matching, the two lead bytes are dropped before the rest is flushed.
"""

from untty.core.constants import ESC

GARBAGE_PREFIX = bytes((ESC, ord("[")))


def drop_console_garbage(span: bytes, trigger: int = ESC) -> bytes:
    """Strip a leading ``ESC [`` from an overflowing span when ESC is the trigger."""
    if trigger == ESC and span.startswith(GARBAGE_PREFIX):
        return span[len(GARBAGE_PREFIX):]
    return span
