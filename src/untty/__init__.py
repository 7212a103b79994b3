r"""
untty: strip terminal escape sequences from captured console output

Turns serial-console logs, script(1) and screen(1) captures into plain,
readable text.

Quick Start:
    >>> import untty
    >>> text, result = untty.strip(b"a\x1b[31mb\r\n")
    >>> text
    b'ab\n'

Features:
    - Byte-at-a-time state machine with a bounded look-ahead buffer
    - Configurable escape patterns (regular expressions, one per line)
    - Shortest/longest and first/last match selection policies
    - Unmatched sequences flushed with visible \xHH escaping
    - CR and CRLF normalized to LF
"""

__version__ = "0.1.0"

# Core types
from untty.core.buffer import SequenceBuffer
from untty.core.state import State

# Patterns
from untty.patterns.pattern import MatchLength, MatchPolicy, Pattern, PatternSet, TieBreak, compile_all
from untty.patterns.loader import load_default_patterns, load_pattern_set

# Engine
from untty.engine.filter import FilterEngine, FilterResult, strip_bytes, strip_file

# Errors
from untty.errors import PatternCompileError, PatternExecutionError, ReadError, SetupError, UnttyError


def strip(data: bytes, patterns: PatternSet | None = None) -> tuple[bytes, FilterResult]:
    """Filter escape sequences out of ``data`` using the built-in patterns by default."""
    return strip_bytes(data, patterns)

__all__ = [
    # Version
    "__version__",
    # Core types
    "SequenceBuffer",
    "State",
    # Patterns
    "Pattern",
    "PatternSet",
    "MatchPolicy",
    "MatchLength",
    "TieBreak",
    "compile_all",
    "load_pattern_set",
    "load_default_patterns",
    # Engine
    "FilterEngine",
    "FilterResult",
    "strip",
    "strip_bytes",
    "strip_file",
    # Errors
    "UnttyError",
    "SetupError",
    "PatternCompileError",
    "ReadError",
    "PatternExecutionError",
]
