"""Compiled escape-sequence patterns and match selection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from untty.errors import PatternCompileError, PatternExecutionError


# POSIX bracket expressions mapped to equivalent byte ranges
POSIX_CLASSES: dict[bytes, bytes] = {
    b"alnum": rb"0-9A-Za-z",
    b"alpha": rb"A-Za-z",
    b"blank": rb" \t",
    b"cntrl": rb"\x00-\x1f\x7f",
    b"digit": rb"0-9",
    b"graph": rb"!-~",
    b"lower": rb"a-z",
    b"print": rb" -~",
    b"punct": rb"!-/:-@\[-`{-~",
    b"space": rb" \t\n\x0b\x0c\r",
    b"upper": rb"A-Z",
    b"xdigit": rb"0-9A-Fa-f",
}

_POSIX_CLASS_RE = re.compile(rb"\[:([a-z]+):\]")


def translate_posix_classes(expr: bytes) -> bytes:
    """Rewrite ``[:digit:]``-style classes into plain ranges for ``re``."""
    def _sub(m: re.Match[bytes]) -> bytes:
        return POSIX_CLASSES.get(m.group(1), m.group(0))
    return _POSIX_CLASS_RE.sub(_sub, expr)


class MatchLength(str, Enum):
    """Which end offset wins among all candidate matches."""
    SHORTEST = "shortest"
    LONGEST = "longest"


class TieBreak(str, Enum):
    """Which pattern wins when several end at the same offset."""
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class MatchPolicy:
    """Selection policy applied by ``PatternSet.match``."""
    length: MatchLength = MatchLength.SHORTEST
    tie: TieBreak = TieBreak.FIRST

    def prefers(self, end: int, best_end: int) -> bool:
        """True if a match ending at ``end`` replaces one ending at ``best_end``.

        Candidates are offered in pattern order, so ties go to the incumbent
        unless the policy asks for the last-defined pattern.
        """
        if end == best_end:
            return self.tie is TieBreak.LAST
        if self.length is MatchLength.SHORTEST:
            return end < best_end
        return end > best_end

    def describe(self) -> str:
        return f"{self.length.value}/{self.tie.value}"


@dataclass(frozen=True)
class Pattern:
    """A single compiled pattern."""
    source: str
    index: int
    regex: re.Pattern[bytes] = field(repr=False, compare=False)

    @classmethod
    def compile(cls, source: str | bytes, index: int = 0) -> Pattern:
        """Compile pattern text as a bytes regular expression."""
        if isinstance(source, str):
            text = source
            try:
                raw = source.encode("latin-1")
            except UnicodeEncodeError as e:
                raise PatternCompileError(text, f"not a byte pattern ({e.reason})") from e
        else:
            raw = source
            text = source.decode("latin-1")

        try:
            regex = re.compile(translate_posix_classes(raw))
        except re.error as e:
            raise PatternCompileError(text, str(e)) from e

        return cls(source=text, index=index, regex=regex)

    def find_all(self, haystack: bytes) -> list[tuple[int, int]]:
        """Return the ``(start, end)`` spans of all non-overlapping matches."""
        try:
            return [m.span() for m in self.regex.finditer(haystack)]
        except (re.error, RuntimeError) as e:
            raise PatternExecutionError(self.source, str(e)) from e


@dataclass(frozen=True)
class Match:
    """Winning match: which pattern, and where it ends in the haystack."""
    index: int
    end: int
    pattern: Pattern = field(repr=False, compare=False)


@dataclass(frozen=True)
class PatternSet:
    """Ordered, immutable collection of compiled patterns."""
    patterns: tuple[Pattern, ...] = ()

    def __len__(self) -> int:
        return len(self.patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self.patterns)

    def __getitem__(self, index: int) -> Pattern:
        return self.patterns[index]

    @property
    def sources(self) -> list[str]:
        return [p.source for p in self.patterns]

    def match(self, haystack: bytes, policy: MatchPolicy | None = None) -> Match | None:
        """
        Run every pattern over ``haystack`` and pick one match.

        Each pattern contributes the end offset of its shortest- or
        longest-ending match; the policy then picks among patterns.
        Returns None when nothing matches.
        """
        policy = policy or MatchPolicy()
        best: Match | None = None

        for pattern in self.patterns:
            spans = pattern.find_all(haystack)
            if not spans:
                continue
            ends = [end for _, end in spans]
            if policy.length is MatchLength.SHORTEST:
                end = min(ends)
            else:
                end = max(ends)
            if best is None or policy.prefers(end, best.end):
                best = Match(index=pattern.index, end=end, pattern=pattern)

        return best


def is_pattern_line(line: str | bytes) -> bool:
    """True for lines that carry a pattern (not blank, not a comment)."""
    if not line.strip():
        return False
    return line[:1] not in ("#", b"#")


def compile_all(sources: Iterable[str | bytes]) -> PatternSet:
    """
    Compile pattern lines into a PatternSet.

    Blank lines and ``#`` comments are skipped. The first pattern that fails
    to compile raises ``PatternCompileError``.
    """
    patterns: list[Pattern] = []
    for source in sources:
        if not is_pattern_line(source):
            continue
        patterns.append(Pattern.compile(source, index=len(patterns)))
    return PatternSet(tuple(patterns))


def match_shortest(patterns: PatternSet, haystack: bytes) -> Match | None:
    """Earliest-ending match, first-defined pattern on ties."""
    return patterns.match(haystack, MatchPolicy())
