"""Escape-sequence patterns: compilation, matching and loading."""

from untty.patterns.defaults import DEFAULT_EXPRS
from untty.patterns.loader import load_default_patterns, load_pattern_set, resolve_pattern_path
from untty.patterns.pattern import (
    Match,
    MatchLength,
    MatchPolicy,
    Pattern,
    PatternSet,
    TieBreak,
    compile_all,
    match_shortest,
)

__all__ = [
    "DEFAULT_EXPRS",
    "Match",
    "MatchLength",
    "MatchPolicy",
    "Pattern",
    "PatternSet",
    "TieBreak",
    "compile_all",
    "match_shortest",
    "load_default_patterns",
    "load_pattern_set",
    "resolve_pattern_path",
]
