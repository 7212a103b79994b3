"""Shared fixtures for untty tests."""

from typing import Callable

import pytest

from untty.core.constants import DEBUG_ENV_VAR, PATTERNS_ENV_VAR
from untty.engine.filter import FilterEngine
from untty.patterns.loader import load_default_patterns
from untty.patterns.pattern import PatternSet, compile_all

# ESC [ digits m, matched against the bytes after ESC
SGR = rb"\[[0-9;]*m"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the user's own pattern file and debug setting out of tests."""
    monkeypatch.setenv(PATTERNS_ENV_VAR, str(tmp_path / "no_such_escape_exprs"))
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)


@pytest.fixture
def sgr_patterns() -> PatternSet:
    """Pattern set that only knows SGR color codes."""
    return compile_all([SGR])


@pytest.fixture
def default_patterns() -> PatternSet:
    """The built-in pattern set."""
    return load_default_patterns()


@pytest.fixture
def make_engine(sgr_patterns: PatternSet) -> Callable[..., FilterEngine]:
    """Factory for engines, defaulting to the SGR-only pattern set."""
    def _make(patterns: PatternSet | None = None, **kwargs) -> FilterEngine:
        return FilterEngine(sgr_patterns if patterns is None else patterns, **kwargs)
    return _make


@pytest.fixture
def run_filter(make_engine: Callable[..., FilterEngine]) -> Callable[..., bytes]:
    """Filter a whole byte string, end of input included."""
    def _run(data: bytes, patterns: PatternSet | None = None, **kwargs) -> bytes:
        engine = make_engine(patterns, **kwargs)
        return engine.feed(data) + engine.finish()
    return _run
