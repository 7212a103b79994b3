"""Tests for locating and loading the pattern file."""

from pathlib import Path

import pytest

from untty.errors import PatternCompileError, SetupError
from untty.patterns.defaults import DEFAULT_EXPRS, DEFAULT_LINES
from untty.patterns.loader import (
    load_default_patterns,
    load_pattern_set,
    resolve_pattern_path,
    split_pattern_lines,
)


class TestResolvePatternPath:
    """Tests for resolve_pattern_path."""

    def test_env_override(self, tmp_path: Path) -> None:
        target = tmp_path / "exprs"
        environ = {"UNTTY_ESCAPE_EXPRS": str(target), "HOME": "/home/someone"}
        assert resolve_pattern_path(environ) == target

    def test_home_config(self) -> None:
        path = resolve_pattern_path({"HOME": "/home/someone"})
        assert path == Path("/home/someone/.config/untty/escape_exprs")

    def test_falls_back_to_password_database(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("/var/lib/user")))
        path = resolve_pattern_path({})
        assert path == Path("/var/lib/user/.config/untty/escape_exprs")

    def test_no_home_is_setup_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        with pytest.raises(SetupError, match="Could not get user info"):
            resolve_pattern_path({})


class TestLoadPatternSet:
    """Tests for load_pattern_set."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        patterns = load_pattern_set(tmp_path / "missing")
        assert patterns.sources == load_default_patterns().sources

    def test_env_resolution_used_by_default(self, tmp_path: Path,
                                           monkeypatch: pytest.MonkeyPatch) -> None:
        exprs = tmp_path / "exprs"
        exprs.write_bytes(b"# mine\n^x\n")
        monkeypatch.setenv("UNTTY_ESCAPE_EXPRS", str(exprs))
        assert load_pattern_set().sources == ["^x"]

    def test_reads_file(self, tmp_path: Path) -> None:
        exprs = tmp_path / "exprs"
        exprs.write_bytes(b"# colors\n\\[[0-9;]*m\n\n^[78]\n")
        patterns = load_pattern_set(exprs)
        assert patterns.sources == [r"\[[0-9;]*m", "^[78]"]

    def test_crlf_file(self, tmp_path: Path) -> None:
        exprs = tmp_path / "exprs"
        exprs.write_bytes(b"^a\r\n^b\r\n")
        assert load_pattern_set(exprs).sources == ["^a", "^b"]

    def test_unreadable_file_is_setup_error(self, tmp_path: Path) -> None:
        # a directory exists but cannot be read as a file
        with pytest.raises(SetupError, match="Could not open"):
            load_pattern_set(tmp_path)

    def test_bad_pattern_is_setup_error(self, tmp_path: Path) -> None:
        exprs = tmp_path / "exprs"
        exprs.write_bytes(b"^ok\n[unclosed\n")
        with pytest.raises(PatternCompileError) as excinfo:
            load_pattern_set(exprs)
        assert isinstance(excinfo.value, SetupError)
        assert excinfo.value.source == "[unclosed"


class TestDefaults:
    """Tests for the built-in pattern set."""

    def test_defaults_compile(self) -> None:
        patterns = load_default_patterns()
        expected = [line for line in DEFAULT_LINES if line and not line.startswith("#")]
        assert patterns.sources == expected
        assert len(patterns) == 6

    def test_split_lines(self) -> None:
        assert split_pattern_lines(b"a\r\nb\n") == [b"a", b"b", b""]

    @pytest.mark.parametrize("sequence", [
        b"[0m", b"[1;31m", b"[?25h", b"[2J", b"[10;20H", b"[K",
        b"]0;user@host: ~\x07", b"(B", b")0", b"#8", b"7", b"8", b"=", b">", b"M", b"c", b"%G",
    ])
    def test_defaults_recognize_common_sequences(self, sequence: bytes) -> None:
        match = load_default_patterns().match(sequence)
        assert match is not None
        assert match.end == len(sequence)

    def test_defaults_text_is_printable(self) -> None:
        assert DEFAULT_EXPRS.isascii()
        assert "\x1b" not in DEFAULT_EXPRS
