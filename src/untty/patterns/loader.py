"""Locate, read and compile the escape pattern file."""

import logging
import os
from pathlib import Path
from typing import Mapping

from untty.core.constants import PATTERNS_ENV_VAR, USER_PATTERNS_PATH
from untty.errors import SetupError
from untty.patterns.defaults import DEFAULT_LINES
from untty.patterns.pattern import PatternSet, compile_all

log = logging.getLogger(__name__)


def resolve_pattern_path(environ: Mapping[str, str] | None = None) -> Path:
    """
    Work out where the pattern file should live.

    ``UNTTY_ESCAPE_EXPRS`` wins when set; otherwise the file is
    ``~/.config/untty/escape_exprs``. The home directory comes from ``HOME``
    and then the password database.

    Raises:
        SetupError: If no home directory can be determined.
    """
    environ = os.environ if environ is None else environ

    if override := environ.get(PATTERNS_ENV_VAR):
        return Path(override).expanduser()

    if home := environ.get("HOME"):
        return Path(home).joinpath(*USER_PATTERNS_PATH)

    try:
        home_dir = Path.home()
    except (RuntimeError, KeyError) as e:
        raise SetupError("Could not get user info") from e
    return home_dir.joinpath(*USER_PATTERNS_PATH)


def split_pattern_lines(data: bytes) -> list[bytes]:
    """Split raw pattern file contents into lines without line terminators."""
    return [line.rstrip(b"\r") for line in data.split(b"\n")]


def load_default_patterns() -> PatternSet:
    """Compile the built-in pattern set."""
    return compile_all(DEFAULT_LINES)


def load_pattern_set(path: str | Path | None = None) -> PatternSet:
    """
    Load and compile the pattern set.

    A missing file falls back to the built-in defaults. Any other failure to
    read the file, or any pattern that does not compile, is a setup error.
    """
    path = Path(path) if path is not None else resolve_pattern_path()

    try:
        data = path.read_bytes()
    except FileNotFoundError:
        log.info("no pattern file at %s; using built-in escape patterns", path)
        return load_default_patterns()
    except OSError as e:
        raise SetupError(f'Could not open "{path}": {e.strerror or e}') from e

    patterns = compile_all(split_pattern_lines(data))
    log.debug("loaded %d patterns from %s", len(patterns), path)
    return patterns
