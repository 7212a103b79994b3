"""Built-in escape patterns used when no pattern file is present."""

# Each pattern is matched against the bytes that follow the trigger byte.
DEFAULT_EXPRS = r"""# untty default escape expressions
#
# One regular expression per line, matched against the bytes following ESC.
# Blank lines and lines starting with '#' are ignored.
#
# CSI: ESC [ parameters intermediates final
^\[[0-?]*[ -/]*[@-~]
# OSC terminated by BEL (window title and friends)
^\][^\x07]*\x07
# Character set designation: ESC ( B, ESC ) 0, ...
^[()*+\-./][0-9A-Za-z<=>]
# DEC line attributes and alignment test: ESC # 8
^#[0-9]
# Single-character escapes: save/restore cursor, index, reset, keypad modes
^[78=>DEHMNOZc]
# Select character set: ESC % G
^%[@G8]
"""

DEFAULT_LINES: tuple[str, ...] = tuple(DEFAULT_EXPRS.splitlines())
