"""Shared constants for escape-sequence filtering."""

# Control bytes
ESC = 0x1B
SPC = 0x20
CR = 0x0D
NL = 0x0A

# Sequence buffer sizing
BUFFER_CAPACITY = 80
OVERFLOW_THRESHOLD = 16

# Pattern file lookup
PATTERNS_ENV_VAR = "UNTTY_ESCAPE_EXPRS"
DEBUG_ENV_VAR = "UNTTY_DEBUG"
USER_PATTERNS_PATH = (".config", "untty", "escape_exprs")
