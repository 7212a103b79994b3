"""Exceptions raised by untty, each carrying the process exit code it maps to."""


class UnttyError(Exception):
    """Base class for all untty failures."""
    exit_code = 1


class SetupError(UnttyError):
    """Unrecoverable error before any stream byte is processed."""
    exit_code = 1


class PatternCompileError(SetupError):
    """A pattern from the pattern source failed to compile."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f'Could not compile regexp "{source}": {reason}')


class ReadError(UnttyError):
    """Reading from the input source failed mid-stream."""
    exit_code = 2


class PatternExecutionError(UnttyError):
    """A compiled pattern failed while executing (distinct from no match)."""
    exit_code = 3

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f'Could not execute regexp "{source}": {reason}')
