"""Filter engine states."""

from enum import Enum, auto


class State(Enum):
    """States of the escape-sequence recognizer."""
    NEED_ESCAPE = auto()
    NEED_ESCAPE_HAVE_CR = auto()
    NEED_MATCH = auto()
    DONE = auto()

    @property
    def is_terminal(self) -> bool:
        return self is State.DONE
