"""Read the input stream one byte at a time."""

import logging
import select
from typing import BinaryIO

from untty.errors import ReadError

log = logging.getLogger(__name__)


class ByteSource:
    """
    Single-byte reader over a binary stream.

    Interrupted reads are retried, and a non-blocking stream with nothing
    available is waited on with ``select``. Any other OS error is fatal.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.bytes_read = 0

    def read_byte(self) -> int | None:
        """Return the next byte value, or None at end of stream."""
        while True:
            try:
                chunk = self.stream.read(1)
            except InterruptedError:
                log.debug("read() interrupted; trying again.")
                continue
            except BlockingIOError:
                chunk = None
            except OSError as e:
                raise ReadError(f"Could not read from input: {e.strerror or e}") from e

            if chunk is None:
                log.debug("read() would block; waiting for input.")
                self._wait_readable()
                continue

            if not chunk:
                return None
            self.bytes_read += 1
            return chunk[0]

    def _wait_readable(self) -> None:
        try:
            select.select([self.stream], [], [])
        except InterruptedError:
            pass
        except (OSError, ValueError) as e:
            raise ReadError(f"Could not wait for input: {e}") from e
