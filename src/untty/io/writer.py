"""Write filtered output."""

from typing import BinaryIO


class ByteSink:
    """Binary output that is flushed after every write."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        if not data:
            return
        self.stream.write(data)
        self.stream.flush()
        self.bytes_written += len(data)
