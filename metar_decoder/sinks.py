"""Output sinks receiving decoded lines in order."""

import sys
from typing import List, Optional, TextIO


class StreamSink:
    """Write lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self.stream.write(f"{line}\n")


class ListSink:
    """Collect lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
