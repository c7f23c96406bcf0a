"""
Line-oriented console used by every prompt and display function.

Streams are injected so a run can be scripted with ``io.StringIO``;
the defaults bind to the process stdin/stdout.
"""
from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from tigerclub.errors import ConsoleClosedError


class Console:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        width: Optional[int] = None,
    ) -> None:
        self.stdin  = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._width = width

    @property
    def width(self) -> Optional[int]:
        """
        Terminal width in columns, or None when it cannot be determined
        (redirected output, StringIO, a terminal reporting zero columns).
        """
        if self._width is not None:
            return self._width if self._width > 0 else None
        try:
            columns = os.get_terminal_size(self.stdout.fileno()).columns
        except (AttributeError, OSError, ValueError):
            return None
        return columns if columns > 0 else None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self, prompt: str = "") -> str:
        """Print ``prompt`` without a newline and return the next input line."""
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise ConsoleClosedError("Input stream closed before a value was entered")
        return line.rstrip("\r\n")

    def wait_for_key(self) -> None:
        """Block until the user acknowledges. End of input counts as acknowledgement."""
        self.stdin.readline()
