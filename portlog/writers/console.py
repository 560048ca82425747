"""Console output with per-line severity color."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from colorama import Fore, just_fix_windows_console

from portlog.levels import Severity

just_fix_windows_console()

_LEVEL_COLORS = {
    Severity.WARNING: Fore.YELLOW,
    Severity.ERROR: Fore.RED,
}


class ConsoleWriter:
    """Write formatted lines to standard output."""

    def __init__(self, stream: TextIO | None = None, color: bool = True) -> None:
        self._stream = stream
        self.color = color

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    @contextmanager
    def _colored(self, stream: TextIO, level: Severity | int) -> Iterator[None]:
        color = _LEVEL_COLORS.get(level) if self.color else None
        if color is None:
            yield
            return
        stream.write(color)
        try:
            yield
        finally:
            stream.write(Fore.RESET)

    def write(self, line: str, level: Severity | int) -> None:
        """Write one line in the color mapped to its severity."""
        stream = self.stream
        with self._colored(stream, level):
            stream.write(line)
        stream.write("\n")
        stream.flush()

    def diagnostic(self, message: str) -> None:
        """Write an uncolored diagnostic line."""
        print(message, file=self.stream, flush=True)
