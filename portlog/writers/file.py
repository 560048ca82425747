"""Append-only log file writer."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable


class FileWriter:
    """Append formatted lines to a log file, one open/close per line.

    Failures never propagate; they are handed to ``report`` as a one-line
    diagnostic instead.
    """

    def __init__(self, report: Callable[[str], None]) -> None:
        self._report = report

    def write(self, line: str, path: Path | str) -> bool:
        """Append a line to ``path``.

        Args:
            line: Formatted log line without a terminator.
            path: Target log file.

        Returns:
            True when the line was written.
        """
        try:
            target = Path(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("a", encoding="utf-8", newline="") as f:
                f.write(line + os.linesep)
        except (OSError, ValueError) as exc:
            self._report(f"Error writing to log file: {exc}")
            return False
        return True
