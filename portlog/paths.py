"""Default log file location."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_LOG_NAME = "log.txt"


def _program_dir() -> Path | None:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    main_module = sys.modules.get("__main__")
    main_file = getattr(main_module, "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent
    return None


def default_log_path() -> Path:
    """Return ``log.txt`` beside the running program, or in the cwd."""
    return (_program_dir() or Path.cwd()) / DEFAULT_LOG_NAME
