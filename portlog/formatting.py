"""Log line formatting."""

from __future__ import annotations

from datetime import datetime

from portlog.levels import Severity

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_TAGS = {
    Severity.INFO: "INFO",
    Severity.WARNING: "WARN",
    Severity.ERROR: "ERROR",
}


def level_tag(level: Severity | int) -> str:
    """Return the bracketed tag text for a severity."""
    return _LEVEL_TAGS.get(level, "UNKNOWN")


def format_message(message: str, level: Severity | int, now: datetime | None = None) -> str:
    """Build a formatted log line.

    Args:
        message: Message text.
        level: Message severity.
        now: Optional datetime override for deterministic tests.

    Returns:
        Line of the form ``[YYYY-MM-DD HH:MM:SS] [LEVEL] message``.
    """
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"[{timestamp}] [{level_tag(level)}] {message}"
