"""Severity levels and output port flags."""

from __future__ import annotations

from enum import Flag, IntEnum
from typing import FrozenSet, Iterable


class Severity(IntEnum):
    """Ordered message severity used for filtering."""

    INFO = 0
    WARNING = 1
    ERROR = 2


class OutputPort(Flag):
    """Destinations a formatted line can be sent to."""

    NONE = 0
    CONSOLE = 1
    FILE = 2
    EVENT = 4


# Ports are always dispatched in this order.
DISPATCH_ORDER = (OutputPort.CONSOLE, OutputPort.FILE, OutputPort.EVENT)

_LEVEL_NAMES = {
    "info": Severity.INFO,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "error": Severity.ERROR,
}


def parse_severity(value: Severity | str | int, default: Severity = Severity.INFO) -> Severity:
    """Coerce a level name or number into a Severity.

    Args:
        value: Severity member, level name (case-insensitive) or integer.
        default: Returned when the value is not recognized.

    Returns:
        Matching Severity.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        name = value.strip().lower()
        if not name.isdigit():
            return _LEVEL_NAMES.get(name, default)
        value = int(name)
    try:
        return Severity(int(value))
    except (TypeError, ValueError):
        return default


def _parse_port(value: OutputPort | str) -> OutputPort:
    if isinstance(value, OutputPort):
        return value
    try:
        return OutputPort[str(value).strip().upper()]
    except KeyError:
        return OutputPort.NONE


def normalize_ports(ports: OutputPort | str | Iterable[OutputPort | str] | None) -> FrozenSet[OutputPort]:
    """Expand a port flag combination or iterable into a set of concrete ports.

    Unknown names and NONE are dropped.
    """
    if ports is None:
        return frozenset()
    if isinstance(ports, (OutputPort, str)):
        combined = _parse_port(ports)
    else:
        combined = OutputPort.NONE
        for item in ports:
            combined |= _parse_port(item)
    return frozenset(port for port in DISPATCH_ORDER if port & combined)
