"""Leveled logger with console, file and event output ports."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import FrozenSet, Iterable, TextIO, Union

from portlog.formatting import format_message
from portlog.levels import DISPATCH_ORDER, OutputPort, Severity, normalize_ports, parse_severity
from portlog.paths import default_log_path
from portlog.writers import ConsoleWriter, EventNotifier, FileWriter
from portlog.writers.event import Subscriber

PortsArg = Union[OutputPort, str, Iterable[Union[OutputPort, str]]]


class Logger:
    """Filter messages by severity and fan them out to the active ports.

    One lock guards configuration changes and the dispatch section of
    ``log``. The severity check in ``log`` reads ``minimum_level`` without
    the lock, so a message racing a ``configure`` call may be filtered
    against either configuration.

    Ports fire in the order console, file, event. A failure in one port is
    reported and never stops the others or reaches the caller.
    """

    def __init__(
        self,
        log_file_path: Path | str | None = None,
        minimum_level: Severity | str = Severity.INFO,
        output_ports: PortsArg = OutputPort.FILE,
        stream: TextIO | None = None,
    ) -> None:
        # Reentrant so a subscriber may log from inside its callback.
        self._lock = threading.RLock()
        self._log_file_path: Path | str = log_file_path or default_log_path()
        self._minimum_level = parse_severity(minimum_level)
        self._output_ports: FrozenSet[OutputPort] = normalize_ports(output_ports)
        self.console = ConsoleWriter(stream)
        self.file = FileWriter(self.console.diagnostic)
        self.events = EventNotifier(self.console.diagnostic)

    def configure(
        self,
        log_file_path: Path | str | None = None,
        minimum_level: Severity | str = Severity.INFO,
        output_ports: PortsArg = OutputPort.FILE,
    ) -> None:
        """Replace the minimum level and active ports.

        Args:
            log_file_path: New log file; ignored when None or empty.
            minimum_level: Lowest severity that is dispatched.
            output_ports: Ports to enable. Ports left out are disabled.
        """
        level = parse_severity(minimum_level)
        ports = normalize_ports(output_ports)
        with self._lock:
            if log_file_path:
                self._log_file_path = log_file_path
            self._minimum_level = level
            self._output_ports = ports

    @property
    def minimum_level(self) -> Severity:
        return self._minimum_level

    @property
    def output_ports(self) -> FrozenSet[OutputPort]:
        return self._output_ports

    @property
    def log_file_path(self) -> Path | str:
        return self.get_current_log_path()

    @log_file_path.setter
    def log_file_path(self, value: Path | str) -> None:
        self.set_current_log_path(value)

    def get_current_log_path(self) -> Path | str:
        with self._lock:
            return self._log_file_path

    def set_current_log_path(self, new_path: Path | str) -> None:
        """Set the log file path without the empty-value check ``configure`` does."""
        with self._lock:
            self._log_file_path = new_path

    def subscribe(self, callback: Subscriber) -> Subscriber:
        """Register a callback that receives each line sent to the event port."""
        return self.events.subscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> bool:
        return self.events.unsubscribe(callback)

    def log(self, message: str, level: Severity | str = Severity.INFO) -> None:
        """Format and dispatch a message if it passes the severity filter."""
        level = parse_severity(level)
        if level < self._minimum_level:
            return
        line = format_message(message, level)
        with self._lock:
            ports = self._output_ports
            for port in DISPATCH_ORDER:
                if port in ports:
                    self._dispatch(port, line, level)

    def info(self, message: str) -> None:
        self.log(message, Severity.INFO)

    def warning(self, message: str) -> None:
        self.log(message, Severity.WARNING)

    def error(self, message: str) -> None:
        self.log(message, Severity.ERROR)

    def _current_file_path(self) -> Path | str:
        return self._log_file_path or default_log_path()

    def _dispatch(self, port: OutputPort, line: str, level: Severity) -> None:
        try:
            if port is OutputPort.CONSOLE:
                self.console.write(line, level)
            elif port is OutputPort.FILE:
                self.file.write(line, self._current_file_path())
            elif port is OutputPort.EVENT:
                self.events.notify(line)
        except Exception as exc:
            _report_to_stderr(f"Error writing to {port.name.lower()} output: {exc}")


def _report_to_stderr(message: str) -> None:
    try:
        print(message, file=sys.stderr, flush=True)
    except (OSError, ValueError):
        # stderr is closed or broken; nothing left to report to.
        return


_LOGGER: Logger | None = None
_LOGGER_LOCK = threading.Lock()


def get_logger() -> Logger:
    """Return the shared logger instance, creating it on first use."""
    global _LOGGER
    if _LOGGER is None:
        with _LOGGER_LOCK:
            if _LOGGER is None:
                _LOGGER = Logger()
    return _LOGGER
