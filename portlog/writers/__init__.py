"""Output port writers."""

from portlog.writers.console import ConsoleWriter
from portlog.writers.event import EventNotifier
from portlog.writers.file import FileWriter

__all__ = ["ConsoleWriter", "EventNotifier", "FileWriter"]
