"""Leveled logging to console, file and in-process subscribers."""

from portlog.config import LoggerConfig, apply_config, load_config
from portlog.formatting import format_message, level_tag
from portlog.levels import OutputPort, Severity
from portlog.logger import Logger, get_logger
from portlog.paths import default_log_path

__all__ = [
    "Logger",
    "LoggerConfig",
    "OutputPort",
    "Severity",
    "apply_config",
    "default_log_path",
    "format_message",
    "get_logger",
    "level_tag",
    "load_config",
]
