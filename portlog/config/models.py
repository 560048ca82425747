"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class LoggerConfig:
    """Logger configuration settings."""

    log_file_path: str = ""
    minimum_level: str = "info"
    output_ports: List[str] = field(default_factory=lambda: ["file"])
    console_color: bool = True
