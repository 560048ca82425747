"""Configuration loading and normalization."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List

from portlog.config.merge import merge_sections
from portlog.config.models import LoggerConfig

if TYPE_CHECKING:
    from portlog.logger import Logger

CONFIG_ENV = "PORTLOG_CONFIG"
DEFAULT_CONFIG_NAME = "portlog.json"
SECTION = "logger"


def _as_list(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _section(raw: Dict[str, Any]) -> Dict[str, Any]:
    section = raw.get(SECTION, raw) or {}
    if not isinstance(section, dict):
        return {}
    return section


def config_from_dict(raw: Dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig from a raw dictionary.

    Args:
        raw: Either a mapping with a ``logger`` section or the section itself.

    Returns:
        Normalized LoggerConfig instance.
    """
    section = _section(raw)
    defaults = LoggerConfig()
    return LoggerConfig(
        log_file_path=_as_str(section.get("log_file_path"), defaults.log_file_path),
        minimum_level=_as_str(section.get("minimum_level"), defaults.minimum_level),
        output_ports=_as_list(section.get("output_ports"), defaults.output_ports),
        console_color=_as_bool(section.get("console_color"), defaults.console_color),
    )


def resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Find the config file to load.

    Args:
        path: Explicit path; wins over the environment and the cwd default.

    Returns:
        Resolved config path, or None when no config is available.
    """
    if path:
        return Path(path).expanduser().resolve()
    env_value = os.environ.get(CONFIG_ENV)
    if env_value:
        return Path(env_value).expanduser().resolve()
    default_file = Path.cwd() / DEFAULT_CONFIG_NAME
    if default_file.exists():
        return default_file.resolve()
    return None


def load_config(path: Path | None) -> LoggerConfig:
    """Load config data into a LoggerConfig instance.

    Args:
        path: Optional path to a JSON config file containing overrides.

    Returns:
        Parsed LoggerConfig instance.
    """
    raw: Dict[str, Any] = {SECTION: asdict(LoggerConfig())}
    if path is not None:
        raw = merge_sections(raw, {SECTION: _section(_load_json(path))})
    return config_from_dict(raw)


def apply_config(logger: "Logger", cfg: LoggerConfig) -> None:
    """Configure a logger from a LoggerConfig."""
    logger.configure(
        log_file_path=cfg.log_file_path or None,
        minimum_level=cfg.minimum_level,
        output_ports=cfg.output_ports,
    )
    logger.console.color = cfg.console_color
