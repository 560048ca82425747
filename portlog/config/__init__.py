"""Config package facade."""

from portlog.config.loader import apply_config, config_from_dict, load_config, resolve_config_path
from portlog.config.merge import merge_section, merge_sections
from portlog.config.models import LoggerConfig

__all__ = [
    "LoggerConfig",
    "apply_config",
    "config_from_dict",
    "load_config",
    "merge_section",
    "merge_sections",
    "resolve_config_path",
]
