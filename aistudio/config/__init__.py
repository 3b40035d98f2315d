"""Configuration and logging setup."""

from aistudio.config.settings import Config, get_config
from aistudio.config.logging_config import correlation_id_var, setup_logging

__all__ = [
    "Config",
    "get_config",
    "correlation_id_var",
    "setup_logging",
]
