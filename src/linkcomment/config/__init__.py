"""Config module exports."""

from linkcomment.config.loader import load_config
from linkcomment.config.models import (
    DecorationConfig,
    LinkCommentConfig,
    LoggingConfig,
    LogOutputConfig,
    NavigationConfig,
)

__all__ = [
    "load_config",
    "LinkCommentConfig",
    "DecorationConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "NavigationConfig",
]
