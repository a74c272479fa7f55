"""Core module exports."""

from linkcomment.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    LinkCommentError,
    NavigationError,
)
from linkcomment.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "LinkCommentError",
    "NavigationError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
