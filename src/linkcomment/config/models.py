"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LINKCOMMENT__SECTION__KEY)
3. Workspace YAML (.linkcomment/config.yaml)
4. Global YAML (~/.config/linkcomment/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    LINKCOMMENT__<SECTION>__<KEY>=<VALUE>

Examples:
    LINKCOMMENT__LOGGING__LEVEL=DEBUG
    LINKCOMMENT__DECORATIONS__LINK_COLOR=#ff8800
"""

import re
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from linkcomment.config.constants import DEFAULT_LINK_COLOR
from linkcomment.core.languages import ALL_LANGUAGES, SUPPORTED_HOST_LANGUAGE_IDS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LINKCOMMENT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every locator hit and miss.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DecorationConfig(BaseModel):
    """Style of collapsed links.

    Env vars:
        LINKCOMMENT__DECORATIONS__LINK_COLOR: Hex color of description text
        LINKCOMMENT__DECORATIONS__UNDERLINE: Underline description text
    """

    link_color: str = Field(
        default=DEFAULT_LINK_COLOR,
        description="Color of the description shown in place of collapsed markup.",
    )
    underline: bool = True

    @field_validator("link_color")
    @classmethod
    def validate_link_color(cls, v: str) -> str:
        if not _HEX_COLOR.match(v):
            raise ValueError(f"link_color must be a hex color like #3794ff, got {v}")
        return v


class NavigationConfig(BaseModel):
    """Which source languages get definition lookup and clickable links.

    Env vars:
        LINKCOMMENT__NAVIGATION__ENABLED_LANGUAGES: JSON list of language ids
    """

    enabled_languages: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_HOST_LANGUAGE_IDS),
        description="Editor language ids whose comments are scanned for links.",
    )

    @field_validator("enabled_languages")
    @classmethod
    def validate_enabled_languages(cls, v: list[str]) -> list[str]:
        known = {lang.host_language_id for lang in ALL_LANGUAGES}
        unknown = sorted(set(v) - known)
        if unknown:
            raise ValueError(f"Unknown language ids: {', '.join(unknown)}")
        return v


class LinkCommentConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    decorations: DecorationConfig = Field(default_factory=DecorationConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
