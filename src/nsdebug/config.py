"""Environment-driven configuration for nsdebug loggers."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from nsdebug.models.enums import LogLevel, parse_level

ENV_PATTERN = "DEBUG"
ENV_LEVEL = "DEBUG_LEVEL"
ENV_COLOR = "DEBUG_COLOR"

DEFAULT_PATTERN = "*"
DEFAULT_LEVEL = "WARN"


class DebugSettings(BaseModel):
    """Ambient settings a logger is built from."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(DEFAULT_PATTERN, description="Namespace pattern from DEBUG")
    level: LogLevel = Field(LogLevel.WARN, description="Threshold from DEBUG_LEVEL")
    color: bool = Field(False, description="True when DEBUG_COLOR is set at all")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DebugSettings:
        """Read settings from the environment.

        Unset and empty values fall back to the defaults. DEBUG_COLOR is a
        presence test: an empty value still enables color.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            DebugSettings: Parsed settings

        Raises:
            InvalidLevelError: If DEBUG_LEVEL is not a canonical level name
        """
        env = os.environ if environ is None else environ
        return cls(
            pattern=env.get(ENV_PATTERN) or DEFAULT_PATTERN,
            level=parse_level(env.get(ENV_LEVEL) or DEFAULT_LEVEL),
            color=ENV_COLOR in env,
        )
