"""Per-emission record handed from a Logger to its formatter."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from nsdebug.models.enums import LogLevel


class LogRequest(BaseModel):
    """Everything a formatter needs to render one record.

    Built fresh for every emission and not retained afterwards.
    """

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    namespace: str
    message: str
    sink: Any = Field(description="Write destination owned by the caller")
    delay: timedelta = Field(
        default=timedelta(0), description="Time since the previous emission on this logger"
    )
    colorize: Callable[..., str] = Field(description="Wraps values in the namespace color")

    @property
    def delay_ms(self) -> int:
        """Delay in whole milliseconds, truncated toward zero."""
        return int(self.delay / timedelta(milliseconds=1))
