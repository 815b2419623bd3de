"""Log records handed to a caller-supplied logging callback."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable


class LogSeverity(Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    VERBOSE = "Verbose"


@dataclass(frozen=True)
class LogData:
    """One log record; copy what you need, the record is not kept by the client."""

    severity: LogSeverity
    message: str
    file: str
    line: int
    function: str
    time: datetime


LoggingCallback = Callable[[LogData], None]


def severity_to_string(severity: LogSeverity) -> str:
    """Return the display name of a log severity."""
    return LogSeverity(severity).value