"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from daily_logger.core.log_level import LogLevel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    The timestamp is UTC and also decides which day's file a newly
    opened log file belongs to.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=_utc_now)
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def source(self) -> str:
        """Call site as ``file::function:line``."""
        return f"{self.file_name}::{self.function_name}:{self.line_number}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
            "extra": self.extra,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"{self.timestamp.strftime('%Y-%m-%d,%H:%M:%S.%f')},"
            f"{self.level.label},"
            f"{self.source},,"
            f"{self.message}"
        )
