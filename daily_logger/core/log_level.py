"""
Log level enumeration
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered from least to most severe. Levels are carried on each entry
    for display only; nothing is filtered by level.
    """

    FOO = 0
    DEBUG = 1
    REPORT = 2
    INFO = 3
    SUCCESS = 4
    WARNING = 5
    ERROR = 6
    FAIL = 7
    EXCEPTION = 8
    CRITICAL = 9

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Display label written into log lines."""
        return LEVEL_LABELS[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Accepts enum names and display labels, case-insensitive.

        Args:
            level_str: Level name or label

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in LEVEL_FROM_LABEL:
            return LEVEL_FROM_LABEL[key]
        raise ValueError(f"Invalid log level: {level_str}")


# Mapping from log level to display labels
LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.FOO: "Foo",
    LogLevel.DEBUG: "Debug",
    LogLevel.REPORT: "Report",
    LogLevel.INFO: "Information",
    LogLevel.SUCCESS: "Success",
    LogLevel.WARNING: "Warning",
    LogLevel.ERROR: "Error",
    LogLevel.FAIL: "Fail",
    LogLevel.EXCEPTION: "Exception",
    LogLevel.CRITICAL: "Critical",
}

# Reverse mapping
LEVEL_FROM_LABEL: Dict[str, LogLevel] = {
    v.upper(): k for k, v in LEVEL_LABELS.items()
}
