"""Logger builder pattern"""

from typing import Callable, Optional, Union
from pathlib import Path

from daily_logger.core.log_entry import LogEntry
from daily_logger.core.logger import Logger
from daily_logger.core.logger_config import DEFAULT_ROTATION_SIZE, LoggerConfig
from daily_logger.writers.daily_file_writer import DailyFileWriter, ErrorHandler

Formatter = Callable[[LogEntry], str]


def app_formatter(app_name: str, app_version: str) -> Formatter:
    """Prefix the default entry line with application name and version."""

    def _format(entry: LogEntry) -> str:
        return f"{app_name},{app_version},{entry}"

    return _format


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._file_enabled = True
        self._formatter: Optional[Formatter] = None
        self._error_handler: Optional[ErrorHandler] = None
        self._custom_writers = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name, used as the log filename suffix."""
        self._config.name = name
        return self

    def with_app_version(self, version: str) -> "LoggerBuilder":
        """Set application version written into every line."""
        self._config.app_version = version
        return self

    def with_target(self, target_root: Union[str, Path]) -> "LoggerBuilder":
        """Set base directory for log files."""
        self._config.target_root = Path(target_root)
        return self

    def with_rotation_size(self, size: int) -> "LoggerBuilder":
        """Set maximum bytes per log file."""
        self._config.rotation_size = size
        return self

    def with_auto_flush(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable flushing after every record."""
        self._config.auto_flush = enabled
        return self

    def with_async(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable async mode."""
        self._config.async_mode = enabled
        return self

    def with_queue_size(self, size: int) -> "LoggerBuilder":
        """Set async queue size."""
        self._config.queue_size = size
        return self

    def with_batch_size(self, size: int) -> "LoggerBuilder":
        """Set batch size."""
        self._config.batch_size = size
        return self

    def with_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """
        Set the formatter of the file writer.

        Args:
            formatter: Callable turning a LogEntry into one line

        Returns:
            Self for method chaining
        """
        self._formatter = formatter
        return self

    def with_error_handler(self, handler: ErrorHandler) -> "LoggerBuilder":
        """
        Set a hook called with (exception, path) for every dropped record.

        Returns:
            Self for method chaining
        """
        self._error_handler = handler
        return self

    def without_file(self) -> "LoggerBuilder":
        """Do not create the default file writer."""
        self._file_enabled = False
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on values set through the builder
        config = LoggerConfig(**vars(self._config))
        logger = Logger(config)

        if self._file_enabled:
            formatter = self._formatter
            if formatter is None and config.app_version:
                formatter = app_formatter(config.name, config.app_version)

            logger.add_writer(DailyFileWriter(
                config.target_root,
                config.name,
                rotation_size=config.rotation_size,
                auto_flush=config.auto_flush,
                encoding=config.encoding,
                formatter=formatter,
                error_handler=self._error_handler,
            ))

        for writer in self._custom_writers:
            logger.add_writer(writer)

        return logger


def init(
    app_name: str,
    app_version: str,
    target: Union[str, Path],
    rotation_size: int = DEFAULT_ROTATION_SIZE,
    auto_flush: bool = True,
) -> Logger:
    """
    Create a logger writing ``<app_name>,<app_version>,...`` lines.

    The returned logger is not registered anywhere; pass it to the code
    that logs.

    Args:
        app_name: Application name, also the log filename suffix
        app_version: Application version
        target: Base log directory
        rotation_size: Maximum bytes per log file
        auto_flush: Flush after every record

    Returns:
        Synchronous Logger with one DailyFileWriter

    Example:
        logger = init("myapp", "1.0.0", "/var/log/myapp")
        logger.info("started")
    """
    return (LoggerBuilder()
        .with_name(app_name)
        .with_app_version(app_version)
        .with_target(target)
        .with_rotation_size(rotation_size)
        .with_auto_flush(auto_flush)
        .build())
