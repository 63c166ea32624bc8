"""
Standard library logging adapter

Attaches a DailyFileWriter to Python's ``logging`` module.
logging.Handler.handle() holds the handler lock around emit(), which
gives the writer the single caller it expects.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from daily_logger.writers.daily_file_writer import (
    DEFAULT_ROTATION_SIZE,
    DailyFileWriter,
    ErrorHandler,
)


class DailyFileHandler(logging.Handler):
    """
    Logging handler writing to dated, size-rotated files.

    Example:
        handler = DailyFileHandler("logs", "myapp")
        handler.setFormatter(logging.Formatter("%(levelname)s,%(message)s"))
        logging.getLogger().addHandler(handler)
    """

    def __init__(
        self,
        target_root: Union[str, Path],
        name_suffix: str,
        rotation_size: int = DEFAULT_ROTATION_SIZE,
        auto_flush: bool = True,
        encoding: str = "utf-8",
        error_handler: Optional[ErrorHandler] = None,
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self.writer = DailyFileWriter(
            target_root,
            name_suffix,
            rotation_size=rotation_size,
            auto_flush=auto_flush,
            encoding=encoding,
            error_handler=error_handler,
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
            self.writer.consume(record_time, msg)
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        self.acquire()
        try:
            self.writer.flush()
        finally:
            self.release()

    def close(self) -> None:
        self.acquire()
        try:
            self.writer.close()
        finally:
            self.release()
        super().close()
