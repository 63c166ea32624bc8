"""
Daily rotating file writer

Writes formatted lines to ``<target_root>/<YYYY-MM>/<YYYY-MM-DD>[n]_<suffix>.log``.
A new file is started when the size limit would be reached; the day in
the name is taken from the record that opens the file. On restart the
per-day index is recovered from the files already on disk.

Failures to open or write never propagate to the caller. The record is
dropped, counted in WriterStats, and the next write retries with a fresh
file.

Thread Safety:
    Not thread-safe. Callers must serialize consume() (Logger and
    DailyFileHandler do this).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Callable, Optional, Union

from daily_logger.rotation.filepath import generate_filepath
from daily_logger.rotation.policy import should_rotate

if TYPE_CHECKING:
    from daily_logger.core.log_entry import LogEntry

DEFAULT_ROTATION_SIZE = 100 * 100 * 1024  # ~10 MB
RECORD_DELIMITER = b"\n"

ErrorHandler = Callable[[Exception, Optional[Path]], None]


@dataclass
class WriterStats:
    """
    Statistics for file writer monitoring.

    Dropped records are only visible here and through the error handler.
    """

    records_written: int = 0
    records_dropped: int = 0
    bytes_written_total: int = 0
    rotations: int = 0
    files_opened: int = 0
    open_failures: int = 0
    write_failures: int = 0
    last_error: Optional[str] = None
    last_error_time: Optional[datetime] = None
    current_file: Optional[str] = None

    def record_write(self, size: int) -> None:
        """Record a successful record write."""
        self.records_written += 1
        self.bytes_written_total += size

    def record_open(self, path: Path) -> None:
        """Record a newly opened file."""
        self.files_opened += 1
        self.current_file = str(path)

    def record_rotation(self) -> None:
        """Record a closed file."""
        self.rotations += 1
        self.current_file = None

    def record_error(self, error: Exception) -> None:
        """Record an I/O error that did not lose a record."""
        self.last_error = str(error)
        self.last_error_time = datetime.now()

    def record_drop(self, error: Exception, opening: bool) -> None:
        """Record a record lost to an open or write failure."""
        self.records_dropped += 1
        if opening:
            self.open_failures += 1
        else:
            self.write_failures += 1
        self.record_error(error)

    def to_dict(self) -> dict:
        """Convert stats to dictionary for serialization."""
        return {
            "records_written": self.records_written,
            "records_dropped": self.records_dropped,
            "bytes_written_total": self.bytes_written_total,
            "rotations": self.rotations,
            "files_opened": self.files_opened,
            "open_failures": self.open_failures,
            "write_failures": self.write_failures,
            "last_error": self.last_error,
            "last_error_time": (
                self.last_error_time.isoformat()
                if self.last_error_time
                else None
            ),
            "current_file": self.current_file,
        }


class DailyFileWriter:
    """
    Write logs to dated files with size-based rotation.

    Example:
        writer = DailyFileWriter("logs", "myapp", rotation_size=1024 * 1024)
        writer.consume(datetime.now(timezone.utc), "service started")
        writer.close()
    """

    def __init__(
        self,
        target_root: Union[str, Path],
        name_suffix: str,
        rotation_size: int = DEFAULT_ROTATION_SIZE,
        auto_flush: bool = True,
        encoding: str = "utf-8",
        formatter=None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        Initialize daily file writer.

        No file is opened until the first record arrives.

        Args:
            target_root: Base directory, monthly directories are created below it
            name_suffix: Stream identifier embedded in every filename
            rotation_size: Maximum bytes per file before rotation
            auto_flush: Flush after every record
            encoding: Encoding used for formatted lines
            formatter: Log formatter used by write() (default: entry's __str__)
            error_handler: Called with (exception, path) when a record is dropped

        Raises:
            ValueError: If rotation_size is not positive or name_suffix
                        contains a path separator or NUL byte
        """
        if rotation_size <= 0:
            raise ValueError("rotation_size must be positive")
        if "/" in name_suffix or "\\" in name_suffix:
            raise ValueError("name_suffix cannot contain path separators")
        if "\x00" in name_suffix or "\x00" in str(target_root):
            raise ValueError("name_suffix and target_root cannot contain NUL bytes")

        self.target_root = Path(target_root)
        self.name_suffix = name_suffix
        self.rotation_size = rotation_size
        self.auto_flush = auto_flush
        self.encoding = encoding
        self.formatter = formatter
        self.error_handler = error_handler

        self._file: Optional[BinaryIO] = None
        self._current_path: Optional[Path] = None
        self._bytes_written = 0
        self._healthy = True
        self._stats = WriterStats()

    @property
    def current_path(self) -> Optional[Path]:
        """Path of the open file, None when no file is open."""
        return self._current_path if self._file else None

    @property
    def bytes_written(self) -> int:
        """Bytes in the current file."""
        return self._bytes_written

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def consume(self, record_time: Optional[datetime], formatted_line: str) -> None:
        """
        Write one formatted line.

        Args:
            record_time: Record timestamp, decides the day of a newly
                         opened file (naive values are taken as UTC)
            formatted_line: Fully formatted record without delimiter
        """
        payload = (
            formatted_line.encode(self.encoding, errors="replace")
            + RECORD_DELIMITER
        )

        if should_rotate(
            self._bytes_written,
            len(payload),
            self.rotation_size,
            self._file is not None,
            self._healthy,
        ):
            self._rotate_file()

        if self._file is None and not self._open_file(record_time):
            return

        try:
            self._file.write(payload)
        except (OSError, ValueError) as e:
            self._handle_error(e, self._current_path, opening=False)
            return

        self._bytes_written += len(payload)
        self._stats.record_write(len(payload))

        # A failed flush leaves the record buffered; closing the handle on
        # the next rotation still writes it out
        if self.auto_flush:
            self.flush()

    def write(self, entry: "LogEntry") -> None:
        """Write log entry to the current file."""
        if self.formatter:
            msg = self.formatter(entry)
        else:
            msg = str(entry)
        self.consume(entry.timestamp, msg)

    def _rotate_file(self) -> None:
        """Close the current file and reset the per-file state."""
        if self._file:
            try:
                self._file.close()
            except OSError as e:
                self._stats.record_error(e)
            self._stats.record_rotation()

        self._file = None
        self._current_path = None
        self._healthy = True
        self._bytes_written = 0

    def _open_file(self, record_time: Optional[datetime]) -> bool:
        """
        Open the next file for ``record_time``.

        Returns:
            True if a file is open afterwards
        """
        path = None
        try:
            path = generate_filepath(self.target_root, self.name_suffix, record_time)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = open(path, "ab")
        except (OSError, ValueError) as e:
            self._handle_error(e, path, opening=True)
            return False

        self._file = handle
        self._current_path = path
        # Append mode starts at the end; a pre-existing file keeps its size
        self._bytes_written = handle.tell()
        self._stats.record_open(path)
        return True

    def _handle_error(
        self,
        error: Exception,
        path: Optional[Path],
        opening: bool,
    ) -> None:
        """Drop the current record and mark the stream for a fresh open."""
        self._healthy = False
        self._stats.record_drop(error, opening)

        if self.error_handler:
            try:
                self.error_handler(error, path)
            except Exception:
                pass  # Best effort - never raise from the write path

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            try:
                self._file.flush()
            except (OSError, ValueError) as e:
                self._healthy = False
                self._stats.record_error(e)

    def close(self) -> None:
        """Close file."""
        if self._file:
            self._rotate_file()

    def get_stats(self) -> WriterStats:
        """
        Get writer statistics.

        Returns:
            Copy of current statistics
        """
        return dataclasses.replace(self._stats)

    def __enter__(self) -> "DailyFileWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
