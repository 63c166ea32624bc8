"""
Main Logger class - front-end feeding file writers

Writers are not thread-safe; the logger guarantees that only one thread
calls them at a time. In sync mode a lock serializes callers, in async
mode a single worker thread drains the queue.
"""

from __future__ import annotations
from typing import Optional, List, Any
import threading
import queue
import time
import atexit

from daily_logger.core.log_level import LogLevel
from daily_logger.core.log_entry import LogEntry
from daily_logger.core.logger_config import LoggerConfig


class Logger:
    """Main logger class with optional async delivery."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._writers: List[Any] = []
        self._write_lock = threading.Lock()
        self._metrics_lock = threading.Lock()
        self._running = False
        self._closed = False
        self._log_queue: Optional[queue.Queue] = None
        self._worker_thread: Optional[threading.Thread] = None
        self._metrics = {"logged": 0, "dropped": 0, "processed": 0}

        if self._config.async_mode:
            self._start_async_worker()

        atexit.register(self.shutdown)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def _start_async_worker(self):
        """Start async worker thread."""
        self._log_queue = queue.Queue(maxsize=self._config.queue_size)
        self._running = True
        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=f"{self._config.name}-worker",
            daemon=True
        )
        self._worker_thread.start()

    def _process_queue(self):
        """Process log entries from queue (worker thread)."""
        batch = []
        last_flush = time.time()

        while self._running or not self._log_queue.empty():
            try:
                timeout = self._config.flush_interval_ms / 1000.0
                entry = self._log_queue.get(timeout=timeout)

                try:
                    batch.append(entry)

                    should_flush = (
                        len(batch) >= self._config.batch_size or
                        (time.time() - last_flush) >= timeout
                    )

                    if should_flush:
                        self._write_batch(batch)
                        batch.clear()
                        last_flush = time.time()
                finally:
                    # Always mark task as done to prevent queue.join() deadlock
                    self._log_queue.task_done()

            except queue.Empty:
                if batch:
                    self._write_batch(batch)
                    batch.clear()
                    last_flush = time.time()

        if batch:
            self._write_batch(batch)

    def _write_batch(self, batch: List[LogEntry]):
        """Write batch of log entries to all writers."""
        with self._write_lock:
            self._write_entries(batch)

    def _write_entries(self, batch: List[LogEntry]):
        """
        Write entries to all writers.

        Caller must hold the write lock.
        """
        for entry in batch:
            for writer in self._writers:
                try:
                    writer.write(entry)
                except Exception as e:
                    print(f"Writer error: {e}")
            with self._metrics_lock:
                self._metrics["processed"] += 1

    def add_writer(self, writer: Any) -> None:
        """
        Add a log writer.

        Args:
            writer: Writer instance with write(entry) method
        """
        with self._write_lock:
            self._writers.append(writer)

    def log(self, level: LogLevel, message: str, **kwargs) -> None:
        """Log a message."""
        if self._closed:
            return

        entry = LogEntry(level=level, message=message, **kwargs)

        if self._config.async_mode:
            try:
                self._log_queue.put_nowait(entry)
                counter = "logged"
            except queue.Full:
                counter = "dropped"
            with self._metrics_lock:
                self._metrics[counter] += 1
        else:
            with self._write_lock:
                self._write_entries([entry])
                with self._metrics_lock:
                    self._metrics["logged"] += 1

    def foo(self, message: str, **kwargs) -> None:
        """Log foo message."""
        self.log(LogLevel.FOO, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def report(self, message: str, **kwargs) -> None:
        """Log report message."""
        self.log(LogLevel.REPORT, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def success(self, message: str, **kwargs) -> None:
        """Log success message."""
        self.log(LogLevel.SUCCESS, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, **kwargs)

    def fail(self, message: str, **kwargs) -> None:
        """Log fail message."""
        self.log(LogLevel.FAIL, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception message."""
        self.log(LogLevel.EXCEPTION, message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, **kwargs)

    def flush(self):
        """Flush all pending log entries."""
        if self._config.async_mode and self._log_queue and self._running:
            # Wait for queue to empty
            self._log_queue.join()

            # Wait for the worker's pending batch to be written
            max_wait = 1.0  # Maximum 1 second wait
            start_time = time.time()
            while (time.time() - start_time) < max_wait:
                if self._metrics["processed"] >= self._metrics["logged"]:
                    break
                time.sleep(0.01)  # 10ms polling interval

        with self._write_lock:
            for writer in self._writers:
                if hasattr(writer, 'flush'):
                    writer.flush()

    def shutdown(self):
        """Shutdown logger gracefully."""
        if self._closed:
            return

        self._closed = True
        self._running = False
        if self._worker_thread:
            self._worker_thread.join(timeout=5.0)

        with self._write_lock:
            for writer in self._writers:
                if hasattr(writer, 'close'):
                    writer.close()

        atexit.unregister(self.shutdown)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.shutdown()
