"""Writers module - Log output handlers"""

from daily_logger.writers.daily_file_writer import DailyFileWriter, WriterStats
from daily_logger.writers.logging_handler import DailyFileHandler

__all__ = ["DailyFileWriter", "WriterStats", "DailyFileHandler"]
