"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Daily Logger - dated, size-rotated log files with restart-safe naming
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from daily_logger.core.logger import Logger
from daily_logger.core.logger_builder import LoggerBuilder, init
from daily_logger.core.log_entry import LogEntry
from daily_logger.core.log_level import LogLevel
from daily_logger.core.logger_config import LoggerConfig
from daily_logger.writers.daily_file_writer import DailyFileWriter, WriterStats
from daily_logger.writers.logging_handler import DailyFileHandler

# Import submodules (not all classes by default)
from daily_logger import rotation

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "DailyFileWriter",
    "WriterStats",
    "DailyFileHandler",
    "init",
    "rotation",
]
