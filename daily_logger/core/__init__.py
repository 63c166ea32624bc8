"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Front-end that serializes calls into writers
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from daily_logger.core.logger import Logger
from daily_logger.core.logger_builder import LoggerBuilder, init
from daily_logger.core.log_entry import LogEntry
from daily_logger.core.log_level import LogLevel
from daily_logger.core.logger_config import LoggerConfig

__all__ = ["Logger", "LoggerBuilder", "LogEntry", "LogLevel", "LoggerConfig", "init"]
