"""
Rotation module - file naming and rotation decisions

- should_rotate: decides when the current file must be closed
- generate_filepath: derives the next dated, indexed file path
- next_index: recovers the per-day index from files on disk
"""

from daily_logger.rotation.policy import should_rotate
from daily_logger.rotation.filepath import build_filename, generate_filepath
from daily_logger.rotation.scanner import filename_pattern, next_index, parse_index
from daily_logger.rotation.timefmt import format_timestamp, to_utc

__all__ = [
    "should_rotate",
    "build_filename",
    "generate_filepath",
    "filename_pattern",
    "next_index",
    "parse_index",
    "format_timestamp",
    "to_utc",
]
