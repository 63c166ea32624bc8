"""
Filepath generator

Layout: ``<target_root>/<YYYY-MM>/<YYYY-MM-DD>[<index>]_<suffix>.log``
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from daily_logger.rotation.scanner import next_index
from daily_logger.rotation.timefmt import format_timestamp, to_utc

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
LOG_EXTENSION = ".log"


def build_filename(date_prefix: str, name_suffix: str, index: int = 0) -> str:
    """
    Build a log filename.

    Args:
        date_prefix: Day formatted as YYYY-MM-DD
        name_suffix: Stream identifier
        index: Per-day index, omitted from the name when 0

    Returns:
        Filename such as ``2014-08-12[1]_example.log``
    """
    if index < 0:
        raise ValueError("index cannot be negative")

    bracket = f"[{index}]" if index > 0 else ""
    return f"{date_prefix}{bracket}_{name_suffix}{LOG_EXTENSION}"


def generate_filepath(
    target_root: Union[str, Path],
    name_suffix: str,
    now: Optional[datetime] = None,
) -> Path:
    """
    Generate the path of the next file to open.

    The monthly directory is scanned so the returned name does not
    collide with any file that exists at scan time.

    Args:
        target_root: Base log directory
        name_suffix: Stream identifier
        now: Timestamp deciding the day (default: current UTC time)

    Returns:
        Path of the new log file (not created)
    """
    now = to_utc(now)
    date_prefix = format_timestamp(now, DATE_FORMAT)
    monthly_path = Path(target_root) / format_timestamp(now, MONTH_FORMAT)

    index = next_index(monthly_path, date_prefix, name_suffix)
    return monthly_path / build_filename(date_prefix, name_suffix, index)
