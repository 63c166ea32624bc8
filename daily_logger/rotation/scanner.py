"""
Directory scanner

Recovers the next free file index for a day by looking at what is
already on disk, so a restarted process never reuses an existing name.

Filenames look like ``2014-08-12[1]_example.log``; the first file of a
day has no bracket and counts as index 0.
"""

import os
import re
from pathlib import Path
from typing import Optional, Pattern, Union


def filename_pattern(date_prefix: str, name_suffix: str) -> Pattern[str]:
    """
    Build the pattern matched by files of one day and suffix.

    Args:
        date_prefix: Day formatted as YYYY-MM-DD
        name_suffix: Stream identifier embedded in the filename

    Returns:
        Compiled pattern, to be used with fullmatch()
    """
    return re.compile(
        re.escape(date_prefix)
        + r"(?:\[(?P<index>[^\[\]]*)\])?"
        + "_"
        + re.escape(name_suffix)
        + r"\.log"
    )


def parse_index(content: Optional[str]) -> int:
    """
    Convert bracket content to an index.

    Missing, empty or non-numeric content (anything but ASCII digits)
    parses as 0.
    """
    if not content or not (content.isascii() and content.isdigit()):
        return 0
    return int(content)


def next_index(
    directory: Union[str, Path],
    date_prefix: str,
    name_suffix: str,
) -> int:
    """
    Compute the next unused index for a day in ``directory``.

    Args:
        directory: Monthly directory to scan (not recursive)
        date_prefix: Day formatted as YYYY-MM-DD
        name_suffix: Stream identifier embedded in the filename

    Returns:
        0 if no file of that day exists, otherwise highest index + 1
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0

    pattern = filename_pattern(date_prefix, name_suffix)
    highest = -1

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                match = pattern.fullmatch(entry.name)
                if match:
                    highest = max(highest, parse_index(match.group("index")))
    except OSError:
        # Directory vanished or became unreadable mid-scan
        pass

    return highest + 1
