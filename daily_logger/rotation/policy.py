"""Rotation policy"""


def should_rotate(
    bytes_written: int,
    incoming_size: int,
    rotation_size: int,
    file_is_open: bool,
    file_is_healthy: bool = True,
) -> bool:
    """
    Decide whether the current file must be closed before a write.

    Date changes never close an open file here; a new day only takes
    effect the next time a file has to be opened.

    Args:
        bytes_written: Bytes already written to the current file
        incoming_size: Size of the pending record including its delimiter
        rotation_size: Size limit of a single file
        file_is_open: Whether a file is currently open
        file_is_healthy: False after a failed open or write

    Returns:
        True if the current file should be rotated
    """
    if not file_is_healthy:
        return True
    return file_is_open and bytes_written + incoming_size >= rotation_size
