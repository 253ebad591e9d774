import os
from pathlib import Path

from File_Info.core.errors import MetadataError


NS_PER_SECOND = 1_000_000_000


def to_epoch_seconds(mtime_ns: int) -> int:
    """
    Whole seconds since the epoch, truncated.

    Times before the epoch become 0 instead of an error. A file can
    therefore be reported with timestamp 0; kept for compatibility.
    """
    if mtime_ns < 0:
        return 0
    return mtime_ns // NS_PER_SECOND


def read_mtime(path: Path) -> int:
    try:
        stat = os.stat(path)
    except OSError as exc:
        raise MetadataError(path, exc) from exc

    return to_epoch_seconds(stat.st_mtime_ns)
