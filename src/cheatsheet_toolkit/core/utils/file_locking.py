"""
Module: core.utils.file_locking

Purpose:
    Cross-platform file locking for canvas documents, so an autosave
    and an explicit save never interleave their writes.
    Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_file: Context manager for locked file access
    - locked_write_json: Replace a JSON file under an exclusive lock
    - locked_read_json: Read a JSON file under a shared lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - core.utils.serialization: Canvas load/save
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, IO

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = 'r',
    lock_type: int = portalocker.LOCK_EX,
) -> Generator[IO[str], None, None]:
    """
    Context manager for cross-platform locked file access.

    Args:
        path: Path to file.
        mode: File open mode ('r', 'w', 'a', etc.).
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        Open file handle with lock held.

    Example:
        >>> with locked_file(path, 'a') as f:
        ...     f.write('data')
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, mode, encoding='utf-8') as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_write_json(path: Path, data: Any) -> None:
    """
    Write JSON to a file with an exclusive lock held.

    Opens in append mode and truncates only after the lock is taken,
    so a concurrent reader never sees a half-truncated file before
    the writer owns it.

    Args:
        path: Destination file.
        data: JSON-serializable value.
    """
    with locked_file(path, 'a', portalocker.LOCK_EX) as f:
        f.seek(0)
        f.truncate()
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.flush()

    logger.debug(f"Wrote {path.name}")


def locked_read_json(path: Path) -> Any:
    """
    Read JSON from a file with a shared lock held.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with locked_file(path, 'r', portalocker.LOCK_SH) as f:
        return json.load(f)
