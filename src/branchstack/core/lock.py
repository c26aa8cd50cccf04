"""Advisory file locking for the stack file.

Two invocations against the same stack file serialize on an fcntl lock held
for the whole command instead of overwriting each other's saves.
"""

import fcntl
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from branchstack.core.errors import StackIOError

logger = logging.getLogger(__name__)


@contextmanager
def exclusive_lock(lock_path: Path) -> Iterator[None]:
    """Hold an exclusive flock on `lock_path` for the duration of the block.

    Blocks until the lock is available. The lock file is left in place.

    Raises:
        StackIOError: If the lock file cannot be opened
    """
    try:
        # Append mode so opening never truncates a file another process holds
        lock_fd = open(lock_path, "a", encoding="utf-8")
    except OSError as e:
        raise StackIOError(f"Failed to open lock file {lock_path}: {e}") from e

    with lock_fd:
        logger.debug("Waiting for lock %s", lock_path)
        fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
