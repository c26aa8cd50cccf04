"""The persisted branch stack.

A stack of branch names backed by a plain text file: one name per line, the
first line is the top of the stack. A missing file is an empty stack.

Architecture:
- BranchStack: in-memory stack with load/save and rotation
- open_stack: scoped access that always flushes the stack when the scope ends
"""

import logging
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from branchstack.core.errors import NoStackEntryError, StackIOError
from branchstack.core.lock import exclusive_lock

logger = logging.getLogger(__name__)


class BranchStack:
    """Ordered stack of branch names. Index 0 is the top."""

    def __init__(self, path: Path, entries: list[str] | None = None) -> None:
        self._path = path
        self._entries: deque[str] = deque(entries or [])

    @classmethod
    def load(cls, path: Path) -> "BranchStack":
        """Load the stack stored at `path`.

        Lines are stripped of surrounding whitespace and blank lines are
        skipped. A missing file gives an empty stack.

        Raises:
            StackIOError: If the file exists but cannot be read
        """
        if not path.exists():
            logger.debug("No stack file at %s, starting empty", path)
            return cls(path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StackIOError(f"Failed to read branch stack {path}: {e}") from e

        entries = [line.strip() for line in content.splitlines()]
        return cls(path, [entry for entry in entries if entry])

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"BranchStack(path={self._path!r}, entries={list(self._entries)!r})"

    def entries(self) -> list[str]:
        """Return a copy of the entries, top first."""
        return list(self._entries)

    def push(self, branch: str) -> None:
        """Put `branch` on top of the stack."""
        self._entries.appendleft(branch)

    def pop(self) -> str | None:
        """Remove and return the top entry, or None if the stack is empty."""
        if not self._entries:
            return None
        return self._entries.popleft()

    def peek(self) -> str | None:
        """Return the top entry without removing it."""
        if not self._entries:
            return None
        return self._entries[0]

    def rotate_up(self, n: int) -> None:
        """Move the bottom `n + 1` entries, in order, to the top.

        Analogous to `pushd +N`. Rotating the full length is allowed and
        leaves the content unchanged.

        Raises:
            NoStackEntryError: If `n + 1` exceeds the stack length
        """
        count = n + 1
        if count > len(self._entries):
            raise NoStackEntryError(n, len(self._entries))
        self._entries.rotate(count)

    def rotate_down(self, n: int) -> None:
        """Move the top `n` entries, in order, to the bottom.

        Analogous to `pushd -N`.

        Raises:
            NoStackEntryError: If `n` is greater than or equal to the stack length
        """
        if n >= len(self._entries):
            raise NoStackEntryError(n, len(self._entries))
        self._entries.rotate(-n)

    @contextmanager
    def transaction(self) -> Iterator["BranchStack"]:
        """Restore the current entries if the body raises."""
        snapshot = list(self._entries)
        try:
            yield self
        except BaseException:
            logger.debug("Rolling back branch stack to %s", snapshot)
            self._entries = deque(snapshot)
            raise

    def save(self) -> None:
        """Write the stack to its file, one entry per line.

        Raises:
            StackIOError: If the file cannot be written
        """
        content = "".join(f"{entry}\n" for entry in self._entries)
        try:
            self._path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StackIOError(f"Failed to write branch stack {self._path}: {e}") from e
        logger.debug("Saved %d entries to %s", len(self._entries), self._path)


def stack_lock_path(stack_path: Path) -> Path:
    return stack_path.with_name(f"{stack_path.name}.lock")


@contextmanager
def open_stack(
    path: Path,
    *,
    strict_save: bool = True,
    lock: bool = True,
    persist: bool = True,
) -> Iterator[BranchStack]:
    """Load the stack at `path` and flush it when the scope ends.

    The stack is saved on every exit path, including when the body raises.
    If the body raised, a failed save is logged and the original error
    propagates. Otherwise a failed save raises StackIOError, unless
    `strict_save` is False, in which case it is logged and dropped.

    Args:
        path: Stack file location
        strict_save: Raise when the final save fails
        lock: Hold an exclusive lock on a sibling lock file for the scope
        persist: Save on exit. False skips the flush entirely (dry-run).

    Yields:
        The loaded BranchStack
    """
    if lock:
        with exclusive_lock(stack_lock_path(path)):
            with _flushed_stack(path, strict_save=strict_save, persist=persist) as stack:
                yield stack
    else:
        with _flushed_stack(path, strict_save=strict_save, persist=persist) as stack:
            yield stack


@contextmanager
def _flushed_stack(path: Path, *, strict_save: bool, persist: bool) -> Iterator[BranchStack]:
    stack = BranchStack.load(path)
    try:
        yield stack
    except BaseException:
        if persist:
            try:
                stack.save()
            except StackIOError as e:
                logger.warning("Could not save branch stack after failure: %s", e)
        raise

    if not persist:
        logger.debug("Skipping save of %s", path)
        return

    try:
        stack.save()
    except StackIOError as e:
        if strict_save:
            raise
        logger.warning("Could not save branch stack: %s", e)
