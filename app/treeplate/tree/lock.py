"""Lock state machine guarding folders.

A folder is locked in two situations:

- while its own construction callback runs (``building``), which keeps
  the callback from handing the half-built folder to an engine or
  inserting it somewhere else;
- after it has been inserted into another folder (``sealed``), because
  ownership has moved to the new parent. This state is permanent.

Transitions:
    unlocked -> building   (scoped, reverts on exit)
    unlocked -> sealed     (permanent)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from treeplate.errors import FolderLockedError


class LockState(str, Enum):
    """Lock state of a folder.

    Attributes:
        UNLOCKED: Free to mutate, insert, and hand to engines.
        BUILDING: Temporarily locked while a construction callback runs.
        SEALED: Permanently locked after insertion into another folder.
    """

    UNLOCKED = "unlocked"
    BUILDING = "building"
    SEALED = "sealed"


class FolderLock:
    """Boolean-style lock with a scoped and a permanent locked state.

    Not thread-safe: it guards against logical misuse, not races.
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = LockState.UNLOCKED

    @property
    def state(self) -> LockState:
        return self._state

    @property
    def locked(self) -> bool:
        return self._state is not LockState.UNLOCKED

    @property
    def building(self) -> bool:
        return self._state is LockState.BUILDING

    @property
    def sealed(self) -> bool:
        return self._state is LockState.SEALED

    @contextmanager
    def scoped(self) -> Iterator[None]:
        """Hold the building lock for the duration of a with-block.

        The lock is released on every exit path, including exceptions
        raised inside the block.

        Raises:
            FolderLockedError: If the lock is already held.
        """
        self.ensure_unlocked("build")
        self._state = LockState.BUILDING
        try:
            yield
        finally:
            self._state = LockState.UNLOCKED

    def seal(self) -> None:
        """Lock permanently.

        Raises:
            FolderLockedError: If the lock is already held.
        """
        if self.locked:
            msg = "cannot insert locked folder"
            raise FolderLockedError(msg)
        self._state = LockState.SEALED

    def ensure_unlocked(self, action: str) -> None:
        """Fail fast if locked.

        Args:
            action: What the caller is about to do, for the error message.

        Raises:
            FolderLockedError: If the lock is held in any state.
        """
        if self.locked:
            msg = f"Cannot {action}: folder is locked ({self._state.value})"
            raise FolderLockedError(msg)

    def ensure_mutable(self) -> None:
        """Fail fast if sealed. A building folder may still be populated.

        Raises:
            FolderLockedError: If the lock is sealed.
        """
        if self.sealed:
            msg = "Cannot modify folder: folder is locked (sealed by insert_folder)"
            raise FolderLockedError(msg)

    def __repr__(self) -> str:
        return f"FolderLock({self._state.value})"
