"""Validate engine: check that a folder tree exists on disk.

Only existence and node kind are checked. File contents are never
compared.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from treeplate.engines.walker import WalkEntry, walk
from treeplate.errors import NotFoundError
from treeplate.tree.folder import Folder

logger = logging.getLogger(__name__)


def validate_folder(location: str | os.PathLike[str], folder: Folder) -> bool:
    """Strictly validate a folder tree against a directory.

    Args:
        location: Directory the tree is expected under.
        folder: Root folder to check. Must be unlocked.

    Returns:
        True if every folder and file of the tree exists with the right kind.

    Raises:
        FolderLockedError: If the folder is locked.
        NotFoundError: For the first missing or mismatched path.
    """
    folder.ensure_unlocked("validate folder")
    problem = next(_iter_problems(Path(location), folder), None)
    if problem is not None:
        raise NotFoundError(problem)
    return True


def is_valid_folder(location: str | os.PathLike[str], folder: Folder) -> bool:
    """Validate a folder tree, returning False instead of raising NotFoundError.

    Raises:
        FolderLockedError: If the folder is locked. Misuse is never swallowed.
    """
    try:
        return validate_folder(location, folder)
    except NotFoundError as e:
        logger.debug("Validation failed: %s", e)
        return False


def find_missing(location: str | os.PathLike[str], folder: Folder) -> list[WalkEntry]:
    """Collect every node that fails validation.

    Unlike validate_folder this does not stop at the first problem. Nodes
    below a missing folder are reported too.

    Args:
        location: Directory the tree is expected under.
        folder: Root folder to check. Must be unlocked.

    Returns:
        Walk entries that are missing or of the wrong kind, in walk order.
        An entry with path "." stands for the location itself.

    Raises:
        FolderLockedError: If the folder is locked.
    """
    folder.ensure_unlocked("validate folder")
    root = Path(location)
    if not root.is_dir():
        return [WalkEntry(path=".", node=folder), *walk(folder)]
    return [
        entry for entry in walk(folder) if not _matches(root / entry.path, is_folder=entry.is_folder)
    ]


def _iter_problems(root: Path, folder: Folder) -> Iterator[str]:
    """Yield a message for every mismatch, lazily, in walk order."""
    if not root.is_dir():
        yield f"Folder not found: {root}"
        return
    for entry in walk(folder):
        target = root / entry.path
        if not _matches(target, is_folder=entry.is_folder):
            kind = "Folder" if entry.is_folder else "File"
            yield f"{kind} not found: {target}"


def _matches(path: Path, *, is_folder: bool) -> bool:
    return path.is_dir() if is_folder else path.is_file()
