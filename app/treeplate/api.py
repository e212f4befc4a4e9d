"""Top-level entry points.

Create a folder, then hand it to exactly one engine:

    >>> import treeplate
    >>> folder = treeplate.create_folder(lambda root: root.add_file("README.md", "hi"))
    >>> treeplate.write("out", folder)  # doctest: +SKIP
"""

import os

from treeplate.engines.snapshot import Snapshot, take_snapshot
from treeplate.engines.validator import is_valid_folder, validate_folder
from treeplate.engines.writer import DEFAULT_ENCODING, write_folder
from treeplate.tree.folder import Folder, FolderBuilder


def create_folder(build: FolderBuilder | None = None) -> Folder:
    """Create a root folder, optionally populating it with a callback.

    While ``build`` runs the folder is locked, so the callback cannot
    write, validate, snapshot, or insert it. It is unlocked again when the
    callback returns or raises.

    Args:
        build: Callback receiving the new folder.

    Returns:
        The new, unlocked folder.
    """
    folder = Folder()
    if build is not None:
        with folder.building():
            build(folder)
    return folder


def write(
    location: str | os.PathLike[str],
    folder: Folder | None = None,
    *,
    build: FolderBuilder | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Folder:
    """Write a folder to disk, or build one inline and write it.

    Args:
        location: Target directory.
        folder: Existing folder to write.
        build: Callback used to build a new folder when ``folder`` is None.
        encoding: Text encoding for file content.

    Returns:
        The folder that was written.

    Raises:
        TypeError: If both or neither of ``folder`` and ``build`` are given.
        FolderLockedError: If the folder is locked.
        AlreadyExistsError: If a file sits where a folder must be created.
    """
    if (folder is None) == (build is None):
        msg = "Pass exactly one of folder or build"
        raise TypeError(msg)
    if folder is None:
        folder = create_folder(build)
    write_folder(location, folder, encoding=encoding)
    return folder


def validate(location: str | os.PathLike[str], folder: Folder) -> bool:
    """Strictly validate a folder against disk.

    Raises:
        FolderLockedError: If the folder is locked.
        NotFoundError: If a folder or file is missing.
    """
    return validate_folder(location, folder)


def is_valid(location: str | os.PathLike[str], folder: Folder) -> bool:
    """Validate a folder against disk without raising on mismatches."""
    return is_valid_folder(location, folder)


def snapshot(folder: Folder) -> Snapshot:
    """Take a structural snapshot of a folder."""
    return take_snapshot(folder)
