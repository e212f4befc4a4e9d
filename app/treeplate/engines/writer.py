"""Write engine: materialize a folder tree on disk.

Writing is additive. Existing directories are reused, existing files are
truncated and rewritten, and nothing that is not part of the tree is
touched. There is no rollback: the first filesystem error propagates and
whatever was written before it stays on disk.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from treeplate.engines.walker import walk
from treeplate.errors import AlreadyExistsError
from treeplate.tree.folder import Folder
from treeplate.tree.models import File

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


@dataclass(slots=True)
class WriteReport:
    """Summary of a write run.

    Attributes:
        location: Target directory the tree was written to.
        root_created: Whether the target directory itself had to be created.
        created_folders: Relative paths of directories created by this run.
        existing_folders: Relative paths of directories that already existed.
        written_files: Relative paths of files created or truncated.
    """

    location: Path
    root_created: bool = False
    created_folders: list[str] = field(default_factory=list)
    existing_folders: list[str] = field(default_factory=list)
    written_files: list[str] = field(default_factory=list)


def write_folder(
    location: str | os.PathLike[str],
    folder: Folder,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> WriteReport:
    """Materialize a folder tree under a target directory.

    Folders are written before their children, in insertion order.

    Args:
        location: Target directory. Created (with parents) if missing.
        folder: Root folder to write. Must be unlocked.
        encoding: Text encoding used for the file sinks.

    Returns:
        WriteReport describing what was created.

    Raises:
        FolderLockedError: If the folder is locked. Raised before any disk access.
        AlreadyExistsError: If a non-directory sits where a folder is required.
        OSError: For any other filesystem failure.
    """
    folder.ensure_unlocked("write folder")

    root = Path(location)
    report = WriteReport(location=root)
    report.root_created = _make_directory(root, parents=True)

    for entry in walk(folder):
        target = root / entry.path
        if isinstance(entry.node, Folder):
            if _make_directory(target):
                logger.debug("Created folder %s", target)
                report.created_folders.append(entry.path)
            else:
                report.existing_folders.append(entry.path)
        else:
            _write_file(target, entry.node, encoding)
            logger.debug("Wrote file %s (%s)", target, entry.node.content_kind.value)
            report.written_files.append(entry.path)

    logger.info(
        "Wrote %d files and %d new folders to %s",
        len(report.written_files),
        len(report.created_folders),
        root,
    )
    return report


def _make_directory(path: Path, *, parents: bool = False) -> bool:
    """Create a directory unless one already exists.

    Args:
        path: Directory to create.
        parents: Whether missing parent directories may be created too.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        AlreadyExistsError: If the path exists and is not a directory.
    """
    try:
        path.mkdir(parents=parents)
    except FileExistsError as e:
        if path.is_dir():
            return False
        msg = f"Cannot create folder {path}: path already exists and is not a directory"
        raise AlreadyExistsError(msg) from e
    return True


def _write_file(path: Path, file: File, encoding: str) -> None:
    """Create or truncate a file and let its content source fill it."""
    # newline="" keeps the content byte-for-byte, no newline translation
    with open(path, "w", encoding=encoding, newline="") as sink:
        file.content.write_to(sink)
