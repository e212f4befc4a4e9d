"""treeplate - describe a directory tree in memory, then write, validate, or snapshot it."""

from treeplate.api import create_folder, is_valid, snapshot, validate, write
from treeplate.engines.diff import SnapshotDiff, diff_snapshots
from treeplate.engines.snapshot import Snapshot, SnapshotEntry
from treeplate.errors import (
    AlreadyExistsError,
    FolderLockedError,
    InvalidNameError,
    NameConflictError,
    NotFoundError,
    SelfReferenceError,
    TreeplateError,
)
from treeplate.tree.content import Fileable
from treeplate.tree.folder import Folder
from treeplate.tree.models import File

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "File",
    "Fileable",
    "Folder",
    "FolderLockedError",
    "InvalidNameError",
    "NameConflictError",
    "NotFoundError",
    "SelfReferenceError",
    "Snapshot",
    "SnapshotDiff",
    "SnapshotEntry",
    "TreeplateError",
    "__version__",
    "create_folder",
    "diff_snapshots",
    "is_valid",
    "snapshot",
    "validate",
    "write",
]
