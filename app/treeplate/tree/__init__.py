"""In-memory folder tree model.

This module provides the Folder/File node model, content sources, the
lock state machine, and relative path handling.
"""

from treeplate.tree.content import (
    ContentKind,
    Fileable,
    FileWriter,
    LiteralContent,
    ObjectContent,
    WriterContent,
    make_content,
)
from treeplate.tree.folder import Folder, FolderBuilder
from treeplate.tree.lock import FolderLock, LockState
from treeplate.tree.models import File, NodeKind

__all__ = [
    "ContentKind",
    "File",
    "FileWriter",
    "Fileable",
    "Folder",
    "FolderBuilder",
    "FolderLock",
    "LiteralContent",
    "LockState",
    "NodeKind",
    "ObjectContent",
    "WriterContent",
    "make_content",
]
