"""Tree-walking engines.

This module provides the write, validate, and snapshot engines that
consume a folder tree, plus snapshot comparison.
"""

from treeplate.engines.diff import SnapshotDiff, diff_snapshots
from treeplate.engines.snapshot import Snapshot, SnapshotEntry, take_snapshot
from treeplate.engines.validator import find_missing, is_valid_folder, validate_folder
from treeplate.engines.walker import WalkEntry, walk
from treeplate.engines.writer import WriteReport, write_folder

__all__ = [
    "Snapshot",
    "SnapshotDiff",
    "SnapshotEntry",
    "WalkEntry",
    "WriteReport",
    "diff_snapshots",
    "find_missing",
    "is_valid_folder",
    "take_snapshot",
    "validate_folder",
    "walk",
    "write_folder",
]
