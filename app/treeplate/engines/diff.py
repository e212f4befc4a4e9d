"""Compare two snapshots.

This module computes which paths were added, removed, or changed between
an old and a new snapshot of a folder tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treeplate.engines.snapshot import Snapshot


@dataclass(frozen=True, slots=True)
class SnapshotDiff:
    """Differences between two snapshots.

    Attributes:
        added: Paths present only in the new snapshot.
        removed: Paths present only in the old snapshot.
        changed: Paths present in both whose entries differ (kind,
            content producer, or literal digest).
    """

    added: tuple[str, ...]
    removed: tuple[str, ...]
    changed: tuple[str, ...]

    @property
    def is_identical(self) -> bool:
        """Check if both snapshots describe the same tree.

        Returns:
            True if there are no differences, False otherwise.
        """
        return not (self.added or self.removed or self.changed)

    @property
    def total_changes(self) -> int:
        return len(self.added) + len(self.removed) + len(self.changed)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the diff.
        """
        return {
            "identical": self.is_identical,
            "summary": {
                "added": len(self.added),
                "removed": len(self.removed),
                "changed": len(self.changed),
                "total": self.total_changes,
            },
            "added": list(self.added),
            "removed": list(self.removed),
            "changed": list(self.changed),
        }


def diff_snapshots(old: Snapshot, new: Snapshot) -> SnapshotDiff:
    """Compute the differences between two snapshots.

    Args:
        old: Baseline snapshot.
        new: Snapshot to compare against the baseline.

    Returns:
        SnapshotDiff with sorted path tuples.
    """
    old_paths = set(old.keys())
    new_paths = set(new.keys())

    return SnapshotDiff(
        added=tuple(sorted(new_paths - old_paths)),
        removed=tuple(sorted(old_paths - new_paths)),
        changed=tuple(sorted(p for p in old_paths & new_paths if old[p] != new[p])),
    )
