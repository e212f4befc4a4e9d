"""Snapshot engine: structural fingerprint of a folder tree.

A snapshot maps every relative POSIX path of the tree (folders included,
root excluded) to a SnapshotEntry describing the node. Two trees of the
same shape produce equal snapshots.

Content is compared only where it is known without side effects: literal
content is fingerprinted with SHA-256, while writer callbacks and Fileable
objects are never invoked, so for those only the kind of producer is
recorded.
"""

from collections.abc import ItemsView, Iterator, KeysView
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, RootModel

from treeplate.engines.walker import walk
from treeplate.tree.content import ContentKind
from treeplate.tree.folder import Folder
from treeplate.tree.models import NodeKind


class SnapshotEntry(BaseModel):
    """Structural descriptor of one node.

    Attributes:
        kind: Whether the node is a folder or a file.
        source: Content producer kind for files, None for folders.
        digest: SHA-256 hex digest of literal content, None otherwise.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Annotated[NodeKind, Field(description="Node kind")]
    source: Annotated[ContentKind | None, Field(description="Content producer kind")] = None
    digest: Annotated[str | None, Field(description="SHA-256 of literal content")] = None


class Snapshot(RootModel[dict[str, SnapshotEntry]]):
    """Mapping of relative POSIX path to SnapshotEntry.

    Behaves like a read-only mapping; iteration yields paths.
    """

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, path: str) -> SnapshotEntry:
        return self.root[path]

    def __contains__(self, path: object) -> bool:
        return path in self.root

    def __len__(self) -> int:
        return len(self.root)

    def keys(self) -> KeysView[str]:
        return self.root.keys()

    def items(self) -> ItemsView[str, SnapshotEntry]:
        return self.root.items()

    def folders(self) -> list[str]:
        """Paths of folder entries, in tree order."""
        return [path for path, entry in self.root.items() if entry.kind == NodeKind.FOLDER]

    def files(self) -> list[str]:
        """Paths of file entries, in tree order."""
        return [path for path, entry in self.root.items() if entry.kind == NodeKind.FILE]


def take_snapshot(folder: Folder) -> Snapshot:
    """Produce the snapshot of a folder tree.

    Args:
        folder: Root folder. Must be unlocked.

    Returns:
        Snapshot covering every folder and file below the root.

    Raises:
        FolderLockedError: If the folder is locked.
    """
    folder.ensure_unlocked("snapshot folder")

    entries: dict[str, SnapshotEntry] = {}
    for entry in walk(folder):
        node = entry.node
        if isinstance(node, Folder):
            entries[entry.path] = SnapshotEntry(kind=NodeKind.FOLDER, source=None, digest=None)
        else:
            entries[entry.path] = SnapshotEntry(
                kind=NodeKind.FILE,
                source=node.content_kind,
                digest=node.content.digest(),
            )
    return Snapshot(entries)
