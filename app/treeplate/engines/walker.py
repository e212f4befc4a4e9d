"""Depth-first traversal shared by the engines."""

from collections.abc import Iterator
from dataclasses import dataclass

from treeplate.tree.folder import Folder
from treeplate.tree.models import File


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A node reached during a tree walk.

    Attributes:
        path: POSIX path relative to the walked root, without a leading "./".
        node: The folder or file at that path.
    """

    path: str
    node: Folder | File

    @property
    def is_folder(self) -> bool:
        return isinstance(self.node, Folder)


def walk(folder: Folder, prefix: str = "") -> Iterator[WalkEntry]:
    """Yield every node below a folder, parents before their children.

    Children are visited in insertion order. The root itself is not yielded.

    Args:
        folder: Root of the walk.
        prefix: Relative path of ``folder`` itself, used for recursion.

    Yields:
        WalkEntry for each folder and file below the root.
    """
    for name, node in folder.items():
        path = f"{prefix}/{name}" if prefix else name
        yield WalkEntry(path=path, node=node)
        if isinstance(node, Folder):
            yield from walk(node, path)
