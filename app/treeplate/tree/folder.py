"""In-memory folder node and its builder API.

A Folder is an ordered mapping of child names to nodes (folders or
files). Children are owned exclusively: there are no parent pointers, and
a folder can only ever be attached in one place. Reuse across trees is
prevented by the lock and the attached flag, not by graph traversal.

Example:
    >>> from treeplate.tree.folder import Folder
    >>> root = Folder()
    >>> root.add_file("src/app/__init__.py")
    >>> root.add_folder("docs", build=lambda docs: docs.add_file("index.md", "# Docs\\n"))
    Folder(['index.md'])
    >>> list(root)
    ['src', 'docs']
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from treeplate.errors import (
    FolderLockedError,
    InvalidNameError,
    NameConflictError,
    SelfReferenceError,
)
from treeplate.tree.content import Fileable, FileWriter, make_content
from treeplate.tree.lock import FolderLock, LockState
from treeplate.tree.models import File, NodeKind
from treeplate.tree.paths import join_path, split_path, validate_segment

# Callback that populates a folder while it is locked for building
FolderBuilder = Callable[["Folder"], object]


class Folder:
    """Directory node holding ordered, uniquely named children.

    Attributes:
        _children: Child nodes keyed by name, in insertion order.
        _lock: Lock state machine for this folder.
        _attached: Whether the folder is owned by a parent folder.
    """

    __slots__ = ("_attached", "_children", "_lock")

    def __init__(self) -> None:
        self._children: dict[str, Folder | File] = {}
        self._lock = FolderLock()
        self._attached = False

    # === Node model ===

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FOLDER

    @property
    def empty(self) -> bool:
        """True if the folder has no direct children."""
        return not self._children

    @property
    def locked(self) -> bool:
        """True while building or after being inserted into another folder."""
        return self._lock.locked

    @property
    def lock_state(self) -> LockState:
        return self._lock.state

    @property
    def attached(self) -> bool:
        """True once the folder has been attached under a parent."""
        return self._attached

    def get(self, name: str) -> Folder | File | None:
        """Look up a direct child by name."""
        return self._children.get(name)

    def names(self) -> list[str]:
        """Child names in insertion order."""
        return list(self._children)

    def items(self) -> list[tuple[str, Folder | File]]:
        """(name, node) pairs in insertion order."""
        return list(self._children.items())

    def contains(self, other: Folder) -> bool:
        """Check whether ``other`` is a descendant of this folder.

        Args:
            other: Folder to look for (compared by identity).

        Returns:
            True if ``other`` appears anywhere below this folder.
        """
        for child in self._children.values():
            if isinstance(child, Folder) and (child is other or child.contains(other)):
                return True
        return False

    def __getitem__(self, name: str) -> Folder | File:
        return self._children[name]

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"Folder({list(self._children)!r})"

    # === Lock scope ===

    @contextmanager
    def building(self) -> Iterator[Folder]:
        """Lock the folder for construction for the duration of a with-block.

        Yields:
            This folder, locked in the building state.

        Raises:
            FolderLockedError: If the folder is already locked.
        """
        with self._lock.scoped():
            yield self

    def ensure_unlocked(self, action: str) -> None:
        """Raise FolderLockedError if the folder cannot be handed to ``action``."""
        self._lock.ensure_unlocked(action)

    # === Builder API ===

    def add_file(
        self,
        name: str,
        content: str | bytes | Fileable | None = None,
        *,
        writer: FileWriter | None = None,
    ) -> None:
        """Add a file, creating intermediate folders as needed.

        Args:
            name: File name or relative POSIX path ("a/b/c.txt").
            content: Literal text/bytes, or an object with write_content().
            writer: Callback that writes the content into a sink.

        Raises:
            FolderLockedError: If this folder is sealed.
            InvalidNameError: If the name is malformed.
            NameConflictError: If the name is taken or a path segment is a file.
            TypeError: If both content and writer are given.
        """
        self._lock.ensure_mutable()
        source = make_content(content, writer)
        *parents, leaf = split_path(name)

        parent, missing = self._resolve(tuple(parents))
        if not missing and leaf in parent._children:
            msg = f"Cannot add file {name!r}: name already exists"
            raise NameConflictError(msg)

        parent = parent._create_chain(missing)
        parent._children[leaf] = File(source)

    def add_folder(self, *names: str, build: FolderBuilder | None = None) -> Folder:
        """Create or descend into a chain of nested folders.

        Existing folders along the chain are reused, including sealed
        children, which this folder owns and may extend by path. A sealed
        folder can never be handed to ``build`` though, because ``build``
        locks its folder for the duration of the callback.

        Args:
            *names: Folder names, outermost first. Each may be a relative path.
            build: Optional callback run with the deepest folder locked.

        Returns:
            The deepest folder of the chain. It is unlocked unless it was
            already sealed.

        Raises:
            FolderLockedError: If this folder is sealed, or ``build`` is given
                for a deepest folder that is building or sealed.
            InvalidNameError: If no name is given or a name is malformed.
            NameConflictError: If a segment of the chain is a file.
        """
        self._lock.ensure_mutable()
        if not names:
            msg = "add_folder requires at least one name"
            raise InvalidNameError(msg)

        segments = tuple(segment for name in names for segment in split_path(name))
        deepest, missing = self._resolve(segments)
        folder = deepest._create_chain(missing)

        if build is not None:
            with folder.building():
                build(folder)
        return folder

    def insert_folder(self, name: str, folder: Folder) -> None:
        """Attach an already constructed folder as a child.

        The inserted folder is sealed and cannot be mutated, inserted again,
        or handed to an engine on its own afterwards.

        Args:
            name: Single-segment child name.
            folder: Folder to attach.

        Raises:
            FolderLockedError: If this folder is sealed, or ``folder`` is
                locked or already attached elsewhere.
            SelfReferenceError: If ``folder`` is this folder or one of its
                ancestors.
            InvalidNameError: If the name is malformed.
            NameConflictError: If the name is already taken.
        """
        if not isinstance(folder, Folder):
            msg = f"insert_folder expects a Folder, got {type(folder).__name__}"
            raise TypeError(msg)
        if folder is self:
            msg = "cannot insert folder equal to itself"
            raise SelfReferenceError(msg)

        self._lock.ensure_mutable()
        validate_segment(name)
        if folder.locked:
            msg = f"cannot insert locked folder as {name!r}"
            raise FolderLockedError(msg)
        if folder._attached:
            msg = f"cannot insert locked folder as {name!r}: it already has a parent"
            raise FolderLockedError(msg)
        if folder.contains(self):
            msg = f"cannot insert folder {name!r} into one of its own descendants"
            raise SelfReferenceError(msg)
        if name in self._children:
            msg = f"Cannot insert folder {name!r}: name already exists"
            raise NameConflictError(msg)

        folder._lock.seal()
        folder._attached = True
        self._children[name] = folder

    # === Internals ===

    def _resolve(self, segments: tuple[str, ...]) -> tuple[Folder, tuple[str, ...]]:
        """Find the deepest existing folder along a chain of segments.

        Nothing is created, so conflicts surface before any mutation.

        Returns:
            The deepest existing folder and the segments still missing below it.

        Raises:
            NameConflictError: If an existing segment is a file.
        """
        node = self
        for index, segment in enumerate(segments):
            child = node._children.get(segment)
            if child is None:
                return node, segments[index:]
            if not isinstance(child, Folder):
                msg = f"Cannot use {join_path(*segments[: index + 1])!r} as a folder: it is a file"
                raise NameConflictError(msg)
            node = child
        return node, ()

    def _create_chain(self, segments: tuple[str, ...]) -> Folder:
        """Create nested child folders for every segment and return the deepest."""
        node = self
        for segment in segments:
            child = Folder()
            child._attached = True
            node._children[segment] = child
            node = child
        return node
