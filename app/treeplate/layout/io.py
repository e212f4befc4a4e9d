"""Layout and snapshot file I/O operations.

This module provides functions for loading layout files, turning them
into folder trees, and saving/loading snapshots in TOML format with
validation using Pydantic models.
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import IO, Any

import tomli_w
from pydantic import ValidationError

from treeplate.engines.snapshot import Snapshot
from treeplate.errors import TreeplateError
from treeplate.layout.models import FileEntry, Layout
from treeplate.tree.folder import Folder

logger = logging.getLogger(__name__)


class LayoutError(TreeplateError):
    """Base exception for layout and snapshot file errors."""


class LayoutNotFoundError(LayoutError):
    """Raised when a layout or snapshot file is not found."""


class LayoutParseError(LayoutError):
    """Raised when a layout or snapshot file cannot be parsed."""


class LayoutValidationError(LayoutError):
    """Raised when a layout or snapshot file content is invalid."""


@dataclass(frozen=True, slots=True)
class CopiedFile:
    """File content copied byte-for-byte from another file when written.

    Attributes:
        source: File whose bytes are copied.
    """

    source: Path

    def write_content(self, sink: IO[str]) -> None:
        sink.flush()
        sink.buffer.write(self.source.read_bytes())  # type: ignore[attr-defined]


def _read_toml(path: Path, what: str) -> dict[str, Any]:
    """Read a TOML file, mapping failures to layout errors."""
    if not path.exists():
        raise LayoutNotFoundError(f"{what} not found: {path}")

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise LayoutParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise LayoutError(f"Failed to read {what.lower()}: {e}") from e


def load_layout(path: Path) -> Layout:
    """Load and validate a layout from a TOML file.

    Args:
        path: Path to the layout file.

    Returns:
        Validated Layout object.

    Raises:
        LayoutNotFoundError: If the layout file doesn't exist.
        LayoutParseError: If the TOML syntax is invalid.
        LayoutValidationError: If the content doesn't match the schema.
    """
    data = _read_toml(path, "Layout")
    try:
        return Layout.model_validate(data)
    except ValidationError as e:
        raise LayoutValidationError(f"Invalid layout content: {e}") from e


def build_folder(layout: Layout, base_dir: Path) -> Folder:
    """Build a folder tree from a layout.

    Folders are added first, then files, each in declaration order.

    Args:
        layout: Validated layout.
        base_dir: Directory that copy_from paths are relative to, normally
            the directory containing the layout file.

    Returns:
        Unlocked root folder.

    Raises:
        LayoutValidationError: If a copy_from source is missing or the
            layout paths conflict with each other.
    """
    folder = Folder()
    try:
        for path in layout.folders:
            folder.add_folder(path)
        for path, entry in layout.files.items():
            if isinstance(entry, FileEntry) and entry.copy_from is not None:
                source = base_dir / entry.copy_from
                if not source.is_file():
                    raise LayoutValidationError(f"copy_from source not found for {path!r}: {source}")
                folder.add_file(path, CopiedFile(source))
            elif isinstance(entry, FileEntry):
                folder.add_file(path, entry.content)
            else:
                folder.add_file(path, entry)
    except ValueError as e:
        # NameConflictError and InvalidNameError are ValueErrors
        raise LayoutValidationError(f"Invalid layout structure: {e}") from e

    logger.debug("Built folder with %d top-level entries from layout", len(folder))
    return folder


def load_folder(path: Path) -> tuple[Layout, Folder]:
    """Load a layout file and build its folder tree.

    Returns:
        The layout and the folder built from it.
    """
    layout = load_layout(path)
    return layout, build_folder(layout, path.parent)


def save_snapshot(snapshot: Snapshot, path: Path) -> Path:
    """Save a snapshot to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        snapshot: Snapshot to save.
        path: Destination file.

    Returns:
        Path where the snapshot was saved.

    Raises:
        LayoutError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null, so unset source/digest fields are left out
    data = {"paths": snapshot.model_dump(mode="json", exclude_none=True)}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(mode="wb", dir=path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise LayoutError(f"Failed to write snapshot: {e}") from e

    return path


def load_snapshot(path: Path) -> Snapshot:
    """Load a snapshot saved by save_snapshot.

    Raises:
        LayoutNotFoundError: If the file doesn't exist.
        LayoutParseError: If the TOML syntax is invalid.
        LayoutValidationError: If the content is not a snapshot.
    """
    data = _read_toml(path, "Snapshot")
    paths = data.get("paths", {})
    if not isinstance(paths, dict):
        raise LayoutValidationError(f"Invalid snapshot content in {path}: 'paths' must be a table")

    entries: dict[str, Any] = {}
    for key, value in paths.items():
        if isinstance(value, dict):
            value = {"source": None, "digest": None, **value}
        entries[key] = value

    try:
        return Snapshot.model_validate(entries)
    except ValidationError as e:
        raise LayoutValidationError(f"Invalid snapshot content: {e}") from e
