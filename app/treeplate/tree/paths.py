"""Child names and POSIX-style relative paths.

Names handed to the builder may be single segments ("README.md") or
relative POSIX paths ("./src/app/__init__.py"). Everything is reduced to a
tuple of plain segments before it reaches the tree.
"""

from pathlib import PurePosixPath

from treeplate.errors import InvalidNameError


def validate_segment(name: str) -> str:
    """Check that a name is usable as a single child name.

    Args:
        name: Candidate child name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidNameError: If the name is empty, contains a separator,
            or is a relative reference ("." or "..").
    """
    if not name:
        msg = "Name cannot be empty"
        raise InvalidNameError(msg)
    if "/" in name or "\\" in name:
        msg = f"Name must be a single path segment, got {name!r}"
        raise InvalidNameError(msg)
    if name in (".", ".."):
        msg = f"Name cannot be a relative reference, got {name!r}"
        raise InvalidNameError(msg)
    return name


def split_path(name: str) -> tuple[str, ...]:
    """Split a relative POSIX path into child name segments.

    Leading "./" and inner "." segments are dropped.

    Args:
        name: Relative path such as "a/b/c.txt" or "./hello.txt".

    Returns:
        Tuple of segments, never empty.

    Raises:
        InvalidNameError: If the path is empty, absolute, or uses "..".
    """
    if not name:
        msg = "Path cannot be empty"
        raise InvalidNameError(msg)

    path = PurePosixPath(name)
    if path.is_absolute():
        msg = f"Path must be relative, got {name!r}"
        raise InvalidNameError(msg)

    # PurePosixPath already collapses "." segments and repeated slashes
    segments = tuple(part for part in path.parts if part != ".")
    if not segments:
        msg = f"Path does not name anything, got {name!r}"
        raise InvalidNameError(msg)

    for segment in segments:
        validate_segment(segment)
    return segments


def join_path(*segments: str) -> str:
    """Join segments into a POSIX relative path without a leading "./"."""
    return "/".join(segments)
