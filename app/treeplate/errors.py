"""Exception hierarchy for treeplate.

Every error raised by the tree model and the engines derives from
TreeplateError. Errors that describe a filesystem condition also derive
from the matching builtin OSError subclass so callers can catch either.
"""


class TreeplateError(Exception):
    """Base exception for all treeplate errors."""


class FolderLockedError(TreeplateError):
    """Raised when a locked folder is mutated, inserted, or handed to an engine."""


class SelfReferenceError(TreeplateError):
    """Raised when a folder would be inserted into itself or a descendant."""


class NameConflictError(TreeplateError, ValueError):
    """Raised when a child name is already taken by an incompatible node."""


class InvalidNameError(TreeplateError, ValueError):
    """Raised when a child name or relative path is malformed."""


class AlreadyExistsError(TreeplateError, FileExistsError):
    """Raised when a non-directory occupies a path where a folder is written."""


class NotFoundError(TreeplateError, FileNotFoundError):
    """Raised when an expected path is missing during strict validation."""
