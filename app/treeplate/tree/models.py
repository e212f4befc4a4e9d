"""Leaf node model for folder trees.

Folders live in treeplate.tree.folder; this module holds the node kind
enum and the immutable File leaf.
"""

from dataclasses import dataclass, field
from enum import Enum

from treeplate.tree.content import ContentKind, ContentSource, LiteralContent


class NodeKind(str, Enum):
    """Kind of node in a folder tree.

    Attributes:
        FOLDER: Directory node with children.
        FILE: Leaf node with a content source.
    """

    FOLDER = "folder"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class File:
    """A file leaf.

    Attributes:
        content: Source of the bytes written for this file.
    """

    content: ContentSource = field(default_factory=LiteralContent)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    @property
    def content_kind(self) -> ContentKind:
        return self.content.kind
