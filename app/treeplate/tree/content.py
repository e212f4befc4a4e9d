"""Content sources for files in a folder tree.

A file's bytes come from one of three shapes of producer. Each is wrapped
in a content source exposing a single ``write_to(sink)`` method, which is
the only thing the write engine calls.

The sink is a text stream. When the write engine opens a real file the
sink is backed by a binary buffer, reachable as ``sink.buffer``.
"""

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import IO, Protocol, runtime_checkable

# Callback that receives the sink and writes the file content into it
FileWriter = Callable[[IO[str]], object]


@runtime_checkable
class Fileable(Protocol):
    """Object able to produce file content on demand."""

    def write_content(self, sink: IO[str]) -> None:
        """Write the file content into the sink."""
        ...


class ContentKind(str, Enum):
    """Shape of a file's content producer.

    Attributes:
        LITERAL: Fixed string or bytes payload.
        WRITER: Callback invoked with the sink.
        OBJECT: Object implementing the Fileable protocol.
    """

    LITERAL = "literal"
    WRITER = "writer"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class LiteralContent:
    """Fixed payload written as-is.

    Attributes:
        data: Text or bytes to write.
    """

    data: str | bytes = ""

    @property
    def kind(self) -> ContentKind:
        return ContentKind.LITERAL

    def write_to(self, sink: IO[str]) -> None:
        if isinstance(self.data, bytes):
            # Text already written must land before the raw bytes
            sink.flush()
            sink.buffer.write(self.data)  # type: ignore[attr-defined]
        else:
            sink.write(self.data)

    def digest(self) -> str:
        """Return the SHA-256 hex digest of the payload (text as UTF-8)."""
        data = self.data.encode("utf-8") if isinstance(self.data, str) else self.data
        return hashlib.sha256(data).hexdigest()


@dataclass(frozen=True, slots=True)
class WriterContent:
    """Callback-produced content."""

    writer: FileWriter

    @property
    def kind(self) -> ContentKind:
        return ContentKind.WRITER

    def write_to(self, sink: IO[str]) -> None:
        self.writer(sink)

    def digest(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ObjectContent:
    """Content produced by a Fileable object."""

    source: Fileable

    @property
    def kind(self) -> ContentKind:
        return ContentKind.OBJECT

    def write_to(self, sink: IO[str]) -> None:
        self.source.write_content(sink)

    def digest(self) -> None:
        return None


ContentSource = LiteralContent | WriterContent | ObjectContent


def make_content(
    content: str | bytes | Fileable | None = None,
    writer: FileWriter | None = None,
) -> ContentSource:
    """Wrap a caller-supplied producer in a content source.

    Args:
        content: Literal text/bytes or a Fileable object.
        writer: Callback receiving the sink.

    Returns:
        The matching content source. Empty literal content if neither
        argument is given.

    Raises:
        TypeError: If both arguments are given, the content has an
            unsupported type, or the writer is not callable.
    """
    if content is not None and writer is not None:
        msg = "Pass either content or writer, not both"
        raise TypeError(msg)

    if writer is not None:
        if not callable(writer):
            msg = f"writer must be callable, got {type(writer).__name__}"
            raise TypeError(msg)
        return WriterContent(writer)

    if content is None:
        return LiteralContent()
    if isinstance(content, str | bytes):
        return LiteralContent(content)
    if isinstance(content, Fileable):
        return ObjectContent(content)

    msg = (
        "content must be str, bytes, or an object with write_content(), "
        f"got {type(content).__name__}"
    )
    raise TypeError(msg)
