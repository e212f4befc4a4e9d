"""Layout models for declarative folder trees.

This module defines the Pydantic models representing a layout TOML
file, which describes a folder tree to build:

    folders = ["src/app", "docs"]

    [settings]
    encoding = "utf-8"

    [files]
    "README.md" = "# Hello\\n"

    [files."LICENSE"]
    copy_from = "templates/LICENSE"
"""

import codecs
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from treeplate.tree.paths import split_path


class LayoutSettings(BaseModel):
    """Settings section of a layout.

    Attributes:
        encoding: Text encoding used when writing file content.
    """

    model_config = ConfigDict(extra="forbid")

    encoding: Annotated[str, Field(description="Text encoding for file content")] = "utf-8"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"Unknown encoding: {v!r}"
            raise ValueError(msg) from None
        return v


class FileEntry(BaseModel):
    """Table form of a file in the layout.

    At most one of the fields may be set; an entry with neither is an
    empty file.

    Attributes:
        content: Literal file content.
        copy_from: Path of a file whose bytes are copied, relative to the
            layout file.
    """

    model_config = ConfigDict(extra="forbid")

    content: Annotated[str | None, Field(description="Literal file content")] = None
    copy_from: Annotated[str | None, Field(description="Source file to copy")] = None

    @model_validator(mode="after")
    def validate_single_source(self) -> "FileEntry":
        """Validate that content and copy_from are not both set."""
        if self.content is not None and self.copy_from is not None:
            msg = "File entry cannot set both content and copy_from"
            raise ValueError(msg)
        return self


class Layout(BaseModel):
    """Complete layout describing a folder tree.

    Attributes:
        settings: Write settings.
        folders: Relative folder paths to create, including empty ones.
        files: Relative file paths mapped to literal content or a FileEntry.
    """

    model_config = ConfigDict(extra="forbid")

    settings: Annotated[
        LayoutSettings,
        Field(default_factory=LayoutSettings, description="Write settings"),
    ]
    folders: Annotated[
        list[str],
        Field(default_factory=list, description="Folders to create"),
    ]
    files: Annotated[
        dict[str, str | FileEntry],
        Field(default_factory=dict, description="Files to create"),
    ]

    @field_validator("folders")
    @classmethod
    def validate_folder_paths(cls, v: list[str]) -> list[str]:
        """Validate that every folder is a relative POSIX path."""
        for path in v:
            split_path(path)
        return v

    @field_validator("files")
    @classmethod
    def validate_file_paths(cls, v: dict[str, str | FileEntry]) -> dict[str, str | FileEntry]:
        """Validate that every file key is a relative POSIX path."""
        for path in v:
            split_path(path)
        return v
