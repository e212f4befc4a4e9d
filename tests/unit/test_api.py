"""Unit tests for the top-level API.

Each test runs inside a fresh temporary working directory, so "." is the
write target.
"""

from pathlib import Path
from typing import IO

import pytest
import treeplate
from treeplate import Folder, FolderLockedError, NotFoundError, SelfReferenceError, Snapshot

pytestmark = pytest.mark.usefixtures("in_tmp_path")


class HelloWorld:
    def write_content(self, sink: IO[str]) -> None:
        sink.write("hello world with class")


class TestCreateFolder:
    """Tests for create_folder."""

    def test_returns_unlocked_folder(self) -> None:
        folder = treeplate.create_folder()
        assert isinstance(folder, Folder)
        assert folder.locked is False
        assert folder.empty is True

    def test_callback_sees_locked_folder(self) -> None:
        seen: list[Folder] = []

        def build(folder: Folder) -> None:
            assert folder.locked is True
            seen.append(folder)

        returned = treeplate.create_folder(build)

        assert seen == [returned]
        assert returned.locked is False

    def test_not_empty_inside_callback(self) -> None:
        def build(folder: Folder) -> None:
            folder.add_file(".keep")
            assert folder.empty is False

        treeplate.create_folder(build)


class TestWrite:
    """Tests for write."""

    def test_empty_folder(self) -> None:
        treeplate.write(".", treeplate.create_folder())

    def test_folder_with_file(self) -> None:
        folder = treeplate.create_folder(lambda root: root.add_file(".keep"))
        treeplate.write(".", folder)
        assert Path(".keep").is_file()

    def test_build_form_returns_folder(self) -> None:
        folder = treeplate.write(".", build=lambda root: root.add_file("hello.txt", "hello world"))

        assert isinstance(folder, Folder)
        assert folder.locked is False
        assert Path("hello.txt").read_text() == "hello world"

    def test_build_form_with_empty_callback(self) -> None:
        treeplate.write(".", build=lambda root: None)

    def test_requires_exactly_one_source(self) -> None:
        with pytest.raises(TypeError):
            treeplate.write(".")
        with pytest.raises(TypeError):
            treeplate.write(".", Folder(), build=lambda root: None)

    def test_locked_folder_raises(self) -> None:
        def build(folder: Folder) -> None:
            with pytest.raises(FolderLockedError, match="folder is locked"):
                treeplate.write(".", folder)

        treeplate.create_folder(build)

    def test_location_is_a_file(self) -> None:
        folder = treeplate.create_folder(lambda root: root.add_file(".keep"))
        Path("folder").touch()
        with pytest.raises(FileExistsError):
            treeplate.write("folder", folder)

    def test_interpolated_content(self) -> None:
        name = "John"
        treeplate.write(".", build=lambda root: root.add_file("hello.txt", f"Hello {name}"))
        assert Path("hello.txt").read_text() == "Hello John"

    def test_no_content(self) -> None:
        treeplate.write(".", build=lambda root: root.add_file("hello.txt"))
        assert Path("hello.txt").stat().st_size == 0

    def test_writer_content(self) -> None:
        treeplate.write(
            ".",
            build=lambda root: root.add_file("hello.txt", writer=lambda io: io.write("hello world with block")),
        )
        assert Path("hello.txt").read_text() == "hello world with block"

    def test_fileable_content(self) -> None:
        treeplate.write(".", build=lambda root: root.add_file("hello.txt", HelloWorld()))
        assert Path("hello.txt").read_text() == "hello world with class"

    def test_posix_path_names(self) -> None:
        def build(root: Folder) -> None:
            root.add_file("./hello.txt")
            root.add_file("./a/b/c/hello.txt")

        treeplate.write(".", build=build)

        assert Path("hello.txt").stat().st_size == 0
        assert Path("a/b/c/hello.txt").stat().st_size == 0


class TestValidate:
    """Tests for validate and is_valid."""

    @pytest.fixture
    def written(self) -> Folder:
        return treeplate.write(".", build=lambda root: root.add_file(".keep"))

    def test_valid(self, written: Folder) -> None:
        assert treeplate.validate(".", written) is True
        assert treeplate.is_valid(".", written) is True

    def test_missing_file(self, written: Folder) -> None:
        Path(".keep").unlink()

        with pytest.raises(NotFoundError):
            treeplate.validate(".", written)
        assert treeplate.is_valid(".", written) is False

    def test_locked_folder_raises(self) -> None:
        def build(folder: Folder) -> None:
            with pytest.raises(FolderLockedError, match="folder is locked"):
                treeplate.validate(".", folder)

        treeplate.write(".", build=build)


class TestSnapshot:
    """Tests for snapshot."""

    def test_returns_snapshot(self) -> None:
        assert isinstance(treeplate.snapshot(treeplate.create_folder()), Snapshot)

    def test_locked_folder_raises(self) -> None:
        def build(folder: Folder) -> None:
            with pytest.raises(FolderLockedError, match="folder is locked"):
                treeplate.snapshot(folder)

        treeplate.create_folder(build)

    def test_unchanged_folder_gives_equal_snapshots(self) -> None:
        folder = treeplate.create_folder(lambda root: root.add_file(".keep"))
        assert treeplate.snapshot(folder) == treeplate.snapshot(folder)

    def test_changed_folder_gives_different_snapshot(self) -> None:
        folder = treeplate.create_folder(lambda root: root.add_file(".keep"))
        before = treeplate.snapshot(folder)

        folder.add_file("README.md")

        assert treeplate.snapshot(folder) != before

    def test_posix_keys(self) -> None:
        folder = treeplate.create_folder(lambda root: root.add_folder("parent", "child", "grandchild"))

        keys = treeplate.snapshot(folder).keys()

        assert "parent" in keys
        assert "parent/child" in keys
        assert "parent/child/grandchild" in keys


class TestInsertFolder:
    """Tests for insert_folder through create_folder callbacks."""

    def test_folder_is_itself(self) -> None:
        def build(folder: Folder) -> None:
            with pytest.raises(SelfReferenceError, match="folder equal to itself"):
                folder.insert_folder("folder", folder)

        treeplate.create_folder(build)

    def test_parent_is_locked(self) -> None:
        def build(parent: Folder) -> None:
            def build_child(child: Folder) -> None:
                with pytest.raises(FolderLockedError, match="locked folder"):
                    child.insert_folder("parent", parent)

            parent.add_folder("child", build=build_child)

        treeplate.create_folder(build)

    def test_child_inserted_into_parent_again(self) -> None:
        def build(parent: Folder) -> None:
            def build_child(child: Folder) -> None:
                with pytest.raises(FolderLockedError, match="locked folder"):
                    parent.insert_folder("child2", child)

            parent.add_folder("child", build=build_child)

        folder = treeplate.create_folder(build)
        assert folder.names() == ["child"]

    def test_inserted_folder_is_written(self) -> None:
        child = treeplate.create_folder(lambda folder: folder.add_file("inner.txt", "inner"))
        parent = treeplate.create_folder(lambda folder: folder.insert_folder("child", child))

        treeplate.write(".", parent)

        assert Path("child/inner.txt").read_text() == "inner"
        with pytest.raises(FolderLockedError):
            treeplate.write("elsewhere", child)
