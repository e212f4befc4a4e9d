"""Unit tests for the depth-first tree walk."""

from treeplate.engines.walker import walk
from treeplate.tree.folder import Folder


class TestWalk:
    """Tests for walk function."""

    def test_empty_folder(self) -> None:
        assert list(walk(Folder())) == []

    def test_parents_before_children_in_insertion_order(self) -> None:
        root = Folder()
        root.add_file("z.txt")
        root.add_file("a/b/c.txt")
        root.add_folder("a", "d")

        paths = [entry.path for entry in walk(root)]

        assert paths == ["z.txt", "a", "a/b", "a/b/c.txt", "a/d"]

    def test_is_folder(self) -> None:
        root = Folder()
        root.add_file("dir/file.txt")

        entries = {entry.path: entry.is_folder for entry in walk(root)}

        assert entries == {"dir": True, "dir/file.txt": False}

    def test_walks_into_sealed_children(self) -> None:
        root = Folder()
        child = Folder()
        child.add_file("inner.txt")
        root.insert_folder("child", child)

        assert [entry.path for entry in walk(root)] == ["child", "child/inner.txt"]
