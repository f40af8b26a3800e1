import os
from pathlib import Path

import pytest

from diskmap.file_tree import FileToDelete, FileTree
from diskmap.listing import FileType
from diskmap.tree import File, Folder


@pytest.fixture
def scanned(tmp_path):
    (tmp_path / "subfolder1").mkdir()
    (tmp_path / "subfolder1" / "file1").write_bytes(b"W" * 8192)
    (tmp_path / "file2").write_bytes(b"W" * 4096)
    (tmp_path / "file3").write_bytes(b"W" * 4096)
    tree = FileTree(Folder.from_path(tmp_path), tmp_path, True)
    for entry in sorted(tmp_path.rglob("*")):
        tree.add_entry(os.stat(entry), entry)
    return tree


def test_totals(scanned):
    assert scanned.total_size == 8192 + 4096 + 4096
    assert scanned.total_descendants == 4
    assert scanned.current_folder_size == scanned.total_size


def test_item_in_current_folder(scanned):
    assert scanned.item_in_current_folder("file2") == File("file2", 4096)
    assert isinstance(scanned.item_in_current_folder("subfolder1"), Folder)
    assert scanned.item_in_current_folder("missing") is None


def test_enter_and_leave(scanned, tmp_path):
    assert scanned.current_path == tmp_path
    scanned.enter_folder("subfolder1")
    assert scanned.current_path == tmp_path / "subfolder1"
    assert scanned.current_folder.name == "subfolder1"
    assert scanned.current_folder_size == 8192
    assert scanned.leave_folder() is True
    assert scanned.current_folder is scanned.base_folder
    assert scanned.leave_folder() is False


def test_current_folder_on_file_raises(scanned):
    scanned.enter_folder("file2")
    with pytest.raises(RuntimeError):
        _ = scanned.current_folder
    assert scanned.current_folder_names == ["file2"]
    assert scanned.leave_folder() is True
    assert scanned.current_folder is scanned.base_folder


def test_delete_file(scanned, tmp_path):
    target = FileToDelete(tmp_path, ["file2"], FileType.FILE, None, 4096)
    scanned.delete_file(target)
    assert scanned.item_in_current_folder("file2") is None
    assert scanned.total_size == 8192 + 4096
    assert scanned.total_descendants == 3


def test_full_path():
    target = FileToDelete(Path("/base"), ["a", "b"], FileType.FILE, None, 1)
    assert target.full_path() == Path("/base/a/b")


def test_initial_counters(tmp_path):
    tree = FileTree(Folder.from_path(tmp_path), tmp_path, False)
    assert (tree.space_freed, tree.failed_to_read, tree.current_folder_names) == (0, 0, [])