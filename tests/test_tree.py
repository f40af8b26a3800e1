import os

import pytest

from diskmap.tree import File, Folder


def build():
    root = Folder("root")
    root.add_file("a", 4096)
    root.add_folder("sub")
    root.add_file("sub/b", 8192)
    root.add_folder("sub/deep")
    root.add_file("sub/deep/c", 4096)
    return root


def test_from_path_uses_last_component():
    assert Folder.from_path("/tmp/some/place").name == "place"
    folder = Folder.from_path("relative/dir")
    assert folder.name == "dir"
    assert folder.contents == {}
    assert folder.size == 0


def test_from_path_empty_raises():
    with pytest.raises(ValueError):
        Folder.from_path("")


def test_sizes_aggregate_upwards():
    root = build()
    assert root.size == 4096 + 8192 + 4096
    sub = root.contents["sub"]
    assert sub.size == 8192 + 4096
    assert sub.contents["deep"].size == 4096


def test_descendant_counts():
    root = build()
    sub = root.contents["sub"]
    deep = sub.contents["deep"]
    assert deep.num_descendants == 1
    assert sub.num_descendants == 1 + 1 + deep.num_descendants
    assert root.num_descendants == 1 + 1 + sub.num_descendants


def test_add_file_creates_missing_parents():
    root = Folder("root")
    root.add_file("x/y/z", 10)
    x = root.contents["x"]
    assert isinstance(x, Folder)
    assert x.contents["y"].contents["z"] == File("z", 10)


def test_empty_path_is_ignored():
    root = Folder("root")
    root.add_file("", 10)
    root.add_folder("")
    assert root.contents == {}
    assert root.num_descendants == 0


def test_file_in_middle_of_path_raises():
    root = Folder("root")
    root.add_file("a", 1)
    with pytest.raises(ValueError):
        root.add_file("a/b", 1)
    with pytest.raises(ValueError):
        root.add_folder("a/b")


def test_path_lookup():
    root = build()
    assert root.path(["a"]) == File("a", 4096)
    assert root.path(["sub", "deep", "c"]) == File("c", 4096)
    assert root.path(["missing"]) is None
    assert root.path(["sub", "missing"]) is None


def test_path_returns_file_met_midway():
    root = build()
    assert root.path(["a", "beyond"]) == File("a", 4096)


def test_path_requires_a_name():
    with pytest.raises(ValueError):
        build().path([])


def test_delete_top_level_file():
    root = build()
    before = root.num_descendants
    root.delete_path(["a"])
    assert "a" not in root.contents
    assert root.size == 8192 + 4096
    assert root.num_descendants == before - 1


def test_delete_nested_folder_updates_ancestors():
    root = build()
    sub = root.contents["sub"]
    deep_descendants = sub.contents["deep"].num_descendants
    root_before = root.num_descendants
    sub_before = sub.num_descendants
    root.delete_path(["sub", "deep"])
    assert "deep" not in sub.contents
    assert sub.size == 8192
    assert root.size == 4096 + 8192
    assert sub.num_descendants == sub_before - deep_descendants
    assert root.num_descendants == root_before - deep_descendants


def test_delete_missing_raises_key_error():
    root = build()
    with pytest.raises(KeyError):
        root.delete_path(["nope"])
    with pytest.raises(KeyError):
        root.delete_path(["sub", "nope"])


def test_add_entry_with_real_stat(tmp_path):
    (tmp_path / "d").mkdir()
    data_file = tmp_path / "d" / "f"
    data_file.write_bytes(b"W" * 1000)
    root = Folder.from_path(tmp_path)
    root.add_entry(os.stat(tmp_path / "d"), "d", True)
    root.add_entry(os.stat(data_file), "d/f", True)
    assert isinstance(root.contents["d"], Folder)
    assert root.path(["d", "f"]) == File("f", 1000)
    assert root.size == 1000


def test_add_entry_disk_size_matches_folder_total(tmp_path):
    data_file = tmp_path / "f"
    data_file.write_bytes(b"W" * 5000)
    root = Folder.from_path(tmp_path)
    root.add_entry(os.stat(data_file), "f", False)
    assert root.size == root.contents["f"].size
    assert root.size >= 0