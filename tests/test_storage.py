"""
Tests for storage path derivation
"""

from store_service.utils.storage import build_storage_path


def test_same_name_same_path():
    assert build_storage_path("report.pdf") == build_storage_path("report.pdf")


def test_path_layout():
    path = build_storage_path("report.pdf", "uploads")
    root, shard, filename = path.split("/")
    assert root == "uploads"
    assert len(shard) == 2
    assert filename.endswith("-report.pdf")
    assert filename.startswith(shard)


def test_different_names_different_paths():
    assert build_storage_path("report.pdf") != build_storage_path("report2.pdf")


def test_names_sanitizing_alike_stay_apart():
    a = build_storage_path("my report.pdf")
    b = build_storage_path("my_report.pdf")
    assert a.endswith("-my_report.pdf")
    assert b.endswith("-my_report.pdf")
    assert a != b


def test_path_traversal_is_neutralised():
    path = build_storage_path("../../etc/passwd", "uploads")
    assert ".." not in path
    assert path.startswith("uploads/")


def test_unsafe_only_name_falls_back():
    assert build_storage_path("..").endswith("-file")


def test_storage_root_trailing_slash():
    assert build_storage_path("a.txt", "data/") == build_storage_path("a.txt", "data")
