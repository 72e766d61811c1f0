import os

import pytest

from tarkit.fs import (
    DirEntry,
    FileType,
    FsError,
    count_dir,
    file_type,
    iter_dir,
    make_dir,
    path_join,
    path_parent,
    remove_dir,
    remove_file,
)


def _write(path, text="data", executable=False):
    path.write_text(text)
    path.chmod(0o755 if executable else 0o644)
    return path


def test_make_dir_creates_directory(tmp_path):
    target = tmp_path / "new"
    assert make_dir(target) is True
    assert target.is_dir()


def test_make_dir_is_owner_only(tmp_path):
    target = tmp_path / "private"
    make_dir(target)
    assert target.stat().st_mode & 0o777 == 0o700 & ~0 & (0o777 & ~os.umask(os.umask(0)))


def test_make_dir_existing_returns_false(tmp_path):
    target = tmp_path / "existing"
    target.mkdir()
    assert make_dir(target) is False


def test_make_dir_missing_parent_raises_not_found(tmp_path):
    with pytest.raises(FsError) as info:
        make_dir(tmp_path / "missing" / "child")
    assert info.value.reason == FsError.NOT_FOUND


def test_iter_dir_classifies_entries(tmp_path):
    (tmp_path / "sub").mkdir()
    _write(tmp_path / "plain.txt")
    _write(tmp_path / "tool", executable=True)
    entries = sorted(iter_dir(tmp_path), key=lambda e: e.name)
    assert entries == [
        DirEntry("plain.txt", FileType.REGULAR),
        DirEntry("sub", FileType.DIR),
        DirEntry("tool", FileType.EXEC),
    ]


def test_iter_dir_symlink_is_unknown(tmp_path):
    _write(tmp_path / "target")
    (tmp_path / "link").symlink_to(tmp_path / "target")
    kinds = {entry.name: entry.file_type for entry in iter_dir(tmp_path)}
    assert kinds["link"] is FileType.UNKNOWN


def test_iter_dir_missing_raises(tmp_path):
    with pytest.raises(FsError) as info:
        list(iter_dir(tmp_path / "nope"))
    assert info.value.reason == FsError.NOT_FOUND


def test_iter_dir_on_file_raises_not_found(tmp_path):
    plain = _write(tmp_path / "plain")
    with pytest.raises(FsError) as info:
        list(iter_dir(plain))
    assert info.value.reason == FsError.NOT_FOUND


def test_count_dir_matches_entries(tmp_path):
    for name in ("a", "b", "c"):
        _write(tmp_path / name)
    (tmp_path / "d").mkdir()
    assert count_dir(tmp_path) == len(list(iter_dir(tmp_path)))
    assert count_dir(tmp_path / "d") == 0


def test_remove_dir_recursive(tmp_path):
    root = tmp_path / "root"
    (root / "nested" / "deeper").mkdir(parents=True)
    _write(root / "file")
    _write(root / "nested" / "tool", executable=True)
    _write(root / "nested" / "deeper" / "leaf")
    (root / "link").symlink_to(tmp_path)
    remove_dir(root)
    assert not root.exists()
    assert tmp_path.exists()


def test_remove_dir_missing_raises(tmp_path):
    with pytest.raises(FsError) as info:
        remove_dir(tmp_path / "absent")
    assert info.value.reason == FsError.NOT_FOUND


def test_remove_file(tmp_path):
    target = _write(tmp_path / "gone")
    remove_file(target)
    assert not target.exists()


def test_remove_file_missing_raises(tmp_path):
    with pytest.raises(FsError) as info:
        remove_file(tmp_path / "absent")
    assert info.value.reason == FsError.NOT_FOUND


def test_file_type_values(tmp_path):
    plain = _write(tmp_path / "plain")
    tool = _write(tmp_path / "tool", executable=True)
    assert file_type(plain) is FileType.REGULAR
    assert file_type(tool) is FileType.EXEC
    assert file_type(tmp_path) is FileType.DIR


def test_file_type_follows_symlink(tmp_path):
    tool = _write(tmp_path / "tool", executable=True)
    link = tmp_path / "link"
    link.symlink_to(tool)
    assert file_type(link) is FileType.EXEC


def test_file_type_missing_raises(tmp_path):
    with pytest.raises(FsError) as info:
        file_type(tmp_path / "absent")
    assert info.value.reason == FsError.ERROR


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("a", "b"), "a/b"),
        (("a/", "b"), "a/b"),
        (("home", ".tarman", "repos"), "home/.tarman/repos"),
        (("a", "b/"), "a/b/"),
        (("only",), "only"),
    ],
)
def test_path_join(parts, expected):
    assert path_join(*parts) == expected


def test_path_join_accepts_pathlike(tmp_path):
    assert path_join(tmp_path, "x") == str(tmp_path) + "/x"


def test_path_join_requires_components():
    with pytest.raises(ValueError):
        path_join()


def test_path_join_rejects_empty_component():
    with pytest.raises(ValueError):
        path_join("a", "")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("path/to/something", "path/to"),
        ("path/to/something//", "path/to"),
        ("path//to//////something/////////", "path//to"),
        ("something", "."),
        ("something/", "."),
        ("/abs/dir", "/abs"),
    ],
)
def test_path_parent(path, expected):
    assert path_parent(path) == expected


def test_parent_of_join_is_first_part():
    assert path_parent(path_join("base", "leaf")) == "base"
    assert path_parent(path_join("x/y", "z")) == "x/y"