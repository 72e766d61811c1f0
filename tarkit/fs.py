"""Directory and file operations, path joining and parent lookup."""

from __future__ import annotations

import enum
import errno
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike

__all__ = [
    "FsError",
    "FileType",
    "DirEntry",
    "make_dir",
    "remove_dir",
    "count_dir",
    "iter_dir",
    "remove_file",
    "file_type",
    "path_join",
    "path_parent",
]

_SEP = "/"


class FsError(Exception):
    """A file-system operation failed.

    ``reason`` is one of the class constants ``NOT_FOUND``, ``PERMISSION``,
    ``EXISTS`` or ``ERROR``.
    """

    NOT_FOUND = "noexist"
    PERMISSION = "perm"
    EXISTS = "exist"
    ERROR = "error"

    def __init__(self, reason: str, path: str, detail: str = "") -> None:
        message = f"{reason}: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.reason = reason
        self.path = path


class FileType(enum.Enum):
    """Kind of a directory entry."""

    DIR = "dir"
    REGULAR = "regular"
    EXEC = "exec"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    file_type: FileType


def _dir_error(exc: OSError, path: str) -> FsError:
    code = exc.errno
    if code == errno.EACCES:
        reason = FsError.PERMISSION
    elif code in (errno.ENOENT, errno.ENOTDIR):
        reason = FsError.NOT_FOUND
    elif code == errno.EEXIST:
        reason = FsError.EXISTS
    else:
        reason = FsError.ERROR
    return FsError(reason, path, exc.strerror or "")


def _file_error(exc: OSError, path: str) -> FsError:
    code = exc.errno
    if code == errno.EACCES:
        reason = FsError.PERMISSION
    elif code == errno.ENOENT:
        reason = FsError.NOT_FOUND
    else:
        reason = FsError.ERROR
    return FsError(reason, path, exc.strerror or "")


def make_dir(path: str | PathLike[str]) -> bool:
    """Create the directory ``path`` with owner-only permissions.

    Returns ``True`` when it was created and ``False`` when something
    already exists at ``path``.
    """
    path = os.fspath(path)
    try:
        os.stat(path)
    except OSError:
        pass
    else:
        return False
    try:
        os.mkdir(path, 0o700)
    except OSError as exc:
        raise _dir_error(exc, path) from exc
    return True


def _classify(entry: os.DirEntry[str]) -> FileType:
    if entry.is_dir(follow_symlinks=False):
        return FileType.DIR
    if entry.is_file(follow_symlinks=False):
        mode = entry.stat(follow_symlinks=False).st_mode
        return FileType.EXEC if mode & stat.S_IXUSR else FileType.REGULAR
    return FileType.UNKNOWN


def iter_dir(path: str | PathLike[str]) -> Iterator[DirEntry]:
    """Yield the entries of the directory ``path``, without ``.`` and ``..``."""
    path = os.fspath(path)
    try:
        scanner = os.scandir(path)
    except OSError as exc:
        raise _dir_error(exc, path) from exc
    with scanner:
        for entry in scanner:
            try:
                kind = _classify(entry)
            except OSError as exc:
                raise FsError(FsError.ERROR, entry.path, exc.strerror or "") from exc
            yield DirEntry(entry.name, kind)


def count_dir(path: str | PathLike[str]) -> int:
    """Return the number of entries in the directory ``path``."""
    return sum(1 for _ in iter_dir(path))


def remove_dir(path: str | PathLike[str]) -> None:
    """Remove the directory ``path`` and everything inside it."""
    path = os.fspath(path)
    for entry in list(iter_dir(path)):
        full_path = path_join(path, entry.name)
        if entry.file_type is FileType.DIR:
            remove_dir(full_path)
            continue
        try:
            os.unlink(full_path)
        except OSError as exc:
            raise FsError(FsError.ERROR, full_path, exc.strerror or "") from exc
    try:
        os.rmdir(path)
    except OSError as exc:
        raise FsError(FsError.ERROR, path, exc.strerror or "") from exc


def remove_file(path: str | PathLike[str]) -> None:
    """Remove the file ``path``."""
    path = os.fspath(path)
    try:
        os.unlink(path)
    except OSError as exc:
        raise _file_error(exc, path) from exc


def file_type(path: str | PathLike[str]) -> FileType:
    """Return the type of the file at ``path``, following symbolic links.

    Only directories and regular files are recognised; anything else, and
    a path that cannot be examined, raises :class:`FsError`.
    """
    path = os.fspath(path)
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        raise FsError(FsError.ERROR, path, exc.strerror or "") from exc
    if stat.S_ISREG(mode):
        return FileType.EXEC if mode & stat.S_IXUSR else FileType.REGULAR
    if stat.S_ISDIR(mode):
        return FileType.DIR
    raise FsError(FsError.ERROR, path, "unsupported file type")


def path_join(*args: str | PathLike[str]) -> str:
    """Join path components with ``/``, never doubling a separator.

    A trailing separator on the last component is kept.
    """
    if not args:
        raise ValueError("path_join needs at least one component")
    pieces: list[str] = []
    for arg in args:
        part = os.fspath(arg)
        if not part:
            raise ValueError("path components must not be empty")
        pieces.append(part if part.endswith(_SEP) else part + _SEP)
    joined = "".join(pieces)
    last = os.fspath(args[-1])
    return joined if last.endswith(_SEP) else joined[:-1]


def path_parent(path: str | PathLike[str]) -> str:
    """Return the directory that contains ``path``.

    Trailing separators are ignored, runs of separators before the last
    component are dropped, and a path with no separator past its first
    character has ``.`` as its parent.
    """
    text = os.fspath(path).rstrip(_SEP)
    index = text.rfind(_SEP)
    if index <= 0:
        return "."
    parent = text[:index].rstrip(_SEP)
    return parent or "."