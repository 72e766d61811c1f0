"""Exposing installed applications on the search path and the desktop."""

from __future__ import annotations

import errno
import os
import sys
from os import PathLike

from tarkit.fs import FsError, path_join, remove_file
from tarkit.paths import TarmanPaths, user_home

__all__ = [
    "executable_name",
    "path_add",
    "path_remove",
    "desktop_entry",
    "desktop_file",
    "desktop_add",
    "desktop_remove",
]

_SEP = "/"
_DESKTOP_SUFFIX = ".desktop"


def _os_error(exc: OSError, path: str) -> FsError:
    if exc.errno == errno.EACCES:
        reason = FsError.PERMISSION
    elif exc.errno == errno.ENOENT:
        reason = FsError.NOT_FOUND
    elif exc.errno == errno.EEXIST:
        reason = FsError.EXISTS
    else:
        reason = FsError.ERROR
    return FsError(reason, path, exc.strerror or "")


def executable_name(path: str) -> str:
    """Return the last component of ``path``.

    The final character is not considered when looking for a separator, so
    a trailing ``/`` stays part of the name; a path without a separator
    after its first character is returned whole.
    """
    index = path.rfind(_SEP, 1, len(path) - 1)
    if index > 0:
        return path[index + 1 :]
    return path


def path_add(paths: TarmanPaths, executable: str | PathLike[str]) -> str:
    """Link ``executable`` into the search-path directory and return the link."""
    if executable is None:
        raise ValueError("no executable given")
    target = os.fspath(executable)
    link = paths.exec_path(executable_name(target))
    try:
        os.symlink(target, link)
    except OSError as exc:
        raise _os_error(exc, link) from exc
    return link


def path_remove(paths: TarmanPaths, executable: str | PathLike[str]) -> None:
    """Remove the search-path link that :func:`path_add` made for ``executable``."""
    if executable is None:
        raise ValueError("no executable given")
    remove_file(paths.exec_path(executable_name(os.fspath(executable))))


def desktop_entry(
    app_name: str,
    executable_path: str,
    icon_path: str | None = None,
    wrk_dir: str | None = None,
) -> str:
    """Return the text of a desktop entry that launches ``executable_path``."""
    lines = [
        "[Desktop Entry]",
        "Comment=Installed with tarman",
        f"Exec={executable_path}",
    ]
    if icon_path is not None:
        lines.append(f"Icon={icon_path}")
    lines.append(f"Name={app_name}")
    lines.append("NoDisplay=false")
    if wrk_dir is not None:
        lines.append(f"Path={wrk_dir}")
    lines.extend(
        [
            "StartupNotify=true",
            "Terminal=false",
            "TerminalOptions=",
            "Type=Application",
        ]
    )
    return "\n".join(lines) + "\n"


def desktop_file(app_name: str, home: str | PathLike[str] | None = None) -> str:
    """Return the location of the desktop entry for ``app_name``."""
    if app_name is None:
        raise ValueError("no application name given")
    base = os.fspath(home) if home is not None else user_home()
    return path_join(base, ".local", "share", "applications", app_name + _DESKTOP_SUFFIX)


def _require_desktop_support(app_name: str) -> None:
    if sys.platform == "darwin":
        raise FsError(FsError.ERROR, app_name, "desktop entries are not supported on macOS")


def desktop_add(
    app_name: str,
    executable_path: str,
    icon_path: str | None = None,
    wrk_dir: str | None = None,
    home: str | PathLike[str] | None = None,
) -> str:
    """Write a desktop entry for ``app_name`` and return its path."""
    _require_desktop_support(app_name)
    location = desktop_file(app_name, home)
    text = desktop_entry(app_name, executable_path, icon_path, wrk_dir)
    try:
        with open(location, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise _os_error(exc, location) from exc
    return location


def desktop_remove(app_name: str, home: str | PathLike[str] | None = None) -> None:
    """Remove the desktop entry for ``app_name``."""
    _require_desktop_support(app_name)
    remove_file(desktop_file(app_name, home))