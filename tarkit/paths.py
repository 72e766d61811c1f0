"""Locations of the directories that hold repositories, packages and plugins."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from tarkit.fs import make_dir, path_join

__all__ = ["TarmanPaths", "user_home"]

_ROOT_NAME = ".tarman"
_RECIPE_SUFFIX = ".tarman"
_PLUGIN_CONFIG_SUFFIX = ".txt"


def user_home() -> str:
    """Return the home directory of the user running the process.

    The user database is consulted where there is one, so ``$HOME`` does
    not override it.
    """
    try:
        import pwd
    except ImportError:
        return str(Path.home())
    return pwd.getpwuid(os.getuid()).pw_dir


@dataclass(frozen=True)
class TarmanPaths:
    """The directory tree that installed packages and their metadata live in."""

    home: str
    repos: str
    pkgs: str
    extract: str
    plugins: str
    plugin_conf: str
    path: str

    @classmethod
    def from_home(cls, home: str | PathLike[str] | None = None) -> TarmanPaths:
        """Build the tree rooted in ``.tarman`` under the user directory ``home``.

        Without ``home`` the current user's home directory is used.
        """
        base = os.fspath(home) if home is not None else user_home()
        return cls(
            home=path_join(base, _ROOT_NAME),
            repos=path_join(base, _ROOT_NAME, "repos"),
            pkgs=path_join(base, _ROOT_NAME, "pkgs"),
            extract=path_join(base, _ROOT_NAME, "tmp"),
            plugins=path_join(base, _ROOT_NAME, "plugins"),
            plugin_conf=path_join(base, _ROOT_NAME, "conf"),
            path=path_join(base, _ROOT_NAME, "path"),
        )

    def init(self) -> None:
        """Create every directory of the tree that does not exist yet.

        Raises :class:`tarkit.fs.FsError` when a directory cannot be made.
        """
        for directory in (
            self.home,
            self.repos,
            self.pkgs,
            self.extract,
            self.plugins,
            self.plugin_conf,
            self.path,
        ):
            make_dir(directory)

    def repo(self, repo_name: str) -> str:
        """Return the directory of the repository ``repo_name``."""
        return path_join(self.repos, repo_name)

    def package(self, pkg_name: str) -> str:
        """Return the directory the package ``pkg_name`` is installed in."""
        return path_join(self.pkgs, pkg_name)

    def cached(self, item_name: str) -> str:
        """Return the location of ``item_name`` in the temporary directory."""
        return path_join(self.extract, item_name)

    def recipe(self, repo_name: str, pkg_name: str) -> str:
        """Return the recipe file of ``pkg_name`` in the repository ``repo_name``."""
        return path_join(self.repos, repo_name, pkg_name + _RECIPE_SUFFIX)

    def plugin(self, plugin: str) -> str:
        """Return the executable of the plugin ``plugin``."""
        return path_join(self.plugins, plugin)

    def plugin_config(self, plugin: str) -> str:
        """Return the configuration file of the plugin ``plugin``."""
        return path_join(self.plugin_conf, plugin + _PLUGIN_CONFIG_SUFFIX)

    def exec_path(self, executable: str) -> str:
        """Return where a link to ``executable`` is placed on the search path."""
        return path_join(self.path, executable)