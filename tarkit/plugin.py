"""Finding and running plugins installed in the plugin directory."""

from __future__ import annotations

from os import PathLike

from tarkit.execute import run
from tarkit.fs import FileType, FsError, file_type
from tarkit.paths import TarmanPaths

__all__ = ["plugin_exists", "run_plugin"]


def plugin_exists(paths: TarmanPaths, plugin: str) -> bool:
    """Tell whether ``plugin`` is installed as an executable file."""
    try:
        return file_type(paths.plugin(plugin)) is FileType.EXEC
    except FsError:
        return False


def run_plugin(
    paths: TarmanPaths,
    plugin: str,
    dst: str | PathLike[str],
    src: str | PathLike[str],
) -> int:
    """Run ``plugin`` on ``src`` and ``dst`` and return its exit code.

    The plugin receives the source, the destination and the path of its
    configuration file, in that order.
    """
    return run(paths.plugin(plugin), src, dst, paths.plugin_config(plugin))