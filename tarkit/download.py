"""Fetching files, through a download plugin when one is installed."""

from __future__ import annotations

from os import PathLike

from tarkit.execute import run
from tarkit.paths import TarmanPaths
from tarkit.plugin import plugin_exists, run_plugin

__all__ = ["download", "DOWNLOAD_PLUGIN"]

DOWNLOAD_PLUGIN = "download-plugin"


def download(paths: TarmanPaths, dst: str | PathLike[str], url: str) -> bool:
    """Fetch ``url`` into ``dst`` and tell whether it succeeded.

    The installed download plugin is used when there is one, ``curl``
    otherwise.
    """
    if plugin_exists(paths, DOWNLOAD_PLUGIN):
        return run_plugin(paths, DOWNLOAD_PLUGIN, dst, url) == 0
    return run("curl", "-L", url, "-o", dst) == 0