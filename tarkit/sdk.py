"""Support for writing plugins: the handover record and the entry loader."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from tarkit.execute import run

__all__ = ["SDK_VERSION", "Handover", "sdk_exec", "run_loader"]

SDK_VERSION = (1, 0, 0)

_EXIT_FAILURE = 1


@dataclass(frozen=True)
class Handover:
    """What a plugin is given: source, destination and configuration file."""

    src: str
    dst: str
    cfg: str


def sdk_exec(executable: str | PathLike[str], *args: str | PathLike[str]) -> int:
    """Run a program for a plugin and return its exit code."""
    return run(executable, *args)


def run_loader(argv: Sequence[str], plugin_main: Callable[[Handover], int]) -> int:
    """Start ``plugin_main`` from a command line of program, src, dst and cfg.

    Any other number of arguments fails with exit code 1.
    """
    if len(argv) != 4:
        return _EXIT_FAILURE
    _, src, dst, cfg = argv
    return plugin_main(Handover(src=src, dst=dst, cfg=cfg))