"""Running external programs and collecting their exit status."""

from __future__ import annotations

import os
import subprocess
from os import PathLike

__all__ = ["run"]

_EXIT_FAILURE = 1


def run(executable: str | PathLike[str], *args: str | PathLike[str]) -> int:
    """Run ``executable`` with ``args`` and return its exit code.

    The program gets no standard input, and its output is discarded. A
    program that cannot be started, or that is killed by a signal, counts
    as a failure with exit code 1.
    """
    argv = [os.fspath(executable), *(os.fspath(arg) for arg in args)]
    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return _EXIT_FAILURE
    if completed.returncode < 0:
        return _EXIT_FAILURE
    return completed.returncode