"""Reader for the ``KEY=value`` configuration format used by package files."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

__all__ = [
    "ConfigError",
    "MissingFileError",
    "MalformedLineError",
    "InvalidValueError",
    "read_line",
    "tokenize",
    "eval_prop",
    "parse",
]


class ConfigError(Exception):
    """Base class for configuration parsing errors."""


class MissingFileError(ConfigError):
    """The configuration file could not be opened."""


class MalformedLineError(ConfigError):
    """A line is not of the form ``KEY=value``."""

    def __init__(self, line: str) -> None:
        super().__init__(f"malformed configuration line: {line!r}")
        self.line = line


class InvalidValueError(ConfigError):
    """A property holds a value outside its allowed set."""

    def __init__(self, key: str, value: str, allowed: tuple[str, ...]) -> None:
        choices = ", ".join(allowed)
        super().__init__(f"invalid value {value!r} for {key} (expected one of: {choices})")
        self.key = key
        self.value = value
        self.allowed = allowed


def read_line(stream: TextIO) -> str:
    """Read one line without its newline, carriage returns or leading spaces.

    Returns an empty string at end of input or for a blank line.
    """
    raw = stream.readline()
    if raw.endswith("\n"):
        raw = raw[:-1]
    return raw.replace("\r", "").lstrip(" ")


def tokenize(line: str) -> tuple[str, str]:
    """Split ``line`` at its first ``=`` into key and value.

    The key may not contain a space; the value may hold anything.
    """
    for index, char in enumerate(line):
        if char == " ":
            break
        if char == "=":
            return line[:index], line[index + 1 :]
    raise MalformedLineError(line)


def eval_prop(prop: str, key: str, value: str, *allowed: str) -> str | None:
    """Match ``key`` against the property ``prop``.

    Returns ``None`` when the key names another property and the value when
    it names this one. When ``allowed`` values are given, a value outside
    them raises :class:`InvalidValueError`.
    """
    if key != prop:
        return None
    if allowed and value not in allowed:
        raise InvalidValueError(key, value, allowed)
    return value


def parse(stream: TextIO, translator: Callable[[str, str], None]) -> None:
    """Feed every ``KEY=value`` line of ``stream`` to ``translator``.

    Reading stops at end of input or at the first blank line. Errors raised
    by the translator propagate unchanged.
    """
    while line := read_line(stream):
        key, value = tokenize(line)
        translator(key, value)