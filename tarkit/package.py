"""Package and recipe files and their ``KEY=value`` representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import TextIO

from tarkit.config import MissingFileError, eval_prop, parse

__all__ = [
    "PackageInfo",
    "Recipe",
    "RuntimeRecipe",
    "parse_package",
    "load_package",
    "parse_recipe",
    "load_recipe",
    "dump_recipe",
    "save_recipe",
]

_PACKAGE_KEYS = (
    ("URL", "url"),
    ("FROM_REPOSITORY", "from_repository"),
    ("APPLICATION_NAME", "application_name"),
    ("EXECUTABLE_PATH", "executable_path"),
    ("WORKING_DIRECTORY", "working_directory"),
    ("ICON_PATH", "icon_path"),
)

_FLAG_KEYS = (
    ("ADD_TO_PATH", "add_to_path"),
    ("ADD_TO_DESKTOP", "add_to_desktop"),
    ("ADD_TO_TARMAN", "add_to_tarman"),
)

_BOOL_VALUES = ("true", "false")


@dataclass
class PackageInfo:
    """Contents of an installed package file."""

    url: str | None = None
    from_repository: str | None = None
    application_name: str | None = None
    executable_path: str | None = None
    working_directory: str | None = None
    icon_path: str | None = None


@dataclass
class Recipe:
    """Instructions for installing a package."""

    pkg_info: PackageInfo = field(default_factory=PackageInfo)
    package_format: str | None = None
    add_to_path: bool = False
    add_to_desktop: bool = False
    add_to_tarman: bool = False


@dataclass
class RuntimeRecipe:
    """A recipe together with the package it installs and where it came from."""

    recipe: Recipe = field(default_factory=Recipe)
    pkg_name: str | None = None
    is_remote: bool = False


def _apply_package_key(info: PackageInfo, key: str, value: str) -> None:
    for prop, attr in _PACKAGE_KEYS:
        if eval_prop(prop, key, value) is not None:
            setattr(info, attr, value)


def _apply_recipe_key(recipe: Recipe, key: str, value: str) -> None:
    _apply_package_key(recipe.pkg_info, key, value)
    if eval_prop("PACKAGE_FORMAT", key, value) is not None:
        recipe.package_format = value
    for prop, attr in _FLAG_KEYS:
        # A "false" never clears a flag that is already set.
        if eval_prop(prop, key, value, *_BOOL_VALUES) == "true":
            setattr(recipe, attr, True)


def parse_package(stream: TextIO | None, info: PackageInfo | None = None) -> PackageInfo:
    """Read package properties from ``stream`` into ``info`` and return it."""
    if stream is None:
        raise MissingFileError("no package file")
    if info is None:
        info = PackageInfo()
    parse(stream, lambda key, value: _apply_package_key(info, key, value))
    return info


def load_package(path: str | PathLike[str], info: PackageInfo | None = None) -> PackageInfo:
    """Read the package file at ``path``."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"cannot open package file {path}") from exc
    with handle:
        return parse_package(handle, info)


def parse_recipe(stream: TextIO | None, recipe: Recipe | None = None) -> Recipe:
    """Read recipe properties from ``stream`` into ``recipe`` and return it."""
    if stream is None:
        raise MissingFileError("no recipe file")
    if recipe is None:
        recipe = Recipe()
    parse(stream, lambda key, value: _apply_recipe_key(recipe, key, value))
    return recipe


def load_recipe(path: str | PathLike[str], recipe: Recipe | None = None) -> Recipe:
    """Read the recipe file at ``path``."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"cannot open recipe file {path}") from exc
    with handle:
        return parse_recipe(handle, recipe)


def dump_recipe(stream: TextIO, recipe: Recipe) -> None:
    """Write ``recipe`` to ``stream``; unset text fields are left out."""
    for prop, attr in _PACKAGE_KEYS:
        value = getattr(recipe.pkg_info, attr)
        if value is not None:
            stream.write(f"{prop}={value}\n")
    if recipe.package_format is not None:
        stream.write(f"PACKAGE_FORMAT={recipe.package_format}\n")
    for prop, attr in _FLAG_KEYS:
        stream.write(f"{prop}={'true' if getattr(recipe, attr) else 'false'}\n")


def save_recipe(path: str | PathLike[str], recipe: Recipe) -> None:
    """Write ``recipe`` to the file at ``path``, replacing it."""
    with open(path, "w", encoding="utf-8") as handle:
        dump_recipe(handle, recipe)