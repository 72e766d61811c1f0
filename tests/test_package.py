import io

import pytest

from tarkit.config import InvalidValueError, MalformedLineError, MissingFileError
from tarkit.package import (
    PackageInfo,
    Recipe,
    RuntimeRecipe,
    dump_recipe,
    load_package,
    load_recipe,
    parse_package,
    parse_recipe,
    save_recipe,
)


def _sample_recipe():
    return Recipe(
        pkg_info=PackageInfo(
            url="https://example.com/app.tar.gz",
            from_repository="main",
            application_name="Demo App",
            executable_path="bin/demo",
            working_directory="bin",
            icon_path="share/icon.png",
        ),
        package_format="tar.gz",
        add_to_path=True,
        add_to_desktop=False,
        add_to_tarman=True,
    )


def test_parse_package_fields():
    text = "URL=https://example.com/x.tgz\nAPPLICATION_NAME=X\nUNKNOWN=1\n"
    info = parse_package(io.StringIO(text))
    assert info == PackageInfo(url="https://example.com/x.tgz", application_name="X")


def test_parse_package_fills_given_info():
    info = PackageInfo(icon_path="icon.png")
    result = parse_package(io.StringIO("EXECUTABLE_PATH=run\n"), info)
    assert result is info
    assert info.icon_path == "icon.png"
    assert info.executable_path == "run"


def test_parse_package_none_stream():
    with pytest.raises(MissingFileError):
        parse_package(None)


def test_parse_recipe_flags_and_format():
    text = "PACKAGE_FORMAT=zip\nADD_TO_PATH=true\nADD_TO_DESKTOP=false\nURL=u\n"
    recipe = parse_recipe(io.StringIO(text))
    assert recipe.package_format == "zip"
    assert recipe.add_to_path is True
    assert recipe.add_to_desktop is False
    assert recipe.add_to_tarman is False
    assert recipe.pkg_info.url == "u"


def test_parse_recipe_false_does_not_clear_flag():
    recipe = parse_recipe(io.StringIO("ADD_TO_PATH=true\nADD_TO_PATH=false\n"))
    assert recipe.add_to_path is True


def test_parse_recipe_invalid_bool():
    with pytest.raises(InvalidValueError):
        parse_recipe(io.StringIO("ADD_TO_TARMAN=yes\n"))


def test_parse_recipe_malformed():
    with pytest.raises(MalformedLineError):
        parse_recipe(io.StringIO("URL = spaced\n"))


def test_dump_recipe_format():
    out = io.StringIO()
    dump_recipe(out, Recipe(pkg_info=PackageInfo(url="u"), add_to_desktop=True))
    assert out.getvalue() == (
        "URL=u\nADD_TO_PATH=false\nADD_TO_DESKTOP=true\nADD_TO_TARMAN=false\n"
    )


def test_dump_parse_round_trip():
    recipe = _sample_recipe()
    out = io.StringIO()
    dump_recipe(out, recipe)
    out.seek(0)
    assert parse_recipe(out) == recipe


def test_save_and_load_recipe(tmp_path):
    path = tmp_path / "demo.tarman"
    recipe = _sample_recipe()
    save_recipe(path, recipe)
    assert load_recipe(path) == recipe


def test_load_package_from_recipe_file(tmp_path):
    path = tmp_path / "package.tarman"
    recipe = _sample_recipe()
    save_recipe(path, recipe)
    assert load_package(path) == recipe.pkg_info


def test_load_missing_files(tmp_path):
    with pytest.raises(MissingFileError):
        load_package(tmp_path / "absent.tarman")
    with pytest.raises(MissingFileError):
        load_recipe(tmp_path / "absent.tarman")


def test_runtime_recipe_defaults():
    runtime = RuntimeRecipe(pkg_name="demo")
    assert runtime.recipe == Recipe()
    assert runtime.is_remote is False
    assert runtime.pkg_name == "demo"