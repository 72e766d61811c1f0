# tarkit

`tarkit` is a library with the building blocks of a small per-user package
manager. The packages it handles are applications shipped as plain archives,
not through a system package manager. It uses only the Python standard
library and needs Python 3.10 or later. It targets Linux and macOS.

## Modules

| Module            | What it holds |
|-------------------|---------------|
| `tarkit.config`   | Reader for the `KEY=value` configuration format |
| `tarkit.package`  | `PackageInfo`, `Recipe`, `RuntimeRecipe`; parsing and writing them |
| `tarkit.fs`       | Directory and file operations, `path_join`, `path_parent` |
| `tarkit.paths`    | `TarmanPaths`, the `~/.tarman` tree; `user_home()` |
| `tarkit.execute`  | `run()`, which starts a program and returns its exit code |
| `tarkit.plugin`   | `plugin_exists()` and `run_plugin()` |
| `tarkit.download` | `download()`, through the download plugin or `curl` |
| `tarkit.env`      | Search-path links and freedesktop `.desktop` entries |
| `tarkit.console`  | ANSI colours and the terminal size |
| `tarkit.sdk`      | `Handover`, `sdk_exec()` and `run_loader()` for plugin authors |

## Configuration format

The format has one `KEY=value` pair per line. Leading spaces and carriage
returns are ignored. The key runs up to the first `=`. The value is everything
after that `=`. These lines raise `MalformedLineError`:

- a line that has no `=`;
- a line with a space before its first `=`.

Reading stops at the end of the input or at the first blank line.

`tarkit.config.parse(stream, translator)` calls `translator(key, value)` for
every line.

`eval_prop(prop, key, value, *allowed)` returns `None` when `key` is not
`prop`. Otherwise it returns the value. If `allowed` values are given and the
value is not one of them, it raises `InvalidValueError`.

Package files accept these keys:

```
URL=...
FROM_REPOSITORY=...
APPLICATION_NAME=...
EXECUTABLE_PATH=...
WORKING_DIRECTORY=...
ICON_PATH=...
```

Recipes accept all of those, and these as well:

```
PACKAGE_FORMAT=tar.gz
ADD_TO_PATH=true
ADD_TO_DESKTOP=false
ADD_TO_TARMAN=true
```

Unknown keys are ignored. The `ADD_TO_*` keys accept only `true` or `false`.
A value of `true` sets the flag. A value of `false` leaves the flag as it was.

The errors all derive from `ConfigError`:

| Error                | Raised when |
|----------------------|-------------|
| `MissingFileError`   | a file cannot be opened, or the stream is `None` |
| `MalformedLineError` | a line is malformed, as described above |
| `InvalidValueError`  | a value is outside the allowed set |

## Reading and writing recipes

```python
import io

from tarkit.config import ConfigError
from tarkit.package import Recipe, dump_recipe, load_recipe, parse_recipe, save_recipe

recipe = parse_recipe(io.StringIO("URL=https://example.com/app.tar.gz\nADD_TO_PATH=true\n"))

out = io.StringIO()
dump_recipe(out, recipe)
print(out.getvalue())

try:
    recipe = load_recipe("app.tarman")
except ConfigError as exc:
    print("bad recipe:", exc)

save_recipe("copy.tarman", recipe)
```

`parse_package` and `load_package` do the same for `PackageInfo`. Each parsing
function also takes an existing object to fill in, and returns that object.

`dump_recipe` writes a line for each text field that is set, in the order of
the keys listed above. It always writes the three `ADD_TO_*` flags, as `true`
or `false`.

`RuntimeRecipe` holds three things: a recipe, the name of the package, and
whether the recipe came from a remote repository.

## The package tree

```python
from tarkit.paths import TarmanPaths

paths = TarmanPaths.from_home()    # rooted in the current user's home
paths.init()                       # creates ~/.tarman and its subdirectories

paths.package("myapp")             # ~/.tarman/pkgs/myapp
paths.recipe("main", "myapp")      # ~/.tarman/repos/main/myapp.tarman
paths.plugin("unzip")              # ~/.tarman/plugins/unzip
paths.plugin_config("unzip")       # ~/.tarman/conf/unzip.txt
paths.exec_path("myapp")           # ~/.tarman/path/myapp
paths.cached("app.tar.gz")         # ~/.tarman/tmp/app.tar.gz
```

The tree has the subdirectories `repos`, `pkgs`, `tmp`, `plugins`, `conf` and
`path`.

`user_home()` reads the home directory from the user database, so `$HOME`
does not change it.

## File-system helpers

`tarkit.fs` provides these functions. Failures raise `FsError`, whose `reason`
is one of `NOT_FOUND`, `PERMISSION`, `EXISTS` or `ERROR`.

| Function               | What it does |
|------------------------|--------------|
| `make_dir(path)`       | Creates a directory with mode `0700`. Returns `False` if something already exists there. |
| `iter_dir(path)`       | Yields `DirEntry(name, file_type)` items. |
| `count_dir(path)`      | Returns the number of entries. |
| `remove_dir(path)`     | Removes the directory and everything inside it. |
| `remove_file(path)`    | Removes a file. |
| `file_type(path)`      | Returns a `FileType` (`DIR`, `REGULAR` or `EXEC`). Follows symbolic links. Raises for anything else. |
| `path_join(*parts)`    | Joins the parts with `/` and never doubles a separator. |
| `path_parent(path)`    | Returns the containing directory, or `.` if there is none. |

## Environment integration

```python
from tarkit.env import desktop_add, desktop_remove, path_add, path_remove

link = path_add(paths, "/home/me/.tarman/pkgs/myapp/bin/myapp")   # symlink in ~/.tarman/path
path_remove(paths, "/home/me/.tarman/pkgs/myapp/bin/myapp")

desktop_add("MyApp", "/home/me/.tarman/pkgs/myapp/bin/myapp")
desktop_remove("MyApp")
```

`desktop_entry(...)` returns the text of a `.desktop` file without writing it.

`desktop_file(app_name, home)` returns the path where that file goes, under
`~/.local/share/applications`.

On macOS, `desktop_add` and `desktop_remove` raise `FsError`.

## Running programs, plugins and downloads

`tarkit.execute.run(executable, *args)` runs a program with standard input,
output and error detached, and returns its exit code. Two cases return 1:

- the program cannot be started;
- the program is killed by a signal.

A plugin is an executable file in `~/.tarman/plugins`. `run_plugin(paths,
plugin, dst, src)` calls it with three arguments, in this order: the source,
the destination and `~/.tarman/conf/<plugin>.txt`.

`download(paths, dst, url)` returns `True` on success. It uses the plugin
named `download-plugin` if one is installed. Otherwise it runs
`curl -L <url> -o <dst>`.

Plugins written in Python can use `tarkit.sdk`:

```python
import sys

from tarkit.sdk import Handover, run_loader, sdk_exec

def plugin_main(handover: Handover) -> int:
    return sdk_exec("tar", "-xf", handover.src, "-C", handover.dst)

sys.exit(run_loader(sys.argv, plugin_main))
```

`run_loader` expects exactly the program name, `src`, `dst` and `cfg`. With
any other number of arguments it returns 1. `SDK_VERSION` is `(1, 0, 0)`.

## Console helpers

- `console_size()` returns a `ConsoleSize(rows, columns)`. It falls back to
  40 by 80 when no terminal is attached.
- `color_code(color, bold)` returns the ANSI sequence for a `Color`.
- `set_color(color, bold, stream)` writes that sequence, but only when the
  stream is a terminal.

## What it does not do

`tarkit` is a library only. It does not provide:

- a command-line program;
- commands to install, update, list or remove packages;
- commands to manage repositories;
- archive extraction. Unpacking is left to plugins or to the calling code.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.