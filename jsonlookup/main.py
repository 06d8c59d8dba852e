from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable
from typing import Literal, ParamSpec, TypeVar

import click
import cloup

from jsonlookup import core, ui
from jsonlookup.config import Config
from jsonlookup.errors import JSONLookupError

_P = ParamSpec("_P")
_T = TypeVar("_T")


def _report_errors(func: Callable[_P, _T]) -> Callable[_P, _T]:
    """Turn library and I/O errors into a fatal error message."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        try:
            return func(*args, **kwargs)
        except (JSONLookupError, OSError) as exc:
            ui.fatal_error(str(exc))

    return wrapper


@cloup.command(
    short_help="Print the value at a JSON path",
    help="""
Print the string found at PATH in the JSON file FILENAME.

\b
Example:
    jsonlookup lookup books.json 'x[1].author'
""",
)
@cloup.argument("filename", help="Path to the JSON file")
@cloup.argument("path", help="JSON path expression")
@cloup.option("--json", "as_json", is_flag=True, help="Print any node as JSON instead of a string")
@_report_errors
def lookup(filename: str, path: str, as_json: bool) -> None:  # noqa: FBT001
    if as_json:
        node = core.json_lookup(filename, path)
        ui.writeln(node.encode_pretty(Config.get().output.indent).decode())
    else:
        ui.writeln(core.json_string(filename, path))


@cloup.command(
    "set",
    short_help="Overwrite a key with a string",
    help="""
Set the existing key at PATH in the JSON file FILENAME to the string VALUE and
write the file back. The key must already exist.

\b
Example:
    jsonlookup set books.json 'x[1].author' Catniss
""",
)
@cloup.argument("filename", help="Path to the JSON file")
@cloup.argument("path", help="JSON path expression")
@cloup.argument("value", help="New string value")
@_report_errors
def set_value(filename: str, path: str, value: str) -> None:
    core.json_set(filename, path, value, Config.get())


@cloup.command(
    short_help="Append JSON data to an array",
    help="""
Append DATA, a JSON value, to the array at PATH in the JSON file FILENAME and
write the file back. Use `x` as the path to append to an array at the root.

\b
Example:
    jsonlookup add books.json x '{"author": "Catniss", "book": "Yeah"}'
""",
)
@cloup.argument("filename", help="Path to the JSON file")
@cloup.argument("path", help="JSON path expression")
@cloup.argument("data", help="JSON value to append")
@_report_errors
def add(filename: str, path: str, data: str) -> None:
    core.json_add(filename, path, data, Config.get())


@cloup.command(
    short_help="Generate shell completion scripts",
    help="""
Generate shell completion scripts for jsonlookup commands.

### Bash

\b
Add this to ~/.bashrc:
    eval "$(jsonlookup completion bash)"

### Zsh

\b
Add this to ~/.zshrc:
    eval "$(jsonlookup completion zsh)"

### Fish

\b
Generate a `jsonlookup.fish` completion script:
    jsonlookup completion fish > ~/.config/fish/completions/jsonlookup.fish
""",
)
@cloup.argument(
    "shell",
    type=click.Choice(["bash", "zsh", "fish"]),
)
def completion(shell: Literal["bash", "zsh", "fish"]) -> None:
    os.environ["_JSONLOOKUP_COMPLETE"] = f"{shell}_source"
    cli()


@cloup.command(
    short_help="Setup jsonlookup",
    help="Generate a configuration file for jsonlookup that can be used to override the defaults.",
)
def setup() -> None:
    Config.HOME_PATH.write_text(Config.default_toml_document().as_string())

    ui.writeln(
        f"Configuration file created at '{Config.HOME_PATH}'.\n"
        "You can configure jsonlookup by editing the file.",
        ui.OK,
    )


SECTIONS = [
    cloup.Section(
        "Document commands",
        [
            lookup,
            set_value,
            add,
        ],
    ),
    cloup.Section(
        "Config commands",
        [
            completion,
            setup,
        ],
    ),
]


@cloup.group(
    help="""
Look up and modify JSON files using simple path expressions.

A path is made of dot separated keys, where each key can be followed by one index
in brackets. The special key `x` refers to the current node and is used to start
at the root, e.g., `x[1].author` is the `author` key of the second element of
an array at the root. Only the last key in a path may come without an index.
""",
    sections=SECTIONS,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@cloup.option("--verbose", "-v", is_flag=True, help="Log what jsonlookup is doing")
@cloup.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:  # noqa: FBT001
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
    )
    # Only initialize config if we are not running the `setup` command. This ensures we can
    # run `jsonlookup setup` even if there are issues with the config file.
    if ctx.invoked_subcommand != "setup":
        Config.initialize()


def main() -> None:
    cli()
