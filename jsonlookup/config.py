from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

import msgspec
import tomlkit

from jsonlookup import ui


class OutputConfig(msgspec.Struct, kw_only=True, frozen=True):
    indent: int = 2
    trailing_newline: bool = False


class AddConfig(msgspec.Struct, kw_only=True, frozen=True):
    strategy: Literal["splice", "append"] = "splice"


class Config(msgspec.Struct, kw_only=True, frozen=True):
    _value: ClassVar[Config | None] = None
    HOME_PATH: ClassVar[Path] = Path.home() / ".jsonlookup.toml"
    TEMPLATE_PATH: ClassVar[Path] = (
        Path(__file__).parent / "resources" / "jsonlookup.toml"
    )

    output: OutputConfig = OutputConfig()
    add: AddConfig = AddConfig()

    @staticmethod
    def default_toml_document() -> tomlkit.TOMLDocument:
        # Defaults live in the structs, the template only adds comments.
        doc = tomlkit.parse(Config.TEMPLATE_PATH.read_text())
        _merge_toml(doc, msgspec.to_builtins(Config()))
        return doc

    @staticmethod
    def initialize() -> None:
        if Config._value is not None:
            return

        path = Config.HOME_PATH
        if path.exists():
            try:
                Config._value = msgspec.toml.decode(path.read_text(), type=Config)
            except (msgspec.DecodeError, OSError) as e:
                ui.fatal_error(
                    f"invalid configuration in {path}: {e}\n"
                    "Run `jsonlookup setup` to write a fresh one.",
                )
        else:
            Config._value = Config()

    @staticmethod
    def get() -> Config:
        assert Config._value is not None, "call Config.initialize() first"
        return Config._value


def _merge_toml(doc: Any, data: Any) -> None:
    """Copy the values in `data` into `doc`, recursing into tables so comments survive."""
    for key, value in data.items():
        if key in doc and isinstance(doc[key], dict) and isinstance(value, dict):
            _merge_toml(doc[key], value)
        else:
            doc[key] = value
