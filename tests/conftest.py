from collections.abc import Callable
from pathlib import Path
from typing import Any

import msgspec
import pytest

from jsonlookup.config import Config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Config, "HOME_PATH", tmp_path / ".jsonlookup.toml")
    monkeypatch.setattr(Config, "_value", None)


@pytest.fixture
def json_file(tmp_path: Path) -> Callable[[Any], Path]:
    def write(obj: Any) -> Path:
        path = tmp_path / "doc.json"
        path.write_bytes(msgspec.json.encode(obj))
        return path

    return write

