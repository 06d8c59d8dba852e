from __future__ import annotations

import logging
import threading
from pathlib import Path

from jsonlookup import document, path
from jsonlookup.config import Config
from jsonlookup.document import Node
from jsonlookup.errors import (
    DocumentError,
    KeyNotFoundError,
    NotFoundError,
    SpliceError,
    TargetNotArrayError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)


class JSONFile:
    """A JSON file loaded in memory.

    Lookups and mutations work on the in-memory document, and every mutation
    writes the whole document back to the file. Writes through the same
    instance are serialized, but there's no isolation between a lookup and a
    concurrent mutation.
    """

    def __init__(self, filename: Path | str, config: Config | None = None) -> None:
        self._filename = Path(filename)
        self._config = config or Config()
        self._lock = threading.Lock()
        self._root = document.parse(self._filename.read_bytes())
        logger.debug("loaded `%s`", self._filename)

    @property
    def filename(self) -> Path:
        return self._filename

    @property
    def root(self) -> Node:
        return self._root

    def lookup(self, json_path: str) -> Node:
        """Return the node at `json_path`, which must exist."""
        node = path.resolve(self._root, json_path)
        if not node.exists:
            raise NotFoundError(path=json_path)
        return node

    def lookup_string(self, json_path: str) -> str:
        node = self.lookup(json_path)
        if not node.is_string():
            raise TypeMismatchError(path=json_path, rendered=node.render())
        return node.value

    def set_string(self, json_path: str, value: str) -> None:
        """Overwrite an existing key with a string and write the file.

        The last segment of the path must name a key that already exists in the
        node pointed to by the rest of the path.
        """
        parent_path, last_key = path.split_last(json_path)
        parent = path.resolve_parent(self._root, parent_path)

        previous, found = parent.check_get(last_key)
        if not found:
            raise KeyNotFoundError(key=last_key)

        parent.set(last_key, value)
        logger.debug("set `%s` to %r", json_path, value)
        try:
            self.write(self._encode(self._root))
        except OSError:
            parent.set(last_key, previous.value)
            raise

    def add_json(self, json_path: str, json_data: str) -> None:
        """Append raw JSON data as the last element of the array at `json_path`.

        The data is inserted verbatim into the serialized document and the result
        is parsed again before being written, see `_splice`.
        """
        target = path.resolve_target(self._root, json_path)
        if not target.is_array():
            raise TargetNotArrayError(path=json_path)

        match self._config.add.strategy:
            case "splice":
                new_root = self._splice(json_path, target, json_data)
            case "append":
                new_root = self._append(json_path, json_data)
            case strategy:
                raise ValueError(f"unknown add strategy: {strategy!r}")

        self.write(self._encode(new_root))
        self._root = new_root

    def _splice(self, json_path: str, target: Node, json_data: str) -> Node:
        """Textually insert `json_data` at the end of the serialized `target`.

        The first occurrence of the serialized target inside the serialized
        document is the one replaced. If an identical array is serialized earlier
        in the document, that one gets the data instead, so we check the target
        array grew by exactly one element and fail otherwise. Splicing into an
        empty array produces `[,data]` which fails to parse.
        """
        target_bytes = target.encode()
        full_bytes = self._root.encode()
        replacement = target_bytes[:-1] + b"," + json_data.encode() + b"]"
        spliced = full_bytes.replace(target_bytes, replacement, 1)

        try:
            new_root = document.parse(spliced)
        except DocumentError as exc:
            raise SpliceError(reason=exc.reason) from exc

        new_target = path.resolve_target(new_root, json_path)
        if not new_target.is_array() or len(new_target) != len(target) + 1:
            raise SpliceError(
                reason=f"the array at `{json_path}` did not grow by exactly one element",
            )
        logger.debug("spliced %d bytes into `%s`", len(json_data), json_path)
        return new_root

    def _append(self, json_path: str, json_data: str) -> Node:
        new_root = document.parse(self._root.encode())
        path.resolve_target(new_root, json_path).append(document.decode(json_data))
        logger.debug("appended to `%s`", json_path)
        return new_root

    def _encode(self, root: Node) -> bytes:
        data = root.encode_pretty(self._config.output.indent)
        if self._config.output.trailing_newline:
            data += b"\n"
        return data

    def write(self, data: bytes) -> None:
        """Replace the contents of the file. This is not atomic."""
        with self._lock:
            self._filename.write_bytes(data)
        logger.debug("wrote %d bytes to `%s`", len(data), self._filename)


def json_lookup(filename: Path | str, json_path: str) -> Node:
    return JSONFile(filename).lookup(json_path)


def json_string(filename: Path | str, json_path: str) -> str:
    """Return the string at `json_path` in the given file."""
    return JSONFile(filename).lookup_string(json_path)


def json_set(
    filename: Path | str,
    json_path: str,
    value: str,
    config: Config | None = None,
) -> None:
    JSONFile(filename, config).set_string(json_path, value)


def json_add(
    filename: Path | str,
    json_path: str,
    json_data: str,
    config: Config | None = None,
) -> None:
    JSONFile(filename, config).add_json(json_path, json_data)
