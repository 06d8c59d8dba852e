from __future__ import annotations

from typing import Any

import msgspec

from jsonlookup.errors import DocumentError


def parse(data: bytes | str) -> Node:
    """Decode a whole document. The root must be an object or an array."""
    value = decode(data)
    if not isinstance(value, dict | list):
        raise DocumentError(reason="the root must be an object or an array")
    return Node(value)


def decode(data: bytes | str) -> Any:
    try:
        return msgspec.json.decode(data)
    except msgspec.DecodeError as exc:
        raise DocumentError(reason=str(exc)) from exc


class Node:
    """A handle on a value inside a decoded JSON tree.

    Containers are shared with the tree they come from, so setting a key on a
    child node modifies the whole document in place. Looking up something that
    isn't there yields a missing node instead of failing, and any lookup on a
    missing node is missing too.

    Numbers are decoded into Python ints and floats, so a number beyond the
    float range (e.g. `1e400`) makes the whole document fail to parse.
    """

    __slots__ = ("_value", "_exists")

    def __init__(self, value: Any, *, exists: bool = True) -> None:
        self._value = value
        self._exists = exists

    @staticmethod
    def missing() -> Node:
        return Node(None, exists=False)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def exists(self) -> bool:
        return self._exists

    def is_string(self) -> bool:
        return self._exists and isinstance(self._value, str)

    def is_array(self) -> bool:
        return self._exists and isinstance(self._value, list)

    def is_object(self) -> bool:
        return self._exists and isinstance(self._value, dict)

    def get(self, key: str) -> Node:
        node, _ = self.check_get(key)
        return node

    def get_index(self, index: int) -> Node:
        if self.is_array() and 0 <= index < len(self._value):
            return Node(self._value[index])
        return Node.missing()

    def check_get(self, key: str) -> tuple[Node, bool]:
        """Return the child at `key` and whether it exists, without creating it."""
        if self.is_object() and key in self._value:
            return (Node(self._value[key]), True)
        return (Node.missing(), False)

    def set(self, key: str, value: Any) -> None:
        """Set `key` on an object node. It's a no-op on any other kind of node."""
        if self.is_object():
            self._value[key] = value

    def append(self, value: Any) -> None:
        if self.is_array():
            self._value.append(value)

    def __len__(self) -> int:
        if self.is_array() or self.is_object():
            return len(self._value)
        return 0

    def encode(self) -> bytes:
        return msgspec.json.encode(self._value)

    def encode_pretty(self, indent: int = 2) -> bytes:
        return msgspec.json.format(self.encode(), indent=indent)

    def render(self) -> str:
        """A best-effort textual rendering used in error messages."""
        if not self._exists:
            return "<missing>"
        return self.encode().decode()

    def __repr__(self) -> str:
        return f"Node({self.render()})"
