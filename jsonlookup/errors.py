from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonlookup.document import Node


class JSONLookupError(Exception):
    """Base class for all errors raised while reading or modifying a document."""


@dataclass(kw_only=True, eq=False)
class DocumentError(JSONLookupError):
    """The input could not be decoded as a JSON document."""

    reason: str

    def __str__(self) -> str:
        return f"invalid JSON document: {self.reason}"


@dataclass(kw_only=True, eq=False)
class EmptyPathError(JSONLookupError):
    """The path was exhausted before reaching a concrete node.

    Mutators treat this as "the parent is the node reached so far", which is
    why the node is kept around.
    """

    node: Node

    def __str__(self) -> str:
        return "could not find a specific node that matched the given path"


@dataclass(kw_only=True, eq=False)
class InvalidIndexError(JSONLookupError):
    path: str
    text: str

    def __str__(self) -> str:
        return f"invalid index: `{self.text}` in `{self.path}` (expected a non-negative integer)"


@dataclass(kw_only=True, eq=False)
class UnparsedRemainderError(JSONLookupError):
    remainder: str

    def __str__(self) -> str:
        return f"path left unparsed: `{self.remainder}`"


@dataclass(kw_only=True, eq=False)
class NotFoundError(JSONLookupError):
    path: str

    def __str__(self) -> str:
        return f"could not lookup: `{self.path}`"


@dataclass(kw_only=True, eq=False)
class TypeMismatchError(JSONLookupError):
    path: str
    rendered: str

    def __str__(self) -> str:
        return f"result was not a string: {self.rendered}"


@dataclass(kw_only=True, eq=False)
class KeyNotFoundError(JSONLookupError):
    """Assignment never creates keys."""

    key: str

    def __str__(self) -> str:
        return f"key `{self.key}` does not exist, could not set value"


@dataclass(kw_only=True, eq=False)
class TargetNotArrayError(JSONLookupError):
    path: str

    def __str__(self) -> str:
        return f"the path `{self.path}` should point to an array when adding JSON data"


@dataclass(kw_only=True, eq=False)
class SpliceError(JSONLookupError):
    reason: str

    def __str__(self) -> str:
        return f"adding the JSON data produced an invalid document: {self.reason}"
