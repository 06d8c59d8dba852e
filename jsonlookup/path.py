"""Path expressions addressing a node inside a JSON document.

A path is a sequence of dot separated segments. A segment is either a key
(`author`), a key followed by a single bracketed index (`books[2]`), or the
anchor `x`, which stays at the current node and is conventionally used as the
first segment to denote the root (`x[1].author`). The anchor can be combined
with an index too (`x[0]`). Because `x` is always the anchor, a key literally
named `x` can't be addressed.

Only the last segment may be a bare key: `x.a[0].b` is valid but `x.a.b` is
not.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from jsonlookup.document import Node
from jsonlookup.errors import EmptyPathError, InvalidIndexError, UnparsedRemainderError

logger = logging.getLogger(__name__)

ANCHOR = "x"


@dataclass(frozen=True, slots=True)
class Anchor:
    def __str__(self) -> str:
        return ANCHOR


@dataclass(frozen=True, slots=True)
class Key:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Index:
    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


Segment = Anchor | Key | Index


_INDEX_RE = re.compile(r"[0-9]+")


def tokenize(path: str) -> list[Segment]:
    """Split `path` into segments.

    Errors only depend on the text of the path, so they are reported here, in the
    order they appear, before the document is touched.
    """
    segments: list[Segment] = []
    rest = path
    while rest:
        head, _, tail = rest.partition(".")
        if head == ANCHOR:
            segments.append(Anchor())
        elif "[" in head and "]" in head:
            name, _, bracket = head.partition("[")
            text, _, trailing = bracket.partition("]")
            segments.append(Anchor() if name == ANCHOR else Key(name))
            if not _INDEX_RE.fullmatch(text):
                raise InvalidIndexError(path=path, text=text)
            # Only one index per segment, `a[0][1]` is not supported.
            if trailing:
                raise UnparsedRemainderError(remainder=trailing)
            segments.append(Index(int(text)))
        elif tail:
            raise UnparsedRemainderError(remainder=tail)
        else:
            segments.append(Key(head))
        rest = tail
    return segments


def resolve(node: Node, path: str) -> Node:
    """Walk `path` starting at `node` and return the node it points to.

    A path that doesn't end in a bare key (e.g. `x` or `x.books[0]`) raises
    `EmptyPathError` holding the node reached.
    """
    segments = tokenize(path)
    for segment in segments:
        match segment:
            case Anchor():
                pass
            case Key(name):
                node = node.get(name)
            case Index(index):
                node = node.get_index(index)
    logger.debug("resolved `%s` to %r", path, node)
    if not segments or not isinstance(segments[-1], Key):
        raise EmptyPathError(node=node)
    return node


def resolve_parent(root: Node, path: str) -> Node:
    """Like `resolve`, but an exhausted path is fine and yields the node reached."""
    try:
        return resolve(root, path)
    except EmptyPathError as exc:
        return exc.node


def resolve_target(root: Node, path: str) -> Node:
    """Find the node a mutation applies to.

    When the path ends in a bare key, the parent is resolved first and the key
    looked up on it, the same walk used to assign values. Otherwise (`x`,
    `x.items[1]`) the whole path is resolved.
    """
    parent_path, last = split_last(path)
    if last and last != ANCHOR and not ("[" in last and "]" in last):
        return resolve_parent(root, parent_path).get(last)
    return resolve_parent(root, path)


def split_last(path: str) -> tuple[str, str]:
    """Split `path` at the last dot into the parent path and the last key."""
    parent, _, last = path.rpartition(".")
    return (parent, last)
