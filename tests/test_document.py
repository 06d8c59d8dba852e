import msgspec
import pytest

from jsonlookup import document
from jsonlookup.document import Node
from jsonlookup.errors import DocumentError


def test_parse_rejects_malformed_json():
    with pytest.raises(DocumentError):
        document.parse(b'{"a": ')


@pytest.mark.parametrize("data", [b"3", b'"text"', b"null"])
def test_parse_rejects_scalar_root(data):
    with pytest.raises(DocumentError):
        document.parse(data)


def test_missing_is_not_null():
    root = document.parse(b'{"a": null}')
    assert root.get("a").exists
    assert root.get("a").value is None
    assert not root.get("b").exists


def test_lookups_on_missing_nodes_stay_missing():
    root = document.parse(b'{"a": [1]}')
    assert not root.get("b").get("c").get_index(0).exists
    assert not root.get("a").get_index(1).exists
    assert not root.get("a").get("0").exists
    assert not root.get_index(0).exists


def test_check_get_does_not_create_key():
    root = document.parse(b'{"a": 1}')
    node, found = root.check_get("b")
    assert not found
    assert not node.exists
    assert root.value == {"a": 1}


def test_set_on_child_modifies_root():
    root = document.parse(b'{"books": [{"author": "Old"}]}')
    root.get("books").get_index(0).set("author", "New")
    assert root.value == {"books": [{"author": "New"}]}


def test_set_is_noop_on_arrays():
    root = document.parse(b"[1, 2]")
    root.set("a", "b")
    assert root.value == [1, 2]


def test_encode_is_compact():
    root = document.parse(b'{ "items" : [1, 2] }')
    assert root.encode() == b'{"items":[1,2]}'
    assert root.get("items").encode() == b"[1,2]"


def test_encode_pretty():
    root = document.parse(b'{"items": [1]}')
    assert root.encode_pretty() == b'{\n  "items": [\n    1\n  ]\n}'
    assert msgspec.json.decode(root.encode_pretty(4)) == {"items": [1]}


def test_render_missing():
    assert Node.missing().render() == "<missing>"
    assert Node({"a": 1}).render() == '{"a":1}'


def test_number_beyond_float_range_is_rejected():
    with pytest.raises(DocumentError):
        document.parse(b'{"big": 1e400}')
