import json

import pytest

from nestac import MISSING, ShapeMismatchError, json_path

JSON_STR = """
{
    "foo": {"bar": ["bingo!"]},
    "hello": ["world", "!"],
    "networks": {"192.168.0.1": "bingo!"}
}
"""


@pytest.fixture
def data():
    return json.loads(JSON_STR)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("foo.bar.[0]", "bingo!"),
        ("$.foo.bar.[0]", "bingo!"),
        ("hello.[1]", "!"),
        ("$.hello", ["world", "!"]),
    ],
)
def test_read(data, path: str, expected):
    assert json_path.read(path, data) == expected


def test_read_dollar_alone_is_the_document(data):
    assert json_path.read("$", data) is data
    assert json_path.read("$", data, symbol=None) is None


def test_update_with_custom_separator(data):
    old = json_path.update(data, "networks@192.168.0.1", "@", "updated!")
    assert old == "bingo!"
    assert json_path.read("networks@192.168.0.1", data, "@") == "updated!"


def test_update_through_rooted_path(data):
    assert json_path.update(data, "$.hello.[0]", ".", "hi") == "world"
    assert data["hello"] == ["hi", "!"]


def test_update_list_root():
    data = json.loads('["a", {"b": 1}]')
    assert json_path.update(data, "$.[1].b", ".", 2) == 1
    assert data == ["a", {"b": 2}]


def test_update_mismatch(data):
    with pytest.raises(ShapeMismatchError):
        json_path.update(data, "$.hello.key", ".", 1)


def test_get_paths_is_rooted(data):
    assert json_path.get_paths(data) == [
        "$",
        "$.foo",
        "$.foo.bar",
        "$.foo.bar.[0]",
        "$.hello",
        "$.hello.[0]",
        "$.hello.[1]",
        "$.networks",
        "$.networks.192.168.0.1",
    ]
    assert json_path.get_paths({"a": 1}, "#") == ["#", "#.a"]


def test_get_paths_read_back_with_custom_separator(data):
    for path in json_path.get_paths(data, separator="@"):
        assert json_path.read(path, data, "@", default=MISSING) is not MISSING
