import io

import pytest

from _msdio.parameter import Parameter, SerializeError, serialize_component


def test_constructor():
    parameter = Parameter(["key", "value"])

    assert parameter.key == "key"
    assert parameter.value == "value"
    assert parameter.components == ["key", "value"]


def test_key_without_value():
    parameter = Parameter(["key"])

    assert parameter.key == "key"
    assert parameter.value is None


def test_no_components():
    parameter = Parameter()

    assert parameter.key is None
    assert parameter.value is None
    assert str(parameter) == "#;"


def test_str_with_escapes():
    parameter = Parameter(["key", "value"])
    evil_parameter = Parameter(["ABC:DEF;GHI//JKL\\MNO", "abc:def;ghi//jkl\\mno"])

    assert str(parameter) == "#key:value;"
    assert (
        str(evil_parameter)
        == "#ABC\\:DEF\\;GHI\\//JKL\\\\MNO:abc\\:def\\;ghi\\//jkl\\\\mno;"
    )


@pytest.mark.parametrize(
    "component, expected",
    [
        ("plain text", "plain text"),
        ("a/b", "a/b"),
        ("a//b", "a\\//b"),
        ("a///b", "a\\/\\//b"),
        ("E#F", "E\\#F"),
        ("\n#NEXT", "\n\\#NEXT"),
        ("ends with\\", "ends with\\\\"),
        ("", ""),
    ],
)
def test_serialize_component_with_escapes(component, expected):
    assert serialize_component(component) == expected


def test_str_without_escapes():
    assert Parameter(["key", "value"]).to_string(escapes=False) == "#key:value;"
    assert (
        Parameter(["key", "abc", "def"]).to_string(escapes=False) == "#key:abc:def;"
    )
    assert (
        Parameter(["ABC\\DEF", "abc\\def"]).to_string(escapes=False)
        == "#ABC\\DEF:abc\\def;"
    )


@pytest.mark.parametrize(
    "components",
    [
        ["ABC:DEF", "abcdef"],
        ["ABC;DEF", "abcdef"],
        ["ABCDEF", "abc;def"],
        ["ABC//DEF", "abcdef"],
        ["ABCDEF", "abc//def"],
    ],
)
def test_serialize_without_escapes_errors(components):
    with pytest.raises(SerializeError, match="can't be serialized without escapes"):
        Parameter(components).serialize(io.StringIO(), escapes=False)


def test_serialize_to_stream():
    stream = io.StringIO()
    Parameter(["TITLE", "Springtime"]).serialize(stream)
    assert stream.getvalue() == "#TITLE:Springtime;"
