import pytest

from pcskit.jsonnode import JsonNode, JsonType
from pcskit.jsontext import (
    JsonParseError,
    dumps,
    dumps_unformatted,
    minify,
    parse,
    parse_with_end,
)


@pytest.mark.parametrize(
    "text, kind",
    [("null", JsonType.NULL), ("true", JsonType.TRUE), ("false", JsonType.FALSE)],
)
def test_parse_literals(text, kind):
    assert parse(text).type == kind


def test_parsed_true_has_int_one():
    assert parse("true").value_int == 1


def test_parse_string_escapes():
    assert parse(r'"a\nb\t\"c\\"').value_string == 'a\nb\t"c\\'


def test_parse_unicode_escapes():
    assert parse(r'"\u00e9"').value_string == "\u00e9"
    assert parse(r'"\ud83d\ude00"').value_string == "\U0001F600"


def test_parse_drops_nul_escape_and_lone_low_surrogate():
    assert parse(r'"a\u0000b"').value_string == "ab"
    assert parse(r'"a\udc00b"').value_string == "ab"


def test_parse_single_quoted_and_unterminated_strings():
    assert parse("'abc'").value_string == "abc"
    assert parse('"abc').value_string == "abc"


def test_parse_nested_with_comments():
    node = parse('/* head */ {"A": [1, 2, // two\n "x"], "b": null}')
    assert node.type == JsonType.OBJECT
    assert len(node) == 2
    items = node.get("a")
    assert [c.type for c in items] == [JsonType.NUMBER, JsonType.NUMBER, JsonType.STRING]
    assert items.item(2).value_string == "x"
    assert node.get("B").type == JsonType.NULL


@pytest.mark.parametrize("text", ["", "[1,]", "{1:2}", '{"a" 1}', "@"])
def test_parse_errors(text):
    with pytest.raises(JsonParseError):
        parse(text)


def test_parse_error_position():
    with pytest.raises(JsonParseError) as info:
        parse("[1 2]")
    assert info.value.position == 3


def test_trailing_text_is_ignored_unless_required():
    node, end = parse_with_end("null x", False)
    assert node.type == JsonType.NULL
    assert end == 4
    with pytest.raises(JsonParseError) as info:
        parse_with_end("null x", True)
    assert info.value.position == 5


def test_require_end_allows_trailing_comments():
    node, end = parse_with_end("[1] // done", True)
    assert len(node) == 1
    assert end == len("[1] // done")


def test_unformatted_round_trip():
    text = '{"a":[1,2,"x"],"b":null,"c":{},"d":[],"e":true}'
    assert dumps_unformatted(parse(text)) == text


def test_formatted_object_layout():
    assert dumps(parse('{"a":1}')) == '{\n\t"a":\t1\n}'


def test_formatted_array_layout():
    assert dumps(parse("[1,2]")) == "[1, 2]"


def test_formatted_round_trip_preserves_tree():
    node = parse('{"a":{"b":[1,"two",{"c":false}]},"d":"e"}')
    assert parse(dumps(node)) == node


@pytest.mark.parametrize(
    "value, text",
    [(1.5, "1.500000"), (1e-7, "1.000000e-07"), (1e10, "10000000000")],
)
def test_number_formats(value, text):
    assert dumps(JsonNode.number(value)) == text


@pytest.mark.parametrize("value", [0, 17, -3, 2.5, 123456.75])
def test_number_round_trip(value):
    assert parse(dumps(JsonNode.number(value))).value_double == value


def test_string_escaping_round_trip():
    original = 'a"b\\\n\x01\t\u00e9'
    rendered = dumps(JsonNode.string(original))
    assert "\\u0001" in rendered
    assert parse(rendered).value_string == original


def test_missing_string_renders_empty():
    assert dumps(JsonNode(JsonType.STRING)) == ""


def test_minify_strips_space_and_comments():
    text = '{ "a" : 1 , // note\n "b": "x y" /* z */ }'
    assert minify(text) == '{"a":1,"b":"x y"}'


def test_minify_keeps_escaped_quotes():
    text = '[ "a \\" b" ]'
    assert minify(text) == '["a \\" b"]'
    assert parse(minify(text)).item(0).value_string == 'a " b'