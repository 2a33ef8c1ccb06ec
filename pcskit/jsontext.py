"""Reading and writing JSON text for :class:`~pcskit.jsonnode.JsonNode` trees.

The reader is lenient. It accepts single-quoted strings and ``//`` and
``/* */`` comments. It also accepts a string with no closing quote, and
trailing text after the value unless asked to reject it. The writer has two
layouts: a formatted one with tabs and newlines, and a compact one.
"""

from __future__ import annotations

import math
import sys
from typing import Optional

from .jsonnode import JsonNode, JsonType

_EPSILON = sys.float_info.epsilon
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SIMPLE_UNESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonParseError(ValueError):
    """Raised when JSON text cannot be parsed; ``position`` marks the fault."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class _Reader:
    def __init__(self, text: str) -> None:
        # Text ends at the first NUL character.
        self.text = text.split("\0", 1)[0]
        self.size = len(self.text)

    def _char(self, pos: int) -> str:
        return self.text[pos] if 0 <= pos < self.size else ""

    def _fail(self, pos: int, message: str) -> JsonParseError:
        return JsonParseError(message, pos)

    def skip(self, pos: int) -> int:
        """Skip whitespace and comments."""
        text = self.text
        while True:
            start = pos
            while pos < self.size and ord(text[pos]) <= 32:
                pos += 1
            if text.startswith("/*", pos):
                end = text.find("*/", pos + 2)
                pos = self.size if end < 0 else end + 2
            elif text.startswith("//", pos):
                end = text.find("\n", pos + 2)
                pos = self.size if end < 0 else end + 1
            if pos == start:
                return pos

    def value(self, node: JsonNode, pos: int) -> int:
        text = self.text
        if text.startswith("null", pos):
            node.type = JsonType.NULL
            return pos + 4
        if text.startswith("false", pos):
            node.type = JsonType.FALSE
            return pos + 5
        if text.startswith("true", pos):
            node.type = JsonType.TRUE
            node.value_int = 1
            return pos + 4
        char = self._char(pos)
        if char in ('"', "'"):
            node.value_string, end = self.string(pos)
            node.type = JsonType.STRING
            return end
        if char == "-" or ("0" <= char <= "9" and char != ""):
            return self.number(node, pos)
        if char == "[":
            return self.array(node, pos)
        if char == "{":
            return self.object(node, pos)
        raise self._fail(pos, "unexpected text")

    def number(self, node: JsonNode, pos: int) -> int:
        char = self._char
        sign = 1.0
        mantissa = 0.0
        scale = 0
        exponent = 0
        exponent_sign = 1
        if char(pos) == "-":
            sign = -1.0
            pos += 1
        if char(pos) == "0":
            pos += 1
        if "1" <= char(pos) <= "9" and char(pos):
            while char(pos).isdigit() and char(pos).isascii():
                mantissa = mantissa * 10.0 + (ord(char(pos)) - 48)
                pos += 1
        nxt = char(pos + 1)
        if char(pos) == "." and nxt and "0" <= nxt <= "9":
            pos += 1
            while char(pos) and "0" <= char(pos) <= "9":
                mantissa = mantissa * 10.0 + (ord(char(pos)) - 48)
                scale -= 1
                pos += 1
        if char(pos) in ("e", "E") and char(pos):
            pos += 1
            if char(pos) == "+":
                pos += 1
            elif char(pos) == "-":
                exponent_sign = -1
                pos += 1
            while char(pos) and "0" <= char(pos) <= "9":
                exponent = exponent * 10 + (ord(char(pos)) - 48)
                pos += 1
        try:
            power = math.pow(10.0, scale + exponent * exponent_sign)
        except OverflowError:
            power = math.inf
        result = sign * mantissa * power
        built = JsonNode.number(result)
        node.type = JsonType.NUMBER
        node.value_double = built.value_double
        node.value_int = built.value_int
        return pos

    def _hex4(self, pos: int) -> int:
        digits = self.text[pos:pos + 4]
        if len(digits) == 4 and all(d in _HEX_DIGITS for d in digits):
            return int(digits, 16)
        return 0

    def string(self, pos: int) -> tuple[str, int]:
        quote = self._char(pos)
        if quote not in ('"', "'") or not quote:
            raise self._fail(pos, "expected a string")
        text = self.text
        out: list[str] = []
        i = pos + 1
        while i < self.size and text[i] != quote:
            char = text[i]
            if char != "\\":
                out.append(char)
                i += 1
                continue
            i += 1
            if i >= self.size:
                break
            escaped = text[i]
            if escaped in _SIMPLE_UNESCAPES:
                out.append(_SIMPLE_UNESCAPES[escaped])
            elif escaped == "u":
                decoded, i = self._unicode_escape(i)
                if decoded is not None:
                    out.append(decoded)
            else:
                out.append(escaped)
            i += 1
        if i < self.size and text[i] == quote:
            i += 1
        return "".join(out), i

    def _unicode_escape(self, pos: int) -> tuple[Optional[str], int]:
        """Decode ``\\uXXXX`` (and a following low surrogate) with ``pos`` at ``u``.

        Returns the character, or None for an invalid escape, and the index
        of the last character consumed.
        """
        code = self._hex4(pos + 1)
        pos += 4
        if 0xDC00 <= code <= 0xDFFF or code == 0:
            return None, pos
        if 0xD800 <= code <= 0xDBFF:
            if self.text[pos + 1:pos + 3] != "\\u":
                return None, pos
            low = self._hex4(pos + 3)
            pos += 6
            if not 0xDC00 <= low <= 0xDFFF:
                return None, pos
            code = 0x10000 + (((code & 0x3FF) << 10) | (low & 0x3FF))
        return chr(code), pos

    def array(self, node: JsonNode, pos: int) -> int:
        node.type = JsonType.ARRAY
        pos = self.skip(pos + 1)
        if self._char(pos) == "]":
            return pos + 1
        while True:
            child = JsonNode(JsonType.NULL)
            node.children.append(child)
            pos = self.skip(self.value(child, self.skip(pos)))
            if self._char(pos) != ",":
                break
            pos += 1
        if self._char(pos) == "]":
            return pos + 1
        raise self._fail(pos, "malformed array")

    def object(self, node: JsonNode, pos: int) -> int:
        node.type = JsonType.OBJECT
        pos = self.skip(pos + 1)
        if self._char(pos) == "}":
            return pos + 1
        while True:
            child = JsonNode(JsonType.NULL)
            node.children.append(child)
            child.name, pos = self.string(self.skip(pos))
            pos = self.skip(pos)
            if self._char(pos) != ":":
                raise self._fail(pos, "expected ':'")
            pos = self.skip(self.value(child, self.skip(pos + 1)))
            if self._char(pos) != ",":
                break
            pos += 1
        if self._char(pos) == "}":
            return pos + 1
        raise self._fail(pos, "malformed object")


def parse_with_end(text: str, require_end: bool = False) -> tuple[JsonNode, int]:
    """Parse ``text``; return the tree and the index just past the value.

    With ``require_end``, anything but whitespace and comments after the
    value is an error. Raises :class:`JsonParseError` on failure.
    """
    reader = _Reader(text)
    root = JsonNode(JsonType.NULL)
    end = reader.value(root, reader.skip(0))
    if require_end:
        end = reader.skip(end)
        if end < reader.size:
            raise JsonParseError("unexpected trailing text", end)
    return root, end


def parse(text: str) -> JsonNode:
    """Parse the first JSON value in ``text``; trailing text is ignored."""
    return parse_with_end(text, False)[0]


def _format_number(node: JsonNode) -> str:
    value = node.value_double
    if _INT_MIN <= value <= _INT_MAX and abs(node.value_int - value) <= _EPSILON:
        return "%d" % node.value_int
    if abs(math.floor(value) - value) <= _EPSILON and abs(value) < 1.0e60:
        return "%.0f" % value
    if abs(value) < 1.0e-6 or abs(value) > 1.0e9:
        return "%e" % value
    return "%f" % value


def _quote(text: Optional[str]) -> str:
    if text is None:
        return ""
    parts = ['"']
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) < 32:
            parts.append("\\u%04x" % ord(char))
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _render(node: JsonNode, depth: int, fmt: bool) -> str:
    kind = node.type
    if kind == JsonType.NULL:
        return "null"
    if kind == JsonType.FALSE:
        return "false"
    if kind == JsonType.TRUE:
        return "true"
    if kind == JsonType.NUMBER:
        return _format_number(node)
    if kind == JsonType.STRING:
        return _quote(node.value_string)
    if kind == JsonType.ARRAY:
        if not node.children:
            return "[]"
        separator = ", " if fmt else ","
        return "[" + separator.join(_render(c, depth + 1, fmt) for c in node.children) + "]"
    if kind == JsonType.OBJECT:
        return _render_object(node, depth, fmt)
    raise ValueError(f"unknown JSON type: {kind!r}")


def _render_object(node: JsonNode, depth: int, fmt: bool) -> str:
    if not node.children:
        return "{\n" + "\t" * max(depth - 1, 0) + "}" if fmt else "{}"
    depth += 1
    indent = "\t" * depth if fmt else ""
    colon = ":\t" if fmt else ":"
    newline = "\n" if fmt else ""
    members = [
        indent + _quote(child.name) + colon + _render(child, depth, fmt)
        for child in node.children
    ]
    body = ("," + newline).join(members)
    closing = "\t" * (depth - 1) if fmt else ""
    return "{" + newline + body + newline + closing + "}"


def dumps(node: JsonNode) -> str:
    """Render ``node`` as formatted JSON text."""
    return _render(node, 0, True)


def dumps_unformatted(node: JsonNode) -> str:
    """Render ``node`` as compact JSON text."""
    return _render(node, 0, False)


def minify(text: str) -> str:
    """Strip whitespace and comments from JSON text, leaving strings intact."""
    out: list[str] = []
    size = len(text)
    i = 0
    while i < size:
        char = text[i]
        if char in " \t\r\n":
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = size if end < 0 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i)
            i = size if end < 0 else end + 2
        elif char == '"':
            out.append(char)
            i += 1
            while i < size and text[i] != '"':
                if text[i] == "\\" and i + 1 < size:
                    out.append(text[i])
                    i += 1
                out.append(text[i])
                i += 1
            if i < size:
                out.append(text[i])
                i += 1
        else:
            out.append(char)
            i += 1
    return "".join(out)