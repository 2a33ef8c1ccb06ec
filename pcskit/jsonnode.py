"""A JSON document tree whose nodes keep their type, number forms and member name.

Arrays and objects hold their members in order. Object members are looked up
by name without regard to ASCII case, and the first match wins.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _same_name(left: Optional[str], right: Optional[str]) -> bool:
    if left is None or right is None:
        return left is right
    return left.translate(_ASCII_LOWER) == right.translate(_ASCII_LOWER)


def _to_int(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value)


class JsonType(IntEnum):
    """Kinds of JSON value."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


@dataclass
class JsonNode:
    """One JSON value; arrays and objects hold their members in ``children``."""

    type: JsonType
    value_string: Optional[str] = None
    value_int: int = 0
    value_double: float = 0.0
    name: Optional[str] = None
    children: list["JsonNode"] = field(default_factory=list)

    @classmethod
    def null(cls) -> "JsonNode":
        """A null value."""
        return cls(JsonType.NULL)

    @classmethod
    def true(cls) -> "JsonNode":
        """The value true."""
        return cls(JsonType.TRUE)

    @classmethod
    def false(cls) -> "JsonNode":
        """The value false."""
        return cls(JsonType.FALSE)

    @classmethod
    def boolean(cls, value: bool) -> "JsonNode":
        """True or false, following ``value``."""
        return cls(JsonType.TRUE if value else JsonType.FALSE)

    @classmethod
    def number(cls, value: float) -> "JsonNode":
        """A number; ``value_int`` holds it truncated toward zero."""
        as_float = float(value)
        return cls(JsonType.NUMBER, value_int=_to_int(as_float), value_double=as_float)

    @classmethod
    def string(cls, value: str) -> "JsonNode":
        """A string value."""
        return cls(JsonType.STRING, value_string=value)

    @classmethod
    def array(cls) -> "JsonNode":
        """An empty array."""
        return cls(JsonType.ARRAY)

    @classmethod
    def object(cls) -> "JsonNode":
        """An empty object."""
        return cls(JsonType.OBJECT)

    @classmethod
    def from_numbers(cls, numbers: Iterable[float]) -> "JsonNode":
        """An array of the given numbers."""
        node = cls(JsonType.ARRAY)
        node.children.extend(cls.number(n) for n in numbers)
        return node

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "JsonNode":
        """An array of the given strings."""
        node = cls(JsonType.ARRAY)
        node.children.extend(cls.string(s) for s in strings)
        return node

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["JsonNode"]:
        return iter(self.children)

    def _index(self, which: int) -> Optional[int]:
        which = max(which, 0)
        return which if which < len(self.children) else None

    def _name_index(self, name: Optional[str]) -> Optional[int]:
        return next(
            (i for i, child in enumerate(self.children) if _same_name(child.name, name)),
            None,
        )

    def item(self, index: int) -> Optional["JsonNode"]:
        """Member at ``index`` (negative counts as 0), or None if out of range."""
        position = self._index(index)
        return None if position is None else self.children[position]

    def get(self, name: Optional[str]) -> Optional["JsonNode"]:
        """First member named ``name``, ignoring ASCII case, or None."""
        position = self._name_index(name)
        return None if position is None else self.children[position]

    def append(self, item: Optional["JsonNode"]) -> None:
        """Append ``item`` as the last member; None is ignored."""
        if item is not None:
            self.children.append(item)

    def add(self, name: str, item: Optional["JsonNode"]) -> None:
        """Append ``item`` as the last member under ``name``; None is ignored."""
        if item is None:
            return
        item.name = name
        self.children.append(item)

    def detach_index(self, which: int) -> Optional["JsonNode"]:
        """Remove and return the member at ``which``, or None if out of range."""
        position = self._index(which)
        return None if position is None else self.children.pop(position)

    def delete_index(self, which: int) -> None:
        """Remove the member at ``which``, if there is one."""
        self.detach_index(which)

    def detach(self, name: Optional[str]) -> Optional["JsonNode"]:
        """Remove and return the first member named ``name``, or None."""
        position = self._name_index(name)
        return None if position is None else self.children.pop(position)

    def delete(self, name: Optional[str]) -> None:
        """Remove the first member named ``name``, if there is one."""
        self.detach(name)

    def replace_index(self, which: int, new_item: "JsonNode") -> None:
        """Put ``new_item`` in place of the member at ``which``, if there is one."""
        position = self._index(which)
        if position is not None:
            self.children[position] = new_item

    def replace(self, name: str, new_item: "JsonNode") -> None:
        """Put ``new_item``, named ``name``, in place of the first member so named."""
        position = self._name_index(name)
        if position is not None:
            new_item.name = name
            self.children[position] = new_item

    def duplicate(self, recurse: bool = True) -> "JsonNode":
        """A copy of this node; members are copied too when ``recurse`` is true."""
        copy = JsonNode(
            self.type,
            value_string=self.value_string,
            value_int=self.value_int,
            value_double=self.value_double,
            name=self.name,
        )
        if recurse:
            copy.children = [child.duplicate(True) for child in self.children]
        return copy