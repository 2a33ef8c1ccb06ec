"""A chained hash table keyed by strings, with optional case-insensitive keys.

Entries are identified by two independent 32-bit hashes of the key rather
than by comparing the key text, and bucketed by a third hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

EXTEND_MULTIPLIER = 1.75
MIN_CAPACITY = 17

_MASK = 0xFFFFFFFF
_MISSING = object()

Key = Union[str, bytes]


def _key_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def _codes(key: Key, ignore_case: bool) -> Iterator[int]:
    """Yield the per-byte values that feed the hash functions.

    Bytes of 0x80 and above are sign-extended, as a signed char would be.
    With ``ignore_case``, ASCII capitals are folded unless the preceding byte
    has its high bit set (so that multi-byte sequences are left alone).
    """
    data = _key_bytes(key)
    for i, byte in enumerate(data):
        code = byte if byte < 0x80 else (byte | 0xFFFFFF00)
        if (
            ignore_case
            and 0x41 <= byte <= 0x5A
            and (i == 0 or not data[i - 1] & 0x80)
        ):
            code += 0x20
        yield code


def hash1(key: Key, ignore_case: bool = False) -> int:
    """Bucket-selection hash of ``key``."""
    nr, nr2 = 1, 4
    for code in _codes(key, ignore_case):
        nr = (nr ^ ((((nr & 63) + nr2) * code) + (nr << 8))) & _MASK
        nr2 = (nr2 + 3) & _MASK
    return nr


def hash2(key: Key, ignore_case: bool = False) -> int:
    """First identity hash of ``key`` (multiply then xor)."""
    value = 0
    for code in _codes(key, ignore_case):
        value = ((value * 16777619) & _MASK) ^ code
    return value


def hash3(key: Key, ignore_case: bool = False) -> int:
    """Second identity hash of ``key`` (multiply by 31 and add)."""
    value = 0
    for code in _codes(key, ignore_case):
        value = (31 * value + code) & _MASK
    return value


@dataclass
class _Node:
    key: Key
    hash_a: int
    hash_b: int
    value: Any


class Hashtable:
    """Hash table whose entries are matched by a pair of key hashes."""

    def __init__(self, capacity: int = MIN_CAPACITY, ignore_case: bool = False) -> None:
        self.capacity = max(int(capacity), MIN_CAPACITY)
        self.real_capacity = int(self.capacity * EXTEND_MULTIPLIER)
        self.ignore_case = bool(ignore_case)
        self._buckets: list[list[_Node]] = [[] for _ in range(self.real_capacity)]
        self._count = 0

    def _hashes(self, key: Key) -> tuple[int, int, int]:
        return (
            hash1(key, self.ignore_case),
            hash2(key, self.ignore_case),
            hash3(key, self.ignore_case),
        )

    @staticmethod
    def _find(bucket: list[_Node], hash_a: int, hash_b: int) -> _Node | None:
        return next(
            (n for n in bucket if n.hash_a == hash_a and n.hash_b == hash_b), None
        )

    def _bucket_for(self, key: Key) -> tuple[list[_Node], int, int]:
        pos_hash, hash_a, hash_b = self._hashes(key)
        return self._buckets[pos_hash % self.real_capacity], hash_a, hash_b

    def expand(self, capacity: int) -> None:
        """Rebuild the table for ``capacity`` entries, keeping every entry."""
        real_capacity = int(capacity * EXTEND_MULTIPLIER)
        if real_capacity < 1:
            raise ValueError(f"capacity too small: {capacity}")
        buckets: list[list[_Node]] = [[] for _ in range(real_capacity)]
        count = 0
        for node in self._nodes():
            buckets[hash1(node.key, self.ignore_case) % real_capacity].append(node)
            count += 1
        self._buckets = buckets
        self.capacity = capacity
        self.real_capacity = real_capacity
        self._count = count

    def add(self, key: Key, value: Any = None) -> None:
        """Add a new entry; raise KeyError if ``key`` is already present."""
        if self._count >= self.capacity:
            self.expand(self._count * 2)
        bucket, hash_a, hash_b = self._bucket_for(key)
        if self._find(bucket, hash_a, hash_b) is not None:
            raise KeyError(key)
        bucket.append(_Node(key, hash_a, hash_b, value))
        self._count += 1

    def set(self, key: Key, value: Any) -> Any:
        """Set the value of ``key``, adding it if absent.

        Returns the previous value, or None when the key was new.
        """
        bucket, hash_a, hash_b = self._bucket_for(key)
        node = self._find(bucket, hash_a, hash_b)
        if node is not None:
            old, node.value = node.value, value
            return old
        bucket.append(_Node(key, hash_a, hash_b, value))
        self._count += 1
        return None

    def remove(self, key: Key) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        bucket, hash_a, hash_b = self._bucket_for(key)
        node = self._find(bucket, hash_a, hash_b)
        if node is None:
            raise KeyError(key)
        bucket.remove(node)
        self._count -= 1
        return node.value

    def get(self, key: Key, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        bucket, hash_a, hash_b = self._bucket_for(key)
        node = self._find(bucket, hash_a, hash_b)
        return default if node is None else node.value

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def _nodes(self) -> Iterator[_Node]:
        for bucket in self._buckets:
            yield from bucket

    def keys(self) -> list[Key]:
        """Keys as they were first added, in table order."""
        return [node.key for node in self._nodes()]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        bucket, hash_a, hash_b = self._bucket_for(key)
        return self._find(bucket, hash_a, hash_b) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored values, in table order."""
        return (node.value for node in self._nodes())