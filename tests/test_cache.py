import io

import pytest

from pcskit.cache import WriteCache


class ShortWriter(io.BytesIO):
    def write(self, data):
        super().write(data[:1])
        return 1


def test_blocks_kept_in_offset_order():
    cache = WriteCache(io.BytesIO())
    cache.add(6, b"world")
    cache.add(0, b"hello ")
    assert [b.start for b in cache] == [0, 6]
    assert len(cache) == 2


def test_total_size_sums_blocks():
    cache = WriteCache(io.BytesIO())
    cache.add(6, b"world")
    cache.add(0, b"hello ")
    assert cache.total_size == len(b"world") + len(b"hello ")


def test_flush_writes_at_offsets():
    fp = io.BytesIO()
    cache = WriteCache(fp)
    cache.add(6, b"world")
    cache.add(0, b"hello ")
    cache.flush()
    assert fp.getvalue() == b"hello world"


def test_flush_fills_gap_with_zeros():
    fp = io.BytesIO()
    cache = WriteCache(fp)
    cache.add(3, b"xy")
    cache.flush()
    assert fp.getvalue() == b"\x00\x00\x00xy"


def test_equal_offsets_keep_insertion_order_and_last_wins():
    fp = io.BytesIO()
    cache = WriteCache(fp)
    cache.add(0, b"aaa")
    cache.add(0, b"bbb")
    assert [b.data for b in cache] == [b"aaa", b"bbb"]
    cache.flush()
    assert fp.getvalue() == b"bbb"


def test_data_is_copied():
    buf = bytearray(b"abc")
    cache = WriteCache(io.BytesIO())
    cache.add(0, buf)
    buf[0] = ord("z")
    assert next(iter(cache)).data == b"abc"


def test_reset_empties_cache():
    cache = WriteCache(io.BytesIO())
    cache.add(0, b"abc")
    cache.reset()
    assert len(cache) == 0
    assert cache.total_size == 0
    assert list(cache) == []


def test_flush_keeps_blocks():
    fp = io.BytesIO()
    cache = WriteCache(fp)
    cache.add(0, b"abc")
    cache.flush()
    assert len(cache) == 1


def test_short_write_raises():
    cache = WriteCache(ShortWriter())
    cache.add(0, b"abc")
    with pytest.raises(OSError):
        cache.flush()


def test_flush_without_file_raises():
    cache = WriteCache()
    cache.add(0, b"abc")
    with pytest.raises(OSError):
        cache.flush()


def test_block_size_matches_data():
    cache = WriteCache(io.BytesIO())
    block = cache.add(10, b"12345")
    assert block.size == len(b"12345")
    assert block.start == 10