import pytest

from pcskit.hashtable import Hashtable, hash1, hash2, hash3

M = 0xFFFFFFFF


def test_empty_key_hashes_are_initial_values():
    assert hash1("") == 1
    assert hash2("") == 0
    assert hash3("") == 0


@pytest.mark.parametrize("func", [hash1, hash2, hash3])
def test_ignore_case_folds_ascii(func):
    assert func("HeLLo World", True) == func("hello world", False)
    assert func("HeLLo", True) == func("hello", True)


@pytest.mark.parametrize("func", [hash1, hash2, hash3])
def test_str_and_utf8_bytes_agree(func):
    text = "目录/File"
    assert func(text) == func(text.encode("utf-8"))


@pytest.mark.parametrize("func", [hash1, hash2, hash3])
def test_hashes_fit_in_32_bits(func):
    for key in ["a", "abcdefghijklmnop" * 8, "\u00ff\u00fe", b"\xff\xff\xff"]:
        assert 0 <= func(key) <= M


def test_capital_after_high_byte_not_folded():
    key = b"\xc3A"
    assert hash3(key, True) == hash3(key, False)
    assert hash3(key, True) != hash3(b"\xc3a", True)


def test_minimum_capacity():
    table = Hashtable(3)
    assert table.capacity == 17
    assert table.real_capacity >= table.capacity


def test_add_get_contains():
    table = Hashtable()
    table.add("alpha", 1)
    table.add("beta", 2)
    assert table.get("alpha") == 1
    assert table.get("beta") == 2
    assert "alpha" in table
    assert "gamma" not in table
    assert table.get("gamma", "missing") == "missing"
    assert len(table) == 2


def test_add_duplicate_raises():
    table = Hashtable()
    table.add("key", 1)
    with pytest.raises(KeyError):
        table.add("key", 2)
    assert table.get("key") == 1
    assert len(table) == 1


def test_ignore_case_table():
    table = Hashtable(ignore_case=True)
    table.add("Config", "v")
    assert "CONFIG" in table
    assert table.get("config") == "v"
    with pytest.raises(KeyError):
        table.add("CONFIG", "w")


def test_case_sensitive_table():
    table = Hashtable()
    table.add("Config", 1)
    table.add("config", 2)
    assert table.get("Config") == 1
    assert table.get("config") == 2


def test_add_none_value_still_present():
    table = Hashtable()
    table.add("flag")
    assert "flag" in table
    assert table.get("flag", "default") is None


def test_growth_keeps_all_entries():
    table = Hashtable()
    keys = [f"key{i}" for i in range(200)]
    for i, key in enumerate(keys):
        table.add(key, i)
    assert len(table) == 200
    assert table.capacity > 17
    assert all(table.get(key) == i for i, key in enumerate(keys))
    assert sorted(table.keys()) == sorted(keys)


def test_expand_explicitly():
    table = Hashtable()
    for i in range(10):
        table.add(str(i), i)
    table.expand(100)
    assert table.capacity == 100
    assert len(table) == 10
    assert sorted(table) == list(range(10))


def test_expand_rejects_zero():
    with pytest.raises(ValueError):
        Hashtable().expand(0)


def test_set_returns_old_value():
    table = Hashtable()
    assert table.set("a", 1) is None
    assert len(table) == 1
    assert table.set("a", 2) == 1
    assert table.get("a") == 2
    assert len(table) == 1


def test_remove():
    table = Hashtable()
    table.add("a", "x")
    table.add("b", "y")
    assert table.remove("a") == "x"
    assert "a" not in table
    assert len(table) == 1
    with pytest.raises(KeyError):
        table.remove("a")


def test_clear():
    table = Hashtable()
    for key in "abc":
        table.add(key, key)
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    assert "a" not in table


def test_iteration_yields_values_and_keys_preserve_text():
    table = Hashtable(ignore_case=True)
    table.add("Name", 1)
    table.add("size", 2)
    assert sorted(table) == [1, 2]
    assert sorted(table.keys()) == ["Name", "size"]