import pytest

from shellkit.fnvdict import (
    DEFAULT_CAPACITY,
    FNV_OFFSET,
    FnvDict,
    fnv_index,
)


def test_empty_key_hash_is_offset_basis():
    assert fnv_index("", 1 << 64) == FNV_OFFSET


def test_known_fnv1a_vector():
    assert fnv_index("a", 1 << 64) == 0xAF63DC4C8601EC8C


@pytest.mark.parametrize("key", ["", "PATH", "HOME", "é", "a long key value"])
@pytest.mark.parametrize("capacity", [1, 32, 64, 1024])
def test_index_in_range(key, capacity):
    index = fnv_index(key, capacity)
    assert 0 <= index < capacity
    assert fnv_index(key, capacity) == index


def test_index_masks_full_hash():
    full = fnv_index("PATH", 1 << 64)
    assert fnv_index("PATH", 32) == full & 31


def test_new_dict_is_empty():
    d = FnvDict()
    assert len(d) == 0
    assert d.capacity == DEFAULT_CAPACITY
    assert d.get("missing") is None
    assert "missing" not in d


def test_set_and_get():
    d = FnvDict()
    d.set("HOME", "/home/user")
    assert d.get("HOME") == "/home/user"
    assert "HOME" in d
    assert len(d) == 1


def test_overwrite_keeps_length():
    d = FnvDict()
    d.set("key", 1)
    d.set("key", 2)
    assert d.get("key") == 2
    assert len(d) == 1


def test_growth_doubles_capacity():
    d = FnvDict()
    for i in range(DEFAULT_CAPACITY // 2):
        d.set(f"k{i}", i)
    assert d.capacity == DEFAULT_CAPACITY
    d.set("extra", -1)
    assert d.capacity == DEFAULT_CAPACITY * 2
    assert len(d) == DEFAULT_CAPACITY // 2 + 1


def test_many_keys_survive_expansion():
    d = FnvDict()
    keys = [f"name_{i}" for i in range(500)]
    for i, key in enumerate(keys):
        d.set(key, i)
    assert len(d) == len(keys)
    assert all(d.get(key) == i for i, key in enumerate(keys))
    assert d.capacity > len(d)


def test_non_ascii_keys():
    d = FnvDict()
    d.set("é", "accent")
    d.set("e", "plain")
    assert d.get("é") == "accent"
    assert d.get("e") == "plain"


def test_non_string_key_rejected():
    d = FnvDict()
    with pytest.raises(TypeError):
        d.set(1, "x")
    assert 1 not in d