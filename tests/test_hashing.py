import pytest

from aoc2025.hashing import HashMap, HashSet, hash_int


def test_hash_int_of_non_negative_is_identity():
    assert hash_int(0) == 0
    assert hash_int(12345) == 12345


def test_hash_int_of_negative_wraps_to_unsigned():
    assert hash_int(-1) == 2**64 - 1


def test_map_get_and_retrieve_values():
    hash_map = HashMap()
    for i in range(100):
        assert hash_map.try_add(i, i + 1) is True
    for i in range(100):
        assert hash_map[i] == i + 1
    assert len(hash_map) == 100


def test_map_ensure_capacity_prevents_resizing():
    hash_map = HashMap()
    hash_map.ensure_capacity(100)
    initial = hash_map.bucket_count()
    assert initial == 160
    for i in range(100):
        assert hash_map.try_add(i, i + 1)
    assert hash_map.bucket_count() == initial


def test_map_ensure_capacity_never_shrinks():
    hash_map = HashMap()
    hash_map.ensure_capacity(3)
    assert hash_map.bucket_count() == 10


def test_map_iterator_iterates():
    hash_map = HashMap()
    for i in range(1, 101):
        hash_map.try_add(i, i * 2)
    keys = list(hash_map)
    assert sum(keys) == 5050
    assert sum(hash_map.values()) == 10100
    assert len(keys) == 100


def test_map_contains_key():
    hash_map = HashMap()
    for i in range(5):
        hash_map.try_add(i, i)
    for i in range(5):
        assert i in hash_map
    assert 5 not in hash_map


def test_map_resizes_past_load_factor():
    hash_map = HashMap()
    for i in range(7):
        hash_map[i] = i
    assert hash_map.bucket_count() == 10
    hash_map[7] = 7
    assert hash_map.bucket_count() == 20
    assert sorted(hash_map.items()) == [(i, i) for i in range(8)]


def test_map_try_add_does_not_overwrite():
    hash_map = HashMap()
    assert hash_map.try_add(3, "a") is True
    assert hash_map.try_add(3, "b") is False
    assert hash_map[3] == "a"
    assert len(hash_map) == 1


def test_map_setitem_overwrites():
    hash_map = HashMap()
    hash_map[3] = "a"
    hash_map[3] = "b"
    assert hash_map[3] == "b"
    assert len(hash_map) == 1


def test_map_missing_key_raises():
    hash_map = HashMap()
    hash_map[1] = 10
    with pytest.raises(KeyError):
        hash_map[42]
    with pytest.raises(KeyError):
        del hash_map[42]
    assert 42 not in hash_map
    assert len(hash_map) == 1
    assert hash_map[1] == 10


def test_map_delete_removes_entry():
    hash_map = HashMap()
    hash_map[1] = 10
    hash_map[2] = 20
    del hash_map[1]
    assert 1 not in hash_map
    assert hash_map[2] == 20
    assert len(hash_map) == 1


def test_map_get_or_add_default():
    hash_map = HashMap()
    assert hash_map.get_or_add_default(4, 0) == 0
    assert len(hash_map) == 1
    hash_map[4] = hash_map.get_or_add_default(4, 0) + 7
    assert hash_map.get_or_add_default(4, 0) == 7


def test_map_with_colliding_hash_function():
    hash_map = HashMap(lambda key: 0)
    for i in range(20):
        hash_map[i] = -i
    assert [hash_map[i] for i in range(20)] == [-i for i in range(20)]
    del hash_map[10]
    assert 10 not in hash_map
    assert len(hash_map) == 19


def test_map_negative_keys():
    hash_map = HashMap()
    hash_map[-5] = "neg"
    assert hash_map[-5] == "neg"


def test_map_mutation_during_iteration_raises():
    hash_map = HashMap()
    for i in range(3):
        hash_map[i] = i
    with pytest.raises(RuntimeError):
        for key in hash_map:
            hash_map[key + 100] = 0
    assert [hash_map[i] for i in range(3)] == [0, 1, 2]


def test_set_add_values():
    hash_set = HashSet()
    for i in range(100):
        assert hash_set.try_add(i) is True
    for i in range(100):
        assert i in hash_set
    assert len(hash_set) == 100


def test_set_try_add_duplicate():
    hash_set = HashSet()
    assert hash_set.try_add(1) is True
    assert hash_set.try_add(1) is False
    assert len(hash_set) == 1


def test_set_try_remove():
    hash_set = HashSet()
    hash_set.add(1)
    hash_set.add(2)
    assert hash_set.try_remove(1) is True
    assert hash_set.try_remove(1) is False
    assert sorted(hash_set) == [2]


def test_set_discard_missing_is_silent():
    hash_set = HashSet()
    hash_set.add(9)
    hash_set.discard(8)
    hash_set.discard(9)
    assert len(hash_set) == 0


def test_set_ensure_capacity():
    hash_set = HashSet()
    hash_set.ensure_capacity(50)
    assert hash_set.bucket_count() == 80
    for i in range(60):
        hash_set.add(i)
    assert hash_set.bucket_count() == 80


def test_set_operations_produce_hash_sets():
    first = HashSet()
    second = HashSet()
    for i in range(5):
        first.add(i)
    for i in range(3, 8):
        second.add(i)
    both = first & second
    assert isinstance(both, HashSet)
    assert sorted(both) == [3, 4]
    assert sorted(first | second) == list(range(8))