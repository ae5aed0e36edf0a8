from pytest import raises

from flatmap import FlatMap, FrozenFlatMap, reverse_cmp


def sample():
    return FrozenFlatMap([(1, 2), (3, 4), (5, 6)])


def test_contains_key():
    m = sample()
    assert m.contains_key(1)
    assert m.contains_key(3)
    assert 5 in m
    assert not m.contains_key(-100)
    assert 100 not in m


def test_get():
    m = sample()
    assert m.get(1) == 2
    assert m.get(3) == 4
    assert m.get(5) == 6
    assert m.get(-100) is None
    assert m.get(100) is None
    with raises(KeyError):
        m[100]


def test_get_key_value():
    m = sample()
    assert m.get_key_value(1) == (1, 2)
    assert m.get_key_value(3) == (3, 4)
    assert m.get_key_value(-100) is None


def test_range():
    m = FrozenFlatMap([(1, 2), (3, 4), (5, 6), (7, 8), (9, 10)])
    assert list(m.irange(2, 8)) == [(3, 4), (5, 6), (7, 8)]
    assert list(m.irange(2, 8, reverse=True)) == [(7, 8), (5, 6), (3, 4)]


def test_len():
    assert len(sample()) == 3
    assert len(FrozenFlatMap()) == 0
    assert not FrozenFlatMap()


def test_iter():
    m = sample()
    assert list(m.items()) == [(1, 2), (3, 4), (5, 6)]
    assert list(m.keys()) == [1, 3, 5]
    assert list(m.values()) == [2, 4, 6]
    assert list(reversed(m)) == [5, 3, 1]


def test_sorts_and_deduplicates_last_writer_wins():
    m = FrozenFlatMap.from_unsorted([(2, "x"), (1, "y"), (2, "z")])
    assert list(m.items()) == [(1, "y"), (2, "z")]


def test_has_no_mutators():
    m = sample()
    for name in ("insert", "remove", "pop", "popitem", "clear", "update", "setdefault"):
        assert not hasattr(m, name)
    with raises(TypeError):
        m[7] = 8
    with raises(TypeError):
        del m[1]


def test_hash_and_equality():
    a = sample()
    b = FrozenFlatMap([(5, 6), (3, 4), (1, 2)])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a == {1: 2, 3: 4, 5: 6}
    assert a == FlatMap([(1, 2), (3, 4), (5, 6)])
    assert FlatMap([(1, 2), (3, 4), (5, 6)]) == a
    assert a != FlatMap([(1, 2)])


def test_equality_with_flat_map_and_unhashable_keys():
    def by_len(x, y):
        return len(x) - len(y)

    m = FlatMap([([1], "one"), ([1, 2], "two")], cmp=by_len)
    f = m.freeze()
    assert m == f
    assert f == m
    m.insert([0, 0, 0], "three")
    assert f != m
    assert m != f


def test_thaw_keeps_order_and_is_independent():
    f = FrozenFlatMap([(1, "a"), (2, "b")], cmp=reverse_cmp)
    m = f.thaw()
    assert isinstance(m, FlatMap)
    assert list(m) == [2, 1]
    m.insert(0, "z")
    assert list(m) == [2, 1, 0]
    assert list(f) == [2, 1]


def test_freeze_thaw_round_trip():
    m = FlatMap((k, k * k) for k in range(10))
    assert m.freeze().thaw() == m


def test_repr():
    assert repr(sample()) == "FrozenFlatMap([(1, 2), (3, 4), (5, 6)])"
