import logging

from pytest import mark, raises

from flatmap import KeyOrder, reverse_cmp
from flatmap.ordering import NATURAL, make_order
from flatmap.search import (
    as_entries,
    bounds,
    find,
    insert_sorted,
    is_strictly_sorted,
    lookup,
    remove_sorted,
    sort_unique,
)

ENTRIES = [(1, "a"), (3, "c"), (5, "e")]


@mark.parametrize(
    "key, expected",
    [
        (0, (False, 0)),
        (1, (True, 0)),
        (2, (False, 1)),
        (3, (True, 1)),
        (5, (True, 2)),
        (6, (False, 3)),
    ],
)
def test_find(key, expected):
    assert find(ENTRIES, key, NATURAL) == expected


def test_find_empty():
    assert find([], 1, NATURAL) == (False, 0)


def test_lookup():
    assert lookup(ENTRIES, 3, NATURAL) == (3, "c")
    assert lookup(ENTRIES, 4, NATURAL) is None


def test_insert_sorted_returns_replaced_entry():
    entries = list(ENTRIES)
    assert insert_sorted(entries, 3, "C", NATURAL) == (3, "c")
    assert entries == [(1, "a"), (3, "C"), (5, "e")]
    assert insert_sorted(entries, 4, "d", NATURAL) is None
    assert entries == [(1, "a"), (3, "C"), (4, "d"), (5, "e")]


def test_remove_sorted():
    entries = list(ENTRIES)
    assert remove_sorted(entries, 2, NATURAL) is None
    assert remove_sorted(entries, 1, NATURAL) == (1, "a")
    assert entries == [(3, "c"), (5, "e")]


def test_bounds_inverted_interval_is_empty():
    start, stop = bounds(ENTRIES, NATURAL, 5, 1)
    assert start == stop


def test_sort_unique_keeps_last_given():
    pairs = [(2, "x"), (1, "y"), (2, "z"), (0, "p"), (1, "q")]
    assert sort_unique(pairs, NATURAL) == [(0, "p"), (1, "q"), (2, "z")]


def test_sort_unique_logs_dropped_duplicates(caplog):
    with caplog.at_level(logging.DEBUG, logger="flatmap.search"):
        sort_unique([(1, "a"), (1, "b"), (1, "c")], NATURAL)
    assert "dropped 2 duplicate keys" in caplog.text


def test_sort_unique_with_cmp():
    order = KeyOrder(reverse_cmp)
    assert sort_unique([(1, "a"), (3, "b"), (1, "c")], order) == [(3, "b"), (1, "c")]


def test_as_entries_rejects_non_pairs():
    with raises(ValueError):
        as_entries([(1, 2, 3)])
    with raises(TypeError):
        as_entries([1])


def test_is_strictly_sorted():
    assert is_strictly_sorted(ENTRIES, NATURAL)
    assert not is_strictly_sorted([(1, "a"), (1, "b")], NATURAL)
    assert not is_strictly_sorted([(2, "a"), (1, "b")], NATURAL)
    assert is_strictly_sorted([(2, "a"), (1, "b")], make_order(reverse_cmp))


def test_key_order():
    assert make_order(None) is NATURAL
    assert NATURAL.compare(1, 2) < 0
    assert NATURAL.compare(2, 1) > 0
    assert NATURAL.compare(2, 2) == 0
    order = make_order(reverse_cmp)
    assert order.compare(1, 2) > 0
    assert order == KeyOrder(reverse_cmp)
    with raises(TypeError):
        KeyOrder("not callable")
