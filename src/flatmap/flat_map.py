"""Mutable map backed by one sorted list of ``(key, value)`` entries.

Asymptotics, for ``n`` entries:

========== ========= ========= =========
operation  average   worst     best
========== ========= ========= =========
lookup     O(log n)  O(log n)  O(log n)
insert     O(n)      O(n)      O(1)
remove     O(n)      O(n)      O(1)
========== ========= ========= =========

The O(1) best case is insertion of a key larger than every stored key, and
removal of the largest key. Both are checked against the last entry before
any search, so neither shifts the list.
"""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Generic, Iterator, Optional, TypeVar

from .frozen import FrozenFlatMap
from .ordering import Cmp, KeyOrder, make_order
from .search import Entry, Pairs, bounds, insert_sorted, lookup, remove_sorted, sort_unique
from .views import SortedItemsView, SortedKeysView, SortedValuesView, iter_entries

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class FlatMap(MutableMapping, Generic[K, V]):
    """Ordered mapping kept as a sorted, duplicate free list of entries.

    ``FlatMap(pairs)`` accepts a mapping or an iterable of ``(key, value)``
    pairs in any order; when a key repeats, the pair given last wins.

    Keys must not change their relative order while stored, and the map must
    not gain or lose keys while an iterator over it is live (the iterator
    raises ``RuntimeError`` if it does).
    """

    __slots__ = ("_items", "_order", "_version")

    def __init__(self, pairs: Optional[Pairs] = None, /, *, cmp: Optional[Cmp] = None) -> None:
        self._order = make_order(cmp)
        self._version = 0
        self._items: list[Entry] = [] if pairs is None else sort_unique(pairs, self._order)

    @classmethod
    def from_unsorted(cls, pairs: Pairs, *, cmp: Optional[Cmp] = None) -> "FlatMap[K, V]":
        return cls(pairs, cmp=cmp)

    @classmethod
    def _from_sorted(cls, entries: list[Entry], order: KeyOrder) -> "FlatMap[K, V]":
        self = cls.__new__(cls)
        self._order = order
        self._version = 0
        self._items = entries
        return self

    @property
    def order(self) -> KeyOrder:
        return self._order

    # lookup

    def __getitem__(self, key: K) -> V:
        entry = lookup(self._items, key, self._order)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def get(self, key: K, default: Any = None) -> Any:
        entry = lookup(self._items, key, self._order)
        return default if entry is None else entry[1]

    def __contains__(self, key: object) -> bool:
        return lookup(self._items, key, self._order) is not None

    def contains_key(self, key: K) -> bool:
        return key in self

    def get_key_value(self, key: K) -> Optional[tuple[K, V]]:
        return lookup(self._items, key, self._order)

    def irange(
        self,
        minimum: Optional[K] = None,
        maximum: Optional[K] = None,
        inclusive: tuple[bool, bool] = (True, True),
        reverse: bool = False,
    ) -> Iterator[tuple[K, V]]:
        start, stop = bounds(self._items, self._order, minimum, maximum, inclusive)
        return iter_entries(self, start=start, stop=stop, reverse=reverse)

    # modification

    def _store(self, key: K, value: V) -> Optional[Entry]:
        items = self._items
        if items:
            last = items[-1]
            c = self._order.compare(last[0], key)
            if c == 0:
                items[-1] = (last[0], value)
                return last
            if c > 0:
                old = insert_sorted(items, key, value, self._order)
                if old is None:
                    self._version += 1
                return old
        items.append((key, value))
        self._version += 1
        return None

    def _take(self, key: K) -> Optional[Entry]:
        items = self._items
        if not items:
            return None
        c = self._order.compare(items[-1][0], key)
        if c < 0:
            return None
        if c == 0:
            self._version += 1
            return items.pop()
        old = remove_sorted(items, key, self._order)
        if old is not None:
            self._version += 1
        return old

    def insert(self, key: K, value: V) -> Optional[V]:
        """Store ``value`` under ``key`` and return the value it replaced.

        Returns ``None`` when ``key`` was not present. Use ``key in map``
        first if stored values may themselves be ``None``.
        """
        old = self._store(key, value)
        return None if old is None else old[1]

    def remove(self, key: K) -> Optional[V]:
        """Drop ``key`` and return its value, or ``None`` if it was absent."""
        old = self._take(key)
        return None if old is None else old[1]

    def __setitem__(self, key: K, value: V) -> None:
        self._store(key, value)

    def __delitem__(self, key: K) -> None:
        if self._take(key) is None:
            raise KeyError(key)

    def pop(self, key: K, default: Any = _MISSING) -> Any:
        old = self._take(key)
        if old is not None:
            return old[1]
        if default is _MISSING:
            raise KeyError(key)
        return default

    def popitem(self) -> tuple[K, V]:
        """Remove and return the entry with the largest key."""
        if not self._items:
            raise KeyError("popitem(): map is empty")
        self._version += 1
        return self._items.pop()

    def clear(self) -> None:
        if self._items:
            self._version += 1
            self._items.clear()

    # misc

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FlatMap, FrozenFlatMap)):
            return self._items == list(other._items)
        return super().__eq__(other)

    def __repr__(self) -> str:
        if self._order.cmp is None:
            return f"{type(self).__name__}({self._items!r})"
        return f"{type(self).__name__}({self._items!r}, cmp={self._order.cmp!r})"

    def copy(self) -> "FlatMap[K, V]":
        return type(self)._from_sorted(list(self._items), self._order)

    __copy__ = copy

    def freeze(self) -> FrozenFlatMap[K, V]:
        return FrozenFlatMap._from_sorted(tuple(self._items), self._order)

    # iterators

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __reversed__(self) -> Iterator[K]:
        return reversed(self.keys())

    def keys(self) -> SortedKeysView:
        return SortedKeysView(self)

    def values(self) -> SortedValuesView:
        return SortedValuesView(self)

    def items(self) -> SortedItemsView:
        return SortedItemsView(self)
