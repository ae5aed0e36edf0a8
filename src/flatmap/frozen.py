from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, Iterator, Optional, TypeVar

from .ordering import Cmp, KeyOrder, make_order
from .search import Entry, Pairs, bounds, lookup, sort_unique
from .views import SortedItemsView, SortedKeysView, SortedValuesView, iter_entries

if TYPE_CHECKING:
    from .flat_map import FlatMap

K = TypeVar("K")
V = TypeVar("V")


class FrozenFlatMap(Mapping, Generic[K, V]):
    """Immutable counterpart of :class:`~flatmap.FlatMap`.

    Sorted and deduplicated once (the pair given last wins), then kept as a
    tuple. Supports every read operation of the mutable map and is hashable
    when all keys and values are.
    """

    __slots__ = ("_items", "_order", "_hash")

    # read by iter_entries; a frozen map never changes
    _version = 0

    def __init__(self, pairs: Optional[Pairs] = None, /, *, cmp: Optional[Cmp] = None) -> None:
        self._order = make_order(cmp)
        self._items: tuple[Entry, ...] = () if pairs is None else tuple(sort_unique(pairs, self._order))
        self._hash: Optional[int] = None

    @classmethod
    def from_unsorted(cls, pairs: Pairs, *, cmp: Optional[Cmp] = None) -> "FrozenFlatMap[K, V]":
        return cls(pairs, cmp=cmp)

    @classmethod
    def _from_sorted(cls, entries: tuple[Entry, ...], order: KeyOrder) -> "FrozenFlatMap[K, V]":
        self = cls.__new__(cls)
        self._order = order
        self._items = entries
        self._hash = None
        return self

    @property
    def order(self) -> KeyOrder:
        return self._order

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

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        from .flat_map import FlatMap

        if isinstance(other, (FrozenFlatMap, FlatMap)):
            return self._items == tuple(other._items)
        return super().__eq__(other)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._items)
        return self._hash

    def __repr__(self) -> str:
        if self._order.cmp is None:
            return f"{type(self).__name__}({list(self._items)!r})"
        return f"{type(self).__name__}({list(self._items)!r}, cmp={self._order.cmp!r})"

    def thaw(self) -> "FlatMap[K, V]":
        """Return a mutable :class:`~flatmap.FlatMap` holding the same entries."""
        from .flat_map import FlatMap

        return FlatMap._from_sorted(list(self._items), self._order)

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
