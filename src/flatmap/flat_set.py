from __future__ import annotations

from collections.abc import MutableSet
from operator import itemgetter
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .flat_map import FlatMap
from .ordering import Cmp, KeyOrder

K = TypeVar("K")


class _Unit:
    __slots__ = ()

    def __repr__(self) -> str:
        return "_UNIT"


_UNIT = _Unit()


class FlatSet(MutableSet, Generic[K]):
    """Sorted set stored as a :class:`FlatMap` whose values are a marker."""

    __slots__ = ("_map",)

    def __init__(self, keys: Optional[Iterable[K]] = None, /, *, cmp: Optional[Cmp] = None) -> None:
        pairs = None if keys is None else ((k, _UNIT) for k in keys)
        self._map: FlatMap[K, _Unit] = FlatMap(pairs, cmp=cmp)

    @classmethod
    def _wrap(cls, inner: FlatMap) -> "FlatSet[K]":
        self = cls.__new__(cls)
        self._map = inner
        return self

    def _from_iterable(self, it: Iterable[K]) -> "FlatSet[K]":
        # set algebra results keep this set's ordering
        return type(self)(it, cmp=self._map.order.cmp)

    @property
    def order(self) -> KeyOrder:
        return self._map.order

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def contains(self, key: K) -> bool:
        return key in self._map

    def insert(self, key: K) -> bool:
        """Add ``key``; True if it was not already present."""
        return self._map._store(key, _UNIT) is None

    def add(self, key: K) -> None:
        self._map._store(key, _UNIT)

    def remove(self, key: K) -> bool:
        """Drop ``key`` if present. Absent keys are not an error.

        Unlike ``set.remove`` this never raises; the result tells whether
        anything was removed.
        """
        return self._map._take(key) is not None

    def discard(self, key: K) -> None:
        self._map._take(key)

    def pop(self) -> K:
        """Remove and return the largest key."""
        if not self._map:
            raise KeyError("pop from an empty set")
        return self._map.popitem()[0]

    def clear(self) -> None:
        self._map.clear()

    def irange(
        self,
        minimum: Optional[K] = None,
        maximum: Optional[K] = None,
        inclusive: tuple[bool, bool] = (True, True),
        reverse: bool = False,
    ) -> Iterator[K]:
        return map(itemgetter(0), self._map.irange(minimum, maximum, inclusive, reverse))

    def __len__(self) -> int:
        return len(self._map)

    def __bool__(self) -> bool:
        return bool(self._map)

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._map)

    def __repr__(self) -> str:
        keys = list(self._map)
        if self._map.order.cmp is None:
            return f"{type(self).__name__}({keys!r})"
        return f"{type(self).__name__}({keys!r}, cmp={self._map.order.cmp!r})"

    def copy(self) -> "FlatSet[K]":
        return type(self)._wrap(self._map.copy())

    __copy__ = copy
