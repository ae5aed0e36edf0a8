from __future__ import annotations

from collections.abc import ItemsView, KeysView, ValuesView
from operator import itemgetter
from typing import Any, Callable, Iterator, Optional

_key = itemgetter(0)
_value = itemgetter(1)


def iter_entries(
    owner: Any,
    project: Optional[Callable[[tuple], Any]] = None,
    start: int = 0,
    stop: Optional[int] = None,
    reverse: bool = False,
) -> Iterator[Any]:
    """Walk ``owner._items[start:stop]`` lazily.

    The version and bounds are captured here, when the iterator is created.
    ``owner._version`` is bumped by every structural change, and a change
    seen before any step aborts the walk with ``RuntimeError``, as ``dict``
    does.
    """
    entries = owner._items
    if stop is None:
        stop = len(entries)
    version = owner._version
    indices = range(stop - 1, start - 1, -1) if reverse else range(start, stop)
    return _walk(owner, entries, version, indices, project)


def _walk(owner, entries, version, indices, project):
    for i in indices:
        if owner._version != version:
            raise RuntimeError(f"{type(owner).__name__} changed size during iteration")
        entry = entries[i]
        yield entry if project is None else project(entry)


class SortedKeysView(KeysView):
    __slots__ = ()

    def __iter__(self):
        return iter_entries(self._mapping, _key)

    def __reversed__(self):
        return iter_entries(self._mapping, _key, reverse=True)


class SortedValuesView(ValuesView):
    __slots__ = ()

    def __iter__(self):
        return iter_entries(self._mapping, _value)

    def __reversed__(self):
        return iter_entries(self._mapping, _value, reverse=True)


class SortedItemsView(ItemsView):
    __slots__ = ()

    def __iter__(self):
        return iter_entries(self._mapping)

    def __reversed__(self):
        return iter_entries(self._mapping, reverse=True)
