"""Binary search and bulk ordering over sequences of ``(key, value)`` entries.

Every function here takes the entry sequence and the :class:`KeyOrder` it is
sorted by. The sequence must already satisfy the container invariant
(strictly ascending keys) except for :func:`sort_unique`, which establishes it.
"""
from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence, Union

from .ordering import KeyOrder

logger = logging.getLogger(__name__)

Entry = tuple[Any, Any]
Pairs = Union[Mapping, Iterable[tuple[Any, Any]]]


def find(entries: Sequence[Entry], key: Any, order: KeyOrder) -> tuple[bool, int]:
    """Return ``(found, index)``.

    When ``found`` is false ``index`` is where ``key`` would be inserted to
    keep the sequence sorted, ``len(entries)`` if it sorts after every key.
    """
    probe = order.wrap(key)
    i = bisect_left(entries, probe, key=order.entry_key)
    found = i < len(entries) and not probe < order.entry_key(entries[i])
    return found, i


def lookup(entries: Sequence[Entry], key: Any, order: KeyOrder) -> Optional[Entry]:
    found, i = find(entries, key, order)
    if found:
        return entries[i]
    return None


def insert_sorted(entries: list[Entry], key: Any, value: Any, order: KeyOrder) -> Optional[Entry]:
    """Place ``(key, value)`` by search and shift, returning the replaced entry.

    An existing entry keeps its stored key and only gets the new value.
    """
    found, i = find(entries, key, order)
    if found:
        old = entries[i]
        entries[i] = (old[0], value)
        return old
    entries.insert(i, (key, value))
    return None


def remove_sorted(entries: list[Entry], key: Any, order: KeyOrder) -> Optional[Entry]:
    found, i = find(entries, key, order)
    if not found:
        return None
    return entries.pop(i)


def bounds(
    entries: Sequence[Entry],
    order: KeyOrder,
    minimum: Any = None,
    maximum: Any = None,
    inclusive: tuple[bool, bool] = (True, True),
) -> tuple[int, int]:
    """Slice ``[start, stop)`` of the entries whose keys lie between the bounds.

    ``None`` leaves that side unbounded. ``start > stop`` never happens: an
    empty or inverted interval yields ``start == stop``.
    """
    lo_inc, hi_inc = inclusive
    key = order.entry_key
    if minimum is None:
        start = 0
    elif lo_inc:
        start = bisect_left(entries, order.wrap(minimum), key=key)
    else:
        start = bisect_right(entries, order.wrap(minimum), key=key)

    if maximum is None:
        stop = len(entries)
    elif hi_inc:
        stop = bisect_right(entries, order.wrap(maximum), key=key)
    else:
        stop = bisect_left(entries, order.wrap(maximum), key=key)
    return start, max(start, stop)


def as_entries(pairs: Pairs) -> list[Entry]:
    if isinstance(pairs, Mapping):
        return list(pairs.items())
    out = []
    for pair in pairs:
        k, v = pair
        out.append((k, v))
    return out


def sort_unique(pairs: Pairs, order: KeyOrder) -> list[Entry]:
    """Sort ``pairs`` by key and keep one entry per key, the last one given.

    The input is reversed before a stable sort so that, inside each run of
    equal keys, the entry given last comes first and is the one kept.
    """
    entries = as_entries(pairs)
    entries.reverse()
    key = order.entry_key
    entries.sort(key=key)

    out: list[Entry] = []
    prev = None
    for entry in entries:
        k = key(entry)
        if out and not prev < k:
            continue
        out.append(entry)
        prev = k
    dropped = len(entries) - len(out)
    if dropped:
        logger.debug("dropped %d duplicate keys out of %d entries", dropped, len(entries))
    return out


def is_strictly_sorted(entries: Sequence[Entry], order: KeyOrder) -> bool:
    key = order.entry_key
    return all(key(a) < key(b) for a, b in zip(entries, entries[1:]))
