from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from operator import itemgetter
from typing import Any, Callable, Optional

Cmp = Callable[[Any, Any], int]

_first = itemgetter(0)


def _identity(key: Any) -> Any:
    return key


@dataclass(frozen=True, slots=True)
class KeyOrder:
    """Total order over the keys of one container.

    With ``cmp=None`` keys are compared with their own ``<``. Otherwise
    ``cmp(a, b)`` must return a negative number, zero or a positive number,
    the same contract as ``functools.cmp_to_key``. Two keys are equal when
    neither sorts before the other.
    """

    cmp: Optional[Cmp] = None
    wrap: Callable[[Any], Any] = field(init=False, repr=False, compare=False)
    entry_key: Callable[[tuple], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.cmp is None:
            object.__setattr__(self, "wrap", _identity)
            object.__setattr__(self, "entry_key", _first)
            return
        if not callable(self.cmp):
            raise TypeError(f"cmp must be callable, got {type(self.cmp).__name__}")
        wrap = cmp_to_key(self.cmp)
        object.__setattr__(self, "wrap", wrap)
        object.__setattr__(self, "entry_key", lambda entry: wrap(entry[0]))

    def compare(self, a: Any, b: Any) -> int:
        if self.cmp is not None:
            return self.cmp(a, b)
        if a < b:
            return -1
        if b < a:
            return 1
        return 0


NATURAL = KeyOrder()


def make_order(cmp: Optional[Cmp]) -> KeyOrder:
    if cmp is None:
        return NATURAL
    return KeyOrder(cmp)


def reverse_cmp(a: Any, b: Any) -> int:
    # descending natural order, handy for max-first containers
    if a < b:
        return 1
    if b < a:
        return -1
    return 0
