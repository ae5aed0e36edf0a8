from .flat_map import FlatMap
from .flat_set import FlatSet
from .frozen import FrozenFlatMap
from .ordering import KeyOrder, reverse_cmp

__all__ = [
    "FlatMap",
    "FlatSet",
    "FrozenFlatMap",
    "KeyOrder",
    "reverse_cmp",
]
