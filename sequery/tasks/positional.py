from ..factories import P
from ..types import *


def even_items(data: Iterable[T]) -> List[T]:
    """
    every second item: the 2nd, 4th, 6th ...
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10] -> [2, 4, 6, 8, 10]
    ["a", "b", "c", None] -> ["b", None]
    """
    return P(data).where_with_index(lambda item, index: index % 2 == 1).to.list()


def propagate_by_position(data: Iterable[T]) -> List[T]:
    """
    repeats each item as many times as its 1-based position.
    ["a", "b", "c", None] -> ["a", "b", "b", "c", "c", "c", None, None, None, None]
    """
    return P(data).select_many_with_index(lambda item, index: [item] * (index + 1)).to.list()
