import typing
from .types import *

if typing.TYPE_CHECKING:
    from .query import Query

def from_iterable(data: Iterable[T]) -> 'Query[T]':
    """create query from iterable. the iterable is read once, on first evaluation."""
    from .query import Query
    return Query(lambda: list(data))

def from_range(start: int, count: int) -> 'Query[int]':
    """create query from range"""
    from .query import Query
    return Query(lambda: list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Query[T]':
    """create query with repeated item"""
    from .query import Query
    return Query(lambda: [item] * max(count, 0))

def empty() -> 'Query[Any]':
    """create empty query"""
    from .query import Query
    return Query(lambda: [])

# --- aliases ---
sequery = from_iterable
P = from_iterable
