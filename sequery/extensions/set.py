from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class SetAccessor(Generic[T]):
    """
    order-preserving set operations.
    results keep the order in which elements first appear in the source.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Query[T]':
        """return distinct elements, first appearance wins. None is a valid element."""
        from ..query import Query
        def distinct_data():
            data = self._query._get_data()
            if key_selector is None:
                return list(dict.fromkeys(data))
            seen = set()
            return [item for item in data if (key := key_selector(item)) not in seen and not seen.add(key)]
        return Query(distinct_data)

    def union(self, other: Iterable[T]) -> 'Query[T]':
        """distinct elements of both sequences"""
        from ..query import Query
        return Query(lambda: list(dict.fromkeys(chain(self._query._get_data(), other))))

    def intersect(self, other: Iterable[T]) -> 'Query[T]':
        """distinct elements of this sequence that also appear in other"""
        from ..query import Query
        def intersect_data():
            other_set = set(other)
            return [x for x in dict.fromkeys(self._query._get_data()) if x in other_set]
        return Query(intersect_data)

    def except_(self, other: Iterable[T]) -> 'Query[T]':
        """distinct elements of this sequence not present in other (set difference)"""
        from ..query import Query
        def except_data():
            other_set = set(other)
            return [x for x in dict.fromkeys(self._query._get_data()) if x not in other_set]
        return Query(except_data)

    def contains(self, value: T) -> bool:
        """membership test"""
        return value in self._query._get_data()
