from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class GroupingAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key. keys keep first-seen order."""
        groups = defaultdict(list)
        for item in self._query._get_data():
            groups[key_selector(item)].append(item)
        return dict(groups)

    def group_by_with_aggregate(self, key_selector: KeySelector[T, K],
                                result_selector: Callable[[K, List[T]], V]) -> 'Query[V]':
        """group by key then fold each group into a single result"""
        from ..query import Query
        def aggregate_data():
            return [result_selector(key, items) for key, items in self.group_by(key_selector).items()]
        return Query(aggregate_data)

    def count_by(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Query[Tuple[K, int]]':
        """(key, occurrences) pairs in first-seen key order"""
        selector = key_selector if key_selector else lambda item: item
        return self.group_by_with_aggregate(selector, lambda key, items: (key, len(items)))
