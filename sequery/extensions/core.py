from __future__ import annotations
import typing
from itertools import chain, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, OrderedQuery

class _CoreOperations(Generic[T]):
    def where(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """filter elements based on a predicate"""
        from ..query import Query
        return Query(lambda: [x for x in self._get_data() if predicate(x)])

    def where_with_index(self: 'Query[T]', predicate: Callable[[T, int], bool]) -> 'Query[T]':
        """filter elements using the element and its zero-based index"""
        from ..query import Query
        def filter_with_index_data():
            return [item for index, item in enumerate(self._get_data()) if predicate(item, index)]
        return Query(filter_with_index_data)

    def select(self: 'Query[T]', selector: Selector[T, U]) -> 'Query[U]':
        """project each element to a new form"""
        from ..query import Query
        return Query(lambda: [selector(x) for x in self._get_data()])

    def select_with_index(self: 'Query[T]', selector: IndexedSelector[T, U]) -> 'Query[U]':
        """project each element to a new form, using the element's index"""
        from ..query import Query
        def map_with_index_data():
            return [selector(item, index) for index, item in enumerate(self._get_data())]
        return Query(map_with_index_data)

    def select_many(self: 'Query[T]', selector: Selector[T, Iterable[U]]) -> 'Query[U]':
        """project and flatten sequences"""
        from ..query import Query
        def flat_map_data():
            return [item for x in self._get_data() for item in selector(x)]
        return Query(flat_map_data)

    def select_many_with_index(self: 'Query[T]', selector: IndexedSelector[T, Iterable[U]]) -> 'Query[U]':
        """project with index and flatten"""
        from ..query import Query
        def flat_map_with_index_data():
            return [item for index, x in enumerate(self._get_data()) for item in selector(x, index)]
        return Query(flat_map_with_index_data)

    def order_by(self: 'Query[T]', key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """stable sort by a key"""
        from ..query import OrderedQuery
        return OrderedQuery(self._get_data, [(key_selector, False)])

    def order_by_descending(self: 'Query[T]', key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """stable sort by a key in descending order"""
        from ..query import OrderedQuery
        return OrderedQuery(self._get_data, [(key_selector, True)])

    def take(self: 'Query[T]', count: int) -> 'Query[T]':
        """take the first 'count' elements"""
        from ..query import Query
        return Query(lambda: self._get_data()[:max(count, 0)])

    def skip(self: 'Query[T]', count: int) -> 'Query[T]':
        """skip the first 'count' elements"""
        from ..query import Query
        return Query(lambda: self._get_data()[max(count, 0):])

    def take_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """take elements while predicate is true"""
        from ..query import Query
        return Query(lambda: list(takewhile(predicate, self._get_data())))

    def skip_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """skip elements while predicate is true"""
        from ..query import Query
        return Query(lambda: list(dropwhile(predicate, self._get_data())))

    def concat(self: 'Query[T]', other: Iterable[T]) -> 'Query[T]':
        """append another sequence, keeping duplicates and order"""
        from ..query import Query
        return Query(lambda: list(chain(self._get_data(), other)))

    def default_if_empty(self: 'Query[T]', default_value: T) -> 'Query[T]':
        """the elements of the sequence, or a singleton default if it is empty"""
        from ..query import Query
        def default_data():
            data = self._get_data()
            return data if data else [default_value]
        return Query(default_data)

    def of_kind(self: 'Query[T]', *kinds: ValueKind) -> 'Query[Any]':
        """
        filters elements whose runtime kind is one of the given kinds.
        unlike an isinstance check, booleans are not integers here.
        """
        wanted = frozenset(kinds)
        return self.where(lambda item: kind_of(item) in wanted)
