from __future__ import annotations
import typing
from itertools import product
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class ZipAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Query[V]':
        """pair elements positionally, stopping at the shorter sequence"""
        from ..query import Query
        return Query(lambda: [result_selector(t, u) for t, u in zip(self._query._get_data(), other)])

    def product_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Query[V]':
        """
        every (self, other) combination, self-major order.
        other is materialised once so generators are safe to pass.
        """
        from ..query import Query
        def product_data():
            return [result_selector(t, u) for t, u in product(self._query._get_data(), list(other))]
        return Query(product_data)
