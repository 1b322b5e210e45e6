from __future__ import annotations
import typing
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class StatsAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _get_values(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> List[Union[int, float]]:
        """helper to extract numeric values for statistical operations."""
        if selector: return self._query.select(selector).to.list()
        data = self._query.to.list()
        if data and not all(kind_of(x) in (ValueKind.INTEGER, ValueKind.FLOAT) for x in data):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return data

    def sum(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Union[int, float]:
        """calc sum. python ints are summed exactly, never through a fixed-width array."""
        return sum(self._get_values(selector))

    def average(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> float:
        """calc average"""
        values = self._get_values(selector)
        if not values: raise ValueError("cannot calculate average of empty sequence")
        return float(np.mean(np.asarray(values, dtype=np.float64)))

    def max(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """find maximum"""
        data = self._query._get_data()
        if not data: raise ValueError("cannot find maximum of empty sequence")
        return max(data, key=selector) if selector else max(data)

    def min(self, selector: Optional[Selector[T, Any]] = None) -> T:
        """find minimum"""
        data = self._query._get_data()
        if not data: raise ValueError("cannot find minimum of empty sequence")
        return min(data, key=selector) if selector else min(data)

    def cumulative_sum(self, dtype: Any = np.int64) -> 'Query[Any]':
        """running prefix sums, accumulated in a fixed-width numpy dtype"""
        from ..query import Query
        def cumulative_data():
            return np.cumsum(self._query.to.array(dtype)).tolist()
        return Query(cumulative_data)
