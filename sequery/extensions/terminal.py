from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class TerminalAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def list(self) -> List[T]:
        """convert to a fresh list; the cached data is never handed out"""
        return list(self._query._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._query._get_data())

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array, optionally forcing a dtype"""
        return np.array(self._query._get_data(), dtype=dtype)

    def frame(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert a sequence of records or tuples to a pandas dataframe"""
        return pd.DataFrame(self._query._get_data(), columns=columns)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._query._get_data())
        return sum(1 for x in self._query._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._query._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        return all(predicate(x) for x in self._query._get_data())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        data = self._query._get_data()
        if predicate is None:
            if not data: raise ValueError("sequence contains no elements")
            return data[0]
        for item in data:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def sequence_equal(self, other: Iterable[T]) -> bool:
        """same length and pairwise equal, in order"""
        return self._query._get_data() == list(other)

    def join(self, separator: str = ",", formatter: Selector[T, str] = str) -> str:
        """render each element with formatter and join them"""
        return separator.join(formatter(item) for item in self._query._get_data())
