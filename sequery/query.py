from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class IQuery(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base query implementation ---

class _BaseQuery(IQuery[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

    def __repr__(self) -> str:
        state = f"{len(self._cached_result)} items" if self._is_cached else "pending"
        return f"{type(self).__name__}({state})"

# --- main query class ---

class Query(
    _BaseQuery[T],
    _CoreOperations[T]
):
    """lazy, chainable query over an in-memory sequence."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        self.set = SetAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

# --- ordered query class ---

class OrderedQuery(Query[T]):
    """a sorted sequence that accepts secondary orderings."""

    def __init__(self, data_func: Callable[[], List[T]], sort_keys: List[Tuple[Callable, bool]]):
        super().__init__(data_func)
        self._source_func = data_func
        self._sort_keys = sort_keys

    def _get_data(self) -> List[T]:
        """applies every sort key at once, last key first, relying on sort stability"""
        if not self._is_cached:
            data = list(self._source_func())
            for key_selector, is_descending in reversed(self._sort_keys):
                data.sort(key=key_selector, reverse=is_descending)
            self._cached_result = data
            self._is_cached = True
        return self._cached_result

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """secondary sort ascending"""
        return OrderedQuery(self._source_func, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """secondary sort descending"""
        return OrderedQuery(self._source_func, self._sort_keys + [(key_selector, True)])
