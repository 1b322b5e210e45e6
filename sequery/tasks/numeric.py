"""
numeric transforms. integer results are widened to int64 while computing
and handed back as plain python ints.
"""

from datetime import date
import numpy as np
import pandas as pd
from ..factories import P
from ..types import *

QUARTERS = 4


def square_sequence(data: Iterable[int]) -> List[int]:
    """
    f(x) = x * x for every item.
    [-1, -2, -3] -> [1, 4, 9]
    """
    values = P(data).to.array(np.int64)
    return (values * values).tolist()


def moving_sum(data: Iterable[int]) -> List[int]:
    """
    f[n] = x[0] + x[1] + ... + x[n]
    [1, -1, 1, -1, -1] -> [1, 0, 1, 0, -1]
    """
    return P(data).stats.cumulative_sum(np.int64).to.list()


def vector_sum(vector1: Iterable[int], vector2: Iterable[int]) -> List[int]:
    """(x1, ..., xn) + (y1, ..., yn) = (x1+y1, ..., xn+yn), cut to the shorter vector"""
    pairs = P(vector1).zip.zip_with(vector2, lambda x, y: (x, y)).to.array(np.int64)
    if not len(pairs):
        return []
    return pairs.sum(axis=1).tolist()


def vector_product(vector1: Iterable[int], vector2: Iterable[int]) -> int:
    """x1*y1 + x2*y2 + ... + xn*yn, cut to the shorter vector"""
    products = P(vector1).zip.zip_with(vector2, lambda x, y: np.int64(x) * np.int64(y))
    return int(products.to.array(np.int64).sum())


def quarter_sales(sales: Iterable[Tuple[date, int]]) -> List[int]:
    """
    totals of (date, amount) sales per calendar quarter.
    result[0] is Q1 ... result[3] is Q4, and there are always four entries.
    [(2010-01-01, 10), (2010-04-04, 10), (2010-10-10, 10)] -> [10, 10, 0, 10]
    """
    frame = P(sales).to.frame(columns=["date", "amount"])
    if frame.empty:
        return [0] * QUARTERS
    quarter = (pd.to_datetime(frame["date"], format="ISO8601").dt.month - 1) // 3
    totals = frame["amount"].groupby(quarter).sum()
    return totals.reindex(range(QUARTERS), fill_value=0).astype(np.int64).tolist()
