"""
inspection of heterogeneous sequences.

elements are dispatched on their ValueKind, so True and False never count as
integers and "1.0" never counts as a float.
"""

from ..factories import P
from ..types import *


def sum_of_ints(data: Iterable[Any]) -> int:
    """
    sum of the integer items only.
    [1, True, "a", "b", False, 1] -> 2, [True, False] -> 0
    """
    return P(data).of_kind(ValueKind.INTEGER).select(int).stats.sum()


def strings_only(data: Iterable[Any]) -> List[str]:
    """
    the string items, in order.
    ["a", 1, 2, None, "b", True, 4.5, "c"] -> ["a", "b", "c"]
    """
    return P(data).of_kind(ValueKind.TEXT).to.list()


def average_of_doubles(data: Iterable[Any]) -> float:
    """
    average of the float items, 0.0 when there are none.
    [1.0, 2.0, None, "a"] -> 1.5, ["1.0", "2.0"] -> 0.0
    """
    doubles = P(data).of_kind(ValueKind.FLOAT)
    if not doubles.to.any():
        return 0.0
    return doubles.stats.average()


def total_strings_length(data: Iterable[Text]) -> int:
    """
    length of all strings joined together, None counting as "".
    [None, "", "a"] -> 1
    """
    return len(P(data).to.join("", lambda s: s or ""))


def has_nulls(data: Iterable[Text]) -> bool:
    """true when at least one item is None"""
    return P(data).to.any(lambda s: s is None)


def all_uppercase(data: Iterable[Text]) -> bool:
    """
    true when the sequence is non-empty and every item is a non-empty string equal to its uppercase form.
    ["A", "B"] -> True, [""] -> False, [] -> False
    """
    query = P(data)
    return query.to.any() and query.to.all(lambda s: bool(s) and s == s.upper())
