"""
counting, top-n and grouping exercises.
"""

import logging
from ..errors import MissingArgumentError
from ..factories import P
from ..types import *
from ._helpers import len_with_nulls

logger = logging.getLogger(__name__)

THRESHOLD = 10
TOP_COUNT = 3
FIRST_TOKEN = "FIRST"


def count_greater_than_10(data: Iterable[int]) -> int:
    """
    number of items strictly greater than 10.
    [1, 2, 10] -> 0, [1, 20, 30, 40] -> 3
    """
    return P(data).to.count(lambda x: x > THRESHOLD)


def top3(data: Iterable[int]) -> List[int]:
    """
    the three largest numbers, largest first. duplicates are kept.
    [10, 10, 10, 10] -> [10, 10, 10], [1, 2] -> [2, 1]
    """
    return P(data).order_by_descending(lambda x: x).take(TOP_COUNT).to.list()


def first_containing_first(data: Iterable[Text]) -> Text:
    """
    first string containing "first", case insensitive, or None.
    ["a", "IT IS FIRST", "first item"] -> "IT IS FIRST"
    """
    return P(data).to.first_or_default(lambda s: bool(s) and FIRST_TOKEN in s.upper())


def count_distinct_length3(data: Iterable[Text]) -> int:
    """
    number of distinct strings of length 3.
    ["aaa", "aaa", "aaa", "bbb"] -> 2
    """
    return P(data).set.distinct().to.count(lambda s: len_with_nulls(s) == 3)


def count_occurrences(data: Iterable[Text]) -> List[Tuple[Text, int]]:
    """
    (string, count) for every distinct string, in first-seen order. None is a key like any other.
    ["a", "a", None, "", "ccc", ""] -> [("a", 2), (None, 1), ("", 2), ("ccc", 1)]
    """
    return P(data).group.count_by().to.list()


def count_with_max_length(data: Iterable[Text]) -> int:
    """
    how many strings have the maximum length (None counts as length 0).
    ["a", "aaa", None, "", "ccc", ""] -> 2, [] -> 0
    """
    by_length = P(data).group.count_by(len_with_nulls)
    if not by_length.to.any():
        return 0
    return by_length.stats.max(lambda pair: pair[0])[1]


def digit_chars_count(text: Text) -> int:
    """
    number of decimal digit characters in a string.
    "A1*B2" -> 2, "" -> 0

    raises MissingArgumentError for None.
    """
    if text is None:
        logger.debug("digit_chars_count rejected a None string")
        raise MissingArgumentError("text")
    return P(text).to.count(str.isdecimal)
