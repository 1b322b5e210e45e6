"""
string and character transforms.

every function takes an iterable of optional strings where None stands for
an absent value, distinct from "".
"""

import logging
from ..errors import MissingArgumentError
from ..factories import P
from ..types import *
from ._helpers import len_with_nulls, starts_with_ignore_case

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

# fixed lookup, compared against the upper-cased token
DIGIT_NAMES: Dict[str, int] = {
    "ZERO": 0,
    "ONE": 1,
    "TWO": 2,
    "THREE": 3,
    "FOUR": 4,
    "FIVE": 5,
    "SIX": 6,
    "SEVEN": 7,
    "EIGHT": 8,
    "NINE": 9,
}


def uppercase_strings(data: Iterable[Text]) -> List[Text]:
    """
    transforms all strings to uppercase, None stays None.
    ["a", "A", "", None] -> ["A", "A", "", None]
    """
    return P(data).select(lambda s: s.upper() if s is not None else None).to.list()


def strings_length(data: Iterable[Text]) -> List[int]:
    """
    length of every string, None counts as 0.
    ["aa", "bb", "cc", "", "  ", None] -> [2, 2, 2, 0, 2, 0]
    """
    return P(data).select(len_with_nulls).to.list()


def prefix_items(data: Iterable[Text], prefix: Text) -> List[str]:
    """
    items that start with prefix, ignoring case. None and "" items never match.
    ["aaa", "bbbb", "ccc", None], prefix="B" -> ["bbbb"]
    ["a", "b", "c", None], prefix="" -> ["a", "b", "c"]

    raises MissingArgumentError when prefix is None, before data is read.
    """
    if prefix is None:
        logger.debug("prefix_items rejected a None prefix")
        raise MissingArgumentError("prefix")
    return P(data).where(lambda s: bool(s) and starts_with_ignore_case(s, prefix)).to.list()


def used_chars(data: Iterable[Text]) -> List[str]:
    """
    distinct characters used anywhere in the sequence. order is not significant.
    [" ", None, "   ", ""] -> [" "]
    """
    return P(data).where(bool).select_many(lambda s: s).set.distinct().to.list()


def missing_digits(data: Iterable[Text]) -> List[str]:
    """
    decimal digits not used in any string, in "0".."9" order.
    ["aaa", "a1", "b", "c2", "d", "e3", "f01234"] -> ["5", "6", "7", "8", "9"]
    """
    used = P(data).where(bool).select_many(lambda s: s).where(lambda c: c in DIGITS)
    return P(DIGITS).set.except_(used.to.list()).to.list()


def common_chars(data: Iterable[Text]) -> List[str]:
    """
    characters that occur in every string, sorted and deduplicated.
    ["ab", "ba", "aabb", "baba"] -> ["a", "b"]
    an empty sequence has no common characters; None counts as "".
    """
    words = P(data).select(lambda s: s or "").to.list()
    if not words:
        return []
    shared = P(words).select_many(lambda s: s).set.distinct() \
        .where(lambda c: all(c in word for word in words))
    return shared.order_by(lambda c: c).to.list()


def sort_by_length_and_alphabet(data: Iterable[Text]) -> List[Text]:
    """
    stable sort by length, then ordinal value. None sorts as "".
    ["c", "cc", "b", "bb", "a", "aa"] -> ["a", "b", "c", "aa", "bb", "cc"]
    """
    return P(data).order_by(len_with_nulls).then_by(lambda s: s or "").to.list()


def sort_digit_names(data: Iterable[str]) -> List[str]:
    """
    sorts digit names ("zero".."nine", any case) by their numeric value.
    ["nine", "eight", "nine", "eight"] -> ["eight", "eight", "nine", "nine"]

    raises ValueError for anything that is not a digit name.
    """
    def digit_value(name: str) -> int:
        try:
            return DIGIT_NAMES[name.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"not a digit name: {name!r}") from None

    # keys are computed eagerly so a bad token fails before sorting
    keyed = P(data).select(lambda name: (digit_value(name), name)).to.list()
    return P(keyed).order_by(lambda pair: pair[0]).select(lambda pair: pair[1]).to.list()


def sequence_to_string(data: Iterable[Any]) -> str:
    """
    comma separated string representation, None rendered as "null".
    [1, 2, 3] -> "1,2,3"
    ["a", "b", "c", None, ""] -> "a,b,c,null,"
    """
    return P(data).to.join(",", lambda item: "null" if item is None else str(item))
