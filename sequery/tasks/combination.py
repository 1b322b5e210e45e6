from ..factories import P
from ..types import *
from ._helpers import equals_ignore_case


def first_negative_run(data: Iterable[int]) -> List[int]:
    """
    the first run of negative numbers.
    [1, 1, 1, -1, -1, -1, 0, 0, 0, -2, -2, -2] -> [-1, -1, -1]
    [1, 2, 3] -> []
    """
    return P(data).skip_while(lambda x: x >= 0).take_while(lambda x: x < 0).to.list()


def numeric_lists_equal(integers: Iterable[int], doubles: Iterable[float]) -> bool:
    """
    true if the integers, read as floats, equal the doubles in the same order.
    [1, 2, 3], [1.0, 2.0, 3.0] -> True
    [3, 2, 1], [1.0, 2.0, 3.0] -> False
    """
    return P(integers).select(float).to.sequence_equal(doubles)


def next_version(versions: Iterable[Text], current_version: Text) -> Text:
    """
    the version right after current_version (matched ignoring case), or None.
    ["1.1", "1.2", "1.5", "2.0"], "1.2" -> "1.5"
    ["1.1", "1.2", "1.5", "2.0"], "2.0" -> None
    """
    return P(versions) \
        .skip_while(lambda v: not equals_ignore_case(v, current_version)) \
        .skip(1) \
        .to.first_or_default()


def combine_pairwise(numbers: Iterable[str], fruits: Iterable[str]) -> List[str]:
    """
    joins items at the same position with a space, up to the shorter sequence.
    ["one", "two", "three"], ["apple", "bananas"] -> ["one apple", "two bananas"]
    """
    return P(numbers).zip.zip_with(fruits, lambda n, f: f"{n or ''} {f or ''}").to.list()


def all_pairs(boys: Iterable[str], girls: Iterable[str]) -> List[str]:
    """
    every "boy+girl" combination, boys-major, without duplicates.
    ["John", "Josh"], ["Ann", "Alice"] -> ["John+Ann", "John+Alice", "Josh+Ann", "Josh+Alice"]
    """
    return P(boys).zip.product_with(girls, lambda b, g: f"{b or ''}+{g or ''}").set.distinct().to.list()
