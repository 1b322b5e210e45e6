from ..types import Text


def len_with_nulls(value: Text) -> int:
    """length of a string, counting None as empty"""
    return len(value or "")


def _fold(char: str) -> str:
    # one character in, one character out; 'ß' -> 'SS' would shift positions
    upper = char.upper()
    return upper if len(upper) == 1 else char


def starts_with_ignore_case(value: str, prefix: str) -> bool:
    """ordinal prefix test, ignoring case character by character"""
    return len(value) >= len(prefix) and all(_fold(a) == _fold(b) for a, b in zip(value, prefix))


def equals_ignore_case(left: Text, right: Text) -> bool:
    """ordinal equality ignoring case; None only equals None"""
    if left is None or right is None:
        return left is right
    return len(left) == len(right) and starts_with_ignore_case(left, right)
