from enum import Enum
import numpy as np
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
IndexedSelector = Callable[[T, int], U]

# absent text is None, never ""
Text = Optional[str]


class ValueKind(Enum):
    """closed set of runtime kinds a heterogeneous element can have"""
    INTEGER = 'integer'
    FLOAT = 'float'
    TEXT = 'text'
    BOOLEAN = 'boolean'
    NONE = 'none'
    OTHER = 'other'


def kind_of(value: Any) -> ValueKind:
    """
    classify a value into its ValueKind.
    bool is checked before int: python's bool subclasses int, but a flag is
    never counted as an integer here.
    """
    if value is None:
        return ValueKind.NONE
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (int, np.integer)):
        return ValueKind.INTEGER
    # double precision only: np.float64 subclasses float, float32 and Fraction do not
    if isinstance(value, float):
        return ValueKind.FLOAT
    return ValueKind.OTHER
