from .strings import (
    uppercase_strings,
    strings_length,
    prefix_items,
    used_chars,
    missing_digits,
    common_chars,
    sort_by_length_and_alphabet,
    sort_digit_names,
    sequence_to_string,
)
from .numeric import (
    square_sequence,
    moving_sum,
    vector_sum,
    vector_product,
    quarter_sales,
)
from .positional import even_items, propagate_by_position
from .aggregation import (
    count_greater_than_10,
    top3,
    first_containing_first,
    count_distinct_length3,
    count_occurrences,
    count_with_max_length,
    digit_chars_count,
)
from .objects import (
    sum_of_ints,
    strings_only,
    average_of_doubles,
    total_strings_length,
    has_nulls,
    all_uppercase,
)
from .combination import (
    first_negative_run,
    numeric_lists_equal,
    next_version,
    combine_pairwise,
    all_pairs,
)

__all__ = [
    "uppercase_strings",
    "strings_length",
    "prefix_items",
    "used_chars",
    "missing_digits",
    "common_chars",
    "sort_by_length_and_alphabet",
    "sort_digit_names",
    "sequence_to_string",
    "square_sequence",
    "moving_sum",
    "vector_sum",
    "vector_product",
    "quarter_sales",
    "even_items",
    "propagate_by_position",
    "count_greater_than_10",
    "top3",
    "first_containing_first",
    "count_distinct_length3",
    "count_occurrences",
    "count_with_max_length",
    "digit_chars_count",
    "sum_of_ints",
    "strings_only",
    "average_of_doubles",
    "total_strings_length",
    "has_nulls",
    "all_uppercase",
    "first_negative_run",
    "numeric_lists_equal",
    "next_version",
    "combine_pairwise",
    "all_pairs",
]
