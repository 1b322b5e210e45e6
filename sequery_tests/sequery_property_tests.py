import copy
from faker import Faker
import suite
import sequery
from sequery import P

test = suite.test
assert_that = suite.assert_that

Faker.seed(1234)
fake = Faker()

# words with some None and empty strings mixed in
text_data = [fake.word() for _ in range(40)] + [None, '', fake.word().upper(), None]
int_data = [fake.pyint(min_value=-50, max_value=50) for _ in range(40)]
mixed_data = [fake.pyint(), fake.pyfloat(), fake.word(), fake.pybool(), None] * 4

# exercise name -> positional arguments
calls = {
    'uppercase_strings': (text_data,),
    'strings_length': (text_data,),
    'prefix_items': (text_data, 'a'),
    'used_chars': (text_data,),
    'missing_digits': (text_data,),
    'common_chars': (text_data,),
    'sort_by_length_and_alphabet': (text_data,),
    'sequence_to_string': (text_data,),
    'square_sequence': (int_data,),
    'moving_sum': (int_data,),
    'vector_sum': (int_data, int_data[::-1]),
    'vector_product': (int_data, int_data[::-1]),
    'even_items': (text_data,),
    'propagate_by_position': (int_data[:8],),
    'count_greater_than_10': (int_data,),
    'top3': (int_data,),
    'first_containing_first': (text_data,),
    'count_distinct_length3': (text_data,),
    'count_occurrences': (text_data,),
    'count_with_max_length': (text_data,),
    'sum_of_ints': (mixed_data,),
    'strings_only': (mixed_data,),
    'average_of_doubles': (mixed_data,),
    'total_strings_length': (text_data,),
    'has_nulls': (text_data,),
    'all_uppercase': (text_data,),
    'first_negative_run': (int_data,),
    'numeric_lists_equal': (int_data, [float(x) for x in int_data]),
    'next_version': (text_data, text_data[3]),
    'combine_pairwise': (text_data[:5], text_data[5:9]),
    'all_pairs': (text_data[:4], text_data[4:7]),
}


@test("exercises never mutate their inputs")
def test_no_mutation():
    for name, args in calls.items():
        before = copy.deepcopy(args)
        getattr(sequery, name)(*args)
        assert_that(args == before, f"{name} changed its input")


@test("exercises are deterministic")
def test_idempotent():
    for name, args in calls.items():
        func = getattr(sequery, name)
        assert_that(func(*args) == func(*args), f"{name} returned different results on a rerun")


@test("list results are fresh objects")
def test_fresh_results():
    first = sequery.strings_length(text_data)
    first.clear()
    assert_that(len(sequery.strings_length(text_data)) == len(text_data), "results must not be shared")


@test("generated text agrees with plain python equivalents")
def test_against_plain_python():
    words = [w for w in text_data if w]
    assert_that(sequery.strings_length(text_data) == [len(w or '') for w in text_data], "lengths")
    assert_that(sequery.total_strings_length(text_data) == sum(len(w) for w in words), "total length")
    assert_that(sequery.top3(int_data) == sorted(int_data, reverse=True)[:3], "top3")
    assert_that(sequery.count_greater_than_10(int_data) == len([x for x in int_data if x > 10]), "threshold")
    assert_that(P(sequery.even_items(int_data)).to.list() == int_data[1::2], "every second item")
    running = 0
    expected = []
    for x in int_data:
        running += x
        expected.append(running)
    assert_that(sequery.moving_sum(int_data) == expected, "moving sum")


if __name__ == "__main__":
    suite.main(title="sequery property test suite")
