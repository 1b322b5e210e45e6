from datetime import date, datetime
import suite
from sequery import square_sequence, moving_sum, vector_sum, vector_product, quarter_sales

test = suite.test
assert_that = suite.assert_that

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


# --- square_sequence ---

@test("square_sequence squares regardless of sign")
def test_square_sequence():
    assert_that(square_sequence([]) == [], "empty")
    assert_that(square_sequence([1, 2, 3, 4, 5]) == [1, 4, 9, 16, 25], "positive")
    assert_that(square_sequence([-1, -2, -3, -4, -5]) == [1, 4, 9, 16, 25], "negative")
    assert_that(square_sequence([-3, 3]) == [9, 9], "sign independent")


@test("square_sequence does not overflow for 32-bit extremes")
def test_square_sequence_wide():
    result = square_sequence([INT32_MIN, INT32_MAX])
    assert_that(result == [INT32_MIN ** 2, INT32_MAX ** 2], "widened to 64 bits")
    assert_that(all(type(x) is int for x in result), "plain python ints")


# --- moving_sum ---

@test("moving_sum accumulates prefix sums")
def test_moving_sum():
    assert_that(moving_sum([]) == [], "empty")
    assert_that(moving_sum([1, 1, 1, 1]) == [1, 2, 3, 4], "ones")
    assert_that(moving_sum([5, 5, 5, 5]) == [5, 10, 15, 20], "fives")
    assert_that(moving_sum(range(1, 11)) == [1, 3, 6, 10, 15, 21, 28, 36, 45, 55], "one to ten")
    assert_that(moving_sum([1, -1, 1, -1, -1]) == [1, 0, 1, 0, -1], "alternating")


@test("moving_sum widens the accumulator")
def test_moving_sum_wide():
    assert_that(moving_sum([INT32_MAX, INT32_MAX]) == [INT32_MAX, 2 * INT32_MAX], "past 32 bits")


# --- vectors ---

@test("vector_sum adds pairwise")
def test_vector_sum():
    assert_that(vector_sum([1, 2, 3], [10, 20, 30]) == [11, 22, 33], "sum")
    assert_that(vector_sum([1, 1, 1], [-1, -1, -1]) == [0, 0, 0], "cancel out")
    assert_that(vector_sum([1, 2, 3], [1]) == [2], "shorter wins")
    assert_that(vector_sum([], [1, 2]) == [], "empty")


@test("vector_product is the dot product")
def test_vector_product():
    assert_that(vector_product([1, 2, 3], [1, 2, 3]) == 14, "squares")
    assert_that(vector_product([1, 1, 1], [-1, -1, -1]) == -3, "negative")
    assert_that(vector_product([1, 1, 1], [0, 0, 0]) == 0, "zeros")
    assert_that(vector_product([], []) == 0, "empty")
    assert_that(vector_product([2, 3], [4]) == 8, "truncated")
    assert_that(vector_product([INT32_MAX], [INT32_MAX]) == INT32_MAX ** 2, "no overflow")


# --- quarter_sales ---

@test("quarter_sales always returns four totals")
def test_quarter_sales_empty():
    assert_that(quarter_sales([]) == [0, 0, 0, 0], "empty")


@test("quarter_sales buckets by calendar month")
def test_quarter_sales():
    first_quarter = [(date(2010, 1, 1), 10), (date(2010, 2, 2), 10), (date(2010, 3, 3), 10)]
    assert_that(quarter_sales(first_quarter) == [30, 0, 0, 0], "all in Q1")
    spread = [(date(2010, 1, 1), 10), (date(2010, 4, 4), 10), (date(2010, 10, 10), 10)]
    assert_that(quarter_sales(spread) == [10, 10, 0, 10], "one per quarter")


@test("quarter_sales ignores the year and accepts datetimes")
def test_quarter_sales_years():
    sales = [(datetime(2009, 12, 31, 23, 0), 5), (datetime(2011, 12, 1), 7), (date(2012, 6, 30), 1)]
    assert_that(quarter_sales(sales) == [0, 1, 0, 12], "december of any year is Q4")
    assert_that(all(type(x) is int for x in quarter_sales(sales)), "plain python ints")


@test("quarter_sales parses iso strings of mixed shapes")
def test_quarter_sales_iso_strings():
    sales = [("2010-01-01", 3), ("2010-04-04T10:00", 4), ("2010-11-30 23:59:59", 5)]
    assert_that(quarter_sales(sales) == [3, 4, 0, 5], "date, datetime with T and with space")


if __name__ == "__main__":
    suite.main(title="sequery numeric exercises test suite")
