import pytest
from hypothesis import given
from hypothesis import strategies as st

from floatkit.arrays import (
    array_apply,
    array_get,
    array_grade,
    array_interval,
    array_random,
    array_set,
    array_slice,
    array_sort,
    polynomial,
    reverse,
)
from floatkit.root1d import kahan_a

number_lists = st.lists(
    st.floats(allow_nan=False, allow_infinity=False, width=32), max_size=30
)


def test_set_get_round_trip_and_copy():
    data = [1.5, -2.0, 3.25]
    handle = array_set(data)
    assert array_get(handle) == data
    got = array_get(handle)
    got.append(9.0)
    assert array_get(handle) == data


def test_handles_are_distinct():
    first = array_set([1.0])
    second = array_set([2.0])
    assert first != second
    assert array_get(first) == [1.0]
    assert array_get(second) == [2.0]


def test_get_unknown_handle_raises():
    with pytest.raises(LookupError):
        array_get(-12345)


def test_apply_one_dimensional():
    xs = [1.0, 2.0, 3.0]
    assert array_apply(str, xs) == [str(v) for v in xs]


def test_apply_two_dimensional():
    xs = [1.0, 5.0]
    ys = [2.0, 3.0, 4.0]
    result = array_apply(max, xs, ys)
    assert len(result) == len(xs)
    for i, row in enumerate(result):
        assert len(row) == len(ys)
        for j, value in enumerate(row):
            assert value == max(xs[i], ys[j])


def test_interval_by_count_includes_both_ends():
    result = array_interval(0.0, 1.0, 5)
    assert len(result) == 5
    assert result[0] == 0.0
    assert result[-1] == 1.0


def test_interval_by_increment():
    result = array_interval(0.0, 1.0, 0.5)
    assert len(result) == 3
    assert result[0] == 0.0
    assert all(b - a == 0.5 for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("start, stop, step", [(1.0, 1.0, 2.0), (2.0, 1.0, 2.0), (0.0, 1.0, 0.0)])
def test_interval_rejects_bad_arguments(start, stop, step):
    with pytest.raises(ValueError):
        array_interval(start, stop, step)


def test_slice_defaults():
    a = [float(v) for v in range(10)]
    assert array_slice(a, 0, 2, 0) == a[0::2]
    assert array_slice(a, 3, 0, 0) == a[3:]
    assert array_slice(a, 2, 3, 2) == [a[2], a[5]]


def test_slice_errors():
    a = [float(v) for v in range(4)]
    with pytest.raises(ValueError):
        array_slice(a, 4, 1, 0)
    with pytest.raises(IndexError):
        array_slice(a, 1, 2, 3)


@given(number_lists)
def test_full_sort_matches_sorted(values):
    assert array_sort(values, 0) == sorted(values)
    assert array_sort(values, -1) == sorted(values)


@given(number_lists.filter(lambda v: len(v) >= 3))
def test_partial_sort_puts_smallest_first(values):
    result = array_sort(values, 3)
    assert result[:3] == sorted(values)[:3]
    assert sorted(result) == sorted(values)
    assert array_sort(values, -3)[:3] == sorted(values)[:3]


@given(number_lists)
def test_grade_is_permutation_that_sorts(values):
    up = array_grade(values, 0)
    assert sorted(up) == list(range(len(values)))
    assert [values[i] for i in up] == array_sort(values, 0)
    down = array_grade(values, -1)
    assert [values[i] for i in down] == sorted(values, reverse=True)


@given(number_lists.filter(lambda v: len(v) >= 2))
def test_partial_grade(values):
    up = array_grade(values, 2)
    assert [values[i] for i in up[:2]] == sorted(values)[:2]
    down = array_grade(values, -2)
    assert [values[i] for i in down[:2]] == sorted(values, reverse=True)[:2]
    assert sorted(down) == list(range(len(values)))


def test_grade_too_many_raises():
    with pytest.raises(ValueError):
        array_grade([1.0, 2.0], 3)


def test_random_default_range_and_shape():
    result = array_random(3, 4, 0.0, 0.0)
    assert len(result) == 3
    assert all(len(row) == 4 for row in result)
    assert all(0.0 <= v < 1.0 for row in result for v in row)


def test_random_custom_range():
    result = array_random(5, 5, -2.0, 3.0)
    assert all(-2.0 <= v <= 3.0 for row in result for v in row)


def test_random_negative_shape_raises():
    with pytest.raises(ValueError):
        array_random(-1, 2, 0.0, 1.0)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=8))
def test_polynomial_at_zero_and_one(coefficients):
    cs = [float(c) for c in coefficients]
    assert polynomial(cs, 0.0) == cs[0]
    assert polynomial(cs, 1.0) == sum(cs)


@given(st.integers(-50, 50))
def test_polynomial_matches_kahan_a(x):
    assert polynomial([-1.0, 6.0, 0.0, 0.0, -1.0], float(x)) == kahan_a(float(x))


def test_polynomial_of_no_coefficients_is_zero():
    assert polynomial([], 3.0) == 0.0


@given(number_lists)
def test_reverse(values):
    assert reverse(values) == values[::-1]
    assert reverse(reverse(values)) == values