import numpy as np
import pytest
from numpy.testing import assert_allclose

from weighted_mad import MissingPolicy, weighted_median


def test_equal_weights_odd():
    x = np.array([3.0, 1.0, 7.0, 4.0, 2.0])
    actual = weighted_median(x, np.ones_like(x))
    desired = np.median(x)
    assert_allclose(actual, desired)


def test_equal_weights_even():
    x = np.array([3.0, 1.0, 7.0, 4.0])
    actual = weighted_median(x, np.full(x.size, 2.5))
    desired = 3.5
    assert_allclose(actual, desired)


def test_random_equal_weights():
    rng = np.random.default_rng(0)
    for n in range(2, 30):
        x = rng.normal(size=n)
        assert_allclose(weighted_median(x, np.full(n, 0.3)), np.median(x))


def test_interpolated():
    x = [1.0, 2.0, 3.0]
    w = [1.0, 1.0, 2.0]
    actual = weighted_median(x, w)
    # midpoints of the weight mass are 1/8, 3/8 and 3/4
    desired = 2.0 + (0.5 - 0.375) / (0.75 - 0.375)
    assert_allclose(actual, desired)


def test_no_weights():
    x = [5, 1, 4, 2]
    assert_allclose(weighted_median(x), 3.0)


def test_heavy_weight_dominates():
    x = [1.0, 2.0, 3.0, 100.0]
    w = [1.0, 1.0, 1.0, 100.0]
    assert weighted_median(x, w, interpolate=False) == 100.0


@pytest.mark.parametrize(
    "ties,desired",
    [
        ("weighted", (4.0 * 2.0 + 6.0 * 3.0) / 10.0),
        ("mean", 2.5),
        ("min", 2.0),
        ("max", 3.0),
    ],
)
def test_ties(ties, desired):
    x = [2.0, 1.0, 5.0]
    w = [2.0, 1.0, 1.0]
    # no value splits the weight in halves
    assert weighted_median(x, w, ties=ties) == 2.0

    x = [1.0, 2.0, 3.0]
    w = [2.0, 4.0, 6.0]
    actual = weighted_median(x, w, ties=ties)
    assert_allclose(actual, desired)


def test_unknown_ties():
    with pytest.raises(ValueError):
        weighted_median([1.0, 2.0], [1.0, 1.0], ties="median")


def test_zero_weights_ignored():
    x = [1.0, 2.0, 3.0, 1000.0, -1000.0]
    w = [1.0, 1.0, 1.0, 0.0, -3.0]
    assert_allclose(weighted_median(x, w), 2.0)


def test_infinite_weights():
    x = [1.0, 2.0, 3.0, 10.0]
    w = [1.0, np.inf, 5.0, np.inf]
    assert_allclose(weighted_median(x, w), 6.0)


def test_empty_and_single():
    assert np.isnan(weighted_median([1.0, 2.0], [0.0, 0.0]))
    assert weighted_median([1.0, 2.0], [0.0, 3.0]) == 2.0
    assert np.isnan(weighted_median([]))


def test_idxs():
    x = np.array([10.0, 1.0, 2.0, 3.0, -10.0])
    w = np.ones(5)
    assert_allclose(weighted_median(x, w, idxs=[1, 2, 3]), 2.0)
    assert_allclose(weighted_median(x, w, idxs=x < 5), 1.5)


def test_length_mismatch():
    with pytest.raises(ValueError, match="does not match"):
        weighted_median([1.0, 2.0, 3.0], [1.0, 1.0])


def test_missing_values():
    x = [1.0, np.nan, 3.0, 4.0]
    w = [1.0, 1.0, 1.0, 1.0]
    assert_allclose(weighted_median(x, w, na_rm=MissingPolicy.DROP), 3.0)
    assert np.isnan(weighted_median(x, w, na_rm=MissingPolicy.PROPAGATE))
    assert_allclose(weighted_median(x, na_rm="drop"), 3.0)
    assert np.isnan(weighted_median(x, na_rm="propagate"))


def test_missing_weight_is_dropped():
    x = [1.0, 2.0, 3.0, 100.0]
    w = [1.0, 1.0, 1.0, np.nan]
    assert_allclose(weighted_median(x, w, na_rm=MissingPolicy.DROP), 2.0)


def test_missing_value_with_negative_weight_is_not_propagated():
    x = [1.0, np.nan, 3.0, 4.0]
    w = [1.0, -1.0, 1.0, 1.0]
    assert_allclose(weighted_median(x, w, na_rm=MissingPolicy.PROPAGATE), 3.0)


def test_missing_values_dropped_before_infinite_weights():
    x = [1.0, np.nan, 3.0, 4.0]
    w = [1.0, np.inf, 1.0, 1.0]
    assert_allclose(weighted_median(x, w, na_rm=MissingPolicy.DROP), 3.0)
