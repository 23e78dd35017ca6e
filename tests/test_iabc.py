from itertools import permutations

import numpy as np
import pytest

from loopfpy.iabc import Iabc, Ixyz


def _closed_form(x, y, z):
    return (
        x * y * np.log(x / y) + y * z * np.log(y / z) + z * x * np.log(z / x)
    ) / ((x - y) * (y - z) * (x - z))


@pytest.mark.parametrize(
    "args,expected",
    [
        ((1.0, 2.0, 3.0), 0.124697033602012),
        ((0.5, 1.5, 4.0), 0.127492323712917),
        ((2.0, 3.0, 5.0), 0.0451231381569361),
        ((0.0, 2.0, 3.0), 0.162186043243266),
    ],
)
def test_iabc_known_values(args, expected):
    np.testing.assert_allclose(Iabc(*args), expected, rtol=1e-10)


@pytest.mark.parametrize("args", [(1.0, 2.0, 3.0), (0.0, 2.0, 3.0), (1.0, 1.0, 3.0), (0.0, 2.0, 2.0)])
def test_iabc_is_symmetric(args):
    values = [Iabc(*p) for p in permutations(args)]

    np.testing.assert_allclose(values, values[0], rtol=1e-12)


def test_iabc_degenerate_values():
    # I(a, a, a) = 1/(2a^2), I(a, a, 0) = 1/a^2
    np.testing.assert_allclose(Iabc(1.0, 1.0, 1.0), 0.5, rtol=1e-15)
    np.testing.assert_allclose(Iabc(2.0, 2.0, 2.0), 0.125, rtol=1e-15)
    np.testing.assert_allclose(Iabc(2.0, 2.0, 0.0), 0.25, rtol=1e-15)
    assert Iabc(0.0, 0.0, 3.0) == 0.0
    assert Iabc(0.0, 0.0, 0.0) == 0.0


def test_iabc_sign_of_masses_is_irrelevant():
    assert Iabc(-1.0, 2.0, -3.0) == Iabc(1.0, 2.0, 3.0)


@pytest.mark.parametrize("b", [1.0009, 0.9991])
def test_iabc_two_equal_expansion_matches_closed_form(b):
    np.testing.assert_allclose(Iabc(1.0, b, 3.0), _closed_form(1.0, b * b, 9.0), rtol=1e-7)


def test_iabc_three_equal_expansion_matches_closed_form():
    # closed form evaluated in extended precision
    np.testing.assert_allclose(Iabc(1.0, 1.0003, 1.0006), 0.49970013494602011, rtol=1e-8)


def test_iabc_small_distinct_masses_use_closed_form():
    np.testing.assert_allclose(Iabc(1e-3, 3e-3, 1.0), _closed_form(1e-6, 9e-6, 1.0), rtol=1e-12)


def test_ixyz():
    assert Ixyz(1.0, 4.0, 9.0) == Iabc(1.0, 2.0, 3.0)
    assert np.isnan(Ixyz(-1.0, 4.0, 9.0))
