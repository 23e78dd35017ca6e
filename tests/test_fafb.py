import itertools

import mpmath
import numpy as np
import pytest

from loopfpy.fafb import G3, G4, Fa, Fb


def _divided_difference(g, x, y):
    return -(g(x) - g(y)) / (x - y)


@pytest.mark.parametrize(
    "x,g3,g4",
    [
        (0.3, 0.75502275313684, 0.273493174058948),
        (2.5, 0.160382439073824, 0.0990439023154407),
        (1.0, 1.0 / 3.0, 1.0 / 6.0),
    ],
)
def test_g3_g4_known_values(x, g3, g4):
    np.testing.assert_allclose(G3(x), g3, rtol=1e-10)
    np.testing.assert_allclose(G4(x), g4, rtol=1e-10)


@pytest.mark.parametrize("g", [G3, G4])
def test_g_is_continuous_at_the_expansion_boundary(g):
    # is_equal(x, 1, 0.01) switches at x = 0.98 and x = 1.01/0.99
    for x in (0.98, 1.01 / 0.99):
        np.testing.assert_allclose(g(x * (1.0 - 1e-9)), g(x * (1.0 + 1e-9)), rtol=1e-8)


def test_g_domain_error():
    assert np.isnan(G3(-1.0))
    assert np.isnan(G4(-1.0))


@pytest.mark.parametrize(
    "x,y,fa,fb",
    [
        (0.3, 2.5, 0.270291051846826, 0.0792951235197761),
        (0.5, 4.0, 0.12522218666485, 0.0442886978201637),
        (2.0, 3.0, 0.0558206444764316, 0.0256852471306506),
    ],
)
def test_fa_fb_known_values(x, y, fa, fb):
    np.testing.assert_allclose(Fa(x, y), fa, rtol=1e-10)
    np.testing.assert_allclose(Fb(x, y), fb, rtol=1e-10)
    np.testing.assert_allclose(Fa(y, x), fa, rtol=1e-10)
    np.testing.assert_allclose(Fb(y, x), fb, rtol=1e-10)


def test_fa_fb_at_one():
    np.testing.assert_allclose(Fa(1.0, 1.0), 0.25, rtol=1e-15)
    np.testing.assert_allclose(Fb(1.0, 1.0), 1.0 / 12.0, rtol=1e-15)


def test_fa_fb_vanish_for_zero_argument():
    assert Fa(0.0, 2.0) == 0.0
    assert Fb(2.0, 0.0) == 0.0


def test_fa_fb_domain_error():
    assert np.isnan(Fa(-1.0, 2.0))
    assert np.isnan(Fb(2.0, -1.0))


@pytest.mark.parametrize("f,g", [(Fa, G3), (Fb, G4)])
@pytest.mark.parametrize(
    "x,y",
    [
        # diagonal expansion
        (2.0, 2.0039),
        (0.4, 0.40078),
        # expansion around one in either argument
        (3.0, 1.0015),
        (1.0015, 0.2),
    ],
)
def test_fa_fb_expansions_match_divided_difference(f, g, x, y):
    np.testing.assert_allclose(f(x, y), _divided_difference(g, x, y), rtol=1e-7)


def test_fa_fb_small_distinct_arguments():
    x, y = 1e-5, 5e-5

    np.testing.assert_allclose(Fa(x, y), _divided_difference(G3, x, y), rtol=1e-12)
    np.testing.assert_allclose(Fb(x, y), _divided_difference(G4, x, y), rtol=1e-12)


def _g3_exact(t):
    d = t - 1
    return (d * (t - 3) + 2 * mpmath.log(t)) / (2 * d**3)


def _g4_exact(t):
    d = t - 1
    return (d * (t + 1) - 2 * t * mpmath.log(t)) / (2 * d**3)


def _reference(g, x, y):
    # the closed forms cancel badly near one; 50 digits leave enough
    with mpmath.workdps(50):
        X, Y = mpmath.mpf(x), mpmath.mpf(y)
        return float(-(g(X) - g(Y)) / (X - Y))


# both sides of every switch: the at-one tolerance (0.998, 1.002), the
# diagonal tolerance (y/x = 0.998, 1.002) and the series radius (0.8, 1.2222)
_CORNER = list(
    itertools.product(
        [0.97, 0.985, 0.9979, 0.9981, 0.9999, 1.0001, 1.0019, 1.0021, 1.015, 1.03],
        [0.971, 0.99, 0.99801, 1.00199, 1.0041042, 1.0213, 1.0299],
    )
)
_DIAGONAL = [
    (x, x * r) for x in (0.7999, 0.8001, 1.2221, 1.2223, 3.0) for r in (1.0019, 1.0021, 0.9981, 0.9979)
]
_AT_ONE = [(x, y) for x in (0.7, 0.7999, 1.2223, 3.0) for y in (1.0019, 1.0021, 0.9981, 0.9979)]
_RADIUS = [(x, y) for y in (0.7999, 0.8001, 1.2221, 1.2223) for x in (0.981, 0.99, 1.01, 1.019, 1.021)]


@pytest.mark.parametrize("x,y", _CORNER + _DIAGONAL + _AT_ONE + _RADIUS)
def test_fa_fb_accurate_on_both_sides_of_every_switch(x, y):
    np.testing.assert_allclose(Fa(x, y), _reference(_g3_exact, x, y), rtol=1e-8)
    np.testing.assert_allclose(Fb(x, y), _reference(_g4_exact, x, y), rtol=1e-8)
    np.testing.assert_allclose(Fa(y, x), _reference(_g3_exact, x, y), rtol=1e-8)
    np.testing.assert_allclose(Fb(y, x), _reference(_g4_exact, x, y), rtol=1e-8)


def test_fa_fb_close_to_one_and_to_each_other():
    x, y = 1.0021, 1.0041042

    np.testing.assert_allclose(Fa(x, y), _reference(_g3_exact, x, y), rtol=1e-13)
    np.testing.assert_allclose(Fb(x, y), _reference(_g4_exact, x, y), rtol=1e-13)
