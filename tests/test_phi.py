from itertools import permutations

import numpy as np
import pytest

from loopfpy.constants import PHI_DEGENERATE
from loopfpy.phi import Phi, lambda_2, phi_uv


@pytest.mark.parametrize(
    "args,expected",
    [
        ((1.0, 1.0, 1.0), -3.51586085803419),
        ((1.0, 2.0, 3.0), -5.01655466964575),
        ((0.3, 0.1, 5.0), 31.2068793107716),
        ((2.0, 3.0, 4.0), -9.24064061754268),
        ((0.5, 0.5, 1.0), -1.83193118835442),
        ((0.001, 0.002, 1.0), 23.0176937542422),
    ],
)
def test_phi_known_values(args, expected):
    np.testing.assert_allclose(Phi(*args), expected, rtol=1e-9)


@pytest.mark.parametrize(
    "args",
    [(1.0, 2.0, 3.0), (0.3, 0.1, 5.0), (7.0, 0.02, 0.5), (1.0, 1.0, 2.0), (4.0, 1.0, 1.0)],
)
def test_phi_is_symmetric(args):
    values = [Phi(*p) for p in permutations(args)]

    assert all(v == values[0] for v in values)


def test_phi_degenerate_point():
    # lambda^2(1, 1) = -3
    np.testing.assert_allclose(Phi(1.0, 1.0, 1.0), -1.5 * PHI_DEGENERATE, rtol=1e-15)
    np.testing.assert_allclose(Phi(2.0, 2.0, 2.0), -3.0 * PHI_DEGENERATE, rtol=1e-15)


def test_phi_vanishes_on_the_threshold():
    assert Phi(1.0, 1.0, 4.0) == 0.0
    assert Phi(1.0, 4.0, 9.0) == 0.0
    assert Phi(0.0, 2.0, 2.0) == 0.0


def test_phi_boundaries():
    assert Phi(0.0, 0.0, 0.0) == 0.0
    assert Phi(0.0, 1.0, 2.0) == np.inf
    assert np.isnan(Phi(-1.0, 1.0, 1.0))
    assert np.isnan(Phi(1.0, 1.0, -1.0))


def test_phi_small_masses_approach_double_log():
    # Phi -> z/2 (log u log v + pi^2/3) for u, v -> 0
    u, v = 1e-9, 5e-8
    expected = 0.5 * (np.log(u) * np.log(v) + np.pi**2 / 3.0)

    np.testing.assert_allclose(Phi(u, v, 1.0), expected, rtol=1e-5)


@pytest.mark.parametrize("u", [0.02, 0.2, 0.5, 0.8])
def test_phi_is_continuous_across_diagonal_tolerance(u):
    inside = Phi(u, u * (1.0 + 1.9e-7), 1.0)
    outside = Phi(u, u * (1.0 + 2.1e-7), 1.0)

    np.testing.assert_allclose(inside, outside, rtol=1e-6)


def test_phi_is_continuous_at_the_degenerate_point():
    np.testing.assert_allclose(Phi(1.0, 1.0 + 1e-9, 1.0), Phi(1.0, 1.0, 1.0), rtol=1e-7)
    np.testing.assert_allclose(Phi(1.0, 1.0 + 1e-6, 1.0), Phi(1.0, 1.0, 1.0), rtol=1e-5)


def test_phi_is_continuous_across_the_pseudo_threshold():
    # lambda^2 changes sign at z = (sqrt x + sqrt y)^2 = 4
    below = Phi(1.0, 1.0, 4.0 - 1e-7)
    above = Phi(1.0, 1.0, 4.0 + 1e-7)

    np.testing.assert_allclose(below, 0.0, atol=1e-5)
    np.testing.assert_allclose(above, 0.0, atol=1e-5)


def test_lambda_2():
    assert lambda_2(0.0, 0.0) == 1.0
    assert lambda_2(1.0, 1.0) == -3.0
    assert lambda_2(2.0, 2.0, 2.0) == -3.0


def test_phi_uv_inversion_identity():
    u, v = 4.0, 0.5
    np.testing.assert_allclose(phi_uv(u, v), phi_uv(1.0 / u, v / u) / u, rtol=1e-13)


def test_phi_is_deterministic():
    assert Phi(0.3, 0.1, 5.0) == Phi(0.3, 0.1, 5.0)
