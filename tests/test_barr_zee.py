import numpy as np
import pytest
from scipy.special import spence

from loopfpy.barr_zee import F1, F1t, F2, F3, f_PS, f_S, f_sferm


def _li2(z):
    return spence(1.0 - z)


def _f_ps_complex(z):
    # f_PS through complex dilogarithms, valid on both sides of z = 1/4
    y = np.sqrt(complex(1.0 - 4.0 * z))
    return (2.0 * z / y * (_li2(1.0 - (1.0 - y) / (2.0 * z)) - _li2(1.0 - (1.0 + y) / (2.0 * z)))).real


@pytest.mark.parametrize(
    "z,expected",
    [
        (0.01, 0.247705906318),
        (0.1, 0.910778089194),
        (0.2, 1.258317756943),
        (0.3, 1.496573920403),
        (1.0, 2.343907238689),
        (3.7, 3.449766005966),
    ],
)
def test_f_ps_known_values(z, expected):
    np.testing.assert_allclose(f_PS(z), expected, rtol=1e-10)


@pytest.mark.parametrize("z", [1e-6, 0.01, 0.1, 0.24, 0.26, 0.3, 1.0, 3.7, 50.0])
def test_f_ps_matches_complex_dilogarithm_form(z):
    np.testing.assert_allclose(f_PS(z), _f_ps_complex(z), rtol=1e-10)


def test_f_ps_boundaries():
    assert f_PS(0.0) == 0.0
    assert f_PS(0.25) == np.log(4.0)
    assert np.isnan(f_PS(-0.1))


def test_f_ps_is_continuous_at_threshold():
    np.testing.assert_allclose(f_PS(0.25 - 1e-10), np.log(4.0), rtol=1e-8)
    np.testing.assert_allclose(f_PS(0.25 + 1e-10), np.log(4.0), rtol=1e-8)


def test_f_s_and_f_sferm():
    z = 0.3
    np.testing.assert_allclose(f_S(z), (2.0 * z - 1.0) * f_PS(z) - 2.0 * z * (2.0 + np.log(z)), rtol=1e-14)
    np.testing.assert_allclose(f_sferm(z), 0.5 * z * (2.0 + np.log(z) - f_PS(z)), rtol=1e-14)
    assert f_S(0.0) == 0.0
    assert f_sferm(0.0) == 0.0
    assert np.isnan(f_S(-1.0))
    assert np.isnan(f_sferm(-1.0))


@pytest.mark.parametrize(
    "w,f1,f2,f3",
    [
        (0.1, -0.334052726378, -0.606681591094, 2.809491945938),
        (1.0, -0.828046380655, -0.171953619345, 8.382301474259),
    ],
)
def test_fermion_loop_functions_known_values(w, f1, f2, f3):
    np.testing.assert_allclose(F1(w), f1, rtol=1e-10)
    np.testing.assert_allclose(F2(w), f2, rtol=1e-10)
    np.testing.assert_allclose(F3(w), f3, rtol=1e-10)


def test_fermion_loop_functions_at_threshold():
    assert F1(0.25) == -0.5
    np.testing.assert_allclose(F2(0.25), 1.0 - np.log(4.0), rtol=1e-15)
    assert F3(0.25) == 4.75

    for f in (F1, F2, F3):
        np.testing.assert_allclose(f(0.25 + 1e-10), f(0.25), rtol=1e-8)
        np.testing.assert_allclose(f(0.25 - 1e-10), f(0.25), rtol=1e-8)


def test_fermion_loop_functions_at_zero():
    assert F1(0.0) == 0.0
    assert F2(0.0) == -np.inf
    assert F3(0.0) == -np.inf
    assert F1t(0.0) == 0.0


@pytest.mark.parametrize("f", [F1, F1t, F2, F3])
def test_fermion_loop_functions_domain_error(f):
    assert np.isnan(f(-0.1))


@pytest.mark.parametrize("w", [0.05, 0.25, 0.7, 12.0])
def test_f1t_is_half_f_ps(w):
    assert F1t(w) == 0.5 * f_PS(w)
