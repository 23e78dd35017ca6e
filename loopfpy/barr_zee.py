"""Barr-Zee type two-loop functions with a threshold at ``z = 1/4``.

``f_PS``, ``f_S`` and ``f_sferm`` follow Eqs. (70)-(72) of
arXiv:hep-ph/0609168, ``F1``, ``F1t``, ``F2`` and ``F3`` the fermion loop
functions of arXiv:1607.06292. All of them derive from the integral

    f_PS(z) = z * int_0^1 dx log(x(1-x)/z) / (x(1-x) - z)

whose closed form involves ``y = sqrt(1 - 4z)``. Below the threshold ``y`` is
real and ``f_PS`` is a difference of two real dilogarithms. Above it the two
dilogarithm arguments are complex conjugates on the unit circle and the
difference reduces to a single Clausen function,

    f_PS(z) = 4z/s * Cl2(atan2(s, 2z - 1)),   s = sqrt(4z - 1),

so every function here is evaluated in real arithmetic on both sides of the
threshold. The remaining functions are algebraic combinations of ``f_PS``::

    F1(w) = f_S(w)/2
    F2(w) = 1 + log(w)/2 - f_PS(w)/2
    F3(w) = (17 - 30w)/4 f_PS(w) + (1 + 15w)(1 + log(w)/2)
"""

from __future__ import annotations

import logging

import numpy as np

from loopfpy.constants import LOG4
from loopfpy.functions.misc import domain_error
from loopfpy.functions.special import clausen_2, dilog
from loopfpy.regime import THRESHOLD, Regime, classify_threshold

log = logging.getLogger(__name__)


def _f_ps_generic(z: float) -> float:
    if z < THRESHOLD:
        y = np.sqrt(1.0 - 4.0 * z)
        # 1 - (1 - y)/(2z) without the cancellation in 1 - y
        a = -4.0 * z / ((1.0 + y) * (1.0 + y))
        return 2.0 * z / y * (dilog(a) - dilog(1.0 - 0.5 * (1.0 + y) / z))

    s = np.sqrt(4.0 * z - 1.0)
    return 4.0 * z / s * clausen_2(np.arctan2(s, 2.0 * z - 1.0))


_F_PS = {
    Regime.BOUNDARY_AT_ZERO: lambda z: 0.0,
    Regime.THRESHOLD: lambda z: LOG4,
    Regime.GENERIC: _f_ps_generic,
}


def f_PS(z: float) -> float:
    """Pseudoscalar Barr-Zee function.

    Parameters
    ----------
    z:
        Squared-mass ratio ``m_f^2 / m_A^2``.

    Returns
    -------
    float
        ``f_PS(z)``; ``nan`` for negative ``z``.
    """

    regime = classify_threshold(z)
    if regime == Regime.DOMAIN_ERROR:
        return domain_error(log, f"f_PS: z must not be negative! ({z})")
    return _F_PS[regime](z)


def f_S(z: float) -> float:
    """Scalar Barr-Zee function, Eq. (71) of arXiv:hep-ph/0609168."""

    if z < 0.0:
        return domain_error(log, f"f_S: z must not be negative! ({z})")
    if z == 0.0:
        return 0.0

    return (2.0 * z - 1.0) * f_PS(z) - 2.0 * z * (2.0 + np.log(z))


def f_sferm(z: float) -> float:
    """Sfermion Barr-Zee function, Eq. (72) of arXiv:hep-ph/0609168."""

    if z < 0.0:
        return domain_error(log, f"f_sferm: z must not be negative! ({z})")
    if z == 0.0:
        return 0.0

    return 0.5 * z * (2.0 + np.log(z) - f_PS(z))


def _log_divergence(name: str):
    def evaluate(w: float) -> float:
        log.warning(f"{name}: logarithmic divergence at w = 0")
        return -np.inf

    return evaluate


def _f1(w: float) -> float:
    return 0.5 * f_S(w)


def _f2(w: float) -> float:
    return 1.0 + 0.5 * np.log(w) - 0.5 * f_PS(w)


def _f3(w: float) -> float:
    return (17.0 - 30.0 * w) / 4.0 * f_PS(w) + (1.0 + 15.0 * w) * (1.0 + 0.5 * np.log(w))


_F1 = {
    Regime.BOUNDARY_AT_ZERO: lambda w: 0.0,
    Regime.THRESHOLD: lambda w: -0.5,
    Regime.GENERIC: _f1,
}

_F2 = {
    Regime.BOUNDARY_AT_ZERO: _log_divergence("F2"),
    Regime.THRESHOLD: lambda w: -0.38629436111989062,  # 1 - Log[4]
    Regime.GENERIC: _f2,
}

_F3 = {
    Regime.BOUNDARY_AT_ZERO: _log_divergence("F3"),
    Regime.THRESHOLD: lambda w: 19.0 / 4.0,
    Regime.GENERIC: _f3,
}


def _evaluate(name: str, table: dict, w: float) -> float:
    regime = classify_threshold(w)
    if regime == Regime.DOMAIN_ERROR:
        return domain_error(log, f"{name}: w must not be negative! ({w})")
    return table[regime](w)


def F1(w: float) -> float:
    """Fermion loop function ``F^(1)(w)`` for scalar exchange."""
    return _evaluate("F1", _F1, w)


def F1t(w: float) -> float:
    """Fermion loop function ``F~^(1)(w)`` for pseudoscalar exchange."""
    if w < 0.0:
        return domain_error(log, f"F1t: w must not be negative! ({w})")
    return 0.5 * f_PS(w)


def F2(w: float) -> float:
    return _evaluate("F2", _F2, w)


def F3(w: float) -> float:
    return _evaluate("F3", _F3, w)
