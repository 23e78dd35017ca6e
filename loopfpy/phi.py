"""Two-loop vacuum function Phi(x, y, z).

Implements the Davydychev-Tausk function for three squared masses
(Nucl. Phys. B397 (1993) 23). The reduced function ``phi_uv(u, v)`` with
``u = x/z``, ``v = y/z`` is evaluated

- through dilogarithms when the triangle discriminant ``lambda^2(u, v)`` is
  positive (``phi_pos``),
- through Clausen functions when it is negative (``phi_neg``),
- as zero when it vanishes, since ``Phi`` multiplies ``phi_uv`` by
  ``lambda^2`` and the product has a removable singularity there.

The following identities hold and are used to map every point into the
region ``u, v <= 1`` where the dilogarithm form is accurate::

    phi_uv(u, v) = phi_uv(v, u) = phi_uv(1/u, v/u)/u = phi_uv(1/v, u/v)/v
"""

from __future__ import annotations

import logging

import numpy as np

from loopfpy.constants import PHI_DEGENERATE, PI2
from loopfpy.functions.misc import domain_error, is_zero, sort3, sqr
from loopfpy.functions.special import clausen_2, dilog
from loopfpy.regime import EPS, PHI_LAMBDA_ZERO, Regime, classify_phi

log = logging.getLogger(__name__)

# below this both reduced arguments are expanded in a double series
SMALL_UV = EPS**0.25


def lambda_2(u: float, v: float, z: float | None = None) -> float:
    """Källén triangle function ``lambda^2(u, v) = (1 - u - v)^2 - 4uv``.

    Parameters
    ----------
    u, v:
        Squared-mass ratios, or squared masses if ``z`` is given.
    z:
        Optional reference squared mass; ``u`` and ``v`` are divided by it.

    Returns
    -------
    float
        The discriminant. Positive values correspond to configurations below
        the pseudo-threshold, negative values to configurations above it.
    """

    if z is not None:
        u, v = u / z, v / z
    return sqr(1.0 - u - v) - 4.0 * u * v


def _acos(x: float) -> float:
    # rounding can push the cosine marginally outside [-1, 1]
    return np.arccos(min(1.0, max(-1.0, x)))


def _phi_pos_args(u: float, v: float, lam: float) -> tuple[float, float]:
    """Dilogarithm arguments ``x = (1 - lam + u - v)/2``, ``y = (1 - lam - u + v)/2``.

    ``x`` and ``y`` solve ``x (1 - y) = u`` and ``y (1 - x) = v``. The
    rationalized forms avoid the subtraction ``1 - lam`` which cancels for
    small ``u`` and ``v``.
    """

    if u < SMALL_UV and v < SMALL_UV:
        s = (
            1.0
            + (u + v)
            + (u * u + 3.0 * u * v + v * v)
            + (u * u * u + 6.0 * u * v * (u + v) + v * v * v)
        )
        return u * (1.0 + v * s), v * (1.0 + u * s)
    return 2.0 * u / (1.0 + u - v + lam), 2.0 * v / (1.0 - u + v + lam)


def _phi_pos_degenerate(u: float, v: float) -> float:
    return PHI_DEGENERATE


def _phi_pos_diagonal(u: float, v: float) -> float:
    m = 0.5 * (u + v)
    lam = np.sqrt(1.0 - 4.0 * m)
    x = 2.0 * m / (1.0 + lam)  # (1 - lam)/2
    return (
        -sqr(np.log(m)) + 2.0 * sqr(np.log(x)) - 4.0 * dilog(x) + PI2 / 3.0
    ) / lam


def _phi_pos_generic(u: float, v: float) -> float:
    lam = np.sqrt(lambda_2(u, v))
    x, y = _phi_pos_args(u, v, lam)
    return (
        -np.log(u) * np.log(v)
        + 2.0 * np.log(x) * np.log(y)
        - 2.0 * dilog(x)
        - 2.0 * dilog(y)
        + PI2 / 3.0
    ) / lam


_PHI_POS = {
    Regime.DOUBLE_DEGENERATE: _phi_pos_degenerate,
    Regime.DIAGONAL: _phi_pos_diagonal,
    Regime.BOUNDARY_AT_ONE: _phi_pos_generic,
    Regime.GENERIC: _phi_pos_generic,
}


def phi_pos(u: float, v: float) -> float:
    """``phi_uv`` for ``u, v <= 1`` and ``lambda^2(u, v) > 0``; symmetric in ``u, v``."""

    regime, _ = classify_phi(u, v)
    return _PHI_POS[regime](u, v)


def _phi_neg_1v(v: float, lam: float) -> float:
    """``phi_neg(1, v)``."""

    return (
        2.0
        * (clausen_2(2.0 * _acos(0.5 * (2.0 - v))) + 2.0 * clausen_2(2.0 * _acos(0.5 * np.sqrt(v))))
        / lam
    )


def _phi_neg_diagonal(u: float) -> float:
    lam = np.sqrt(4.0 * u - 1.0)
    return (
        2.0
        * (
            2.0 * clausen_2(2.0 * _acos(1.0 / (2.0 * np.sqrt(u))))
            + clausen_2(2.0 * _acos((2.0 * u - 1.0) / (2.0 * u)))
        )
        / lam
    )


def _phi_neg_generic(u: float, v: float, lam: float) -> float:
    sqrtu = np.sqrt(u)
    sqrtv = np.sqrt(v)
    return (
        2.0
        * (
            clausen_2(2.0 * _acos(0.5 * (1.0 + u - v) / sqrtu))
            + clausen_2(2.0 * _acos(0.5 * (1.0 - u + v) / sqrtv))
            + clausen_2(2.0 * _acos(0.5 * (-1.0 + u + v) / (sqrtu * sqrtv)))
        )
        / lam
    )


def phi_neg(u: float, v: float) -> float:
    """``phi_uv`` for ``lambda^2(u, v) < 0``; symmetric in ``u, v``."""

    regime, swap = classify_phi(u, v)
    match regime:
        case Regime.DOUBLE_DEGENERATE:
            return PHI_DEGENERATE
        case Regime.BOUNDARY_AT_ONE:
            lam = np.sqrt(-lambda_2(u, v))
            return _phi_neg_1v(v if swap else u, lam)
        case Regime.DIAGONAL:
            return _phi_neg_diagonal(0.5 * (u + v))
        case _:
            return _phi_neg_generic(u, v, np.sqrt(-lambda_2(u, v)))


def phi_uv(u: float, v: float) -> float:
    """Reduced Phi function of the mass ratios ``u = x/z`` and ``v = y/z``."""

    lam2 = lambda_2(u, v)

    if is_zero(lam2, PHI_LAMBDA_ZERO):
        # phi_uv is always multiplied by lambda^2
        return 0.0

    if lam2 > 0.0:
        if u <= 1.0 and v <= 1.0:
            return phi_pos(u, v)
        if u >= 1.0 and v / u <= 1.0:
            return phi_pos(1.0 / u, v / u) / u
        # v >= 1 and u/v <= 1
        return phi_pos(1.0 / v, u / v) / v

    return phi_neg(u, v)


def Phi(x: float, y: float, z: float) -> float:
    """Phi function of three squared masses.

    Parameters
    ----------
    x, y, z:
        Squared masses, in any order.

    Returns
    -------
    float
        ``phi_uv(u, v) * z * lambda^2(u, v) / 2`` with ``z`` the largest
        argument and ``u``, ``v`` the other two divided by it. A negative
        argument returns ``nan``. A vanishing smallest argument is a
        logarithmic divergence and returns ``inf``.

    Notes
    -----
    The result is fully symmetric under permutations of the arguments since
    they are sorted before evaluation.
    """

    if x < 0.0 or y < 0.0 or z < 0.0:
        return domain_error(log, f"Phi: squared masses must not be negative! ({x}, {y}, {z})")

    x, y, z = sort3(x, y, z)

    if z == 0.0:
        return 0.0

    u, v = x / z, y / z
    lam2 = lambda_2(u, v)

    if u == 0.0 and not is_zero(lam2, PHI_LAMBDA_ZERO):
        log.warning(f"Phi: logarithmic divergence for vanishing squared mass ({x}, {y}, {z})")
        return np.inf

    return phi_uv(u, v) * z * lam2 / 2.0
