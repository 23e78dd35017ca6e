"""Two-argument loop functions Fa, Fb and their one-argument building blocks G3, G4.

``Fa`` and ``Fb`` are the divided differences ``-(G(x) - G(y))/(x - y)`` of
``G3`` and ``G4``. Close to ``x = y`` and close to ``x = 1`` or ``y = 1`` the
difference is replaced by expansions to second order in the small
distances. When both arguments lie within ``FAB_NEAR_ONE`` of one, the
expansions around ``x = y`` and around one lose precision to cancellation,
and the divided difference is taken term by term from the power series of
``G`` around one instead, which involves no subtraction at all.
"""

from __future__ import annotations

import logging

import numpy as np

from loopfpy.functions.misc import domain_error, is_equal, pow3, pow4, sqr
from loopfpy.regime import FA_EQUAL, FAB_NEAR_ONE, FB_EQUAL, G_NEAR_ONE, Regime, classify_pair

log = logging.getLogger(__name__)

# Taylor coefficients of G3 and G4 in (x - 1); 32 terms reach double
# precision for |x - 1| up to the FAB_NEAR_ONE boundary near 0.22
SERIES_TERMS = 32
G3_SERIES = [(-1.0) ** k / (k + 3.0) for k in range(SERIES_TERMS)]
G4_SERIES = [(-1.0) ** k / ((k + 2.0) * (k + 3.0)) for k in range(SERIES_TERMS)]


def G3(x: float) -> float:
    if x < 0.0:
        return domain_error(log, f"G3: x must not be negative! ({x})")

    if is_equal(x, 1.0, G_NEAR_ONE):
        d = x - 1.0
        return 1.0 / 3.0 + d * (-0.25 + d * (0.2 + (-1.0 / 6.0 + d / 7.0) * d))

    return 1.0 / (2.0 * pow3(x - 1.0)) * ((x - 1.0) * (x - 3.0) + 2.0 * np.log(x))


def G4(x: float) -> float:
    if x < 0.0:
        return domain_error(log, f"G4: x must not be negative! ({x})")

    if is_equal(x, 1.0, G_NEAR_ONE):
        d = x - 1.0
        return 1.0 / 6.0 + d * (-1.0 / 12.0 + d * (0.05 + (-1.0 / 30.0 + d / 42.0) * d))

    return 1.0 / (2.0 * pow3(x - 1.0)) * ((x - 1.0) * (x + 1.0) - 2.0 * x * np.log(x))


def _series_divided_difference(coefficients: list[float], x: float, y: float) -> float:
    """Divided difference of a power series in ``(x - 1)``, term by term.

    Uses ``(dx^k - dy^k)/(dx - dy) = sum_j dx^j dy^(k-1-j)``, built up with
    ``h_k = dx h_(k-1) + dy^k``.
    """
    dx = x - 1.0
    dy = y - 1.0
    h = 1.0
    dy_k = 1.0
    total = 0.0
    for c in coefficients[1:]:
        total += c * h
        dy_k *= dy
        h = dx * h + dy_k

    return -total


def _series(coefficients: list[float], d: float) -> float:
    result = 0.0
    for c in reversed(coefficients):
        result = result * d + c
    return result


def Fb11(x: float, y: float) -> float:
    """Fb(x, y) expanded around ``x = y = 1``."""
    return _series_divided_difference(G4_SERIES, x, y)


def Fb1(x: float, y: float) -> float:
    """Fb(x, y) expanded around ``y = 1``; ``x != 0, 1``."""
    x1 = x - 1.0
    y1 = y - 1.0
    lx = np.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (2.0 + x * (3.0 + 6.0 * lx + x * (-6.0 + x))) / (6.0 * x14)
        + y1 * (3.0 + x * (10.0 + 12.0 * lx + x * (-18.0 + x * (6.0 - x)))) / (12.0 * x15)
        + sqr(y1)
        * (12.0 + x * (65.0 + 60.0 * lx + x * (-120.0 + x * (60.0 + x * (-20.0 + 3.0 * x)))))
        / (60.0 * x16)
    )


def Fbx(x: float, y: float) -> float:
    """Fb(x, y) expanded around ``y = x``; ``x != 0, 1``."""
    x1 = x - 1.0
    d = y - x
    lx = np.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (-5.0 - 2.0 * lx + x * (4.0 - 4.0 * lx + x)) / (2.0 * x14)
        - d * (-1.0 + x * (-9.0 - 6.0 * lx + x * (9.0 - 6.0 * lx + x))) / (2.0 * x15 * x)
        - sqr(d)
        * (-1.0 + x * (12.0 + x * (36.0 + 36.0 * lx + x * (-44.0 + 24.0 * lx - 3.0 * x))))
        / (6.0 * x16 * sqr(x))
    )


def Fa11(x: float, y: float) -> float:
    """Fa(x, y) expanded around ``x = y = 1``."""
    return _series_divided_difference(G3_SERIES, x, y)


def Fa1(x: float, y: float) -> float:
    """Fa(x, y) expanded around ``y = 1``; ``x != 0, 1``."""
    x1 = x - 1.0
    y1 = y - 1.0
    lx = np.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1

    return (
        (-11.0 - 6.0 * lx + x * (18.0 + x * (-9.0 + 2.0 * x))) / (6.0 * x14)
        + y1 * (-25.0 - 12.0 * lx + x * (48.0 + x * (-36.0 + x * (16.0 - 3.0 * x)))) / (12.0 * x15)
        + sqr(y1)
        * (-137.0 - 60.0 * lx + x * (300.0 + x * (-300.0 + x * (200.0 + x * (-75.0 + 12.0 * x)))))
        / (60.0 * x16)
    )


def Fax(x: float, y: float) -> float:
    """Fa(x, y) expanded around ``y = x``; ``x != 0, 1``."""
    x1 = x - 1.0
    d = y - x
    lx = np.log(x)
    x14 = pow4(x1)
    x15 = x14 * x1
    x16 = x15 * x1
    x2 = sqr(x)
    x3 = x2 * x

    return (
        (2.0 + x * (3.0 + 6.0 * lx + x * (-6.0 + x))) / (2.0 * x14 * x)
        - d * (-1.0 + x * (8.0 + x * (12.0 * lx + x * (-8.0 + x)))) / (2.0 * x15 * x2)
        - sqr(d)
        * (-2.0 + x * (15.0 + x * (-60.0 + x * (20.0 - 60.0 * lx + x * (30.0 - 3.0 * x)))))
        / (6.0 * x16 * x3)
    )


def _divided_difference(g, coefficients: list[float]):
    def value(x: float) -> float:
        # one argument may still lie close to one, where the degree-4
        # expansion of g is not accurate enough for the difference
        if is_equal(x, 1.0, FAB_NEAR_ONE):
            return _series(coefficients, x - 1.0)
        return g(x)

    def evaluate(x: float, y: float) -> float:
        return -(value(x) - value(y)) / (x - y)

    return evaluate


def _zero(x: float, y: float) -> float:
    return 0.0


_FA = {
    Regime.BOUNDARY_AT_ZERO: _zero,
    Regime.DOUBLE_DEGENERATE: Fa11,
    Regime.BOUNDARY_AT_ONE: Fa1,
    Regime.DIAGONAL: Fax,
    Regime.GENERIC: _divided_difference(G3, G3_SERIES),
}

_FB = {
    Regime.BOUNDARY_AT_ZERO: _zero,
    Regime.DOUBLE_DEGENERATE: Fb11,
    Regime.BOUNDARY_AT_ONE: Fb1,
    Regime.DIAGONAL: Fbx,
    Regime.GENERIC: _divided_difference(G4, G4_SERIES),
}


def _evaluate_pair(name: str, table: dict, tol: float, x: float, y: float) -> float:
    regime, swap = classify_pair(x, y, tol, FAB_NEAR_ONE)
    if regime == Regime.DOMAIN_ERROR:
        return domain_error(log, f"{name}: arguments must not be negative! ({x}, {y})")
    if swap:
        # the expansion around one takes that argument second
        x, y = y, x
    return table[regime](x, y)


def Fa(x: float, y: float) -> float:
    """Loop function Fa, symmetric in its squared-mass-ratio arguments.

    Parameters
    ----------
    x, y:
        Non-negative squared-mass ratios.

    Returns
    -------
    float
        ``-(G3(x) - G3(y))/(x - y)``, zero if either argument vanishes, and
        ``nan`` for a negative argument.
    """

    return _evaluate_pair("Fa", _FA, FA_EQUAL, x, y)


def Fb(x: float, y: float) -> float:
    """Loop function Fb, symmetric in its squared-mass-ratio arguments.

    Parameters
    ----------
    x, y:
        Non-negative squared-mass ratios.

    Returns
    -------
    float
        ``-(G4(x) - G4(y))/(x - y)``, zero if either argument vanishes, and
        ``nan`` for a negative argument.
    """

    return _evaluate_pair("Fb", _FB, FB_EQUAL, x, y)
