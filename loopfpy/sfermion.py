"""One-loop sfermion-chargino (F1C-F4C) and sfermion-neutralino (F1N-F4N) functions.

All eight functions are normalized to one at ``x = 1``, where the closed
forms have a removable singularity of order ``(x - 1)^3`` or ``(x - 1)^4``.
Inside ``is_equal(x, 1, radius)`` a sixth order Taylor polynomial with
literal rational coefficients is used instead. The value at ``x = 0`` is the
analytic limit.

References: Stöckinger, J. Phys. G34 (2007) R45; Fargnoli et al.,
JHEP 1402 (2014) 070.
"""

from __future__ import annotations

import logging

import numpy as np

from loopfpy.constants import PI2
from loopfpy.functions.misc import domain_error, pow3, pow4, sqr
from loopfpy.functions.special import dilog
from loopfpy.regime import NEAR_ONE_RADIUS, Regime, classify_unary

log = logging.getLogger(__name__)


def _constant(value: float):
    def evaluate(x: float) -> float:
        return value

    return evaluate


def _log_divergence(name: str):
    def evaluate(x: float) -> float:
        log.warning(f"{name}: logarithmic divergence at x = 0")
        return -np.inf

    return evaluate


def _evaluate(name: str, table: dict, x: float, has_zero_limit: bool = True) -> float:
    if x == 0.0:
        return table[Regime.BOUNDARY_AT_ZERO](x)
    regime = classify_unary(x, NEAR_ONE_RADIUS[name], has_zero_limit)
    if regime == Regime.DOMAIN_ERROR:
        return domain_error(log, f"{name}: x must not be negative! ({x})")
    return table[regime](x)


# F1C


def _f1c_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        -0.6 + d * (0.4 + d * (-2.0 / 7.0 + d * (3.0 / 14.0 + d * (-1.0 / 6.0 + 2.0 / 15.0 * d))))
    )


def _f1c(x: float) -> float:
    return 2.0 / pow4(x - 1.0) * (2.0 + x * (3.0 + 6.0 * np.log(x) + x * (-6.0 + x)))


_F1C = {
    Regime.BOUNDARY_AT_ZERO: _constant(4.0),
    Regime.BOUNDARY_AT_ONE: _f1c_near_one,
    Regime.GENERIC: _f1c,
}


def F1C(x: float) -> float:
    """Chargino loop function F1C, ``F1C(0) = 4``, ``F1C(1) = 1``."""
    return _evaluate("F1C", _F1C, x)


# F2C


def _f2c_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        -0.75 + d * (0.6 + d * (-0.5 + d * (3.0 / 7.0 + d * (-0.375 + 1.0 / 3.0 * d))))
    )


def _f2c(x: float) -> float:
    return 3.0 / (2.0 * pow3(1.0 - x)) * (-3.0 - 2.0 * np.log(x) + x * (4.0 - x))


_F2C = {
    Regime.BOUNDARY_AT_ZERO: _constant(0.0),
    Regime.BOUNDARY_AT_ONE: _f2c_near_one,
    Regime.GENERIC: _f2c,
}


def F2C(x: float) -> float:
    """Chargino loop function F2C, ``F2C(0) = 0``, ``F2C(1) = 1``."""
    return _evaluate("F2C", _F2C, x)


# F3C


def _f3c_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        1059.0 / 1175.0
        + d
        * (
            -4313.0 / 3525.0
            + d
            * (
                70701.0 / 57575.0
                + d * (-265541.0 / 230300.0 + d * (48919.0 / 46060.0 - 80755.0 / 82908.0 * d))
            )
        )
    )


def _f3c(x: float) -> float:
    lx = np.log(x)
    x2 = sqr(x)
    return (
        4.0
        / (141.0 * pow4(x - 1.0))
        * (
            (1.0 - x) * (151.0 * x2 - 335.0 * x + 592.0)
            + 6.0 * (21.0 * pow3(x) - 108.0 * x2 - 93.0 * x + 50.0) * lx
            - 54.0 * x * (x2 - 2.0 * x - 2.0) * sqr(lx)
            - 108.0 * x * (x2 - 2.0 * x + 12.0) * dilog(1.0 - x)
        )
    )


_F3C = {
    Regime.BOUNDARY_AT_ZERO: _log_divergence("F3C"),
    Regime.BOUNDARY_AT_ONE: _f3c_near_one,
    Regime.GENERIC: _f3c,
}


def F3C(x: float) -> float:
    """Two-loop chargino function F3C, diverging like ``log x`` at zero."""
    # only x = 0 itself diverges, the closed form holds down to the smallest x
    return _evaluate("F3C", _F3C, x, has_zero_limit=False)


# F4C


def _f4c_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        -45.0 / 122.0
        + d
        * (
            941.0 / 6100.0
            + d
            * (
                -17.0 / 305.0
                + d * (282.0 / 74725.0 + d * (177.0 / 6832.0 - 47021.0 / 1076040.0 * d))
            )
        )
    )


def _f4c(x: float) -> float:
    lx = np.log(x)
    x2 = sqr(x)
    return (
        -9.0
        / (122.0 * pow3(1.0 - x))
        * (
            8.0 * (x2 - 3.0 * x + 2.0)
            + (11.0 * x2 - 40.0 * x + 5.0) * lx
            - 2.0 * (x2 - 2.0 * x - 2.0) * sqr(lx)
            - 4.0 * (x2 - 2.0 * x + 9.0) * dilog(1.0 - x)
        )
    )


_F4C = {
    Regime.BOUNDARY_AT_ZERO: _constant(0.0),
    Regime.BOUNDARY_AT_ONE: _f4c_near_one,
    Regime.GENERIC: _f4c,
}


def F4C(x: float) -> float:
    return _evaluate("F4C", _F4C, x)


# F1N


def _f1n_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        -0.4 + d * (0.2 + d * (-4.0 / 35.0 + d * (1.0 / 14.0 + d * (-1.0 / 21.0 + 1.0 / 30.0 * d))))
    )


def _f1n(x: float) -> float:
    return 2.0 / pow4(x - 1.0) * (1.0 + x * (-6.0 + x * (3.0 - 6.0 * np.log(x) + 2.0 * x)))


_F1N = {
    Regime.BOUNDARY_AT_ZERO: _constant(2.0),
    Regime.BOUNDARY_AT_ONE: _f1n_near_one,
    Regime.GENERIC: _f1n,
}


def F1N(x: float) -> float:
    """Neutralino loop function F1N, ``F1N(0) = 2``, ``F1N(1) = 1``."""
    return _evaluate("F1N", _F1N, x)


# F2N


def _f2n_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        -0.5 + d * (0.3 + d * (-0.2 + d * (1.0 / 7.0 + d * (-3.0 / 28.0 + 1.0 / 12.0 * d))))
    )


def _f2n(x: float) -> float:
    return 3.0 / pow3(1.0 - x) * (1.0 + x * (2.0 * np.log(x) - x))


_F2N = {
    Regime.BOUNDARY_AT_ZERO: _constant(3.0),
    Regime.BOUNDARY_AT_ONE: _f2n_near_one,
    Regime.GENERIC: _f2n,
}


def F2N(x: float) -> float:
    """Neutralino loop function F2N, ``F2N(0) = 3``, ``F2N(1) = 1``."""
    return _evaluate("F2N", _F2N, x)


# F3N


def _f3n_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * (
        76.0 / 875.0
        + d
        * (
            -431.0 / 2625.0
            + d
            * (
                5858.0 / 42875.0
                + d * (-3561.0 / 34300.0 + d * (23.0 / 294.0 - 4381.0 / 73500.0 * d))
            )
        )
    )


def _f3n(x: float) -> float:
    x2 = sqr(x)
    return (
        4.0
        / (105.0 * pow4(x - 1.0))
        * (
            (1.0 - x) * (-97.0 * x2 - 529.0 * x + 2.0)
            + 6.0 * x2 * (13.0 * x + 81.0) * np.log(x)
            + 108.0 * x * (7.0 * x + 4.0) * dilog(1.0 - x)
        )
    )


_F3N = {
    Regime.BOUNDARY_AT_ZERO: _constant(8.0 / 105.0),
    Regime.BOUNDARY_AT_ONE: _f3n_near_one,
    Regime.GENERIC: _f3n,
}


def F3N(x: float) -> float:
    return _evaluate("F3N", _F3N, x)


# F4N


def _f4n_near_one(x: float) -> float:
    d = x - 1.0
    return 1.0 + sqr(d) * (
        -111.0 / 800.0
        + d * (59.0 / 400.0 + d * (-129.0 / 980.0 + d * (177.0 / 1568.0 - 775.0 / 8064.0 * d)))
    )


def _f4n(x: float) -> float:
    return (
        -2.25
        / pow3(1.0 - x)
        * ((x + 3.0) * (x * np.log(x) + x - 1.0) + (6.0 * x + 2.0) * dilog(1.0 - x))
    )


_F4N = {
    Regime.BOUNDARY_AT_ZERO: _constant(-3.0 / 4.0 * (-9.0 + PI2)),
    Regime.BOUNDARY_AT_ONE: _f4n_near_one,
    Regime.GENERIC: _f4n,
}


def F4N(x: float) -> float:
    return _evaluate("F4N", _F4N, x)
