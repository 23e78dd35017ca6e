"""One-loop three-propagator function I(a, b, c).

``Iabc`` takes masses (not squared), ``Ixyz`` takes squared masses. The
generic closed form has removable singularities whenever two squared masses
coincide or one of them vanishes; those configurations use dedicated
expansions to second order in the small difference.
"""

from __future__ import annotations

import logging

import numpy as np

from loopfpy.functions.misc import domain_error, is_equal_rel, is_zero, sqr
from loopfpy.regime import EPS, IABC_EQUAL

log = logging.getLogger(__name__)


def _equal(p: float, q: float) -> bool:
    # squared masses compared by ratio, zero never equals a non-zero mass
    return p > 0.0 and q > 0.0 and is_equal_rel(p, q, IABC_EQUAL)


def I2aaa(a: float, b: float, c: float) -> float:
    """I(a, a, a) in squared arguments, ``a != 0``."""
    ba = b - a
    ca = c - a
    a2 = sqr(a)
    a3 = a2 * a

    return 0.5 / a + (-ba - ca) / (6.0 * a2) + (sqr(ba) + ba * ca + sqr(ca)) / (12.0 * a3)


def I2aac(a: float, b: float, c: float) -> float:
    """I(a, a, c) in squared arguments, ``a != c``."""
    ba = b - a
    ac = a - c
    a2 = sqr(a)
    a3 = a2 * a
    c2 = sqr(c)
    c3 = c2 * c
    ac2 = sqr(ac)
    ac3 = ac2 * ac
    ac4 = ac2 * ac2
    lac = np.log(a / c)

    return (
        (ac - c * lac) / ac2
        + ba * (-a2 + c2 + 2.0 * a * c * lac) / (2.0 * a * ac3)
        + sqr(ba) * (2.0 * a3 + 3.0 * a2 * c - 6.0 * a * c2 + c3 - 6.0 * a2 * c * lac)
        / (6.0 * a2 * ac4)
    )


def I2aa0(a: float, b: float) -> float:
    """I(a, a, 0) in squared arguments, ``a != 0``."""
    a2 = sqr(a)
    a3 = a2 * a
    ba = b - a

    return 1.0 / a - ba / (2.0 * a2) + sqr(ba) / (3.0 * a3)


def I20bc(b: float, c: float) -> float:
    """I(0, b, c) in squared arguments, ``b != c``."""
    return np.log(b / c) / (b - c)


def Iabc(a: float, b: float, c: float) -> float:
    """Three-propagator function of the masses ``a``, ``b``, ``c``.

    Parameters
    ----------
    a, b, c:
        Masses; they enter squared, so the sign is irrelevant.

    Returns
    -------
    float
        ``I(a^2, b^2, c^2)``, which is zero if at least two masses vanish.
    """

    za = is_zero(a, EPS)
    zb = is_zero(b, EPS)
    zc = is_zero(c, EPS)

    if (za and zb) or (za and zc) or (zb and zc):
        return 0.0

    a2 = sqr(a)
    b2 = sqr(b)
    c2 = sqr(c)

    if _equal(a2, b2) and _equal(a2, c2):
        return I2aaa(a2, b2, c2)

    if _equal(a2, b2):
        if zc:
            return I2aa0(a2, b2)
        return I2aac(a2, b2, c2)

    if _equal(b2, c2):
        if za:
            return I2aa0(b2, c2)
        return I2aac(b2, c2, a2)

    if _equal(a2, c2):
        if zb:
            return I2aa0(a2, c2)
        return I2aac(a2, c2, b2)

    if za:
        return I20bc(b2, c2)
    if zb:
        return I20bc(c2, a2)
    if zc:
        return I20bc(a2, b2)

    return (
        a2 * b2 * np.log(a2 / b2) + b2 * c2 * np.log(b2 / c2) + c2 * a2 * np.log(c2 / a2)
    ) / ((a2 - b2) * (b2 - c2) * (a2 - c2))


def Ixyz(x: float, y: float, z: float) -> float:
    """Three-propagator function of the squared masses ``x``, ``y``, ``z``."""

    if x < 0.0 or y < 0.0 or z < 0.0:
        return domain_error(log, f"Ixyz: squared masses must not be negative! ({x}, {y}, {z})")

    return Iabc(np.sqrt(x), np.sqrt(y), np.sqrt(z))
