"""Regime classification for the loop functions.

Every public function first classifies its arguments into a :class:`Regime`
and then looks up the evaluator responsible for that regime in a dispatch
table. The tolerances that decide the classification live in this module so
that they can be inspected and tested independently of the formulas.

Notes
-----
The tolerances are tuned per family: each one marks the distance from a
singular configuration below which the closed form loses more than roughly
``1e-10`` relative precision, and the dedicated expansion is used instead.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from loopfpy.functions.misc import is_equal, is_equal_rel, is_zero

EPS = 10.0 * np.finfo(float).eps

# Phi engine
PHI_EQUAL = 1.0e-7
PHI_LAMBDA_ZERO = 1.0e-11

# I, Fa, Fb, G3, G4 families
IABC_EQUAL = 0.001
FA_EQUAL = 0.001
FB_EQUAL = 0.001
G_NEAR_ONE = 0.01
# both Fa/Fb arguments inside this radius of one use the series around (1, 1)
FAB_NEAR_ONE = 0.1

# radius of the Taylor expansion around x = 1 for the one-argument functions
NEAR_ONE_RADIUS = {
    "F1C": 0.03,
    "F2C": 0.03,
    "F3C": 0.03,
    "F4C": 0.03,
    "F1N": 0.03,
    "F2N": 0.04,
    "F3N": 0.03,
    "F4N": 0.03,
}

THRESHOLD = 0.25


class Regime(IntEnum):
    """Numerical regime of a loop-function argument configuration."""

    DOMAIN_ERROR = -1
    GENERIC = 0
    DIAGONAL = 1
    BOUNDARY_AT_ONE = 2
    BOUNDARY_AT_ZERO = 3
    DOUBLE_DEGENERATE = 4
    THRESHOLD = 5


def classify_unary(x: float, radius: float, has_zero_limit: bool = True) -> Regime:
    """Classify the argument of a one-argument function with a singular point at one.

    Parameters
    ----------
    x:
        Squared-mass ratio.
    radius:
        Relative tolerance of the expansion around ``x = 1``.
    has_zero_limit:
        Whether ``x = 0`` is a separate boundary case.

    Returns
    -------
    Regime
        ``DOMAIN_ERROR``, ``BOUNDARY_AT_ZERO``, ``BOUNDARY_AT_ONE`` or
        ``GENERIC``.
    """

    if x < 0.0:
        return Regime.DOMAIN_ERROR
    if has_zero_limit and is_zero(x, EPS):
        return Regime.BOUNDARY_AT_ZERO
    if is_equal(x, 1.0, radius):
        return Regime.BOUNDARY_AT_ONE
    return Regime.GENERIC


def classify_pair(
    x: float, y: float, tol: float, near_one: float | None = None
) -> tuple[Regime, bool]:
    """Classify the arguments of the symmetric two-argument functions.

    If ``near_one`` is given, a pair with both arguments inside that radius
    of one is ``DOUBLE_DEGENERATE`` regardless of how close the arguments are
    to each other or to one.

    Returns
    -------
    tuple
        The regime and a flag telling whether the arguments have to be
        swapped so that the argument close to one comes second.
    """

    if x < 0.0 or y < 0.0:
        return Regime.DOMAIN_ERROR, False
    if is_zero(x, EPS) or is_zero(y, EPS):
        return Regime.BOUNDARY_AT_ZERO, False
    if near_one is not None and is_equal(x, 1.0, near_one) and is_equal(y, 1.0, near_one):
        return Regime.DOUBLE_DEGENERATE, False
    x1 = is_equal(x, 1.0, tol)
    y1 = is_equal(y, 1.0, tol)
    if x1 and y1:
        return Regime.DOUBLE_DEGENERATE, False
    if x1:
        return Regime.BOUNDARY_AT_ONE, True
    if y1:
        return Regime.BOUNDARY_AT_ONE, False
    if is_equal_rel(x, y, tol):
        return Regime.DIAGONAL, False
    return Regime.GENERIC, False


def classify_phi(u: float, v: float) -> tuple[Regime, bool]:
    """Classify the reduced arguments of the Phi helpers.

    The returned flag is True if ``u`` (rather than ``v``) is the argument
    sitting at one, so that the caller passes the other one on.
    """

    u1 = is_equal(u, 1.0, PHI_EQUAL)
    v1 = is_equal(v, 1.0, PHI_EQUAL)
    if u1 and v1:
        return Regime.DOUBLE_DEGENERATE, False
    if u1:
        return Regime.BOUNDARY_AT_ONE, True
    if v1:
        return Regime.BOUNDARY_AT_ONE, False
    if u > 0.0 and v > 0.0 and is_equal_rel(u, v, PHI_EQUAL):
        return Regime.DIAGONAL, False
    return Regime.GENERIC, False


def classify_threshold(w: float, has_zero_limit: bool = True) -> Regime:
    """Classify the argument of the Barr-Zee functions with a threshold at 1/4."""

    if w < 0.0:
        return Regime.DOMAIN_ERROR
    if has_zero_limit and w == 0.0:
        return Regime.BOUNDARY_AT_ZERO
    if w == THRESHOLD:
        return Regime.THRESHOLD
    return Regime.GENERIC
