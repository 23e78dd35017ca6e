"""Building blocks of the fermionic two-loop Barr-Zee contributions.

``FS`` and ``FA`` are the neutral scalar and pseudoscalar fermion loop
functions of arXiv:1607.06292, Eqs. (56)-(57), expressed through
:func:`loopfpy.phi.Phi`; ``FlHp``, ``FdHp`` and ``FuHp`` are the charged Higgs
lepton and quark loop functions, Eqs. (60)-(62). ``G`` and ``Gn`` are the
Feynman-parameter kernel and its moments that appear in the bosonic
contributions.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.integrate import quad

from loopfpy.barr_zee import f_PS, f_S
from loopfpy.constants import PI2
from loopfpy.functions.misc import domain_error, is_equal, sqr
from loopfpy.functions.special import dilog
from loopfpy.phi import Phi, lambda_2

log = logging.getLogger(__name__)

# relative distance from ms2 = 4 mf2 inside which the Phi form is replaced by its limit
FS_THRESHOLD = 1.0e-6

# below |r| < this log1p(r)/r is expanded
G_SERIES = 1.0e-4


def FA(ms2: float, mf2: float) -> float:
    """Pseudoscalar fermion loop function ``Phi(ms2, mf2, mf2)/(ms2 - 4 mf2)``.

    Parameters
    ----------
    ms2:
        Squared mass of the exchanged pseudoscalar.
    mf2:
        Squared mass of the fermion in the loop.

    Returns
    -------
    float
        The loop function; at ``ms2 = 4 mf2`` the finite limit
        ``f_PS(z)/(2z)`` with ``z = mf2/ms2``.
    """

    if ms2 <= 0.0 or mf2 <= 0.0:
        return domain_error(log, f"FA: squared masses must be positive! ({ms2}, {mf2})")

    if is_equal(ms2, 4.0 * mf2, FS_THRESHOLD):
        z = mf2 / ms2
        return f_PS(z) / (2.0 * z)

    return Phi(ms2, mf2, mf2) / (ms2 - 4.0 * mf2)


def FS(ms2: float, mf2: float) -> float:
    """Scalar fermion loop function, Eq. (56) of arXiv:1607.06292."""

    if ms2 <= 0.0 or mf2 <= 0.0:
        return domain_error(log, f"FS: squared masses must be positive! ({ms2}, {mf2})")

    if is_equal(ms2, 4.0 * mf2, FS_THRESHOLD):
        z = mf2 / ms2
        return f_S(z) / (2.0 * z)

    return (
        -2.0
        + np.log(ms2 / mf2)
        - (ms2 - 2.0 * mf2) / ms2 * Phi(ms2, mf2, mf2) / (ms2 - 4.0 * mf2)
    )


def FlHp(ms2: float, mf2: float) -> float:
    """Charged Higgs lepton loop function, Eq. (60) of arXiv:1607.06292.

    Parameters
    ----------
    ms2:
        Squared charged Higgs (or W) mass.
    mf2:
        Squared lepton mass.
    """

    if ms2 <= 0.0 or mf2 < 0.0:
        return domain_error(log, f"FlHp: invalid squared masses! ({ms2}, {mf2})")

    xl = mf2 / ms2

    if xl == 0.0:
        log.warning("FlHp: logarithmic divergence for a massless lepton")
        return np.inf

    return xl + xl * (xl - 1.0) * (dilog(1.0 - 1.0 / xl) - PI2 / 6.0) + (xl - 0.5) * np.log(xl)


def _invalid_quark_masses(ms2: float, md2: float, mu2: float) -> bool:
    if ms2 <= 0.0 or md2 <= 0.0 or mu2 <= 0.0:
        return True
    # the Kallen function vanishes at the threshold mu + md = ms
    return lambda_2(mu2, md2, ms2) == 0.0


def FdHp(ms2: float, md2: float, mu2: float, qd: float, qu: float) -> float:
    """Charged Higgs down-type quark loop function, Eq. (61) of arXiv:1607.06292.

    Parameters
    ----------
    ms2:
        Squared charged Higgs (or W) mass.
    md2, mu2:
        Squared down- and up-type quark masses.
    qd, qu:
        Electric charges of the down- and up-type quark.
    """

    if _invalid_quark_masses(ms2, md2, mu2):
        return domain_error(log, f"FdHp: invalid squared masses! ({ms2}, {md2}, {mu2})")

    xu = mu2 / ms2
    xd = md2 / ms2
    y = lambda_2(xu, xd)
    phi = Phi(np.sqrt(xd), np.sqrt(xu), 1.0)

    s = 0.25 * (qu + qd)
    c = sqr(xu - xd) - qu * xu + qd * xd
    cbar = (xu - qu) * xu - (xd + qd) * xd

    return (
        -(xu - xd)
        + (cbar / y - c * (xu - xd) / y) * phi
        + c * (dilog(1.0 - xd / xu) - 0.5 * np.log(xu) * np.log(xd / xu) * phi)
        + (s + xd) * np.log(xd)
        + (s - xu) * np.log(xu)
    )


def FuHp(ms2: float, md2: float, mu2: float, qd: float, qu: float) -> float:
    """Charged Higgs up-type quark loop function, Eq. (62) of arXiv:1607.06292.

    Built on :func:`FdHp` with both charges shifted by two.
    """

    if _invalid_quark_masses(ms2, md2, mu2):
        return domain_error(log, f"FuHp: invalid squared masses! ({ms2}, {md2}, {mu2})")

    xu = mu2 / ms2
    xd = md2 / ms2
    y = lambda_2(xu, xd)

    return (
        FdHp(ms2, md2, mu2, 2.0 + qd, 2.0 + qu)
        - 4.0 / 3.0 * (xu - xd - 1.0) / y * Phi(np.sqrt(xd), np.sqrt(xu), 1.0)
        - 1.0 / 3.0 * (sqr(np.log(xd)) - sqr(np.log(xu)))
    )


def _log1p_ratio(r: float) -> float:
    # log(1 + r)/r
    if abs(r) < G_SERIES:
        return 1.0 + r * (-0.5 + r * (1.0 / 3.0 - 0.25 * r))
    return np.log1p(r) / r


def G(wa: float, wb: float, x: float) -> float:
    """Feynman-parameter kernel
    ``log((wa x + wb (1-x))/(x (1-x))) / (x (1-x) - wa x - wb (1-x))``.

    The removable singularity at ``x (1-x) = wa x + wb (1-x)``, where the
    kernel tends to ``-1/(x (1-x))``, is evaluated through ``log1p``.
    """

    if wa < 0.0 or wb < 0.0 or not 0.0 < x < 1.0:
        return domain_error(log, f"G: invalid arguments! ({wa}, {wb}, {x})")

    q = x * (1.0 - x)
    t = wa * x + wb * (1.0 - x)
    r = (t - q) / q

    return -_log1p_ratio(r) / q


def Gn(wa: float, wb: float, n: int) -> float:
    """Moment ``int_0^1 x^n G(wa, wb, x) dx``.

    Parameters
    ----------
    wa, wb:
        Non-negative squared-mass ratios, not both zero.
    n:
        Non-negative power of the Feynman parameter.

    Returns
    -------
    float
        The integral, evaluated by adaptive Gauss-Kronrod quadrature
        (:func:`scipy.integrate.quad`). Returns ``nan`` if the arguments are
        out of range or the quadrature does not produce a finite value.

    Notes
    -----
    The integrand has integrable logarithmic singularities at both
    endpoints, which the QAGS extrapolation handles without a change of
    variables.
    """

    if wa < 0.0 or wb < 0.0 or (wa == 0.0 and wb == 0.0) or n < 0:
        return domain_error(log, f"Gn: invalid arguments! ({wa}, {wb}, {n})")

    res = quad(lambda x: x**n * G(wa, wb, x), 0.0, 1.0, limit=200, full_output=1)
    value = res[0]

    if len(res) > 3:
        log.warning(f"Gn: quadrature did not converge for ({wa}, {wb}, {n}): {res[3]}")

    if not np.isfinite(value):
        return domain_error(log, f"Gn: integral is not finite for ({wa}, {wb}, {n})")

    return value
