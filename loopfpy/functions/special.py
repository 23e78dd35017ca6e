"""Dilogarithm and Clausen function kernels.

Both kernels delegate to :func:`scipy.special.spence`, which implements
``spence(z) = Li2(1 - z)`` for real and complex arguments to full double
precision.
"""

from __future__ import annotations

import numpy as np
from scipy.special import spence


def dilog(z):
    """Dilogarithm ``Li2(z)``.

    Parameters
    ----------
    z:
        Real or complex argument.

    Returns
    -------
    float or complex
        ``Li2(z)``. Real input returns a real number; for ``z > 1`` this is
        the real part of the principal branch.
    """

    if isinstance(z, complex) or np.iscomplexobj(z):
        return spence(1.0 - z)
    if z > 1.0:
        return spence(complex(1.0 - z, 0.0)).real
    return float(spence(1.0 - z))


def clausen_2(theta: float) -> float:
    """Clausen function ``Cl2(theta) = Im Li2(exp(i theta))``."""

    return float(spence(1.0 - np.exp(1j * theta)).imag)
