"""
Dilogarithm Li2 for real and complex arguments.

    Li2(z) = Σ_{k>=1} z^k / k^2,  |z| <= 1

continued analytically to the plane cut along [1, ∞). Every argument is
mapped by reflection or inversion into a region where

    u = -ln(1 - y),  |u| <= π/3

and the Bernoulli series Li2(y) = Σ B_n u^{n+1} / (n+1)! is summed there.
"""

import math
from numba import njit, types

from .coefficients import LI2_COEFFS
from .constants import PI, PI2, ZETA2
from .logs import clog, clog1p
from .series import series_sum

_C = types.complex128


# ============================================================
# Real Li2
# ============================================================

@njit(types.float64(types.float64), cache=True, fastmath=False)
def _li2_core(y):
    # y in [-1, 0.5] -> u in [-ln 2, ln 2]
    return series_sum(-math.log1p(-y), LI2_COEFFS)


@njit(types.float64(types.float64), cache=True, fastmath=False)
def real_li2(x):
    """
    Real dilogarithm Li2(x) for any real x.

    For x > 1 the real part of the principal value is returned. Ranges:

        x < -1        Li2(x) = -Li2(1/x) - π²/6 - ½ ln²(-x)
        -1 <= x <= ½  direct series
        ½ < x < 1     Li2(x) = π²/6 - ln(x) ln(1-x) - Li2(1-x)
        1 < x <= 2    same, with ln|1-x|
        x > 2         Li2(x) = π²/3 - ½ ln²(x) - Li2(1/x)
    """
    if x == 0.0:
        return x
    if x == 1.0:
        return ZETA2
    if x == -1.0:
        return -PI2 / 12.0

    if x < -1.0:
        l = math.log(-x)
        return -_li2_core(1.0 / x) - ZETA2 - 0.5 * l * l
    if x <= 0.5:
        return _li2_core(x)
    if x < 1.0:
        return ZETA2 - math.log(x) * math.log(1.0 - x) - _li2_core(1.0 - x)
    if x <= 2.0:
        return ZETA2 - math.log(x) * math.log(x - 1.0) - _li2_core(1.0 - x)
    # x > 2, also NaN and +inf
    l = math.log(x)
    return PI2 / 3.0 - 0.5 * l * l - _li2_core(1.0 / x)


# ============================================================
# Complex Li2
# ============================================================

@njit(_C(_C), cache=True, fastmath=False)
def complex_li2(z):
    """
    Complex dilogarithm Li2(z), principal branch.

    On the cut z = x >= 1 the value approached from above is returned,
    Im Li2(x + i0) = π ln(x), independent of the sign of a zero imaginary
    part.
    """
    rz = z.real
    iz = z.imag

    if iz == 0.0:
        if rz <= 1.0:
            return complex(real_li2(rz), 0.0)
        return complex(real_li2(rz), PI * math.log(rz))

    nz = rz * rz + iz * iz

    if rz > 0.5 and nz <= 2.0 * rz:
        # |1 - z| <= 1: reflection z -> 1 - z, series in u = -ln(z)
        u = -clog1p(z - 1.0)
        return ZETA2 + u * clog(1.0 - z) - series_sum(u, LI2_COEFFS)

    if nz <= 1.0:
        # |z| <= 1, Re(z) <= ½
        return series_sum(-clog1p(-z), LI2_COEFFS)

    # |z| > 1: inversion z -> 1/z lands in the direct region
    l = clog(-z)
    return -series_sum(-clog1p(-1.0 / z), LI2_COEFFS) - ZETA2 - 0.5 * l * l
