"""
Trilogarithm Li3 for real and complex arguments.

    Li3(z) = Σ_{k>=1} z^k / k^3,  |z| <= 1

The reduction regions are the ones of the dilogarithm. Near z = 1 the
second-order reflection

    Li3(z) = ζ(3) + ln(z) Li2(z) + ½ ln(1-z) ln²(z) - S_{1,2}(1-z)

is used, where S_{1,2} is the Nielsen generalized polylogarithm. Li2 enters
through a call to the dilogarithm kernels so both functions take the branch
cut the same way.
"""

import math
from numba import njit, types

from .coefficients import LI3_COEFFS, S12_COEFFS
from .constants import PI, PI2, ZETA2, ZETA3
from .dilog import complex_li2, real_li2
from .logs import clog, clog1p
from .series import series_sum

_C = types.complex128


@njit(types.float64(types.float64), cache=True, fastmath=False)
def _li3_core(y):
    # y in [-1, 0.5]
    return series_sum(-math.log1p(-y), LI3_COEFFS)


@njit(types.float64(types.float64), cache=True, fastmath=False)
def _s12_core(y):
    # y in [-1, 0.5]
    return series_sum(-math.log1p(-y), S12_COEFFS)


@njit(types.float64(types.float64), cache=True, fastmath=False)
def real_li3(x):
    """
    Real trilogarithm Li3(x) for any real x.

    For x > 1 the real part of the principal value is returned. Ranges:

        x < -1          Li3(x) = Li3(1/x) - π²/6 ln(-x) - ⅙ ln³(-x)
        -1 <= x <= ½    direct series
        ½ < x <= 2      reflection through Li2 and S_{1,2}(1-x)
        x > 2           Li3(x) = Li3(1/x) + π²/3 ln(x) - ⅙ ln³(x)
    """
    if x == 0.0:
        return x
    if x == 1.0:
        return ZETA3
    if x == -1.0:
        return -0.75 * ZETA3

    if x < -1.0:
        l = math.log(-x)
        return _li3_core(1.0 / x) - l * (ZETA2 + l * l / 6.0)
    if x <= 0.5:
        return _li3_core(x)
    if x <= 2.0:
        l = math.log(x)
        return (ZETA3 + l * real_li2(x) + 0.5 * math.log(math.fabs(1.0 - x)) * l * l
                - _s12_core(1.0 - x))
    # x > 2, also NaN and +inf
    l = math.log(x)
    return _li3_core(1.0 / x) + l * (PI2 / 3.0 - l * l / 6.0)


# ============================================================
# Complex Li3 (principal branch, upper edge of the cut)
# ============================================================

@njit(_C(_C), cache=True, fastmath=False)
def complex_li3(z):
    """
    Complex trilogarithm Li3(z), principal branch.

    On the cut z = x >= 1 the value approached from above is returned,
    Im Li3(x + i0) = ½π ln²(x), matching complex_li2.
    """
    rz = z.real
    iz = z.imag

    if iz == 0.0:
        if rz <= 1.0:
            return complex(real_li3(rz), 0.0)
        l = math.log(rz)
        return complex(real_li3(rz), 0.5 * PI * l * l)

    nz = rz * rz + iz * iz

    if rz > 0.5 and nz <= 2.0 * rz:
        # |1 - z| <= 1, u = -ln(z)
        u = -clog1p(z - 1.0)
        return (ZETA3 - u * complex_li2(z) + 0.5 * clog(1.0 - z) * u * u
                - series_sum(u, S12_COEFFS))

    if nz <= 1.0:
        return series_sum(-clog1p(-z), LI3_COEFFS)

    # |z| > 1
    l = clog(-z)
    return series_sum(-clog1p(-1.0 / z), LI3_COEFFS) - ZETA2 * l - l * l * l / 6.0
