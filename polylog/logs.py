"""
Principal complex logarithms with an explicit tie-break on the cut.

A zero imaginary part is always read as +0, whatever its sign bit, so a
point on the negative real axis is taken from above: ln(-x) = ln(x) + iπ.
"""

import math
from numba import njit, types

_C = types.complex128


@njit(_C(_C), cache=True, fastmath=False)
def clog(z):
    """Principal ln(z), argument in (-π, π]."""
    re = z.real
    im = z.imag
    if im == 0.0:
        im = 0.0
    return complex(math.log(math.hypot(re, im)), math.atan2(im, re))


@njit(_C(_C), cache=True, fastmath=False)
def clog1p(w):
    """
    ln(1 + w), accurate when |w| is small.

        |1 + w|^2 = 1 + w.re (2 + w.re) + w.im^2
    """
    x = w.real
    y = w.imag
    if y == 0.0:
        y = 0.0
    return complex(0.5 * math.log1p(x * (2.0 + x) + y * y), math.atan2(y, 1.0 + x))
