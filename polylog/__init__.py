"""
Polylog package - real and complex dilogarithm and trilogarithm.

This package organizes the evaluators by order:
- dilog: real_li2, complex_li2
- trilog: real_li3, complex_li3 (uses the Li2 kernels near z = 1)

And provides the shared pieces they are built from:
- coefficients: Bernoulli-derived series tables
- series: the summation primitive
- logs: principal complex logarithms with an explicit cut tie-break
- dispatch: li2(), li3(), polylog(order, z) on Python numbers
"""

from .constants import PI, ZETA2, ZETA3

from .defaults import (
    DEFAULT_ORDERS,
    DEFAULT_DIGITS,
)

from .coefficients import (
    LI2_TERMS,
    LI3_TERMS,
    S12_TERMS,
    LI2_COEFFS,
    LI3_COEFFS,
    S12_COEFFS,
    bernoulli_numbers,
    li2_coefficients,
    li3_coefficients,
    s12_coefficients,
)

from .series import series_sum
from .logs import clog, clog1p

from .dilog import real_li2, complex_li2
from .trilog import real_li3, complex_li3

from .dispatch import POLYLOG_FUNCS, polylog, li2, li3
