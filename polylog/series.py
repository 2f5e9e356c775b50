"""
Core summation primitive shared by every evaluator.
"""

from numba import njit


@njit(cache=True, fastmath=False)
def series_sum(u, coeffs):
    """
    u * (c_0 + c_1 u + c_2 u^2 + ... + c_{n-1} u^{n-1}), Horner from the top.

    Generic over float64 and complex128 u; coeffs is one of the tables
    from polylog.coefficients.
    """
    y = u * 0.0
    for k in range(len(coeffs) - 1, -1, -1):
        y = y * u + coeffs[k]
    return u * y
