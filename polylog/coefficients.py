"""
Bernoulli-derived series coefficients for the di- and trilogarithm.

All three expansions are power series in

    u = -ln(1 - z)

which converge for |u| < 2π. The tables are built once at import from exact
sympy rationals and frozen into read-only float64 arrays; numba picks them up
as compile-time constants.

    Li2(z)     = Σ_{n>=0} B_n / (n+1)! u^{n+1}
    Li3(z)     = Σ_{n>=0} u^{n+1}/(n+1) Σ_{k=0}^{n} B_k B_{n-k} / (k! (n-k+1)!)
    S_{1,2}(z) = ½ Σ_{k>=0} B_k / (k! (k+2)) u^{k+2}

Bernoulli numbers follow the B_1 = -1/2 convention.
"""

import numpy as np
import sympy as sp

# Every reduced region keeps |u| <= π/3 + a little; these counts push the
# first omitted term below 1e-19 there.
LI2_TERMS = 24
S12_TERMS = 24
LI3_TERMS = 30


def bernoulli_numbers(n: int) -> list:
    """B_0 .. B_{n-1} as sympy rationals (B_1 = -1/2)."""
    out = [sp.Integer(1), sp.Rational(-1, 2)]
    # sympy switched B_1 to +1/2; from B_2 on the conventions agree
    for k in range(2, n):
        out.append(sp.Rational(sp.bernoulli(k)))
    return out[:n]


def li2_coefficients_exact(n: int) -> list:
    B = bernoulli_numbers(n)
    return [B[k] / sp.factorial(k + 1) for k in range(n)]


def li3_coefficients_exact(n: int) -> list:
    B = bernoulli_numbers(n)
    out = []
    for m in range(n):
        acc = sp.Integer(0)
        for k in range(m + 1):
            acc += B[k] * B[m - k] / (sp.factorial(k) * sp.factorial(m - k + 1))
        out.append(acc / (m + 1))
    return out


def s12_coefficients_exact(n: int) -> list:
    # leading zero: the expansion starts at u^2
    B = bernoulli_numbers(max(n - 1, 0))
    out = [sp.Integer(0)]
    for k in range(n - 1):
        out.append(B[k] / (2 * sp.factorial(k) * (k + 2)))
    return out[:n]


def _to_table(coeffs: list) -> np.ndarray:
    arr = np.array([float(c) for c in coeffs], dtype=np.float64)
    arr.setflags(write=False)
    return arr


def li2_coefficients(n: int = LI2_TERMS) -> np.ndarray:
    return _to_table(li2_coefficients_exact(n))


def li3_coefficients(n: int = LI3_TERMS) -> np.ndarray:
    return _to_table(li3_coefficients_exact(n))


def s12_coefficients(n: int = S12_TERMS) -> np.ndarray:
    return _to_table(s12_coefficients_exact(n))


LI2_COEFFS = li2_coefficients()
LI3_COEFFS = li3_coefficients()
S12_COEFFS = s12_coefficients()
