"""
Type dispatch over the real and complex kernels.

Real numbers (int, float, numpy real scalars) go to the real kernels and
return a float; complex numbers go to the complex kernels and return a
complex. Adding an order is just adding an entry to POLYLOG_FUNCS.
"""

from numbers import Complex, Real

import numpy as np

from .dilog import complex_li2, real_li2
from .trilog import complex_li3, real_li3

# Order registry: ADD NEW ORDERS HERE ONLY
POLYLOG_FUNCS: dict[int, dict] = {
    2: dict(real=real_li2, complex=complex_li2),
    3: dict(real=real_li3, complex=complex_li3),
}


def _kernel(funcs: dict, z):
    if isinstance(z, (bool, np.bool_)):
        raise TypeError(f"expected a real or complex number, got {type(z).__name__}")
    if isinstance(z, Real):
        return funcs["real"], float(z)
    if isinstance(z, Complex):
        return funcs["complex"], complex(z)
    raise TypeError(f"expected a real or complex number, got {type(z).__name__}")


def polylog(order: int, z):
    """
    Li_order(z) for order in POLYLOG_FUNCS.

    Raises ValueError for an unsupported order and TypeError for an
    argument that is not a real or complex scalar.
    """
    funcs = POLYLOG_FUNCS.get(order)
    if funcs is None:
        supported = ", ".join(str(k) for k in sorted(POLYLOG_FUNCS))
        raise ValueError(f"unsupported polylogarithm order {order!r} (supported: {supported})")
    func, arg = _kernel(funcs, z)
    return func(arg)


def li2(z):
    return polylog(2, z)


def li3(z):
    return polylog(3, z)
