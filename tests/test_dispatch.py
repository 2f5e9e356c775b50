"""Tests for the type dispatch layer."""

import math

import pytest
import numpy as np


class TestPolylogDispatch:
    """Test polylog(order, z), li2() and li3()."""

    def test_real_goes_to_real_kernel(self):
        from polylog import li2, real_li2

        v = li2(0.5)
        assert isinstance(v, float)
        assert v == real_li2(0.5)

    def test_int_argument(self):
        from polylog import li2, li3

        assert li2(2) == pytest.approx(math.pi ** 2 / 4, abs=1e-14)
        assert isinstance(li3(-1), float)

    def test_numpy_scalars(self):
        from polylog import li2, li3, complex_li3

        assert isinstance(li2(np.float64(0.25)), float)
        assert isinstance(li2(np.float32(0.25)), float)
        v = li3(np.complex128(1 + 1j))
        assert isinstance(v, complex)
        assert v == complex_li3(1 + 1j)

    def test_complex_goes_to_complex_kernel(self):
        from polylog import li2, complex_li2

        v = li2(2 + 0j)
        assert isinstance(v, complex)
        assert v == complex_li2(2 + 0j)
        assert v.imag == pytest.approx(math.pi * math.log(2.0), abs=1e-14)

    def test_polylog_orders(self):
        from polylog import polylog, real_li2, real_li3

        assert polylog(2, 0.3) == real_li2(0.3)
        assert polylog(3, 0.3) == real_li3(0.3)

    @pytest.mark.parametrize("order", [0, 1, 4, 5, "2"])
    def test_unsupported_order(self, order):
        from polylog import polylog

        with pytest.raises(ValueError, match="unsupported polylogarithm order"):
            polylog(order, 0.5)

    @pytest.mark.parametrize("z", ["0.5", None, True, np.bool_(False), [0.5], np.array([0.5])])
    def test_non_numeric_argument(self, z):
        from polylog import li2

        with pytest.raises(TypeError, match="expected a real or complex number"):
            li2(z)
