"""Tests for the polylog package surface."""

import pytest
import numpy as np


class TestPolylogImports:
    """Test that all polylog package imports work correctly."""

    def test_import_polylog_package(self):
        import polylog
        assert hasattr(polylog, 'POLYLOG_FUNCS')
        assert hasattr(polylog, 'polylog')

    def test_import_evaluators(self):
        from polylog import real_li2, complex_li2, real_li3, complex_li3
        assert callable(real_li2)
        assert callable(complex_li2)
        assert callable(real_li3)
        assert callable(complex_li3)

    def test_import_defaults(self):
        from polylog import DEFAULT_ORDERS, DEFAULT_DIGITS
        assert tuple(DEFAULT_ORDERS) == (2, 3)
        assert isinstance(DEFAULT_DIGITS, int)

    def test_import_tables(self):
        from polylog import LI2_COEFFS, LI3_COEFFS, S12_COEFFS
        from polylog import LI2_TERMS, LI3_TERMS, S12_TERMS
        assert LI2_COEFFS.shape == (LI2_TERMS,)
        assert LI3_COEFFS.shape == (LI3_TERMS,)
        assert S12_COEFFS.shape == (S12_TERMS,)
        assert LI2_COEFFS.dtype == np.float64

    def test_registry_orders(self):
        from polylog import POLYLOG_FUNCS
        assert sorted(POLYLOG_FUNCS) == [2, 3]
        for funcs in POLYLOG_FUNCS.values():
            assert set(funcs) == {"real", "complex"}


class TestConstants:
    """Test the shared constants."""

    def test_zeta2(self):
        import math
        from polylog import ZETA2
        assert ZETA2 == pytest.approx(math.pi ** 2 / 6, abs=1e-15)

    def test_zeta3(self):
        from polylog import ZETA3
        assert ZETA3 == pytest.approx(1.2020569031595942, abs=1e-15)
