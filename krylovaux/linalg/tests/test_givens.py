import numpy as np
import pytest
from numpy.testing import assert_, assert_allclose, assert_equal
from scipy.linalg import get_blas_funcs

from krylovaux import sym_givens

EPS = np.finfo(float).eps


class TestSymGivens:

    @staticmethod
    def check_rotation(a, b, c, s, rho):
        assert_(rho >= 0.0)
        assert_allclose(c ** 2.0 + s ** 2.0, 1.0, atol=1e1 * EPS)
        assert_allclose(c * a + s * b, rho, rtol=1e1 * EPS, atol=0.0)
        assert_(abs(s * a - c * b) <= 1e1 * EPS * rho)

    @pytest.mark.parametrize('scale', [1e-300, 1e-150, 1.0, 1e150, 1e300])
    @pytest.mark.parametrize('rep', [100])
    def test_standard(self, scale, rep):
        rng = np.random.default_rng(0)
        for a, b in scale * rng.standard_normal((rep, 2)):
            c, s, rho = sym_givens(a, b)
            self.check_rotation(a, b, c, s, rho)

    @pytest.mark.parametrize('a, b', [
        (1e300, 1e300),
        (-1e300, 1e-300),
        (1e-300, -1e300),
        (1e-300, 2e-300),
    ])
    def test_extreme(self, a, b):
        c, s, rho = sym_givens(a, b)
        assert_(np.isfinite(rho))
        self.check_rotation(a, b, c, s, rho)

    def test_blas(self):
        rng = np.random.default_rng(1)
        for a, b in rng.uniform(-1e2, 1e2, (100, 2)):
            c, s, rho = sym_givens(a, b)
            blas_rotg, = get_blas_funcs(('rotg',), (a, b))
            c_blas, s_blas = blas_rotg(a, b)
            assert_allclose(abs(c), abs(c_blas), atol=1e1 * EPS)
            assert_allclose(abs(s), abs(s_blas), atol=1e1 * EPS)
            assert_allclose(rho, np.hypot(a, b), rtol=1e1 * EPS)

    def test_pythagorean(self):
        c, s, rho = sym_givens(3.0, 4.0)
        assert_allclose(rho, 5.0, rtol=EPS)
        assert_allclose(c, 0.6, rtol=1e1 * EPS)
        assert_allclose(s, 0.8, rtol=1e1 * EPS)

        c, s, rho = sym_givens(-4.0, 3.0)
        assert_allclose(rho, 5.0, rtol=EPS)
        assert_allclose(c, -0.8, rtol=1e1 * EPS)
        assert_allclose(s, 0.6, rtol=1e1 * EPS)

    @pytest.mark.parametrize('a, b, expected', [
        (0.0, 0.0, (1.0, 0.0, 0.0)),
        (-0.0, 0.0, (1.0, 0.0, 0.0)),
        (2.0, 0.0, (1.0, 0.0, 2.0)),
        (-2.0, 0.0, (-1.0, 0.0, 2.0)),
        (0.0, 3.0, (0.0, 1.0, 3.0)),
        (0.0, -3.0, (0.0, -1.0, 3.0)),
    ])
    def test_zero(self, a, b, expected):
        assert_equal(sym_givens(a, b), expected)

    def test_types(self):
        c, s, rho = sym_givens(3, 4)
        assert_(all(isinstance(value, float) for value in (c, s, rho)))
        assert_allclose(rho, 5.0, rtol=EPS)

    def test_purity(self):
        rng = np.random.default_rng(2)
        for a, b in rng.standard_normal((10, 2)):
            assert_equal(sym_givens(a, b), sym_givens(a, b))
