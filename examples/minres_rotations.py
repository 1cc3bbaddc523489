#!/usr/bin/env python3
"""
Reduce a symmetric tridiagonal matrix to upper-triangular form with symmetric
Givens rotations, as done by MINRES at each Lanczos iteration [1]_.

References
----------
.. [1] C. C. Paige and M. A. Saunders. "Solution of sparse indefinite systems
   of linear equations." In: SIAM J. Numer. Anal. 12 (1975), pp. 617--629.
"""
import sys

import numpy as np
from krylovaux import sym_givens


def tridiagonal(alpha, beta):
    return np.diag(alpha) + np.diag(beta, 1) + np.diag(beta, -1)


def triangularize(t_mat):
    n = t_mat.shape[0]
    r_mat = t_mat.copy()
    q_mat = np.eye(n)
    for k in range(n - 1):
        c, s, rho = sym_givens(r_mat[k, k], r_mat[k + 1, k])
        reflect = np.array([[c, s], [s, -c]])
        r_mat[k:k + 2, :] = np.dot(reflect, r_mat[k:k + 2, :])
        r_mat[k + 1, k] = 0.0
        r_mat[k, k] = rho
        q_mat[:, k:k + 2] = np.dot(q_mat[:, k:k + 2], reflect)
    return q_mat, r_mat


np.set_printoptions(
    precision=3,
    linewidth=sys.maxsize,
    sign=' ',
)

if __name__ == '__main__':
    rng = np.random.default_rng(0)
    n = 5
    t_mat = tridiagonal(rng.standard_normal(n), rng.uniform(0.5, 1.5, n - 1))
    q_mat, r_mat = triangularize(t_mat)
    print(r_mat)
    print(f'Orthogonality error: {np.linalg.norm(np.dot(q_mat.T, q_mat) - np.eye(n)):.3e}')
    print(f'Factorization error: {np.linalg.norm(np.dot(q_mat, r_mat) - t_mat):.3e}')
