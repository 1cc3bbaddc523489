#!/usr/bin/env python3
"""
Solve approximately a trust-region subproblem with the truncated conjugate
gradient method of Steihaug [1]_ and Toint [2]_.

References
----------
.. [1] T. Steihaug. "The conjugate gradient method and trust regions in large
   scale optimization." In: SIAM J. Numer. Anal. 20 (1983), pp. 626--637.
.. [2] Ph. L. Toint. "Towards an efficient sparsity exploiting Newton method
   for minimization." In: Sparse Matrices and Their Uses. Ed. by I. S. Duff.
   London, UK: Academic Press, 1981, pp. 57--88.
"""
import sys

import numpy as np
from krylovaux import to_boundary


def steihaug(grad, hess, delta, tol=1e-8):
    n = grad.size
    step = np.zeros(n)
    resid = -grad
    sd = resid.copy()
    rr = np.inner(resid, resid)
    for _ in range(n):
        hsd = np.dot(hess, sd)
        curv = np.inner(sd, hsd)
        if curv <= 0.0:
            # Negative curvature, go to the boundary.
            return step + to_boundary(step, sd, delta) * sd, True
        alpha = rr / curv
        if np.linalg.norm(step + alpha * sd) >= delta:
            return step + to_boundary(step, sd, delta) * sd, True
        step += alpha * sd
        resid -= alpha * hsd
        rr_old, rr = rr, np.inner(resid, resid)
        if np.sqrt(rr) <= tol:
            break
        sd = resid + (rr / rr_old) * sd
    return step, False


np.set_printoptions(
    precision=3,
    linewidth=sys.maxsize,
    sign=' ',
)

if __name__ == '__main__':
    rng = np.random.default_rng(0)
    n = 6
    hess = rng.standard_normal((n, n))
    hess = 0.5 * (hess + hess.T)
    grad = rng.standard_normal(n)
    for delta in [0.1, 1.0, 10.0]:
        step, on_boundary = steihaug(grad, hess, delta)
        print(f'delta={delta}: step={step}, |step|={np.linalg.norm(step):.3e}, on boundary: {on_boundary}')
