import logging

import numpy as np

from ..settings import DEFAULT_OPTIONS, Options, SQRT_EPS

_log = logging.getLogger(__name__)


def roots_quadratic(q2, q1, q0, nitref=DEFAULT_OPTIONS[Options.NITREF.value]):
    r"""
    Find the real roots of a quadratic function.

    The quadratic function is

    .. math::

        q(x) = q_2 x^2 + q_1 x + q_0,

    where :math:`q_2`, :math:`q_1`, and :math:`q_0` are real numbers. Care is
    taken to avoid numerical cancellation.

    Parameters
    ----------
    q2 : float
        Coefficient :math:`q_2` as shown above.
    q1 : float
        Coefficient :math:`q_1` as shown above.
    q0 : float
        Coefficient :math:`q_0` as shown above.
    nitref : int, optional
        Number of Newton iterations performed on each root to improve its
        accuracy (the default is 1).

    Returns
    -------
    numpy.ndarray, shape (nroots,)
        Real roots of :math:`q`, with ``0 <= nroots <= 2``. If :math:`q` is
        identically zero, the only root returned is zero. If :math:`q` is a
        nonzero constant or has no real root, the array is empty.

    Raises
    ------
    ValueError
        The number of iterative refinement steps is negative.

    Notes
    -----
    When :math:`q_2 \neq 0`, the roots are not sorted. If the quadratic is well
    conditioned, the first root is :math:`d / q_2` and the second one is
    :math:`q_0 / d`, where :math:`d = -(q_1 + \sgn(q_1)\sqrt{q_1^2 - 4 q_2
    q_0}) / 2`. Otherwise, :math:`\abs{q_0 q_2}` is negligible compared with
    :math:`q_1^2`, and the roots :math:`-q_1 / q_2` and zero are returned
    before refinement.
    """
    if nitref < 0:
        raise ValueError('The number of refinement steps must be nonnegative.')
    q2 = float(q2)
    q1 = float(q1)
    q0 = float(q0)

    # Case where q is linear or constant.
    if q2 == 0.0:
        if q1 == 0.0:
            return np.zeros(1) if q0 == 0.0 else np.empty(0)
        return np.array([-q0 / q1])

    # Case where q is indeed quadratic.
    rhs = SQRT_EPS * q1 * q1
    if abs(q0 * q2) > rhs:
        rho = q1 * q1 - 4.0 * q2 * q0
        if rho < 0.0:
            return np.empty(0)
        d = -0.5 * (q1 + np.copysign(np.sqrt(rho), q1))
        roots = np.array([d / q2, q0 / d])
    else:
        _log.debug(f'Ill-conditioned quadratic with coefficients {q2}, {q1}, and {q0}')
        roots = np.array([-q1 / q2, 0.0])

    # Perform a few Newton iterations on each root.
    for k in range(roots.size):
        root = roots[k]
        for _ in range(nitref):
            q_val = (q2 * root + q1) * root + q0
            dq_val = 2.0 * q2 * root + q1
            if dq_val == 0.0:
                _log.debug(f'Null derivative at {root}; refinement step skipped')
                continue
            root -= q_val / dq_val
        roots[k] = root
    return roots
