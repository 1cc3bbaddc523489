import operator

import numpy as np
from numpy.testing import assert_array_compare


def assert_array_less_equal(x, y, err_msg='', verbose=True):
    """
    Raise an AssertionError if two objects are not less-or-equal-ordered.

    Parameters
    ----------
    x : array_like
        Smaller object to check.
    y : array_like
        Larger object to compare.
    err_msg : str, optional
        Error message to be printed in case of failure.
    verbose : bool, optional
        Whether the conflicting values are appended to the error message
        (default is True).

    Raises
    ------
    AssertionError
        The two arrays are not less-or-equal-ordered.
    """
    assert_array_compare(operator.__le__, x, y, err_msg, verbose,
                         'Arrays are not less-or-equal-ordered')


def quadratic_residual(q2, q1, q0, roots):
    """
    Evaluate the absolute values of a quadratic function at given points,
    together with a tolerance on these values accounting for rounding errors.
    """
    roots = np.asarray(roots, dtype=float)
    res = np.abs((q2 * roots + q1) * roots + q0)
    scale = np.abs(q2) * roots ** 2.0 + np.abs(q1 * roots) + np.abs(q0)
    return res, 10.0 * np.finfo(float).eps * scale
