import numpy as np


def sym_givens(a, b):
    r"""
    Construct a symmetric Givens plane rotation.

    The rotation parameters :math:`c`, :math:`s`, and :math:`\rho` satisfy

    .. math::

        \begin{bmatrix} c & s\\ s & -c \end{bmatrix}
        \begin{bmatrix} a\\ b \end{bmatrix} =
        \begin{bmatrix} \rho\\ 0 \end{bmatrix}.

    Parameters
    ----------
    a : float
        First component of the vector to be rotated.
    b : float
        Second component of the vector to be rotated.

    Returns
    -------
    c : float
        Cosine of the angle of rotation.
    s : float
        Sine of the angle of rotation.
    rho : float
        Norm of the vector ``[a, b]``.

    See Also
    --------
    roots_quadratic : Real roots of a quadratic
    to_boundary : Step length to the trust-region boundary

    Notes
    -----
    The method is modeled after the SymGivens2 function of Choi [1]_. The
    division is always made by the component of largest magnitude, and
    :math:`\rho` is never computed as :math:`\sqrt{a^2 + b^2}`, so that no
    overflow or underflow can occur for finite inputs. If both `a` and `b` are
    zero, the returned rotation is the identity reflection ``(1, 0, 0)``.

    References
    ----------
    .. [1] S.-C. T. Choi. "Iterative Methods for Singular Linear Equations and
       Least-Squares Problems." Ph.D. thesis. Stanford, CA: Institute for
       Computational and Mathematical Engineering, Stanford University, 2006.
    """
    a = float(a)
    b = float(b)
    if b == 0.0:
        # The sign of zero is zero, which does not define a rotation.
        c = np.sign(a) if a != 0.0 else 1.0
        s = 0.0
        rho = abs(a)
    elif a == 0.0:
        c = 0.0
        s = np.sign(b)
        rho = abs(b)
    elif abs(b) > abs(a):
        t = a / b
        s = np.sign(b) / np.sqrt(1.0 + t * t)
        c = s * t
        rho = b / s  # |c| <= |s|
    else:
        t = b / a
        c = np.sign(a) / np.sqrt(1.0 + t * t)
        s = c * t
        rho = a / c  # |s| <= |c|
    return float(c), float(s), float(rho)
