import logging
import warnings

import numpy as np

from .roots import roots_quadratic
from ..settings import DEFAULT_OPTIONS, Options
from ..utils import DegenerateDirectionError, InfeasiblePointError, InvalidRadiusError, get_arrays_tol, process_1d

_log = logging.getLogger(__name__)


def to_boundary(x, d, radius, xnorm2=DEFAULT_OPTIONS[Options.XNORM2.value], **kwargs):
    r"""
    Compute the step length to the boundary of a trust region.

    This function returns the nonnegative number :math:`\sigma` such that

    .. math::

        \norm{x + \sigma d} = \Delta,

    where :math:`\norm{\cdot}` is the Euclidean norm and :math:`\Delta` is the
    trust-region radius. The point :math:`x` must lie in the trust region.

    Parameters
    ----------
    x : array_like, shape (n,)
        Point :math:`x` as shown above.
    d : array_like, shape (n,)
        Direction :math:`d` as shown above.
    radius : float
        Trust-region radius :math:`\Delta` as shown above.
    xnorm2 : float, optional
        Squared Euclidean norm of `x`, if known. It must be nonnegative, and it
        is computed if zero (the default is 0).

    Returns
    -------
    float
        Step length :math:`\sigma` as shown above.

    Other Parameters
    ----------------
    debug : bool, optional
        Whether to make debugging tests during the execution, which is
        not recommended in production (the default is False).

    Raises
    ------
    InvalidRadiusError
        The trust-region radius is not positive.
    InfeasiblePointError
        The point `x` lies outside the trust region.
    DegenerateDirectionError
        The direction `d` is zero.
    ValueError
        The arrays `x` and `d` do not have the same size, or `xnorm2` is
        negative.
    AssertionError
        The computed step does not reach the boundary (only in debug mode).

    See Also
    --------
    roots_quadratic : Real roots of a quadratic

    Notes
    -----
    The step length :math:`\sigma` is the largest root of the quadratic

    .. math::

        \norm{d}^2 \sigma^2 + 2 x^{\T} d \sigma + \norm{x}^2 - \Delta^2.

    Since :math:`\norm{x} \le \Delta`, the constant term is nonpositive, so that
    the quadratic has a nonnegative root whenever :math:`d \neq 0`. The
    quadratic is built with :math:`d / \norm{d}_{\infty}` instead of :math:`d`,
    and the root is scaled back, so that tiny nonzero directions still reach
    the boundary.
    """
    debug = kwargs.pop(Options.DEBUG.value, DEFAULT_OPTIONS[Options.DEBUG.value])
    for key in kwargs:
        warnings.warn(f'Unknown option: {key}.', RuntimeWarning, 2)
    if not radius > 0.0:
        raise InvalidRadiusError('The trust-region radius must be positive.')
    x = process_1d(x, 'x')
    d = process_1d(d, 'd', x.size)

    if xnorm2 < 0.0:
        raise ValueError('The squared norm of x must be nonnegative.')
    if xnorm2 == 0.0:
        xnorm2 = np.inner(x, x)
    if xnorm2 > radius * radius:
        raise InfeasiblePointError('The point lies outside the trust region.')
    dmax = np.max(np.abs(d), initial=0.0)
    if dmax == 0.0:
        raise DegenerateDirectionError('The direction must be nonzero.')

    # The direction is scaled so that its squared norm cannot underflow.
    d_scaled = d / dmax
    xd = np.inner(x, d_scaled)
    dnorm2 = np.inner(d_scaled, d_scaled)
    roots = roots_quadratic(dnorm2, 2.0 * xd, xnorm2 - radius * radius)
    sigma = float(np.max(roots) / dmax)
    _log.debug(f'Step length to the boundary: {sigma}')

    if debug:
        tol = get_arrays_tol(x, d, np.array([radius]))
        assert sigma >= -tol
        assert abs(np.linalg.norm(x + sigma * d) - radius) <= np.sqrt(tol) * radius
    return sigma
