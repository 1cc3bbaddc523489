from .exceptions import DegenerateDirectionError, InfeasiblePointError, InvalidRadiusError
from .maths import get_arrays_tol, max_abs_arrays, process_1d
from ._show_versions import show_versions

__all__ = ['DegenerateDirectionError', 'InfeasiblePointError', 'InvalidRadiusError', 'get_arrays_tol',
           'max_abs_arrays', 'process_1d', 'show_versions']
