from .boundary import to_boundary
from .givens import sym_givens
from .roots import roots_quadratic

__all__ = ['roots_quadratic', 'sym_givens', 'to_boundary']
