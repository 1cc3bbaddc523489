class InvalidRadiusError(ValueError):
    """
    Exception raised when a trust-region radius is not positive.
    """
    pass


class InfeasiblePointError(ValueError):
    """
    Exception raised when a point lies outside the trust region.
    """
    pass


class DegenerateDirectionError(ValueError):
    """
    Exception raised when a direction is zero, so that no boundary can be
    reached along it.
    """
    pass
