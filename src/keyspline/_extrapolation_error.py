from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when a query point is outside the key range with extrapolate='error'."""

    pass
