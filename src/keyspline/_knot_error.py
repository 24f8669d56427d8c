from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid key sequences (out of order, too few keys)."""

    pass
