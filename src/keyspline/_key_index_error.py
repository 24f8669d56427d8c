from ._spline_error import SplineError


class KeyIndexError(SplineError, IndexError):
    """Raised when a key index is outside the spline."""

    pass
