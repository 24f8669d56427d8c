from ._key_iterator import KeyIterator
from ._spline import SampledWithKey, Spline, spline
from ._spline_evaluate import spline_evaluate

__all__ = [
    "KeyIterator",
    "SampledWithKey",
    "Spline",
    "spline",
    "spline_evaluate",
]
