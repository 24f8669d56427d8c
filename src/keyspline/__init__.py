"""keyspline: piecewise interpolation over keyed control points.

A spline is an ordered set of keys. Each key holds a coordinate, a value
and the interpolation mode of the segment starting at it, so segments of
one spline can be interpolated independently (step, linear, cosine,
Catmull-Rom, Bezier).

Splines
-------
Spline
    Ordered, mutable collection of keys; sampling and clamped sampling.
spline
    Create a spline from coordinates and values.
spline_evaluate
    Evaluate a spline at a tensor of coordinates.
KeyIterator
    Read-only traversal of a spline's keys.
SampledWithKey
    Sampled value with the index of the key that produced it.

Keys and Modes
--------------
Key
    Control point (coordinate, value, interpolation).
Step, Linear, Cosine, CatmullRom, Bezier, StrokeBezier
    Interpolation modes; ``Interpolation`` is their union.

Value Types
-----------
Interpolate
    Blends a value type must provide; the default works for any value
    supporting ``+``, ``-`` and multiplication by a scalar.
register_interpolate
    Register blends for a new value type.
Quaternion
    Unit quaternion values interpolated along great arcs.

Persistence
-----------
spline_to_dict, spline_from_dict, save, load
    JSON-compatible encoding of splines.

Exceptions
----------
SplineError
    Base exception for spline operations.
KeyIndexError
    Key index outside the spline.
ExtrapolationError
    Query point outside the key range in batched evaluation.
KnotError
    Keys out of order or too few keys.

Examples
--------
>>> from keyspline import Key, Linear, Spline
>>> s = Spline([Key(0.0, 0.0, Linear()), Key(1.0, 10.0, Linear())])
>>> s.sample(0.5)
5.0
>>> s.clamped_sample(-0.9)
0.0
"""

from ._extrapolation_error import ExtrapolationError
from ._interpolate import (
    Interpolate,
    TensorInterpolate,
    cosine,
    cubic_bezier,
    cubic_bezier_mirrored,
    cubic_hermite,
    interpolate_for,
    lerp,
    quadratic_bezier,
    register_interpolate,
)
from ._interpolation import (
    Bezier,
    CatmullRom,
    Cosine,
    Interpolation,
    Linear,
    Step,
    StrokeBezier,
)
from ._key import Key
from ._key_index_error import KeyIndexError
from ._knot_error import KnotError
from ._quaternion import (
    Quaternion,
    QuaternionInterpolate,
    quaternion,
    quaternion_normalize,
)
from ._serialization import (
    key_from_dict,
    key_to_dict,
    load,
    save,
    spline_from_dict,
    spline_to_dict,
)
from ._spline import (
    KeyIterator,
    SampledWithKey,
    Spline,
    spline,
    spline_evaluate,
)
from ._spline_error import SplineError

__all__ = [
    "Bezier",
    "CatmullRom",
    "Cosine",
    "ExtrapolationError",
    "Interpolate",
    "Interpolation",
    "Key",
    "KeyIndexError",
    "KeyIterator",
    "KnotError",
    "Linear",
    "Quaternion",
    "QuaternionInterpolate",
    "SampledWithKey",
    "Spline",
    "SplineError",
    "Step",
    "StrokeBezier",
    "TensorInterpolate",
    "cosine",
    "cubic_bezier",
    "cubic_bezier_mirrored",
    "cubic_hermite",
    "interpolate_for",
    "key_from_dict",
    "key_to_dict",
    "lerp",
    "load",
    "quadratic_bezier",
    "quaternion",
    "quaternion_normalize",
    "register_interpolate",
    "save",
    "spline",
    "spline_evaluate",
    "spline_from_dict",
    "spline_to_dict",
]

__version__ = "0.1.0"
