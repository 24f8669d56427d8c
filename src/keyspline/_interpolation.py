"""Interpolation modes available for spline segments.

Each key carries one of the modes below. The mode of a key governs the
segment that starts at that key; the mode of the last key is never used.
The set of modes is closed: ``Interpolation`` is the union of the classes
defined here and the sampling code dispatches over exactly these classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Step:
    """Hold the lower key's value, then jump to the upper key's value.

    Attributes
    ----------
    threshold : float
        Normalized segment parameter at which the value switches to the
        upper key. Must be in ``(0, 1]``. The default ``1.0`` holds the lower
        value for the whole segment.
    """

    threshold: float = 1.0

    def __post_init__(self):
        if not 0.0 < self.threshold <= 1.0:
            raise ValueError(
                f"Step threshold must be in (0, 1], got {self.threshold}"
            )


@dataclass(frozen=True)
class Linear:
    """Straight blend between the lower and upper key values."""


@dataclass(frozen=True)
class Cosine:
    """Linear blend remapped through the ease curve ``(1 - cos(t*pi)) / 2``."""


@dataclass(frozen=True)
class CatmullRom:
    """Cubic Hermite blend with tangents taken from the neighbouring keys.

    Needs the key before the lower key and the key after the upper key.
    On the first and last segment, where one of them is missing, the
    segment is interpolated linearly.
    """


@dataclass(frozen=True)
class Bezier:
    """Bezier blend with one auxiliary control value.

    When the upper key is also ``Bezier``, the segment is a cubic Bezier
    curve whose second control point is the upper key's control mirrored
    around the upper value. Otherwise the segment is a quadratic Bezier curve.

    Attributes
    ----------
    control : Any
        Control value, of the same type as the key values.
    """

    control: Any


@dataclass(frozen=True)
class StrokeBezier:
    """Cubic Bezier blend with explicit incoming and outgoing controls.

    Both controls belong to the segment that starts at this key: the curve
    leaves the lower value towards ``control_in`` and reaches the upper value
    coming from ``control_out``. The mode of the upper key plays no part, and
    a ``Bezier`` key followed by a ``StrokeBezier`` key gives a quadratic
    segment.

    Attributes
    ----------
    control_in : Any
        First control value (near the lower key).
    control_out : Any
        Second control value (near the upper key).
    """

    control_in: Any
    control_out: Any


Interpolation = Union[Step, Linear, Cosine, CatmullRom, Bezier, StrokeBezier]

INTERPOLATIONS = (Step, Linear, Cosine, CatmullRom, Bezier, StrokeBezier)
