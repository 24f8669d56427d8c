"""Spline control points."""

from dataclasses import dataclass, field
from typing import Any

from ._interpolation import Interpolation, Linear


@dataclass(frozen=True, order=True)
class Key:
    """Control point of a spline.

    Keys compare and order by coordinate only: two keys at the same
    coordinate are equal even when their values or modes differ.

    Attributes
    ----------
    coordinate : Any
        Sampling parameter (often a time). Must be totally ordered and
        support subtraction and division.
    value : Any
        Value the spline passes through at ``coordinate``.
    interpolation : Interpolation
        Mode of the segment starting at this key. Default is ``Linear()``.

    Examples
    --------
    >>> Key(0.0, 10.0)
    Key(coordinate=0.0, value=10.0, interpolation=Linear())
    >>> Key(0.0, 10.0) == Key(0.0, -1.0, Step())
    True
    """

    coordinate: Any
    value: Any = field(compare=False)
    interpolation: Interpolation = field(default_factory=Linear, compare=False)
