"""Numeric blends required of values carried by spline keys.

The default ``Interpolate`` implementation only needs ``+``, ``-`` and
multiplication by a scalar on the right, so Python numbers, ``fractions``,
``numpy`` arrays and ``torch`` tensors work without registration. Types
that need different blends (for instance unit quaternions) subclass
``Interpolate`` and register an instance with :func:`register_interpolate`.

Every blend returns exactly its first endpoint at ``t = 0`` and exactly its
last endpoint at ``t = 1``; sampling a spline at a key coordinate relies
on it.
"""

from __future__ import annotations

import math
from functools import singledispatch
from typing import Any, Tuple

import torch
from torch import Tensor


class Interpolate:
    """Blends of a value type, parameterized by a ratio ``t`` in ``[0, 1]``."""

    def lerp(self, a: Any, b: Any, t: Any) -> Any:
        """Linear blend from ``a`` (``t = 0``) to ``b`` (``t = 1``)."""
        return a * (1 - t) + b * t

    def cosine(self, a: Any, b: Any, t: Any) -> Any:
        """Linear blend with ``t`` eased by ``(1 - cos(t*pi)) / 2``."""
        return self.lerp(a, b, (1 - math.cos(t * math.pi)) / 2)

    def cubic_hermite(
        self,
        x: Tuple[Any, Any],
        a: Tuple[Any, Any],
        b: Tuple[Any, Any],
        y: Tuple[Any, Any],
        t: Any,
    ) -> Any:
        """
        Cubic Hermite blend between ``a`` and ``b``.

        Parameters
        ----------
        x, a, b, y : tuple
            ``(coordinate, value)`` pairs of four consecutive keys. The blend
            goes from ``a`` to ``b``; ``x`` and ``y`` only shape the tangents.
        t : scalar
            Normalized parameter in ``[0, 1]`` across the ``a``-``b`` segment.

        Returns
        -------
        value
            Blended value.

        Notes
        -----
        Tangents are finite differences over the neighbouring keys, scaled
        to the ``a``-``b`` segment width ``h``:

        - ``m0 = (v_b - v_x) * h / (c_b - c_x)``
        - ``m1 = (v_y - v_a) * h / (c_y - c_a)``

        A zero-width denominator gives a zero tangent. The result is

        ``H_00(t)*v_a + H_10(t)*m0 + H_01(t)*v_b + H_11(t)*m1``

        with the cubic Hermite basis functions.
        """
        x_coordinate, x_value = x
        a_coordinate, a_value = a
        b_coordinate, b_value = b
        y_coordinate, y_value = y

        h = b_coordinate - a_coordinate

        m0 = _tangent(x_value, b_value, h, b_coordinate - x_coordinate)
        m1 = _tangent(a_value, y_value, h, y_coordinate - a_coordinate)

        # H_00(t) = 2t^3 - 3t^2 + 1
        # H_10(t) = t^3 - 2t^2 + t
        # H_01(t) = -2t^3 + 3t^2
        # H_11(t) = t^3 - t^2
        t2 = t * t
        t3 = t2 * t

        h_00 = 2 * t3 - 3 * t2 + 1
        h_10 = t3 - 2 * t2 + t
        h_01 = -2 * t3 + 3 * t2
        h_11 = t3 - t2

        return a_value * h_00 + m0 * h_10 + b_value * h_01 + m1 * h_11

    def quadratic_bezier(self, a: Any, u: Any, b: Any, t: Any) -> Any:
        """Quadratic Bezier blend through ``a``, control ``u`` and ``b``."""
        one_t = 1 - t

        return a * (one_t * one_t) + u * (2 * one_t * t) + b * (t * t)

    def cubic_bezier(self, a: Any, u: Any, v: Any, b: Any, t: Any) -> Any:
        """Cubic Bezier blend through ``a``, controls ``u`` and ``v``, and ``b``."""
        one_t = 1 - t
        one_t2 = one_t * one_t
        t2 = t * t

        return (
            a * (one_t2 * one_t)
            + u * (3 * one_t2 * t)
            + v * (3 * one_t * t2)
            + b * (t2 * t)
        )

    def cubic_bezier_mirrored(
        self, a: Any, u: Any, v: Any, b: Any, t: Any
    ) -> Any:
        """Cubic Bezier blend whose second control is ``v`` mirrored around ``b``."""
        return self.cubic_bezier(a, u, b + b - v, b, t)


def _tangent(before: Any, after: Any, h: Any, width: Any) -> Any:
    if width == 0:
        return (after - before) * 0

    return (after - before) * (h / width)


class TensorInterpolate(Interpolate):
    """Blends of ``torch.Tensor`` values."""

    def lerp(self, a: Tensor, b: Tensor, t: Any) -> Tensor:
        return torch.lerp(a, b, float(t))


ARITHMETIC = Interpolate()

TENSOR = TensorInterpolate()


@singledispatch
def interpolate_for(value: Any) -> Interpolate:
    """
    Return the blends used for values of the type of ``value``.

    Parameters
    ----------
    value : Any
        Key value.

    Returns
    -------
    Interpolate
        Registered implementation for ``type(value)``, or the arithmetic
        default.
    """
    return ARITHMETIC


@interpolate_for.register
def _(value: Tensor) -> Interpolate:
    return TENSOR


def register_interpolate(cls: type, interpolate: Interpolate) -> None:
    """
    Use ``interpolate`` for key values of type ``cls`` and its subclasses.

    Parameters
    ----------
    cls : type
        Value type.
    interpolate : Interpolate
        Blends for that type.

    Examples
    --------
    >>> class Angle(float): ...
    >>> class AngleInterpolate(Interpolate):
    ...     def lerp(self, a, b, t):
    ...         return Angle(super().lerp(a, b, t) % 360.0)
    >>> register_interpolate(Angle, AngleInterpolate())
    """
    if not isinstance(interpolate, Interpolate):
        raise TypeError(
            f"interpolate must be an Interpolate instance, got {type(interpolate).__name__}"
        )

    interpolate_for.register(cls, lambda value: interpolate)


def lerp(a: Any, b: Any, t: Any) -> Any:
    """Linear blend of ``a`` and ``b`` at ``t``."""
    return interpolate_for(a).lerp(a, b, t)


def cosine(a: Any, b: Any, t: Any) -> Any:
    """Cosine-eased blend of ``a`` and ``b`` at ``t``."""
    return interpolate_for(a).cosine(a, b, t)


def cubic_hermite(
    x: Tuple[Any, Any],
    a: Tuple[Any, Any],
    b: Tuple[Any, Any],
    y: Tuple[Any, Any],
    t: Any,
) -> Any:
    """Cubic Hermite blend over four ``(coordinate, value)`` pairs at ``t``."""
    return interpolate_for(a[1]).cubic_hermite(x, a, b, y, t)


def quadratic_bezier(a: Any, u: Any, b: Any, t: Any) -> Any:
    """Quadratic Bezier blend at ``t``."""
    return interpolate_for(a).quadratic_bezier(a, u, b, t)


def cubic_bezier(a: Any, u: Any, v: Any, b: Any, t: Any) -> Any:
    """Cubic Bezier blend at ``t``."""
    return interpolate_for(a).cubic_bezier(a, u, v, b, t)


def cubic_bezier_mirrored(a: Any, u: Any, v: Any, b: Any, t: Any) -> Any:
    """Cubic Bezier blend with the second control mirrored around ``b``."""
    return interpolate_for(a).cubic_bezier_mirrored(a, u, v, b, t)
