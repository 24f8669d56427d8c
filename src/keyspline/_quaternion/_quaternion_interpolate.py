"""Blends of unit quaternions."""

from __future__ import annotations

from typing import Any, Tuple

import torch
from torch import Tensor

from .._interpolate import Interpolate, register_interpolate
from ._quaternion import Quaternion, quaternion, quaternion_normalize


class QuaternionInterpolate(Interpolate):
    """
    Blends of :class:`Quaternion` values.

    ``lerp`` follows the shortest great arc between the two rotations
    (spherical linear interpolation). The cubic blends are computed
    component-wise on ``wxyz`` and renormalized. Every blend returns its
    endpoints unchanged at ``t = 0`` and ``t = 1``.
    """

    def lerp(self, a: Quaternion, b: Quaternion, t: Any) -> Quaternion:
        if t == 0:
            return a
        if t == 1:
            return b

        q0 = a.wxyz
        q1 = b.wxyz
        t = float(t)

        # Take the shorter arc: q and -q are the same rotation
        dot = (q0 * q1).sum(dim=-1, keepdim=True)
        q1 = torch.where(dot < 0, -q1, q1)
        dot = dot.abs().clamp(max=1.0)

        theta = torch.acos(dot)
        sin_theta = torch.sin(theta)

        # Nearly parallel rotations: fall back to normalized linear blend
        parallel = sin_theta < 1e-6
        safe_sin = torch.where(parallel, torch.ones_like(sin_theta), sin_theta)

        w0 = torch.where(
            parallel,
            torch.full_like(theta, 1.0 - t),
            torch.sin((1.0 - t) * theta) / safe_sin,
        )
        w1 = torch.where(
            parallel,
            torch.full_like(theta, t),
            torch.sin(t * theta) / safe_sin,
        )

        return quaternion_normalize(quaternion(w0 * q0 + w1 * q1))

    def cubic_hermite(
        self,
        x: Tuple[Any, Quaternion],
        a: Tuple[Any, Quaternion],
        b: Tuple[Any, Quaternion],
        y: Tuple[Any, Quaternion],
        t: Any,
    ) -> Quaternion:
        if t == 0:
            return a[1]
        if t == 1:
            return b[1]

        wxyz = super().cubic_hermite(
            (x[0], x[1].wxyz),
            (a[0], a[1].wxyz),
            (b[0], b[1].wxyz),
            (y[0], y[1].wxyz),
            t,
        )

        return _normalized(wxyz)

    def quadratic_bezier(
        self, a: Quaternion, u: Quaternion, b: Quaternion, t: Any
    ) -> Quaternion:
        if t == 0:
            return a
        if t == 1:
            return b

        return _normalized(super().quadratic_bezier(a.wxyz, u.wxyz, b.wxyz, t))

    def cubic_bezier(
        self, a: Quaternion, u: Quaternion, v: Quaternion, b: Quaternion, t: Any
    ) -> Quaternion:
        if t == 0:
            return a
        if t == 1:
            return b

        return _normalized(
            super().cubic_bezier(a.wxyz, u.wxyz, v.wxyz, b.wxyz, t)
        )

    def cubic_bezier_mirrored(
        self, a: Quaternion, u: Quaternion, v: Quaternion, b: Quaternion, t: Any
    ) -> Quaternion:
        mirrored = quaternion(b.wxyz + b.wxyz - v.wxyz)

        return self.cubic_bezier(a, u, mirrored, b, t)


def _normalized(wxyz: Tensor) -> Quaternion:
    return quaternion_normalize(quaternion(wxyz))


QUATERNION = QuaternionInterpolate()

register_interpolate(Quaternion, QUATERNION)
