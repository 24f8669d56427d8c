"""Tests for quaternion key values."""

import math

import pytest
import torch

from keyspline import (
    CatmullRom,
    Key,
    Quaternion,
    QuaternionInterpolate,
    Spline,
    StrokeBezier,
    interpolate_for,
    lerp,
    quaternion,
    quaternion_normalize,
)


def _rotation_z(angle):
    return quaternion(
        torch.tensor(
            [math.cos(angle / 2), 0.0, 0.0, math.sin(angle / 2)],
            dtype=torch.float64,
        )
    )


class TestQuaternion:
    def test_creation(self):
        q = quaternion(torch.tensor([1.0, 0.0, 0.0, 0.0]))

        assert isinstance(q, Quaternion)
        assert q.wxyz.shape == (4,)

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            quaternion(torch.tensor([1.0, 0.0, 0.0]))

    def test_normalize(self):
        q = quaternion_normalize(quaternion(torch.tensor([2.0, 0.0, 0.0, 0.0])))

        assert torch.allclose(q.wxyz, torch.tensor([1.0, 0.0, 0.0, 0.0]))

    def test_registered(self):
        q = quaternion(torch.tensor([1.0, 0.0, 0.0, 0.0]))

        assert isinstance(interpolate_for(q), QuaternionInterpolate)


class TestQuaternionSlerp:
    def test_endpoints(self):
        a = _rotation_z(0.0)
        b = _rotation_z(math.pi / 2)

        assert lerp(a, b, 0.0) is a
        assert lerp(a, b, 1.0) is b

    def test_midpoint_follows_great_arc(self):
        a = _rotation_z(0.0)
        b = _rotation_z(math.pi / 2)

        result = lerp(a, b, 0.5)

        assert torch.allclose(result.wxyz, _rotation_z(math.pi / 4).wxyz)

    def test_shortest_arc(self):
        """q and -q are the same rotation; slerp should take the short way."""
        a = _rotation_z(0.0)
        b = _rotation_z(math.pi / 2)
        negated = quaternion(-b.wxyz)

        assert torch.allclose(lerp(a, negated, 0.5).wxyz, lerp(a, b, 0.5).wxyz)

    def test_parallel(self):
        a = _rotation_z(0.3)

        assert torch.allclose(lerp(a, a, 0.5).wxyz, a.wxyz)


class TestQuaternionSpline:
    @pytest.fixture
    def keys(self):
        return [
            Key(0.0, _rotation_z(0.0)),
            Key(1.0, _rotation_z(0.5)),
            Key(2.0, _rotation_z(1.5)),
            Key(3.0, _rotation_z(2.0)),
        ]

    def test_sample_at_keys(self, keys):
        s = Spline(keys)

        for key in keys:
            assert torch.equal(s.sample(key.coordinate).wxyz, key.value.wxyz)

    def test_linear_segment(self, keys):
        s = Spline(keys)

        assert torch.allclose(s.sample(0.5).wxyz, _rotation_z(0.25).wxyz)

    def test_catmull_rom_stays_unit(self, keys):
        s = Spline(
            [Key(key.coordinate, key.value, CatmullRom()) for key in keys]
        )

        for x in [1.1, 1.5, 1.9]:
            norm = torch.linalg.vector_norm(s.sample(x).wxyz)
            assert norm.item() == pytest.approx(1.0)

    def test_stroke_bezier_stays_unit(self, keys):
        s = Spline(
            [
                Key(0.0, keys[0].value, StrokeBezier(keys[1].value, keys[2].value)),
                Key(1.0, keys[3].value),
            ]
        )

        result = s.sample(0.5)

        assert isinstance(result, Quaternion)
        assert torch.linalg.vector_norm(result.wxyz).item() == pytest.approx(1.0)
