"""Tests for interpolation modes."""

import pytest

from keyspline import (
    Bezier,
    CatmullRom,
    Cosine,
    Linear,
    Step,
    StrokeBezier,
)


class TestStep:
    def test_default_threshold_holds_until_next_key(self):
        assert Step().threshold == 1.0

    @pytest.mark.parametrize("threshold", [0.0, -0.5, 1.5])
    def test_invalid_threshold(self, threshold):
        """Thresholds outside (0, 1] should raise ValueError."""
        with pytest.raises(ValueError):
            Step(threshold)

    def test_valid_threshold(self):
        assert Step(0.5).threshold == 0.5


class TestModes:
    def test_modes_without_payload_compare_equal(self):
        assert Linear() == Linear()
        assert Cosine() == Cosine()
        assert CatmullRom() == CatmullRom()
        assert Linear() != Cosine()

    def test_bezier_payloads(self):
        assert Bezier(1.0).control == 1.0

        stroke = StrokeBezier(1.0, 2.0)
        assert stroke.control_in == 1.0
        assert stroke.control_out == 2.0
