"""Tests for batched spline evaluation."""

import pytest
import torch

from keyspline import (
    Bezier,
    CatmullRom,
    Cosine,
    ExtrapolationError,
    Key,
    KnotError,
    Linear,
    Spline,
    Step,
    spline_evaluate,
)


@pytest.fixture
def s():
    return Spline(
        [
            Key(0.0, 1.0, CatmullRom()),
            Key(0.5, -2.0, CatmullRom()),
            Key(2.0, 7.5, Cosine()),
            Key(3.0, 0.25, Bezier(1.0)),
            Key(4.5, 3.0, Step()),
        ]
    )


class TestSplineEvaluate:
    def test_matches_scalar_sample(self, s):
        x = torch.linspace(0.0, 4.5, 37, dtype=torch.float64)

        result = spline_evaluate(s, x)

        expected = torch.tensor(
            [s.sample(value) for value in x.tolist()], dtype=torch.float64
        )
        # Cosine easing goes through torch.cos instead of math.cos
        assert torch.allclose(result, expected, rtol=0.0, atol=1e-12)

    def test_linear_and_step_match_scalar_sample_exactly(self):
        s = Spline(
            [
                Key(0.0, 1.0, Linear()),
                Key(0.7, -2.0, Step()),
                Key(1.3, 4.0, Step(0.25)),
                Key(2.9, 0.5, Linear()),
                Key(3.0, 8.0),
            ]
        )
        x = torch.linspace(0.0, 3.0, 61, dtype=torch.float64)

        result = spline_evaluate(s, x)

        expected = torch.tensor(
            [s.sample(value) for value in x.tolist()], dtype=torch.float64
        )
        assert torch.equal(result, expected)

    def test_step_holds_just_below_next_key(self):
        s = Spline([Key(-1.0, 0.0, Step()), Key(1.0, 10.0, Step())])

        result = spline_evaluate(
            s, torch.tensor([1.0 - 2**-53, 1.0], dtype=torch.float64)
        )

        assert result.tolist() == [0.0, 10.0]

    def test_cosine_tensor_values(self):
        s = Spline(
            [
                Key(0.0, torch.tensor([0.0, 1.0]), Cosine()),
                Key(
                    1.0,
                    torch.tensor([4.0, -1.0]),
                    Bezier(torch.tensor([2.0, 2.0])),
                ),
                Key(2.0, torch.tensor([0.0, 0.0])),
            ]
        )
        x = torch.tensor([0.0, 0.25, 0.5, 1.0, 1.5, 2.0])

        result = spline_evaluate(s, x)

        expected = torch.stack([s.sample(value) for value in x.tolist()])
        assert result.shape == (6, 2)
        assert torch.allclose(result, expected)

    def test_at_keys(self, s):
        x = torch.tensor([key.coordinate for key in s], dtype=torch.float64)

        result = spline_evaluate(s, x)

        expected = torch.tensor([key.value for key in s], dtype=torch.float64)
        assert torch.equal(result, expected)

    def test_scalar_query(self, s):
        result = spline_evaluate(s, torch.tensor(2.0, dtype=torch.float64))

        assert result.dim() == 0
        assert result.item() == 7.5

    def test_query_shape(self, s):
        x = torch.rand(3, 4, dtype=torch.float64) * 4.5

        result = spline_evaluate(s, x)

        assert result.shape == (3, 4)

    def test_extrapolation_error(self, s):
        with pytest.raises(ExtrapolationError):
            spline_evaluate(s, torch.tensor([0.0, 5.0]))

    def test_nan_is_extrapolation_error(self, s):
        with pytest.raises(ExtrapolationError):
            spline_evaluate(s, torch.tensor([float("nan")]))

    def test_clamp(self, s):
        x = torch.tensor([-1.0, 0.0, 4.5, 10.0], dtype=torch.float64)

        result = spline_evaluate(s, x, extrapolate="clamp")

        assert result.tolist() == [1.0, 1.0, 3.0, 3.0]

    def test_clamp_nan(self, s):
        with pytest.raises(ValueError):
            spline_evaluate(s, torch.tensor([float("nan")]), extrapolate="clamp")

    def test_invalid_extrapolate(self, s):
        with pytest.raises(ValueError):
            spline_evaluate(s, torch.tensor([0.0]), extrapolate="extend")

    def test_float32_queries(self):
        s = Spline([Key(0.0, 0.0), Key(1.0, 10.0)])

        result = spline_evaluate(s, torch.tensor([0.0, 0.5, 1.0]))

        assert result.dtype == torch.float32
        assert torch.allclose(result, torch.tensor([0.0, 5.0, 10.0]))

    def test_tensor_values(self):
        s = Spline(
            [
                Key(0.0, torch.tensor([0.0, 0.0])),
                Key(1.0, torch.tensor([2.0, 4.0])),
            ]
        )

        result = spline_evaluate(s, torch.tensor([0.0, 0.5, 1.0]))

        assert result.shape == (3, 2)
        assert torch.allclose(
            result, torch.tensor([[0.0, 0.0], [1.0, 2.0], [2.0, 4.0]])
        )

    def test_empty_spline(self):
        with pytest.raises(KnotError):
            spline_evaluate(Spline(), torch.tensor([0.0]), extrapolate="clamp")

    def test_single_key(self):
        s = Spline([Key(1.0, 5.0)])

        with pytest.raises(KnotError):
            spline_evaluate(s, torch.tensor([1.0]))

        result = spline_evaluate(s, torch.tensor([0.0, 1.0, 2.0]), extrapolate="clamp")
        assert result.tolist() == [5.0, 5.0, 5.0]
