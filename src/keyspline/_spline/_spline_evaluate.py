from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Tuple

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError
from .._interpolation import Cosine, Interpolation, Linear, Step
from .._knot_error import KnotError

if TYPE_CHECKING:
    from ._spline import Spline


def spline_evaluate(
    spline: Spline,
    x: Tensor,
    extrapolate: str = "error",
) -> Tensor:
    """
    Evaluate a spline at a tensor of query coordinates.

    Parameters
    ----------
    spline : Spline
        Spline with numeric coordinates and values that are Python numbers
        or tensors of a common shape.
    x : Tensor
        Query coordinates, shape (*query_shape) or scalar.
    extrapolate : str, optional
        How to handle queries outside the key range. One of:

        - ``"error"``: Raise ExtrapolationError (default).
        - ``"clamp"``: Use the first or last key's value, as
          :meth:`Spline.clamped_sample` does.

    Returns
    -------
    y : Tensor
        Sampled values, shape (*query_shape, *value_shape).

    Raises
    ------
    ExtrapolationError
        If any query point is outside the key range and
        ``extrapolate == "error"``.
    KnotError
        If the spline has no key, or fewer than two keys with
        ``extrapolate == "error"``.
    ValueError
        If ``extrapolate`` is not a known mode, or a query is NaN with
        ``extrapolate == "clamp"``.

    Notes
    -----
    When every key value is a Python number, or every key value is a tensor of
    one shape, step, linear and cosine segments are evaluated for all queries
    at once from a stacked value table. Catmull-Rom and Bezier segments, and
    other value types, go through the scalar formulas of :class:`Spline`.

    Examples
    --------
    >>> s = spline([0.0, 1.0], [0.0, 10.0])
    >>> spline_evaluate(s, torch.tensor([0.0, 0.25, 1.0]))
    tensor([ 0.0000,  2.5000, 10.0000])
    """
    if extrapolate not in ("error", "clamp"):
        raise ValueError(
            f"extrapolate must be 'error' or 'clamp', got {extrapolate!r}"
        )

    keys = spline.keys
    n_keys = len(keys)

    if n_keys == 0:
        raise KnotError("cannot evaluate a spline without keys")

    if n_keys < 2 and extrapolate == "error":
        raise KnotError(
            f"spline needs at least 2 keys to interpolate, got {n_keys}"
        )

    # Check if x is scalar (0-d tensor)
    is_scalar = x.dim() == 0
    if is_scalar:
        x = x.unsqueeze(0)

    query_shape = x.shape
    x_flat = x.flatten().to(torch.float64)

    knots = torch.tensor(
        [float(key.coordinate) for key in keys], dtype=torch.float64
    )

    x_min = knots[0]
    x_max = knots[-1]

    if torch.any(torch.isnan(x_flat)):
        if extrapolate == "error":
            raise ExtrapolationError("Query points contain NaN")
        raise ValueError("cannot clamp NaN query points")

    if extrapolate == "error":
        if torch.any(x_flat < x_min) or torch.any(x_flat > x_max):
            raise ExtrapolationError(
                f"Query points outside spline domain [{x_min.item()}, {x_max.item()}]"
            )

    # Segment index of every query: last key with coordinate <= x, as in
    # scalar sampling.
    segment_idx = torch.searchsorted(knots, x_flat, right=True) - 1

    table = _value_table(keys)

    if table is None:
        y, value_shape = _evaluate_pointwise(spline, x_flat, segment_idx, x)
    else:
        y = _evaluate_table(spline, table, knots, x_flat, segment_idx)
        value_shape = table.shape[1:]

        if not isinstance(keys[0].value, Tensor):
            y = y.to(x.dtype if x.is_floating_point() else torch.get_default_dtype())

    # Reshape to (*query_shape, *value_shape)
    y = y.view(*query_shape, *value_shape)

    # Handle scalar input: return scalar output
    if is_scalar:
        y = y.squeeze(0)

    return y


def _value_table(keys) -> Optional[Tensor]:
    values = [key.value for key in keys]

    if all(isinstance(value, Tensor) for value in values):
        return torch.stack(values)

    if all(isinstance(value, (int, float)) for value in values):
        return torch.tensor(values, dtype=torch.float64)

    return None


def _evaluate_table(
    spline: Spline,
    table: Tensor,
    knots: Tensor,
    x_flat: Tensor,
    segment_idx: Tensor,
) -> Tensor:
    keys = spline.keys
    n_keys = len(keys)

    # Boundary queries (before the first key, at or after the last one) take
    # the boundary key's value.
    boundary_idx = torch.full_like(segment_idx, n_keys - 1)
    boundary_idx = boundary_idx.masked_fill(segment_idx < 0, 0)
    y = table[boundary_idx]

    interior = (segment_idx >= 0) & (x_flat < knots[-1])

    if not torch.any(interior):
        return y

    idx = segment_idx[interior]
    query = x_flat[interior]

    # Interior queries satisfy knots[idx] <= query < knots[idx + 1], so the
    # span is never zero.
    t = (query - knots[idx]) / (knots[idx + 1] - knots[idx])

    lower = table[idx]
    upper = table[idx + 1]
    w = _column(t.to(table.dtype), table.dim())

    kinds = torch.tensor([_kind(key.interpolation) for key in keys])[idx]
    thresholds = torch.tensor(
        [_threshold(key.interpolation) for key in keys], dtype=torch.float64
    )[idx]

    result = torch.empty_like(lower)

    mask = kinds == _STEP
    hold = (t[mask] < thresholds[mask]) | (thresholds[mask] >= 1)
    result[mask] = torch.where(
        _column(hold, table.dim()), lower[mask], upper[mask]
    )

    mask = kinds == _LINEAR
    result[mask] = lower[mask] * (1 - w[mask]) + upper[mask] * w[mask]

    mask = kinds == _COSINE
    eased = (1 - torch.cos(w[mask] * math.pi)) / 2
    result[mask] = lower[mask] * (1 - eased) + upper[mask] * eased

    # Modes that need neighbouring keys or control values go through the
    # scalar formulas.
    for position in torch.nonzero(kinds == _OTHER).flatten().tolist():
        value = spline._interpolate_segment(
            int(idx[position]), query[position].item()
        )
        result[position] = torch.as_tensor(value, dtype=table.dtype)

    y[interior] = result

    return y


def _evaluate_pointwise(
    spline: Spline,
    x_flat: Tensor,
    segment_idx: Tensor,
    x: Tensor,
) -> Tuple[Tensor, Tuple[int, ...]]:
    n_keys = len(spline)
    x_max = float(spline[-1].coordinate)

    values = []
    for query, index in zip(x_flat.tolist(), segment_idx.tolist()):
        if index < 0 or query >= x_max or n_keys == 1:
            values.append(spline.clamped_sample(query))
        else:
            values.append(spline._interpolate_segment(index, query))

    if isinstance(values[0], Tensor):
        y = torch.stack([torch.as_tensor(value) for value in values])
        return y, tuple(y.shape[1:])

    y = torch.tensor(values, dtype=x.dtype if x.is_floating_point() else None)
    return y, ()


_STEP, _LINEAR, _COSINE, _OTHER = range(4)


def _kind(mode: Interpolation) -> int:
    if isinstance(mode, Step):
        return _STEP
    if isinstance(mode, Linear):
        return _LINEAR
    if isinstance(mode, Cosine):
        return _COSINE
    return _OTHER


def _threshold(mode: Interpolation) -> float:
    if isinstance(mode, Step):
        return float(mode.threshold)
    return 1.0


def _column(v: Tensor, ndim: int) -> Tensor:
    return v.view(-1, *((1,) * (ndim - 1)))
