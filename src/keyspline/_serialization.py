"""Conversion of splines to and from JSON-compatible dictionaries.

The format is self-describing::

    {
        "keys": [
            {
                "coordinate": 0.0,
                "value": 0.0,
                "interpolation": {"type": "bezier", "control": 0.5},
            },
            ...
        ]
    }

Python numbers are stored as they are. Tensors and quaternions are stored
as tagged objects holding their components and dtype, so that reloading
yields bit-identical values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import torch
from torch import Tensor

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
from ._quaternion import Quaternion, quaternion
from ._spline import Spline


def value_to_dict(value: Any) -> Any:
    """Encode a key value (or Bezier control) as JSON-compatible data."""
    if isinstance(value, Quaternion):
        return {
            "quaternion": value.wxyz.tolist(),
            "dtype": _dtype_name(value.wxyz.dtype),
        }

    if isinstance(value, Tensor):
        return {"tensor": value.tolist(), "dtype": _dtype_name(value.dtype)}

    if isinstance(value, (bool, int, float)):
        return value

    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def value_from_dict(data: Any) -> Any:
    """Decode a value encoded by :func:`value_to_dict`."""
    if isinstance(data, dict):
        dtype = _dtype(data.get("dtype", "float32"))

        if "quaternion" in data:
            return quaternion(torch.tensor(data["quaternion"], dtype=dtype))

        if "tensor" in data:
            return torch.tensor(data["tensor"], dtype=dtype)

        raise ValueError(f"unknown value encoding with fields {sorted(data)}")

    return data


def interpolation_to_dict(interpolation: Interpolation) -> Dict[str, Any]:
    """Encode an interpolation mode."""
    if isinstance(interpolation, Step):
        return {"type": "step", "threshold": interpolation.threshold}

    if isinstance(interpolation, Linear):
        return {"type": "linear"}

    if isinstance(interpolation, Cosine):
        return {"type": "cosine"}

    if isinstance(interpolation, CatmullRom):
        return {"type": "catmull_rom"}

    if isinstance(interpolation, Bezier):
        return {
            "type": "bezier",
            "control": value_to_dict(interpolation.control),
        }

    if isinstance(interpolation, StrokeBezier):
        return {
            "type": "stroke_bezier",
            "control_in": value_to_dict(interpolation.control_in),
            "control_out": value_to_dict(interpolation.control_out),
        }

    raise TypeError(f"unsupported interpolation {interpolation!r}")


def interpolation_from_dict(data: Dict[str, Any]) -> Interpolation:
    """Decode an interpolation mode encoded by :func:`interpolation_to_dict`."""
    kind = data.get("type")

    if kind == "step":
        return Step(data.get("threshold", 1.0))

    if kind == "linear":
        return Linear()

    if kind == "cosine":
        return Cosine()

    if kind == "catmull_rom":
        return CatmullRom()

    if kind == "bezier":
        return Bezier(value_from_dict(data["control"]))

    if kind == "stroke_bezier":
        return StrokeBezier(
            value_from_dict(data["control_in"]),
            value_from_dict(data["control_out"]),
        )

    raise ValueError(f"unknown interpolation type {kind!r}")


def key_to_dict(key: Key) -> Dict[str, Any]:
    """Encode a key."""
    return {
        "coordinate": key.coordinate,
        "value": value_to_dict(key.value),
        "interpolation": interpolation_to_dict(key.interpolation),
    }


def key_from_dict(data: Dict[str, Any]) -> Key:
    """Decode a key encoded by :func:`key_to_dict`."""
    return Key(
        data["coordinate"],
        value_from_dict(data["value"]),
        interpolation_from_dict(data.get("interpolation", {"type": "linear"})),
    )


def spline_to_dict(spline: Spline) -> Dict[str, Any]:
    """
    Encode a spline as a JSON-compatible dictionary.

    Parameters
    ----------
    spline : Spline
        Spline whose coordinates are Python numbers and whose values are
        Python numbers, tensors or quaternions.

    Returns
    -------
    dict
        ``{"keys": [...]}`` with one entry per key, in key order.

    Raises
    ------
    TypeError
        If a value has no encoding.
    """
    return {"keys": [key_to_dict(key) for key in spline]}


def spline_from_dict(data: Dict[str, Any]) -> Spline:
    """
    Decode a spline encoded by :func:`spline_to_dict`.

    Raises
    ------
    ValueError
        If an interpolation type or value encoding is unknown.
    """
    return Spline(key_from_dict(key) for key in data.get("keys", []))


def save(spline: Spline, path: Union[str, Path]) -> None:
    """Save a spline to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(spline_to_dict(spline), f, indent=2)


def load(path: Union[str, Path]) -> Spline:
    """Load a spline from a JSON file written by :func:`save`."""
    path = Path(path)
    with open(path, "r") as f:
        data = json.load(f)
    return spline_from_dict(data)


def _dtype_name(dtype: torch.dtype) -> str:
    return str(dtype).removeprefix("torch.")


def _dtype(name: str) -> torch.dtype:
    dtype = getattr(torch, name, None)

    if not isinstance(dtype, torch.dtype):
        raise ValueError(f"unknown dtype {name!r}")

    return dtype
