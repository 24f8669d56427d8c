"""Unit quaternion values for rotation splines."""

from __future__ import annotations

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class Quaternion:
    """Unit quaternion representing a 3D rotation.

    Uses scalar-first (wxyz) convention: q = w + xi + yj + zk.

    Attributes
    ----------
    wxyz : Tensor
        Quaternion components in [w, x, y, z] order, shape (..., 4).

    Examples
    --------
    Identity rotation:
        Quaternion(wxyz=torch.tensor([1.0, 0.0, 0.0, 0.0]), batch_size=[])
    """

    wxyz: Tensor


def quaternion(wxyz: Tensor) -> Quaternion:
    """Create quaternion from wxyz tensor.

    Parameters
    ----------
    wxyz : Tensor
        Quaternion components [w, x, y, z], shape (..., 4).

    Returns
    -------
    Quaternion
        Quaternion instance.

    Raises
    ------
    ValueError
        If wxyz does not have last dimension 4.

    Examples
    --------
    >>> q = quaternion(torch.tensor([1.0, 0.0, 0.0, 0.0]))
    >>> q.wxyz
    tensor([1., 0., 0., 0.])
    """
    wxyz = torch.as_tensor(wxyz)

    if wxyz.dim() == 0 or wxyz.shape[-1] != 4:
        raise ValueError(
            f"quaternion: wxyz must have last dimension 4, got shape {tuple(wxyz.shape)}"
        )

    return Quaternion(wxyz=wxyz, batch_size=wxyz.shape[:-1])


def quaternion_normalize(q: Quaternion) -> Quaternion:
    """Scale a quaternion to unit norm."""
    wxyz = q.wxyz

    return quaternion(wxyz / torch.linalg.vector_norm(wxyz, dim=-1, keepdim=True))
