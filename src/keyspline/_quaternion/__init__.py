from ._quaternion import Quaternion, quaternion, quaternion_normalize
from ._quaternion_interpolate import QuaternionInterpolate

__all__ = [
    "Quaternion",
    "QuaternionInterpolate",
    "quaternion",
    "quaternion_normalize",
]
