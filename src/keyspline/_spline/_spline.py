"""Splines built from keys with per-segment interpolation."""

from __future__ import annotations

import math
import warnings
from bisect import bisect_right
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from .._interpolate import interpolate_for
from .._interpolation import (
    Bezier,
    CatmullRom,
    Cosine,
    Interpolation,
    Linear,
    Step,
    StrokeBezier,
)
from .._key import Key
from .._key_index_error import KeyIndexError
from .._knot_error import KnotError
from ._key_iterator import KeyIterator

_coordinate = attrgetter("coordinate")


@dataclass(frozen=True)
class SampledWithKey:
    """Sampled value together with the index of the key that produced it.

    Attributes
    ----------
    value : Any
        Sampled value.
    key : int
        Index of the key the sampled segment starts at (or of the boundary
        key for clamped and exact-end samples).
    """

    value: Any
    key: int


class Spline:
    """
    Ordered collection of keys that can be sampled at any coordinate.

    Every segment between two consecutive keys is interpolated with the
    mode of its lower key, so a single spline can mix step, linear, cosine,
    Catmull-Rom and Bezier segments.

    Parameters
    ----------
    keys : iterable of Key, optional
        Control points. They are sorted by coordinate with a stable sort,
        so keys sharing a coordinate keep their relative order.

    Notes
    -----
    Keys are expected to stay sorted by coordinate. ``add`` preserves the
    order; ``replace`` does not check it. Sampling results are only
    meaningful while the order holds; :meth:`validate` re-checks it.

    At a coordinate shared by several keys, the last of them starts the
    segment, so sampling at any key coordinate yields the value of the last
    key there.

    A spline with fewer than two keys has no segment: :meth:`sample` always
    returns ``None``, including at the coordinate of a single key.
    :meth:`clamped_sample` returns the single key's value everywhere.

    Splines hold no lock. Sampling from several threads is safe as long as
    nothing mutates the spline concurrently.

    Examples
    --------
    >>> spline = Spline([Key(0.0, 0.0), Key(1.0, 10.0)])
    >>> spline.sample(0.5)
    5.0
    >>> spline.sample(1.1) is None
    True
    >>> spline.clamped_sample(1.1)
    10.0
    """

    def __init__(self, keys: Iterable[Key] = ()):
        keys = sorted(keys, key=_coordinate)

        for key in keys:
            _warn_if_nan(key)

        self._keys: List[Key] = keys
        self._version = 0

    def __repr__(self) -> str:
        return f"Spline({self._keys!r})"

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> KeyIterator:
        return KeyIterator(self)

    def __getitem__(self, index: int) -> Key:
        try:
            return self._keys[index]
        except IndexError:
            raise KeyIndexError(
                f"key index {index} out of range for spline with {len(self._keys)} keys"
            ) from None

    @property
    def keys(self) -> Tuple[Key, ...]:
        """Snapshot of the keys, in coordinate order."""
        return tuple(self._keys)

    def is_empty(self) -> bool:
        return not self._keys

    def get(self, index: int) -> Optional[Key]:
        """Key at ``index``, or ``None`` when the index is out of range."""
        if -len(self._keys) <= index < len(self._keys):
            return self._keys[index]

        return None

    def add(self, key: Key) -> int:
        """
        Insert a key, keeping keys sorted by coordinate.

        A key whose coordinate is already present is inserted after the
        existing keys at that coordinate.

        Parameters
        ----------
        key : Key
            Key to insert.

        Returns
        -------
        index : int
            Position of the inserted key.
        """
        _warn_if_nan(key)

        index = bisect_right(self._keys, key.coordinate, key=_coordinate)
        self._keys.insert(index, key)
        self._version += 1

        return index

    def remove(self, index: int) -> Key:
        """
        Remove and return the key at ``index``.

        Raises
        ------
        KeyIndexError
            If ``index`` is out of range.
        """
        key = self[index]
        del self._keys[index]
        self._version += 1

        return key

    def replace(
        self,
        index: int,
        key: Union[Key, Callable[[Key], Key]],
    ) -> Key:
        """
        Replace the key at ``index`` and return the previous one.

        The keys are not re-sorted: the new key's coordinate must fit
        between its neighbours for sampling to stay correct.

        Parameters
        ----------
        index : int
            Position of the key to replace.
        key : Key or callable
            New key, or a function mapping the current key to the new one.

        Returns
        -------
        previous : Key
            The replaced key.

        Raises
        ------
        KeyIndexError
            If ``index`` is out of range.
        """
        previous = self[index]

        if not isinstance(key, Key):
            key = key(previous)

        _warn_if_nan(key)

        self._keys[index] = key
        self._version += 1

        return previous

    def clear(self) -> None:
        """Remove every key."""
        self._keys.clear()
        self._version += 1

    def validate(self) -> None:
        """
        Check that keys are sorted by coordinate.

        Raises
        ------
        KnotError
            If a key has a smaller coordinate than the key before it.
        """
        for i in range(1, len(self._keys)):
            if self._keys[i].coordinate < self._keys[i - 1].coordinate:
                raise KnotError(
                    f"keys out of order at index {i}: "
                    f"{self._keys[i].coordinate!r} < {self._keys[i - 1].coordinate!r}"
                )

    def sample_with_key(self, x: Any) -> Optional[SampledWithKey]:
        """
        Sample the spline at ``x`` and report the key used.

        Returns
        -------
        SampledWithKey or None
            ``None`` when the spline has fewer than two keys or ``x`` lies
            outside ``[first.coordinate, last.coordinate]``.
        """
        keys = self._keys

        if len(keys) < 2:
            return None

        if not keys[0].coordinate <= x <= keys[-1].coordinate:
            return None

        if x == keys[-1].coordinate:
            return SampledWithKey(keys[-1].value, len(keys) - 1)

        i = bisect_right(keys, x, key=_coordinate) - 1

        return SampledWithKey(self._interpolate_segment(i, x), i)

    def sample(self, x: Any) -> Any:
        """
        Sample the spline at ``x``.

        Parameters
        ----------
        x : Any
            Sampling coordinate.

        Returns
        -------
        value or None
            Interpolated value, or ``None`` when the spline has fewer than two
            keys or ``x`` lies outside ``[first.coordinate, last.coordinate]``.
        """
        sampled = self.sample_with_key(x)

        if sampled is None:
            return None

        return sampled.value

    def clamped_sample_with_key(self, x: Any) -> Optional[SampledWithKey]:
        """
        Sample the spline at ``x``, clamping ``x`` to the key range.

        Returns
        -------
        SampledWithKey or None
            ``None`` only when the spline has no key or ``x`` is NaN.
        """
        keys = self._keys

        if not keys or _is_nan(x):
            return None

        if x < keys[0].coordinate:
            return SampledWithKey(keys[0].value, 0)

        if x > keys[-1].coordinate:
            return SampledWithKey(keys[-1].value, len(keys) - 1)

        if len(keys) == 1:
            return SampledWithKey(keys[0].value, 0)

        return self.sample_with_key(x)

    def clamped_sample(self, x: Any) -> Any:
        """
        Sample the spline at ``x``, clamping ``x`` to the key range.

        Below the first key the first key's value is returned, above the last
        key the last key's value.

        Returns
        -------
        value or None
            ``None`` only when the spline has no key or ``x`` is NaN.
        """
        sampled = self.clamped_sample_with_key(x)

        if sampled is None:
            return None

        return sampled.value

    def _interpolate_segment(self, i: int, x: Any) -> Any:
        keys = self._keys
        lower = keys[i]
        upper = keys[i + 1]
        mode = lower.interpolation

        t = _normalize(x, lower.coordinate, upper.coordinate)
        interpolate = interpolate_for(lower.value)

        if isinstance(mode, Step):
            # x < upper.coordinate here, but t may still round up to 1.0
            if mode.threshold >= 1 or t < mode.threshold:
                return lower.value

            return upper.value

        if isinstance(mode, Linear):
            return interpolate.lerp(lower.value, upper.value, t)

        if isinstance(mode, Cosine):
            return interpolate.cosine(lower.value, upper.value, t)

        if isinstance(mode, CatmullRom):
            if i == 0 or i + 2 >= len(keys):
                return interpolate.lerp(lower.value, upper.value, t)

            before = keys[i - 1]
            after = keys[i + 2]

            return interpolate.cubic_hermite(
                (before.coordinate, before.value),
                (lower.coordinate, lower.value),
                (upper.coordinate, upper.value),
                (after.coordinate, after.value),
                t,
            )

        if isinstance(mode, Bezier):
            if isinstance(upper.interpolation, Bezier):
                return interpolate.cubic_bezier_mirrored(
                    lower.value,
                    mode.control,
                    upper.interpolation.control,
                    upper.value,
                    t,
                )

            return interpolate.quadratic_bezier(
                lower.value, mode.control, upper.value, t
            )

        if isinstance(mode, StrokeBezier):
            return interpolate.cubic_bezier(
                lower.value,
                mode.control_in,
                mode.control_out,
                upper.value,
                t,
            )

        raise TypeError(f"unsupported interpolation {mode!r}")


def spline(
    coordinates: Iterable[Any],
    values: Iterable[Any],
    interpolation: Optional[Interpolation] = None,
) -> Spline:
    """
    Create a spline from parallel sequences of coordinates and values.

    Parameters
    ----------
    coordinates : iterable
        Key coordinates.
    values : iterable
        Key values, one per coordinate.
    interpolation : Interpolation, optional
        Mode given to every key. Default is ``Linear()``.

    Returns
    -------
    Spline
        Spline through the given points.

    Raises
    ------
    ValueError
        If ``coordinates`` and ``values`` differ in length.

    Examples
    --------
    >>> s = spline([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> s.sample(1.5)
    2.5
    """
    coordinates = list(coordinates)
    values = list(values)

    if len(coordinates) != len(values):
        raise ValueError(
            f"got {len(coordinates)} coordinates and {len(values)} values"
        )

    if interpolation is None:
        interpolation = Linear()

    return Spline(
        Key(coordinate, value, interpolation)
        for coordinate, value in zip(coordinates, values)
    )


def _normalize(x: Any, lower: Any, upper: Any) -> Any:
    span = upper - lower

    if span == 0:
        return 0

    return (x - lower) / span


def _is_nan(x: Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def _warn_if_nan(key: Key) -> None:
    if _is_nan(key.coordinate):
        warnings.warn(
            "key coordinate is NaN; the key cannot be sampled and breaks key ordering",
            RuntimeWarning,
            stacklevel=3,
        )
