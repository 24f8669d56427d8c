"""Read-only traversal of spline keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._key import Key

if TYPE_CHECKING:
    from ._spline import Spline


class KeyIterator:
    """
    Iterator over the keys of a spline, in coordinate order.

    The iterator walks the spline's own storage by index; it does not copy
    the keys. Calling ``iter(spline)`` again starts a new traversal.

    Raises
    ------
    RuntimeError
        On the next step after the spline was mutated.
    """

    def __init__(self, spline: Spline):
        self._spline = spline
        self._index = 0
        self._version = spline._version

    def __iter__(self) -> KeyIterator:
        return self

    def __next__(self) -> Key:
        if self._spline._version != self._version:
            raise RuntimeError("spline mutated during iteration")

        keys = self._spline._keys

        if self._index >= len(keys):
            raise StopIteration

        key = keys[self._index]
        self._index += 1

        return key

    def __length_hint__(self) -> int:
        return max(len(self._spline._keys) - self._index, 0)
