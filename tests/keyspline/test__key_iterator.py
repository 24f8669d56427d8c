"""Tests for KeyIterator."""

import pytest

from keyspline import Key, KeyIterator, Spline


@pytest.fixture
def s():
    return Spline([Key(2.0, 20.0), Key(0.0, 0.0), Key(1.0, 10.0)])


class TestKeyIterator:
    def test_ascending_order(self, s):
        assert [key.coordinate for key in s] == [0.0, 1.0, 2.0]

    def test_iter_returns_key_iterator(self, s):
        assert isinstance(iter(s), KeyIterator)

    def test_yields_stored_keys(self, s):
        """Iteration should yield the spline's own keys, not copies."""
        for i, key in enumerate(s):
            assert key is s[i]

    def test_restartable(self, s):
        assert list(s) == list(s)
        assert len(list(s)) == 3

    def test_exhausted(self, s):
        iterator = iter(s)
        list(iterator)

        with pytest.raises(StopIteration):
            next(iterator)

    def test_empty(self):
        assert list(Spline()) == []

    def test_length_hint(self, s):
        iterator = iter(s)
        next(iterator)

        assert iterator.__length_hint__() == 2

    def test_invalidated_by_mutation(self, s):
        iterator = iter(s)
        next(iterator)
        s.add(Key(3.0, 30.0))

        with pytest.raises(RuntimeError):
            next(iterator)
