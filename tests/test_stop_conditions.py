"""
Tests for stop conditions.
"""

from types import SimpleNamespace

import pytest

from simscenario import StopCondition, StopConditions


def at(time):
    """Minimal engine state exposing the current time."""
    return SimpleNamespace(time=time)


class TestBuiltIns:
    """Tests for the built-in conditions."""

    def test_always_false_never_stops(self):
        """always_false never stops."""
        cond = StopConditions.always_false()
        assert not cond.evaluate(at(0))
        assert not cond.evaluate(at(1e9))

    def test_always_true(self):
        """always_true stops immediately."""
        assert StopConditions.always_true().evaluate(at(0))

    def test_limited_time(self):
        """Stops once time reaches the limit."""
        cond = StopConditions.limited_time(100)
        assert not cond.evaluate(at(99))
        assert cond.evaluate(at(100))
        assert cond.evaluate(at(101))

    def test_limited_time_negative_rejected(self):
        """A negative limit raises ValueError."""
        with pytest.raises(ValueError):
            StopConditions.limited_time(-1)

    def test_is_stop_condition(self):
        """Factories return StopCondition instances."""
        assert isinstance(StopConditions.always_false(), StopCondition)
        assert isinstance(StopConditions.limited_time(5), StopCondition)


class TestComposition:
    """Tests for and_/or_/not_."""

    def test_and(self):
        """and_ needs all conditions."""
        cond = StopConditions.and_(StopConditions.limited_time(10), StopConditions.limited_time(20))
        assert not cond.evaluate(at(15))
        assert cond.evaluate(at(20))

    def test_or(self):
        """or_ needs any condition."""
        cond = StopConditions.or_(StopConditions.limited_time(10), StopConditions.always_false())
        assert not cond.evaluate(at(5))
        assert cond.evaluate(at(10))

    def test_not(self):
        """not_ negates."""
        cond = StopConditions.not_(StopConditions.limited_time(10))
        assert cond.evaluate(at(5))
        assert not cond.evaluate(at(10))

    def test_empty_composition_rejected(self):
        """and_/or_ need at least one condition."""
        with pytest.raises(ValueError):
            StopConditions.and_()
        with pytest.raises(ValueError):
            StopConditions.or_()


class TestEquality:
    """Conditions compare by value so scenarios can be compared."""

    def test_defaults_are_equal(self):
        assert StopConditions.always_false() == StopConditions.always_false()
        assert StopConditions.always_false() != StopConditions.always_true()

    def test_limited_time_equality(self):
        assert StopConditions.limited_time(5) == StopConditions.limited_time(5)
        assert hash(StopConditions.limited_time(5)) == hash(StopConditions.limited_time(5))
        assert StopConditions.limited_time(5) != StopConditions.limited_time(6)

    def test_composite_equality(self):
        a = StopConditions.or_(StopConditions.limited_time(5), StopConditions.always_true())
        b = StopConditions.or_(StopConditions.limited_time(5), StopConditions.always_true())
        assert a == b
        assert a != StopConditions.and_(StopConditions.limited_time(5), StopConditions.always_true())
