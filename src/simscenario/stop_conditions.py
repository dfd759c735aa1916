"""
Stop conditions: predicates deciding when a simulation run ends.

The scenario only stores its stop condition. The simulation engine evaluates
it against its runtime state after each step; the built-in conditions only
read ``state.time``.

Conditions are frozen dataclasses so that two scenarios configured the same
way compare equal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple, Union

Number = Union[int, float]


class StopCondition(ABC):
    """Base class for stop conditions."""

    @abstractmethod
    def evaluate(self, state: Any) -> bool:
        """Return True if the simulation should stop in the given state."""
        pass


@dataclass(frozen=True)
class _Constant(StopCondition):
    value: bool

    def evaluate(self, state: Any) -> bool:
        return self.value


@dataclass(frozen=True)
class LimitedTime(StopCondition):
    """Stops once the simulation time reaches end_time."""
    end_time: Number

    def evaluate(self, state: Any) -> bool:
        return state.time >= self.end_time


@dataclass(frozen=True)
class And(StopCondition):
    """Stops when all conditions hold."""
    conditions: Tuple[StopCondition, ...]

    def evaluate(self, state: Any) -> bool:
        return all(c.evaluate(state) for c in self.conditions)


@dataclass(frozen=True)
class Or(StopCondition):
    """Stops when any condition holds."""
    conditions: Tuple[StopCondition, ...]

    def evaluate(self, state: Any) -> bool:
        return any(c.evaluate(state) for c in self.conditions)


@dataclass(frozen=True)
class Not(StopCondition):
    """Negates a condition."""
    condition: StopCondition

    def evaluate(self, state: Any) -> bool:
        return not self.condition.evaluate(state)


class StopConditions:
    """Factory for the built-in stop conditions."""

    _ALWAYS_FALSE = _Constant(False)
    _ALWAYS_TRUE = _Constant(True)

    @staticmethod
    def always_false() -> StopCondition:
        """Never stops; the default for scenarios."""
        return StopConditions._ALWAYS_FALSE

    @staticmethod
    def always_true() -> StopCondition:
        return StopConditions._ALWAYS_TRUE

    @staticmethod
    def limited_time(end_time: Number) -> StopCondition:
        if end_time < 0:
            raise ValueError(f"end_time must be >= 0, got {end_time}")
        return LimitedTime(end_time)

    @staticmethod
    def and_(*conditions: StopCondition) -> StopCondition:
        if not conditions:
            raise ValueError("and_ requires at least one condition")
        return And(tuple(conditions))

    @staticmethod
    def or_(*conditions: StopCondition) -> StopCondition:
        if not conditions:
            raise ValueError("or_ requires at least one condition")
        return Or(tuple(conditions))

    @staticmethod
    def not_(condition: StopCondition) -> StopCondition:
        return Not(condition)
