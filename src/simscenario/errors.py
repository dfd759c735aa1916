"""
Exceptions raised while building scenarios.
"""


class ScenarioError(Exception):
    """Base class for all simscenario errors."""


class InvalidFrequencyError(ScenarioError, ValueError):
    """A target frequency was negative."""


class EventListStateError(ScenarioError, RuntimeError):
    """
    The builder's event list does not allow the requested operation.

    Raised when the list is empty, when a predicate matches no event, or when
    the matched events are not all equal.
    """
