"""
Timed events: the entries of a scenario.

A TimedEvent is a timestamped occurrence with a type tag. The tag comes from
a closed set of values (an Enum), so a scenario can declare up front which
kinds of events it may contain.

Events are frozen dataclasses: equality and hashing are structural, which is
what Builder.ensure_frequency and Scenario equality rely on. Domain specific
events subclass TimedEvent and add their own (frozen) fields.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from .time_window import TimeWindow

Number = Union[int, float]
EventPredicate = Callable[['TimedEvent'], bool]


class ScenarioEventType(Enum):
    """Event types defined by the scenario layer itself."""

    TIME_OUT = "TIME_OUT"


@dataclass(frozen=True)
class TimedEvent:
    """
    An event that occurs at a specific time.

    Attributes:
        event_type: Tag identifying the kind of event
        time: Time at which the event occurs (>= 0)
    """
    event_type: Enum
    time: Number

    def __post_init__(self):
        if self.time < 0:
            raise ValueError(f"Event time must be >= 0, got {self.time}")

    def get_event_type(self) -> Enum:
        return self.event_type

    def get_time(self) -> Number:
        return self.time


def time_key(event: TimedEvent) -> Number:
    """Sort key ordering events by time only."""
    return event.get_time()


# -----------------------------------------------------------------------------
# Factory functions for common events
# -----------------------------------------------------------------------------

def make_time_out_event(time: Number) -> TimedEvent:
    """Create the event that marks the end of a scenario."""
    return TimedEvent(ScenarioEventType.TIME_OUT, time)


# -----------------------------------------------------------------------------
# Predicates for Builder.filter_events / Builder.ensure_frequency
# -----------------------------------------------------------------------------

def has_type(*event_types: Enum) -> EventPredicate:
    """Matches events whose type is one of event_types."""
    wanted = frozenset(event_types)

    def predicate(event: TimedEvent) -> bool:
        return event.get_event_type() in wanted

    return predicate


def is_equal_to(target: TimedEvent) -> EventPredicate:
    """Matches events equal to target."""
    def predicate(event: TimedEvent) -> bool:
        return event == target

    return predicate


def in_time_window(time_window: TimeWindow) -> EventPredicate:
    """Matches events whose time lies inside time_window."""
    def predicate(event: TimedEvent) -> bool:
        return time_window.is_in(event.get_time())

    return predicate
