"""
Scenario: an immutable, time sorted list of events plus the settings a
simulation engine needs to run it.

Scenarios are never constructed directly. A Builder accumulates events,
event types, model builders and settings, and build() takes a snapshot:
- events are copied and stably sorted by time
- the event types observed in the events are added to the declared types
- model builders are deduplicated, keeping first-seen order

A Builder can be built any number of times; every Scenario is independent of
the builder that produced it.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
from loguru import logger

from .errors import EventListStateError, InvalidFrequencyError
from .events import TimedEvent, time_key
from .models import ModelBuilder
from .problem_class import ProblemClass, SimpleProblemClass
from .stop_conditions import StopCondition, StopConditions
from .time_window import TimeWindow

Number = Union[int, float]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_PROBLEM_CLASS: ProblemClass = SimpleProblemClass("DEFAULT")

# 8 hours in milliseconds
DEFAULT_SCENARIO_LENGTH = 8 * 60 * 60 * 1000

DEFAULT_TIME_WINDOW = TimeWindow(0, DEFAULT_SCENARIO_LENGTH)

DEFAULT_STOP_CONDITION = StopConditions.always_false()


def collect_event_types(events: Iterable[TimedEvent]) -> Tuple[Enum, ...]:
    """
    Find all event types in the provided events.

    Returns:
        Tuple of event types in order of first occurrence, without duplicates
    """
    return tuple(dict.fromkeys(e.get_event_type() for e in events))


@dataclass(frozen=True, eq=False)
class Scenario:
    """
    Immutable list of events sorted by time stamp.

    Obtain instances through Scenario.builder(). Two scenarios are equal when
    all their fields are equal; event types and model builders are compared
    as sets, events as an ordered sequence.
    """
    events: Tuple[TimedEvent, ...]
    possible_event_types: Tuple[Enum, ...]
    model_builders: Tuple[ModelBuilder, ...]
    time_window: TimeWindow
    stop_condition: StopCondition
    problem_class: ProblemClass
    problem_instance_id: str

    def __post_init__(self):
        for earlier, later in zip(self.events, self.events[1:]):
            if time_key(later) < time_key(earlier):
                raise ValueError(
                    f"Scenario events must be sorted by time, got {earlier} before {later}"
                )
        missing = [t for t in collect_event_types(self.events) if t not in self.possible_event_types]
        if missing:
            raise ValueError(f"Event types {missing} occur in events but are not possible event types")

    @classmethod
    def _create(
        cls,
        events: Iterable[TimedEvent],
        types: Iterable[Enum],
        model_builders: Iterable[ModelBuilder],
        time_window: TimeWindow,
        stop_condition: StopCondition,
        problem_class: ProblemClass,
        instance_id: str
    ) -> 'Scenario':
        return cls(
            events=tuple(events),
            possible_event_types=tuple(dict.fromkeys(types)),
            model_builders=tuple(dict.fromkeys(model_builders)),
            time_window=time_window,
            stop_condition=stop_condition,
            problem_class=problem_class,
            problem_instance_id=instance_id,
        )

    # -------------------------------------------------------------------------
    # Builder entry points
    # -------------------------------------------------------------------------

    @staticmethod
    def builder(
        source: Any = None,
        problem_class: Optional[ProblemClass] = None
    ) -> 'Builder':
        """
        Create a Builder.

        Args:
            source: One of
                - None: a fresh builder
                - a ProblemClass: a fresh builder with that problem class
                - a Scenario: a copying builder with all properties of the
                  scenario
                - an AbstractBuilder: a builder with the time window and stop
                  condition of that builder
            problem_class: Problem class for a fresh or builder-based builder
                (defaults to DEFAULT_PROBLEM_CLASS)

        Returns:
            New Builder
        """
        if isinstance(source, Scenario):
            if problem_class is not None:
                raise TypeError("A copying builder takes its problem class from the scenario")
            return Builder(problem_class=source.get_problem_class()).copy_properties(source)
        if isinstance(source, ProblemClass):
            if problem_class is not None:
                raise TypeError("Problem class given twice")
            return Builder(problem_class=source)

        pc = problem_class if problem_class is not None else DEFAULT_PROBLEM_CLASS
        if source is None:
            return Builder(problem_class=pc)
        if isinstance(source, AbstractBuilder):
            return Builder(base=source, problem_class=pc)
        raise TypeError(f"Cannot create a builder from {type(source).__name__}")

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_events(self) -> Tuple[TimedEvent, ...]:
        """The events of this scenario, sorted by time."""
        return self.events

    def as_queue(self) -> Deque[TimedEvent]:
        """A new queue containing all events. Each call returns a fresh copy."""
        return deque(self.events)

    def size(self) -> int:
        """Number of events in this scenario."""
        return len(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def get_possible_event_types(self) -> Tuple[Enum, ...]:
        """Event types that can occur in this scenario."""
        return self.possible_event_types

    def get_model_builders(self) -> Tuple[ModelBuilder, ...]:
        """Model builders used for creating the models of this scenario."""
        return self.model_builders

    def get_time_window(self) -> TimeWindow:
        return self.time_window

    def get_stop_condition(self) -> StopCondition:
        return self.stop_condition

    def get_problem_class(self) -> ProblemClass:
        return self.problem_class

    def get_problem_instance_id(self) -> str:
        return self.problem_instance_id

    # -------------------------------------------------------------------------
    # Analysis views
    # -------------------------------------------------------------------------

    def event_times(self) -> np.ndarray:
        """Event times in scenario order."""
        return np.array([e.get_time() for e in self.events], dtype=np.float64)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert events to a DataFrame with one row per event."""
        if not self.events:
            return pd.DataFrame(columns=["event_type", "time"])

        records = []
        for event in self.events:
            records.append({
                "event_type": event.get_event_type().name,
                "time": event.get_time(),
            })
        return pd.DataFrame(records)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Scenario):
            return NotImplemented
        return (
            self.events == other.events
            and frozenset(self.possible_event_types) == frozenset(other.possible_event_types)
            and frozenset(self.model_builders) == frozenset(other.model_builders)
            and self.time_window == other.time_window
            and self.stop_condition == other.stop_condition
            and self.problem_class == other.problem_class
            and self.problem_instance_id == other.problem_instance_id
        )

    def __hash__(self) -> int:
        return hash((
            self.events,
            frozenset(self.possible_event_types),
            frozenset(self.model_builders),
            self.time_window,
            self.stop_condition,
            self.problem_class,
            self.problem_instance_id,
        ))


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------

class AbstractBuilder:
    """
    Base builder holding the settings that bound a simulation run.

    Every mutator returns self, so chained calls on a subclass keep the
    subclass type.
    """

    def __init__(self, copy: Optional['AbstractBuilder'] = None):
        """
        Args:
            copy: Existing builder to copy the time window and stop condition
                from. Defaults are used when None.
        """
        if copy is not None:
            self.time_window: TimeWindow = copy.time_window
            self.stop_condition: StopCondition = copy.stop_condition
        else:
            self.time_window = DEFAULT_TIME_WINDOW
            self.stop_condition = DEFAULT_STOP_CONDITION

    def scenario_length(self, length: Number) -> 'AbstractBuilder':
        """
        Set the length of the scenario: the time window becomes [0, length).

        The moment the simulation actually stops is decided by the stop
        condition, see add_stop_condition().
        """
        self.time_window = TimeWindow(0, length)
        return self

    def add_stop_condition(self, condition: StopCondition) -> 'AbstractBuilder':
        """Set the stop condition, replacing the current one."""
        self.stop_condition = condition
        return self

    def copy_properties(self, scenario: Scenario) -> 'AbstractBuilder':
        """Copy the time window and stop condition of scenario."""
        self.time_window = scenario.get_time_window()
        self.stop_condition = scenario.get_stop_condition()
        return self

    def get_time_window(self) -> TimeWindow:
        return self.time_window

    def get_stop_condition(self) -> StopCondition:
        return self.stop_condition


class Builder(AbstractBuilder):
    """
    Mutable accumulator for Scenario instances.

    Not thread safe: a builder must be confined to one thread or guarded by
    the caller.
    """

    def __init__(
        self,
        base: Optional[AbstractBuilder] = None,
        problem_class: ProblemClass = DEFAULT_PROBLEM_CLASS
    ):
        super().__init__(base)
        self._problem_class = problem_class
        self._instance_id = ""
        self._events: List[TimedEvent] = []
        # dict keys as an insertion ordered set
        self._event_types: Dict[Enum, None] = {}
        self._models: List[ModelBuilder] = []

    # -------------------------------------------------------------------------
    # Accumulation
    # -------------------------------------------------------------------------

    def add_event(self, event: TimedEvent) -> 'Builder':
        self._events.append(event)
        return self

    def add_events(self, events: Iterable[TimedEvent]) -> 'Builder':
        for event in events:
            self.add_event(event)
        return self

    def add_event_type(self, event_type: Enum) -> 'Builder':
        self._event_types[event_type] = None
        return self

    def add_event_types(self, event_types: Iterable[Enum]) -> 'Builder':
        for event_type in event_types:
            self.add_event_type(event_type)
        return self

    def instance_id(self, instance_id: str) -> 'Builder':
        """Instance id for the scenarios built next."""
        self._instance_id = instance_id
        return self

    def problem_class(self, problem_class: ProblemClass) -> 'Builder':
        """Problem class for the scenarios built next."""
        self._problem_class = problem_class
        return self

    def add_model(self, model_builder: ModelBuilder) -> 'Builder':
        """Add a model builder. Duplicates are dropped on build()."""
        self._models.append(model_builder)
        return self

    def add_models(self, model_builders: Iterable[ModelBuilder]) -> 'Builder':
        self._models.extend(model_builders)
        return self

    def copy_properties(self, scenario: Scenario) -> 'Builder':
        """
        Copy all properties of scenario into this builder.

        Time window, stop condition, problem class and instance id are
        overwritten. Events, event types and model builders are added to the
        ones already present.
        """
        super().copy_properties(scenario)
        return (
            self.add_events(scenario.get_events())
            .add_event_types(scenario.get_possible_event_types())
            .problem_class(scenario.get_problem_class())
            .instance_id(scenario.get_problem_instance_id())
            .add_models(scenario.get_model_builders())
        )

    # -------------------------------------------------------------------------
    # Event list editing
    # -------------------------------------------------------------------------

    def filter_events(self, predicate: Callable[[TimedEvent], bool]) -> 'Builder':
        """Remove all events that do not satisfy predicate."""
        self._events[:] = [e for e in self._events if predicate(e)]
        return self

    def ensure_frequency(
        self,
        predicate: Callable[[TimedEvent], bool],
        frequency: int
    ) -> 'Builder':
        """
        Limit or grow the events matching predicate to exactly frequency.

        Preconditions (checked before anything is changed):
        - frequency >= 0
        - the builder holds at least one event
        - predicate matches at least one event
        - all matching events are equal

        When there are too many matches the first frequency matches are kept
        in place and the rest removed. When there are too few, copies of the
        matching event are appended. Non-matching events are never touched.

        Raises:
            InvalidFrequencyError: frequency is negative
            EventListStateError: one of the other preconditions does not hold
        """
        if frequency < 0:
            raise InvalidFrequencyError(f"Frequency must be >= 0, got {frequency}")
        if not self._events:
            raise EventListStateError("Event list is empty.")

        matches = [i for i, e in enumerate(self._events) if predicate(e)]
        if not matches:
            raise EventListStateError(
                f"The predicate did not match any event in the event list "
                f"(size {len(self._events)}), predicate: {predicate!r}."
            )
        value = self._events[matches[0]]
        if any(self._events[i] != value for i in matches):
            distinct: List[TimedEvent] = []
            for i in matches:
                if self._events[i] not in distinct:
                    distinct.append(self._events[i])
            raise EventListStateError(
                f"The predicate matches multiple non-equal events, all matches "
                f"must be equal. Events: {distinct}. Predicate: {predicate!r}."
            )

        count = len(matches)
        if count > frequency:
            dropped = set(matches[frequency:])
            self._events[:] = [e for i, e in enumerate(self._events) if i not in dropped]
            logger.debug("ensure_frequency: limited {} matches of {} to {}", count, value, frequency)
        elif count < frequency:
            self._events.extend([value] * (frequency - count))
            logger.debug("ensure_frequency: grew {} matches of {} to {}", count, value, frequency)
        return self

    def clear_events(self) -> 'Builder':
        """Remove all events. Event types and model builders are kept."""
        self._events.clear()
        return self

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def get_events(self) -> Tuple[TimedEvent, ...]:
        """Events in insertion order (unsorted)."""
        return tuple(self._events)

    def get_event_types(self) -> Tuple[Enum, ...]:
        return tuple(self._event_types)

    def get_models(self) -> Tuple[ModelBuilder, ...]:
        return tuple(self._models)

    def get_problem_class(self) -> ProblemClass:
        return self._problem_class

    def get_instance_id(self) -> str:
        return self._instance_id

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def build(self) -> Scenario:
        """Build a new Scenario from the current state of this builder."""
        events = sorted(self._events, key=time_key)
        for event_type in collect_event_types(events):
            self._event_types[event_type] = None

        scenario = Scenario._create(
            events,
            self._event_types,
            self._models,
            self.time_window,
            self.stop_condition,
            self._problem_class,
            self._instance_id,
        )
        logger.debug(
            "Built scenario '{}' ({}): {} events, {} event types, {} model builders",
            self._instance_id,
            self._problem_class,
            scenario.size(),
            len(scenario.possible_event_types),
            len(scenario.model_builders),
        )
        return scenario
