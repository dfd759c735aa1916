"""
simscenario - Scenario description model for discrete-event simulation.

A Scenario is an immutable, time sorted list of events together with the
time window, stop condition, model builders and problem identity needed to
configure a simulation run. Scenarios are made with Scenario.builder().

Log output is disabled by default; enable it with
``loguru.logger.enable("simscenario")``.
"""

from loguru import logger

from .problem_class import (
    ProblemClass,
    SimpleProblemClass,
)

from .time_window import TimeWindow

from .events import (
    ScenarioEventType,
    TimedEvent,
    time_key,
    make_time_out_event,
    has_type,
    is_equal_to,
    in_time_window,
)

from .stop_conditions import (
    StopCondition,
    StopConditions,
)

from .models import ModelBuilder

from .errors import (
    ScenarioError,
    InvalidFrequencyError,
    EventListStateError,
)

from .scenario import (
    DEFAULT_PROBLEM_CLASS,
    DEFAULT_SCENARIO_LENGTH,
    DEFAULT_TIME_WINDOW,
    DEFAULT_STOP_CONDITION,
    Scenario,
    AbstractBuilder,
    Builder,
    collect_event_types,
)

logger.disable(__name__)

__all__ = [
    # Problem classes
    "ProblemClass",
    "SimpleProblemClass",
    # Time
    "TimeWindow",
    # Events
    "ScenarioEventType",
    "TimedEvent",
    "time_key",
    "make_time_out_event",
    "has_type",
    "is_equal_to",
    "in_time_window",
    # Stop conditions
    "StopCondition",
    "StopConditions",
    # Models
    "ModelBuilder",
    # Errors
    "ScenarioError",
    "InvalidFrequencyError",
    "EventListStateError",
    # Scenario
    "DEFAULT_PROBLEM_CLASS",
    "DEFAULT_SCENARIO_LENGTH",
    "DEFAULT_TIME_WINDOW",
    "DEFAULT_STOP_CONDITION",
    "Scenario",
    "AbstractBuilder",
    "Builder",
    "collect_event_types",
]
