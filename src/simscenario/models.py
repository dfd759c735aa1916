"""
Model builders: factories for the runtime components of a simulation.

A scenario lists the model builders its simulation needs. The scenario
layer stores them and hands them to the engine untouched; only the engine
calls build().
"""

from abc import ABC, abstractmethod
from typing import Any


class ModelBuilder(ABC):
    """
    Abstract factory for a simulation model.

    Scenarios keep model builders in a duplicate-free collection, so
    implementations must be hashable and should define value equality
    (frozen dataclasses are a good fit).
    """

    @abstractmethod
    def build(self, context: Any) -> Any:
        """Create the model. context is supplied by the simulation engine."""
        pass
