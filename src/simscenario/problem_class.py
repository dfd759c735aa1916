"""
Problem classes: named categories that scenarios belong to.

Scenarios of the same problem class are instances of the same kind of
problem and can be grouped or compared on that basis.
"""

from abc import ABC, abstractmethod
from typing import Any


class ProblemClass(ABC):
    """Represents a class of scenarios."""

    @abstractmethod
    def get_id(self) -> str:
        """The id of this problem class."""
        pass


class SimpleProblemClass(ProblemClass):
    """
    String based implementation of ProblemClass.

    Two instances are equal only if they are of the exact same class and
    carry the same id. A different ProblemClass implementation (or a subclass)
    reporting the same id is never equal to a SimpleProblemClass.
    """

    __slots__ = ('_id',)

    def __init__(self, name: str):
        self._id = name

    def get_id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"SimpleProblemClass({self._id})"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: Any) -> bool:
        if other is None or type(self) is not type(other):
            return False
        return self._id == other._id
