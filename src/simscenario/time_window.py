"""
Time window: the active span of a scenario, [begin, end).
"""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class TimeWindow:
    """
    Half-open interval of simulation time.

    Attributes:
        begin: First time inside the window (>= 0)
        end: First time after the window (>= begin)
    """
    begin: Number
    end: Number

    def __post_init__(self):
        if self.begin < 0:
            raise ValueError(f"Time window begin must be >= 0, got {self.begin}")
        if self.begin > self.end:
            raise ValueError(
                f"Time window begin must be <= end, got [{self.begin}, {self.end})"
            )

    @classmethod
    def create(cls, begin: Number, end: Number) -> 'TimeWindow':
        return cls(begin, end)

    @classmethod
    def always(cls) -> 'TimeWindow':
        """Window that spans all non-negative time."""
        return cls(0, float('inf'))

    @property
    def length(self) -> Number:
        return self.end - self.begin

    def is_in(self, time: Number) -> bool:
        """True if begin <= time < end."""
        return self.is_after_start(time) and self.is_before_end(time)

    def is_after_start(self, time: Number) -> bool:
        return time >= self.begin

    def is_before_end(self, time: Number) -> bool:
        return time < self.end

    def is_before_start(self, time: Number) -> bool:
        return time < self.begin

    def is_after_end(self, time: Number) -> bool:
        return time >= self.end

    def __str__(self) -> str:
        return f"TimeWindow[{self.begin}, {self.end})"
