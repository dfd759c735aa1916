"""Event types and model builders shared by the test modules."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from simscenario import ModelBuilder, TimedEvent


class DemoEventType(Enum):
    ADD_DEPOT = "ADD_DEPOT"
    ADD_VEHICLE = "ADD_VEHICLE"
    ADD_PARCEL = "ADD_PARCEL"


@dataclass(frozen=True)
class ParcelEvent(TimedEvent):
    """Event carrying a payload, to check structural equality on subclasses."""
    parcel_id: str = ""


@dataclass(frozen=True)
class DemoModelBuilder(ModelBuilder):
    name: str

    def build(self, context: Any) -> Any:
        return (self.name, context)


def depot(time):
    return TimedEvent(DemoEventType.ADD_DEPOT, time)


def vehicle(time):
    return TimedEvent(DemoEventType.ADD_VEHICLE, time)


def parcel(time, parcel_id=""):
    return ParcelEvent(DemoEventType.ADD_PARCEL, time, parcel_id)


@dataclass(frozen=True)
class ListPayloadEvent(TimedEvent):
    """Event with an unhashable payload; equality is still structural."""
    stops: list = None
