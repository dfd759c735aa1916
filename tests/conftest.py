import pytest
from loguru import logger

from simscenario import Scenario, SimpleProblemClass, StopConditions

from helpers import DemoModelBuilder, depot, parcel, vehicle


@pytest.fixture(autouse=True)
def silence_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def log_messages():
    """Collect simscenario debug output for the duration of a test."""
    messages = []
    logger.enable("simscenario")
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("simscenario")


@pytest.fixture
def populated_builder():
    """Builder with every property set to a non-default value."""
    return (
        Scenario.builder(SimpleProblemClass("vrp"))
        .add_events([parcel(50, "p1"), depot(10), vehicle(30)])
        .instance_id("instance-7")
        .add_model(DemoModelBuilder("road"))
        .add_model(DemoModelBuilder("pdp"))
        .scenario_length(1000)
        .add_stop_condition(StopConditions.limited_time(900))
    )
