import json
import pathlib

import pytest

from careflow.parameters import get_default_parameters
from careflow.runner import SimulationConfig

FIXTURES = pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def params():
    return get_default_parameters()


@pytest.fixture
def config():
    return SimulationConfig(population=100_000, num_weeks=26)


@pytest.fixture
def default_scenario():
    with open(FIXTURES / "default_scenario.json") as fh:
        return json.load(fh)
