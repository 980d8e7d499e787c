"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""

import random

import pytest

from zkalgebra import config
from zkalgebra.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture(autouse=True)
def defaultConfig():
    """
    Run every test with the default tunables instead of whatever
    configuration file the machine has.
    """
    config.set(config.AlgebraConfig())
    yield
    config.set(None)
