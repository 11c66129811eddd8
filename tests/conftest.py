"""
cargoship Test Configuration and Fixtures

Every test gets its own ContainerFactory, so container ids start at 1.
"""

import pytest

from cargoship.containers import ContainerFactory, RecordingHazardNotifier
from cargoship.ship import ContainerShip


@pytest.fixture
def hazard_recorder():
    """Notifier that keeps hazard notices in memory."""
    return RecordingHazardNotifier()


@pytest.fixture
def factory(hazard_recorder):
    """Factory with a fresh id sequence and a recording notifier."""
    return ContainerFactory(notifier=hazard_recorder)


@pytest.fixture
def ocean_carrier():
    """The reference ship: 5 containers, 50 t."""
    return ContainerShip("Ocean Carrier", max_speed=20, max_containers=5, max_weight=50000)
