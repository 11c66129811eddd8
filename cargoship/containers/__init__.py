"""
containers/ - Container variants, ids and hazard notices

Liquid, gas and cooled containers with their load limits and emptying
rules, built through a ContainerFactory that owns the id sequence.
"""

from .enums import ContainerKind, CONTAINER_TYPE_CODES

from .policy import ContainerPolicy, DEFAULT_POLICY

from .ids import ContainerIdSequence

from .hazards import (
    HazardNotifier,
    HazardNotice,
    LoggingHazardNotifier,
    RecordingHazardNotifier,
)

from .models import (
    CargoProfile,
    Container,
    CooledCargo,
    GasCargo,
    LiquidCargo,
)

from .factory import ContainerFactory

__all__ = [
    # Enumerations
    "ContainerKind",
    "CONTAINER_TYPE_CODES",
    # Policy
    "ContainerPolicy",
    "DEFAULT_POLICY",
    # Ids
    "ContainerIdSequence",
    # Hazards
    "HazardNotifier",
    "HazardNotice",
    "LoggingHazardNotifier",
    "RecordingHazardNotifier",
    # Models
    "CargoProfile",
    "Container",
    "CooledCargo",
    "GasCargo",
    "LiquidCargo",
    # Factory
    "ContainerFactory",
]
