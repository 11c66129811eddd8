"""
cargoship - Container loading and ship capacity rules

Liquid, gas and cooled containers with their own load limits, and a ship
that enforces container-count and weight limits as containers come aboard.
"""

from .containers import (
    ContainerKind,
    ContainerPolicy,
    ContainerIdSequence,
    Container,
    ContainerFactory,
    LiquidCargo,
    GasCargo,
    CooledCargo,
    HazardNotifier,
    LoggingHazardNotifier,
    RecordingHazardNotifier,
)

from .ship import ContainerShip, ShipReport, format_ship_report

from .errors import (
    OperationResult,
    CargoShipError,
    OverfillError,
    InvalidAmountError,
    HazardNotSupportedError,
    ContainerParameterError,
    CapacityExceededError,
    WeightExceededError,
    ShipParameterError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "ContainerKind",
    "ContainerPolicy",
    "ContainerIdSequence",
    "Container",
    "ContainerFactory",
    "LiquidCargo",
    "GasCargo",
    "CooledCargo",
    "HazardNotifier",
    "LoggingHazardNotifier",
    "RecordingHazardNotifier",
    "ContainerShip",
    "ShipReport",
    "format_ship_report",
    "OperationResult",
    "CargoShipError",
    "OverfillError",
    "InvalidAmountError",
    "HazardNotSupportedError",
    "ContainerParameterError",
    "CapacityExceededError",
    "WeightExceededError",
    "ShipParameterError",
    "ConfigurationError",
]
