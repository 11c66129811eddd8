"""
errors/ - Error Taxonomy & Operation Results

Structured error classification for container and ship operations, and the
result type those operations return.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorSeverity,
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

from .results import OperationResult

__all__ = [
    # Taxonomy
    "ErrorCategory",
    "ErrorSeverity",
    "CargoShipError",
    "OverfillError",
    "InvalidAmountError",
    "HazardNotSupportedError",
    "ContainerParameterError",
    "CapacityExceededError",
    "WeightExceededError",
    "ShipParameterError",
    "ConfigurationError",
    # Results
    "OperationResult",
]
