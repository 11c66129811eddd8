"""
errors/taxonomy.py - Cargo error taxonomy

Structured error types for container and ship operations. Each error carries
a stable code, a category, a severity and a recovery hint so callers can
branch on it without parsing messages.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# ERROR CATEGORIES AND SEVERITY
# =============================================================================

class ErrorCategory(Enum):
    """Categories of cargo errors."""
    CONTAINER = "container"        # Container load/empty rules
    HAZARD = "hazard"              # Hazard notification capability
    SHIP = "ship"                  # Ship roster limits
    PARAMETER = "parameter"        # Invalid construction parameters
    CONFIGURATION = "configuration"


class ErrorSeverity(Enum):
    """Severity levels for cargo errors."""
    ERROR = "error"       # Operation rejected
    WARNING = "warning"   # Operation rejected, caller misuse


# =============================================================================
# BASE ERROR CLASS
# =============================================================================

class CargoShipError(Exception):
    """
    Base class for cargo errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint for the caller
    - Detailed context for debugging
    """

    code: str = "CGO_000"
    category: ErrorCategory = ErrorCategory.CONTAINER
    severity: ErrorSeverity = ErrorSeverity.ERROR
    recoverable: bool = True

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "Cargo error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "recoverable": self.recoverable,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


# =============================================================================
# CONTAINER ERRORS
# =============================================================================

class OverfillError(CargoShipError):
    """Requested load exceeds the container's effective capacity."""

    code = "CGO_101"
    category = ErrorCategory.CONTAINER

    def __init__(
        self,
        container_id: str,
        requested: float,
        current_load: float,
        effective_limit: float,
        **kwargs,
    ):
        message = (
            f"Overfill on {container_id}: {current_load} + {requested} "
            f"exceeds limit {effective_limit}"
        )
        super().__init__(
            message=message,
            recovery_hint="Load a smaller amount or empty the container first.",
            container_id=container_id,
            requested=requested,
            current_load=current_load,
            effective_limit=effective_limit,
            **kwargs,
        )
        self.container_id = container_id


class InvalidAmountError(CargoShipError):
    """Load amount must be a positive finite number."""

    code = "CGO_102"
    category = ErrorCategory.CONTAINER
    severity = ErrorSeverity.WARNING

    def __init__(self, container_id: str, amount: Any, **kwargs):
        super().__init__(
            message=f"Invalid load amount {amount!r} for {container_id}",
            recovery_hint="Pass a positive amount.",
            container_id=container_id,
            amount=amount,
            **kwargs,
        )
        self.container_id = container_id


class HazardNotSupportedError(CargoShipError):
    """Container kind has no hazard notification capability."""

    code = "CGO_103"
    category = ErrorCategory.HAZARD
    severity = ErrorSeverity.WARNING

    def __init__(self, container_id: str, kind: str, **kwargs):
        super().__init__(
            message=f"{kind} container {container_id} does not emit hazard notices",
            container_id=container_id,
            kind=kind,
            **kwargs,
        )
        self.container_id = container_id


class ContainerParameterError(CargoShipError, ValueError):
    """Invalid container construction parameter."""

    code = "CGO_104"
    category = ErrorCategory.PARAMETER
    recoverable = False

    def __init__(self, param: str, value: Any, constraint: str, **kwargs):
        super().__init__(
            message=f"Container parameter '{param}'={value!r} must be {constraint}",
            recovery_hint=f"Pass a {param} that is {constraint}.",
            param=param,
            value=value,
            **kwargs,
        )


# =============================================================================
# SHIP ERRORS
# =============================================================================

class CapacityExceededError(CargoShipError):
    """Ship already holds its maximum number of containers."""

    code = "SHP_201"
    category = ErrorCategory.SHIP

    def __init__(self, ship_name: str, max_containers: int, container_id: str = "", **kwargs):
        super().__init__(
            message=f"Ship '{ship_name}' is full ({max_containers} containers)",
            recovery_hint="Remove a container before adding another.",
            ship_name=ship_name,
            max_containers=max_containers,
            container_id=container_id,
            **kwargs,
        )


class WeightExceededError(CargoShipError):
    """Adding the container would exceed the ship's weight limit."""

    code = "SHP_202"
    category = ErrorCategory.SHIP

    def __init__(
        self,
        ship_name: str,
        projected_weight: float,
        max_weight: float,
        container_id: str = "",
        **kwargs,
    ):
        super().__init__(
            message=(
                f"Ship '{ship_name}' would weigh {projected_weight} "
                f"(max {max_weight}) with {container_id or 'container'}"
            ),
            recovery_hint="Empty the container or remove other cargo first.",
            ship_name=ship_name,
            projected_weight=projected_weight,
            max_weight=max_weight,
            container_id=container_id,
            **kwargs,
        )


class ShipParameterError(CargoShipError, ValueError):
    """Invalid ship construction parameter."""

    code = "SHP_203"
    category = ErrorCategory.PARAMETER
    recoverable = False

    def __init__(self, param: str, value: Any, constraint: str, **kwargs):
        super().__init__(
            message=f"Ship parameter '{param}'={value!r} must be {constraint}",
            param=param,
            value=value,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(CargoShipError, ValueError):
    """Invalid configuration value."""

    code = "CFG_301"
    category = ErrorCategory.CONFIGURATION
    recoverable = False

    def __init__(self, key: str, value: Any, reason: str, **kwargs):
        super().__init__(
            message=f"Invalid configuration {key}={value!r}: {reason}",
            key=key,
            value=value,
            **kwargs,
        )
