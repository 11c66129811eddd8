"""
containers/models.py - Container variants and load rules

A Container is a single class whose variant behaviour comes from its cargo
profile (LiquidCargo, GasCargo or CooledCargo). The profile supplies the
fraction of max capacity that may be filled, the fraction of load left
behind on emptying, and whether the variant can raise hazard notices.

All loads and weights are in kilograms.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Union
import logging
import math

from .enums import ContainerKind
from .hazards import HazardNotifier, LoggingHazardNotifier
from .policy import ContainerPolicy, DEFAULT_POLICY
from ..errors import (
    OperationResult,
    OverfillError,
    InvalidAmountError,
    HazardNotSupportedError,
    ContainerParameterError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CARGO PROFILES
# =============================================================================

@dataclass(frozen=True)
class LiquidCargo:
    """Liquid cargo; dangerous liquids may only fill half the container."""
    is_dangerous: bool = False

    kind: ClassVar[ContainerKind] = ContainerKind.LIQUID
    hazard_capable: ClassVar[bool] = True

    def limit_ratio(self, policy: ContainerPolicy) -> float:
        if self.is_dangerous:
            return policy.dangerous_liquid_ratio
        return policy.safe_liquid_ratio

    def residue_fraction(self, policy: ContainerPolicy) -> float:
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"is_dangerous": self.is_dangerous}


@dataclass(frozen=True)
class GasCargo:
    """Pressurised gas; emptying leaves a residue behind."""
    pressure: float = 0.0  # bar

    kind: ClassVar[ContainerKind] = ContainerKind.GAS
    hazard_capable: ClassVar[bool] = True

    def limit_ratio(self, policy: ContainerPolicy) -> float:
        return 1.0

    def residue_fraction(self, policy: ContainerPolicy) -> float:
        return policy.gas_residue_fraction

    def to_dict(self) -> Dict[str, Any]:
        return {"pressure": self.pressure}


@dataclass(frozen=True)
class CooledCargo:
    """Refrigerated cargo held at a set temperature."""
    temperature: float = 0.0  # °C

    kind: ClassVar[ContainerKind] = ContainerKind.COOLED
    hazard_capable: ClassVar[bool] = False

    def limit_ratio(self, policy: ContainerPolicy) -> float:
        return 1.0

    def residue_fraction(self, policy: ContainerPolicy) -> float:
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"temperature": self.temperature}


CargoProfile = Union[LiquidCargo, GasCargo, CooledCargo]


def validate_dimensions(max_capacity: float, empty_weight: float) -> None:
    """Raise ContainerParameterError unless capacity > 0 and tare >= 0."""
    if not _is_number(max_capacity) or not math.isfinite(max_capacity) or max_capacity <= 0:
        raise ContainerParameterError("max_capacity", max_capacity, "a positive number")
    if not _is_number(empty_weight) or not math.isfinite(empty_weight) or empty_weight < 0:
        raise ContainerParameterError("empty_weight", empty_weight, "a non-negative number")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# CONTAINER
# =============================================================================

class Container:
    """
    Cargo container.

    The id, max capacity and empty weight are fixed at construction.
    current_load only changes through load() and empty(), and never leaves
    the range [0, effective_limit].
    """

    def __init__(
        self,
        container_id: str,
        max_capacity: float,
        empty_weight: float,
        cargo: CargoProfile,
        policy: ContainerPolicy = DEFAULT_POLICY,
        notifier: Optional[HazardNotifier] = None,
    ):
        validate_dimensions(max_capacity, empty_weight)
        self._container_id = container_id
        self._max_capacity = float(max_capacity)
        self._empty_weight = float(empty_weight)
        self._current_load = 0.0
        self.cargo = cargo
        self.policy = policy
        self.notifier = notifier or LoggingHazardNotifier()

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def container_id(self) -> str:
        return self._container_id

    @property
    def max_capacity(self) -> float:
        return self._max_capacity

    @property
    def empty_weight(self) -> float:
        return self._empty_weight

    @property
    def current_load(self) -> float:
        return self._current_load

    @property
    def kind(self) -> ContainerKind:
        return self.cargo.kind

    @property
    def supports_hazard_notification(self) -> bool:
        return self.cargo.hazard_capable

    @property
    def effective_limit(self) -> float:
        """Maximum load this container accepts."""
        return self._max_capacity * self.cargo.limit_ratio(self.policy)

    @property
    def remaining_capacity(self) -> float:
        return max(0.0, self.effective_limit - self._current_load)

    @property
    def fill_ratio(self) -> float:
        """Current load as a fraction of max capacity."""
        return self._current_load / self._max_capacity

    @property
    def total_weight(self) -> float:
        """Empty weight plus current load."""
        return self._empty_weight + self._current_load

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def load(self, amount: float) -> OperationResult:
        """
        Add cargo.

        Fails with InvalidAmountError for a non-positive amount and with
        OverfillError when the result would pass the effective limit. State
        is unchanged on failure.
        """
        if not _is_number(amount) or not math.isfinite(amount) or amount <= 0:
            error = InvalidAmountError(self._container_id, amount)
            logger.warning(f"Rejected load on {self._container_id}: {error.message}")
            return OperationResult.fail(error)

        limit = self.effective_limit
        projected = self._current_load + amount
        if projected > limit:
            error = OverfillError(
                container_id=self._container_id,
                requested=amount,
                current_load=self._current_load,
                effective_limit=limit,
            )
            logger.warning(f"Rejected load on {self._container_id}: {error.message}")
            return OperationResult.fail(error)

        self._current_load = projected
        logger.info(
            f"Loaded {amount} kg into {self._container_id} ({self.kind.label}): "
            f"{self._current_load}/{self._max_capacity} kg"
        )
        return OperationResult.ok(
            message=f"Loaded {self.kind.label} container {self._container_id}",
            data=self._current_load,
        )

    def empty(self) -> OperationResult:
        """Unload cargo. Gas containers keep a residue; the rest go to zero."""
        previous = self._current_load
        self._current_load = previous * self.cargo.residue_fraction(self.policy)
        logger.info(
            f"Emptied {self._container_id} ({self.kind.label}): "
            f"{previous} -> {self._current_load} kg"
        )
        return OperationResult.ok(
            message=f"Emptied {self.kind.label} container {self._container_id}",
            data=self._current_load,
        )

    def notify_hazard(self) -> OperationResult:
        """Send a hazard notice for this container, if its kind supports it."""
        if not self.supports_hazard_notification:
            error = HazardNotSupportedError(self._container_id, self.kind.label)
            logger.debug(error.message)
            return OperationResult.fail(error)

        self.notifier.notify_hazard(self._container_id, self.kind)
        return OperationResult.ok(message=f"Hazard notice sent for {self._container_id}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize container."""
        return {
            "container_id": self._container_id,
            "kind": self.kind.value,
            "max_capacity": self._max_capacity,
            "empty_weight": self._empty_weight,
            "current_load": self._current_load,
            "effective_limit": self.effective_limit,
            "cargo": self.cargo.to_dict(),
        }

    def __repr__(self) -> str:
        return (
            f"Container({self._container_id!r}, kind={self.kind.value}, "
            f"load={self._current_load}/{self._max_capacity})"
        )
