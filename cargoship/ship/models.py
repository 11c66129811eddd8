"""
ship/models.py - Container ship roster

The ship holds references to the containers added to it, in insertion
order. Count and weight limits are enforced when a container is added;
loading a container that is already on board is not re-checked, so
is_overweight can become true afterwards.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TextIO, Tuple
import logging
import math
import sys

from ..containers import Container
from ..errors import (
    OperationResult,
    CapacityExceededError,
    WeightExceededError,
    ShipParameterError,
)
from .report import ShipReport, format_ship_report

logger = logging.getLogger(__name__)


def _is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class ContainerShip:
    """
    Ship with a bounded container roster.

    Args:
        name: Ship name
        max_speed: Maximum speed in knots
        max_containers: Maximum number of containers on board
        max_weight: Maximum roster weight in kg (tare + cargo)
    """

    def __init__(self, name: str, max_speed: float, max_containers: int, max_weight: float):
        if isinstance(max_containers, bool) or not isinstance(max_containers, int) or max_containers < 0:
            raise ShipParameterError("max_containers", max_containers, "a non-negative integer")
        if not _is_finite_number(max_weight) or max_weight <= 0:
            raise ShipParameterError("max_weight", max_weight, "a positive number")
        if not _is_finite_number(max_speed) or max_speed < 0:
            raise ShipParameterError("max_speed", max_speed, "a non-negative number")

        self.name = name
        self.max_speed = float(max_speed)
        self.max_containers = max_containers
        self.max_weight = float(max_weight)
        self._containers: List[Container] = []

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def containers(self) -> Tuple[Container, ...]:
        """Roster in insertion order."""
        return tuple(self._containers)

    @property
    def container_count(self) -> int:
        return len(self._containers)

    @property
    def remaining_slots(self) -> int:
        return max(0, self.max_containers - len(self._containers))

    @property
    def remaining_weight(self) -> float:
        return max(0.0, self.max_weight - self.total_weight())

    @property
    def is_overweight(self) -> bool:
        """True when cargo loaded after insertion pushed the roster past max_weight."""
        return self.total_weight() > self.max_weight

    def total_weight(self) -> float:
        """Sum of empty weight plus current load over the roster."""
        return sum(c.empty_weight + c.current_load for c in self._containers)

    def get_container(self, container_id: str) -> Optional[Container]:
        for container in self._containers:
            if container.container_id == container_id:
                return container
        return None

    def __contains__(self, container_id: str) -> bool:
        return self.get_container(container_id) is not None

    def __len__(self) -> int:
        return len(self._containers)

    # -------------------------------------------------------------------------
    # Roster changes
    # -------------------------------------------------------------------------

    def add_container(self, container: Container) -> OperationResult:
        """
        Put a container on board.

        Fails with CapacityExceededError when the roster is full, then with
        WeightExceededError when the container would take the roster past
        max_weight. The roster is unchanged on failure.
        """
        if len(self._containers) >= self.max_containers:
            error = CapacityExceededError(
                ship_name=self.name,
                max_containers=self.max_containers,
                container_id=container.container_id,
            )
            logger.warning(error.message)
            return OperationResult.fail(error)

        projected = self.total_weight() + container.empty_weight + container.current_load
        if projected > self.max_weight:
            error = WeightExceededError(
                ship_name=self.name,
                projected_weight=projected,
                max_weight=self.max_weight,
                container_id=container.container_id,
            )
            logger.warning(error.message)
            return OperationResult.fail(error)

        self._containers.append(container)
        logger.info(
            f"Added {container.container_id} to {self.name} "
            f"({len(self._containers)}/{self.max_containers}, {projected:g}/{self.max_weight:g} kg)"
        )
        return OperationResult.ok(
            message=f"Added {container.container_id} to {self.name}",
            data=len(self._containers),
        )

    def remove_container(self, container_id: str) -> OperationResult:
        """Remove every roster entry with this id. An absent id is a no-op."""
        before = len(self._containers)
        self._containers = [c for c in self._containers if c.container_id != container_id]
        removed = before - len(self._containers)

        if removed:
            logger.info(f"Removed {container_id} from {self.name}")
        else:
            logger.debug(f"{container_id} not on {self.name}; nothing removed")

        return OperationResult.ok(
            message=f"Removed {removed} container(s) with id {container_id}",
            data=removed,
        )

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def report(self) -> ShipReport:
        return ShipReport.from_ship(self)

    def print_ship_info(self, stream: Optional[TextIO] = None) -> None:
        """Print the current report to stream (stdout by default)."""
        print(format_ship_report(self.report()), file=stream or sys.stdout)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "max_speed": self.max_speed,
            "max_containers": self.max_containers,
            "max_weight": self.max_weight,
            "total_weight": self.total_weight(),
            "containers": [c.to_dict() for c in self._containers],
        }

    def __repr__(self) -> str:
        return (
            f"ContainerShip({self.name!r}, {len(self._containers)}/{self.max_containers} "
            f"containers, {self.total_weight():g}/{self.max_weight:g} kg)"
        )
