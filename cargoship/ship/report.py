"""
ship/report.py - Ship status report

Pydantic snapshots of a ship and its roster, and the plain-text rendering
printed on the console.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..containers import Container
    from .models import ContainerShip


class ContainerSnapshot(BaseModel):
    """State of one container at report time."""

    container_id: str = Field(..., description="Container id, e.g. KON-L-1")
    kind: str = Field(..., description="Container kind")
    current_load: float = Field(..., ge=0.0, description="Cargo on board (kg)")
    max_capacity: float = Field(..., gt=0.0, description="Nominal capacity (kg)")
    effective_limit: float = Field(..., ge=0.0, description="Load limit for this kind (kg)")
    empty_weight: float = Field(..., ge=0.0, description="Tare weight (kg)")

    @property
    def total_weight(self) -> float:
        return self.empty_weight + self.current_load

    @classmethod
    def from_container(cls, container: "Container") -> "ContainerSnapshot":
        return cls(
            container_id=container.container_id,
            kind=container.kind.value,
            current_load=container.current_load,
            max_capacity=container.max_capacity,
            effective_limit=container.effective_limit,
            empty_weight=container.empty_weight,
        )


class ShipReport(BaseModel):
    """State of a ship and its roster at report time."""

    name: str
    max_speed: float = Field(..., ge=0.0, description="Maximum speed (knots)")
    container_count: int = Field(..., ge=0)
    max_containers: int = Field(..., ge=0)
    total_weight: float = Field(..., ge=0.0, description="Roster weight (kg)")
    max_weight: float = Field(..., gt=0.0, description="Weight limit (kg)")
    containers: List[ContainerSnapshot] = Field(default_factory=list)

    @property
    def is_overweight(self) -> bool:
        return self.total_weight > self.max_weight

    @classmethod
    def from_ship(cls, ship: "ContainerShip") -> "ShipReport":
        return cls(
            name=ship.name,
            max_speed=ship.max_speed,
            container_count=ship.container_count,
            max_containers=ship.max_containers,
            total_weight=ship.total_weight(),
            max_weight=ship.max_weight,
            containers=[ContainerSnapshot.from_container(c) for c in ship.containers],
        )


def format_ship_report(report: ShipReport) -> str:
    """Render a report as console text."""
    lines = [
        f"Ship: {report.name}, Speed: {report.max_speed:g} kn, "
        f"Containers: {report.container_count}/{report.max_containers}, "
        f"Weight: {report.total_weight:g}/{report.max_weight:g} kg"
    ]
    for snapshot in report.containers:
        lines.append(
            f"  - {snapshot.container_id} ({snapshot.kind}), "
            f"Loaded: {snapshot.current_load:g}/{snapshot.max_capacity:g} kg"
        )
    if report.is_overweight:
        lines.append("  ! Roster weight exceeds ship limit")
    return "\n".join(lines)
