"""
containers/factory.py - Container construction

The factory owns the id sequence, so two factories number their containers
independently and a test can start from KON-L-1 by building a new one.
"""

from __future__ import annotations
from typing import Optional
import logging

from .enums import ContainerKind
from .hazards import HazardNotifier
from .ids import ContainerIdSequence
from .models import (
    CargoProfile,
    Container,
    CooledCargo,
    GasCargo,
    LiquidCargo,
    validate_dimensions,
)
from .policy import ContainerPolicy, DEFAULT_POLICY

logger = logging.getLogger(__name__)


class ContainerFactory:
    """Builds containers with sequential ids."""

    def __init__(
        self,
        policy: Optional[ContainerPolicy] = None,
        sequence: Optional[ContainerIdSequence] = None,
        notifier: Optional[HazardNotifier] = None,
    ):
        self.policy = policy or DEFAULT_POLICY
        self.sequence = sequence or ContainerIdSequence(self.policy.id_prefix)
        self.notifier = notifier

    def create(
        self,
        cargo: CargoProfile,
        max_capacity: float,
        empty_weight: float,
    ) -> Container:
        """Build a container for any cargo profile."""
        # No id is consumed when the dimensions are rejected.
        validate_dimensions(max_capacity, empty_weight)
        container = Container(
            container_id=self.sequence.next_id(cargo.kind),
            max_capacity=max_capacity,
            empty_weight=empty_weight,
            cargo=cargo,
            policy=self.policy,
            notifier=self.notifier,
        )
        logger.debug(f"Created {container!r}")
        return container

    def create_liquid(
        self,
        max_capacity: float,
        empty_weight: float,
        is_dangerous: bool = False,
    ) -> Container:
        return self.create(LiquidCargo(is_dangerous=is_dangerous), max_capacity, empty_weight)

    def create_gas(
        self,
        max_capacity: float,
        empty_weight: float,
        pressure: float = 0.0,
    ) -> Container:
        return self.create(GasCargo(pressure=pressure), max_capacity, empty_weight)

    def create_cooled(
        self,
        max_capacity: float,
        empty_weight: float,
        temperature: float = 0.0,
    ) -> Container:
        return self.create(CooledCargo(temperature=temperature), max_capacity, empty_weight)

    def next_id_preview(self, kind: ContainerKind) -> str:
        """Id the next container of this kind will receive."""
        return f"{self.sequence.prefix}-{kind.type_code}-{self.sequence.peek(kind)}"
