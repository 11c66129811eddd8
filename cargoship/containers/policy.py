"""
containers/policy.py - Container load policy

Numeric rules shared by every container a factory builds.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict
import math

from ..errors import ConfigurationError


DANGEROUS_LIQUID_RATIO = 0.5    # Hazardous liquids: half capacity
SAFE_LIQUID_RATIO = 0.9         # Ordinary liquids: 90% capacity
GAS_RESIDUE_FRACTION = 0.05     # Gas left behind after emptying
DEFAULT_ID_PREFIX = "KON"


@dataclass(frozen=True)
class ContainerPolicy:
    """Capacity ratios, residue fraction and id prefix."""

    dangerous_liquid_ratio: float = DANGEROUS_LIQUID_RATIO
    safe_liquid_ratio: float = SAFE_LIQUID_RATIO
    gas_residue_fraction: float = GAS_RESIDUE_FRACTION
    id_prefix: str = DEFAULT_ID_PREFIX

    def __post_init__(self):
        for key in ("dangerous_liquid_ratio", "safe_liquid_ratio"):
            value = getattr(self, key)
            if not (math.isfinite(value) and 0.0 < value <= 1.0):
                raise ConfigurationError(key, value, "ratio must be in (0, 1]")
        if not (math.isfinite(self.gas_residue_fraction) and 0.0 <= self.gas_residue_fraction < 1.0):
            raise ConfigurationError(
                "gas_residue_fraction", self.gas_residue_fraction, "fraction must be in [0, 1)"
            )
        if not self.id_prefix:
            raise ConfigurationError("id_prefix", self.id_prefix, "prefix must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_POLICY = ContainerPolicy()
